"""
Unit tests for ReadinessChecker.
"""

from __future__ import annotations

from unittest.mock import MagicMock

import pytest

from certumctl.app.readiness import ReadinessChecker, ReadinessState
from certumctl.core.host.osinfo import DEBIAN_12

INSTALLED = """Listing...
libacsccid1/stable,now 1.1.9-1 amd64 [installed]
opensc-pkcs11/stable,now 0.23.0-0.3 amd64 [installed,automatic]
libengine-pkcs11-openssl/stable,now 0.4.12-2 amd64 [installed]
pcsc-tools/stable,now 1.6.2-1 amd64 [installed]
"""


@pytest.fixture
def packages():
    return MagicMock()


@pytest.fixture
def services():
    return MagicMock()


@pytest.fixture
def checker(packages, services):
    return ReadinessChecker(
        DEBIAN_12,
        packages,
        services,
        find_missing=lambda tools: [],
        engine_check=lambda: True,
    )


class TestVerifyPackages:
    def test_all_present(self, checker):
        assert checker.verify_packages(installed=INSTALLED) is ReadinessState.SATISFIED

    def test_substring_match_is_loose(self, checker):
        # "opensc" is only present as part of "opensc-pkcs11"
        assert "\nopensc/" not in INSTALLED
        assert checker.verify_packages(installed=INSTALLED) is ReadinessState.SATISFIED

    def test_three_of_four_is_unsatisfied(self, checker):
        listing = INSTALLED.replace("pcsc-tools", "something-else")
        assert checker.verify_packages(installed=listing) is ReadinessState.UNSATISFIED

    def test_listing_comes_from_package_manager(self, checker, packages):
        packages.installed.return_value = ""
        assert checker.verify_packages() is ReadinessState.UNSATISFIED
        packages.installed.assert_called_once()

    def test_state_moves_from_unknown(self, checker):
        assert checker.state("packages") is ReadinessState.UNKNOWN
        checker.verify_packages(installed=INSTALLED)
        assert checker.state("packages") is ReadinessState.SATISFIED


class TestVerifyTools:
    def test_required_tools_include_package_manager(self, checker):
        assert checker.required_tools == ("dialog", "sudo", "systemctl", "apt")

    def test_reports_missing(self, packages, services):
        checker = ReadinessChecker(
            DEBIAN_12, packages, services,
            find_missing=lambda tools: [t for t in tools if t == "sudo"],
        )
        assert checker.verify_tools() == ["sudo"]
        assert checker.state("tools") is ReadinessState.UNSATISFIED

    def test_renderer_check_keeps_tools_state(self, packages, services):
        checker = ReadinessChecker(
            DEBIAN_12, packages, services,
            find_missing=lambda tools: [t for t in tools if t in ("dialog", "sudo")],
        )
        checker.verify_tools()

        assert checker.verify_renderer("dialog") is ReadinessState.UNSATISFIED
        assert checker.state("renderer") is ReadinessState.UNSATISFIED
        assert checker.state("tools") is ReadinessState.UNSATISFIED

    def test_renderer_present(self, checker):
        assert checker.verify_renderer("dialog") is ReadinessState.SATISFIED
        assert checker.state("tools") is ReadinessState.UNKNOWN


class TestVerifyLibraries:
    def test_present_and_readable(self, checker, tmp_path):
        libs = [tmp_path / "a.so", tmp_path / "b.so"]
        for lib in libs:
            lib.write_bytes(b"\x7fELF")
        assert checker.verify_libraries(libs) is ReadinessState.SATISFIED

    def test_one_missing(self, checker, tmp_path):
        present = tmp_path / "a.so"
        present.write_bytes(b"\x7fELF")
        assert checker.verify_libraries([present, tmp_path / "b.so"]) is ReadinessState.UNSATISFIED

    def test_directory_is_not_a_library(self, checker, tmp_path):
        assert checker.verify_libraries([tmp_path]) is ReadinessState.UNSATISFIED


class TestVerifyService:
    def test_running(self, checker, services):
        services.is_running.return_value = True
        assert checker.verify_service_running() is ReadinessState.SATISFIED
        services.is_running.assert_called_once_with("pcscd.service")

    def test_stopped(self, checker, services):
        services.is_running.return_value = False
        assert checker.verify_service_running() is ReadinessState.UNSATISFIED
