"""Checks that the host has what card operations need.

Each check moves from UNKNOWN to SATISFIED or UNSATISFIED only when it
is explicitly run; results are not reused after a remediation.
"""

from __future__ import annotations

import logging
import os
from collections.abc import Callable, Iterable, Sequence
from enum import Enum
from pathlib import Path

from certumctl.core.host import tools as host_tools
from certumctl.core.host.osinfo import ToolProfile
from certumctl.core.host.packages import PackageManager
from certumctl.core.host.services import ServiceManager

lg = logging.getLogger(__name__)

# Commands needed regardless of profile, in the order they are checked.
BASE_TOOLS: tuple[str, ...] = ("dialog", "sudo", "systemctl")


class ReadinessState(Enum):
    UNKNOWN = "unknown"
    SATISFIED = "satisfied"
    UNSATISFIED = "unsatisfied"


def _state(ok: bool) -> ReadinessState:
    return ReadinessState.SATISFIED if ok else ReadinessState.UNSATISFIED


class ReadinessChecker:
    def __init__(
        self,
        profile: ToolProfile,
        packages: PackageManager,
        services: ServiceManager,
        *,
        find_missing: Callable[[Iterable[str]], list[str]] = host_tools.find_missing,
        engine_check: Callable[[], bool] = host_tools.pkcs11_engine_registered,
    ) -> None:
        self._profile = profile
        self._packages = packages
        self._services = services
        self._find_missing = find_missing
        self._engine_check = engine_check
        self._states: dict[str, ReadinessState] = {}

    def state(self, check: str) -> ReadinessState:
        return self._states.get(check, ReadinessState.UNKNOWN)

    def reset(self, check: str) -> None:
        self._states.pop(check, None)

    def _record(self, check: str, ok: bool) -> ReadinessState:
        state = _state(ok)
        self._states[check] = state
        lg.debug("%s: %s", check, state.value)
        return state

    @property
    def required_tools(self) -> tuple[str, ...]:
        return (*BASE_TOOLS, self._profile.package_manager)

    def verify_tools(self, required: Sequence[str] | None = None) -> list[str]:
        """Return the required commands missing from PATH (empty if none)."""
        required = self.required_tools if required is None else required
        missing = self._find_missing(required)
        for tool in missing:
            lg.error("this tool requires %s to be installed and in PATH", tool)
        self._record("tools", not missing)
        return missing

    def verify_renderer(self, renderer: str) -> ReadinessState:
        """Check the prompt renderer alone; the "tools" state is left as is."""
        present = not self._find_missing([renderer])
        lg.debug("%s %s", renderer, "found" if present else "not found")
        return self._record("renderer", present)

    def verify_packages(
        self,
        required: Sequence[str] | None = None,
        installed: str | None = None,
    ) -> ReadinessState:
        """Check every required package name occurs in the installed listing.

        The match is a plain substring test, so "opensc" is also satisfied
        by e.g. "opensc-pkcs11". This can report a missing package as
        present; it is kept loose on purpose.
        """
        required = self._profile.packages if required is None else required
        installed = self._packages.installed() if installed is None else installed
        absent = [name for name in required if name not in installed]
        if absent:
            lg.warning("smartcard utilities are not installed correctly (missing: %s)", ", ".join(absent))
        else:
            lg.debug("all smartcard packages are installed")
        return self._record("packages", not absent)

    def verify_libraries(self, paths: Sequence[Path]) -> ReadinessState:
        unreadable = [p for p in paths if not (p.is_file() and os.access(p, os.R_OK))]
        for path in unreadable:
            lg.error("library not found or not readable: %s", path)
        if not unreadable:
            lg.debug("libraries: %s", ", ".join(str(p) for p in paths))
        return self._record("libraries", not unreadable)

    def verify_service_running(self, name: str | None = None) -> ReadinessState:
        name = self._profile.service if name is None else name
        running = self._services.is_running(name)
        if running:
            lg.debug("%s is running", name)
        else:
            lg.warning("%s is not running", name)
        return self._record("service", running)

    def verify_engine(self) -> ReadinessState:
        """Post-install smoke check: OpenSSL sees the pkcs11 engine."""
        return self._record("engine", self._engine_check())
