"""Startup sequence: probe, readiness, remediation, then the card session."""

from __future__ import annotations

import logging

from certumctl.app.config import Settings
from certumctl.app.console import Console
from certumctl.app.dialog import RENDERER, Dialog
from certumctl.app.probe import SystemProbe
from certumctl.app.prompt import Prompter
from certumctl.app.readiness import ReadinessChecker, ReadinessState
from certumctl.app.remediation import RemediationController
from certumctl.app.session import session
from certumctl.core.host import PackageManager, ServiceManager
from certumctl.errors import ConfigurationError

lg = logging.getLogger(__name__)


def check_environment(checker: ReadinessChecker, controller: RemediationController) -> None:
    """Every required command must be on PATH.

    Only the renderer may be installed on the spot; any other missing
    command ends the run before anything is asked.
    """
    missing = checker.verify_tools()
    for tool in missing:
        if tool != RENDERER:
            raise ConfigurationError(f"this tool requires {tool} to be installed and in PATH")
    if missing:
        controller.ensure_renderer()


def check_libraries(checker: ReadinessChecker, settings: Settings, prompt: Prompter) -> None:
    """The vendor PKCS#11 libraries must be readable; fatal otherwise."""
    if checker.verify_libraries(settings.libraries) is ReadinessState.SATISFIED:
        return
    prompt.msgbox(
        f"Certum libraries were not found in {settings.lib_dir}. "
        "Make sure you have cloned the whole repository, or point "
        "CERTUMCTL_LIB_DIR at the directory holding them."
    )
    raise ConfigurationError(f"Certum libraries cannot be found in {settings.lib_dir}")


def main(
    settings: Settings,
    console: Console | None = None,
    prompt: Prompter | None = None,
) -> None:
    console = console or Console()
    host = SystemProbe(console).resolve()
    lg.debug("profile: %s (%s)", host.tools.name, host.identity)

    packages = PackageManager(host.tools)
    services = ServiceManager()
    checker = ReadinessChecker(host.tools, packages, services)
    prompt = prompt or Dialog()
    controller = RemediationController(
        host.tools, checker, packages, services, console, prompt
    )

    check_environment(checker, controller)
    check_libraries(checker, settings, prompt)
    controller.ensure_installed()
    controller.ensure_running()

    session(settings, prompt)
