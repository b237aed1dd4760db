"""Verify, ask, remediate, re-verify.

Each concern (renderer, packages, service) is one Remediation run at
most once per process: there is no retry after a failed attempt.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass

from certumctl.app.console import Console
from certumctl.app.dialog import RENDERER
from certumctl.app.prompt import Prompter
from certumctl.app.readiness import ReadinessChecker, ReadinessState
from certumctl.core.host.osinfo import ToolProfile
from certumctl.core.host.packages import PackageManager
from certumctl.core.host.services import ServiceManager
from certumctl.errors import (
    ConfigurationError,
    RemediationFailed,
    RequirementDeclined,
    SetupError,
)

lg = logging.getLogger(__name__)


@dataclass
class Remediation:
    name: str
    verify: Callable[[], ReadinessState]
    ask: Callable[[str], bool]
    remediate: Callable[[], bool]
    post_check: Callable[[], ReadinessState]
    question: str
    refusal: str
    failure: str
    declined: type[SetupError] = RequirementDeclined

    def ensure(self) -> None:
        """Return when the concern is satisfied, else raise a SetupError.

        Declining raises `declined` (exit 3 unless overridden); a failed
        remediation or post-check raises RemediationFailed (exit 1).
        """
        if self.verify() is ReadinessState.SATISFIED:
            return
        if not self.ask(self.question):
            lg.error("%s", self.refusal)
            raise self.declined(self.refusal)
        if not self.remediate():
            lg.error("%s", self.failure)
            raise RemediationFailed(self.failure)
        if self.post_check() is not ReadinessState.SATISFIED:
            lg.error("%s", self.failure)
            raise RemediationFailed(self.failure)
        lg.info("%s: done", self.name)


class RemediationController:
    def __init__(
        self,
        profile: ToolProfile,
        checker: ReadinessChecker,
        packages: PackageManager,
        services: ServiceManager,
        console: Console,
        prompt: Prompter,
    ) -> None:
        self._profile = profile
        self._checker = checker
        self._packages = packages
        self._services = services
        self._console = console
        self._prompt = prompt

    def ensure_renderer(self) -> None:
        """Offer to install the prompt renderer on the console.

        Every later prompt goes through the renderer, so declining is a
        configuration failure rather than a declined requirement.
        """
        Remediation(
            name="renderer",
            verify=lambda: self._checker.verify_renderer(RENDERER),
            ask=self._console.confirm,
            remediate=lambda: self._packages.install([RENDERER]),
            post_check=lambda: self._checker.verify_renderer(RENDERER),
            question=f"Do you want to install {RENDERER} now?",
            refusal=f"cannot continue without {RENDERER}",
            failure=f"something went wrong while installing {RENDERER}",
            declined=ConfigurationError,
        ).ensure()

    def ensure_installed(self) -> None:
        Remediation(
            name="smartcard tools",
            verify=self._checker.verify_packages,
            ask=self._prompt.yesno,
            remediate=lambda: self._packages.install(self._profile.packages),
            post_check=self._checker.verify_engine,
            question="Smartcard utilities do not seem to be installed, "
                     "do you want to install them now?",
            refusal="Cannot continue without installing smartcard tools!",
            failure="Something went wrong while trying to install smartcard tools",
        ).ensure()

    def ensure_running(self) -> None:
        service = self._profile.service

        def start() -> bool:
            self._checker.reset("service")
            return self._services.start(service)

        Remediation(
            name="smartcard service",
            verify=self._checker.verify_service_running,
            ask=self._prompt.yesno,
            remediate=start,
            post_check=self._checker.verify_service_running,
            question="Smartcard utilities do not seem to be running, "
                     "do you want to start them now?",
            refusal="Cannot continue without the smartcard service running!",
            failure="Something went wrong trying to run smartcard utilities!",
        ).ensure()
