"""System probe: work out which tool profile applies to this host."""

from __future__ import annotations

import logging
from pathlib import Path

from certumctl.app.console import Console
from certumctl.core.host.osinfo import (
    ALTERNATIVES,
    OS_RELEASE_PATHS,
    PROFILES,
    HostProfile,
    OSIdentity,
    lookup,
    read_identity,
)
from certumctl.errors import ConfigurationError

lg = logging.getLogger(__name__)


class SystemProbe:
    """Resolve the host's OS identity to exactly one ToolProfile.

    An unknown identity is never mapped to a default: the operator must
    agree to continue and pick a supported OS to impersonate. The
    question is asked again until the pick resolves.
    """

    def __init__(
        self,
        console: Console,
        paths: tuple[Path, ...] = OS_RELEASE_PATHS,
    ) -> None:
        self._console = console
        self._paths = paths

    def resolve(self) -> HostProfile:
        identity = read_identity(self._paths)
        impersonated = False
        while True:
            lg.debug("OS identity: %s", identity)
            profile = lookup(identity)
            if profile is not None:
                lg.debug("detected OS: %s", profile.name)
                return HostProfile(identity=identity, tools=profile, impersonated=impersonated)

            if any(known.id == identity.id for known in PROFILES):
                lg.error("unsupported OS version: %s", identity)
            else:
                lg.error("unsupported OS: %s", identity)
            if not self._console.confirm("Do you want to proceed regardless?"):
                lg.error("aborted")
                raise ConfigurationError(f"unsupported operating system: {identity}")
            identity = self._choose_alternative(identity)
            impersonated = True

    def _choose_alternative(self, current: OSIdentity) -> OSIdentity:
        names = [name for name, _ in ALTERNATIVES]
        index = self._console.choose(
            "Select the OS that most closely resembles your current OS:", names
        )
        if index is None:
            return current
        name, identity = ALTERNATIVES[index]
        lg.info("treating this host as %s", name)
        return identity
