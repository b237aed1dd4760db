from __future__ import annotations

import logging
from collections.abc import Iterable

from certumctl.core.base.process import run
from certumctl.core.host.osinfo import ToolProfile

lg = logging.getLogger(__name__)


class PackageManager:
    """List and install packages with the commands of a ToolProfile."""

    def __init__(self, profile: ToolProfile) -> None:
        self._profile = profile

    def installed(self) -> str:
        """Return the raw installed-package listing ("" if it fails)."""
        result = run(self._profile.list_command)
        if not result.success:
            lg.warning("cannot list installed packages: %s", result.error or result.returncode)
            return ""
        return result.text

    def install(self, packages: Iterable[str]) -> bool:
        """Install all packages in one batch, on the operator's terminal."""
        packages = list(packages)
        lg.info("installing %s", " ".join(packages))
        result = run([*self._profile.install_command, *packages], capture=False)
        if not result.success:
            lg.error("package install exited with %d", result.returncode)
        return result.success
