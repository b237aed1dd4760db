from __future__ import annotations

import logging
from collections.abc import Sequence
from pathlib import Path

from certumctl.core.base.process import CommandResult, run

lg = logging.getLogger(__name__)

PKCS11_TOOL = "pkcs11-tool"


class Agent:
    """Runs the PKCS#11 command-line utility against one module.

    Operation-specific argument building lives in the protocol class,
    which receives agent.run as a callable. Terminals construct the
    protocol objects they need.
    """

    def __init__(
        self,
        module: Path,
        *,
        executable: str = PKCS11_TOOL,
        timeout: float | None = None,
    ) -> None:
        self._module = module
        self._executable = executable
        self._timeout = timeout

    @property
    def module(self) -> Path:
        return self._module

    def run(self, args: Sequence[str]) -> CommandResult:
        """Invoke the utility with the module path prepended to args."""
        argv = [self._executable, "--module", str(self._module), *args]
        return run(argv, timeout=self._timeout)
