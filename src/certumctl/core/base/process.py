"""Subprocess wrapper used for every external tool the host layer drives."""

from __future__ import annotations

import logging
import subprocess
from collections.abc import Sequence
from dataclasses import dataclass, field

from certumctl.core.base.logging import TRACE, redact

lg = logging.getLogger(__name__)

# Conventional shell status for "command not found".
NOT_FOUND = 127


@dataclass
class CommandResult:
    """Outcome of one external command."""

    argv: list[str] = field(repr=False)
    returncode: int
    stdout: bytes = b""
    stderr: bytes = b""
    timed_out: bool = False

    @property
    def success(self) -> bool:
        return self.returncode == 0 and not self.timed_out

    @property
    def text(self) -> str:
        return self.stdout.decode("utf-8", errors="replace")

    @property
    def error(self) -> str:
        return self.stderr.decode("utf-8", errors="replace").strip()

    @property
    def output(self) -> str:
        """stdout and stderr combined, as the operator would see them."""
        return "\n".join(s for s in (self.text.strip(), self.error) if s)


def run(
    argv: Sequence[str],
    *,
    timeout: float | None = None,
    capture: bool = True,
) -> CommandResult:
    """Run argv and return its result. Never raises for tool failures.

    With capture=False the command shares the operator's terminal, which
    is needed for package installs and sudo password prompts.
    """
    argv = list(argv)
    lg.log(TRACE, "$ %s", " ".join(redact(argv)))
    try:
        proc = subprocess.run(
            argv,
            capture_output=capture,
            timeout=timeout,
        )
    except subprocess.TimeoutExpired as exc:
        lg.warning("%s timed out after %ss", argv[0], timeout)
        return CommandResult(
            argv=argv,
            returncode=-1,
            stdout=exc.stdout or b"",
            stderr=b"command timed out",
            timed_out=True,
        )
    except OSError as exc:
        lg.debug("cannot run %s: %s", argv[0], exc)
        return CommandResult(argv=argv, returncode=NOT_FOUND, stderr=str(exc).encode())
    lg.log(TRACE, "%s exited with %d", argv[0], proc.returncode)
    return CommandResult(
        argv=argv,
        returncode=proc.returncode,
        stdout=proc.stdout or b"",
        stderr=proc.stderr or b"",
    )
