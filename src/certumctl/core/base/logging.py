from __future__ import annotations

import logging
from collections.abc import Sequence

TRACE = 15
logging.addLevelName(TRACE, "TRACE")

# Options whose following argument is a credential.
SECRET_OPTIONS = frozenset({"--pin", "--so-pin", "--new-pin", "-p"})

REDACTED = "***"


def redact(argv: Sequence[str]) -> list[str]:
    """Return a copy of argv with credential values masked.

    Handles both ``--pin VALUE`` and ``--pin=VALUE`` spellings.
    """
    out: list[str] = []
    hide_next = False
    for arg in argv:
        if hide_next:
            out.append(REDACTED)
            hide_next = False
            continue
        option, sep, _ = arg.partition("=")
        if sep and option in SECRET_OPTIONS:
            out.append(f"{option}={REDACTED}")
            continue
        if arg in SECRET_OPTIONS:
            hide_next = True
        out.append(arg)
    return out
