from __future__ import annotations

import logging
import shutil
from collections.abc import Iterable

from certumctl.core.base.process import run

lg = logging.getLogger(__name__)


def find_missing(tools: Iterable[str]) -> list[str]:
    """Return the tools that are not on PATH, in the order given."""
    return [tool for tool in tools if shutil.which(tool) is None]


def pkcs11_engine_registered() -> bool:
    """Check whether OpenSSL can load its pkcs11 engine."""
    result = run(["openssl", "engine", "pkcs11"])
    if not result.success:
        lg.debug("openssl engine pkcs11: %s", result.output)
    return result.success
