from __future__ import annotations

import sys
from dataclasses import dataclass, field
from pathlib import Path

# PKCS#11 module handed to the utility, and its companion crypto library.
MODULE_LIBRARY = "sc30pkcs11-3.0.6.68-MS.so"
CRYPTO_LIBRARY = "cryptoCertum3PKCS-3.0.6.65-MS.so"

DEFAULT_TOOL_TIMEOUT = 120.0


def default_lib_dir() -> Path:
    """The lib/ directory next to the directory holding the executable."""
    return Path(sys.argv[0]).resolve().parent.parent / "lib"


@dataclass(frozen=True)
class Settings:
    """Runtime settings, resolved once from options and environment."""

    debug: bool = False
    lib_dir: Path = field(default_factory=default_lib_dir)
    tool_timeout: float | None = DEFAULT_TOOL_TIMEOUT

    @property
    def module_path(self) -> Path:
        return self.lib_dir / MODULE_LIBRARY

    @property
    def libraries(self) -> tuple[Path, ...]:
        return (self.module_path, self.lib_dir / CRYPTO_LIBRARY)
