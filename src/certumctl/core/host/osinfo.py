"""OS identity discovery and the table of supported host profiles."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path

from certumctl.errors import ConfigurationError

lg = logging.getLogger(__name__)

OS_RELEASE_PATHS: tuple[Path, ...] = (
    Path("/etc/os-release"),
    Path("/usr/lib/os-release"),
)

# Stands in for an identity field the os-release file does not carry.
UNSUPPORTED = "unsupported"


@dataclass(frozen=True)
class OSIdentity:
    id: str
    version: str

    def __str__(self) -> str:
        return f"{self.id} {self.version}"


@dataclass(frozen=True)
class ToolProfile:
    """Packages, service and package-manager commands for one OS family."""

    name: str
    packages: tuple[str, ...]
    service: str
    package_manager: str
    install_command: tuple[str, ...]
    list_command: tuple[str, ...]


@dataclass(frozen=True)
class HostProfile:
    """The resolved identity and tool profile, fixed for the whole run."""

    identity: OSIdentity
    tools: ToolProfile
    impersonated: bool = False


DEBIAN_12 = ToolProfile(
    name="Debian 12",
    packages=(
        "libacsccid1",
        "opensc",
        "libengine-pkcs11-openssl",
        "pcsc-tools",
    ),
    service="pcscd.service",
    package_manager="apt",
    install_command=("sudo", "apt", "install", "-y"),
    list_command=("sudo", "apt", "list", "--installed"),
)

PROFILES: dict[OSIdentity, ToolProfile] = {
    OSIdentity("debian", "12"): DEBIAN_12,
    OSIdentity("ubuntu", "22.04"): DEBIAN_12,
    OSIdentity("ubuntu", "22.10"): DEBIAN_12,
    OSIdentity("linuxmint", "21"): DEBIAN_12,
}

# Identities the operator may impersonate when the host is not in PROFILES.
ALTERNATIVES: tuple[tuple[str, OSIdentity], ...] = (
    ("Debian 12", OSIdentity("debian", "12")),
    ("Ubuntu 22.10", OSIdentity("ubuntu", "22.10")),
    ("Ubuntu 22.04", OSIdentity("ubuntu", "22.04")),
    ("Linux Mint 21", OSIdentity("linuxmint", "21")),
)


def _unquote(value: str) -> str:
    value = value.strip()
    if len(value) >= 2 and value[0] == value[-1] and value[0] in "\"'":
        return value[1:-1]
    return value


def parse_os_release(text: str) -> dict[str, str]:
    """Parse KEY=value lines; comments and malformed lines are skipped."""
    fields: dict[str, str] = {}
    for line in text.splitlines():
        line = line.strip()
        if not line or line.startswith("#") or "=" not in line:
            continue
        key, value = line.split("=", 1)
        fields[key.strip()] = _unquote(value)
    return fields


def read_identity(paths: tuple[Path, ...] = OS_RELEASE_PATHS) -> OSIdentity:
    """Read ID and VERSION_ID from the first readable os-release file.

    Raises ConfigurationError if none of the files can be read.
    """
    for path in paths:
        try:
            text = path.read_text(encoding="utf-8", errors="replace")
        except OSError as exc:
            lg.debug("cannot read %s: %s", path, exc)
            continue
        fields = parse_os_release(text)
        identity = OSIdentity(
            id=fields.get("ID") or UNSUPPORTED,
            version=fields.get("VERSION_ID") or UNSUPPORTED,
        )
        lg.debug("%s: %s", path, identity)
        return identity
    raise ConfigurationError("failed to get OS information")


def lookup(identity: OSIdentity) -> ToolProfile | None:
    """Exact, case-sensitive match against PROFILES."""
    return PROFILES.get(identity)
