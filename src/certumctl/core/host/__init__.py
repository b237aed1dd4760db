from certumctl.core.host.osinfo import (
    ALTERNATIVES,
    PROFILES,
    UNSUPPORTED,
    HostProfile,
    OSIdentity,
    ToolProfile,
    lookup,
    read_identity,
)
from certumctl.core.host.packages import PackageManager
from certumctl.core.host.services import ServiceManager

__all__ = [
    "ALTERNATIVES",
    "HostProfile",
    "OSIdentity",
    "PROFILES",
    "PackageManager",
    "ServiceManager",
    "ToolProfile",
    "UNSUPPORTED",
    "lookup",
    "read_identity",
]
