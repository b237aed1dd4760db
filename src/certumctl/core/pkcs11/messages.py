from __future__ import annotations

from dataclasses import dataclass, field

from certumctl.core.base import Message, Result
from certumctl.core.pkcs11.objects import CardObject, unique_labels

# Utility error code reported when the token has no room left.
DEVICE_MEMORY_ERROR = "CKR_DEVICE_MEMORY"


@dataclass
class OutputResult(Result):
    """Raw text produced by a read-only or single-shot operation."""

    success: bool
    output: str


@dataclass
class ListSlotsMessage(Message):
    """Enumerate the slots exposed by the PKCS#11 module."""


@dataclass
class ListMechanismsMessage(Message):
    """Enumerate the mechanisms supported by the token."""


@dataclass
class ListObjectsMessage(Message):
    """List every object on the token (requires login)."""

    pin: str = field(repr=False)


@dataclass
class ListObjectsResult(Result):
    success: bool
    output: str
    objects: list[CardObject]

    @property
    def labels(self) -> list[str]:
        return unique_labels(self.objects)


@dataclass
class ReadObjectMessage(Message):
    """Read one object by label and type."""

    label: str
    pin: str = field(repr=False)
    object_type: str = "pubkey"


@dataclass
class ReadObjectResult(Result):
    found: bool
    data: bytes
    error: str


@dataclass
class GenerateKeyPairMessage(Message):
    """Generate a key pair on the token, e.g. key_type="rsa:2048"."""

    key_type: str
    label: str
    pin: str = field(repr=False)


@dataclass
class GenerateKeyPairResult(Result):
    success: bool
    output: str

    @property
    def device_memory_full(self) -> bool:
        return not self.success and DEVICE_MEMORY_ERROR in self.output


@dataclass
class DeleteObjectMessage(Message):
    """Delete the object of one type carrying a label."""

    label: str
    object_type: str
    pin: str = field(repr=False)


@dataclass
class DeleteObjectResult(Result):
    deleted: bool
    output: str


@dataclass
class UnlockPinMessage(Message):
    """Unlock the user PIN for the current session."""

    pin: str = field(repr=False)
