from certumctl.core.pkcs11.messages import (
    DeleteObjectMessage,
    DeleteObjectResult,
    GenerateKeyPairMessage,
    GenerateKeyPairResult,
    ListMechanismsMessage,
    ListObjectsMessage,
    ListObjectsResult,
    ListSlotsMessage,
    OutputResult,
    ReadObjectMessage,
    ReadObjectResult,
    UnlockPinMessage,
)
from certumctl.core.pkcs11.objects import OBJECT_TYPES, CardObject, parse_objects
from certumctl.core.pkcs11.terminal import Pkcs11Terminal

__all__ = [
    "CardObject",
    "DeleteObjectMessage",
    "DeleteObjectResult",
    "GenerateKeyPairMessage",
    "GenerateKeyPairResult",
    "ListMechanismsMessage",
    "ListObjectsMessage",
    "ListObjectsResult",
    "ListSlotsMessage",
    "OBJECT_TYPES",
    "OutputResult",
    "Pkcs11Terminal",
    "ReadObjectMessage",
    "ReadObjectResult",
    "UnlockPinMessage",
    "parse_objects",
]
