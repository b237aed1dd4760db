"""Terminal for the PKCS#11 command-line utility.

Each @handles method receives a typed Message dataclass and returns a
typed Result dataclass. Tool failures are folded into the result; no
handler raises for a non-zero exit status.
"""

from __future__ import annotations

import logging

from certumctl.core.base import Agent, Terminal
from certumctl.core.base.terminal import handles
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
from certumctl.core.pkcs11.objects import parse_objects
from certumctl.core.pkcs11.protocol import Pkcs11Protocol

lg = logging.getLogger(__name__)


class Pkcs11Terminal(Terminal):
    """Terminal driving pkcs11-tool through an Agent."""

    def __init__(self, agent: Agent) -> None:
        super().__init__(agent)
        self._proto = Pkcs11Protocol(agent.run)

    @handles(ListSlotsMessage)
    def _list_slots(self, message: ListSlotsMessage) -> OutputResult:
        result = self._proto.send_list_slots()
        return OutputResult(success=result.success, output=result.output)

    @handles(ListMechanismsMessage)
    def _list_mechanisms(self, message: ListMechanismsMessage) -> OutputResult:
        result = self._proto.send_list_mechanisms()
        return OutputResult(success=result.success, output=result.output)

    @handles(ListObjectsMessage)
    def _list_objects(self, message: ListObjectsMessage) -> ListObjectsResult:
        result = self._proto.send_list_objects(message.pin)
        objects = parse_objects(result.text) if result.success else []
        lg.debug("listing holds %d objects", len(objects))
        return ListObjectsResult(success=result.success, output=result.output, objects=objects)

    @handles(ReadObjectMessage)
    def _read_object(self, message: ReadObjectMessage) -> ReadObjectResult:
        result = self._proto.send_read_object(message.object_type, message.label, message.pin)
        found = result.success and bool(result.stdout)
        return ReadObjectResult(
            found=found,
            data=result.stdout if found else b"",
            error=result.error,
        )

    @handles(GenerateKeyPairMessage)
    def _keypair(self, message: GenerateKeyPairMessage) -> GenerateKeyPairResult:
        result = self._proto.send_keypair(message.key_type, message.label, message.pin)
        return GenerateKeyPairResult(success=result.success, output=result.output)

    @handles(DeleteObjectMessage)
    def _delete_object(self, message: DeleteObjectMessage) -> DeleteObjectResult:
        result = self._proto.send_delete_object(message.label, message.object_type, message.pin)
        return DeleteObjectResult(deleted=result.success, output=result.output)

    @handles(UnlockPinMessage)
    def _unlock_pin(self, message: UnlockPinMessage) -> OutputResult:
        result = self._proto.send_unlock_pin(message.pin)
        return OutputResult(success=result.success, output=result.output)
