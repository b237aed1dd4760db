from __future__ import annotations

import logging
from collections.abc import Callable, Sequence

from certumctl.core.base.logging import TRACE
from certumctl.core.base.process import CommandResult

lg = logging.getLogger(__name__)


class Pkcs11Protocol:
    """Argument vocabulary of the PKCS#11 command-line utility."""

    def __init__(self, run: Callable[[Sequence[str]], CommandResult]) -> None:
        self._run = run

    def _send(self, label: str, args: list[str]) -> CommandResult:
        result = self._run(args)
        lg.log(TRACE, "%s -> %s", label, "ok" if result.success else f"status {result.returncode}")
        return result

    # -- operations --

    def send_list_slots(self) -> CommandResult:
        return self._send("LIST SLOTS", ["--list-slots"])

    def send_list_mechanisms(self) -> CommandResult:
        return self._send("LIST MECHANISMS", ["--list-mechanisms"])

    def send_list_objects(self, pin: str) -> CommandResult:
        return self._send("LIST OBJECTS", ["--list-objects", "--pin", pin])

    def send_read_object(self, object_type: str, label: str, pin: str) -> CommandResult:
        return self._send(
            f"READ {object_type} {label!r}",
            ["--read-object", "--type", object_type, "--label", label, "--pin", pin],
        )

    def send_keypair(self, key_type: str, label: str, pin: str) -> CommandResult:
        return self._send(
            f"KEYPAIR {key_type} {label!r}",
            ["--keypair", "--key-type", key_type, "--label", label, "--pin", pin],
        )

    def send_delete_object(self, label: str, object_type: str, pin: str) -> CommandResult:
        return self._send(
            f"DELETE {object_type} {label!r}",
            ["--delete-object", "--label", label, "--type", object_type, "--pin", pin],
        )

    def send_unlock_pin(self, pin: str) -> CommandResult:
        return self._send("UNLOCK PIN", ["--unlock-pin", "--pin", pin])
