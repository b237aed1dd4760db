"""Read-only card commands."""

from __future__ import annotations

import logging

from certumctl.app.display import format_failure, format_public_key
from certumctl.core.pkcs11 import (
    ListMechanismsMessage,
    ListObjectsMessage,
    ListSlotsMessage,
    ReadObjectMessage,
)

lg = logging.getLogger(__name__)


def _show(runner, title: str, result) -> bool:
    if not result.success:
        lg.error("%s failed: %s", title.lower(), result.output)
        runner.prompt.msgbox(format_failure(f"Could not read {title.lower()}", result.output))
        return False
    runner.prompt.msgbox(result.output, title=title)
    return True


def cmd_slots(runner) -> bool:
    """Show slots"""
    return _show(runner, "Slots", runner.terminal.send(ListSlotsMessage()))


def cmd_mechanisms(runner) -> bool:
    """List available mechanisms"""
    return _show(runner, "Available key types", runner.terminal.send(ListMechanismsMessage()))


def cmd_objects(runner) -> bool:
    """List keys on card"""
    pin = runner.ask_pin()
    if pin is None:
        return True
    return _show(runner, "Keys on card", runner.terminal.send(ListObjectsMessage(pin=pin)))


def cmd_pubkey(runner) -> bool:
    """Get public key from card"""
    pin = runner.ask_pin()
    if pin is None:
        return True
    label = runner.prompt.inputbox("Key label", "Provide key name:")
    if not label:
        return True
    result = runner.terminal.send(ReadObjectMessage(label=label, pin=pin))
    if not result.found:
        lg.warning("public key %r not found: %s", label, result.error)
        runner.prompt.msgbox(f"Public key '{label}' not found on card.", title="Key value")
        return False
    runner.prompt.msgbox(format_public_key(result.data), title="Key value")
    return True
