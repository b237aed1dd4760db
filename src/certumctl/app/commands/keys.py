"""Commands that change key material or PIN state."""

from __future__ import annotations

import logging

from certumctl.app.display import MEMORY_FULL, SUCCESS, format_failure
from certumctl.core.pkcs11 import GenerateKeyPairMessage, UnlockPinMessage

lg = logging.getLogger(__name__)

DEFAULT_KEY_TYPE = "rsa:2048"
EMPTY_ARGUMENTS = "Arguments must be non-empty!"


def cmd_keygen(runner) -> bool:
    """Generate keypair"""
    values = runner.prompt.form(
        "Generate keys",
        "Parameters",
        [("Key type", DEFAULT_KEY_TYPE), ("Label", "")],
    )
    if values is None:
        return True
    key_type, label = (v.strip() for v in values)
    if not key_type or not label:
        lg.error("key type and label must be non-empty")
        runner.prompt.msgbox(EMPTY_ARGUMENTS)
        return False

    pin = runner.ask_pin()
    if pin is None:
        return True

    result = runner.terminal.send(
        GenerateKeyPairMessage(key_type=key_type, label=label, pin=pin)
    )
    if result.device_memory_full:
        lg.error("card memory full")
        runner.prompt.msgbox(MEMORY_FULL)
        return False
    if not result.success:
        lg.error("key generation failed: %s", result.output)
        runner.prompt.msgbox(format_failure("Unexpected error occurred", result.output))
        return False
    lg.info("generated %s key pair %r", key_type, label)
    runner.prompt.msgbox(SUCCESS)
    return True


def cmd_unlock(runner) -> bool:
    """Unlock user PIN"""
    pin = runner.ask_pin()
    if pin is None:
        return True
    result = runner.terminal.send(UnlockPinMessage(pin=pin))
    if not result.success:
        lg.error("unlock failed: %s", result.output)
        runner.prompt.msgbox(format_failure("Could not unlock the PIN", result.output))
        return False
    runner.prompt.msgbox(SUCCESS)
    return True
