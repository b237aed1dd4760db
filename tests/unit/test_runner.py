"""
Unit tests for the operation menu and the simple card commands.
"""

from __future__ import annotations

import pytest

from certumctl.app.commands import COMMAND_MODULES
from certumctl.app.display import MEMORY_FULL, SUCCESS
from certumctl.app.runner import Runner
from certumctl.core.pkcs11 import (
    GenerateKeyPairMessage,
    GenerateKeyPairResult,
    ListObjectsResult,
    ListSlotsMessage,
    OutputResult,
    ReadObjectResult,
)
from certumctl.errors import OperatorExit


def make_runner(prompt, terminal):
    return Runner(terminal, prompt, COMMAND_MODULES)


def unreachable(message):
    raise AssertionError(f"unexpected tool call: {message}")


class TestMenu:
    def test_menu_items(self, prompter_factory, terminal_factory):
        runner = make_runner(prompter_factory(), terminal_factory(unreachable))
        assert runner.menu_items() == [
            ("1", "Show slots"),
            ("2", "List available mechanisms"),
            ("3", "Generate keypair"),
            ("4", "List keys on card"),
            ("5", "Get public key from card"),
            ("6", "Unlock user PIN"),
            ("0", "Delete ALL objects from card"),
        ]

    def test_cancel_exits(self, prompter_factory, terminal_factory):
        runner = make_runner(prompter_factory(menu=[None]), terminal_factory(unreachable))
        with pytest.raises(OperatorExit):
            runner.dispatch()

    def test_unknown_selection_exits(self, prompter_factory, terminal_factory):
        runner = make_runner(prompter_factory(menu=["9"]), terminal_factory(unreachable))
        with pytest.raises(OperatorExit):
            runner.dispatch()

    def test_dispatches_selection(self, prompter_factory, terminal_factory):
        prompt = prompter_factory(menu=["1"])
        terminal = terminal_factory(lambda m: OutputResult(success=True, output="Slot 0"))

        assert make_runner(prompt, terminal).dispatch() is True

        assert isinstance(terminal.sent[0], ListSlotsMessage)
        assert prompt.messages == ["Slot 0"]

    def test_handler_exception_is_contained(self, prompter_factory, terminal_factory):
        def explode(message):
            raise RuntimeError("boom")

        prompt = prompter_factory(menu=["2"])
        runner = make_runner(prompt, terminal_factory(explode))

        assert runner.dispatch() is False
        assert "boom" in prompt.messages[0]


class TestReadCommands:
    def test_slots_failure_is_reported(self, prompter_factory, terminal_factory):
        prompt = prompter_factory()
        terminal = terminal_factory(lambda m: OutputResult(success=False, output="no module"))

        assert make_runner(prompt, terminal).execute("slots") is False
        assert "no module" in prompt.messages[0]

    def test_objects_needs_pin(self, prompter_factory, terminal_factory):
        prompt = prompter_factory(password=[None])
        assert make_runner(prompt, terminal_factory(unreachable)).execute("objects") is True

    def test_objects_shows_listing(self, prompter_factory, terminal_factory):
        prompt = prompter_factory(password=["1234"])
        terminal = terminal_factory(
            lambda m: ListObjectsResult(success=True, output="Public Key Object", objects=[])
        )

        make_runner(prompt, terminal).execute("objects")

        assert terminal.sent[0].pin == "1234"
        assert prompt.messages == ["Public Key Object"]

    def test_pubkey_not_found(self, prompter_factory, terminal_factory):
        prompt = prompter_factory(password=["1234"], inputbox=["alpha"])
        terminal = terminal_factory(lambda m: ReadObjectResult(found=False, data=b"", error=""))

        assert make_runner(prompt, terminal).execute("pubkey") is False
        assert "not found" in prompt.messages[0]

    def test_pubkey_cancelled_label(self, prompter_factory, terminal_factory):
        prompt = prompter_factory(password=["1234"], inputbox=[None])
        assert make_runner(prompt, terminal_factory(unreachable)).execute("pubkey") is True


class TestKeygen:
    def test_memory_full_message(self, prompter_factory, terminal_factory):
        prompt = prompter_factory(form=[["rsa:2048", "signing"]], password=["1234"])
        terminal = terminal_factory(
            lambda m: GenerateKeyPairResult(success=False, output="rv = CKR_DEVICE_MEMORY")
        )

        assert make_runner(prompt, terminal).execute("keygen") is False

        assert prompt.messages == [MEMORY_FULL]

    def test_generic_failure_message(self, prompter_factory, terminal_factory):
        prompt = prompter_factory(form=[["rsa:2048", "signing"]], password=["1234"])
        terminal = terminal_factory(
            lambda m: GenerateKeyPairResult(success=False, output="CKR_GENERAL_ERROR")
        )

        make_runner(prompt, terminal).execute("keygen")

        assert prompt.messages[0] != MEMORY_FULL
        assert "Unexpected error" in prompt.messages[0]

    def test_success(self, prompter_factory, terminal_factory):
        prompt = prompter_factory(form=[["ec:prime256v1", "auth"]], password=["1234"])
        terminal = terminal_factory(lambda m: GenerateKeyPairResult(success=True, output=""))

        assert make_runner(prompt, terminal).execute("keygen") is True

        assert terminal.sent == [GenerateKeyPairMessage(key_type="ec:prime256v1", label="auth", pin="1234")]
        assert prompt.messages == [SUCCESS]

    def test_empty_label_rejected(self, prompter_factory, terminal_factory):
        prompt = prompter_factory(form=[["rsa:2048", ""]])

        assert make_runner(prompt, terminal_factory(unreachable)).execute("keygen") is False
        assert prompt.messages == ["Arguments must be non-empty!"]

    def test_loop_continues_after_failure(self, prompter_factory, terminal_factory):
        prompt = prompter_factory(menu=["3", None], form=[["rsa:2048", "k"]], password=["1"])
        terminal = terminal_factory(
            lambda m: GenerateKeyPairResult(success=False, output="CKR_DEVICE_MEMORY")
        )
        runner = make_runner(prompt, terminal)

        runner.dispatch()
        with pytest.raises(OperatorExit):
            runner.dispatch()

        assert len(prompt.menus) == 2


class TestUnlock:
    def test_unlock(self, prompter_factory, terminal_factory):
        prompt = prompter_factory(password=["1234"])
        terminal = terminal_factory(lambda m: OutputResult(success=True, output=""))

        assert make_runner(prompt, terminal).execute("unlock") is True
        assert prompt.messages == [SUCCESS]
