"""
Pytest configuration and shared fixtures.
"""

from __future__ import annotations

import pytest


class FakePrompter:
    """Scripted stand-in for the dialog renderer.

    Answers are consumed in order per prompt kind; running out of
    answers means the code asked something the test did not expect.
    """

    def __init__(self, *, yesno=(), menu=(), password=(), inputbox=(), form=()):
        self._answers = {
            "yesno": list(yesno),
            "menu": list(menu),
            "password": list(password),
            "inputbox": list(inputbox),
            "form": list(form),
        }
        self.prompts: list[tuple[str, str]] = []
        self.messages: list[str] = []
        self.gauges: list[int] = []
        self.menus: list[list[tuple[str, str]]] = []
        self.yesno_options: list[dict] = []

    def _next(self, kind: str, text: str):
        self.prompts.append((kind, text))
        if not self._answers[kind]:
            raise AssertionError(f"unexpected {kind} prompt: {text}")
        return self._answers[kind].pop(0)

    def yesno(self, text, *, yes_label="Yes", no_label="No", default_no=False):
        self.yesno_options.append(
            {"yes_label": yes_label, "no_label": no_label, "default_no": default_no}
        )
        return self._next("yesno", text)

    def menu(self, title, text, items, *, cancel_label="Cancel"):
        self.menus.append(list(items))
        return self._next("menu", text)

    def password(self, title, text):
        return self._next("password", text)

    def inputbox(self, title, text):
        return self._next("inputbox", text)

    def form(self, title, text, fields):
        return self._next("form", text)

    def msgbox(self, text, *, title=None):
        self.messages.append(text)

    def gauge(self, title, text, percent):
        self.gauges.append(percent)

    def count(self, kind: str) -> int:
        return sum(1 for k, _ in self.prompts if k == kind)


class FakeConsole:
    def __init__(self, *, confirm=(), choose=()):
        self._confirm = list(confirm)
        self._choose = list(choose)
        self.questions: list[str] = []

    def confirm(self, text):
        self.questions.append(text)
        if not self._confirm:
            raise AssertionError(f"unexpected confirm: {text}")
        return self._confirm.pop(0)

    def choose(self, text, options):
        self.questions.append(text)
        if not self._choose:
            raise AssertionError(f"unexpected choice: {text}")
        return self._choose.pop(0)


class RecordingTerminal:
    """Terminal double: records messages, answers through a callback."""

    def __init__(self, respond):
        self._respond = respond
        self.sent = []

    def send(self, message):
        self.sent.append(message)
        return self._respond(message)


@pytest.fixture
def prompter_factory():
    return FakePrompter


@pytest.fixture
def console_factory():
    return FakeConsole


@pytest.fixture
def terminal_factory():
    return RecordingTerminal


@pytest.fixture
def sample_list_objects_output():
    """Sample pkcs11-tool --list-objects output with shared labels."""
    return """Public Key Object; RSA 2048 bits
  label:      alpha
  ID:         01
  Usage:      encrypt, verify, wrap
  Access:     local
Private Key Object; RSA
  label:      alpha
  ID:         01
  Usage:      decrypt, sign, unwrap
  Access:     sensitive, always sensitive, never extractable, local
Certificate Object; type = X.509 cert
  label:      beta  
  subject:    DN: CN=beta
  ID:         02
Data object 2216
  label:          'gamma'
  application:    'gamma'
  app_id:         <empty>
  flags:          modifiable
"""


@pytest.fixture
def sample_os_release():
    return """PRETTY_NAME="Debian GNU/Linux 12 (bookworm)"
NAME="Debian GNU/Linux"
VERSION_ID="12"
VERSION="12 (bookworm)"
VERSION_CODENAME=bookworm
ID=debian
HOME_URL="https://www.debian.org/"
"""
