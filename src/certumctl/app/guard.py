from __future__ import annotations

import logging

from certumctl.app.prompt import Prompter
from certumctl.core.smartcard import CardProbe
from certumctl.errors import OperatorExit

lg = logging.getLogger(__name__)

NO_READER = "No card reader detected! Please plug one in and try again!"
NO_CARD = "No card detected! Please insert one and try again!"


class DeviceSessionGuard:
    """Block until a reader and a card are both present.

    Run before every menu display; nothing about the previous iteration
    is trusted since a card can be pulled between operations.
    """

    def __init__(self, probe: CardProbe, prompt: Prompter) -> None:
        self._probe = probe
        self._prompt = prompt

    def wait_ready(self) -> None:
        """Return once both gates pass; raise OperatorExit on Abort."""
        while True:
            if not self._probe.reader_present():
                self._retry_or_exit(NO_READER)
                continue
            if not self._probe.card_present():
                self._retry_or_exit(NO_CARD)
                continue
            return

    def _retry_or_exit(self, text: str) -> None:
        lg.warning("%s", text)
        if not self._prompt.yesno(text, yes_label="Retry", no_label="Abort"):
            raise OperatorExit
