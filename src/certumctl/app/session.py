"""Card session: constructs the stack and runs the main loop.

Card operations go Runner -> Pkcs11Terminal -> Agent -> pkcs11-tool;
before every menu the guard re-checks reader and card presence.
"""

from __future__ import annotations

import logging

from certumctl.app.commands import COMMAND_MODULES
from certumctl.app.config import Settings
from certumctl.app.guard import DeviceSessionGuard
from certumctl.app.prompt import Prompter
from certumctl.app.runner import Runner
from certumctl.core.base import Agent
from certumctl.core.pkcs11 import Pkcs11Terminal
from certumctl.core.smartcard import CardProbe

lg = logging.getLogger(__name__)


def session(settings: Settings, prompt: Prompter) -> None:
    """Loop guard -> menu -> command until the operator exits.

    Returns only by raising OperatorExit.
    """
    agent = Agent(settings.module_path, timeout=settings.tool_timeout)
    terminal = Pkcs11Terminal(agent)
    runner = Runner(terminal, prompt, COMMAND_MODULES)
    guard = DeviceSessionGuard(CardProbe(), prompt)

    while True:
        guard.wait_ready()
        runner.dispatch()
