"""Runner: shows the operation menu and dispatches the chosen command."""

from __future__ import annotations

import logging
from functools import partial
from types import ModuleType

from certumctl.app.display import format_failure
from certumctl.app.prompt import Prompter
from certumctl.core.base import Terminal
from certumctl.errors import OperatorExit

lg = logging.getLogger(__name__)

# Menu key -> command name, in display order.
MENU: tuple[tuple[str, str], ...] = (
    ("1", "slots"),
    ("2", "mechanisms"),
    ("3", "keygen"),
    ("4", "objects"),
    ("5", "pubkey"),
    ("6", "unlock"),
    ("0", "wipe"),
)


class Runner:
    """Holds the terminal and prompter and dispatches menu commands.

    Commands are the cmd_* functions of the given modules; the first
    docstring line becomes the menu text.
    """

    def __init__(
        self,
        terminal: Terminal,
        prompt: Prompter,
        command_modules: list[ModuleType],
    ) -> None:
        self._terminal = terminal
        self._prompt = prompt

        self._commands: dict[str, callable] = {}
        self._descriptions: dict[str, str] = {}
        for mod in command_modules:
            for name in dir(mod):
                if name.startswith("cmd_"):
                    func = getattr(mod, name)
                    cmd_name = name[4:]
                    self._commands[cmd_name] = partial(func, self)
                    self._descriptions[cmd_name] = (func.__doc__ or "").split("\n")[0].strip()

        self._keys = {key: name for key, name in MENU if name in self._commands}

    @property
    def terminal(self) -> Terminal:
        return self._terminal

    @property
    def prompt(self) -> Prompter:
        return self._prompt

    def ask_pin(self) -> str | None:
        """Ask for the PIN; None if the operator cancels or enters nothing."""
        pin = self._prompt.password("Enter PIN", "Please enter your PIN:")
        return pin or None

    def menu_items(self) -> list[tuple[str, str]]:
        return [(key, self._descriptions[name]) for key, name in self._keys.items()]

    def select(self) -> str | None:
        """Show the main menu and return the chosen command name."""
        key = self._prompt.menu(
            "Main menu",
            "What would you like to do today?",
            self.menu_items(),
            cancel_label="Exit",
        )
        lg.debug("selection: %s", key)
        return self._keys.get(key) if key is not None else None

    def execute(self, name: str) -> bool:
        """Run one command. Returns True on success; never raises."""
        cmd = self._commands.get(name)
        if cmd is None:
            lg.error("unknown command: %s", name)
            return False
        try:
            return cmd()
        except Exception as exc:
            lg.error("command '%s' failed: %s", name, exc)
            lg.debug("traceback", exc_info=True)
            self._prompt.msgbox(format_failure("Unexpected error occurred", str(exc)))
            return False

    def dispatch(self) -> bool:
        """Show the menu once and run the selection.

        Raises OperatorExit when the menu is cancelled or the selection
        is not a known command.
        """
        name = self.select()
        if name is None:
            raise OperatorExit
        return self.execute(name)
