from __future__ import annotations

import logging

from certumctl.core.base.process import run

lg = logging.getLogger(__name__)

SYSTEMCTL: tuple[str, ...] = ("sudo", "systemctl")


class ServiceManager:
    """Query and start services through systemd."""

    def __init__(self, command: tuple[str, ...] = SYSTEMCTL) -> None:
        self._command = command

    def is_running(self, name: str) -> bool:
        result = run([*self._command, "--no-pager", "status", name])
        return result.success

    def start(self, name: str) -> bool:
        lg.info("starting %s", name)
        result = run([*self._command, "start", name], capture=False)
        return result.success
