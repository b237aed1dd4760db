"""Prompter backed by dialog(1).

dialog draws on the terminal through stdout and writes the operator's
answer to stderr, so stderr is captured and stdin/stdout are left on the
terminal. Exit status 0 means OK/Yes; 1 (Cancel/No) and 255 (Esc) both
mean the operator backed out.
"""

from __future__ import annotations

import logging
import subprocess
from collections.abc import Sequence

lg = logging.getLogger(__name__)

RENDERER = "dialog"

# Geometry for forms and gauges; 0 lets dialog size the box.
_AUTO = ("0", "0")
_FORM_SIZE = ("12", "64", "0")
_GAUGE_SIZE = ("6", "60")
_PASSWORD_SIZE = ("10", "30")
_FIELD_X = "30"
_FIELD_WIDTH = "40"


class Dialog:
    def __init__(self, executable: str = RENDERER) -> None:
        self._executable = executable

    def _run(self, args: Sequence[str], stdin: str | None = None) -> tuple[bool, str]:
        proc = subprocess.run(
            [self._executable, *args],
            stderr=subprocess.PIPE,
            input=stdin,
            text=True,
        )
        answer = proc.stderr.rstrip("\n") if proc.stderr else ""
        return proc.returncode == 0, answer

    def yesno(
        self,
        text: str,
        *,
        yes_label: str = "Yes",
        no_label: str = "No",
        default_no: bool = False,
    ) -> bool:
        args = ["--yes-label", yes_label, "--no-label", no_label]
        if default_no:
            args += ["--default-button", "no"]
        ok, _ = self._run([*args, "--yesno", text, *_AUTO])
        return ok

    def menu(
        self,
        title: str,
        text: str,
        items: Sequence[tuple[str, str]],
        *,
        cancel_label: str = "Cancel",
    ) -> str | None:
        flat = [part for item in items for part in item]
        ok, answer = self._run(
            ["--cancel-label", cancel_label, "--title", title,
             "--menu", text, *_AUTO, "0", *flat]
        )
        return answer if ok else None

    def password(self, title: str, text: str) -> str | None:
        ok, answer = self._run(
            ["--title", title, "--insecure", "--passwordbox", text, *_PASSWORD_SIZE]
        )
        return answer if ok else None

    def inputbox(self, title: str, text: str) -> str | None:
        ok, answer = self._run(["--title", title, "--inputbox", text, *_AUTO])
        return answer if ok else None

    def form(
        self, title: str, text: str, fields: Sequence[tuple[str, str]]
    ) -> list[str] | None:
        rows: list[str] = []
        for row, (label, default) in enumerate(fields, 1):
            rows += [label, str(row), "1", default, str(row), _FIELD_X, _FIELD_WIDTH, "0"]
        ok, answer = self._run(["--title", title, "--form", text, *_FORM_SIZE, *rows])
        if not ok:
            return None
        values = answer.split("\n")
        # dialog drops trailing empty fields
        values += [""] * (len(fields) - len(values))
        return values[: len(fields)]

    def msgbox(self, text: str, *, title: str | None = None) -> None:
        args = ["--title", title] if title else []
        self._run([*args, "--msgbox", text, *_AUTO])

    def gauge(self, title: str, text: str, percent: int) -> None:
        self._run(
            ["--title", title, "--gauge", text, *_GAUGE_SIZE, str(percent)],
            stdin=f"{percent}\n",
        )
