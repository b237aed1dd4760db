from __future__ import annotations

from collections.abc import Sequence
from typing import Protocol


class Prompter(Protocol):
    """Interactive rendering layer: menus, forms, masked input, progress.

    Every method blocks until the operator answers. Cancellation is
    reported as False/None, never raised.
    """

    def yesno(
        self,
        text: str,
        *,
        yes_label: str = "Yes",
        no_label: str = "No",
        default_no: bool = False,
    ) -> bool: ...

    def menu(
        self,
        title: str,
        text: str,
        items: Sequence[tuple[str, str]],
        *,
        cancel_label: str = "Cancel",
    ) -> str | None: ...

    def password(self, title: str, text: str) -> str | None: ...

    def inputbox(self, title: str, text: str) -> str | None: ...

    def form(
        self, title: str, text: str, fields: Sequence[tuple[str, str]]
    ) -> list[str] | None: ...

    def msgbox(self, text: str, *, title: str | None = None) -> None: ...

    def gauge(self, title: str, text: str, percent: int) -> None: ...
