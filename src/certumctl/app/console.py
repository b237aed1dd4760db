"""Plain terminal prompts, used before the dialog renderer is available."""

from __future__ import annotations

from collections.abc import Sequence

import click


class Console:
    def confirm(self, text: str) -> bool:
        """Ask until the operator answers y or n."""
        return click.confirm(text, default=None, err=True)

    def choose(self, text: str, options: Sequence[str]) -> int | None:
        """Numbered pick list. Returns the chosen index, or None."""
        if not options:
            return None
        click.echo(text, err=True)
        for i, option in enumerate(options, 1):
            click.echo(f"  {i}) {option}", err=True)
        choice = click.prompt(
            "#?",
            type=click.IntRange(1, len(options)),
            err=True,
        )
        return choice - 1
