"""Delete every object on the card.

Labels do not say which object class they belong to, and one label may
be shared by several objects of different classes. Each label is
therefore deleted under every class the utility knows; a class with no
object under that label simply fails and is skipped.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass

from certumctl.app.display import SUCCESS, format_failure, progress_percent
from certumctl.core.base import Terminal
from certumctl.core.pkcs11 import OBJECT_TYPES, DeleteObjectMessage, ListObjectsMessage

lg = logging.getLogger(__name__)

CONFIRM = (
    "Are you sure you want to continue? "
    "This will delete ALL objects (keys, certificates) on the card"
)
PROGRESS_TITLE = "Deletion progress"
PROGRESS_TEXT = "Please wait, deleting objects…"


@dataclass
class WipeReport:
    labels: list[str]
    attempts: int = 0
    deleted: int = 0


def delete_labels(
    terminal: Terminal,
    labels: list[str],
    pin: str,
    progress: Callable[[int, int], None],
) -> WipeReport:
    """Sweep every object type for every label, in order.

    progress(done, total) is called before each label and once more
    after the last one.
    """
    report = WipeReport(labels=list(labels))
    total = len(labels)
    for done, label in enumerate(labels):
        progress(done, total)
        for object_type in OBJECT_TYPES:
            result = terminal.send(
                DeleteObjectMessage(label=label, object_type=object_type, pin=pin)
            )
            report.attempts += 1
            if result.deleted:
                report.deleted += 1
                lg.info("deleted %s %r", object_type, label)
            else:
                lg.debug("no %s object labelled %r", object_type, label)
    progress(total, total)
    return report


def cmd_wipe(runner) -> bool:
    """Delete ALL objects from card"""
    if not runner.prompt.yesno(CONFIRM, yes_label="Yes", no_label="No", default_no=True):
        return True

    pin = runner.ask_pin()
    if pin is None:
        return True

    listing = runner.terminal.send(ListObjectsMessage(pin=pin))
    if not listing.success:
        lg.error("cannot list objects: %s", listing.output)
        runner.prompt.msgbox(format_failure("Could not list objects on card", listing.output))
        return False

    labels = listing.labels
    labelled = sum(1 for obj in listing.objects if obj.label)
    if listing.objects and not labels:
        lg.error("%d objects listed but no labels could be read", len(listing.objects))
        runner.prompt.msgbox(
            f"Found {len(listing.objects)} objects on the card but could not read "
            "any of their labels. Nothing was deleted."
        )
        return False
    if labelled < len(listing.objects):
        lg.warning("%d of %d objects carry no label", len(listing.objects) - labelled, len(listing.objects))
        runner.prompt.msgbox(
            f"{len(listing.objects) - labelled} of {len(listing.objects)} objects have "
            "no label and will be left on the card."
        )

    def show(done: int, total: int) -> None:
        runner.prompt.gauge(PROGRESS_TITLE, PROGRESS_TEXT, progress_percent(done, total))

    report = delete_labels(runner.terminal, labels, pin, show)
    lg.info(
        "wipe finished: %d labels, %d delete attempts, %d objects deleted",
        len(report.labels), report.attempts, report.deleted,
    )
    runner.prompt.msgbox(SUCCESS)
    return True
