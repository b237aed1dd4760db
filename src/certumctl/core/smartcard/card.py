from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from smartcard.Exceptions import SmartcardException
from smartcard.pcsc.PCSCExceptions import BaseSCardException
from smartcard.System import readers

if TYPE_CHECKING:
    from smartcard.reader.Reader import Reader

lg = logging.getLogger(__name__)

# Raised by pyscard for PC/SC context failures (BaseSCardException, e.g.
# pcscd not running) and for reader/card errors (SmartcardException).
PCSC_ERRORS = (SmartcardException, BaseSCardException)


class CardProbe:
    """Reader and card presence queries through pyscard.

    PC/SC errors (service down, no readers, no card) read as "absent"
    and are never raised to the caller.
    """

    @staticmethod
    def list_readers() -> list[Reader]:
        try:
            return list(readers())
        except PCSC_ERRORS as exc:
            lg.debug("cannot list readers: %s", exc)
            return []

    def reader_present(self) -> bool:
        available = self.list_readers()
        lg.debug("readers: %s", ", ".join(str(r) for r in available) or "none")
        return bool(available)

    def card_present(self) -> bool:
        """Return True if a card answers on any reader."""
        for reader in self.list_readers():
            connection = reader.createConnection()
            try:
                connection.connect()
            except PCSC_ERRORS as exc:
                lg.debug("no card on %s: %s", reader, exc)
                continue
            try:
                lg.debug("card on %s", reader)
                return True
            finally:
                connection.disconnect()
        return False
