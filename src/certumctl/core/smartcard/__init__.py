from certumctl.core.smartcard.card import CardProbe

__all__ = ["CardProbe"]
