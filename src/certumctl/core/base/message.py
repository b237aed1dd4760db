from __future__ import annotations

from dataclasses import dataclass


@dataclass
class Message:
    """Request for one sub-operation of the PKCS#11 utility."""

    @property
    def operation(self) -> str:
        """Operation name for logs: the class name minus "Message"."""
        name = type(self).__name__
        return name.removesuffix("Message") or name


@dataclass
class Result:
    """Typed outcome of a sub-operation. Tool failures are data, not raises."""
