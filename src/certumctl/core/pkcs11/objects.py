"""Parsing of the object listing printed by the PKCS#11 utility.

A listing looks like::

    Using slot 0 with a present token (0x0)
    Public Key Object; RSA 2048 bits
      label:      alpha
      ID:         01
    Data object 2216
      label:          'gamma'
      application:    'gamma'

Headers start at column 0 and contain "Object"/"object"; attributes are
indented below their header.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

# Object classes accepted by the utility's --type option, in sweep order.
OBJECT_TYPES: tuple[str, ...] = ("cert", "data", "privkey", "pubkey", "secrkey")

_KINDS: dict[str, str] = {
    "certificate": "cert",
    "data": "data",
    "private key": "privkey",
    "public key": "pubkey",
    "secret key": "secrkey",
}

_HEADER = re.compile(r"^(?P<kind>\S[^;]*?)\s+[Oo]bject\b")
_LABEL = re.compile(r"^\s+label:(?P<label>.*)$")


@dataclass
class CardObject:
    kind: str | None
    label: str | None = None


def _unquote(value: str) -> str:
    if len(value) >= 2 and value[0] == value[-1] == "'":
        return value[1:-1]
    return value


def parse_objects(output: str) -> list[CardObject]:
    """Return the objects of a listing in the order they are printed."""
    objects: list[CardObject] = []
    current: CardObject | None = None
    for line in output.splitlines():
        header = _HEADER.match(line)
        if header:
            kind = _KINDS.get(header.group("kind").strip().lower())
            current = CardObject(kind=kind)
            objects.append(current)
            continue
        label = _LABEL.match(line)
        if label:
            if current is None or current.label is not None:
                # Label without a header we recognised; still an object.
                current = CardObject(kind=None)
                objects.append(current)
            current.label = _unquote(label.group("label").strip()) or None
    return objects


def unique_labels(objects: list[CardObject]) -> list[str]:
    """Labels in listing order, each once."""
    seen: dict[str, None] = {}
    for obj in objects:
        if obj.label:
            seen.setdefault(obj.label)
    return list(seen)
