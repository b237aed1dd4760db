"""Operator-facing formatting of tool output."""

from __future__ import annotations

from cryptography.exceptions import UnsupportedAlgorithm
from cryptography.hazmat.primitives import serialization
from cryptography.hazmat.primitives.asymmetric import dsa, ec, ed448, ed25519, rsa

SUCCESS = "Operation completed successfully!"
MEMORY_FULL = "Card memory full! Please delete something from a slot to free up memory!"


def _hex(data: bytes) -> str:
    return data.hex(" ").upper() if data else ""


def progress_percent(done: int, total: int) -> int:
    """Integer percentage, 100 when there is nothing to do."""
    if total <= 0:
        return 100
    return done * 100 // total


def describe_public_key(key) -> str:
    if isinstance(key, rsa.RSAPublicKey):
        return f"RSA {key.key_size} bits"
    if isinstance(key, ec.EllipticCurvePublicKey):
        return f"EC {key.curve.name}"
    if isinstance(key, dsa.DSAPublicKey):
        return f"DSA {key.key_size} bits"
    if isinstance(key, ed25519.Ed25519PublicKey):
        return "Ed25519"
    if isinstance(key, ed448.Ed448PublicKey):
        return "Ed448"
    return type(key).__name__


def format_public_key(data: bytes) -> str:
    """Render DER read from the card as PEM with a one-line summary.

    Falls back to the raw bytes (as text if printable, else hex) when the
    data is not a SubjectPublicKeyInfo.
    """
    try:
        key = serialization.load_der_public_key(data)
    except (ValueError, UnsupportedAlgorithm):
        try:
            text = data.decode("ascii")
        except UnicodeDecodeError:
            return _hex(data)
        if all(c.isprintable() or c.isspace() for c in text):
            return text
        return _hex(data)
    pem = key.public_bytes(
        serialization.Encoding.PEM,
        serialization.PublicFormat.SubjectPublicKeyInfo,
    ).decode("ascii")
    return f"{describe_public_key(key)}\n\n{pem}"


def format_failure(what: str, output: str) -> str:
    if output:
        return f"{what}: {output}"
    return f"{what}."
