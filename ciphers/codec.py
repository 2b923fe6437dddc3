"""Text <-> code unit and base64 plumbing shared by the ciphers.

Stored values were first produced by a browser, so characters are handled
as UTF-16 code units and base64 is decoded as forgivingly as ``atob`` /
``Buffer.from(..., "base64")`` would.
"""
import base64
import re

_B64_JUNK = re.compile(r"[^A-Za-z0-9+/]")
_URLSAFE = str.maketrans("-_", "+/")


def code_units(text: str) -> list[int]:
    """Split text into UTF-16 code units (astral chars give two)."""
    data = text.encode("utf-16-le", "surrogatepass")
    return [int.from_bytes(data[i:i + 2], "little") for i in range(0, len(data), 2)]


def from_code_units(units) -> str:
    data = b"".join(u.to_bytes(2, "little") for u in units)
    return data.decode("utf-16-le", "surrogatepass")


def b64encode_text(data: bytes) -> str:
    return base64.b64encode(data).decode("ascii")


def b64decode_lenient(text: str) -> bytes:
    """Decode base64 without ever raising.

    Anything outside the alphabet is dropped, padding is restored and a
    dangling single character (6 bits, not a whole byte) is ignored.
    """
    cleaned = _B64_JUNK.sub("", text.translate(_URLSAFE))
    if len(cleaned) % 4 == 1:
        cleaned = cleaned[:-1]
    cleaned += "=" * (-len(cleaned) % 4)
    return base64.b64decode(cleaned)
