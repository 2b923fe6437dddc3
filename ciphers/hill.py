"""
Hill cipher over 2x2 matrices of bytes, arithmetic modulo 256.

The key matrix comes from the first four code units of the key::

    | a  b |      a and d are forced odd, and d may have its low bit
    | c  d |      flipped again so that det(a, b, c, d) is odd.

Only an odd determinant has an inverse modulo 256. Plaintext is taken one
byte per code unit (unit mod 256), padded with a single zero byte to an even
length. On the way back a final zero byte is always dropped, so a genuine
trailing NUL in the plaintext does not survive.
"""
import logging
from dataclasses import dataclass
from typing import Optional

from .codec import b64decode_lenient, b64encode_text, code_units

logger = logging.getLogger(__name__)

TAG = "hil:"
MOD = 256


@dataclass(frozen=True)
class KeyMatrix:
    a: int
    b: int
    c: int
    d: int

    @property
    def det(self) -> int:
        return (self.a * self.d - self.b * self.c) % MOD


def derive_matrix(key: str) -> KeyMatrix:
    """Build the (repaired) key matrix; both directions must call this."""
    units = code_units(key)[:4]
    # A missing key character counts as 1, not 0.
    kb = [u % MOD for u in units] + [1] * (4 - len(units))
    m = KeyMatrix(a=kb[0] | 1, b=kb[1] % MOD, c=kb[2] % MOD, d=kb[3] | 1)
    if m.det % 2 == 0:
        m = KeyMatrix(a=m.a, b=m.b, c=m.c, d=m.d ^ 1)
    return m


def mod_inverse(det: int) -> Optional[int]:
    """Inverse of det modulo 256, or None if there is none."""
    for x in range(1, MOD):
        if (det * x) % MOD == 1:
            return x
    return None


def _apply(m: KeyMatrix, data: bytes) -> bytes:
    out = bytearray()
    for i in range(0, len(data), 2):
        p1 = data[i]
        p2 = data[i + 1] if i + 1 < len(data) else 0
        out.append((m.a * p1 + m.b * p2) % MOD)
        out.append((m.c * p1 + m.d * p2) % MOD)
    return bytes(out)


def hill_payload(plaintext: str, key: str) -> str:
    """Encrypt to the bare base64 payload (no tag)."""
    m = derive_matrix(key)
    pt = bytearray(u % MOD for u in code_units(plaintext))
    if len(pt) % 2:
        pt.append(0)
    return b64encode_text(_apply(m, bytes(pt)))


def enc_hill(plaintext: str, key: str) -> str:
    if not key:
        return plaintext
    return TAG + hill_payload(plaintext, key)


def dec_hill(payload: str, key: str) -> str:
    """Decrypt a Hill payload, with or without its ``hil:`` tag."""
    if not key:
        return payload
    if payload.startswith(TAG):
        payload = payload[len(TAG):]

    data = b64decode_lenient(payload)
    m = derive_matrix(key)
    inv = mod_inverse(m.det)
    if inv is None:
        logger.debug("hill: determinant %d has no inverse mod %d", m.det, MOD)
        return ""

    inverse = KeyMatrix(
        a=(inv * m.d) % MOD,
        b=(MOD - (inv * m.b) % MOD) % MOD,
        c=(MOD - (inv * m.c) % MOD) % MOD,
        d=(inv * m.a) % MOD,
    )
    pt = _apply(inverse, data)
    if pt and pt[-1] == 0:
        pt = pt[:-1]
    return ''.join(chr(b) for b in pt)
