"""Tagged storage format: ``<tag>:<payload>``.

The tag is the only record of which cipher produced a stored value, so an
item stays readable after the default algorithm changes. Values without a
recognised tag predate tagging and are raw Vigenère ciphertext.
"""
import logging
from enum import Enum
from typing import Optional, Tuple, Union

from .vigenere import enc_vigenere, dec_vigenere
from .vernam import enc_vernam, dec_vernam
from .hill import hill_payload, dec_hill

logger = logging.getLogger(__name__)

UNKNOWN = "unknown"


class Algorithm(str, Enum):
    VIGENERE = "vigenere"
    VERNAM = "vernam"
    HILL = "hill"

    @property
    def tag(self) -> str:
        return _TAGS[self]

    @property
    def label(self) -> str:
        return _LABELS[self]


_TAGS = {Algorithm.VIGENERE: "vig:", Algorithm.VERNAM: "ver:", Algorithm.HILL: "hil:"}
_LABELS = {Algorithm.VIGENERE: "Vigenère", Algorithm.VERNAM: "Vernam", Algorithm.HILL: "Hill"}

# Display order for algorithm pickers
ALGORITHMS = (Algorithm.VIGENERE, Algorithm.VERNAM, Algorithm.HILL)


_ENCRYPT = {
    Algorithm.VIGENERE: enc_vigenere,
    Algorithm.VERNAM: enc_vernam,
    Algorithm.HILL: hill_payload,
}
_DECRYPT = {
    Algorithm.VIGENERE: dec_vigenere,
    Algorithm.VERNAM: dec_vernam,
    Algorithm.HILL: dec_hill,
}


def split_tag(stored: str) -> Tuple[Optional[Algorithm], str]:
    """Return (algorithm, payload); algorithm is None for untagged values."""
    for alg in ALGORITHMS:
        if stored.startswith(alg.tag):
            return alg, stored[len(alg.tag):]
    return None, stored


def encrypt(plaintext: str, key: str, algorithm: Union[Algorithm, str]) -> str:
    """Encrypt and prefix with the algorithm's tag (even for an empty key)."""
    alg = Algorithm(algorithm)
    if not key:
        return alg.tag + plaintext
    return alg.tag + _ENCRYPT[alg](plaintext, key)


def decrypt(stored: str, key: str) -> str:
    alg, payload = split_tag(stored)
    if alg is None:
        logger.debug("untagged value, decrypting as legacy Vigenère")
        alg = Algorithm.VIGENERE
    return _DECRYPT[alg](payload, key)


def detect_algorithm(stored: str) -> Union[Algorithm, str]:
    alg, _ = split_tag(stored)
    return alg if alg is not None else UNKNOWN
