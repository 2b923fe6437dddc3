"""Cipher engine: Vigenère, modified Vernam, 2x2 Hill and the tagged storage format."""
from .vigenere import enc_vigenere, dec_vigenere
from .vernam import enc_vernam, dec_vernam
from .hill import enc_hill, dec_hill
from .tagged import (ALGORITHMS, UNKNOWN, Algorithm, decrypt, detect_algorithm,
                     encrypt, split_tag)
