"""
Cipher transform tests: Vigenère, modified Vernam and 2x2 Hill.

Usage:
    pytest test_ciphers.py
"""
import pytest

from ciphers import dec_hill, dec_vernam, dec_vigenere, enc_hill, enc_vernam, enc_vigenere
from ciphers import hill
from ciphers.hill import KeyMatrix, derive_matrix, mod_inverse

KEYS = ["KEY", "k", "TEST", "a much longer master key 123", "ÿþ", "ĀāĂă", "\U0001F600"]
LATIN1_TEXTS = ["HELLO", "Hello, World!", "p@ssw0rd\n\t", "café ÿ", "x"]


# --- Vigenère ---

def test_vigenere_known_vector():
    assert enc_vigenere("HELLO", "KEY") == "RIjVS"
    assert dec_vigenere("RIjVS", "KEY") == "HELLO"


def test_vigenere_empty_key_is_identity():
    assert enc_vigenere("secret", "") == "secret"
    assert dec_vigenere("secret", "") == "secret"


def test_vigenere_wraps_from_lower_to_upper():
    assert enc_vigenere("z", "B") == "A"
    assert dec_vigenere("A", "B") == "z"


def test_vigenere_non_letters_pass_through_but_consume_key():
    assert enc_vigenere("A-B", "BB") == "B-C"
    assert enc_vigenere("A1A", "BCD") == "B1D"


def test_vigenere_non_letter_key_char_copies_input():
    assert enc_vigenere("AA", "1B") == "AB"


def test_vigenere_astral_char_counts_as_two_positions():
    assert enc_vigenere("\U0001F600A", "AB") == "\U0001F600A"
    assert dec_vigenere(enc_vigenere("\U0001F600A", "AB"), "AB") == "\U0001F600A"


@pytest.mark.parametrize("key", KEYS)
def test_vigenere_round_trip(key):
    for text in ["HELLOworld", "AbCdEfGhIjKlMnOpQrStUvWxYz", "with spaces and 123!"]:
        assert dec_vigenere(enc_vigenere(text, key), key) == text


# --- Vernam ---

def test_vernam_known_vectors():
    assert enc_vernam("A", "A") == "AA=="
    assert enc_vernam("Hi", "k") == "IwI="
    assert dec_vernam("IwI=", "k") == "Hi"


def test_vernam_empty_key_is_identity():
    assert enc_vernam("secret", "") == "secret"
    assert dec_vernam("secret", "") == "secret"


@pytest.mark.parametrize("key", KEYS)
def test_vernam_round_trip_latin1(key):
    for text in LATIN1_TEXTS:
        assert dec_vernam(enc_vernam(text, key), key) == text


def test_vernam_truncates_code_units_above_255():
    # 0x100 ^ 'k' keeps only the low byte, which XORs back to NUL
    assert dec_vernam(enc_vernam("Ā", "k"), "k") == "\x00"


def test_vernam_key_units_reduced_to_a_byte():
    # U+0141 and "A" share the low byte 0x41
    assert enc_vernam("A", "Ł") == enc_vernam("A", "A") == "AA=="
    assert dec_vernam("AA==", "Ł") == "A"
    for key in ["Ā", "\U0001F600", "ĀB"]:
        assert dec_vernam(enc_vernam("Hello\xff", key), key) == "Hello\xff"


def test_vernam_decode_is_lenient():
    assert dec_vernam("IwI", "k") == "Hi"
    assert dec_vernam("Iw I=\n", "k") == "Hi"
    assert dec_vernam("@@@", "k") == ""


# --- Hill ---

def test_hill_key_matrix_repairs_even_determinant():
    m = derive_matrix("TEST")
    assert m == KeyMatrix(a=85, b=69, c=83, d=84)
    assert m.det == 133


def test_hill_short_key_defaults_missing_coefficients_to_one():
    m = derive_matrix("A")
    assert m == KeyMatrix(a=65, b=1, c=1, d=0)
    assert m.det % 2 == 1


def test_hill_key_units_reduced_mod_256():
    assert derive_matrix("ĀāĂă") == KeyMatrix(a=1, b=1, c=2, d=3)
    assert enc_hill("AB", "ĀāĂă") == enc_hill("AB", "\x00\x01\x02\x03")


def test_mod_inverse():
    assert mod_inverse(133) == 77
    assert mod_inverse(1) == 1
    assert mod_inverse(2) is None


def test_hill_known_vector():
    assert enc_hill("AB", "TEST") == "hil:X7s="
    assert enc_hill("AB", "TEST") == enc_hill("AB", "TEST")
    assert dec_hill("hil:X7s=", "TEST") == "AB"
    assert dec_hill("X7s=", "TEST") == "AB"


def test_hill_empty_key_is_identity_without_tag():
    assert enc_hill("secret", "") == "secret"
    assert dec_hill("secret", "") == "secret"


@pytest.mark.parametrize("key", KEYS + ["A", "ab"])
def test_hill_round_trip(key):
    for text in LATIN1_TEXTS + ["ABC", "odd"]:
        assert dec_hill(enc_hill(text, key), key) == text


def test_hill_drops_genuine_trailing_nul():
    assert dec_hill(enc_hill("A\x00", "TEST"), "TEST") == "A"
    assert dec_hill(enc_hill("A\x00B", "TEST"), "TEST") == "A\x00B"


def test_hill_non_invertible_matrix_gives_empty_string(monkeypatch):
    monkeypatch.setattr(hill, "derive_matrix", lambda key: KeyMatrix(a=2, b=0, c=0, d=2))
    assert dec_hill("X7s=", "TEST") == ""


def test_hill_empty_plaintext():
    assert enc_hill("", "TEST") == "hil:"
    assert dec_hill("hil:", "TEST") == ""
