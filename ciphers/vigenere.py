from .codec import code_units, from_code_units

# Upper-case letters first, then lower-case: a cyclic group of 52 symbols
ALPH = ('ABCDEFGHIJKLMNOPQRSTUVWXYZ'
        'abcdefghijklmnopqrstuvwxyz')

ALPH_LEN = len(ALPH)  # This is 52
# A fast lookup map to get the index of a character
ALPH_MAP = {char: i for i, char in enumerate(ALPH)}


def _shift(text: str, key: str, sign: int) -> str:
    units = code_units(text)
    K = code_units(key)
    K_LEN = len(K)
    out = []

    # The key cursor moves with every input position, shifted or not.
    for i, unit in enumerate(units):
        ch = chr(unit)
        kc = chr(K[i % K_LEN])
        if ch in ALPH_MAP and kc in ALPH_MAP:
            new_idx = (ALPH_MAP[ch] + sign * ALPH_MAP[kc]) % ALPH_LEN
            out.append(ord(ALPH[new_idx]))
        else:
            # Digits, punctuation, non-Latin: pass through unchanged.
            out.append(unit)

    return from_code_units(out)

def enc_vigenere(plaintext: str, key: str) -> str:
    """Shift every letter by the alphabet index of its key letter."""
    if not key:
        return plaintext
    return _shift(plaintext, key, 1)

def dec_vigenere(ciphertext: str, key: str) -> str:
    if not key:
        return ciphertext
    return _shift(ciphertext, key, -1)
