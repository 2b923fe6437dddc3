"""Modified Vernam: XOR with a repeating key, one byte per code unit, base64 out."""
from .codec import b64decode_lenient, b64encode_text, code_units


def enc_vernam(plaintext: str, key: str) -> str:
    if not key:
        return plaintext
    K = code_units(key)
    ct = bytes((p ^ K[i % len(K)]) & 0xFF for i, p in enumerate(code_units(plaintext)))
    return b64encode_text(ct)


def dec_vernam(ciphertext: str, key: str) -> str:
    if not key:
        return ciphertext
    K = code_units(key)
    data = b64decode_lenient(ciphertext)
    return ''.join(chr(b ^ (K[i % len(K)] & 0xFF)) for i, b in enumerate(data))
