# server.py
import logging
from typing import Optional

from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel

import settings
from ciphers import ALGORITHMS, Algorithm, decrypt, detect_algorithm, encrypt

logging.basicConfig(level=settings.log_level())
logger = logging.getLogger(__name__)

if settings.master_key():
    logger.warning("PASSCIPHER_MASTER_KEY is set: requests without a key will use it")

app = FastAPI(title="PassCipher", version="1.0")
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"], allow_credentials=True, allow_methods=["*"], allow_headers=["*"],
)


class EncryptIn(BaseModel):
    plaintext: str
    key: Optional[str] = None
    algorithm: Optional[Algorithm] = None


class DecryptIn(BaseModel):
    stored: str
    key: Optional[str] = None


class DetectIn(BaseModel):
    stored: str


def _alg_name(detected) -> str:
    return detected.value if isinstance(detected, Algorithm) else detected


def _key_or_default(key: Optional[str]) -> str:
    return key or settings.master_key()


@app.get("/health")
def health():
    return {"ok": True}


@app.get("/api/algorithms")
def algorithms():
    return {
        "default": settings.default_algorithm().value,
        "algorithms": [{"name": a.value, "tag": a.tag, "label": a.label} for a in ALGORITHMS],
    }


@app.post("/api/encrypt")
def encrypt_item(inp: EncryptIn):
    key = _key_or_default(inp.key)
    # An empty key would store the plaintext as-is behind a tag.
    if not key:
        raise HTTPException(400, "Please set a master key first")
    alg = inp.algorithm or settings.default_algorithm()
    stored = encrypt(inp.plaintext, key, alg)
    logger.info("encrypted item with %s", alg.value)
    return {"stored": stored, "algorithm": alg.value}


@app.post("/api/decrypt")
def decrypt_item(inp: DecryptIn):
    key = _key_or_default(inp.key)
    if not key:
        raise HTTPException(400, "Set master key to view")
    detected = detect_algorithm(inp.stored)
    return {"plaintext": decrypt(inp.stored, key), "algorithm": _alg_name(detected)}


@app.post("/api/detect")
def detect(inp: DetectIn):
    detected = detect_algorithm(inp.stored)
    return {"algorithm": _alg_name(detected)}


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=8000)
