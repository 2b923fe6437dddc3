# app_client.py
from dataclasses import dataclass, field
from typing import Optional

import requests

import settings


@dataclass
class Session:
    api: str = field(default_factory=settings.api_url)
    key: Optional[str] = None
    timeout: float = 10.0


def _check(r: requests.Response) -> dict:
    # 400s carry a message meant for the user (e.g. missing master key)
    if r.status_code == 400:
        try:
            msg = r.json().get("detail") or r.text
        except ValueError:
            msg = r.text or r.reason
        raise RuntimeError(msg)
    r.raise_for_status()
    return r.json()


def api_algorithms(sess: Session) -> dict:
    r = requests.get(f"{sess.api}/api/algorithms", timeout=sess.timeout)
    return _check(r)


def api_encrypt(sess: Session, plaintext: str, algorithm: Optional[str] = None) -> str:
    body = {"plaintext": plaintext, "key": sess.key}
    if algorithm:
        body["algorithm"] = algorithm
    r = requests.post(f"{sess.api}/api/encrypt", json=body, timeout=sess.timeout)
    return _check(r)["stored"]


def api_decrypt(sess: Session, stored: str) -> str:
    r = requests.post(f"{sess.api}/api/decrypt", json={"stored": stored, "key": sess.key},
                      timeout=sess.timeout)
    return _check(r)["plaintext"]


def api_detect(sess: Session, stored: str) -> str:
    r = requests.post(f"{sess.api}/api/detect", json={"stored": stored}, timeout=sess.timeout)
    return _check(r)["algorithm"]
