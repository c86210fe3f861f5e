"""
Signed bookmark cookie codec.

Token format: base64(payload_json) + "." + base64(hmac_sha256(payload_json))
  - payload_json = {"ids": [...sorted, deduplicated...], "iat": unix_seconds}
  - standard base64 alphabet, padded
  - HMAC key = secret.encode("utf-8")

decode never raises for bad input. Malformed or forged tokens come back as
(empty set, invalid=True); only crypto backend failures propagate.
"""
from __future__ import annotations

import base64
import binascii
import logging
import time
from collections.abc import Iterable
from typing import Any, NamedTuple

from cryptography.exceptions import InvalidSignature
from cryptography.hazmat.primitives import hashes, hmac
from pydantic import BaseModel, ConfigDict, ValidationError, field_validator

logger = logging.getLogger(__name__)


class BookmarkPayload(BaseModel):
    """Signed part of the cookie. iat is recorded but never checked."""

    model_config = ConfigDict(extra="ignore")

    ids: list[Any]
    iat: Any = None

    @field_validator("ids")
    @classmethod
    def keep_non_empty_strings(cls, v: list[Any]) -> list[Any]:
        # 잘못된 원소 하나 때문에 전체 decode를 실패시키지 않음
        return [item for item in v if isinstance(item, str) and item]


class DecodedBookmarks(NamedTuple):
    ids: set[str]
    invalid: bool


def _mac(secret: str, message: bytes) -> hmac.HMAC:
    h = hmac.HMAC(secret.encode("utf-8"), hashes.SHA256())
    h.update(message)
    return h


def _b64encode(raw: bytes) -> str:
    return base64.b64encode(raw).decode("ascii")


def _b64decode(segment: str) -> bytes | None:
    try:
        return base64.b64decode(segment, validate=True)
    except (binascii.Error, ValueError):
        return None


def encode_bookmarks(ids: Iterable[str], secret: str) -> str:
    """Sign a bookmark set into a cookie token."""
    payload = BookmarkPayload(ids=sorted(set(ids)), iat=int(time.time()))
    payload_bytes = payload.model_dump_json().encode("utf-8")
    signature = _mac(secret, payload_bytes).finalize()
    return f"{_b64encode(payload_bytes)}.{_b64encode(signature)}"


def decode_bookmarks(token: str | None, secret: str) -> DecodedBookmarks:
    """
    Verify a cookie token and return the trusted bookmark set.

    No token → (set(), False): no bookmarks yet, not an error.
    Anything malformed, forged or signed with another key → (set(), True).
    """
    if not token:
        return DecodedBookmarks(set(), False)

    payload_b64, _, sig_b64 = token.partition(".")
    if not payload_b64 or not sig_b64:
        logger.warning("Bookmark cookie rejected: missing segment")
        return DecodedBookmarks(set(), True)

    payload_bytes = _b64decode(payload_b64)
    signature = _b64decode(sig_b64)
    if payload_bytes is None or signature is None:
        logger.warning("Bookmark cookie rejected: malformed base64")
        return DecodedBookmarks(set(), True)

    try:
        _mac(secret, payload_bytes).verify(signature)
    except InvalidSignature:
        logger.warning("Bookmark cookie rejected: signature mismatch")
        return DecodedBookmarks(set(), True)

    try:
        payload = BookmarkPayload.model_validate_json(payload_bytes)
    except ValidationError as e:
        logger.warning("Bookmark cookie rejected: bad payload (%d errors)", e.error_count())
        return DecodedBookmarks(set(), True)

    return DecodedBookmarks(set(payload.ids), False)
