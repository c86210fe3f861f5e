from __future__ import annotations

import logging

from starlette.responses import Response

from app.services.bookmark_cookie import (
    DEFAULT_MAX_AGE_SECONDS,
    build_clear_cookie,
    build_set_cookie,
    extract_token,
    no_store_headers,
)
from app.utils.metrics import (
    BOOKMARK_COOKIE_ENCODE_FAILURES,
    BOOKMARK_COOKIE_READS,
    BOOKMARK_SET_SIZE,
    BOOKMARK_TOGGLES,
)
from app.utils.signed_cookie import DecodedBookmarks, decode_bookmarks, encode_bookmarks

logger = logging.getLogger(__name__)


def read_bookmarks(cookie_header: str | None, secret: str) -> DecodedBookmarks:
    """Cookie header → verified (ids, invalid)."""
    token = extract_token(cookie_header)
    result = decode_bookmarks(token, secret)
    if result.invalid:
        outcome = "invalid"
    elif token:
        outcome = "valid"
    else:
        outcome = "absent"
    BOOKMARK_COOKIE_READS.labels(outcome=outcome).inc()
    return result


def toggle_bookmark(current: DecodedBookmarks, article_id: str) -> set[str]:
    """
    Flip membership of article_id.

    Fail closed: an invalid cookie is never used as a base for the update,
    the new set starts empty instead.
    """
    ids = set() if current.invalid else set(current.ids)
    if article_id in ids:
        ids.discard(article_id)
        BOOKMARK_TOGGLES.labels(action="removed").inc()
    else:
        ids.add(article_id)
        BOOKMARK_TOGGLES.labels(action="added").inc()
    return ids


def signed_cookie_header(
    ids: set[str], secret: str, max_age: int = DEFAULT_MAX_AGE_SECONDS
) -> str:
    """Set-Cookie value for the new set; a clear-cookie if signing fails."""
    try:
        token = encode_bookmarks(ids, secret)
    except Exception:
        logger.exception("Failed to sign bookmark cookie; clearing it instead")
        BOOKMARK_COOKIE_ENCODE_FAILURES.inc()
        return build_clear_cookie()
    BOOKMARK_SET_SIZE.observe(len(ids))
    return build_set_cookie(token, max_age)


def apply_read_headers(response: Response, result: DecodedBookmarks) -> Response:
    """Read path headers: always no-store, plus a clear-cookie for a broken cookie."""
    response.headers.update(no_store_headers())
    if result.invalid:
        response.headers.append("set-cookie", build_clear_cookie())
    return response


def safe_return_to(value: object) -> str:
    """Only same-origin relative paths ("/x", not "//host") are allowed."""
    if isinstance(value, str) and value.startswith("/") and not value.startswith("//"):
        return value
    return "/"
