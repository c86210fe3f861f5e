from __future__ import annotations

BOOKMARK_COOKIE_NAME = "edge_saved"
DEFAULT_MAX_AGE_SECONDS = 30 * 24 * 3600  # 30 days

NO_STORE = "private, no-store"

# Set-Cookie is written by hand: Response.set_cookie() quotes base64 values
# ("=", "/") and reorders attributes, which breaks cookies already issued.
_COOKIE_ATTRIBUTES = "Path=/; HttpOnly; Secure; SameSite=Lax"


def parse_cookie_header(cookie_header: str | None) -> dict[str, str]:
    """'a=1; b=2' → {"a": "1", "b": "2"}. Pairs without '=' are skipped."""
    if not cookie_header:
        return {}
    cookies: dict[str, str] = {}
    for part in cookie_header.split(";"):
        part = part.strip()
        if not part:
            continue
        name, sep, value = part.partition("=")
        if not sep:
            continue
        cookies[name] = value
    return cookies


def extract_token(cookie_header: str | None) -> str | None:
    """Raw bookmark token from a Cookie header, or None when absent."""
    return parse_cookie_header(cookie_header).get(BOOKMARK_COOKIE_NAME)


def build_set_cookie(token: str, max_age_seconds: int = DEFAULT_MAX_AGE_SECONDS) -> str:
    return f"{BOOKMARK_COOKIE_NAME}={token}; {_COOKIE_ATTRIBUTES}; Max-Age={max_age_seconds}"


def build_clear_cookie() -> str:
    return f"{BOOKMARK_COOKIE_NAME}=; {_COOKIE_ATTRIBUTES}; Max-Age=0"


def no_store_headers() -> dict[str, str]:
    """Headers for any response whose body depends on the bookmark cookie."""
    return {"Cache-Control": NO_STORE}
