"""Root conftest: signing secret, app client, cookie helpers."""
import base64
import hashlib
import hmac
import os

import pytest
import pytest_asyncio

# Must be set before app.main builds GlobalConfig
TEST_SECRET = "test-secret-do-not-use"
os.environ["APP_SECRET"] = TEST_SECRET
os.environ.setdefault("TOGGLE_RATE_LIMIT", "1000/minute")


@pytest.fixture
def secret() -> str:
    return TEST_SECRET


@pytest_asyncio.fixture
async def app_client():
    """FastAPI test client over ASGI transport (no lifespan, no network)."""
    from httpx import ASGITransport, AsyncClient

    from app.main import app

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client


@pytest.fixture
def missing_secret(monkeypatch):
    """Simulate a deployment without APP_SECRET."""
    from app.main import app

    monkeypatch.setattr(app.state.settings, "app_secret", "")


def sign_raw_payload(payload: bytes, secret: str = TEST_SECRET) -> str:
    """Build a token around arbitrary bytes, signed with the given secret."""
    sig = hmac.new(secret.encode("utf-8"), payload, hashlib.sha256).digest()
    return f"{base64.b64encode(payload).decode()}.{base64.b64encode(sig).decode()}"


def cookie_token(set_cookie_header: str) -> str:
    """'edge_saved=<token>; Path=/; ...' → '<token>'"""
    first = set_cookie_header.split(";", 1)[0]
    name, _, value = first.partition("=")
    assert name == "edge_saved"
    return value
