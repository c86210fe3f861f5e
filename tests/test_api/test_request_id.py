"""RequestIdMiddleware: X-Request-ID propagation."""
import pytest


@pytest.mark.unit
class TestRequestId:
    async def test_generated_when_absent(self, app_client):
        resp = await app_client.get("/health")
        assert len(resp.headers["x-request-id"]) == 12

    async def test_incoming_id_echoed(self, app_client):
        resp = await app_client.get("/health", headers={"X-Request-ID": "abc-123"})
        assert resp.headers["x-request-id"] == "abc-123"

    async def test_unsafe_incoming_id_replaced(self, app_client):
        resp = await app_client.get("/health", headers={"X-Request-ID": "a b\"<script>"})
        assert resp.headers["x-request-id"] != "a b\"<script>"
        assert len(resp.headers["x-request-id"]) == 12

    async def test_error_responses_carry_id(self, app_client, missing_secret):
        resp = await app_client.get("/api/bookmarks")
        assert resp.status_code == 500
        assert "x-request-id" in resp.headers
