"""Unit tests for the admin API client"""

import httpx
import pytest

from workmongolia.client.api_client import ApiClient
from workmongolia.core.exceptions import RequestFailedError


def make_client(handler) -> ApiClient:
    return ApiClient(base_url="http://backend", transport=httpx.MockTransport(handler))


class TestApiClient:
    """Tests for ApiClient"""

    async def test_returns_decoded_body(self):
        seen = {}

        def handler(request):
            seen["method"] = request.method
            seen["body"] = request.content
            return httpx.Response(201, json={"id": 1, "name": "React"})

        async with make_client(handler) as client:
            data = await client.post("/api/v1/admin/skills", {"name": "React"})

        assert data == {"id": 1, "name": "React"}
        assert seen["method"] == "POST"
        assert b'"name"' in seen["body"]

    async def test_empty_body_returns_none(self):
        async with make_client(lambda request: httpx.Response(204)) as client:
            assert await client.delete("/api/v1/admin/skills/1") is None

    async def test_error_body_message(self):
        def handler(request):
            return httpx.Response(409, json={"error": "Skill already exists: React", "details": {}})

        async with make_client(handler) as client:
            with pytest.raises(RequestFailedError) as exc_info:
                await client.post("/api/v1/admin/skills", {"name": "React"})

        assert exc_info.value.status_code == 409
        assert exc_info.value.message == "409: Skill already exists: React"

    async def test_detail_body_message(self):
        def handler(request):
            return httpx.Response(405, json={"detail": "Method Not Allowed"})

        async with make_client(handler) as client:
            with pytest.raises(RequestFailedError, match="405: Method Not Allowed"):
                await client.get("/api/v1/admin/skills")

    async def test_plain_text_error(self):
        def handler(request):
            return httpx.Response(502, text="upstream down")

        async with make_client(handler) as client:
            with pytest.raises(RequestFailedError) as exc_info:
                await client.get("/api/v1/admin/skills")

        assert exc_info.value.status_code == 502
        assert exc_info.value.message == "502: Bad Gateway - upstream down"

    async def test_timeout_reports_status_zero(self):
        def handler(request):
            raise httpx.ReadTimeout("timed out", request=request)

        async with make_client(handler) as client:
            with pytest.raises(RequestFailedError) as exc_info:
                await client.get("/api/v1/admin/skills")

        assert exc_info.value.status_code == 0
        assert "timed out" in exc_info.value.message

    async def test_connection_error_reports_status_zero(self):
        def handler(request):
            raise httpx.ConnectError("refused", request=request)

        async with make_client(handler) as client:
            with pytest.raises(RequestFailedError) as exc_info:
                await client.get("/api/v1/admin/skills")

        assert exc_info.value.status_code == 0
        assert exc_info.value.message.startswith("Network error")
