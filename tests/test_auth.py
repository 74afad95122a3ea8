"""Tests for the bearer-token middleware."""

import pytest
from starlette.applications import Starlette
from starlette.responses import PlainTextResponse
from starlette.routing import Route
from starlette.testclient import TestClient

from mcp_server_syncthing.auth import BearerAuthMiddleware

TOKEN = "s3cret-token"


async def ok(request):
    return PlainTextResponse("ok")


@pytest.fixture
def http():
    app = Starlette(routes=[Route("/mcp", ok), Route("/health", ok)])
    app.add_middleware(BearerAuthMiddleware, token=TOKEN)
    return TestClient(app)


class TestBearerAuth:
    def test_valid_token(self, http):
        resp = http.get("/mcp", headers={"Authorization": f"Bearer {TOKEN}"})
        assert resp.status_code == 200
        assert resp.text == "ok"

    def test_scheme_case_insensitive(self, http):
        resp = http.get("/mcp", headers={"Authorization": f"bearer {TOKEN}"})
        assert resp.status_code == 200

    def test_missing_header(self, http):
        resp = http.get("/mcp")
        assert resp.status_code == 401
        assert resp.json() == {"error": "Invalid or missing bearer token"}
        assert resp.headers["WWW-Authenticate"] == "Bearer"

    def test_wrong_token(self, http):
        resp = http.get("/mcp", headers={"Authorization": "Bearer nope"})
        assert resp.status_code == 401

    def test_wrong_scheme(self, http):
        resp = http.get("/mcp", headers={"Authorization": f"Basic {TOKEN}"})
        assert resp.status_code == 401

    def test_health_unauthenticated(self, http):
        assert http.get("/health").status_code == 200
