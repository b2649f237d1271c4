"""
Pytest configuration and fixtures
"""
import json

import httpx
import pytest

from fashion_adviser.config import Settings

TOKEN_URL = "https://idcs.example.com/oauth2/v1/token"
DECISION_URL = "https://opa.example.com/decision/api/v1/fashion-adviser"


@pytest.fixture
def settings() -> Settings:
    return Settings(
        token_url=TOKEN_URL,
        client_id="bot-client",
        client_secret="s3cret",
        scope="urn:opc:resource:consumer::all",
        decision_service_url=DECISION_URL,
        _env_file=None,
    )


class FakeServer:
    """Routes requests by URL to canned responses and records what was sent."""

    def __init__(self):
        self.requests: list[httpx.Request] = []
        self.routes: dict[str, httpx.Response | Exception] = {}

    def reply(self, url: str, status_code: int = 200, json_body=None, text: str | None = None):
        if text is not None:
            self.routes[url] = httpx.Response(status_code, text=text)
        else:
            self.routes[url] = httpx.Response(status_code, json=json_body)

    def fail(self, url: str, error: Exception):
        self.routes[url] = error

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        route = self.routes[str(request.url)]
        if isinstance(route, Exception):
            raise route
        return route

    def client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(transport=httpx.MockTransport(self.handler))

    def sent_to(self, url: str) -> list[httpx.Request]:
        return [r for r in self.requests if str(r.url) == url]

    def json_sent(self, url: str) -> dict:
        return json.loads(self.sent_to(url)[-1].content.decode("utf-8"))


@pytest.fixture
def server() -> FakeServer:
    return FakeServer()
