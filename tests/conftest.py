import socket
from typing import Any, Callable, Dict, List, Optional

import httpx
import pytest
from fastapi.testclient import TestClient

from address_gateway.adapters.juso_client import JusoClient
from address_gateway.api.dependencies import get_client_factory, get_settings_dependency
from address_gateway.core.config import Settings
from address_gateway.main import app


def juso_payload(
    juso: Optional[List[Dict[str, Any]]] = None,
    error_code: str = "0",
    error_message: str = "정상",
) -> Dict[str, Any]:
    """Upstream envelope in the shape the address API returns."""
    results: Dict[str, Any] = {
        "common": {
            "errorCode": error_code,
            "errorMessage": error_message,
            "totalCount": str(len(juso or [])),
            "currentPage": "1",
            "countPerPage": "10",
        },
    }
    if juso is not None:
        results["juso"] = juso
    return {"results": results}


class FakeUpstream:
    """Records outbound requests and answers with a canned response."""

    def __init__(self):
        self.requests: List[httpx.Request] = []
        self.handler: Callable[[httpx.Request], httpx.Response] = (
            lambda request: httpx.Response(200, json=juso_payload([]))
        )

    def reply_json(self, payload: Any, status_code: int = 200) -> None:
        self.handler = lambda request: httpx.Response(status_code, json=payload)

    def reply_text(self, text: str, status_code: int = 200) -> None:
        self.handler = lambda request: httpx.Response(status_code, text=text)

    def fail(self, exc_factory: Callable[[httpx.Request], Exception]) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            raise exc_factory(request)
        self.handler = handler

    def _dispatch(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return self.handler(request)

    def client_factory(self, settings: Settings) -> JusoClient:
        return JusoClient(
            api_url=settings.JUSO_API_URL,
            api_key=settings.JUSO_API_KEY or "",
            timeout=settings.JUSO_TIMEOUT,
            transport=httpx.MockTransport(self._dispatch),
        )


@pytest.fixture(autouse=True)
def block_network(monkeypatch):
    real_connect = socket.socket.connect

    def guarded_connect(sock, address):
        host = address[0] if isinstance(address, tuple) else address
        if host not in ("127.0.0.1", "localhost"):
            raise RuntimeError("Network access blocked in tests")
        return real_connect(sock, address)

    monkeypatch.setattr(socket.socket, "connect", guarded_connect)


@pytest.fixture()
def settings() -> Settings:
    return Settings(_env_file=None, JUSO_API_KEY="test-key")


@pytest.fixture()
def upstream() -> FakeUpstream:
    return FakeUpstream()


@pytest.fixture()
def client(settings, upstream):
    app.dependency_overrides[get_settings_dependency] = lambda: settings
    app.dependency_overrides[get_client_factory] = lambda: upstream.client_factory
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()


@pytest.fixture()
def keyless_client(upstream):
    app.dependency_overrides[get_settings_dependency] = lambda: Settings(
        _env_file=None, JUSO_API_KEY=None
    )
    app.dependency_overrides[get_client_factory] = lambda: upstream.client_factory
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()
