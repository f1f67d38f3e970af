"""Pytest 配置文件"""

import httpx
import pytest


class RecordingTransport(httpx.MockTransport):
    """MockTransport that keeps every request it served."""

    def __init__(self, handler):
        self.requests: list[httpx.Request] = []

        def record(request: httpx.Request) -> httpx.Response:
            self.requests.append(request)
            return handler(request)

        super().__init__(record)

    @property
    def last_request(self) -> httpx.Request:
        return self.requests[-1]


@pytest.fixture
def make_transport():
    """Build a transport answering every request with the given status and body"""

    def factory(status_code: int = 200, content: bytes = b"", headers: dict | None = None):
        return RecordingTransport(
            lambda request: httpx.Response(status_code, content=content, headers=headers)
        )

    return factory


@pytest.fixture
def ok_transport(make_transport):
    return make_transport(200, b'{"code":0}', {"content-type": "application/json"})
