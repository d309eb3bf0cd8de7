"""Shared fixtures for the conversion proxy test suite.

The conversion service is replaced by an ``httpx.MockTransport``; no test
touches the network.
"""

import json
from typing import Any, Callable, Dict, List, Tuple, Union

import httpx
import pytest

from ytproxy.config.settings import Config
from ytproxy.main import create_app
from ytproxy.services.conversion import ConversionService
from ytproxy.services.upstream import ConverterClient

CHECK = "/check_database.php"
VIDEO_DATA = "/get_video_data.php"
CONVERT = "/download_video_ucep.php"
RECORD = "/insert_to_database.php"

RICK_URL = "https://www.youtube.com/watch?v=dQw4w9WgXcQ"
RICK_TITLE = "Rick Astley - Never Gonna Give You Up"
LINK = "https://cdn.example.com/files/dQw4w9WgXcQ.mp3"

Reply = Union[Dict[str, Any], httpx.Response, Callable[[httpx.Request], httpx.Response]]


class FakeUpstream:
    """Scripted conversion service recording every call it receives"""

    def __init__(self):
        self.replies: Dict[str, Reply] = {
            CHECK: {"success": False},
            VIDEO_DATA: {"success": True, "title": RICK_TITLE},
            CONVERT: {"success": True, "download_link": LINK},
            RECORD: {"success": True},
        }
        self.calls: List[Tuple[str, Dict[str, Any]]] = []
        self.headers: List[httpx.Headers] = []

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.calls.append((request.url.path, json.loads(request.content)))
        self.headers.append(request.headers)
        reply = self.replies[request.url.path]
        if callable(reply):
            return reply(request)
        if isinstance(reply, httpx.Response):
            return reply
        return httpx.Response(200, json=reply)

    @property
    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self.handler)

    @property
    def paths(self) -> List[str]:
        return [path for path, _ in self.calls]

    def payload(self, path: str) -> Dict[str, Any]:
        for called, body in self.calls:
            if called == path:
                return body
        raise AssertionError(f"{path} was never called")


@pytest.fixture
def anyio_backend():
    return 'asyncio'


@pytest.fixture
def config() -> Config:
    return Config(logging={"enable_rich": False})


@pytest.fixture
def upstream() -> FakeUpstream:
    return FakeUpstream()


@pytest.fixture
def service(config, upstream) -> ConversionService:
    client = ConverterClient.build(config.upstream, transport=upstream.transport)
    return ConversionService(client, config.upstream)


@pytest.fixture
def app(config, upstream):
    return create_app(config, transport=upstream.transport)


@pytest.fixture
def client_factory(app):
    def make() -> httpx.AsyncClient:
        return httpx.AsyncClient(transport=httpx.ASGITransport(app=app), base_url="http://test")
    return make
