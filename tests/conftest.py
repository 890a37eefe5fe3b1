"""Pytest configuration and shared fixtures."""

from __future__ import annotations

import asyncio
import dataclasses
from collections.abc import Awaitable, Callable
from typing import Any

import pytest
from aiohttp import web
from multidict import CIMultiDict

from lavarest import ClientOptions, NodeOption, RestClient

Handler = Callable[[web.Request], Awaitable[web.StreamResponse]]


@dataclasses.dataclass
class FakeManager:
    options: ClientOptions


@dataclasses.dataclass
class FakeNode:
    name: str
    manager: FakeManager


@dataclasses.dataclass
class ReceivedRequest:
    method: str
    path: str
    raw_path: str
    query: dict[str, str]
    headers: CIMultiDict
    body: bytes


def respond(status: int = 200, *, json: Any = None, text: str | None = None, delay: float = 0) -> Handler:
    """Build a handler answering with the given status and body."""

    async def _handler(request: web.Request) -> web.StreamResponse:
        if delay:
            await asyncio.sleep(delay)
        if json is not None:
            return web.json_response(json, status=status)
        return web.Response(status=status, text=text)

    return _handler


@pytest.fixture
def client_options() -> ClientOptions:
    return ClientOptions(user_agent="LavaRest-Tests/1.0")


@pytest.fixture
def node(client_options) -> FakeNode:
    return FakeNode(name="test", manager=FakeManager(options=client_options))


@pytest.fixture
def received() -> list[ReceivedRequest]:
    """Requests seen by the fake node, in arrival order."""
    return []


@pytest.fixture
def routes() -> dict[str, Handler]:
    """Handlers of the fake node keyed by path, unknown paths answer 404."""
    return {}


@pytest.fixture
async def lavalink_server(aiohttp_server, received, routes):
    async def handler(request: web.Request) -> web.StreamResponse:
        received.append(
            ReceivedRequest(
                method=request.method,
                path=request.path,
                raw_path=request.raw_path,
                query=dict(request.query),
                headers=CIMultiDict(request.headers),
                body=await request.read(),
            )
        )
        route = routes.get(request.path)
        if route is None:
            return web.Response(status=404)
        return await route(request)

    app = web.Application()
    app.router.add_route("*", "/{tail:.*}", handler)
    return await aiohttp_server(app)


@pytest.fixture
def node_option(lavalink_server) -> NodeOption:
    return NodeOption(name="test", url=f"{lavalink_server.host}:{lavalink_server.port}", auth="youshallnotpass")


@pytest.fixture
async def rest(node, node_option):
    client = RestClient(node, node_option)
    yield client
    await client.close()


@pytest.fixture
def track_payload() -> dict[str, Any]:
    return {
        "track": "QAAAjQIAJVJpY2sgQXN0bGV5IC0gTmV2ZXIgR29ubmEgR2l2ZSBZb3UgVXAADlJpY2tBc3RsZXlWRVZPAAAAAAADPCAAC2RRdzR3OVdnWGNRAAEAK2h0dHBzOi8vd3d3LnlvdXR1YmUuY29tL3dhdGNoP3Y9ZFF3NHc5V2dYY1EAB3lvdXR1YmUAAAAAAAAAAA==",
        "info": {
            "identifier": "dQw4w9WgXcQ",
            "isSeekable": True,
            "author": "RickAstleyVEVO",
            "length": 212000,
            "isStream": False,
            "position": 0,
            "title": "Rick Astley - Never Gonna Give You Up",
            "uri": "https://www.youtube.com/watch?v=dQw4w9WgXcQ",
            "sourceName": "youtube",
        },
    }


@pytest.fixture
def route_planner_payload() -> dict[str, Any]:
    return {
        "class": "RotatingNanoIpRoutePlanner",
        "details": {
            "ipBlock": {"type": "Inet6Address", "size": "1208925819614629174706176"},
            "failingAddresses": [
                {
                    "address": "/1.0.0.0",
                    "failingTimestamp": 1573520707545,
                    "failingTime": "Mon Nov 11 20:05:07 EET 2019",
                }
            ],
            "blockIndex": "0",
            "currentAddressIndex": "36792023813",
        },
    }


@pytest.fixture
def serve(routes) -> Callable[..., None]:
    """Register the answer of the fake node for a path."""

    def _serve(path: str, status: int = 200, *, json: Any = None, text: str | None = None, delay: float = 0) -> None:
        routes[path] = respond(status, json=json, text=text, delay=delay)

    return _serve
