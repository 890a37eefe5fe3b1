from __future__ import annotations

import asyncio
import contextlib
from types import TracebackType
from typing import TYPE_CHECKING, Any

import aiohttp
from multidict import CIMultiDict
from yarl import URL

from lavarest.compat import json
from lavarest.constants.node import (
    BODY_METHODS,
    DEFAULT_REST_TIMEOUT,
    ENDPOINT_DECODETRACK,
    ENDPOINT_LOADTRACKS,
    ENDPOINT_ROUTEPLANNER_FREE_ADDRESS,
    ENDPOINT_ROUTEPLANNER_FREE_ALL,
    ENDPOINT_ROUTEPLANNER_STATUS,
    ERROR_STATUS_THRESHOLD,
    UNAUTHORIZED_STATUSES,
)
from lavarest.exceptions.request import HTTPException, RequestTimeoutException, UnauthorizedException
from lavarest.logging import getLogger
from lavarest.nodes.api.request import Request
from lavarest.nodes.api.responses.errors import LavalinkError
from lavarest.nodes.api.responses.rest_api import LavalinkResponse
from lavarest.nodes.api.responses.route_planner import Status as RoutePlannerStatus
from lavarest.nodes.api.responses.track import Track
from lavarest.type_hints.generics import ANY_GENERIC_TYPE, RESPONSE_LOADER

if TYPE_CHECKING:
    from lavarest.nodes.options import NodeOption
    from lavarest.type_hints.node import NodeLike


class RestClient:
    """Wrapper around the Lavalink REST API of a single node.

    Parameters
    ----------
    node : NodeLike
        The node that owns this client, its manager options are read on every request.
    options : NodeOption
        The connection details of the node.
    session : aiohttp.ClientSession | None
        The session to send requests with. When omitted the client creates one on first use
        and closes it in :meth:`close`.
    """

    __slots__ = (
        "_node",
        "_url",
        "_auth",
        "_session",
        "_owns_session",
        "_logger",
    )

    def __init__(self, node: NodeLike, options: NodeOption, session: aiohttp.ClientSession | None = None) -> None:
        self._node = node
        self._url = f"{'https' if options.secure else 'http'}://{options.url}"
        self._auth = options.auth
        self._session = session
        self._owns_session = session is None
        self._logger = getLogger(f"LavaRest.Rest-{node.name}")

    @property
    def node(self) -> NodeLike:
        """The node that initialized this client"""
        return self._node

    @property
    def url(self) -> str:
        """The base URL of the node"""
        return self._url

    @property
    def user_agent(self) -> str:
        """The User-Agent sent with the next request"""
        return self._node.manager.options.user_agent

    @property
    def timeout(self) -> float:
        """The timeout applied to the next request, in seconds"""
        return (self._node.manager.options.rest_timeout or DEFAULT_REST_TIMEOUT) / 1000

    @property
    def session(self) -> aiohttp.ClientSession:
        """The session used to send requests"""
        if self._session is None or (self._owns_session and self._session.closed):
            self._session = aiohttp.ClientSession(json_serialize=json.dumps)
        return self._session

    async def close(self) -> None:
        """|coro|
        Closes the session if it was created by this client.
        """
        if self._owns_session and self._session is not None and not self._session.closed:
            await self._session.close()

    async def __aenter__(self) -> RestClient:
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        await self.close()

    def __repr__(self) -> str:
        return f"<RestClient node={self._node.name!r} url={self._url!r}>"

    # REST API
    async def resolve(self, identifier: str) -> LavalinkResponse | None:
        """|coro|
        Resolves a track, playlist or search query.

        Parameters
        ----------
        identifier : str
            The identifier to resolve, e.g. a URL or ``ytsearch:query``.

        Returns
        -------
        LavalinkResponse | None
            The response of the node, or None if it sent nothing usable.
        """
        return await self._request(
            ENDPOINT_LOADTRACKS, Request(params={"identifier": identifier}), LavalinkResponse.from_dict
        )

    async def decode(self, track: str) -> Track | None:
        """|coro|
        Decodes an encoded track.

        Parameters
        ----------
        track : str
            The encoded track.

        Returns
        -------
        Track | None
            The decoded track, or None if the node sent nothing usable.
        """
        return await self._request(ENDPOINT_DECODETRACK, Request(params={"track": track}), Track.from_dict)

    async def get_route_planner_status(self) -> RoutePlannerStatus | None:
        """|coro|
        Fetches the route planner status of the node.
        """
        return await self._request(ENDPOINT_ROUTEPLANNER_STATUS, Request(), RoutePlannerStatus.from_dict)

    async def unmark_failed_address(self, address: str) -> None:
        """|coro|
        Releases a failing address back into the route planner pool.

        Parameters
        ----------
        address : str
            The IP address to release.
        """
        await self._request(
            ENDPOINT_ROUTEPLANNER_FREE_ADDRESS,
            Request(method="POST", headers={"Content-Type": "application/json"}, body={"address": address}),
        )

    async def unmark_all_failed_addresses(self) -> None:
        """|coro|
        Releases every failing address back into the route planner pool.
        """
        await self._request(ENDPOINT_ROUTEPLANNER_FREE_ALL, Request(method="POST"))

    async def _request(
        self,
        endpoint: str,
        request: Request,
        loader: RESPONSE_LOADER[ANY_GENERIC_TYPE] | None = None,
    ) -> ANY_GENERIC_TYPE | Any | None:
        """|coro|
        Sends a request to the node and interprets its response.

        Parameters
        ----------
        endpoint : str
            The path of the endpoint, appended to the base URL.
        request : Request
            The method, headers, query parameters and body of the request.
        loader : Callable[[dict[str, Any]], T] | None
            Builds the result from the JSON object sent by the node.
            When omitted the decoded JSON is returned as is.

        Returns
        -------
        T | Any | None
            The result, or None if the node sent no body or a body that isn't JSON.

        Raises
        ------
        HTTPException
            If the node answered with a status code of 400 or above.
        UnauthorizedException
            If the node rejected the credentials.
        RequestTimeoutException
            If the node did not answer before the timeout elapsed.
        """
        headers = CIMultiDict(
            {
                "Authorization": self._auth,
                "User-Agent": self.user_agent,
                "Content-Type": "application/json",
            }
        )
        if request.headers:
            headers.update(request.headers)

        url = URL(f"{self._url}{endpoint}")
        if request.params:
            url = url.with_query(request.params)

        method = request.resolved_method
        kwargs = {}
        if method in BODY_METHODS and request.body is not None:
            kwargs["json"] = request.body

        timeout = self.timeout
        self._logger.trace("Sending %s %s", method, url)
        deadline = asyncio.timeout(timeout)
        try:
            async with deadline:
                async with self.session.request(method, url, headers=headers, **kwargs) as res:
                    status = res.status
                    payload = await res.read()
        except TimeoutError as exc:
            if not deadline.expired():
                # aiohttp's own socket and connect timeouts
                raise
            self._logger.debug("%s %s aborted after %g seconds", method, url, timeout)
            raise RequestTimeoutException(timeout) from exc

        if status >= ERROR_STATUS_THRESHOLD:
            failure = self._parse_failure(payload)
            self._logger.trace(
                "%s %s failed: %d %s", method, url, status, failure.message if failure is not None else None
            )
            if status in UNAUTHORIZED_STATUSES:
                raise UnauthorizedException(status, failure)
            raise HTTPException(status, failure)

        if not payload:
            self._logger.trace("%s %s returned no body", method, url)
            return None
        try:
            data = json.loads(payload)
        except (ValueError, RecursionError):
            self._logger.trace("%s %s returned a body that isn't JSON", method, url)
            return None
        if data is None or (not data and not isinstance(data, (dict, list))):
            return None
        self._logger.trace("%s %s response: %s", method, url, data)
        if loader is None:
            return data
        if not isinstance(data, dict):
            return None
        return loader(data)

    @staticmethod
    def _parse_failure(payload: bytes) -> LavalinkError | None:
        with contextlib.suppress(ValueError, OverflowError, OSError, RecursionError):
            data = json.loads(payload)
            if isinstance(data, dict):
                return LavalinkError.from_dict(data)
        return None
