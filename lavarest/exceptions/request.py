from __future__ import annotations

from typing import TYPE_CHECKING

from lavarest.exceptions.base import LavaRestException

if TYPE_CHECKING:
    from lavarest.nodes.api.responses.errors import LavalinkError


class RequestException(LavaRestException):
    """Base exception for REST request errors"""


class HTTPException(RequestException):
    """Raised when the node answers a REST request with a status code of 400 or above.

    Attributes
    ----------
    status : int
        The status code returned by the node.
    response : LavalinkError | None
        The error body sent by the node, if it sent one that could be decoded.
    """

    def __init__(self, status: int, response: LavalinkError | None = None) -> None:
        self.status = status
        self.response = response
        super().__init__(f"Rest request failed with response code: {status}")

    def __bool__(self) -> bool:
        return False


class UnauthorizedException(HTTPException):
    """Raised when a REST request fails due to an incorrect password"""


class RequestTimeoutException(RequestException, TimeoutError):
    """Raised when the node does not answer a REST request before the configured timeout.

    Attributes
    ----------
    timeout : float
        The timeout that elapsed, in seconds.
    """

    def __init__(self, timeout: float) -> None:
        self.timeout = timeout
        super().__init__(f"Rest request was aborted after {timeout:g} seconds")
