from __future__ import annotations

from typing import Protocol


class ClientOptionsLike(Protocol):
    user_agent: str
    rest_timeout: int | float | None


class ManagerLike(Protocol):
    @property
    def options(self) -> ClientOptionsLike:
        ...


class NodeLike(Protocol):
    """The part of a node the REST client relies on.

    The manager's options are read on every request, so changes made to them at
    runtime apply to the next call.
    """

    @property
    def name(self) -> str:
        ...

    @property
    def manager(self) -> ManagerLike:
        ...
