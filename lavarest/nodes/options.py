from __future__ import annotations

import dataclasses

from lavarest.constants.node import DEFAULT_REST_TIMEOUT, DEFAULT_USER_AGENT


@dataclasses.dataclass(repr=True, frozen=True, kw_only=True, slots=True)
class NodeOption:
    """Connection details of a single node.

    Parameters
    ----------
    name : str
        Name of the node.
    url : str
        Host of the node, optionally followed by ``:port``.
    auth : str
        Credentials sent verbatim in the ``Authorization`` header.
    secure : bool
        Whether to use ``https`` instead of ``http``.
    group : str | None
        Group the node belongs to.
    """

    name: str
    url: str
    auth: str = dataclasses.field(repr=False)
    secure: bool = False
    group: str | None = None


@dataclasses.dataclass(repr=True, kw_only=True, slots=True)
class ClientOptions:
    """Configuration shared by every node of a manager.

    This is intentionally mutable: clients read it on every request.
    """

    user_agent: str = DEFAULT_USER_AGENT
    rest_timeout: int | float | None = DEFAULT_REST_TIMEOUT
