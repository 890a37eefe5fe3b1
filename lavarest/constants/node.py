from __future__ import annotations

from lavarest import __version__

DEFAULT_USER_AGENT = f"LavaRest/{__version__}"
DEFAULT_REST_TIMEOUT = 15000
ERROR_STATUS_THRESHOLD = 400
UNAUTHORIZED_STATUSES = frozenset({401, 403})
# Methods that carry a JSON body when one is supplied; every other method drops it.
BODY_METHODS = frozenset({"GET", "HEAD"})

ENDPOINT_LOADTRACKS = "/loadtracks"
ENDPOINT_DECODETRACK = "/decodetrack"
ENDPOINT_ROUTEPLANNER_STATUS = "/routeplanner/status"
ENDPOINT_ROUTEPLANNER_FREE_ADDRESS = "/routeplanner/free/address"
ENDPOINT_ROUTEPLANNER_FREE_ALL = "/routeplanner/free/all"
