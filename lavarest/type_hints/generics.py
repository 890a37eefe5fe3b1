from __future__ import annotations

from collections.abc import Callable
from typing import Any, TypeVar

ANY_GENERIC_TYPE = TypeVar("ANY_GENERIC_TYPE")

RESPONSE_LOADER = Callable[[dict[str, Any]], ANY_GENERIC_TYPE]
