from __future__ import annotations

import dataclasses
from collections.abc import Mapping
from datetime import datetime
from typing import Any


@dataclasses.dataclass(repr=True, frozen=True, kw_only=True, slots=True)
class LavalinkError:
    timestamp: int | datetime | None = None
    status: int | None = None
    error: str | None = None
    message: str | None = None
    path: str | None = None
    trace: str | None = None

    def __post_init__(self) -> None:
        if isinstance(self.timestamp, int):
            object.__setattr__(self, "timestamp", datetime.fromtimestamp(self.timestamp / 1000))

    def __bool__(self) -> bool:
        return False

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> LavalinkError:
        return cls(**{f.name: data.get(f.name) for f in dataclasses.fields(cls)})
