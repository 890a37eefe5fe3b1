from __future__ import annotations

import dataclasses
from collections.abc import Mapping
from typing import Any

from lavarest.type_hints.dict_typing import JSON_DICT_TYPE


@dataclasses.dataclass(repr=True, frozen=True, kw_only=True, slots=True)
class Info:
    name: str | None = None
    selectedTrack: int | None = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any] | None) -> Info:
        if not isinstance(data, Mapping):
            data = {}
        return cls(name=data.get("name"), selectedTrack=data.get("selectedTrack"))

    def to_dict(self) -> JSON_DICT_TYPE:
        return dataclasses.asdict(self)
