from __future__ import annotations

import dataclasses
from collections.abc import Mapping
from typing import Any

from lavarest.type_hints.dict_typing import JSON_DICT_TYPE


@dataclasses.dataclass(repr=True, frozen=True, kw_only=True, slots=True)
class Info:
    identifier: str | None = None
    isSeekable: bool | None = None
    author: str | None = None
    length: int | None = None
    isStream: bool | None = None
    position: int | None = None
    title: str | None = None
    uri: str | None = None
    sourceName: str | None = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Info:
        return cls(**{f.name: data.get(f.name) for f in dataclasses.fields(cls)})

    def to_dict(self) -> JSON_DICT_TYPE:
        return dataclasses.asdict(self)


@dataclasses.dataclass(repr=True, frozen=True, kw_only=True, slots=True)
class Track:
    info: Info
    track: str | None = None

    def __post_init__(self) -> None:
        if isinstance(self.info, Mapping):
            object.__setattr__(self, "info", Info.from_dict(self.info))

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Track:
        # Older nodes answer /decodetrack with the bare info object
        info = data.get("info")
        return cls(track=data.get("track"), info=info if isinstance(info, Mapping) else data)

    def to_dict(self) -> JSON_DICT_TYPE:
        return {"track": self.track, "info": self.info.to_dict()}
