from __future__ import annotations

import contextlib
import dataclasses
import enum
from collections.abc import Mapping
from typing import Any

from lavarest.nodes.api.responses.exceptions import LoadException
from lavarest.nodes.api.responses.playlists import Info
from lavarest.nodes.api.responses.track import Track
from lavarest.type_hints.dict_typing import JSON_DICT_TYPE


class LoadType(str, enum.Enum):
    TRACK_LOADED = "TRACK_LOADED"
    PLAYLIST_LOADED = "PLAYLIST_LOADED"
    SEARCH_RESULT = "SEARCH_RESULT"
    NO_MATCHES = "NO_MATCHES"
    LOAD_FAILED = "LOAD_FAILED"


@dataclasses.dataclass(repr=True, frozen=True, kw_only=True, slots=True)
class LavalinkResponse:
    loadType: LoadType | str | None
    playlistInfo: Info = dataclasses.field(default_factory=Info)
    tracks: list[Track] = dataclasses.field(default_factory=list)
    exception: LoadException | None = None

    def __post_init__(self) -> None:
        if isinstance(self.loadType, str) and not isinstance(self.loadType, LoadType):
            # Unknown tags are kept as plain strings
            with contextlib.suppress(ValueError):
                object.__setattr__(self, "loadType", LoadType(self.loadType))
        if isinstance(self.playlistInfo, Mapping):
            object.__setattr__(self, "playlistInfo", Info.from_dict(self.playlistInfo))
        if isinstance(self.exception, Mapping):
            object.__setattr__(self, "exception", LoadException.from_dict(self.exception))
        temp = []
        for s in self.tracks:
            if isinstance(s, Track) or (isinstance(s, Mapping) and (s := Track.from_dict(s))):
                temp.append(s)
        object.__setattr__(self, "tracks", temp)

    def __bool__(self) -> bool:
        return self.loadType not in (LoadType.NO_MATCHES, LoadType.LOAD_FAILED)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> LavalinkResponse:
        tracks = data.get("tracks")
        exception = data.get("exception")
        return cls(
            loadType=data.get("loadType"),
            playlistInfo=Info.from_dict(data.get("playlistInfo")),
            tracks=tracks if isinstance(tracks, list) else [],
            exception=exception if isinstance(exception, Mapping) else None,
        )

    def to_dict(self) -> JSON_DICT_TYPE:
        return {
            "loadType": self.loadType.value if isinstance(self.loadType, LoadType) else self.loadType,
            "playlistInfo": self.playlistInfo.to_dict(),
            "tracks": [t.to_dict() for t in self.tracks],
            "exception": dataclasses.asdict(self.exception) if self.exception else None,
        }
