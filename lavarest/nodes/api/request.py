from __future__ import annotations

import dataclasses

from lavarest.type_hints.dict_typing import JSON_DICT_TYPE


@dataclasses.dataclass(repr=True, frozen=True, kw_only=True, slots=True)
class Request:
    method: str = "GET"
    headers: dict[str, str] | None = None
    params: dict[str, str] | None = None
    body: JSON_DICT_TYPE | None = None

    @property
    def resolved_method(self) -> str:
        return (self.method or "GET").upper()
