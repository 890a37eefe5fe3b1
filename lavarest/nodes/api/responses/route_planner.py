from __future__ import annotations

import dataclasses
from collections.abc import Mapping
from typing import Any, Literal

from lavarest.type_hints.dict_typing import JSON_DICT_TYPE

BOOKKEEPING_FIELDS = ("rotateIndex", "ipIndex", "currentAddress", "blockIndex", "currentAddressIndex")
RoutePlannerClass = Literal[
    "RotatingIpRoutePlanner", "NanoIpRoutePlanner", "RotatingNanoIpRoutePlanner", "BalancingIpRoutePlanner"
]


@dataclasses.dataclass(repr=True, frozen=True, kw_only=True, slots=True)
class IPBlock:
    type: Literal["Inet4Address", "Inet6Address"] | str | None = None
    size: str | None = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any] | None) -> IPBlock:
        if not isinstance(data, Mapping):
            data = {}
        return cls(type=data.get("type"), size=data.get("size"))


@dataclasses.dataclass(repr=True, frozen=True, kw_only=True, slots=True)
class FailingAddress:
    address: str | None = None
    failingTimestamp: int | None = None
    failingTime: str | None = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> FailingAddress:
        return cls(
            address=data.get("address") or data.get("failingAddress"),
            failingTimestamp=data.get("failingTimestamp"),
            failingTime=data.get("failingTime"),
        )


@dataclasses.dataclass(repr=True, frozen=True, kw_only=True, slots=True)
class Details:
    ipBlock: IPBlock = dataclasses.field(default_factory=IPBlock)
    failingAddresses: list[FailingAddress] = dataclasses.field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Details:
        addresses = data.get("failingAddresses")
        if not isinstance(addresses, list):
            addresses = []
        return cls(
            ipBlock=IPBlock.from_dict(data.get("ipBlock")),
            failingAddresses=[FailingAddress.from_dict(a) for a in addresses if isinstance(a, Mapping)],
        )


@dataclasses.dataclass(repr=True, frozen=True, kw_only=True, slots=True)
class Status:
    """Route planner status of a node.

    Every field is optional, a node without a route planner reports nothing.
    ``type`` holds the planner class name, sent by the node as ``class``.
    """

    type: RoutePlannerClass | str | None = None
    details: Details | None = None
    rotateIndex: str | None = None
    ipIndex: str | None = None
    currentAddress: str | None = None
    blockIndex: str | None = None
    currentAddressIndex: str | None = None

    def __post_init__(self) -> None:
        if isinstance(self.details, Mapping):
            object.__setattr__(self, "details", Details.from_dict(self.details))

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Status:
        details = data.get("details")
        # Newer nodes nest the bookkeeping fields inside the details
        nested = details if isinstance(details, Mapping) else {}
        return cls(
            type=data.get("class"),
            details=details if isinstance(details, Mapping) else None,
            **{name: data.get(name, nested.get(name)) for name in BOOKKEEPING_FIELDS},
        )

    def to_dict(self) -> JSON_DICT_TYPE:
        data = dataclasses.asdict(self)
        data["class"] = data.pop("type")
        return data
