from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, Dict, Iterator, List, Optional, Tuple

from .base import Feature
from .canister import Canister
from .compute import ComputeAllocation
from .http_outcall import HttpOutcall
from .messages import Callee, Caller, Ingress, Query
from .signatures import Ecdsa, Schnorr
from .storage import MemoryAllocation, Storage
from .timers import Heartbeat, Timer

Builder = Callable[[], Feature]


@dataclass
class FeatureRegistry:
    """Ordered catalog of feature constructors keyed by label."""

    builders: Dict[str, Builder] = field(default_factory=dict)  # insertion order is display order

    def register(self, label: str, build: Builder) -> None:
        if label in self.builders:
            raise ValueError(f"Feature label already registered: {label}")
        built = build().label
        if built != label:
            raise ValueError(f"Builder for {label!r} produces a feature labelled {built!r}")
        self.builders[label] = build

    def get(self, label: str) -> Optional[Builder]:
        return self.builders.get(label)

    def build(self, label: str) -> Optional[Feature]:
        builder = self.get(label)
        if builder is None:
            return None
        return builder()

    def labels(self) -> List[str]:
        return list(self.builders)

    def items(self) -> List[Tuple[str, Builder]]:
        return list(self.builders.items())

    def __contains__(self, label: object) -> bool:
        return label in self.builders

    def __iter__(self) -> Iterator[str]:
        return iter(self.builders)

    def __len__(self) -> int:
        return len(self.builders)


def build_default_registry() -> FeatureRegistry:
    reg = FeatureRegistry()
    for cls in (
        Canister,
        Storage,
        Ingress,
        Query,
        Caller,
        Callee,
        Timer,
        Heartbeat,
        MemoryAllocation,
        ComputeAllocation,
        Ecdsa,
        Schnorr,
        HttpOutcall,
    ):
        reg.register(cls.label, cls)
    return reg
