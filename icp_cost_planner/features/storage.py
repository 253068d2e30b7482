from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar, List

from ..breakdown import Breakdown, Category, Cost, Kind
from ..pricing import PricingEngine
from .base import BaseFeature, as_count, index_into
from .types import Field
from .values import STORAGE_VALUES, bytes_to_string


@dataclass
class Storage(BaseFeature):
    """Storage held by canisters, paid every day."""

    label: ClassVar[str] = "Storage"
    PARAMETERS: ClassVar = {"count": as_count, "storage_index": index_into(STORAGE_VALUES)}

    count: float = 1
    storage_index: int = 2

    def fields(self) -> List[Field]:
        return [
            self._count_field(),
            self._range_field("Size", "storage_index", STORAGE_VALUES, bytes_to_string),
        ]

    def cost(self, pricing: PricingEngine) -> Breakdown:
        size = self._pick(STORAGE_VALUES, self.storage_index)
        result = Breakdown()
        result.add(Cost(Kind.PER_DAY, Category.STORAGE, pricing.storage(size, 1, self.count)))
        return result

    def info(self) -> str:
        return (
            "Canisters pay for the storage they consume: the Wasm binary, "
            "the Wasm memory, the stable memory, and enqueued messages. "
            "The payment is recurrent."
        )


@dataclass
class MemoryAllocation(BaseFeature):
    """Storage reserved ahead of time through the canister settings."""

    label: ClassVar[str] = "MemoryAllocation"
    PARAMETERS: ClassVar = {"count": as_count, "storage_index": index_into(STORAGE_VALUES)}

    count: float = 1
    storage_index: int = 2

    def fields(self) -> List[Field]:
        return [
            self._count_field(),
            self._range_field("Size", "storage_index", STORAGE_VALUES, bytes_to_string),
        ]

    def cost(self, pricing: PricingEngine) -> Breakdown:
        size = self._pick(STORAGE_VALUES, self.storage_index)
        result = Breakdown()
        result.add(Cost(Kind.PER_DAY, Category.STORAGE, pricing.memory_allocation(size, 1, self.count)))
        return result

    def info(self) -> str:
        return (
            "A canister can reserve storage ahead of time by setting "
            "memory_allocation in its canister settings."
        )
