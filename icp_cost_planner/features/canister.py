from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar, List

from ..breakdown import Breakdown, Category, Cost, Kind
from ..pricing import PricingEngine
from .base import BaseFeature
from .types import Field


@dataclass
class Canister(BaseFeature):
    """Canister creation: a one-time fee per canister."""

    label: ClassVar[str] = "Canister"

    count: float = 1

    def fields(self) -> List[Field]:
        return [self._count_field()]

    def cost(self, pricing: PricingEngine) -> Breakdown:
        result = Breakdown()
        result.add(Cost(Kind.ONE_TIME, Category.CANISTER, pricing.canister_creation(self.count)))
        return result

    def info(self) -> str:
        return (
            "A canister is a smart contract with its own code and state. "
            "Creating a canister costs a one-time fee."
        )
