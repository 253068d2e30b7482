from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar, List

from ..breakdown import Breakdown, Category, Cost, Kind
from ..pricing import PricingEngine
from .base import BaseFeature, as_count, index_into
from .types import Field
from .values import PERCENT_VALUES, percent_to_string


@dataclass
class ComputeAllocation(BaseFeature):
    label: ClassVar[str] = "ComputeAllocation"
    PARAMETERS: ClassVar = {"count": as_count, "percent_index": index_into(PERCENT_VALUES)}

    count: float = 1
    percent_index: int = 2

    def fields(self) -> List[Field]:
        return [
            self._count_field(),
            self._range_field("Size", "percent_index", PERCENT_VALUES, percent_to_string),
        ]

    def cost(self, pricing: PricingEngine) -> Breakdown:
        percent = self._pick(PERCENT_VALUES, self.percent_index)
        result = Breakdown()
        result.add(Cost(Kind.PER_DAY, Category.COMPUTE, pricing.compute_allocation(percent, 1, self.count)))
        return result

    def info(self) -> str:
        return (
            "A canister can reserve a share of an execution core by setting "
            "compute_allocation in its canister settings. The allocation is "
            "expressed in percent of one core."
        )
