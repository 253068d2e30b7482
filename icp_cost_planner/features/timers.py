from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar, List

from ..breakdown import Breakdown, Category, Cost, Kind
from ..pricing import Mode, PricingEngine
from .base import BaseFeature, as_count, index_into
from .types import Field
from .values import INSTRUCTION_VALUES, REPEAT_VALUES, count_to_string

HEARTBEATS_PER_DAY = 24 * 3600


@dataclass
class Timer(BaseFeature):
    label: ClassVar[str] = "Timer"
    PARAMETERS: ClassVar = {
        "count": as_count,
        "repeat_index": index_into(REPEAT_VALUES),
        "instruction_index": index_into(INSTRUCTION_VALUES),
    }

    count: float = 1
    repeat_index: int = 4
    instruction_index: int = 3

    def fields(self) -> List[Field]:
        return [
            self._count_field(),
            self._frequency_field(),
            self._range_field("Instructions", "instruction_index", INSTRUCTION_VALUES, count_to_string),
        ]

    def cost(self, pricing: PricingEngine) -> Breakdown:
        instructions = self._pick(INSTRUCTION_VALUES, self.instruction_index)
        kind, count = self._repeat()
        result = Breakdown()
        result.add(Cost(kind, Category.TIMER, pricing.execution(Mode.REPLICATED, instructions, count)))
        return result

    def info(self) -> str:
        return (
            "Canisters can schedule periodic or one-off work using timers. "
            "The cost of one execution depends on the executed instructions."
        )


@dataclass
class Heartbeat(BaseFeature):
    """Runs once per second (once per block on an idle subnet), every day."""

    label: ClassVar[str] = "Heartbeat"
    PARAMETERS: ClassVar = {
        "count": as_count,
        "instruction_index": index_into(INSTRUCTION_VALUES),
    }

    count: float = 1
    instruction_index: int = 3

    def fields(self) -> List[Field]:
        return [
            self._count_field(),
            self._range_field("Instructions", "instruction_index", INSTRUCTION_VALUES, count_to_string),
        ]

    def cost(self, pricing: PricingEngine) -> Breakdown:
        instructions = self._pick(INSTRUCTION_VALUES, self.instruction_index)
        result = Breakdown()
        result.add(
            Cost(
                Kind.PER_DAY,
                Category.HEARTBEAT,
                pricing.execution(Mode.REPLICATED, instructions, HEARTBEATS_PER_DAY),
            )
        )
        return result

    def info(self) -> str:
        return (
            "A heartbeat is a periodic timer that runs as often as possible. "
            "Heartbeats cannot control their frequency, timers are recommended instead."
        )
