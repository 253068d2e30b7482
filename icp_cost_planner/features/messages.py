"""Message-driven features: ingress, queries and inter-canister calls.

Ingress, Query and Caller pay for executed instructions and for the bytes
transferred (request plus response). Callee pays for execution only, the
network part of a call is covered by the caller.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar, List

from ..breakdown import Breakdown, Category, Cost
from ..pricing import Direction, Mode, PricingEngine
from .base import BaseFeature, as_count, index_into
from .types import Field
from .values import (
    INSTRUCTION_VALUES,
    NETWORK_VALUES,
    REPEAT_VALUES,
    bytes_to_string,
    count_to_string,
)

_MESSAGE_PARAMETERS = {
    "count": as_count,
    "repeat_index": index_into(REPEAT_VALUES),
    "instruction_index": index_into(INSTRUCTION_VALUES),
    "request_index": index_into(NETWORK_VALUES),
    "response_index": index_into(NETWORK_VALUES),
}


def _message_fields(feature: BaseFeature) -> List[Field]:
    return [
        feature._count_field(),
        feature._frequency_field(),
        feature._range_field("Instructions", "instruction_index", INSTRUCTION_VALUES, count_to_string),
        feature._range_field("Request bytes", "request_index", NETWORK_VALUES, bytes_to_string),
        feature._range_field("Response bytes", "response_index", NETWORK_VALUES, bytes_to_string),
    ]


@dataclass
class Ingress(BaseFeature):
    label: ClassVar[str] = "Ingress"
    PARAMETERS: ClassVar = _MESSAGE_PARAMETERS

    count: float = 100
    repeat_index: int = 3
    instruction_index: int = 3
    request_index: int = 4
    response_index: int = 4

    def fields(self) -> List[Field]:
        return _message_fields(self)

    def cost(self, pricing: PricingEngine) -> Breakdown:
        instructions = self._pick(INSTRUCTION_VALUES, self.instruction_index)
        network = self._pick(NETWORK_VALUES, self.request_index) + self._pick(NETWORK_VALUES, self.response_index)
        kind, count = self._repeat()
        result = Breakdown()
        result.add(Cost(kind, Category.INGRESS_EXECUTION, pricing.execution(Mode.REPLICATED, instructions, count)))
        result.add(
            Cost(
                kind,
                Category.INGRESS_NETWORK,
                pricing.message(Mode.REPLICATED, Direction.USER_TO_CANISTER, network, count),
            )
        )
        return result

    def info(self) -> str:
        return (
            "Messages that users send to canisters are called ingress messages. "
            "They are added to blocks and executed on all nodes of the subnet. "
            "The cost depends on the executed instructions and on the bytes "
            "transferred over the network."
        )


@dataclass
class Query(BaseFeature):
    label: ClassVar[str] = "Query"
    PARAMETERS: ClassVar = _MESSAGE_PARAMETERS

    count: float = 100
    repeat_index: int = 3
    instruction_index: int = 3
    request_index: int = 4
    response_index: int = 4

    def fields(self) -> List[Field]:
        return _message_fields(self)

    def cost(self, pricing: PricingEngine) -> Breakdown:
        instructions = self._pick(INSTRUCTION_VALUES, self.instruction_index)
        network = self._pick(NETWORK_VALUES, self.request_index) + self._pick(NETWORK_VALUES, self.response_index)
        kind, count = self._repeat()
        result = Breakdown()
        result.add(Cost(kind, Category.QUERY_EXECUTION, pricing.execution(Mode.NON_REPLICATED, instructions, count)))
        result.add(
            Cost(
                kind,
                Category.QUERY_NETWORK,
                pricing.message(Mode.NON_REPLICATED, Direction.USER_TO_CANISTER, network, count),
            )
        )
        return result

    def info(self) -> str:
        return (
            "Queries are read-only messages executed by a single node. "
            "Currently canisters do not pay for queries."
        )


@dataclass
class Caller(BaseFeature):
    label: ClassVar[str] = "Caller"
    PARAMETERS: ClassVar = _MESSAGE_PARAMETERS

    count: float = 100
    repeat_index: int = 3
    instruction_index: int = 3
    request_index: int = 4
    response_index: int = 4

    def fields(self) -> List[Field]:
        return _message_fields(self)

    def cost(self, pricing: PricingEngine) -> Breakdown:
        instructions = self._pick(INSTRUCTION_VALUES, self.instruction_index)
        network = self._pick(NETWORK_VALUES, self.request_index) + self._pick(NETWORK_VALUES, self.response_index)
        kind, count = self._repeat()
        result = Breakdown()
        result.add(Cost(kind, Category.CALLER_EXECUTION, pricing.execution(Mode.REPLICATED, instructions, count)))
        result.add(
            Cost(
                kind,
                Category.CALLER_NETWORK,
                pricing.message(Mode.REPLICATED, Direction.CANISTER_TO_CANISTER, network, count),
            )
        )
        return result

    def info(self) -> str:
        return (
            "A canister can call another canister. This item covers the caller "
            "side: the network cost of transferring the bytes and the execution "
            "cost of the response callback."
        )


@dataclass
class Callee(BaseFeature):
    label: ClassVar[str] = "Callee"
    PARAMETERS: ClassVar = {
        "count": as_count,
        "repeat_index": index_into(REPEAT_VALUES),
        "instruction_index": index_into(INSTRUCTION_VALUES),
    }

    count: float = 100
    repeat_index: int = 3
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
        result.add(Cost(kind, Category.CALLEE_EXECUTION, pricing.execution(Mode.REPLICATED, instructions, count)))
        return result

    def info(self) -> str:
        return (
            "Costs of a canister that is called by another canister. Only the "
            "executed instructions count, the network is paid by the caller."
        )
