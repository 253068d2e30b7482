"""Cost line items and their aggregation.

A Breakdown never holds two items with the same (kind, category) pair:
adding an item merges it into a matching one when there is one. This keeps
the breakdown bounded by the size of the Category enum, no matter how many
features contribute to it.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from enum import IntEnum
from typing import Iterator, List, NamedTuple


@dataclass(frozen=True)
class Amount:
    """A price in two units: USD and cycles."""

    usd: float = 0.0
    cycles: float = 0.0

    @staticmethod
    def zero() -> "Amount":
        return Amount(0.0, 0.0)

    def __add__(self, other: "Amount") -> "Amount":
        if not isinstance(other, Amount):
            return NotImplemented
        return Amount(self.usd + other.usd, self.cycles + other.cycles)

    def scale(self, factor: float) -> "Amount":
        return Amount(self.usd * factor, self.cycles * factor)


def add(a: Amount, b: Amount) -> Amount:
    return a + b


class Kind(IntEnum):
    ONE_TIME = 0
    PER_DAY = 1


class Category(IntEnum):
    CANISTER = 0
    STORAGE = 1
    COMPUTE = 2
    INGRESS_EXECUTION = 3
    INGRESS_NETWORK = 4
    QUERY_EXECUTION = 5
    QUERY_NETWORK = 6
    CALLER_EXECUTION = 7
    CALLER_NETWORK = 8
    CALLEE_EXECUTION = 9
    TIMER = 10
    HEARTBEAT = 11
    HTTP_OUTCALL = 12
    ECDSA = 13
    SCHNORR = 14
    TOTAL = 15


CATEGORY_LABELS = {
    Category.CANISTER: "Canister",
    Category.STORAGE: "Storage",
    Category.COMPUTE: "Compute",
    Category.INGRESS_EXECUTION: "Execution:Ingress",
    Category.INGRESS_NETWORK: "Network:Ingress",
    Category.QUERY_EXECUTION: "Execution:Query",
    Category.QUERY_NETWORK: "Network:Query",
    Category.CALLER_EXECUTION: "Execution:Caller",
    Category.CALLER_NETWORK: "Network:Caller",
    Category.CALLEE_EXECUTION: "Execution:Callee",
    Category.TIMER: "Timer",
    Category.HEARTBEAT: "Heartbeat",
    Category.HTTP_OUTCALL: "HttpOutcall",
    Category.ECDSA: "Ecdsa",
    Category.SCHNORR: "Schnorr",
    Category.TOTAL: "",
}


@dataclass
class Cost:
    """One priced line item."""

    kind: Kind
    category: Category
    amount: Amount = field(default_factory=Amount.zero)

    @property
    def label(self) -> str:
        return CATEGORY_LABELS.get(self.category, "")

    def merge_if_same_kind(self, other: "Cost") -> bool:
        if self.kind != other.kind:
            return False
        self.amount = self.amount + other.amount
        return True

    def merge_if_same_category_and_kind(self, other: "Cost") -> bool:
        if self.category != other.category:
            return False
        return self.merge_if_same_kind(other)

    def project(self, days: float) -> Amount:
        """Amount charged over `days`: unchanged for one-time costs."""
        if not math.isfinite(days) or days < 0:
            raise ValueError(f"days must be a non-negative finite number, got {days}")
        if self.kind == Kind.ONE_TIME:
            return self.amount
        return self.amount.scale(days)


class TotalCost(NamedTuple):
    one_time: Cost
    per_day: Cost


class Breakdown:
    """Deduplicated, ordered collection of line items."""

    def __init__(self) -> None:
        self.items: List[Cost] = []

    def add(self, cost: Cost) -> None:
        for item in self.items:
            if item.merge_if_same_category_and_kind(cost):
                return
        # Stored items get merged into later, so never keep the caller's object.
        self.items.append(Cost(cost.kind, cost.category, cost.amount))

    def merge(self, other: "Breakdown") -> None:
        for item in other.items:
            self.add(item)

    def sort(self) -> None:
        self.items.sort(key=lambda c: (c.category, c.kind))

    def costs(self) -> List[Cost]:
        return self.items

    def total(self) -> TotalCost:
        one_time = Cost(Kind.ONE_TIME, Category.TOTAL, Amount.zero())
        per_day = Cost(Kind.PER_DAY, Category.TOTAL, Amount.zero())
        for item in self.items:
            one_time.merge_if_same_kind(item)
            per_day.merge_if_same_kind(item)
        return TotalCost(one_time, per_day)

    def __iter__(self) -> Iterator[Cost]:
        return iter(self.items)

    def __len__(self) -> int:
        return len(self.items)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Breakdown):
            return NotImplemented
        return self.items == other.items

    def __repr__(self) -> str:
        return f"Breakdown({self.items!r})"
