"""Threshold signatures requested from the signing subnet."""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar, List

from ..breakdown import Breakdown, Category, Cost
from ..pricing import PricingEngine
from .base import BaseFeature, as_count, index_into
from .types import Field
from .values import REPEAT_VALUES

_SIGNATURE_PARAMETERS = {
    "count": as_count,
    "repeat_index": index_into(REPEAT_VALUES),
}


@dataclass
class Ecdsa(BaseFeature):
    label: ClassVar[str] = "Ecdsa"
    PARAMETERS: ClassVar = _SIGNATURE_PARAMETERS

    count: float = 1
    repeat_index: int = 3

    def fields(self) -> List[Field]:
        return [self._count_field(), self._frequency_field()]

    def cost(self, pricing: PricingEngine) -> Breakdown:
        kind, count = self._repeat()
        result = Breakdown()
        result.add(Cost(kind, Category.ECDSA, pricing.sign_with_ecdsa(count)))
        return result

    def info(self) -> str:
        return (
            "Canisters can request threshold ECDSA signatures to sign messages "
            "and transactions for other blockchains."
        )


@dataclass
class Schnorr(BaseFeature):
    label: ClassVar[str] = "Schnorr"
    PARAMETERS: ClassVar = _SIGNATURE_PARAMETERS

    count: float = 1
    repeat_index: int = 3

    def fields(self) -> List[Field]:
        return [self._count_field(), self._frequency_field()]

    def cost(self, pricing: PricingEngine) -> Breakdown:
        kind, count = self._repeat()
        result = Breakdown()
        result.add(Cost(kind, Category.SCHNORR, pricing.sign_with_schnorr(count)))
        return result

    def info(self) -> str:
        return (
            "Canisters can request threshold Schnorr signatures to sign messages "
            "and transactions for other blockchains."
        )
