from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar, List

from ..breakdown import Breakdown, Category, Cost
from ..pricing import PricingEngine
from .base import BaseFeature, as_count, index_into
from .types import Field
from .values import NETWORK_VALUES, REPEAT_VALUES, bytes_to_string


@dataclass
class HttpOutcall(BaseFeature):
    label: ClassVar[str] = "HttpOutcall"
    PARAMETERS: ClassVar = {
        "count": as_count,
        "repeat_index": index_into(REPEAT_VALUES),
        "request_index": index_into(NETWORK_VALUES),
        "response_index": index_into(NETWORK_VALUES),
    }

    count: float = 1
    repeat_index: int = 3
    request_index: int = 4
    response_index: int = 4

    def fields(self) -> List[Field]:
        return [
            self._count_field(),
            self._frequency_field(),
            self._range_field("Request bytes", "request_index", NETWORK_VALUES, bytes_to_string),
            self._range_field("Response bytes", "response_index", NETWORK_VALUES, bytes_to_string),
        ]

    def cost(self, pricing: PricingEngine) -> Breakdown:
        request = self._pick(NETWORK_VALUES, self.request_index)
        response = self._pick(NETWORK_VALUES, self.response_index)
        kind, count = self._repeat()
        result = Breakdown()
        result.add(Cost(kind, Category.HTTP_OUTCALL, pricing.http_outcall(request, response, count)))
        return result

    def info(self) -> str:
        return "Canisters can make HTTP requests to Web 2.0 servers using HTTP outcalls."
