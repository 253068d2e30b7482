from __future__ import annotations

import logging
from typing import Iterable, NamedTuple

from .breakdown import Amount, Breakdown, Cost
from .features import Feature
from .pricing import PricingEngine

_LOGGER = logging.getLogger(__name__)


class Summary(NamedTuple):
    one_time: Cost
    per_day: Cost
    projected: Amount  # per-day total over the horizon
    total: Amount  # one-time plus projected


def estimate(features: Iterable[Feature], pricing: PricingEngine) -> Breakdown:
    """Merge the costs of all features into one sorted breakdown."""
    result = Breakdown()
    for feature in features:
        result.merge(feature.cost(pricing))
    result.sort()
    _LOGGER.debug("Estimated %d cost lines with %r", len(result), pricing)
    return result


def summarize(breakdown: Breakdown, days: float) -> Summary:
    one_time, per_day = breakdown.total()
    projected = per_day.project(days)
    return Summary(one_time, per_day, projected, one_time.amount + projected)
