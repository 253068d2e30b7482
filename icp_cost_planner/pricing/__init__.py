from .engine import (
    Direction,
    Mode,
    PricingEngine,
    SubnetPricing,
    pricing_for,
)
from .loader import default_fee_schedule, load_fee_schedule, parse_fee_schedule
from .schema import FeeSchedule

__all__ = [
    "Direction",
    "Mode",
    "PricingEngine",
    "SubnetPricing",
    "pricing_for",
    "FeeSchedule",
    "default_fee_schedule",
    "load_fee_schedule",
    "parse_fee_schedule",
]
