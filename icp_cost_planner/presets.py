"""Preset workloads.

Each preset instantiates and parameterizes features for a typical kind of
application. They are starting points to be adjusted, not measurements.
"""

from __future__ import annotations

from typing import Callable, Dict, List

from .features import Caller, Canister, Feature, Ingress, MemoryAllocation, Storage, Timer
from .features.values import INSTRUCTION_VALUES, STORAGE_VALUES, index_at_least


def landing_page() -> List[Feature]:
    return [Canister(), Storage()]


def social_network(users: int) -> List[Feature]:
    bytes_per_user = 100_000_000
    ingress_per_user = 10
    instructions_per_ingress = 10_000_000
    instructions_per_timer = 10_000_000_000

    storage = Storage()
    storage.storage_index = index_at_least(STORAGE_VALUES, users * bytes_per_user)

    ingress = Ingress()
    ingress.instruction_index = index_at_least(INSTRUCTION_VALUES, instructions_per_ingress)
    ingress.count = users * ingress_per_user

    timer = Timer()
    timer.instruction_index = index_at_least(INSTRUCTION_VALUES, instructions_per_timer)

    return [Canister(), storage, ingress, timer]


def decentralized_exchange(trades_per_day: int) -> List[Feature]:
    ingress_per_trade = 1
    calls_per_trade = 2
    storage_bytes_per_trade = 4096
    storage_history_days = 365
    instructions_per_timer = 10_000_000_000

    storage = Storage()
    storage.storage_index = index_at_least(
        STORAGE_VALUES, trades_per_day * storage_bytes_per_trade * storage_history_days
    )

    ingress = Ingress()
    ingress.count = trades_per_day * ingress_per_trade

    call = Caller()
    call.count = trades_per_day * calls_per_trade

    timer = Timer()
    timer.instruction_index = index_at_least(INSTRUCTION_VALUES, instructions_per_timer)

    return [Canister(), storage, ingress, call, timer]


def large_data(users: int) -> List[Feature]:
    ingress_per_user = 1
    users_per_day = 100
    storage_bytes_per_user = 4 * 1000 * 1000
    hundred_gb = 100 * 1000 * 1000 * 1000

    canisters = Canister()
    canisters.count = 20

    # Storage is bought in 100 GB units, so the count may be fractional.
    storage = Storage()
    storage.count = users * storage_bytes_per_user / hundred_gb
    storage.storage_index = index_at_least(STORAGE_VALUES, hundred_gb)

    memory_allocation = MemoryAllocation()
    memory_allocation.count = users * storage_bytes_per_user / hundred_gb
    memory_allocation.storage_index = index_at_least(STORAGE_VALUES, hundred_gb)

    ingress = Ingress()
    ingress.count = users_per_day * ingress_per_user

    return [canisters, storage, memory_allocation, ingress]


PRESETS: Dict[str, Callable[[int], List[Feature]]] = {
    "landing-page": lambda _: landing_page(),
    "social-network": social_network,
    "decentralized-exchange": decentralized_exchange,
    "large-data": large_data,
}
