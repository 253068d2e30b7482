from __future__ import annotations

from enum import Enum
from typing import Optional, Protocol

from ..breakdown import Amount
from ..config import USD_PER_XDR
from .loader import default_fee_schedule
from .schema import FeeSchedule

GIB = 1024 * 1024 * 1024
SECONDS_PER_DAY = 24 * 3600
CYCLES_PER_XDR = 1_000_000_000_000


class Mode(Enum):
    REPLICATED = "replicated"
    NON_REPLICATED = "non_replicated"


class Direction(Enum):
    USER_TO_CANISTER = "user_to_canister"
    CANISTER_TO_CANISTER = "canister_to_canister"
    CANISTER_TO_USER = "canister_to_user"


class PricingEngine(Protocol):
    """Converts physical quantities into prices.

    Every method returns the price of `count` occurrences.
    """

    def canister_creation(self, count: float) -> Amount: ...

    def execution(self, mode: Mode, instructions: float, count: float) -> Amount: ...

    def storage(self, size: float, days: float, count: float) -> Amount: ...

    def memory_allocation(self, size: float, days: float, count: float) -> Amount: ...

    def compute_allocation(self, percent: float, days: float, count: float) -> Amount: ...

    def message(self, mode: Mode, direction: Direction, size: float, count: float) -> Amount: ...

    def http_outcall(self, request: float, response: float, count: float) -> Amount: ...

    def sign_with_ecdsa(self, count: float) -> Amount: ...

    def sign_with_schnorr(self, count: float) -> Amount: ...


class SubnetPricing:
    """Default engine: ICP fee schedule scaled to a subnet size.

    Most fees are defined for the reference subnet and scale linearly with
    the number of nodes. HTTP outcalls are charged per node and threshold
    signatures have a fixed price. Queries (non-replicated execution) are free.
    """

    def __init__(
        self,
        subnet_size: int,
        fees: Optional[FeeSchedule] = None,
        usd_per_xdr: float = USD_PER_XDR,
    ):
        if subnet_size <= 0:
            raise ValueError(f"subnet_size must be positive, got {subnet_size}")
        self.subnet_size = subnet_size
        self.fees = fees or default_fee_schedule()
        self.usd_per_xdr = usd_per_xdr

    def __repr__(self) -> str:
        return f"SubnetPricing(subnet_size={self.subnet_size}, fees={self.fees.id!r})"

    def _scale(self) -> float:
        return self.subnet_size / self.fees.reference_subnet_size

    def _amount(self, cycles: float) -> Amount:
        return Amount(usd=cycles / CYCLES_PER_XDR * self.usd_per_xdr, cycles=cycles)

    def canister_creation(self, count: float) -> Amount:
        return self._amount(self.fees.canister_creation * self._scale() * count)

    def execution(self, mode: Mode, instructions: float, count: float) -> Amount:
        if mode == Mode.NON_REPLICATED:
            return Amount.zero()
        fee = self.fees.update_message_execution + self.fees.ten_update_instructions_execution * instructions / 10
        return self._amount(fee * self._scale() * count)

    def storage(self, size: float, days: float, count: float) -> Amount:
        fee = size / GIB * self.fees.gib_storage_per_second * days * SECONDS_PER_DAY
        return self._amount(fee * self._scale() * count)

    def memory_allocation(self, size: float, days: float, count: float) -> Amount:
        # Reserved memory is charged like used storage.
        return self.storage(size, days, count)

    def compute_allocation(self, percent: float, days: float, count: float) -> Amount:
        fee = percent * self.fees.compute_percent_allocated_per_second * days * SECONDS_PER_DAY
        return self._amount(fee * self._scale() * count)

    def message(self, mode: Mode, direction: Direction, size: float, count: float) -> Amount:
        if mode == Mode.NON_REPLICATED:
            return Amount.zero()
        if direction == Direction.USER_TO_CANISTER:
            fee = self.fees.ingress_message_reception + self.fees.ingress_byte_reception * size
        elif direction == Direction.CANISTER_TO_CANISTER:
            fee = self.fees.xnet_call + self.fees.xnet_byte_transmission * size
        else:
            return Amount.zero()
        return self._amount(fee * self._scale() * count)

    def http_outcall(self, request: float, response: float, count: float) -> Amount:
        n = self.subnet_size
        fee = (
            (self.fees.http_request_linear_baseline + self.fees.http_request_quadratic_baseline * n) * n
            + self.fees.http_request_per_byte * n * request
            + self.fees.http_response_per_byte * n * response
        )
        return self._amount(fee * count)

    def sign_with_ecdsa(self, count: float) -> Amount:
        return self._amount(self.fees.ecdsa_signature * count)

    def sign_with_schnorr(self, count: float) -> Amount:
        return self._amount(self.fees.schnorr_signature * count)


def pricing_for(subnet_size: int, usd_per_xdr: float = USD_PER_XDR) -> SubnetPricing:
    return SubnetPricing(subnet_size, usd_per_xdr=usd_per_xdr)
