"""Fee schedule schema."""

from __future__ import annotations

from dataclasses import dataclass

FEE_KEYS = (
    "canister_creation",
    "update_message_execution",
    "ten_update_instructions_execution",
    "xnet_call",
    "xnet_byte_transmission",
    "ingress_message_reception",
    "ingress_byte_reception",
    "gib_storage_per_second",
    "compute_percent_allocated_per_second",
    "http_request_linear_baseline",
    "http_request_quadratic_baseline",
    "http_request_per_byte",
    "http_response_per_byte",
    "ecdsa_signature",
    "schnorr_signature",
)


@dataclass(frozen=True)
class FeeSchedule:
    id: str
    reference_subnet_size: int
    canister_creation: float
    update_message_execution: float
    ten_update_instructions_execution: float
    xnet_call: float
    xnet_byte_transmission: float
    ingress_message_reception: float
    ingress_byte_reception: float
    gib_storage_per_second: float
    compute_percent_allocated_per_second: float
    http_request_linear_baseline: float
    http_request_quadratic_baseline: float
    http_request_per_byte: float
    http_response_per_byte: float
    ecdsa_signature: float
    schnorr_signature: float
    source_file: str = ""
