from .base import BaseFeature, Feature
from .canister import Canister
from .compute import ComputeAllocation
from .http_outcall import HttpOutcall
from .messages import Callee, Caller, Ingress, Query
from .registry import FeatureRegistry, build_default_registry
from .signatures import Ecdsa, Schnorr
from .storage import MemoryAllocation, Storage
from .timers import Heartbeat, Timer
from .types import Field, FieldKind

__all__ = [
    "BaseFeature",
    "Feature",
    "Field",
    "FieldKind",
    "FeatureRegistry",
    "build_default_registry",
    "Canister",
    "Storage",
    "MemoryAllocation",
    "ComputeAllocation",
    "Ingress",
    "Query",
    "Caller",
    "Callee",
    "Timer",
    "Heartbeat",
    "HttpOutcall",
    "Ecdsa",
    "Schnorr",
]
