"""Estimate ICP canister costs from a composition of billable features."""

from .breakdown import Amount, Breakdown, Category, Cost, Kind, TotalCost
from .errors import IncompatibleVersion, MalformedDocument, PlannerError, UnknownFeature
from .estimate import Summary, estimate, summarize
from .persistence import SCHEMA_VERSION, Configuration, from_json, load, save, to_json

__all__ = [
    "Amount",
    "Breakdown",
    "Category",
    "Cost",
    "Kind",
    "TotalCost",
    "IncompatibleVersion",
    "MalformedDocument",
    "PlannerError",
    "UnknownFeature",
    "Summary",
    "estimate",
    "summarize",
    "SCHEMA_VERSION",
    "Configuration",
    "from_json",
    "to_json",
    "load",
    "save",
]
