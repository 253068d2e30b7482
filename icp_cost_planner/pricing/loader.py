"""Fee schedule loader.

Loads the YAML (or JSON) fee schedule shipped in
icp_cost_planner/pricing/definitions.

The loader validates every fee key and raises ValueError with a readable
message when one is missing or not a number, so a broken schedule fails
fast instead of silently pricing at zero.
"""

from __future__ import annotations

import json
import logging
from functools import lru_cache
from pathlib import Path
from typing import Any, Dict

import yaml

from ..config import FEES_FILE
from .schema import FEE_KEYS, FeeSchedule

_LOGGER = logging.getLogger(__name__)


def _require(obj: Dict[str, Any], key: str, *, ctx: str) -> Any:
    if key not in obj:
        raise ValueError(f"Missing required key '{key}' in {ctx}")
    return obj[key]


def _number(value: Any, *, key: str, ctx: str) -> float:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ValueError(f"Fee '{key}' must be a number in {ctx}, got {value!r}")
    if value < 0:
        raise ValueError(f"Fee '{key}' must be non-negative in {ctx}, got {value!r}")
    return float(value)


def _load_one(path: Path) -> Dict[str, Any]:
    raw = path.read_text(encoding="utf-8")
    if path.suffix.lower() in (".yaml", ".yml"):
        data = yaml.safe_load(raw) or {}
        if not isinstance(data, dict):
            raise ValueError(f"Top-level YAML must be a mapping in {path}")
        return data
    if path.suffix.lower() == ".json":
        data = json.loads(raw)
        if not isinstance(data, dict):
            raise ValueError(f"Top-level JSON must be an object in {path}")
        return data
    raise ValueError(f"Unsupported fee schedule file type: {path}")


def parse_fee_schedule(data: Dict[str, Any], *, ctx: str = "fee schedule", source_file: str = "") -> FeeSchedule:
    fees = _require(data, "fees", ctx=ctx)
    if not isinstance(fees, dict):
        raise ValueError(f"fees must be a mapping in {ctx}")
    size = _require(data, "reference_subnet_size", ctx=ctx)
    if isinstance(size, bool) or not isinstance(size, int) or size <= 0:
        raise ValueError(f"reference_subnet_size must be a positive integer in {ctx}")
    values = {key: _number(_require(fees, key, ctx=f"{ctx}.fees"), key=key, ctx=ctx) for key in FEE_KEYS}
    return FeeSchedule(
        id=str(data.get("id") or "fees"),
        reference_subnet_size=size,
        source_file=source_file,
        **values,
    )


def load_fee_schedule(path: Path | None = None) -> FeeSchedule:
    path = Path(path) if path is not None else FEES_FILE
    data = _load_one(path)
    schedule = parse_fee_schedule(data, ctx=f"fee schedule({path.name})", source_file=path.name)
    _LOGGER.debug("Loaded fee schedule %s from %s", schedule.id, path)
    return schedule


@lru_cache(maxsize=None)
def default_fee_schedule() -> FeeSchedule:
    return load_fee_schedule()
