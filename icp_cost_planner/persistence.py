"""Save and load configurations as versioned JSON documents.

Document shape:

    {
      "version": 1,
      "days": 30,
      "subnetIndex": 0,
      "subnetValues": [13, 28, 34, 40],
      "features": [{"label": "Ingress", "fields": {"count": 100, ...}}, ...]
    }

Loading is all-or-nothing: a version mismatch, an unknown feature label or a
malformed entry raises before anything is returned. Fields missing from an
entry keep the constructor defaults; fields a feature does not declare as a
parameter are ignored.
"""

from __future__ import annotations

import json
import logging
import math
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional

from .config import DEFAULT_DAYS, DEFAULT_SUBNET_INDEX, SUBNET_SIZES
from .errors import IncompatibleVersion, MalformedDocument, UnknownFeature
from .features import Feature, FeatureRegistry, build_default_registry
from .pricing import SubnetPricing, pricing_for

_LOGGER = logging.getLogger(__name__)

# Bump only on breaking changes to the document shape.
SCHEMA_VERSION = 1


@dataclass
class Configuration:
    features: List[Feature] = field(default_factory=list)
    days: float = DEFAULT_DAYS
    subnet_index: int = DEFAULT_SUBNET_INDEX
    subnet_values: List[int] = field(default_factory=lambda: list(SUBNET_SIZES))

    @property
    def subnet_size(self) -> int:
        return self.subnet_values[self.subnet_index]

    def pricing(self) -> SubnetPricing:
        return pricing_for(self.subnet_size)


def serialize_feature(feature: Feature) -> Dict[str, Any]:
    return {"label": feature.label, "fields": dict(feature.parameters())}


def to_dict(config: Configuration) -> Dict[str, Any]:
    return {
        "version": SCHEMA_VERSION,
        "days": config.days,
        "subnetIndex": config.subnet_index,
        "subnetValues": list(config.subnet_values),
        "features": [serialize_feature(f) for f in config.features],
    }


def to_json(config: Configuration) -> str:
    return json.dumps(to_dict(config))


def _is_number(value: Any) -> bool:
    # json.loads accepts NaN and Infinity.
    return not isinstance(value, bool) and isinstance(value, (int, float)) and math.isfinite(value)


def deserialize_feature(entry: Any, registry: FeatureRegistry, *, position: int = 0) -> Feature:
    ctx = f"features[{position}]"
    if not isinstance(entry, dict):
        raise MalformedDocument(f"{ctx} must be an object")
    label = entry.get("label")
    if not isinstance(label, str) or label not in registry:
        raise UnknownFeature(label)
    feature = registry.build(label)

    fields = entry.get("fields")
    if fields is None:
        fields = {}
    if not isinstance(fields, dict):
        raise MalformedDocument(f"{ctx}.fields must be an object")

    allowed = feature.parameters()
    for name, value in fields.items():
        if name not in allowed:
            _LOGGER.debug("Ignoring unknown field %r of %s in %s", name, label, ctx)
            continue
        try:
            feature.set_parameter(name, value)
        except ValueError as ex:
            raise MalformedDocument(f"{ctx} ({label}) field {name!r}: {ex}") from ex
    return feature


def from_dict(data: Any, registry: Optional[FeatureRegistry] = None) -> Configuration:
    if not isinstance(data, dict):
        raise MalformedDocument("top-level JSON must be an object")

    version = data.get("version")
    if isinstance(version, bool) or not isinstance(version, int) or version != SCHEMA_VERSION:
        raise IncompatibleVersion(version, SCHEMA_VERSION)

    if registry is None:
        registry = build_default_registry()

    days = data.get("days", DEFAULT_DAYS)
    if not _is_number(days) or days < 0:
        raise MalformedDocument(f"days must be a non-negative number, got {days!r}")

    subnet_values = data.get("subnetValues", list(SUBNET_SIZES))
    if (
        not isinstance(subnet_values, list)
        or not subnet_values
        or not all(isinstance(v, int) and not isinstance(v, bool) and v > 0 for v in subnet_values)
    ):
        raise MalformedDocument(f"subnetValues must be a non-empty list of positive integers, got {subnet_values!r}")

    subnet_index = data.get("subnetIndex", DEFAULT_SUBNET_INDEX)
    if isinstance(subnet_index, bool) or not isinstance(subnet_index, int) or not 0 <= subnet_index < len(subnet_values):
        raise MalformedDocument(f"subnetIndex {subnet_index!r} out of range for {len(subnet_values)} subnet sizes")

    entries = data.get("features", [])
    if not isinstance(entries, list):
        raise MalformedDocument("features must be a list")
    features = [deserialize_feature(entry, registry, position=i) for i, entry in enumerate(entries)]

    _LOGGER.info("Loaded configuration with %d features", len(features))
    return Configuration(
        features=features,
        days=days,
        subnet_index=subnet_index,
        subnet_values=list(subnet_values),
    )


def from_json(text: str, registry: Optional[FeatureRegistry] = None) -> Configuration:
    try:
        data = json.loads(text)
    except json.JSONDecodeError as ex:
        raise MalformedDocument(f"invalid JSON: {ex}") from ex
    return from_dict(data, registry)


def save(config: Configuration, path: Path | str) -> Path:
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w", encoding="utf-8") as f:
        json.dump(to_dict(config), f, indent=2, ensure_ascii=False)
    _LOGGER.info("Saved configuration to %s", path)
    return path


def load(path: Path | str, registry: Optional[FeatureRegistry] = None) -> Configuration:
    path = Path(path)
    try:
        text = path.read_bytes().decode("utf-8")
    except UnicodeDecodeError as ex:
        raise MalformedDocument(f"{path} is not UTF-8: {ex}") from ex
    return from_json(text, registry)
