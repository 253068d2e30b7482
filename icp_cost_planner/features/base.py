from __future__ import annotations

import math
from typing import Any, Callable, ClassVar, Dict, List, Protocol, Sequence, Tuple

from ..breakdown import Breakdown, Kind
from ..pricing import PricingEngine
from .types import Field, FieldKind
from .values import REPEAT_VALUES, repeat_to_string

Coercer = Callable[[Any], Any]


class Feature(Protocol):
    """An independently priced unit of canister workload."""

    label: ClassVar[str]

    def fields(self) -> List[Field]: ...

    def cost(self, pricing: PricingEngine) -> Breakdown: ...

    def info(self) -> str: ...

    def parameters(self) -> Dict[str, Any]: ...

    def set_parameter(self, name: str, value: Any) -> None: ...


def as_count(value: Any) -> float:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ValueError(f"count must be a number, got {value!r}")
    if not math.isfinite(value):
        raise ValueError(f"count must be finite, got {value!r}")
    if value < 0:
        raise ValueError(f"count must be non-negative, got {value!r}")
    return value


def index_into(table: Sequence[float]) -> Coercer:
    def coerce(value: Any) -> int:
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise ValueError(f"index must be an integer, got {value!r}")
        if isinstance(value, float) and not value.is_integer():
            raise ValueError(f"index must be an integer, got {value!r}")
        index = int(value)
        if not 0 <= index < len(table):
            raise ValueError(f"index {index} out of range for {len(table)} choices")
        return index

    return coerce


class BaseFeature:
    """Shared helpers for feature variants.

    PARAMETERS is the allow-list of persisted parameters, mapping each
    attribute name to the coercer that validates incoming values.
    """

    label: ClassVar[str] = ""
    PARAMETERS: ClassVar[Dict[str, Coercer]] = {"count": as_count}

    def parameters(self) -> Dict[str, Any]:
        return {name: getattr(self, name) for name in self.PARAMETERS}

    def set_parameter(self, name: str, value: Any) -> None:
        coerce = self.PARAMETERS.get(name)
        if coerce is None:
            raise KeyError(f"{self.label} has no parameter {name!r}")
        setattr(self, name, coerce(value))

    def info(self) -> str:
        return ""

    def _setter(self, name: str) -> Callable[[Any], None]:
        return lambda value: self.set_parameter(name, value)

    def _pick(self, table: Sequence[float], index: int) -> float:
        if not 0 <= index < len(table):
            raise IndexError(f"{self.label}: index {index} out of range for {len(table)} choices")
        return table[index]

    def _count_field(self) -> Field:
        return Field(self.label, FieldKind.INCREMENT, getattr(self, "count"), self._setter("count"))

    def _range_field(
        self,
        label: str,
        name: str,
        table: Sequence[float],
        fmt: Callable[[float], str],
    ) -> Field:
        return Field(
            label,
            FieldKind.RANGE,
            getattr(self, name),
            self._setter(name),
            [fmt(v) for v in table],
        )

    def _frequency_field(self) -> Field:
        return self._range_field("Frequency", "repeat_index", REPEAT_VALUES, repeat_to_string)

    def _repeat(self) -> Tuple[Kind, float]:
        """Kind and effective count for the selected frequency."""
        repeat = self._pick(REPEAT_VALUES, getattr(self, "repeat_index"))
        count = getattr(self, "count")
        if repeat == 0:
            return Kind.ONE_TIME, count
        return Kind.PER_DAY, count * repeat
