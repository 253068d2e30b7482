from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, List, Optional


class FieldKind(str, Enum):
    INCREMENT = "increment"  # free counter
    RANGE = "range"  # index into `choices`


@dataclass(frozen=True)
class Field:
    """Describes one adjustable parameter for an input control."""

    label: str
    kind: FieldKind
    default: Any
    on_change: Callable[[Any], None]
    choices: Optional[List[str]] = None
