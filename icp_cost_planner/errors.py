"""Errors raised while loading saved configurations.

All of them derive from ValueError so callers that only care about
"bad input" can catch that; the loader never returns a partial result.
"""

from __future__ import annotations

from typing import Any


class PlannerError(ValueError):
    """Base class for configuration loading failures."""


class IncompatibleVersion(PlannerError):
    def __init__(self, found: Any, expected: int):
        self.found = found
        self.expected = expected
        super().__init__(
            f"The file is not compatible with the current version "
            f"(found version {found!r}, expected {expected})"
        )


class UnknownFeature(PlannerError):
    def __init__(self, label: Any):
        self.label = label
        super().__init__(f"Failed to load unknown feature: {label!r}")


class MalformedDocument(PlannerError):
    def __init__(self, reason: str):
        self.reason = reason
        super().__init__(f"Malformed configuration document: {reason}")
