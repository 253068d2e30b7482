"""Discretization tables for feature parameters.

Features store indices into these tables instead of raw values, which keeps
saved configurations compact and restricts values to supported tiers.
Every table is increasing.
"""

from __future__ import annotations

from typing import Sequence, Tuple

KB = 1024
MB = 1024 * KB
GB = 1024 * MB

K = 1000
M = 1000 * K
B = 1000 * M

STORAGE_VALUES: Tuple[int, ...] = (100 * KB, 1 * MB, 10 * MB, 100 * MB, 1 * GB, 10 * GB, 100 * GB)

INSTRUCTION_VALUES: Tuple[int, ...] = (0, 100 * K, 500 * K, 1 * M, 10 * M, 100 * M, 1 * B, 10 * B, 100 * B)

NETWORK_VALUES: Tuple[int, ...] = (0, 256, 512, 1 * KB, 10 * KB, 100 * KB, 1 * MB, 2 * MB)

PERCENT_VALUES: Tuple[int, ...] = (0, 1, 5, 10, 20, 30, 40, 50, 60, 70, 80, 90, 100)

# Repetitions per day; 0 means the work happens once.
_REPEAT: Tuple[Tuple[float, str], ...] = (
    (0, "Once"),
    (1 / 30, "Every month"),
    (1 / 7, "Every week"),
    (1, "Every day"),
    (24, "Every hour"),
    (24 * 60, "Every minute"),
)

REPEAT_VALUES: Tuple[float, ...] = tuple(value for value, _ in _REPEAT)


def _trim(value: float) -> str:
    return f"{value:g}"


def bytes_to_string(size: float) -> str:
    if size >= GB:
        return f"{_trim(size / GB)} GB"
    if size >= MB:
        return f"{_trim(size / MB)} MB"
    if size >= KB:
        return f"{_trim(size / KB)} KB"
    return _trim(size)


def count_to_string(value: float) -> str:
    if value >= B:
        return f"{_trim(value / B)} B"
    if value >= M:
        return f"{_trim(value / M)} M"
    if value >= K:
        return f"{_trim(value / K)} K"
    return _trim(value)


def percent_to_string(percent: float) -> str:
    return f"{_trim(percent)}%"


def repeat_to_string(value: float) -> str:
    for repeat, text in _REPEAT:
        if repeat == value:
            return text
    return "Once"


def index_at_least(table: Sequence[float], value: float) -> int:
    """First index whose tier covers `value`; the last index if none does."""
    for i, tier in enumerate(table):
        if tier >= value:
            return i
    return len(table) - 1
