import math


def round_amount(value: float) -> float:
    """Round for display: tiny values keep one significant digit."""
    if value < 1e-10:
        return 0.0
    if value < 0.01:
        scale = 10 ** -math.floor(math.log10(value))
        return math.floor(value * scale + 0.5) / scale
    if value < 100:
        return math.floor(value * 100 + 0.5) / 100
    return float(math.floor(value + 0.5))


def _plain(value: float) -> str:
    return f"{value:.12f}".rstrip("0").rstrip(".")


def format_usd(value: float) -> str:
    r = round_amount(value)
    if r >= 100:
        return f"${r:,.0f}"
    return f"${_plain(r)}"


_CYCLE_UNITS = ((1e12, "T"), (1e9, "B"), (1e6, "M"), (1e3, "K"))


def format_cycles(value: float) -> str:
    for factor, suffix in _CYCLE_UNITS:
        if value >= factor:
            return f"{_plain(round_amount(value / factor))} {suffix}"
    return _plain(round_amount(value))
