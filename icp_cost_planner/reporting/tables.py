from __future__ import annotations

from typing import Any, List

from rich.table import Table

from ..breakdown import Breakdown, Cost, Kind
from ..estimate import summarize
from .format import format_cycles, format_usd


def _md_escape(v: Any) -> str:
    s = "" if v is None else str(v)
    # Escape pipes so Markdown tables don't break
    return s.replace("|", "\\|").replace("\n", " ").strip()


def _kind_label(kind: Kind) -> str:
    return "one-time" if kind == Kind.ONE_TIME else "per day"


def _rows(breakdown: Breakdown, days: float) -> List[List[str]]:
    def row(label: str, cost: Cost) -> List[str]:
        projected = cost.project(days)
        return [
            label,
            _kind_label(cost.kind),
            format_usd(cost.amount.usd),
            format_cycles(cost.amount.cycles),
            format_usd(projected.usd),
            format_cycles(projected.cycles),
        ]

    rows = [row(cost.label, cost) for cost in breakdown]
    summary = summarize(breakdown, days)
    rows.append(row("Total", summary.one_time))
    rows.append(row("Total", summary.per_day))
    return rows


def _headers(days: float) -> List[str]:
    return ["Item", "Kind", "USD", "Cycles", f"USD ({days:g} days)", f"Cycles ({days:g} days)"]


def render_breakdown_table(breakdown: Breakdown, days: float) -> str:
    """Markdown table of all line items followed by the two total rows."""
    out: List[str] = []
    out.append("| " + " | ".join(_headers(days)) + " |")
    out.append("|---|---|---:|---:|---:|---:|")
    for r in _rows(breakdown, days):
        out.append("| " + " | ".join(_md_escape(c) for c in r) + " |")

    summary = summarize(breakdown, days)
    out.append("")
    out.append(
        f"**Total over {days:g} days:** {format_usd(summary.total.usd)} "
        f"({format_cycles(summary.total.cycles)} cycles)"
    )
    return "\n".join(out)


def build_rich_table(breakdown: Breakdown, days: float, title: str = "Cost breakdown") -> Table:
    table = Table(title=title)
    for i, header in enumerate(_headers(days)):
        table.add_column(header, justify="left" if i < 2 else "right")
    rows = _rows(breakdown, days)
    for i, r in enumerate(rows):
        is_total = i >= len(rows) - 2
        if is_total and i == len(rows) - 2:
            table.add_section()
        table.add_row(*r, style="bold" if is_total else None)
    return table
