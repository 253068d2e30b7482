from .format import format_cycles, format_usd, round_amount
from .tables import build_rich_table, render_breakdown_table

__all__ = ["format_cycles", "format_usd", "round_amount", "build_rich_table", "render_breakdown_table"]
