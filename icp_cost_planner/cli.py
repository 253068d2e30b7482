#!/usr/bin/env python
# -*- coding: utf-8 -*-

"""
ICP canister cost planner – CLI

Flow:
- Loads a saved configuration (JSON) or builds one from a preset.
- Applies --days / --subnet-index overrides.
- Prices every feature with the subnet's fee schedule and merges the costs.
- Prints the breakdown (rich table, Markdown or JSON) and optionally saves
  the configuration for later sessions.
"""

import argparse
import json
import logging
import sys
from typing import List, Optional

from rich.console import Console
from rich.table import Table

from .config import DEFAULT_DAYS, DEFAULT_LOG_LEVEL, DEFAULT_SUBNET_INDEX, SUBNET_SIZES
from .errors import PlannerError
from .estimate import estimate, summarize
from .features import build_default_registry
from .persistence import Configuration, load, save
from .presets import PRESETS
from .reporting import build_rich_table, render_breakdown_table

console = Console()


# --------------------------------------------------------------------
# Argument parsing
# --------------------------------------------------------------------
def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="icp-cost",
        description=(
            "ICP canister cost planner\n\n"
            "Compose a workload from billable features (canisters, storage, ingress,\n"
            "calls, timers, signatures, HTTP outcalls) and get the one-time and\n"
            "per-day costs in USD and cycles."
        ),
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
    )

    source = parser.add_mutually_exclusive_group(required=True)
    source.add_argument(
        "--config",
        type=str,
        help="Saved configuration (JSON) to load.",
    )
    source.add_argument(
        "--preset",
        choices=sorted(PRESETS),
        help="Start from a preset workload instead of a saved configuration.",
    )
    source.add_argument(
        "--list-features",
        action="store_true",
        help="List the billable features with a short description and exit.",
    )

    parser.add_argument(
        "--preset-arg",
        type=int,
        default=1000,
        help="Size parameter of the preset (users or trades per day).",
    )

    parser.add_argument(
        "--days",
        type=float,
        default=None,
        help=f"Amortization horizon in days (default: from the configuration, or {DEFAULT_DAYS}).",
    )

    parser.add_argument(
        "--subnet-index",
        type=int,
        default=None,
        help=f"Index into the subnet sizes {SUBNET_SIZES} (default: from the configuration, or {DEFAULT_SUBNET_INDEX}).",
    )

    parser.add_argument(
        "--save",
        type=str,
        default=None,
        help="Write the (possibly overridden) configuration to this path.",
    )

    parser.add_argument(
        "--output-format",
        choices=["table", "markdown", "json"],
        default="table",
        help="How to print the breakdown.",
    )

    parser.add_argument(
        "--log-level",
        choices=["CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"],
        default=DEFAULT_LOG_LEVEL,
        help="Logging level for internal messages.",
    )

    return parser.parse_args(argv)


def _build_configuration(args: argparse.Namespace) -> Configuration:
    if args.config:
        config = load(args.config)
    else:
        config = Configuration(features=PRESETS[args.preset](args.preset_arg))

    if args.days is not None:
        if args.days < 0:
            raise PlannerError(f"--days must be non-negative, got {args.days}")
        config.days = args.days
    if args.subnet_index is not None:
        if not 0 <= args.subnet_index < len(config.subnet_values):
            raise PlannerError(
                f"--subnet-index {args.subnet_index} out of range for {len(config.subnet_values)} subnet sizes"
            )
        config.subnet_index = args.subnet_index
    return config


def _print_features() -> None:
    table = Table(title="Billable features", show_lines=True)
    table.add_column("Feature", style="bold")
    table.add_column("Description")
    for label, build in build_default_registry().items():
        table.add_row(label, build().info())
    console.print(table)


def _breakdown_json(config: Configuration) -> dict:
    breakdown = estimate(config.features, config.pricing())
    summary = summarize(breakdown, config.days)
    return {
        "days": config.days,
        "subnet_size": config.subnet_size,
        "items": [
            {
                "category": cost.category.name.lower(),
                "label": cost.label,
                "kind": cost.kind.name.lower(),
                "usd": cost.amount.usd,
                "cycles": cost.amount.cycles,
            }
            for cost in breakdown
        ],
        "total": {
            "one_time": {"usd": summary.one_time.amount.usd, "cycles": summary.one_time.amount.cycles},
            "per_day": {"usd": summary.per_day.amount.usd, "cycles": summary.per_day.amount.cycles},
            "projected": {"usd": summary.projected.usd, "cycles": summary.projected.cycles},
            "overall": {"usd": summary.total.usd, "cycles": summary.total.cycles},
        },
    }


# --------------------------------------------------------------------
# Main
# --------------------------------------------------------------------
def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, args.log_level.upper(), logging.WARNING),
        format="%(asctime)s [%(levelname)s] %(name)s - %(message)s",
    )
    logger = logging.getLogger("icp_cost_planner")
    logger.debug("CLI arguments: %s", args)

    if args.list_features:
        _print_features()
        return 0

    try:
        config = _build_configuration(args)
    except FileNotFoundError as ex:
        console.print(f"[red]Configuration file not found: {ex.filename}[/red]")
        return 1
    except OSError as ex:
        console.print(f"[red]Could not read configuration: {ex}[/red]")
        return 1
    except PlannerError as ex:
        console.print(f"[red]{ex}[/red]")
        return 1

    logger.info(
        "Pricing %d features on a %d-node subnet over %g days",
        len(config.features),
        config.subnet_size,
        config.days,
    )

    if args.output_format == "json":
        print(json.dumps(_breakdown_json(config), indent=2))
    else:
        breakdown = estimate(config.features, config.pricing())
        if args.output_format == "markdown":
            print(render_breakdown_table(breakdown, config.days))
        else:
            summary = summarize(breakdown, config.days)
            console.print(build_rich_table(breakdown, config.days, title=f"{config.subnet_size}-node subnet"))
            console.print(
                f"[bold]Total over {config.days:g} days:[/bold] "
                f"${summary.total.usd:,.2f} ({summary.total.cycles:,.0f} cycles)"
            )

    if args.save:
        path = save(config, args.save)
        console.print(f"[green]Saved configuration to {path}[/green]", highlight=False)

    return 0


if __name__ == "__main__":
    sys.exit(main())
