#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
config.py

Configuration constants and defaults for the ICP canister cost planner.

Key idea: the planner itself never prices anything
--------------------------------------------------
Features resolve physical quantities (bytes, instructions, repetitions) and
hand them to a pricing engine. The engine is parameterized by the subnet size
(number of replica nodes) and by the cycles/USD exchange rate, both of which
are defined here and can be overridden through environment variables.
"""

import os
from pathlib import Path

# ---------------------------------------------------------------------
# Amortization horizon
# ---------------------------------------------------------------------
# DEFAULT_DAYS:
# - Number of days over which per-day costs are projected in summaries.
# - Can be overridden via env var ICPCOST_DEFAULT_DAYS.
DEFAULT_DAYS = int(os.getenv("ICPCOST_DEFAULT_DAYS", "30"))

# ---------------------------------------------------------------------
# Subnet sizes
# ---------------------------------------------------------------------
# SUBNET_SIZES:
# - Supported subnet sizes (nodes per subnet). A configuration stores an index
#   into this table together with a copy of the table itself.
# - 13 is the regular application subnet, larger ones are fiduciary/system subnets.
SUBNET_SIZES = [13, 28, 34, 40]

# DEFAULT_SUBNET_INDEX:
# - Index into SUBNET_SIZES used by fresh configurations.
DEFAULT_SUBNET_INDEX = int(os.getenv("ICPCOST_SUBNET_INDEX", "0"))

# ---------------------------------------------------------------------
# Exchange rate
# ---------------------------------------------------------------------
# USD_PER_XDR:
# - One trillion cycles are pegged to one XDR. This is the XDR price in USD.
USD_PER_XDR = float(os.getenv("ICPCOST_USD_PER_XDR", "1.35"))

# ---------------------------------------------------------------------
# Fee schedule
# ---------------------------------------------------------------------
# FEES_FILE:
# - YAML fee schedule for the reference subnet (in cycles).
# - Defaults to the file shipped with the package.
FEES_FILE = Path(
    os.getenv(
        "ICPCOST_FEES_FILE",
        str(Path(__file__).resolve().parent / "pricing" / "definitions" / "fees.yaml"),
    )
)

# ---------------------------------------------------------------------
# Logging
# ---------------------------------------------------------------------
DEFAULT_LOG_LEVEL = os.getenv("ICPCOST_LOG_LEVEL", "WARNING")
