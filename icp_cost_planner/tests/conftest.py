import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1].parent
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))


def pytest_runtest_setup():
    # Fee schedules are cached per process; tests may point at other files.
    from icp_cost_planner.pricing.loader import default_fee_schedule

    default_fee_schedule.cache_clear()
