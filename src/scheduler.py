"""Daily tier progression sweep runner.

Runs the sweep once a day at a fixed local time (midnight by default),
alerting every customer who is one order short of the next tier.

Usage:
    python src/scheduler.py                # Sweep daily at 00:00
    python src/scheduler.py --at 06:30     # Sweep daily at 06:30
    python src/scheduler.py --run-once     # Sweep now and exit
"""

import argparse
import asyncio
from datetime import UTC, datetime, time, timedelta

from loyalty.domain import loyalty
from loyalty.progression.sweep import SweepTierProgressions
from loyalty.utils.logging import get_logger

logger = get_logger(__name__)


def _parse_time(value: str) -> time:
    try:
        return datetime.strptime(value, "%H:%M").time()
    except ValueError:
        raise argparse.ArgumentTypeError(f"expected HH:MM, got {value!r}") from None


def seconds_until(run_at: time, now: datetime) -> float:
    """Seconds from ``now`` until the next occurrence of ``run_at``."""
    target = datetime.combine(now.date(), run_at)
    if target <= now:
        target += timedelta(days=1)
    return (target - now).total_seconds()


def sweep_once() -> int:
    with loyalty.domain_context():
        alerted = loyalty.process(SweepTierProgressions(as_of=datetime.now(UTC)), asynchronous=False)
    return alerted


async def run(run_at: time):
    logger.info("Tier progression scheduler started", run_at=run_at.strftime("%H:%M"))
    while True:
        delay = seconds_until(run_at, datetime.now())
        logger.debug("Next tier progression sweep scheduled", in_seconds=round(delay))
        await asyncio.sleep(delay)
        try:
            sweep_once()
        except Exception as e:
            # A failed sweep must not stop tomorrow's run
            logger.error("Tier progression sweep failed", error=str(e))


def main():
    parser = argparse.ArgumentParser(description="Loyalty tier progression scheduler")
    parser.add_argument(
        "--at",
        type=_parse_time,
        default=time(0, 0),
        help="Local time of day to run the sweep, as HH:MM (default: 00:00)",
    )
    parser.add_argument(
        "--run-once",
        action="store_true",
        help="Run a single sweep immediately and exit",
    )
    args = parser.parse_args()

    loyalty.init()

    if args.run_once:
        alerted = sweep_once()
        print(f"Alerted {alerted} customer(s).")
        return

    asyncio.run(run(args.at))


if __name__ == "__main__":
    main()
