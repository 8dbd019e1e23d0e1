"""
Rocket Ascent Simulator - CLI

Interactive console: starts the background clock, reads one command per line
from stdin, and prints observer output. Command errors are reported and the
loop keeps reading; ``exit`` terminates.
"""

import argparse
import dataclasses
import logging
import sys
from typing import Iterable

from . import constants as C
from .clock import ClockDriver
from .commands import CommandRouter, create_default_router
from .config import create_default_config
from .context import RocketContext
from .errors import CommandError
from .observers import ConsoleObserver, LoggingObserver, TelemetryRecorder
from .plotting import plot_telemetry

logger = logging.getLogger(__name__)

BANNER = "Commands: start_checks, launch, fast_forward X, tick, exit"


def _positive_float(text: str) -> float:
    try:
        value = float(text)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid number: {text!r}") from None
    if not value > 0:
        raise argparse.ArgumentTypeError(f"must be positive: {text}")
    return value


def parse_args(argv=None):
    """Parse command-line arguments."""
    parser = argparse.ArgumentParser(
        description="Rocket Ascent Simulator",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter
    )
    parser.add_argument(
        "--interval", "-i",
        type=_positive_float,
        default=C.TICK_INTERVAL,
        help="Seconds between clock ticks"
    )
    parser.add_argument(
        "--no-clock",
        action="store_true",
        help="Do not start the background clock (manual ticks only)"
    )
    parser.add_argument(
        "--quiet", "-q",
        action="store_true",
        help="Send telemetry to the log instead of the console"
    )
    parser.add_argument(
        "--log-level",
        type=str,
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level"
    )
    parser.add_argument(
        "--plot-dir",
        type=str,
        default=None,
        help="Write telemetry plots to this directory on exit"
    )
    return parser.parse_args(argv)


def run_console(router: CommandRouter, lines: Iterable[str]):
    """
    Feed input lines to the router until input ends or ``exit`` is issued.

    Recoverable errors are printed as ``Error: <message>``; SystemExit from
    ``exit`` propagates to the caller.
    """
    for line in lines:
        try:
            router.handle(line)
        except CommandError as e:
            print(f"Error: {e}", flush=True)
        except Exception as e:
            logger.error(f"Command failed: {line.strip()!r}: {e}", exc_info=True)
            print(f"Error: {e}", flush=True)


def main(argv=None):
    """Main execution flow."""
    args = parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )

    config = dataclasses.replace(create_default_config(), tick_interval=args.interval)
    context = RocketContext(config)
    if args.quiet:
        context.add_observer(LoggingObserver())
    else:
        context.add_observer(ConsoleObserver())
    recorder = TelemetryRecorder()
    context.add_observer(recorder)

    router = create_default_router(context)
    clock = None if args.no_clock else ClockDriver(context)

    print(BANNER, flush=True)
    if clock is not None:
        clock.start()

    try:
        run_console(router, sys.stdin)
    finally:
        if clock is not None:
            clock.stop()
        if args.plot_dir and len(recorder) > 0:
            paths = plot_telemetry(recorder, args.plot_dir)
            logger.info(f"Wrote {len(paths)} plots to {args.plot_dir}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
