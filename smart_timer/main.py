"""Main entry point for smart-timer."""

import argparse
import sys
from pathlib import Path

import yaml

from smart_timer.errors import SmartTimerError
from smart_timer.log import configure
from smart_timer.runtime.settings import DEFAULT_CONFIG_PATH, load_settings
from smart_timer.runtime.watcher import IdleWatcher, WatchOutcome

# Same status as coreutils `timeout` when the time limit is hit
EXIT_TIMED_OUT = 124
EXIT_INTERRUPTED = 130


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="smart-timer",
        description="Exit once standard input has been idle for a period of time",
    )
    parser.add_argument(
        "--config",
        "-c",
        type=Path,
        default=DEFAULT_CONFIG_PATH,
        help=f"Path to configuration file (default: {DEFAULT_CONFIG_PATH})",
    )
    parser.add_argument(
        "--interval",
        "-i",
        type=float,
        default=None,
        help="Milliseconds between activity samples (default: 200)",
    )
    parser.add_argument(
        "--timeout",
        "-t",
        type=float,
        default=None,
        help="Milliseconds of inactivity before timing out (default: 2000)",
    )
    parser.add_argument(
        "--echo",
        "-e",
        action="store_true",
        default=None,
        help="Copy input lines to standard output",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Log timer activity to standard error",
    )
    parser.add_argument(
        "--version",
        "-v",
        action="store_true",
        help="Show version and exit",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    """Main entry point.

    Args:
        argv: Command-line arguments; sys.argv is used if None.

    Returns:
        Exit code (0 when input ended, 124 on idle timeout, 1 on error).
    """
    args = build_parser().parse_args(argv)

    if args.version:
        from smart_timer import __version__

        print(f"smart-timer v{__version__}")
        return 0

    configure("DEBUG" if args.verbose else "WARNING")

    try:
        settings = load_settings(
            args.config,
            interval=args.interval,
            timeout=args.timeout,
            echo=args.echo,
        )
        result = IdleWatcher(settings, sys.stdin, output=sys.stdout).run()
    except KeyboardInterrupt:
        print("\nInterrupted by user.", file=sys.stderr)
        return EXIT_INTERRUPTED
    except (SmartTimerError, yaml.YAMLError, OSError, UnicodeError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    if result.outcome is WatchOutcome.TIMED_OUT:
        print(f"Idle for {result.idle_ms:.0f}ms after {result.lines} line(s).", file=sys.stderr)
        return EXIT_TIMED_OUT

    return 0


if __name__ == "__main__":
    sys.exit(main())
