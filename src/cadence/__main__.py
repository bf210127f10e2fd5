"""Cadence command line entry point.

Usage:
    python -m cadence COMMAND HISTORY [OPTIONS]

Commands:
    recommendations  Ranked urgency list with rolling averages and streaks
    analytics        Lifetime averages and longest streaks
    streaks          Longest, current and perfect streak per activity type
    season           Season review (defaults to the last completed season)
"""

import argparse
import json
import logging
import sys
from datetime import UTC, datetime
from pathlib import Path
from typing import Any

from dotenv import load_dotenv

from . import __version__
from .clock import Season, SeasonWindow
from .config import CadenceConfig, LoggingConfig
from .config.loader import load_config
from .config.profiles import detect_profile
from .engine import FrequencyEngine
from .errors import CadenceError
from .history import History, load_history

COMMANDS = ("recommendations", "analytics", "streaks", "season")


def setup_logging(config: LoggingConfig) -> None:
    """Configure logging based on config."""
    numeric_level = getattr(logging, config.level.upper(), logging.INFO)
    logging.basicConfig(
        level=numeric_level,
        format=config.format,
        datefmt=config.datefmt,
        stream=sys.stderr,
    )


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        prog="cadence",
        description="Cadence - frequency and off-time analytics",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python -m cadence recommendations history.yaml
  python -m cadence analytics history.yaml --as-of 2024-03-01T12:00:00Z
  python -m cadence season history.yaml --season winter --year 2023

Environment:
  CADENCE_PROFILE    Set profile (dev, prod, test)
""",
    )

    parser.add_argument("command", choices=COMMANDS, help="What to compute")
    parser.add_argument("history", type=Path, help="YAML or JSON history document")

    parser.add_argument(
        "--config",
        type=Path,
        help="Path to YAML config file",
        metavar="PATH",
    )
    parser.add_argument(
        "--profile",
        choices=["dev", "prod", "test"],
        help="Configuration profile to use",
    )
    parser.add_argument(
        "--as-of",
        type=str,
        default=None,
        help="ISO-8601 instant treated as now. Defaults to the current time.",
    )
    parser.add_argument(
        "--time-zone",
        type=str,
        default=None,
        help="IANA time zone. Overrides the history document and config.",
    )
    parser.add_argument(
        "--season",
        choices=[season.value for season in Season],
        help="Season to review (with --year)",
    )
    parser.add_argument("--year", type=int, help="Year the season starts in")
    parser.add_argument(
        "--version",
        action="version",
        version=f"Cadence v{__version__}",
    )

    return parser.parse_args(argv)


def parse_as_of(value: str | None) -> datetime:
    """Parse the --as-of option; naive values are UTC."""
    if value is None:
        return datetime.now(UTC)
    instant = datetime.fromisoformat(value.strip().replace("Z", "+00:00"))
    if instant.tzinfo is None:
        instant = instant.replace(tzinfo=UTC)
    return instant


def _load(args: argparse.Namespace) -> CadenceConfig:
    if args.config:
        return load_config(path=args.config)
    return load_config(profile=args.profile or detect_profile().value)


def run(args: argparse.Namespace, config: CadenceConfig, history: History) -> Any:
    """Run a command and return JSON-ready output."""
    as_of = parse_as_of(args.as_of)
    engine = FrequencyEngine(
        time_zone=args.time_zone or history.time_zone or config.engine.default_time_zone,
        off_times=history.off_times,
        tag_members=history.tag_members,
        config=config.engine,
    )

    if args.command == "recommendations":
        items = engine.recommendations(history.activity_types, history.records, as_of)
        return {"recommendations": [item.to_dict() for item in items]}

    if args.command == "analytics":
        summaries = engine.analytics(history.activity_types, history.records, as_of)
        return {"analytics": [summary.to_dict() for summary in summaries]}

    if args.command == "streaks":
        return {
            "streaks": {
                activity_type.id: engine.streaks(activity_type, history.records, as_of).to_dict()
                for activity_type in history.activity_types
            }
        }

    window = None
    if args.season is None and args.year is not None:
        raise ValueError("--year requires --season")
    if args.season is not None:
        if args.year is None:
            raise ValueError("--season requires --year")
        window = SeasonWindow(Season(args.season), args.year)
    review = engine.season_review(history.activity_types, history.records, window, as_of)
    return {"review": review.to_dict() if review else None}


def main(argv: list[str] | None = None) -> int:
    """Main entry point.

    Returns:
        Exit code (0 for success, non-zero for errors)
    """
    load_dotenv()
    args = parse_args(argv)

    try:
        config = _load(args)
    except FileNotFoundError as e:
        if args.config or args.profile:
            print(f"Error: Config file not found: {e}", file=sys.stderr)
            return 1
        config = CadenceConfig()

    setup_logging(config.logging)
    logger = logging.getLogger("cadence")
    logger.debug(f"Cadence v{__version__}, log level {config.logging.level}")

    try:
        history = load_history(args.history)
        output = run(args, config, history)
    except FileNotFoundError as e:
        logger.error(str(e))
        return 1
    except CadenceError as e:
        logger.error(f"Error: {e}")
        return 1
    except (ValueError, KeyError) as e:
        logger.error(f"Invalid input: {e}")
        return 1

    print(json.dumps(output, indent=2))
    return 0


if __name__ == "__main__":
    sys.exit(main())
