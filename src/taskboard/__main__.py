"""CLI entry point for taskboard."""

import argparse
import logging
from pathlib import Path

from . import __version__
from .config import Settings
from .exceptions import PersistenceError
from .logging import setup_logging

logger = logging.getLogger(__name__)


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        prog="taskboard",
        description="Terminal kanban board for tasks grouped by project",
    )
    parser.add_argument(
        "--data-dir",
        type=Path,
        default=None,
        help="Directory for tasks.json, projects.json and taskboard.yml "
        "(default: ~/.local/share/taskboard)",
    )
    parser.add_argument(
        "--in-memory",
        action="store_true",
        help="Do not read or write any board data on disk",
    )
    parser.add_argument(
        "--reset",
        action="store_true",
        help="Delete all stored tasks and projects and exit",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="count",
        default=0,
        help="Increase logging verbosity (-v for INFO, -vv for DEBUG)",
    )
    parser.add_argument(
        "--log-file",
        type=Path,
        default=None,
        help="Path to write logs to file",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    return parser.parse_args(argv)


def build_settings(args: argparse.Namespace) -> Settings:
    """Build settings from CLI args, falling back to TASKBOARD_* env vars."""
    settings_kwargs: dict = {}
    if args.data_dir:
        settings_kwargs["data_dir"] = args.data_dir
    if args.in_memory:
        settings_kwargs["in_memory"] = True
    if args.verbose:
        settings_kwargs["verbose"] = args.verbose
    if args.log_file:
        settings_kwargs["log_file"] = args.log_file
    return Settings(**settings_kwargs)


def run_reset(settings: Settings) -> int:
    """Clear stored board data. Returns an exit code."""
    from .repositories import JsonFileRepository

    repository = JsonFileRepository(settings.data_dir)
    try:
        repository.clear_all()
    except PersistenceError as e:
        print(f"Error: {e}")
        return 1
    print(f"Cleared board data in {settings.data_dir}")
    return 0


def main(argv: list[str] | None = None) -> None:
    """Main entry point."""
    args = parse_args(argv)
    settings = build_settings(args)

    setup_logging(settings.verbose, settings.log_file)

    if args.reset:
        raise SystemExit(run_reset(settings))

    # Import here so --help and --reset don't pay for Textual
    from .app import run

    run(settings)


if __name__ == "__main__":
    main()
