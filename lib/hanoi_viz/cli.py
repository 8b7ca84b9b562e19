#!/usr/bin/env python3
"""
Command line driver for the Towers of Hanoi visualizer.

Asks for a disk count, shows the starting pegs, then draws every move of the
optimal solution and prints how long it took.
"""

import argparse
import logging
import sys
from typing import List, Optional

from pydantic import ValidationError

from .config import HanoiConfig, load_config
from .logging_setup import configure_logging
from .visualizer import HanoiVisualizer

logger = logging.getLogger(__name__)

YES_ANSWERS = ("y", "yes")


def parse_disk_count(text: str) -> Optional[int]:
    """Return the disk count typed by the user, or None if it is not a positive integer."""
    try:
        value = int(text.strip())
    except ValueError:
        return None
    return value if value > 0 else None


def confirm(question: str) -> bool:
    answer = input(f"{question} (y/n): ")
    return answer.strip().lower() in YES_ANSWERS


def confirm_large(num_disks: int, threshold: int) -> bool:
    """Ask before starting a run above the threshold; smaller runs pass straight through"""
    if num_disks <= threshold:
        return True
    moves = 2 ** num_disks - 1
    print(f"Warning: {num_disks} disks needs {moves} moves and may take a long time.")
    return confirm("Continue?")


def prompt_disk_count(confirm_threshold: int) -> int:
    """Keep asking until the user enters a usable disk count."""
    while True:
        text = input("Enter number of disks: ")
        num_disks = parse_disk_count(text)
        if num_disks is None:
            print("Invalid input. Please enter a positive integer.")
            logger.debug(f"Rejected disk count {text!r}")
            continue
        if not confirm_large(num_disks, confirm_threshold):
            continue
        return num_disks


def wait_for_start() -> None:
    input("Press Enter to start solving...")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="hanoi-viz",
        description="Draw the Towers of Hanoi solution move by move."
    )
    parser.add_argument("--disks", type=int, default=None,
                        help="Number of disks (prompted for when omitted)")
    parser.add_argument("--delay-ms", type=int, default=None,
                        help="Pause between moves in milliseconds (default: 500)")
    parser.add_argument("--no-delay", action="store_true",
                        help="Draw moves without pausing")
    parser.add_argument("--yes", "-y", action="store_true",
                        help="Skip the confirmation and start prompts")
    parser.add_argument("--config", default=None,
                        help="YAML file overriding the default settings")
    parser.add_argument("--log-level", default=None,
                        help="Log file level (DEBUG, INFO, WARNING, ...)")
    return parser


def load_settings(args: argparse.Namespace) -> HanoiConfig:
    return load_config(
        config_file=args.config,
        delay_ms=args.delay_ms,
        pacing="none" if args.no_delay else None,
        log_level=args.log_level,
    )


def run(args: argparse.Namespace) -> int:
    try:
        config = load_settings(args)
    except (ValidationError, ValueError, FileNotFoundError) as e:
        print(f"Configuration error: {e}", file=sys.stderr)
        return 2

    log_file = configure_logging(config.log_dir, config.log_level,
                                 config.console_log_level, config.log_to_file)
    if log_file:
        logger.info(f"Logging to {log_file}")

    if args.disks is not None:
        if args.disks <= 0:
            print("Invalid input. --disks must be a positive integer.", file=sys.stderr)
            return 2
        num_disks = args.disks
        if not args.yes and not confirm_large(num_disks, config.confirm_threshold):
            print("Aborted.")
            return 1
    else:
        num_disks = prompt_disk_count(config.confirm_threshold)

    visualizer = HanoiVisualizer(num_disks, config=config)
    visualizer.show_initial()
    if not args.yes:
        wait_for_start()

    stats = visualizer.run()
    print()
    print(stats.summary())
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    try:
        return run(args)
    except EOFError:
        print("\nNo input available, exiting.")
        return 1
    except KeyboardInterrupt:
        print("\nInterrupted.")
        return 130


if __name__ == "__main__":
    sys.exit(main())
