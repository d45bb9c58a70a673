"""
Villager Generator - Main Entry Point

Generates random villager character sheets and prints them as cards.

Usage:
    villagers            # one villager
    villagers 5          # five villagers
    villagers 3 --seed 7 # reproducible output
"""

import argparse
import logging
import random
import re
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Sequence

from rich.console import Console

from villagers.dice import DiceRoller
from villagers.generator import VillagerGenerator
from villagers.render import render_villagers
from villagers.table_loader import LoadError, ReferenceTables


def setup_logging(verbose: bool = False) -> None:
    """Configure logging based on verbosity level."""
    level = logging.DEBUG if verbose else logging.WARNING
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    )


logger = logging.getLogger(__name__)


_LEADING_INT = re.compile(r"^\s*([+-]?\d+)")


def parse_count(text: Optional[str]) -> int:
    """
    Parse the villager count argument.

    A missing or empty argument means one villager. Otherwise the leading
    integer is used; text with no leading integer, or a negative number,
    means none.
    """
    if not text:
        return 1
    match = _LEADING_INT.match(text)
    if not match:
        return 0
    return max(int(match.group(1)), 0)


# =============================================================================
# CONFIGURATION
# =============================================================================

@dataclass
class GeneratorConfig:
    """Configuration for a generation run."""

    count: int = 1
    seed: Optional[int] = None
    data_dir: Optional[Path] = None
    verbose: bool = False

    def __post_init__(self):
        """Ensure paths are Path objects."""
        if isinstance(self.data_dir, str):
            self.data_dir = Path(self.data_dir)


def parse_arguments(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        prog="villagers",
        description="Generate random villager character sheets",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  villagers                  # One villager
  villagers 4                # Four villagers
  villagers 4 --seed 1234    # Same four villagers every time
        """
    )
    parser.add_argument(
        "count",
        nargs="?",
        default=None,
        help="Number of villagers to generate (default: 1)",
    )
    parser.add_argument(
        "--seed",
        type=int,
        help="Random seed for reproducible villagers",
    )
    parser.add_argument(
        "--data-dir",
        type=Path,
        help="Directory holding the reference tables (default: bundled tables)",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable verbose logging, including every dice roll",
    )
    return parser.parse_args(argv)


def create_config_from_args(args: argparse.Namespace) -> GeneratorConfig:
    """Create GeneratorConfig from parsed arguments."""
    return GeneratorConfig(
        count=parse_count(args.count),
        seed=args.seed,
        data_dir=args.data_dir,
        verbose=args.verbose,
    )


# =============================================================================
# MAIN ENTRY POINT
# =============================================================================

def run(config: GeneratorConfig, console: Optional[Console] = None) -> int:
    """
    Generate and print villagers for a configuration.

    Returns:
        Process exit code: 0 on success, 1 if the tables could not be loaded
    """
    try:
        tables = ReferenceTables.load(config.data_dir)
    except LoadError as e:
        logger.error("%s", e)
        return 1

    dice = DiceRoller(random.Random(config.seed))
    generator = VillagerGenerator(tables, dice)
    villagers = generator.generate_many(config.count)
    logger.info("Generated %d villagers", len(villagers))

    render_villagers(villagers, console)
    return 0


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Main entry point for CLI usage."""
    args = parse_arguments(argv)
    setup_logging(args.verbose)
    return run(create_config_from_args(args))


if __name__ == "__main__":
    sys.exit(main())
