#!/usr/bin/env python3
"""
Simulate a round-robin group stage with Elo-driven match results.

Usage:
    python main.py --groups data/groups.json --seed 42

Examples:
    # Single simulation with the bundled groups
    python main.py

    # Reproducible run with a different K-factor
    python main.py --seed 7 --k-factor 24

    # Advancement odds over many simulations
    python main.py --runs 5000 --progress
"""
import argparse
import sys

from pydantic import ValidationError

from src.data.loader import DEFAULT_GROUPS_PATH, load_groups
from src.tournament.runner import GroupStageConfig, GroupStageRunner
from src.tournament.odds import simulate_advancement_odds
from src.tournament.display import format_odds_table
from src.utils.constants import (
    K_FACTOR, FORFEIT_PROBABILITY, ADVANCING_SLOTS
)


def positive_int(value):
    """argparse type for integers of at least 1."""
    number = int(value)
    if number < 1:
        raise argparse.ArgumentTypeError(f"must be at least 1, got {value}")
    return number


def parse_args(argv=None):
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description='Simulate a round-robin group stage and rank the group finishers.',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog='''
Group file format:
  {"A": [{"Team": "Canada", "ISOCode": "CAN", "FIBARanking": 7}, ...], ...}

Examples:
  python main.py --seed 42
  python main.py --runs 1000 --progress
'''
    )

    parser.add_argument(
        '--groups',
        type=str, default=str(DEFAULT_GROUPS_PATH),
        help='Path to the group definitions JSON (default: data/groups.json)'
    )
    parser.add_argument(
        '--seed',
        type=int, default=None,
        help='Random seed for a reproducible simulation'
    )
    parser.add_argument(
        '--k-factor',
        type=float, default=K_FACTOR,
        help=f'Elo K-factor for rating volatility (default: {K_FACTOR})'
    )
    parser.add_argument(
        '--forfeit-probability',
        type=float, default=FORFEIT_PROBABILITY,
        help=f'Chance that each side forfeits a match (default: {FORFEIT_PROBABILITY})'
    )
    parser.add_argument(
        '--advancing',
        type=int, default=ADVANCING_SLOTS,
        help=f'Number of teams that advance (default: {ADVANCING_SLOTS})'
    )
    parser.add_argument(
        '--runs', '-n',
        type=positive_int, default=1,
        help='Number of simulations; more than 1 prints advancement odds (default: 1)'
    )
    parser.add_argument(
        '--progress',
        action='store_true',
        help='Show a progress bar when simulating odds'
    )
    parser.add_argument(
        '--quiet', '-q',
        action='store_true',
        help='Minimal output (only final results)'
    )

    return parser.parse_args(argv)


def main(argv=None):
    """Main entry point."""
    args = parse_args(argv)

    try:
        config = GroupStageConfig(
            groups_path=args.groups,
            k_factor=args.k_factor,
            forfeit_probability=args.forfeit_probability,
            advancing_slots=args.advancing,
            seed=args.seed
        )
        definitions = load_groups(config.groups_path)

        if args.runs > 1:
            odds = simulate_advancement_odds(
                definitions,
                config,
                runs=args.runs,
                show_progress=args.progress
            )
            print(format_odds_table(odds, args.runs))
            return 0

        runner = GroupStageRunner(config, verbose=not args.quiet)
        result = runner.run(definitions)
    except (OSError, ValidationError, ValueError) as e:
        print(f"Error: {e}")
        return 1

    if args.quiet:
        for entry in result.advancing:
            print(f"{entry.rank}. {entry.name}")
        if result.eliminated is not None:
            print(f"Eliminated: {result.eliminated.name}")

    return 0


if __name__ == "__main__":
    sys.exit(main())
