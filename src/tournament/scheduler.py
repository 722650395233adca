"""
Round-robin group scheduling.

Pairs every team in a group with every other team exactly once.
"""

from itertools import combinations
from typing import List, Sequence, Tuple, TypeVar

T = TypeVar('T')


def round_robin_pairings(teams: Sequence[T]) -> List[Tuple[T, T]]:
    """
    Generate all pairings for a single round-robin group.

    Pairs (i, j) with i < j are produced in lexicographic order of the
    input indices, so the schedule is fixed by the group's input order.

    Args:
        teams: Teams in group order

    Returns:
        List of (team_a, team_b) tuples; empty for fewer than 2 teams
    """
    return list(combinations(teams, 2))


def num_matches(teams: Sequence) -> int:
    """Calculate number of matches in a round-robin group."""
    n = len(teams)
    return n * (n - 1) // 2
