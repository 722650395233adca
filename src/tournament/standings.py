"""
Group standings derived from team match records.

Standings are recomputed from scratch on every call: scored, conceded and
difference are summed from the match records, points and win/loss counts
are taken from the team counters. Teams are never modified.

Ordering is (points, difference, scored) descending, followed by a single
forward pass over adjacent teams level on points:
- if they met, the upper team is swapped down when it lost that match;
- if they never met, the team with more wins against the teams sharing
  that points total goes first.

The pass does not iterate to a fixed point. Two-way ties always resolve by
head-to-head, but a three-way cycle (A beat B, B beat C, C beat A) can end
in an order that still contradicts one of its results.
"""

from dataclasses import dataclass, replace
from typing import Dict, List, Optional, Sequence, Tuple

from src.tournament.context import SimulationContext
from src.tournament.team import Team
from src.utils.constants import LOSS


@dataclass(frozen=True)
class GroupStandingEntry:
    """One row of a group table."""
    rank: int
    name: str
    code: str
    wins: int
    losses: int
    points: int
    scores: int
    conceded: int
    difference: int
    group: Optional[str] = None


def sort_key(entry) -> Tuple[int, int, int]:
    """Primary ranking key: points, then point difference, then points scored."""
    return (entry.points, entry.difference, entry.scores)


def _tally(team: Team, group: Optional[str]) -> GroupStandingEntry:
    return GroupStandingEntry(
        rank=0,
        name=team.name,
        code=team.code,
        wins=team.wins,
        losses=team.losses,
        points=team.points,
        scores=sum(m.score for m in team.matches),
        conceded=sum(m.opponent_score for m in team.matches),
        difference=sum(m.difference for m in team.matches),
        group=group
    )


def _should_swap(upper: Team, lower: Team, ordered: Sequence[Team]) -> bool:
    record = upper.head_to_head(lower.code)
    if record is not None:
        return record.outcome == LOSS

    tied_codes = [t.code for t in ordered if t.points == upper.points]
    return lower.wins_against(tied_codes) > upper.wins_against(tied_codes)


def _break_ties(ordered: List[Team]) -> None:
    for i in range(len(ordered) - 1):
        upper, lower = ordered[i], ordered[i + 1]
        if upper.points != lower.points:
            continue
        if _should_swap(upper, lower, ordered):
            ordered[i], ordered[i + 1] = lower, upper


def resolve_standings(
    group_teams: Sequence[Team],
    group: Optional[str] = None
) -> List[GroupStandingEntry]:
    """
    Rank the teams of one group.

    Args:
        group_teams: Teams in group order
        group: Optional group id stored on each entry

    Returns:
        Standing entries ranked 1..N
    """
    tallies = {team.name: _tally(team, group) for team in group_teams}

    ordered = sorted(group_teams, key=lambda t: sort_key(tallies[t.name]), reverse=True)
    _break_ties(ordered)

    return [
        replace(tallies[team.name], rank=rank)
        for rank, team in enumerate(ordered, 1)
    ]


def resolve_group_standings(context: SimulationContext) -> Dict[str, List[GroupStandingEntry]]:
    """Rank every group of a simulation context."""
    return {
        group: resolve_standings(teams, group)
        for group, teams in context.items()
    }
