"""
Cross-group ranking of group finishers.

Teams finishing in the same group position form a bucket; each bucket is
ordered by (points, difference, scored) and the buckets are concatenated
winners first. The top entries of that overall list advance.
"""

from dataclasses import dataclass, field, replace
from typing import Dict, List, Optional, Sequence

from src.tournament.standings import GroupStandingEntry, sort_key
from src.utils.constants import ADVANCING_SLOTS, RANKED_POSITIONS


@dataclass
class QualificationResult:
    """Overall ranking of group finishers and the advancement cutoff."""
    overall: List[GroupStandingEntry]
    advancing: List[GroupStandingEntry]
    non_advancing: List[GroupStandingEntry] = field(default_factory=list)

    @property
    def eliminated(self) -> Optional[GroupStandingEntry]:
        """First team below the cutoff, or None if every ranked team advances."""
        return self.non_advancing[0] if self.non_advancing else None


def rank_top_teams(
    standings_by_group: Dict[str, Sequence[GroupStandingEntry]],
    advancing_slots: int = ADVANCING_SLOTS,
    positions: int = RANKED_POSITIONS
) -> QualificationResult:
    """
    Rank the top finishers of every group against each other.

    Args:
        standings_by_group: Ranked standings per group, in group order
        advancing_slots: Number of teams that advance
        positions: Number of finishing positions taken from each group

    Returns:
        QualificationResult with entries re-ranked 1..N overall

    Raises:
        ValueError: If advancing_slots or positions is negative
    """
    if advancing_slots < 0:
        raise ValueError("advancing_slots cannot be negative")
    if positions < 0:
        raise ValueError("positions cannot be negative")

    overall: List[GroupStandingEntry] = []
    for position in range(positions):
        bucket = [
            standings[position]
            for standings in standings_by_group.values()
            if len(standings) > position
        ]
        overall.extend(sorted(bucket, key=sort_key, reverse=True))

    overall = [replace(entry, rank=rank) for rank, entry in enumerate(overall, 1)]

    return QualificationResult(
        overall=overall,
        advancing=overall[:advancing_slots],
        non_advancing=overall[advancing_slots:]
    )
