"""
Team state and match records for a group stage simulation.
"""

from dataclasses import dataclass, field
from typing import List, Optional

from src.utils.constants import WIN


@dataclass(frozen=True)
class MatchRecord:
    """One side's view of a completed match."""
    opponent: str
    score: int
    opponent_score: int
    difference: int
    outcome: int
    forfeit: bool = False

    @property
    def won(self) -> bool:
        return self.outcome == WIN


@dataclass(frozen=True)
class MatchResult:
    """A completed match as listed in the group phase log."""
    team_a: str
    team_b: str
    score_a: int
    score_b: int
    forfeit: bool = False

    @property
    def winner(self) -> str:
        return self.team_a if self.score_a > self.score_b else self.team_b


@dataclass
class Team:
    """
    Mutable state of a team during a simulation.

    Cumulative counters are updated by the match simulator; matches holds
    one MatchRecord per game played, in chronological order.
    """
    name: str
    code: str
    ranking: int
    rating: float
    points: int = 0
    wins: int = 0
    losses: int = 0
    scores: int = 0
    conceded: int = 0
    difference: int = 0
    matches: List[MatchRecord] = field(default_factory=list)

    def head_to_head(self, opponent_code: str) -> Optional[MatchRecord]:
        """Return the first record against opponent_code, or None if they never met."""
        for record in self.matches:
            if record.opponent == opponent_code:
                return record
        return None

    def wins_against(self, opponent_codes) -> int:
        """Count wins against any of the given opponent codes."""
        codes = set(opponent_codes)
        return sum(1 for r in self.matches if r.opponent in codes and r.won)
