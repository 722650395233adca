"""
Group phase simulation: every pairing in a group is played once.
"""

from typing import Dict, List, Sequence

from src.tournament.context import SimulationContext
from src.tournament.match import MatchSimulator
from src.tournament.scheduler import round_robin_pairings
from src.tournament.team import Team, MatchResult


class GroupSimulator:
    """Drives round-robin play within groups."""

    def __init__(self, match_simulator: MatchSimulator):
        self.match_simulator = match_simulator

    def simulate_group(self, group_teams: Sequence[Team]) -> List[MatchResult]:
        """
        Play every unordered pair of the group once.

        Args:
            group_teams: Teams in group order (mutated by the matches)

        Returns:
            Match results in schedule order; empty for groups under 2 teams
        """
        return [
            self.match_simulator.simulate(team_a, team_b)
            for team_a, team_b in round_robin_pairings(group_teams)
        ]

    def simulate_group_phase(self, context: SimulationContext) -> Dict[str, List[MatchResult]]:
        """Simulate every group of the context, in group order."""
        return {
            group: self.simulate_group(teams)
            for group, teams in context.items()
        }
