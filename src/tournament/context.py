"""
Simulation context: owns every Team taking part in one simulation.
"""

from typing import Dict, List, Iterator, Tuple

from src.data.loader import GroupDefinitions
from src.rating.elo import RatingModel
from src.tournament.team import Team


class SimulationContext:
    """
    Holds the teams of one simulated group stage, grouped in input order.

    Components receive teams from the context and mutate only those;
    a fresh context is built for every simulation run.
    """

    def __init__(self, groups: Dict[str, List[Team]]):
        """
        Initialize the context.

        Args:
            groups: Mapping of group id to its teams, in group order

        Raises:
            ValueError: If a team name or code appears more than once
        """
        self.groups = {g: list(teams) for g, teams in groups.items()}
        self.teams: Dict[str, Team] = {}
        codes = set()
        for teams in self.groups.values():
            for team in teams:
                if team.name in self.teams:
                    raise ValueError(f"Duplicate team name: {team.name}")
                if team.code in codes:
                    raise ValueError(f"Duplicate team code: {team.code}")
                self.teams[team.name] = team
                codes.add(team.code)

    @classmethod
    def from_definitions(
        cls,
        definitions: GroupDefinitions,
        rating_model: RatingModel
    ) -> "SimulationContext":
        """
        Build fresh teams from group definitions.

        Raises:
            InvalidRankError: If a ranking is outside the rating model's bounds
        """
        groups = {
            group: [
                Team(
                    name=d.name,
                    code=d.code,
                    ranking=d.ranking,
                    rating=rating_model.initial_rating(d.ranking)
                )
                for d in descriptors
            ]
            for group, descriptors in definitions.items()
        }
        return cls(groups)

    def items(self) -> Iterator[Tuple[str, List[Team]]]:
        return iter(self.groups.items())

    def get_ratings(self) -> Dict[str, float]:
        """Get a copy of all current ratings."""
        return {name: team.rating for name, team in self.teams.items()}
