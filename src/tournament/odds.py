"""
Monte Carlo advancement odds.

Repeats the group stage many times on fresh teams and aggregates how often
each team advances, where it finishes in its group and its final rating.
"""

from dataclasses import dataclass
from typing import Dict, List, Optional

from tqdm import tqdm

from src.data.loader import GroupDefinitions
from src.tournament.runner import GroupStageConfig, GroupStageRunner
from src.utils.random_source import RandomSource


@dataclass
class TeamOdds:
    """Aggregated outcome of one team over many simulated group stages."""
    name: str
    group: str
    runs: int
    advanced: int = 0
    eliminated: int = 0
    position_total: int = 0
    rating_total: float = 0.0

    @property
    def advance_probability(self) -> float:
        if self.runs == 0:
            return 0.0
        return self.advanced / self.runs

    @property
    def eliminated_probability(self) -> float:
        if self.runs == 0:
            return 0.0
        return self.eliminated / self.runs

    @property
    def mean_position(self) -> float:
        if self.runs == 0:
            return 0.0
        return self.position_total / self.runs

    @property
    def mean_rating(self) -> float:
        if self.runs == 0:
            return 0.0
        return self.rating_total / self.runs


def simulate_advancement_odds(
    definitions: GroupDefinitions,
    config: GroupStageConfig,
    runs: int,
    rng: Optional[RandomSource] = None,
    show_progress: bool = False
) -> List[TeamOdds]:
    """
    Simulate the group stage repeatedly and aggregate per-team odds.

    "Eliminated" counts only the team placed directly below the cutoff.

    Args:
        definitions: Group definitions
        config: Simulation configuration
        runs: Number of group stages to simulate
        rng: Optional random source shared by all runs
        show_progress: Show a progress bar

    Returns:
        TeamOdds rows sorted by advance probability, then name

    Raises:
        ValueError: If runs < 1
    """
    if runs < 1:
        raise ValueError("runs must be at least 1")

    runner = GroupStageRunner(config, rng=rng, verbose=False)

    odds: Dict[str, TeamOdds] = {
        d.name: TeamOdds(name=d.name, group=group, runs=runs)
        for group, descriptors in definitions.items()
        for d in descriptors
    }

    for _ in tqdm(range(runs), disable=not show_progress, desc="Simulating"):
        result = runner.run(definitions)

        for standings in result.standings.values():
            for entry in standings:
                odds[entry.name].position_total += entry.rank
        for entry in result.advancing:
            odds[entry.name].advanced += 1
        if result.eliminated is not None:
            odds[result.eliminated.name].eliminated += 1
        for name, rating in result.context.get_ratings().items():
            odds[name].rating_total += rating

    return sorted(odds.values(), key=lambda o: (-o.advance_probability, o.name))
