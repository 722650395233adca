"""
Group stage runner that orchestrates a full simulation.

Handles team creation, group play, standings and the cross-group cutoff.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Dict, List, Optional, Union

from src.data.loader import GroupDefinitions, DEFAULT_GROUPS_PATH, load_groups
from src.rating.elo import RatingModel
from src.tournament.context import SimulationContext
from src.tournament.group import GroupSimulator
from src.tournament.match import MatchSimulator
from src.tournament.ranking import QualificationResult, rank_top_teams
from src.tournament.standings import GroupStandingEntry, resolve_group_standings
from src.tournament.team import MatchResult
from src.tournament.display import (
    format_run_header,
    format_group_results,
    format_group_standings,
    format_qualification
)
from src.utils.random_source import RandomSource, NumpyRandomSource
from src.utils.constants import (
    K_FACTOR, MIN_RATING, MAX_RATING, WORST_RANKING,
    FORFEIT_PROBABILITY, FORFEIT_SCORE, ADVANCING_SLOTS, RANKED_POSITIONS
)


@dataclass
class GroupStageConfig:
    """Configuration for a group stage simulation."""
    groups_path: Union[str, Path] = DEFAULT_GROUPS_PATH
    k_factor: float = K_FACTOR
    min_rating: float = MIN_RATING
    max_rating: float = MAX_RATING
    worst_rank: int = WORST_RANKING
    forfeit_probability: float = FORFEIT_PROBABILITY
    forfeit_score: int = FORFEIT_SCORE
    advancing_slots: int = ADVANCING_SLOTS
    ranked_positions: int = RANKED_POSITIONS
    seed: Optional[int] = None

    def rating_model(self) -> RatingModel:
        return RatingModel(
            k_factor=self.k_factor,
            min_rating=self.min_rating,
            max_rating=self.max_rating,
            worst_rank=self.worst_rank
        )


@dataclass
class GroupStageResult:
    """Complete results of one simulated group stage."""
    results_by_group: Dict[str, List[MatchResult]]
    standings: Dict[str, List[GroupStandingEntry]]
    qualification: QualificationResult
    context: SimulationContext

    @property
    def advancing(self) -> List[GroupStandingEntry]:
        return self.qualification.advancing

    @property
    def eliminated(self) -> Optional[GroupStandingEntry]:
        return self.qualification.eliminated


class GroupStageRunner:
    """
    Orchestrates a group stage simulation.

    Usage:
        runner = GroupStageRunner(GroupStageConfig(seed=7))
        result = runner.run()
    """

    def __init__(
        self,
        config: GroupStageConfig,
        rng: Optional[RandomSource] = None,
        verbose: bool = True
    ):
        """
        Initialize the runner.

        Args:
            config: Simulation configuration
            rng: Optional random source (seeded from config.seed if None)
            verbose: Print match log, standings and qualification
        """
        self.config = config
        self.rng = rng or NumpyRandomSource(config.seed)
        self.verbose = verbose

        self.rating_model = config.rating_model()
        self.match_simulator = MatchSimulator(
            self.rating_model,
            self.rng,
            forfeit_probability=config.forfeit_probability,
            forfeit_score=config.forfeit_score
        )
        self.group_simulator = GroupSimulator(self.match_simulator)

    def load_definitions(self) -> GroupDefinitions:
        return load_groups(self.config.groups_path)

    def run(self, definitions: Optional[GroupDefinitions] = None) -> GroupStageResult:
        """
        Run a complete group stage.

        Args:
            definitions: Optional group definitions (loaded from
                config.groups_path if None)

        Returns:
            Complete GroupStageResult

        Raises:
            InvalidRankError: If a team's ranking is out of bounds
        """
        if definitions is None:
            definitions = self.load_definitions()

        context = SimulationContext.from_definitions(definitions, self.rating_model)

        if self.verbose:
            print(format_run_header(
                len(context.groups),
                len(context.teams),
                self.config.seed
            ))

        results_by_group = self.group_simulator.simulate_group_phase(context)
        if self.verbose:
            print(format_group_results(results_by_group))

        standings = resolve_group_standings(context)
        if self.verbose:
            print(format_group_standings(standings))

        qualification = rank_top_teams(
            standings,
            advancing_slots=self.config.advancing_slots,
            positions=self.config.ranked_positions
        )
        if self.verbose:
            print(format_qualification(qualification))

        return GroupStageResult(
            results_by_group=results_by_group,
            standings=standings,
            qualification=qualification,
            context=context
        )
