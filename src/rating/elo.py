"""
Elo rating model for simulated teams.

Implements the Elo rating system seeded from an external ranking:
- Initial rating: linear in ranking, rank 1 -> max_rating, worst rank -> min_rating
- Expected score: E = 1 / (1 + 10^((R_opp - R_self) / 400))
- Rating update: R_new = R_old + K * (S - E)
"""

import math
from typing import Optional

from src.utils.constants import (
    K_FACTOR, MIN_RATING, MAX_RATING, WORST_RANKING, ELO_SCALE, WIN, LOSS
)


class InvalidRankError(ValueError):
    """External ranking lies outside [1, worst_rank]."""


class NonFiniteRatingError(ValueError):
    """A rating became NaN or infinite."""


class RatingModel:
    """
    Elo rating model.

    Converts external rankings into starting ratings and updates ratings
    after decisive match results. Holds no per-team state; ratings live on
    the teams themselves.
    """

    def __init__(
        self,
        k_factor: float = K_FACTOR,
        min_rating: float = MIN_RATING,
        max_rating: float = MAX_RATING,
        worst_rank: int = WORST_RANKING
    ):
        """
        Initialize the rating model.

        Args:
            k_factor: The K-factor determines rating volatility (default: 32)
            min_rating: Rating assigned to the worst-ranked team
            max_rating: Rating assigned to the top-ranked team
            worst_rank: Largest valid external ranking

        Raises:
            ValueError: If worst_rank < 2 or min_rating > max_rating
        """
        if worst_rank < 2:
            raise ValueError("worst_rank must be at least 2")
        if min_rating > max_rating:
            raise ValueError("min_rating cannot exceed max_rating")
        self.k_factor = k_factor
        self.min_rating = min_rating
        self.max_rating = max_rating
        self.worst_rank = worst_rank

    def initial_rating(self, external_rank: int) -> float:
        """
        Calculate the starting rating for an external ranking.

        Args:
            external_rank: Ranking position, 1 is best

        Returns:
            Rating between min_rating and max_rating

        Raises:
            InvalidRankError: If external_rank is outside [1, worst_rank]
        """
        if not 1 <= external_rank <= self.worst_rank:
            raise InvalidRankError(
                f"Ranking {external_rank} outside [1, {self.worst_rank}]"
            )
        normalized = (self.worst_rank - external_rank) / (self.worst_rank - 1)
        return self.min_rating + normalized * (self.max_rating - self.min_rating)

    def expected_score(self, rating_a: float, rating_b: float) -> float:
        """
        Calculate expected score for team A against team B.

        Args:
            rating_a: Rating of team A
            rating_b: Rating of team B

        Returns:
            Expected score between 0 and 1
        """
        return 1.0 / (1.0 + 10 ** ((rating_b - rating_a) / ELO_SCALE))

    def update_rating(
        self,
        rating: float,
        expected: float,
        actual: int,
        k_factor: Optional[float] = None
    ) -> float:
        """
        Apply a single Elo update.

        Args:
            rating: Current rating
            expected: Expected score from expected_score()
            actual: WIN (1) or LOSS (0)
            k_factor: Optional override of the model's K-factor

        Returns:
            Updated rating

        Raises:
            ValueError: If actual is not WIN or LOSS
            NonFiniteRatingError: If the rating is or becomes non-finite
        """
        if actual not in (WIN, LOSS):
            raise ValueError(f"Outcome must be {WIN} or {LOSS}, got {actual}")
        check_finite(rating)
        k = self.k_factor if k_factor is None else k_factor
        new_rating = rating + k * (actual - expected)
        check_finite(new_rating)
        return new_rating


def check_finite(rating: float) -> None:
    """Raise NonFiniteRatingError if rating is NaN or infinite."""
    if not math.isfinite(rating):
        raise NonFiniteRatingError(f"Rating is not finite: {rating}")
