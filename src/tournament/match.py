"""
Rating-driven match simulation.

Produces a final score for two teams from their Elo ratings, records the
result on both teams and updates their ratings. A match either ends in a
forfeit (50-0, ratings untouched) or is played out; played matches never
end level because overtime periods repeat until one side leads.
"""

from typing import Optional, Tuple

from src.rating.elo import RatingModel, check_finite
from src.tournament.team import Team, MatchRecord, MatchResult
from src.utils.random_source import RandomSource
from src.utils.constants import (
    WIN, LOSS, WIN_POINTS, LOSS_POINTS, FORFEIT_POINTS,
    FORFEIT_PROBABILITY, FORFEIT_SCORE,
    BASE_SCORE, SCORE_SPREAD, SCORE_NOISE, MIN_SCORE,
    BOOST_THRESHOLD, BOOST_SCALE, MAX_OVERTIME_POINTS
)


class MatchSimulator:
    """
    Simulates single matches between two teams.

    Usage:
        simulator = MatchSimulator(RatingModel(), NumpyRandomSource(seed=1))
        result = simulator.simulate(team_a, team_b)
    """

    def __init__(
        self,
        rating_model: RatingModel,
        rng: RandomSource,
        forfeit_probability: float = FORFEIT_PROBABILITY,
        forfeit_score: int = FORFEIT_SCORE
    ):
        """
        Initialize the match simulator.

        Args:
            rating_model: Model used for expectations and rating updates
            rng: Source of all random draws
            forfeit_probability: Chance that each side forfeits a match
            forfeit_score: Score awarded to the opponent of a forfeiting team

        Raises:
            ValueError: If forfeit_probability is outside [0, 1] or
                forfeit_score is not positive
        """
        if not 0.0 <= forfeit_probability <= 1.0:
            raise ValueError("forfeit_probability must be within [0, 1]")
        if forfeit_score <= 0:
            raise ValueError("forfeit_score must be positive")
        self.rating_model = rating_model
        self.rng = rng
        self.forfeit_probability = forfeit_probability
        self.forfeit_score = forfeit_score

    def simulate(
        self,
        team_a: Team,
        team_b: Team,
        k_factor: Optional[float] = None
    ) -> MatchResult:
        """
        Simulate a match and apply it to both teams.

        Team A's forfeit is checked before team B's, so if both forfeit
        draws fire the match goes to team B.

        Args:
            team_a: First team (mutated)
            team_b: Second team (mutated)
            k_factor: Optional K-factor override for the rating update

        Returns:
            MatchResult with the final score

        Raises:
            ValueError: If a team is scheduled against itself
            NonFiniteRatingError: If either rating is not finite
        """
        if team_a is team_b or team_a.name == team_b.name:
            raise ValueError(f"Team cannot play itself: {team_a.name}")
        check_finite(team_a.rating)
        check_finite(team_b.rating)

        a_forfeits = self.rng.random() < self.forfeit_probability
        b_forfeits = self.rng.random() < self.forfeit_probability

        if a_forfeits:
            return self._forfeit(team_a, team_b, a_forfeits=True)
        if b_forfeits:
            return self._forfeit(team_a, team_b, a_forfeits=False)

        prob_a = self.rating_model.expected_score(team_a.rating, team_b.rating)
        prob_b = 1.0 - prob_a

        score_a, score_b = self._play(prob_a, prob_b)
        self._apply_scores(team_a, team_b, score_a, score_b)

        outcome_a = WIN if score_a > score_b else LOSS
        winner, loser = (team_a, team_b) if outcome_a == WIN else (team_b, team_a)
        winner.wins += 1
        winner.points += WIN_POINTS
        loser.losses += 1
        loser.points += LOSS_POINTS

        team_a.rating = self.rating_model.update_rating(
            team_a.rating, prob_a, outcome_a, k_factor
        )
        team_b.rating = self.rating_model.update_rating(
            team_b.rating, prob_b, 1 - outcome_a, k_factor
        )

        self._record(team_a, team_b, score_a, score_b, forfeit=False)
        return MatchResult(team_a.code, team_b.code, score_a, score_b)

    def _play(self, prob_a: float, prob_b: float) -> Tuple[int, int]:
        """Draw a final score pair from both sides' expected scores."""
        base_a = BASE_SCORE + SCORE_SPREAD * (prob_a - 0.5)
        base_b = BASE_SCORE + SCORE_SPREAD * (prob_b - 0.5)

        boost_a = self._boost(prob_a)
        boost_b = self._boost(prob_b)

        score_a = self._score(base_a, boost_a)
        score_b = self._score(base_b, boost_b)

        # Overtime periods until someone leads
        while score_a == score_b:
            to_a = self.rng.random() > 0.5
            overtime = self.rng.integers(0, MAX_OVERTIME_POINTS)
            if to_a:
                score_a += overtime
            else:
                score_b += overtime

        return score_a, score_b

    def _boost(self, prob: float) -> float:
        """Extra scoring for clear favourites."""
        if prob > BOOST_THRESHOLD:
            return self.rng.random() * BOOST_SCALE * prob
        return 0.0

    def _score(self, base: float, boost: float) -> int:
        noise = self.rng.uniform(0, SCORE_NOISE)
        return int(round(max(MIN_SCORE, noise + boost + base)))

    def _forfeit(self, team_a: Team, team_b: Team, a_forfeits: bool) -> MatchResult:
        """Award the match to the side that did not forfeit; ratings stay as they are."""
        if a_forfeits:
            score_a, score_b = 0, self.forfeit_score
            winner, loser = team_b, team_a
        else:
            score_a, score_b = self.forfeit_score, 0
            winner, loser = team_a, team_b

        self._apply_scores(team_a, team_b, score_a, score_b)
        winner.wins += 1
        winner.points += WIN_POINTS
        loser.losses += 1
        loser.points += FORFEIT_POINTS

        self._record(team_a, team_b, score_a, score_b, forfeit=True)
        return MatchResult(team_a.code, team_b.code, score_a, score_b, forfeit=True)

    @staticmethod
    def _apply_scores(team_a: Team, team_b: Team, score_a: int, score_b: int):
        team_a.scores += score_a
        team_a.conceded += score_b
        team_a.difference += score_a - score_b
        team_b.scores += score_b
        team_b.conceded += score_a
        team_b.difference += score_b - score_a

    @staticmethod
    def _record(team_a: Team, team_b: Team, score_a: int, score_b: int, forfeit: bool):
        team_a.matches.append(MatchRecord(
            opponent=team_b.code,
            score=score_a,
            opponent_score=score_b,
            difference=score_a - score_b,
            outcome=WIN if score_a > score_b else LOSS,
            forfeit=forfeit
        ))
        team_b.matches.append(MatchRecord(
            opponent=team_a.code,
            score=score_b,
            opponent_score=score_a,
            difference=score_b - score_a,
            outcome=WIN if score_b > score_a else LOSS,
            forfeit=forfeit
        ))
