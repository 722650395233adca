"""
Rating module: Elo-style skill ratings seeded from an external ranking.
"""
from src.rating.elo import RatingModel, InvalidRankError, NonFiniteRatingError, check_finite

__all__ = ['RatingModel', 'InvalidRankError', 'NonFiniteRatingError', 'check_finite']
