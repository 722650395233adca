"""
Utilities module for the group stage simulator.
"""
from src.utils.constants import (
    MIN_RATING, MAX_RATING, WORST_RANKING, K_FACTOR,
    WIN, LOSS,
    WIN_POINTS, LOSS_POINTS, FORFEIT_POINTS,
    FORFEIT_PROBABILITY, FORFEIT_SCORE,
    ADVANCING_SLOTS, RANKED_POSITIONS
)
from src.utils.random_source import RandomSource, NumpyRandomSource

__all__ = [
    'MIN_RATING', 'MAX_RATING', 'WORST_RANKING', 'K_FACTOR',
    'WIN', 'LOSS',
    'WIN_POINTS', 'LOSS_POINTS', 'FORFEIT_POINTS',
    'FORFEIT_PROBABILITY', 'FORFEIT_SCORE',
    'ADVANCING_SLOTS', 'RANKED_POSITIONS',
    'RandomSource', 'NumpyRandomSource'
]
