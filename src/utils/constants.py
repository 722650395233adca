"""
Constants for the group stage simulator.
"""

# Rating scale
# Initial ratings are interpolated linearly from the external ranking:
# rank 1 maps to MAX_RATING, rank WORST_RANKING maps to MIN_RATING.
MIN_RATING = 1200
MAX_RATING = 1800
WORST_RANKING = 160
K_FACTOR = 32
ELO_SCALE = 400.0

# Match outcomes (as stored in a match record)
LOSS = 0
WIN = 1

# Standings points per match
WIN_POINTS = 2
LOSS_POINTS = 1
FORFEIT_POINTS = 0

# Forfeits
FORFEIT_PROBABILITY = 0.0001
FORFEIT_SCORE = 50

# Scoring model
# score = round(max(MIN_SCORE, uniform(0, SCORE_NOISE) + boost + base))
# base  = BASE_SCORE + SCORE_SPREAD * (expected - 0.5)
# boost = random() * BOOST_SCALE * expected, only when expected > BOOST_THRESHOLD
BASE_SCORE = 50
SCORE_SPREAD = 30
SCORE_NOISE = 60
MIN_SCORE = 50
BOOST_THRESHOLD = 0.6
BOOST_SCALE = 20
MAX_OVERTIME_POINTS = 10

# Qualification
ADVANCING_SLOTS = 8
RANKED_POSITIONS = 3
