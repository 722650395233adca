"""
Tournament module for simulating a round-robin group stage.

Provides:
- MatchSimulator: Rating-driven match simulation
- GroupSimulator: Round-robin play within groups
- resolve_standings: Group tables with head-to-head tie-breaks
- rank_top_teams: Cross-group ranking and advancement cutoff
- GroupStageRunner: Orchestrates a full simulation
"""

from src.tournament.team import Team, MatchRecord, MatchResult
from src.tournament.context import SimulationContext
from src.tournament.match import MatchSimulator
from src.tournament.scheduler import round_robin_pairings, num_matches
from src.tournament.group import GroupSimulator
from src.tournament.standings import GroupStandingEntry, resolve_standings, resolve_group_standings
from src.tournament.ranking import QualificationResult, rank_top_teams
from src.tournament.runner import GroupStageConfig, GroupStageResult, GroupStageRunner
from src.tournament.odds import TeamOdds, simulate_advancement_odds

__all__ = [
    'Team',
    'MatchRecord',
    'MatchResult',
    'SimulationContext',
    'MatchSimulator',
    'round_robin_pairings',
    'num_matches',
    'GroupSimulator',
    'GroupStandingEntry',
    'resolve_standings',
    'resolve_group_standings',
    'QualificationResult',
    'rank_top_teams',
    'GroupStageConfig',
    'GroupStageResult',
    'GroupStageRunner',
    'TeamOdds',
    'simulate_advancement_odds',
]
