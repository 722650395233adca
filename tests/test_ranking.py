"""
Tests for the cross-group ranking and advancement cutoff.
"""

import pytest

from src.tournament.ranking import rank_top_teams, QualificationResult
from src.tournament.standings import GroupStandingEntry


def entry(name, rank, points, difference=0, scores=0, group=None):
    return GroupStandingEntry(
        rank=rank, name=name, code=name[:3].upper(), wins=0, losses=0,
        points=points, scores=scores, conceded=scores - difference,
        difference=difference, group=group
    )


def group_table(group, rows):
    """rows: list of (points, difference, scores) in finishing order."""
    return [
        entry(f"{group}{i}", i, p, d, s, group)
        for i, (p, d, s) in enumerate(rows, 1)
    ]


@pytest.fixture
def three_groups():
    return {
        'A': group_table('A', [(6, 30, 250), (5, 10, 240), (4, -5, 230), (3, -35, 200)]),
        'B': group_table('B', [(6, 45, 260), (5, 12, 235), (4, -20, 220), (3, -37, 210)]),
        'C': group_table('C', [(5, 20, 245), (5, 8, 250), (4, -1, 225), (4, -27, 215)]),
    }


class TestRankTopTeams:
    """Tests for rank_top_teams."""

    def test_eight_advance_one_eliminated(self, three_groups):
        """Three groups give 8 advancing teams ranked 1..8 and one eliminated ranked 9."""
        result = rank_top_teams(three_groups)

        assert isinstance(result, QualificationResult)
        assert len(result.advancing) == 8
        assert [e.rank for e in result.advancing] == list(range(1, 9))
        assert result.eliminated is not None
        assert result.eliminated.rank == 9
        assert len(result.non_advancing) == 1

    def test_bucket_order(self, three_groups):
        """Group winners come first, then runners-up, then third places."""
        result = rank_top_teams(three_groups)

        assert [e.name for e in result.overall] == [
            'B1', 'A1', 'C1',   # 6 (+45), 6 (+30), 5
            'B2', 'A2', 'C2',   # 5 (+12), 5 (+10), 5 (+8)
            'C3', 'A3', 'B3',   # 4 (-1), 4 (-5), 4 (-20)
        ]
        assert result.eliminated.name == 'B3'

    def test_scored_breaks_equal_difference(self):
        """Scored points decide between equal points and difference."""
        standings = {
            'A': group_table('A', [(4, 10, 200)]),
            'B': group_table('B', [(4, 10, 210)]),
        }
        result = rank_top_teams(standings, positions=1)
        assert [e.name for e in result.overall] == ['B1', 'A1']

    def test_full_tie_keeps_group_order(self):
        """Entries equal on every key stay in group order."""
        standings = {
            'A': group_table('A', [(4, 10, 200)]),
            'B': group_table('B', [(4, 10, 200)]),
        }
        result = rank_top_teams(standings, positions=1)
        assert [e.name for e in result.overall] == ['A1', 'B1']

    def test_group_rank_replaced_by_global_rank(self, three_groups):
        """Entries carry their overall rank, not their group rank."""
        result = rank_top_teams(three_groups)
        a3 = next(e for e in result.overall if e.name == 'A3')
        assert a3.rank == 8
        assert a3.group == 'A'
        # inputs untouched
        assert three_groups['A'][2].rank == 3

    def test_fewer_than_cutoff_has_no_eliminated(self):
        """With fewer entries than the cutoff nobody is eliminated."""
        standings = {
            'A': group_table('A', [(4, 10, 200), (2, -10, 180), (0, -20, 150)]),
            'B': group_table('B', [(4, 5, 190), (2, -5, 170), (0, -30, 140)]),
        }
        result = rank_top_teams(standings)

        assert len(result.advancing) == 6
        assert result.eliminated is None
        assert result.non_advancing == []

    def test_short_groups_skip_missing_positions(self):
        """Groups without a third-placed team contribute nothing to that bucket."""
        standings = {
            'A': group_table('A', [(2, 10, 90), (1, -10, 80)]),
            'B': group_table('B', [(4, 20, 180), (3, 0, 170), (2, -20, 150)]),
        }
        result = rank_top_teams(standings)
        assert [e.name for e in result.overall] == ['B1', 'A1', 'B2', 'A2', 'B3']

    def test_generalizes_to_more_groups(self):
        """Four groups give 12 ranked entries; everything past 8 is out."""
        standings = {
            g: group_table(g, [(6, 30 + i, 250), (4, i, 230), (2, -30 - i, 200)])
            for i, g in enumerate('ABCD')
        }
        result = rank_top_teams(standings)

        assert len(result.overall) == 12
        assert len(result.advancing) == 8
        assert [e.rank for e in result.non_advancing] == [9, 10, 11, 12]
        assert result.eliminated.rank == 9

    def test_custom_cutoff(self, three_groups):
        """The advancing cutoff is configurable."""
        result = rank_top_teams(three_groups, advancing_slots=4)
        assert len(result.advancing) == 4
        assert result.eliminated.rank == 5
        assert len(result.non_advancing) == 5

    def test_empty_input(self):
        """No groups produce an empty ranking without error."""
        result = rank_top_teams({})
        assert result.overall == []
        assert result.eliminated is None

    def test_negative_cutoff_rejected(self, three_groups):
        """A negative cutoff is a configuration error."""
        with pytest.raises(ValueError):
            rank_top_teams(three_groups, advancing_slots=-1)
