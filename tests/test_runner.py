"""
Integration tests for the group stage runner, odds simulation and CLI.
"""

import json

import pytest

from main import main
from src.data.loader import parse_groups, load_groups
from src.rating.elo import InvalidRankError, RatingModel
from src.tournament.context import SimulationContext
from src.tournament.display import (
    format_difference, format_match_result, format_group_standings,
    format_qualification, format_odds_table
)
from src.tournament.odds import simulate_advancement_odds
from src.tournament.runner import GroupStageConfig, GroupStageRunner
from src.tournament.team import MatchResult
from src.utils.random_source import NumpyRandomSource


@pytest.fixture
def definitions():
    return load_groups()


class TestSimulationContext:
    """Tests for building a context from definitions."""

    def test_initial_ratings(self, definitions):
        """Teams start at the rating implied by their ranking."""
        context = SimulationContext.from_definitions(definitions, RatingModel())
        usa = context.teams['United States']
        assert usa.rating == pytest.approx(1800)
        assert usa.code == 'USA'
        assert usa.matches == []

    def test_invalid_ranking_fails_fast(self):
        """An out-of-range ranking aborts context creation."""
        definitions = parse_groups({
            'A': [{'Team': 'Nowhere', 'ISOCode': 'NOW', 'FIBARanking': 200}]
        })
        with pytest.raises(InvalidRankError):
            SimulationContext.from_definitions(definitions, RatingModel())

    def test_fresh_teams_per_context(self, definitions):
        """Each context owns its own Team objects."""
        first = SimulationContext.from_definitions(definitions, RatingModel())
        second = SimulationContext.from_definitions(definitions, RatingModel())
        assert first.teams['Spain'] is not second.teams['Spain']


class TestGroupStageRunner:
    """Tests for full group stage runs."""

    def test_run_bundled_groups(self, definitions):
        """Three groups of four: 8 advance, the ninth is eliminated."""
        runner = GroupStageRunner(GroupStageConfig(seed=42), verbose=False)
        result = runner.run(definitions)

        assert len(result.advancing) == 8
        assert [e.rank for e in result.advancing] == list(range(1, 9))
        assert result.eliminated.rank == 9
        assert all(len(r) == 6 for r in result.results_by_group.values())

    def test_group_accounting(self, definitions):
        """Per group: scored equals conceded and every team played the rest."""
        runner = GroupStageRunner(GroupStageConfig(seed=1, forfeit_probability=0.05), verbose=False)
        result = runner.run(definitions)

        for group, teams in result.context.items():
            assert sum(t.scores for t in teams) == sum(t.conceded for t in teams)
            for team in teams:
                assert len(team.matches) == len(teams) - 1
            standings = result.standings[group]
            assert [e.rank for e in standings] == [1, 2, 3, 4]

    def test_same_seed_same_result(self, definitions):
        """Seeding makes simulations reproducible."""
        first = GroupStageRunner(GroupStageConfig(seed=7), verbose=False).run(definitions)
        second = GroupStageRunner(GroupStageConfig(seed=7), verbose=False).run(definitions)

        assert first.results_by_group == second.results_by_group
        assert first.standings == second.standings
        assert first.qualification.overall == second.qualification.overall

    def test_injected_rng(self, definitions):
        """An injected random source takes precedence over the config seed."""
        a = GroupStageRunner(GroupStageConfig(seed=1), rng=NumpyRandomSource(99), verbose=False)
        b = GroupStageRunner(GroupStageConfig(seed=2), rng=NumpyRandomSource(99), verbose=False)
        assert a.run(definitions).standings == b.run(definitions).standings

    def test_all_forfeits_leave_ratings(self, definitions):
        """When every match is forfeited, ratings never move."""
        runner = GroupStageRunner(GroupStageConfig(seed=3, forfeit_probability=1.0), verbose=False)
        result = runner.run(definitions)

        model = RatingModel()
        for team in result.context.teams.values():
            assert team.rating == pytest.approx(model.initial_rating(team.ranking))
        assert all(r.forfeit for rs in result.results_by_group.values() for r in rs)

    def test_degenerate_group(self):
        """A single-team group simulates no matches and still ranks."""
        definitions = parse_groups({
            'A': [
                {'Team': 'Canada', 'ISOCode': 'CAN', 'FIBARanking': 7},
                {'Team': 'Spain', 'ISOCode': 'ESP', 'FIBARanking': 2},
            ],
            'B': [{'Team': 'Japan', 'ISOCode': 'JPN', 'FIBARanking': 26}],
        })
        result = GroupStageRunner(GroupStageConfig(seed=0), verbose=False).run(definitions)

        assert result.results_by_group['B'] == []
        assert len(result.qualification.overall) == 3
        assert result.eliminated is None

    def test_loads_from_config_path(self, tmp_path):
        """Without explicit definitions the runner loads config.groups_path."""
        path = tmp_path / "groups.json"
        path.write_text(json.dumps({
            'X': [
                {'Team': 'Canada', 'ISOCode': 'CAN', 'FIBARanking': 7},
                {'Team': 'Spain', 'ISOCode': 'ESP', 'FIBARanking': 2},
            ]
        }))
        result = GroupStageRunner(GroupStageConfig(groups_path=path, seed=0), verbose=False).run()
        assert list(result.standings.keys()) == ['X']

    def test_verbose_output(self, definitions, capsys):
        """Verbose runs print the match log, tables and qualification."""
        GroupStageRunner(GroupStageConfig(seed=5), verbose=True).run(definitions)
        out = capsys.readouterr().out
        assert "Group A:" in out
        assert "GROUP STANDINGS" in out
        assert "ADVANCING" in out
        assert "ELIMINATED" in out


class TestAdvancementOdds:
    """Tests for the Monte Carlo odds simulation."""

    def test_odds_totals(self, definitions):
        """Eight teams advance and one is eliminated in every run."""
        runs = 25
        odds = simulate_advancement_odds(
            definitions, GroupStageConfig(), runs, rng=NumpyRandomSource(11)
        )

        assert len(odds) == 12
        assert sum(o.advanced for o in odds) == 8 * runs
        assert sum(o.eliminated for o in odds) == runs
        assert all(1.0 <= o.mean_position <= 4.0 for o in odds)
        assert all(0.0 <= o.advance_probability <= 1.0 for o in odds)

    def test_odds_sorted(self, definitions):
        """Rows are sorted by advance probability, highest first."""
        odds = simulate_advancement_odds(
            definitions, GroupStageConfig(), 10, rng=NumpyRandomSource(4)
        )
        probs = [o.advance_probability for o in odds]
        assert probs == sorted(probs, reverse=True)

    def test_runs_must_be_positive(self, definitions):
        """Zero runs is rejected."""
        with pytest.raises(ValueError):
            simulate_advancement_odds(definitions, GroupStageConfig(), 0)


class TestDisplay:
    """Tests for text formatting."""

    def test_format_difference(self):
        assert format_difference(12) == "+12"
        assert format_difference(0) == "+0"
        assert format_difference(-3) == "-3"

    def test_format_match_result(self):
        assert format_match_result(MatchResult('CAN', 'AUS', 88, 80)) == "CAN - AUS (88:80)"
        assert "[forfeit]" in format_match_result(MatchResult('CAN', 'AUS', 0, 50, forfeit=True))

    def test_format_tables(self, definitions):
        result = GroupStageRunner(GroupStageConfig(seed=8), verbose=False).run(definitions)

        standings = format_group_standings(result.standings)
        assert "Group A" in standings
        assert result.standings['A'][0].name in standings

        qualification = format_qualification(result.qualification)
        assert result.eliminated.name in qualification

    def test_format_odds_table(self, definitions):
        odds = simulate_advancement_odds(
            definitions, GroupStageConfig(), 5, rng=NumpyRandomSource(2)
        )
        table = format_odds_table(odds, 5)
        assert "5 runs" in table
        assert "United States" in table


class TestCli:
    """Tests for the command line entry point."""

    def test_single_run(self, capsys):
        assert main(['--seed', '1', '--quiet']) == 0
        out = capsys.readouterr().out
        assert out.startswith("1. ")
        assert "Eliminated:" in out

    def test_odds_mode(self, capsys):
        assert main(['--seed', '1', '--runs', '3']) == 0
        assert "ADVANCEMENT ODDS" in capsys.readouterr().out

    def test_missing_file(self, tmp_path, capsys):
        assert main(['--groups', str(tmp_path / "missing.json")]) == 1
        assert "Error:" in capsys.readouterr().out

    def test_invalid_ranking(self, tmp_path, capsys):
        path = tmp_path / "groups.json"
        path.write_text(json.dumps({
            'A': [{'Team': 'Nowhere', 'ISOCode': 'NOW', 'FIBARanking': 0}]
        }))
        assert main(['--groups', str(path), '--quiet']) == 1

    @pytest.mark.parametrize("runs", ['0', '-3'])
    def test_runs_must_be_positive(self, runs, capsys):
        """A run count below 1 is a usage error, not a silent single run."""
        with pytest.raises(SystemExit) as excinfo:
            main(['--seed', '1', '--runs', runs])
        assert excinfo.value.code == 2
        assert "at least 1" in capsys.readouterr().err
