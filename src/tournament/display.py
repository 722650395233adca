"""
Display formatting for group stage results.

Provides plain-text match logs, group tables and qualification lists for
terminal output.
"""

from typing import Dict, List, Sequence

from src.tournament.ranking import QualificationResult
from src.tournament.standings import GroupStandingEntry
from src.tournament.team import MatchResult


def format_difference(difference: int) -> str:
    """Signed point difference, e.g. +12, -3, +0."""
    return f"+{difference}" if difference >= 0 else str(difference)


def format_match_result(result: MatchResult) -> str:
    """Format a single match line: CAN - AUS (88:80)."""
    line = f"{result.team_a} - {result.team_b} ({result.score_a}:{result.score_b})"
    if result.forfeit:
        line += " [forfeit]"
    return line


def format_group_results(results_by_group: Dict[str, List[MatchResult]]) -> str:
    """
    Format the group phase match log.

    Args:
        results_by_group: Match results per group

    Returns:
        Formatted string for terminal display
    """
    lines = []
    for group, results in results_by_group.items():
        lines.append(f"Group {group}:")
        for result in results:
            lines.append(f"    {format_match_result(result)}")
        lines.append("")
    return "\n".join(lines)


def format_entry(entry: GroupStandingEntry, name_width: int = 12) -> str:
    """Format a standings row: rank, name, W / L / Pts / scored / conceded / diff."""
    return (f"{entry.rank}. {entry.name:<{name_width}} "
            f"{entry.wins} / {entry.losses} / {entry.points} / "
            f"{entry.scores} / {entry.conceded} / {format_difference(entry.difference)}")


def format_group_standings(standings_by_group: Dict[str, Sequence[GroupStandingEntry]]) -> str:
    """
    Format the final group tables.

    Args:
        standings_by_group: Ranked standings per group

    Returns:
        Formatted string for terminal display
    """
    lines = []
    lines.append("=== GROUP STANDINGS ===")
    for group, standings in standings_by_group.items():
        lines.append(f"    Group {group} (Name - W / L / Pts / Scored / Conceded / Diff):")
        for entry in standings:
            lines.append(f"        {format_entry(entry)}")
        lines.append("")
    return "\n".join(lines)


def format_qualification(result: QualificationResult) -> str:
    """
    Format the advancing teams and the eliminated team.

    Args:
        result: Cross-group qualification result

    Returns:
        Formatted string for terminal display
    """
    lines = []
    lines.append("=== ADVANCING TO KNOCKOUT STAGE ===")
    for entry in result.advancing:
        lines.append(format_entry(entry, name_width=20))

    lines.append("")
    lines.append("=== ELIMINATED ===")
    if result.eliminated is not None:
        lines.append(format_entry(result.eliminated, name_width=20))
    else:
        lines.append("(none)")

    return "\n".join(lines)


def format_odds_table(odds: Sequence, runs: int) -> str:
    """
    Format advancement odds as an ASCII table.

    Args:
        odds: TeamOdds rows, already sorted
        runs: Number of simulated group stages

    Returns:
        Formatted string for terminal display
    """
    lines = []
    lines.append(f"=== ADVANCEMENT ODDS ({runs} runs) ===")
    lines.append("")

    # Header
    lines.append(f"{'Team':<20}{'Grp':<5}{'Adv%':<9}{'Elim%':<9}{'AvgPos':<8}{'AvgRating':<10}")
    lines.append("-" * 61)

    for row in odds:
        lines.append(f"{row.name:<20}{row.group:<5}"
                     f"{row.advance_probability:<9.1%}{row.eliminated_probability:<9.1%}"
                     f"{row.mean_position:<8.2f}{row.mean_rating:<10.1f}")

    return "\n".join(lines)


def format_run_header(num_groups: int, num_teams: int, seed) -> str:
    """Format simulation header information."""
    lines = []
    lines.append(f"Groups: {num_groups}")
    lines.append(f"Teams: {num_teams}")
    lines.append(f"Seed: {seed if seed is not None else 'random'}")
    lines.append("")
    return "\n".join(lines)
