"""
Mean Score Ranking

Turns the player table into groups of players sharing a rounded mean score
and emits them as a dense ranking:
- Groups are ordered by descending mean score
- Tied players are ordered by ascending player_id and share one rank
- The next group's rank advances by the size of the previous group
- No new group is started once the rank counter exceeds RANK_LIMIT,
  but a group that has started is always printed in full

Usage:
    from mean_rank.scoring.ranking import group_by_mean_score, print_ranking
    print_ranking(group_by_mean_score(table))
"""

import sys
from collections import defaultdict
from decimal import ROUND_HALF_UP, Decimal
from typing import Iterator, NamedTuple, TextIO

import pandas as pd

from mean_rank.config import OUTPUT_COLUMNS, OUTPUT_HEADER, RANK_LIMIT
from mean_rank.scoring.aggregator import PlayerTable

MeanScoreGroups = dict[int, list[str]]


class RankedPlayer(NamedTuple):
    rank: int
    player_id: str
    mean_score: int


def round_half_away_from_zero(value: float) -> int:
    """Round to the nearest integer, halves away from zero (2.5 -> 3, -2.5 -> -3)."""
    # Decimal(float) is exact, so only true halves of the float round outward
    return int(Decimal(value).to_integral_value(rounding=ROUND_HALF_UP))


def group_by_mean_score(table: PlayerTable) -> MeanScoreGroups:
    """
    Group player ids by their rounded mean score.

    Args:
        table: Complete player table from aggregate_scores()

    Returns:
        Mapping of mean score to the player ids that have it (unsorted)
    """
    groups: defaultdict[int, list[str]] = defaultdict(list)
    for player_id, acc in table.items():
        groups[round_half_away_from_zero(acc.mean())].append(player_id)
    return dict(groups)


def rank_players(groups: MeanScoreGroups, limit: int = RANK_LIMIT) -> Iterator[RankedPlayer]:
    """
    Yield ranked players in output order.

    Args:
        groups: Mean score groups from group_by_mean_score()
        limit: Rank counter value after which no further group is started

    Yields:
        RankedPlayer(rank, player_id, mean_score)
    """
    rank = 1
    for mean_score in sorted(groups, reverse=True):
        player_ids = sorted(groups[mean_score])
        for player_id in player_ids:
            yield RankedPlayer(rank, player_id, mean_score)
        rank += len(player_ids)
        if rank > limit:
            break


def format_ranking(groups: MeanScoreGroups) -> list[str]:
    """Return the output lines, header first. Fields are not CSV-escaped."""
    lines = [OUTPUT_HEADER]
    lines.extend(f"{p.rank},{p.player_id},{p.mean_score}" for p in rank_players(groups))
    return lines


def print_ranking(groups: MeanScoreGroups, stream: TextIO | None = None) -> None:
    """Write the ranking to stream (default: standard output)."""
    out = stream if stream is not None else sys.stdout
    for line in format_ranking(groups):
        out.write(line + "\n")


def ranking_to_frame(groups: MeanScoreGroups) -> pd.DataFrame:
    """Return the ranking as a DataFrame with columns rank, player_id, mean_score."""
    return pd.DataFrame(list(rank_players(groups)), columns=list(OUTPUT_COLUMNS))
