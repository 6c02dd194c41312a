"""
Score Aggregator

Consumes event rows and accumulates a running sum and count of scores per
player. The caller gets either the complete player table or an error.
"""

from collections import defaultdict
from dataclasses import dataclass
from typing import Iterable

from mean_rank.errors import ParseError
from mean_rank.ingestion.reader import EventRow
from mean_rank.utils import parse_score, setup_logging

# --- Module Logger ---
logger = setup_logging(__name__)


@dataclass
class ScoreAccumulator:
    """Running total of one player's scores. count >= 1 once in a table."""
    sum: int = 0
    count: int = 0

    def add(self, score: int) -> None:
        self.sum += score
        self.count += 1

    def mean(self) -> float:
        return self.sum / self.count


PlayerTable = dict[str, ScoreAccumulator]


def aggregate_scores(events: Iterable[EventRow]) -> PlayerTable:
    """
    Build the player table from a stream of score events.

    Args:
        events: EventRow sequence, usually from read_events()

    Returns:
        Mapping of player_id to its ScoreAccumulator

    Raises:
        ParseError: If a row cannot be read or its score is not an integer
    """
    table: defaultdict[str, ScoreAccumulator] = defaultdict(ScoreAccumulator)
    n_events = 0

    for event in events:
        try:
            score = parse_score(event.score_text)
        except ValueError as e:
            raise ParseError(
                f"failed to read score {event.score_text!r} for player {event.player_id!r}"
            ) from e
        table[event.player_id].add(score)
        n_events += 1

    logger.debug(f"Aggregated {n_events} events for {len(table)} players")
    return dict(table)
