"""
Mean Score Ranking CLI

Reads a game-play log CSV (create_timestamp,player_id,score), computes each
player's rounded mean score and prints the top of the ranking to standard
output as rank,player_id,mean_score lines.

Usage:
    mean-rank gameplay.csv
    OR
    python -m mean_rank gameplay.csv [--output ranking.csv] [--verbose]
"""

import sys
from pathlib import Path

# Enable both `python mean_rank/cli.py` and `python -m mean_rank` execution modes.
# This ensures mean_rank imports work regardless of how the script is invoked.
_project_root = str(Path(__file__).parent.parent)
if _project_root not in sys.path:
    sys.path.insert(0, _project_root)

import argparse
import logging
from typing import Sequence, TextIO

from mean_rank.config import CSV_ENCODING, CSV_ENCODING_ERRORS
from mean_rank.errors import ArgumentError, FileAccessError, RankingError
from mean_rank.ingestion.reader import iter_events
from mean_rank.scoring.aggregator import aggregate_scores
from mean_rank.scoring.ranking import group_by_mean_score, print_ranking, ranking_to_frame
from mean_rank.utils import atomic_write_csv, set_log_level, setup_logging

# --- Module Logger ---
logger = setup_logging(__name__)


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        prog="mean-rank",
        description="Rank players of a game-play log by their mean score.",
    )
    ap.add_argument("csv_file", nargs="?", help="Game-play log CSV to process.")
    ap.add_argument("--output", help="Also save the ranking to this CSV file.")
    ap.add_argument("--verbose", action="store_true", help="Log progress at DEBUG level.")
    return ap


def run(csv_file: str | None, output: str | None = None, stream: TextIO | None = None) -> None:
    """
    Run the full pipeline: read, aggregate, group and print.

    Nothing is printed unless the whole log was read successfully.

    Args:
        csv_file: Path to the game-play log
        output: Optional path to save the ranking CSV to
        stream: Destination for the ranking (default: standard output)

    Raises:
        RankingError: On any fatal input or output error
    """
    if not csv_file:
        raise ArgumentError("specify the game-play log CSV file to process")

    with iter_events(csv_file) as events:
        table = aggregate_scores(events)
    logger.debug(f"Loaded {len(table)} players from {csv_file}")

    groups = group_by_mean_score(table)

    if output:
        try:
            atomic_write_csv(
                ranking_to_frame(groups),
                Path(output),
                index=False,
                encoding=CSV_ENCODING,
                errors=CSV_ENCODING_ERRORS,
            )
        except OSError as e:
            raise FileAccessError(f"cannot write ranking to {output}: {e}") from e
        logger.info(f"Saved ranking to {output}")

    print_ranking(groups, stream)


def main(argv: Sequence[str] | None = None) -> int:
    # Anything after the log path is ignored
    args, ignored = build_parser().parse_known_args(argv)
    if args.verbose:
        set_log_level(logging.DEBUG)
    if ignored:
        logger.debug(f"Ignoring extra arguments: {ignored}")

    # Player ids that were not valid UTF-8 are written back as the original bytes
    if hasattr(sys.stdout, "reconfigure"):
        sys.stdout.reconfigure(errors=CSV_ENCODING_ERRORS)

    try:
        run(args.csv_file, output=args.output)
    except RankingError as e:
        logger.error(str(e))
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
