"""
Game-Play Log Reader

This module opens a game-play log CSV, checks that its header starts with
the required columns and streams the remaining rows as EventRow tuples.
Rows are read lazily with pandas in chunks, so the sequence is finite and
can only be consumed once.

Usage:
    from mean_rank.ingestion.reader import iter_events

    with iter_events("gameplay.csv") as events:
        for event in events:
            ...
"""

from contextlib import contextmanager
from pathlib import Path
from typing import IO, Iterator, NamedTuple

import pandas as pd

from mean_rank.config import CSV_ENCODING, CSV_ENCODING_ERRORS, READ_CHUNK_SIZE, REQUIRED_HEADER
from mean_rank.errors import FileAccessError, FormatError, ParseError
from mean_rank.utils import setup_logging

# --- Module Logger ---
logger = setup_logging(__name__)

# The python engine pads short rows with missing values instead of "",
# and object dtype keeps fields exactly as written (no numeric inference)
READ_CSV_OPTIONS = dict(
    header=None,
    dtype=object,
    keep_default_na=False,
    engine="python",
)


class EventRow(NamedTuple):
    """One score event: (timestamp, player_id, score_text), all as read."""
    timestamp: str
    player_id: str
    score_text: str


def check_header(header: list[str]) -> bool:
    """Return True if the first header fields are the required columns, in order."""
    return tuple(header[:len(REQUIRED_HEADER)]) == REQUIRED_HEADER


@contextmanager
def open_log(path: str | Path) -> Iterator[IO[str]]:
    """
    Open the game-play log for reading and close it on every exit path.

    Raises:
        FileAccessError: If the file cannot be opened
    """
    try:
        handle = open(path, encoding=CSV_ENCODING, errors=CSV_ENCODING_ERRORS, newline="")
    except OSError as e:
        raise FileAccessError(f"cannot access the specified file: {path}") from e

    logger.debug(f"Opened {path}")
    with handle:
        yield handle


def _read_header(handle: IO[str]) -> list[str]:
    try:
        frame = pd.read_csv(handle, nrows=1, **READ_CSV_OPTIONS)
    except pd.errors.EmptyDataError as e:
        raise FormatError("invalid CSV file: missing header row") from e
    except pd.errors.ParserError as e:
        raise FormatError(f"invalid CSV file: {e}") from e

    if frame.empty:
        raise FormatError("invalid CSV file: missing header row")
    return frame.iloc[0].tolist()


def read_events(handle: IO[str]) -> Iterator[EventRow]:
    """
    Validate the header of an open log and return a lazy iterator of its rows.

    The header is checked before this function returns. Row errors surface
    while the returned iterator is consumed.

    Args:
        handle: Seekable text handle positioned at the start of the CSV

    Returns:
        Iterator of EventRow, one per data row

    Raises:
        FormatError: If the header row is missing or malformed
        ParseError: While iterating, if a row cannot be tokenized or is short
    """
    header = _read_header(handle)
    if not check_header(header):
        raise FormatError(
            f"invalid CSV file: header must start with {','.join(REQUIRED_HEADER)}, "
            f"got {','.join(header)}"
        )

    handle.seek(0)
    return _iter_rows(handle)


def _iter_rows(handle: IO[str]) -> Iterator[EventRow]:
    # Row 0 is the header again; pandas checks later rows against its field count
    try:
        reader = pd.read_csv(handle, chunksize=READ_CHUNK_SIZE, **READ_CSV_OPTIONS)
    except pd.errors.ParserError as e:
        raise ParseError(f"failed to read CSV file: {e}") from e

    rows_read = 0
    skip_header = True
    while True:
        try:
            chunk = next(reader)
        except StopIteration:
            break
        except pd.errors.ParserError as e:
            raise ParseError(f"failed to read CSV file after {rows_read} rows: {e}") from e

        if skip_header:
            chunk = chunk.iloc[1:]
            skip_header = False

        for fields in chunk.itertuples(index=False, name=None):
            rows_read += 1
            if any(not isinstance(field, str) for field in fields):
                raise ParseError(
                    f"failed to read CSV file: data row {rows_read} has fewer fields than the header"
                )
            yield EventRow(fields[0], fields[1], fields[2])

    logger.debug(f"Read {rows_read} event rows")


@contextmanager
def iter_events(path: str | Path) -> Iterator[Iterator[EventRow]]:
    """
    Open a game-play log and yield its validated event stream.

    The file stays open for the duration of the with-block only.

    Raises:
        FileAccessError: If the file cannot be opened
        FormatError: If the header row is missing or malformed
    """
    with open_log(path) as handle:
        yield read_events(handle)
