"""
Shared utilities for the Mean Score Ranking tool.

This module provides common functions used across multiple modules
to avoid code duplication.
"""

import logging
import re
import shutil
import tempfile
from pathlib import Path

from mean_rank.config import LOG_DATE_FORMAT, LOG_FORMAT, LOG_LEVEL, SCORE_MAX, SCORE_MIN

# --- Shared Regex Patterns ---
# Signed decimal integer: optional +/- followed by ASCII digits only
SCORE_RE = re.compile(r"[+-]?[0-9]+")

PACKAGE_LOGGER = "mean_rank"
_log_level = LOG_LEVEL


# --- Logging Setup ---
def setup_logging(name: str | None = None, level: int | None = None) -> logging.Logger:
    """
    Configure and return a logger with consistent formatting.

    Handlers write to stderr so standard output only carries the ranking.
    The level is only set when the logger is first configured or when
    given explicitly, so repeated calls keep a level chosen by set_log_level().

    Args:
        name: Logger name (usually __name__ from the calling module)
        level: Logging level (default: the current package level, INFO at start)

    Returns:
        Configured logger instance
    """
    logger = logging.getLogger(name)

    if not logger.handlers:
        handler = logging.StreamHandler()
        formatter = logging.Formatter(LOG_FORMAT, datefmt=LOG_DATE_FORMAT)
        handler.setFormatter(formatter)
        logger.addHandler(handler)
        logger.setLevel(_log_level if level is None else level)
    elif level is not None:
        logger.setLevel(level)

    return logger


def set_log_level(level: int) -> None:
    """Set the level of every mean_rank logger, including ones created later."""
    global _log_level
    _log_level = level
    for name in list(logging.root.manager.loggerDict):
        if name == PACKAGE_LOGGER or name.startswith(PACKAGE_LOGGER + "."):
            logging.getLogger(name).setLevel(level)


# --- Module Logger ---
logger = setup_logging(__name__)


# --- File Operations ---
def atomic_write_csv(df, path: Path, **kwargs) -> None:
    """
    Write a DataFrame to CSV atomically using a temporary file.

    This prevents a half-written ranking file if the write is interrupted.

    Args:
        df: pandas DataFrame to write
        path: Destination path for the CSV file
        **kwargs: Additional arguments to pass to df.to_csv()
    """
    path.parent.mkdir(parents=True, exist_ok=True)

    tmp_path = None
    try:
        with tempfile.NamedTemporaryFile(
            mode='w',
            delete=False,
            suffix='.csv',
            dir=path.parent  # Same filesystem for atomic move
        ) as tmp:
            tmp_path = Path(tmp.name)
        df.to_csv(tmp_path, **kwargs)

        shutil.move(str(tmp_path), str(path))
        logger.debug(f"Atomically wrote {len(df)} rows to {path}")

    except Exception:
        if tmp_path is not None and tmp_path.exists():
            tmp_path.unlink()
        raise


# --- Validation ---
def parse_score(text: str) -> int:
    """
    Parse a score field as a signed decimal integer.

    Args:
        text: Raw score field from the log

    Returns:
        The parsed integer score

    Raises:
        ValueError: If text is not an optional sign followed by digits, or
            the value does not fit a signed 64-bit integer
    """
    if not isinstance(text, str) or SCORE_RE.fullmatch(text) is None:
        raise ValueError(f"Invalid score: {text!r}")
    score = int(text)
    if not SCORE_MIN <= score <= SCORE_MAX:
        raise ValueError(f"Score out of range: {text}")
    return score


__all__ = [
    # Logging
    'setup_logging',
    'set_log_level',
    # File operations
    'atomic_write_csv',
    # Validation
    'parse_score',
    'SCORE_RE',
]
