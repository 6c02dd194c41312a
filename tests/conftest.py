"""
Shared fixtures for mean_rank tests.
"""

import logging

import pytest

from mean_rank.utils import set_log_level

HEADER = "create_timestamp,player_id,score"


@pytest.fixture
def write_log(tmp_path):
    """Write a game-play log CSV from data lines and return its path."""
    def _write(*lines, header=HEADER, name="gameplay.csv"):
        path = tmp_path / name
        body = [header] if header is not None else []
        body.extend(lines)
        path.write_text("\n".join(body) + ("\n" if body else ""), encoding="utf-8")
        return path
    return _write


@pytest.fixture
def restore_log_level():
    """Put mean_rank loggers back to INFO after a --verbose run."""
    yield
    set_log_level(logging.INFO)
