"""
Central configuration for the Mean Score Ranking tool.

All shared constants and configuration values should be defined here
to avoid duplication and ensure consistency across modules.
"""

import logging

# --- Input Format ---
# The first three header fields must match these names, in this order.
REQUIRED_HEADER = ("create_timestamp", "player_id", "score")
CSV_ENCODING = "utf-8"
# Undecodable bytes pass through to the output unchanged
CSV_ENCODING_ERRORS = "surrogateescape"
READ_CHUNK_SIZE = 10_000  # Rows per pandas chunk while streaming the log

# --- Score Bounds ---
# Scores must fit a signed 64-bit integer
SCORE_MIN = -2**63
SCORE_MAX = 2**63 - 1

# --- Ranking Configuration ---
RANK_LIMIT = 10  # No new score group is started once the rank counter exceeds this
OUTPUT_COLUMNS = ("rank", "player_id", "mean_score")
OUTPUT_HEADER = ",".join(OUTPUT_COLUMNS)

# --- Logging ---
LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
LOG_DATE_FORMAT = '%Y-%m-%d %H:%M:%S'
LOG_LEVEL = logging.INFO
