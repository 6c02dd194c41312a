"""
Data Ingestion

Modules:
- reader: Open the game-play log CSV, validate its header and stream event rows
"""


def __getattr__(name):
    """Lazy imports to avoid RuntimeWarning when running modules directly."""
    if name == "iter_events":
        from mean_rank.ingestion.reader import iter_events
        return iter_events
    if name == "read_events":
        from mean_rank.ingestion.reader import read_events
        return read_events
    if name == "EventRow":
        from mean_rank.ingestion.reader import EventRow
        return EventRow
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
