"""
Score Aggregation and Ranking

Modules:
- aggregator: Per-player running sum and count of scores
- ranking: Mean score grouping and dense-rank output
"""


def __getattr__(name):
    """Lazy imports to avoid RuntimeWarning when running modules directly."""
    if name == "aggregate_scores":
        from mean_rank.scoring.aggregator import aggregate_scores
        return aggregate_scores
    if name == "group_by_mean_score":
        from mean_rank.scoring.ranking import group_by_mean_score
        return group_by_mean_score
    if name == "rank_players":
        from mean_rank.scoring.ranking import rank_players
        return rank_players
    if name == "print_ranking":
        from mean_rank.scoring.ranking import print_ranking
        return print_ranking
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
