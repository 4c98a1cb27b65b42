"""Evaluation module for scoring candidate pools."""

from .metrics import (
    ScoreDistributionStats,
    compute_score_distribution_stats,
    score_pool
)

__all__ = [
    "ScoreDistributionStats",
    "compute_score_distribution_stats",
    "score_pool"
]
