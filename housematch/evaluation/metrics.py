"""
Pool scoring and score distribution statistics.

Scores one user against many candidates and summarizes the result.
Rows keep the order of the candidate list; nothing here ranks or
filters candidates.
"""

import logging
from dataclasses import dataclass
from typing import Dict, List, Any, Optional, Sequence

import numpy as np
import pandas as pd

from ..scoring.engine import CompatibilityEngine
from ..scoring.schema import Respondent, MatchingWeights

logger = logging.getLogger(__name__)

POOL_COLUMNS = [
    "candidate_id", "overall", "lifestyle", "social",
    "practical", "interests", "shared_interests"
]


@dataclass
class ScoreDistributionStats:
    """Statistics about score distribution."""
    count: int
    mean: float
    std: float
    min: float
    max: float
    quantiles: Dict[str, float]  # e.g., {"p10": 20.0, "p50": 50.0, "p90": 80.0}

    def to_dict(self) -> Dict[str, Any]:
        return {
            "count": int(self.count),
            "mean": float(self.mean),
            "std": float(self.std),
            "min": float(self.min),
            "max": float(self.max),
            "quantiles": {k: float(v) for k, v in self.quantiles.items()}
        }

    def summary(self) -> str:
        """Generate text summary of the statistics."""
        lines = [
            f"Score Distribution ({self.count} candidates):",
            f"  Mean: {self.mean:.2f}",
            f"  Std:  {self.std:.2f}",
            f"  Min:  {self.min:.0f}",
            f"  Max:  {self.max:.0f}",
        ]
        for q_name, q_value in self.quantiles.items():
            lines.append(f"  {q_name}: {q_value:.2f}")
        return "\n".join(lines)


def compute_score_distribution_stats(
    scores: Sequence[float],
    quantiles: Sequence[float] = (0.1, 0.25, 0.5, 0.75, 0.9)
) -> ScoreDistributionStats:
    """
    Compute distribution statistics for scores.

    Args:
        scores: Compatibility scores
        quantiles: Quantile values to compute (default: p10, p25, p50, p75, p90)

    Returns:
        ScoreDistributionStats instance

    Raises:
        ValueError: If scores is empty
    """
    scores = np.asarray(scores, dtype=float)
    if scores.size == 0:
        raise ValueError("Cannot compute distribution stats of an empty score list")

    quantile_dict = {
        f"p{int(round(q * 100))}": float(np.percentile(scores, q * 100))
        for q in quantiles
    }

    return ScoreDistributionStats(
        count=int(scores.size),
        mean=float(np.mean(scores)),
        std=float(np.std(scores)),
        min=float(np.min(scores)),
        max=float(np.max(scores)),
        quantiles=quantile_dict
    )


def score_pool(
    user: Respondent,
    candidates: Sequence[Respondent],
    weights: Optional[MatchingWeights] = None,
    engine: Optional[CompatibilityEngine] = None
) -> pd.DataFrame:
    """
    Score one user against every candidate.

    Args:
        user: The respondent looking for a housemate
        candidates: Candidate respondents
        weights: Category weights (ignored when engine is given)
        engine: Preconfigured engine, e.g. one carrying an analytics sink

    Returns:
        DataFrame with one row per candidate, in input order
    """
    engine = engine or CompatibilityEngine(weights=weights)

    rows: List[Dict[str, Any]] = []
    for index, candidate in enumerate(candidates):
        breakdown = engine.calculate_for(user, candidate)
        rows.append({
            "candidate_id": candidate.respondent_id if candidate.respondent_id is not None else str(index),
            "overall": breakdown.overall,
            **breakdown.category_scores(),
            "shared_interests": breakdown.interests.shared_interests
        })

    logger.info(f"Scored {len(rows)} candidates for user {user.respondent_id}")
    return pd.DataFrame(rows, columns=POOL_COLUMNS)
