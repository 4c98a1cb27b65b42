"""
Trust score from verification status and profile completeness.

Trust Score Formula:
    verified_fraction = passed checks / total checks
    trust = verified_fraction * 70 + (profile_completion / 100) * 20
            + (10 if has_references else 0)

profile_completion is not clamped here; callers keep it in [0, 100].
"""

import logging
from typing import Mapping, Optional

from ..analytics.tracker import AnalyticsSink
from .schema import TrustScoreInputs
from .similarity import round_half_up

logger = logging.getLogger(__name__)

VERIFICATION_WEIGHT = 70
COMPLETION_WEIGHT = 20
REFERENCES_BONUS = 10


def calculate_trust_score(
    verification_status: Mapping[str, bool],
    profile_completion: float,
    has_references: bool = False
) -> int:
    """
    Compute the trust score.

    Args:
        verification_status: Check name to passed flag (phone, email, id, ...)
        profile_completion: Profile completeness percentage
        has_references: Whether references were supplied

    Returns:
        Integer trust score, in [0, 100] for in-range completion

    Raises:
        ValueError: If verification_status is empty
    """
    if not verification_status:
        raise ValueError("verification_status must contain at least one check")

    verifications = list(verification_status.values())
    verified_count = sum(1 for v in verifications if v)

    score = (verified_count / len(verifications)) * VERIFICATION_WEIGHT
    score += (profile_completion / 100) * COMPLETION_WEIGHT
    if has_references:
        score += REFERENCES_BONUS

    return round_half_up(score)


class TrustScoreCalculator:
    """
    Trust scorer with an optional analytics sink.

    Attributes:
        analytics: Optional sink receiving a trust_score_calculated event
    """

    def __init__(self, analytics: Optional[AnalyticsSink] = None):
        self.analytics = analytics

    def calculate(self, inputs: TrustScoreInputs) -> int:
        """
        Compute the trust score for a TrustScoreInputs record.

        Raises:
            ValueError: If profile_completion is unset or no checks are given
        """
        if inputs.profile_completion is None:
            raise ValueError("profile_completion is required to compute a trust score")
        score = calculate_trust_score(
            inputs.verification_status,
            inputs.profile_completion,
            inputs.has_references
        )
        if self.analytics is not None:
            self.analytics.track(
                "trust_score_calculated",
                trust_score=score,
                checks=len(inputs.verification_status)
            )
        return score
