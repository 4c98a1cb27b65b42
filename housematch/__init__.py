"""
Housemate Compatibility Scoring

This package scores how well two housemate candidates fit together
based on their onboarding questionnaire answers and interest lists,
and computes a trust score from verification status.

Key Design Decisions:
- Scoring is a pure function of its inputs (no storage, no network)
- Missing answers lower the score instead of raising
- Different answers to the same single-choice question score a flat 60
- Analytics are injected by the caller, never held globally
"""

from .scoring import (
    QuestionnaireAnswer,
    CompatibilityBreakdown,
    MatchingWeights,
    DEFAULT_WEIGHTS,
    TrustScoreInputs,
    Respondent,
    calculate_compatibility,
    calculate_trust_score,
    CompatibilityEngine,
    TrustScoreCalculator,
)

__version__ = "1.0.0"

__all__ = [
    "QuestionnaireAnswer",
    "CompatibilityBreakdown",
    "MatchingWeights",
    "DEFAULT_WEIGHTS",
    "TrustScoreInputs",
    "Respondent",
    "calculate_compatibility",
    "calculate_trust_score",
    "CompatibilityEngine",
    "TrustScoreCalculator",
]
