"""
Scoring module for housemate compatibility.

This module provides the compatibility engine and the trust score
calculator. Both are pure functions of their inputs.
"""

from .schema import (
    AnswerKind,
    QuestionId,
    QuestionnaireAnswer,
    CategoryScore,
    InterestScore,
    CompatibilityBreakdown,
    MatchingWeights,
    DEFAULT_WEIGHTS,
    TrustScoreInputs,
    Respondent,
)
from .similarity import (
    get_answer,
    calculate_answer_compatibility,
    calculate_scale_compatibility,
    calculate_array_compatibility,
)
from .engine import (
    calculate_lifestyle_compatibility,
    calculate_social_compatibility,
    calculate_practical_compatibility,
    calculate_interest_compatibility,
    calculate_compatibility,
    CompatibilityEngine,
)
from .trust import calculate_trust_score, TrustScoreCalculator

__all__ = [
    "AnswerKind",
    "QuestionId",
    "QuestionnaireAnswer",
    "CategoryScore",
    "InterestScore",
    "CompatibilityBreakdown",
    "MatchingWeights",
    "DEFAULT_WEIGHTS",
    "TrustScoreInputs",
    "Respondent",
    "get_answer",
    "calculate_answer_compatibility",
    "calculate_scale_compatibility",
    "calculate_array_compatibility",
    "calculate_lifestyle_compatibility",
    "calculate_social_compatibility",
    "calculate_practical_compatibility",
    "calculate_interest_compatibility",
    "calculate_compatibility",
    "CompatibilityEngine",
    "calculate_trust_score",
    "TrustScoreCalculator",
]
