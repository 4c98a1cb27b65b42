"""
Compatibility scoring between two respondents.

The engine compares questionnaire answers category by category and
combines the category scores into one overall score.

Scoring Formula:
    category = sum(subscore * subweight) / (100 * n_subfactors)
    overall = lifestyle * w_l + social * w_s + practical * w_p + interests * w_i

Sub-factor weights (percent of the category):
- Lifestyle: cleanliness 30, sleep 25, noise 25, guests 20
- Social: interaction 40, shared meals 30, communication 30
- Practical: bill payments 40, expense splitting 30, long-term goals 30

Every sub-factor counts towards n_subfactors, answered or not, so a
sparse questionnaire lowers the score instead of being ignored.
A sub-factor also scores 0 unless both answers have the AnswerKind the
factor expects (text choice, 1-5 scale or list of labels).
Rounding happens once per category and once for the overall score.
"""

import logging
from dataclasses import dataclass
from typing import Any, Callable, Optional, Sequence, Tuple

from ..analytics.tracker import AnalyticsSink

from .schema import (
    AnswerKind,
    QuestionnaireAnswer,
    QuestionId,
    CategoryScore,
    InterestScore,
    CompatibilityBreakdown,
    MatchingWeights,
    DEFAULT_WEIGHTS,
)
from .similarity import (
    MISSING_ANSWER_SCORE,
    find_answer,
    get_answer,
    calculate_answer_compatibility,
    calculate_scale_compatibility,
    calculate_array_compatibility,
    shared_items,
    round_half_up,
)

logger = logging.getLogger(__name__)

Comparator = Callable[[Any, Any], int]


@dataclass(frozen=True)
class SubFactor:
    """
    One question-pair comparison within a category.

    An answer whose kind differs from the factor's kind scores 0.
    """
    name: str
    question_id: int
    weight: int  # percent of the category
    kind: AnswerKind
    compare: Comparator


LIFESTYLE_FACTORS: Tuple[SubFactor, ...] = (
    SubFactor("cleanliness", QuestionId.CLEANLINESS, 30, AnswerKind.SINGLE, calculate_answer_compatibility),
    SubFactor("sleep", QuestionId.SLEEP_SCHEDULE, 25, AnswerKind.SINGLE, calculate_answer_compatibility),
    SubFactor("noise", QuestionId.NOISE_TOLERANCE, 25, AnswerKind.SINGLE, calculate_answer_compatibility),
    SubFactor("guests", QuestionId.GUEST_POLICY, 20, AnswerKind.SINGLE, calculate_answer_compatibility),
)

SOCIAL_FACTORS: Tuple[SubFactor, ...] = (
    SubFactor("interaction", QuestionId.INTERACTION_LEVEL, 40, AnswerKind.SINGLE, calculate_answer_compatibility),
    SubFactor("meals", QuestionId.SHARED_MEALS, 30, AnswerKind.SINGLE, calculate_answer_compatibility),
    SubFactor("communication", QuestionId.COMMUNICATION_STYLE, 30, AnswerKind.SINGLE, calculate_answer_compatibility),
)

PRACTICAL_FACTORS: Tuple[SubFactor, ...] = (
    SubFactor("finance", QuestionId.FINANCIAL_HABITS, 40, AnswerKind.SCALE, calculate_scale_compatibility),
    SubFactor("expenses", QuestionId.EXPENSE_SPLITTING, 30, AnswerKind.SINGLE, calculate_answer_compatibility),
    SubFactor("goals", QuestionId.LONG_TERM_GOALS, 30, AnswerKind.MULTIPLE, calculate_array_compatibility),
)


def _has_kind(answer: Optional[QuestionnaireAnswer], kind: AnswerKind) -> bool:
    return answer is not None and answer.kind == kind


def _score_factors(
    factors: Sequence[SubFactor],
    user_answers: Sequence[QuestionnaireAnswer],
    match_answers: Sequence[QuestionnaireAnswer]
) -> Tuple[int, dict]:
    """
    Score every sub-factor of a category.

    Returns:
        Tuple of (category score, {factor name: sub-score})
    """
    subscores = {}
    total = 0
    for factor in factors:
        user_answer = find_answer(user_answers, factor.question_id)
        match_answer = find_answer(match_answers, factor.question_id)
        if _has_kind(user_answer, factor.kind) and _has_kind(match_answer, factor.kind):
            subscore = factor.compare(user_answer.answer, match_answer.answer)
        else:
            subscore = MISSING_ANSWER_SCORE
        subscores[factor.name] = subscore
        total += subscore * factor.weight

    # One division after summing: no float drift before rounding
    score = round_half_up(total / (len(factors) * 100))
    return score, subscores


def calculate_lifestyle_compatibility(
    user_answers: Sequence[QuestionnaireAnswer],
    match_answers: Sequence[QuestionnaireAnswer]
) -> CategoryScore:
    """Compatibility of living habits: cleanliness, sleep, noise, guests."""
    score, subscores = _score_factors(LIFESTYLE_FACTORS, user_answers, match_answers)
    details = []

    if subscores["cleanliness"] > 80:
        details.append("Both prefer clean, organized living spaces")
    elif subscores["cleanliness"] > 60:
        details.append("Compatible cleanliness standards")

    if subscores["sleep"] > 80:
        user_sleep = get_answer(user_answers, QuestionId.SLEEP_SCHEDULE)
        details.append(f"Similar bedtime schedules ({user_sleep})")

    if subscores["guests"] > 80:
        details.append("Shared approach to guest policies")

    return CategoryScore(score=score, details=details)


def calculate_social_compatibility(
    user_answers: Sequence[QuestionnaireAnswer],
    match_answers: Sequence[QuestionnaireAnswer]
) -> CategoryScore:
    """Compatibility of interaction preferences."""
    score, subscores = _score_factors(SOCIAL_FACTORS, user_answers, match_answers)
    details = []

    if subscores["interaction"] > 80:
        details.append("Both enjoy occasional shared activities")

    if subscores["communication"] > 70:
        details.append("Similar communication styles")
        details.append("Mutual respect for personal space")

    return CategoryScore(score=score, details=details)


def calculate_practical_compatibility(
    user_answers: Sequence[QuestionnaireAnswer],
    match_answers: Sequence[QuestionnaireAnswer]
) -> CategoryScore:
    """Compatibility of financial habits and living arrangements."""
    score, subscores = _score_factors(PRACTICAL_FACTORS, user_answers, match_answers)
    details = []

    if subscores["finance"] > 80:
        details.append("Both prioritize timely bill payments")

    if subscores["expenses"] > 70:
        details.append("Prefer equal expense splitting")

    if subscores["goals"] > 70:
        details.append("Long-term housing commitment")

    return CategoryScore(score=score, details=details)


def calculate_interest_compatibility(
    user_interests: Sequence[str],
    match_interests: Sequence[str]
) -> InterestScore:
    """
    Jaccard compatibility of interest labels.

    Labels are compared case-sensitively. Shared interests keep the
    user's order and spelling. Non-string labels are ignored.
    """
    user_interests = [i for i in user_interests or [] if isinstance(i, str)]
    match_interests = [i for i in match_interests or [] if isinstance(i, str)]

    shared = shared_items(user_interests, match_interests)
    total_interests = len(set(user_interests) | set(match_interests))
    score = (len(shared) / total_interests) * 100 if total_interests > 0 else 0

    return InterestScore(score=round_half_up(score), shared_interests=shared)


def calculate_compatibility(
    user_answers: Sequence[QuestionnaireAnswer],
    user_interests: Sequence[str],
    match_answers: Sequence[QuestionnaireAnswer],
    match_interests: Sequence[str],
    weights: MatchingWeights = DEFAULT_WEIGHTS
) -> CompatibilityBreakdown:
    """
    Compute the full compatibility breakdown for a user and a match.

    Missing answers never raise; they score 0 for their sub-factor.

    Args:
        user_answers: Questionnaire answers of the user
        user_interests: Interest labels of the user
        match_answers: Questionnaire answers of the match
        match_interests: Interest labels of the match
        weights: Category weights for the overall score

    Returns:
        CompatibilityBreakdown with overall and per-category scores
    """
    lifestyle = calculate_lifestyle_compatibility(user_answers, match_answers)
    social = calculate_social_compatibility(user_answers, match_answers)
    practical = calculate_practical_compatibility(user_answers, match_answers)
    interests = calculate_interest_compatibility(user_interests, match_interests)

    overall = round_half_up(
        lifestyle.score * weights.lifestyle +
        social.score * weights.social +
        practical.score * weights.practical +
        interests.score * weights.interests
    )

    return CompatibilityBreakdown(
        overall=overall,
        lifestyle=lifestyle,
        social=social,
        practical=practical,
        interests=interests
    )


class CompatibilityEngine:
    """
    Compatibility scorer bound to a set of weights.

    Holds no state beyond its constructor arguments, so one instance can
    be shared across threads. Each computation is reported to the
    analytics sink when one is supplied.

    Attributes:
        weights: Category weights for the overall score
        analytics: Optional sink receiving a compatibility_calculated event
    """

    def __init__(
        self,
        weights: Optional[MatchingWeights] = None,
        analytics: Optional[AnalyticsSink] = None
    ):
        """
        Initialize the engine.

        Args:
            weights: Category weights (default: DEFAULT_WEIGHTS)
            analytics: Object implementing AnalyticsSink.track
        """
        self.weights = weights or DEFAULT_WEIGHTS
        self.analytics = analytics
        if not self.weights.is_normalized():
            logger.warning(
                f"Matching weights sum to {self.weights.total():.3f}, not 1.0; "
                f"overall scores may fall outside [0, 100]"
            )
        logger.debug(f"Initialized CompatibilityEngine with weights={self.weights.to_dict()}")

    @classmethod
    def from_config(cls, config: dict, analytics: Optional[AnalyticsSink] = None) -> "CompatibilityEngine":
        """Create from main config dictionary."""
        return cls(weights=MatchingWeights.from_config(config), analytics=analytics)

    def calculate(
        self,
        user_answers: Sequence[QuestionnaireAnswer],
        user_interests: Sequence[str],
        match_answers: Sequence[QuestionnaireAnswer],
        match_interests: Sequence[str]
    ) -> CompatibilityBreakdown:
        """Compute the breakdown using this engine's weights."""
        breakdown = calculate_compatibility(
            user_answers, user_interests, match_answers, match_interests, self.weights
        )
        if self.analytics is not None:
            self.analytics.track(
                "compatibility_calculated",
                overall=breakdown.overall,
                **breakdown.category_scores()
            )
        return breakdown

    def calculate_for(self, user, match) -> CompatibilityBreakdown:
        """Compute the breakdown for two Respondent objects."""
        return self.calculate(user.answers, user.interests, match.answers, match.interests)
