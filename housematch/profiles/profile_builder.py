"""
Conversion of questionnaire answers into a lifestyle profile.

Maps the raw onboarding answers onto named profile fields used for
display. Nothing here is stored; the caller owns persistence.
"""

import logging
from dataclasses import dataclass, field, asdict
from typing import Any, Dict, List, Optional, Sequence

from ..scoring.schema import QuestionnaireAnswer, QuestionId
from ..scoring.similarity import round_half_up

logger = logging.getLogger(__name__)

FINANCIAL_IMPORTANCE_LABELS = [
    "Not important",
    "Somewhat important",
    "Important",
    "Very important",
    "Absolutely critical",
]
DEFAULT_FINANCIAL_LABEL = "Important"

TOTAL_QUESTIONS = 13
MINIMUM_REQUIRED_ANSWERS = 10


@dataclass
class ProfileConfig:
    """
    Questionnaire completion settings.

    Attributes:
        total_questions: Number of onboarding questions
        minimum_answers: Distinct answers needed to count as completed
    """
    total_questions: int = TOTAL_QUESTIONS
    minimum_answers: int = MINIMUM_REQUIRED_ANSWERS

    def __post_init__(self):
        for name in ("total_questions", "minimum_answers"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int):
                raise ValueError(f"profiles.{name} must be an integer, got {value!r}")
        if self.total_questions <= 0:
            raise ValueError(f"profiles.total_questions must be positive, got {self.total_questions}")
        if not 0 <= self.minimum_answers <= self.total_questions:
            raise ValueError(
                f"profiles.minimum_answers must be in [0, {self.total_questions}], "
                f"got {self.minimum_answers}"
            )

    def to_dict(self) -> Dict[str, int]:
        return asdict(self)

    @classmethod
    def from_config(cls, config: Dict[str, Any]) -> "ProfileConfig":
        """Create from main config dictionary."""
        profiles = config.get("profiles", {}) or {}
        if not isinstance(profiles, dict):
            raise ValueError(f"profiles section must be a mapping, got {type(profiles).__name__}")
        return cls(
            total_questions=profiles.get("total_questions", TOTAL_QUESTIONS),
            minimum_answers=profiles.get("minimum_answers", MINIMUM_REQUIRED_ANSWERS)
        )


@dataclass
class LifestyleProfile:
    """
    Profile fields derived from questionnaire answers.

    Fields stay None when the corresponding question was not answered.
    """
    cleanliness: Optional[str] = None
    social_level: Optional[str] = None
    bedtime: Optional[str] = None
    noise_level: Optional[str] = None
    guest_policy: Optional[str] = None
    conflict_resolution: Optional[str] = None
    financial_habits: Optional[str] = None
    long_term_goals: List[str] = field(default_factory=list)
    ideal_housemate: Optional[str] = None
    about_me: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


def financial_label(value: Any) -> str:
    """Label for a 1-5 bill payment importance answer."""
    if isinstance(value, int) and not isinstance(value, bool) and 1 <= value <= len(FINANCIAL_IMPORTANCE_LABELS):
        return FINANCIAL_IMPORTANCE_LABELS[value - 1]
    return DEFAULT_FINANCIAL_LABEL


_TEXT_FIELDS = {
    QuestionId.CLEANLINESS: "cleanliness",
    QuestionId.INTERACTION_LEVEL: "social_level",
    QuestionId.SLEEP_SCHEDULE: "bedtime",
    QuestionId.NOISE_TOLERANCE: "noise_level",
    QuestionId.GUEST_POLICY: "guest_policy",
    QuestionId.COMMUNICATION_STYLE: "conflict_resolution",
    QuestionId.IDEAL_HOUSEMATE: "ideal_housemate",
    QuestionId.ABOUT_ME: "about_me",
}


def convert_answers_to_profile(answers: Sequence[QuestionnaireAnswer]) -> LifestyleProfile:
    """
    Build a lifestyle profile from questionnaire answers.

    Later answers to the same question overwrite earlier ones.

    Args:
        answers: Recorded answers for one respondent

    Returns:
        LifestyleProfile with every answered field filled in
    """
    profile = LifestyleProfile()

    for answer in answers:
        if answer.question_id in _TEXT_FIELDS:
            setattr(profile, _TEXT_FIELDS[answer.question_id], answer.answer)
        elif answer.question_id == QuestionId.FINANCIAL_HABITS:
            profile.financial_habits = financial_label(answer.answer)
        elif answer.question_id == QuestionId.LONG_TERM_GOALS:
            goals = answer.answer
            profile.long_term_goals = list(goals) if isinstance(goals, (list, tuple)) else []

    logger.debug(f"Built profile from {len(answers)} answers")
    return profile


def completion_percentage(
    answers: Sequence[QuestionnaireAnswer],
    total_questions: int = TOTAL_QUESTIONS
) -> int:
    """Share of questions answered, as a rounded percentage."""
    if total_questions <= 0:
        raise ValueError(f"total_questions must be positive, got {total_questions}")
    answered = len({a.question_id for a in answers})
    return round_half_up(answered / total_questions * 100)


def has_completed_questionnaire(
    answers: Sequence[QuestionnaireAnswer],
    minimum: int = MINIMUM_REQUIRED_ANSWERS
) -> bool:
    """Whether enough distinct questions were answered."""
    return len({a.question_id for a in answers}) >= minimum


def summarize_completion(
    answers: Sequence[QuestionnaireAnswer],
    config: Optional[ProfileConfig] = None
) -> Dict[str, Any]:
    """Completion percentage and completed flag under the given settings."""
    config = config or ProfileConfig()
    return {
        "completion": completion_percentage(answers, config.total_questions),
        "completed": has_completed_questionnaire(answers, config.minimum_answers)
    }
