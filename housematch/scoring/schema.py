"""
Data structures for compatibility scoring.

Defines the questionnaire answers consumed by the engine and the
breakdown it produces. Answers arrive from the onboarding flow as
plain dictionaries; the dataclasses here accept both the camelCase
wire keys and snake_case keys.

Question IDs meaningful to the engine:
- Lifestyle: 1 (cleanliness), 5 (sleep), 6 (noise), 7 (guests)
- Social: 3 (interaction), 4 (shared meals), 8 (communication)
- Practical: 9 (bill payment importance, 1-5 scale),
  10 (expense splitting), 11 (long-term goals, multi-select)
"""

import math
from dataclasses import dataclass, field, asdict
from typing import Optional, Dict, Any, List, Union
from enum import Enum

AnswerValue = Union[str, List[str], int, float]


class AnswerKind(Enum):
    """Shape of a questionnaire answer."""
    SINGLE = "single"
    MULTIPLE = "multiple"
    SCALE = "scale"
    EMPTY = "empty"
    UNKNOWN = "unknown"


def is_scale_value(value: Any) -> bool:
    """Finite int or float, excluding bool."""
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return False
    return math.isfinite(value)


def is_label_list(value: Any) -> bool:
    """List or tuple whose items are all strings."""
    return isinstance(value, (list, tuple)) and all(isinstance(item, str) for item in value)


class QuestionId:
    """Question identifiers read by the scoring engine."""
    CLEANLINESS = 1
    INTERACTION_LEVEL = 3
    SHARED_MEALS = 4
    SLEEP_SCHEDULE = 5
    NOISE_TOLERANCE = 6
    GUEST_POLICY = 7
    COMMUNICATION_STYLE = 8
    FINANCIAL_HABITS = 9
    EXPENSE_SPLITTING = 10
    LONG_TERM_GOALS = 11
    IDEAL_HOUSEMATE = 12
    ABOUT_ME = 13


@dataclass(frozen=True)
class QuestionnaireAnswer:
    """
    One recorded answer for one respondent.

    Attributes:
        question_id: Onboarding question identifier
        answer: Single choice (str), multi-select (list of str) or scale (number)
        category: Questionnaire category label, e.g. "Living Habits"
    """
    question_id: int
    answer: Optional[AnswerValue]
    category: str = ""

    @property
    def kind(self) -> AnswerKind:
        """
        Tag the answer by its value shape.

        Values that fit none of the questionnaire shapes (bool, dict,
        NaN, lists holding non-strings) are UNKNOWN.
        """
        if self.answer is None:
            return AnswerKind.EMPTY
        if isinstance(self.answer, str):
            return AnswerKind.SINGLE
        if is_scale_value(self.answer):
            return AnswerKind.SCALE
        if is_label_list(self.answer):
            return AnswerKind.MULTIPLE
        return AnswerKind.UNKNOWN

    def to_dict(self) -> Dict[str, Any]:
        """Convert to the camelCase wire shape."""
        return {
            "questionId": self.question_id,
            "answer": list(self.answer) if isinstance(self.answer, tuple) else self.answer,
            "category": self.category
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "QuestionnaireAnswer":
        """Create from dictionary with either camelCase or snake_case keys."""
        if not isinstance(data, dict):
            raise ValueError(f"Answer must be an object, got {type(data).__name__}")
        question_id = data.get("questionId", data.get("question_id"))
        if question_id is None:
            raise ValueError(f"Answer is missing a question id: {data}")
        try:
            question_id = int(question_id)
        except (TypeError, ValueError):
            raise ValueError(f"Invalid question id: {question_id!r}")
        return cls(
            question_id=question_id,
            answer=data.get("answer"),
            category=data.get("category", "")
        )


@dataclass
class CategoryScore:
    """Score for one weighted category with human-readable details."""
    score: int
    details: List[str] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {"score": self.score, "details": list(self.details)}


@dataclass
class InterestScore:
    """Jaccard score over interest labels plus the shared labels."""
    score: int
    shared_interests: List[str] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {"score": self.score, "sharedInterests": list(self.shared_interests)}


@dataclass
class CompatibilityBreakdown:
    """
    Result of compatibility scoring between a user and a match.

    Attributes:
        overall: Weighted sum of the four category scores
        lifestyle: Cleanliness, sleep, noise and guest policy
        social: Interaction level, shared meals and communication
        practical: Bill payments, expense splitting and long-term goals
        interests: Shared interest labels
    """
    overall: int
    lifestyle: CategoryScore
    social: CategoryScore
    practical: CategoryScore
    interests: InterestScore

    def category_scores(self) -> Dict[str, int]:
        """Flat mapping of category name to score."""
        return {
            "lifestyle": self.lifestyle.score,
            "social": self.social.score,
            "practical": self.practical.score,
            "interests": self.interests.score
        }

    def detail_lines(self) -> List[str]:
        """All detail strings in category order, for display."""
        return self.lifestyle.details + self.social.details + self.practical.details

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return {
            "overall": self.overall,
            "lifestyle": self.lifestyle.to_dict(),
            "social": self.social.to_dict(),
            "practical": self.practical.to_dict(),
            "interests": self.interests.to_dict()
        }


@dataclass(frozen=True)
class MatchingWeights:
    """
    Category weights for the overall score.

    The four weights are meant to sum to 1.0. This is not enforced: with
    other weights the overall score is still the weighted sum and may fall
    outside [0, 100].
    """
    lifestyle: float = 0.35
    social: float = 0.25
    practical: float = 0.25
    interests: float = 0.15

    def total(self) -> float:
        return self.lifestyle + self.social + self.practical + self.interests

    def is_normalized(self, tolerance: float = 0.01) -> bool:
        """Check whether the weights sum to 1 within tolerance."""
        return abs(self.total() - 1.0) <= tolerance

    def to_dict(self) -> Dict[str, float]:
        return asdict(self)

    @classmethod
    def from_dict(cls, d: Dict[str, Any]) -> "MatchingWeights":
        """Create from dictionary; missing keys keep their defaults."""
        unknown = set(d) - {"lifestyle", "social", "practical", "interests"}
        if unknown:
            raise ValueError(f"Unknown weight keys: {sorted(unknown)}")
        values = {}
        for k, v in d.items():
            if isinstance(v, bool):
                raise ValueError(f"Weight {k} must be numeric, got {v!r}")
            try:
                values[k] = float(v)
            except (TypeError, ValueError):
                raise ValueError(f"Weight {k} must be numeric, got {v!r}")
        return cls(**values)

    @classmethod
    def from_config(cls, config: Dict[str, Any]) -> "MatchingWeights":
        """Create from main config dictionary."""
        weights = config.get("weights", {}) or {}
        if not isinstance(weights, dict):
            raise ValueError(f"weights section must be a mapping, got {type(weights).__name__}")
        return cls.from_dict(weights)


DEFAULT_WEIGHTS = MatchingWeights()


@dataclass
class TrustScoreInputs:
    """
    Inputs to the trust score.

    Attributes:
        verification_status: Check name (phone, email, id, ...) to passed flag
        profile_completion: Profile completeness percentage, 0-100; None when
            the caller should derive it from questionnaire answers
        has_references: Whether the respondent supplied references
    """
    verification_status: Dict[str, bool]
    profile_completion: Optional[float] = None
    has_references: bool = False

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "TrustScoreInputs":
        """Create from dictionary with either camelCase or snake_case keys."""
        status = data.get("verificationStatus", data.get("verification_status")) or {}
        if not isinstance(status, dict):
            raise ValueError(f"verificationStatus must be an object, got {type(status).__name__}")

        completion = data.get("profileCompletion", data.get("profile_completion"))
        if completion is not None and not is_scale_value(completion):
            raise ValueError(f"profileCompletion must be a number, got {completion!r}")

        return cls(
            verification_status=dict(status),
            profile_completion=completion,
            has_references=bool(data.get("hasReferences", data.get("has_references", False)))
        )


@dataclass
class Respondent:
    """
    One respondent: answers plus interest labels.

    Attributes:
        answers: Recorded questionnaire answers
        interests: Free-text interest labels
        respondent_id: Optional identifier
    """
    answers: List[QuestionnaireAnswer] = field(default_factory=list)
    interests: List[str] = field(default_factory=list)
    respondent_id: Optional[str] = None

    def __post_init__(self):
        """Convert raw answer dictionaries."""
        if not isinstance(self.answers, (list, tuple)):
            raise ValueError(f"answers must be a list, got {type(self.answers).__name__}")
        if not is_label_list(self.interests):
            raise ValueError(f"interests must be a list of strings, got {self.interests!r}")
        self.answers = [
            a if isinstance(a, QuestionnaireAnswer) else QuestionnaireAnswer.from_dict(a)
            for a in self.answers
        ]
        self.interests = list(self.interests)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.respondent_id,
            "answers": [a.to_dict() for a in self.answers],
            "interests": list(self.interests)
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Respondent":
        """
        Create from dictionary.

        Null answers or interests count as empty lists.

        Raises:
            ValueError: If the record or one of its fields has the wrong shape
        """
        if not isinstance(data, dict):
            raise ValueError(f"Respondent must be an object, got {type(data).__name__}")
        respondent_id = data.get("id", data.get("respondent_id"))
        return cls(
            answers=data.get("answers", data.get("questionnaire")) or [],
            interests=data.get("interests") or [],
            respondent_id=str(respondent_id) if respondent_id is not None else None
        )
