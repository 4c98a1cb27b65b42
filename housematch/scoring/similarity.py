"""
Pairwise answer compatibility functions.

Each function compares one answer from the user with the matching
answer from the candidate and returns an integer percentage.

Compatibility Types:
- Answer: exact match of single-choice answers (100 / 60 / 0)
- Scale: linear distance on a bounded Likert scale
- Array: Jaccard overlap of multi-select answers

All three are symmetric in their arguments. A missing or empty answer
on either side yields 0; no function raises on malformed input.
"""

import logging
import math
from typing import Any, Iterable, List, Optional, Sequence

from .schema import QuestionnaireAnswer, is_scale_value, is_label_list

logger = logging.getLogger(__name__)

EXACT_MATCH_SCORE = 100
DIFFERENT_ANSWER_SCORE = 60
MISSING_ANSWER_SCORE = 0

SCALE_MIN = 1
SCALE_MAX = 5


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves rounding towards +inf."""
    return int(math.floor(value + 0.5))


def find_answer(
    answers: Iterable[QuestionnaireAnswer],
    question_id: int
) -> Optional[QuestionnaireAnswer]:
    """First recorded answer to a question, or None."""
    for answer in answers or []:
        if answer.question_id == question_id:
            return answer
    return None


def get_answer(answers: Iterable[QuestionnaireAnswer], question_id: int) -> Optional[Any]:
    """
    Look up the answer value for a question.

    Args:
        answers: Recorded answers for one respondent
        question_id: Question to look up

    Returns:
        The first matching answer value, or None if the question is absent
    """
    answer = find_answer(answers, question_id)
    return answer.answer if answer is not None else None


def calculate_answer_compatibility(answer1: Any, answer2: Any) -> int:
    """
    Compare two single-choice answers.

    Distinct options are not ranked against each other: any two different
    answers score the same flat value.
    """
    if not answer1 or not answer2:
        return MISSING_ANSWER_SCORE
    if answer1 == answer2:
        return EXACT_MATCH_SCORE
    return DIFFERENT_ANSWER_SCORE


def calculate_scale_compatibility(
    scale1: Any,
    scale2: Any,
    scale_min: int = SCALE_MIN,
    scale_max: int = SCALE_MAX
) -> int:
    """
    Compare two answers on a bounded scale.

    Formula:
        100 * (1 - |scale1 - scale2| / (scale_max - scale_min))

    Args:
        scale1: First scale answer
        scale2: Second scale answer
        scale_min: Lowest scale value (default 1)
        scale_max: Highest scale value (default 5)

    Returns:
        Integer percentage; 100 for equal answers, 0 at opposite ends
    """
    if not is_scale_value(scale1) or not is_scale_value(scale2):
        return MISSING_ANSWER_SCORE
    if not scale1 or not scale2:
        return MISSING_ANSWER_SCORE
    if scale_max <= scale_min:
        raise ValueError(f"scale_max must exceed scale_min, got [{scale_min}, {scale_max}]")

    difference = abs(scale1 - scale2)
    max_difference = scale_max - scale_min
    return round_half_up((1 - difference / max_difference) * 100)


def shared_items(items1: Sequence[str], items2: Sequence[str]) -> List[str]:
    """Members of items1 also present in items2, first occurrence order."""
    lookup = set(items2)
    seen = set()
    shared = []
    for item in items1:
        if item in lookup and item not in seen:
            seen.add(item)
            shared.append(item)
    return shared


def calculate_array_compatibility(array1: Any, array2: Any) -> int:
    """
    Compare two multi-select answers by Jaccard overlap.

    Formula:
        100 * |array1 & array2| / |array1 | array2|
    """
    if not is_label_list(array1) or not is_label_list(array2):
        return MISSING_ANSWER_SCORE
    if not array1 or not array2:
        return MISSING_ANSWER_SCORE

    intersection = shared_items(array1, array2)
    union = set(array1) | set(array2)
    return round_half_up((len(intersection) / len(union)) * 100)
