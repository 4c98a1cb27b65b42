"""Profile helpers built on questionnaire answers."""

from .profile_builder import (
    LifestyleProfile,
    ProfileConfig,
    convert_answers_to_profile,
    completion_percentage,
    has_completed_questionnaire,
    summarize_completion
)

__all__ = [
    "LifestyleProfile",
    "ProfileConfig",
    "convert_answers_to_profile",
    "completion_percentage",
    "has_completed_questionnaire",
    "summarize_completion"
]
