"""Data loading module for respondent records."""

from .loaders import load_respondent, load_respondents, load_trust_inputs

__all__ = ["load_respondent", "load_respondents", "load_trust_inputs"]
