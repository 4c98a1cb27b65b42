"""
Data loading functions for respondent records.

This module loads respondents (answers + interests) from JSON files.
No scoring is done here - that's handled by the scoring module.

A respondent file holds either one object or a list of objects:
    {"id": "u1",
     "answers": [{"questionId": 1, "answer": "...", "category": "..."}],
     "interests": ["Cooking", "Yoga"]}
"""

import json
import logging
from pathlib import Path
from typing import Any, Dict, List

from ..scoring.schema import Respondent, TrustScoreInputs

logger = logging.getLogger(__name__)


def _read_json(filepath: str) -> Any:
    path = Path(filepath)
    if not path.exists():
        raise FileNotFoundError(f"Respondent file not found: {filepath}")

    with open(filepath, "r", encoding="utf-8") as f:
        data = json.load(f)

    if data is None or data == [] or data == {}:
        raise ValueError(f"Respondent file is empty: {filepath}")
    return data


def load_respondent(filepath: str) -> Respondent:
    """
    Load a single respondent from a JSON file.

    Args:
        filepath: Path to the JSON file

    Returns:
        Respondent instance

    Raises:
        FileNotFoundError: If the file doesn't exist
        ValueError: If the file is empty or holds a list
    """
    data = _read_json(filepath)
    if not isinstance(data, dict):
        raise ValueError(f"Expected a single respondent object in {filepath}")

    respondent = Respondent.from_dict(data)
    logger.info(
        f"Loaded respondent {respondent.respondent_id} with "
        f"{len(respondent.answers)} answers and {len(respondent.interests)} interests"
    )
    return respondent


def load_respondents(filepath: str) -> List[Respondent]:
    """
    Load a list of respondents from a JSON file.

    A file holding a single object yields a one-element list.
    """
    data = _read_json(filepath)
    records: List[Dict[str, Any]] = data if isinstance(data, list) else [data]

    respondents = [Respondent.from_dict(r) for r in records]
    logger.info(f"Loaded {len(respondents)} respondents from {filepath}")
    return respondents


def load_trust_inputs(filepath: str) -> TrustScoreInputs:
    """Load trust score inputs from a JSON file."""
    data = _read_json(filepath)
    if not isinstance(data, dict):
        raise ValueError(f"Expected a trust inputs object in {filepath}")
    return TrustScoreInputs.from_dict(data)
