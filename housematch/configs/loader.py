"""
Configuration loading and validation.

This module handles loading of YAML configuration files and
validates the scoring weights and profile settings they carry.
"""

import logging
from pathlib import Path
from typing import Dict, Any, List

import yaml

logger = logging.getLogger(__name__)

WEIGHT_KEYS = ("lifestyle", "social", "practical", "interests")


def load_config(filepath: str) -> Dict[str, Any]:
    """
    Load configuration from YAML file.

    Args:
        filepath: Path to the YAML configuration file

    Returns:
        Configuration dictionary

    Raises:
        FileNotFoundError: If config file doesn't exist
        ValueError: If config file is empty or not a mapping
        yaml.YAMLError: If YAML is invalid
    """
    path = Path(filepath)
    if not path.exists():
        raise FileNotFoundError(f"Configuration file not found: {filepath}")

    logger.info(f"Loading configuration from {filepath}")
    with open(filepath, "r") as f:
        config = yaml.safe_load(f)

    if config is None:
        raise ValueError(f"Configuration file is empty: {filepath}")
    if not isinstance(config, dict):
        raise ValueError(f"Configuration file must hold a mapping: {filepath}")

    return config


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def validate_config(config: Dict[str, Any]) -> List[str]:
    """
    Validate configuration and return list of warnings/errors.

    Args:
        config: Configuration dictionary

    Returns:
        List of warning/error messages (empty if valid)
    """
    if not isinstance(config, dict):
        return [f"Configuration must be a mapping, got {type(config).__name__}"]

    issues = []

    for section in ["global", "weights"]:
        if section not in config:
            issues.append(f"Missing required section: {section}")

    # Weights should sum to 1 so the overall score stays in [0, 100]
    if "weights" in config:
        weights = config["weights"] or {}
        if not isinstance(weights, dict):
            issues.append(f"weights must be a mapping, got {type(weights).__name__}")
        else:
            unknown = sorted(set(weights) - set(WEIGHT_KEYS), key=str)
            if unknown:
                issues.append(f"Unknown weight keys: {unknown}")
            missing = [k for k in WEIGHT_KEYS if k not in weights]
            if missing:
                issues.append(f"Missing weights: {missing}")
            values = [weights.get(k, 0) for k in WEIGHT_KEYS]
            if not all(_is_number(v) for v in values):
                issues.append(f"Weights must be numeric: {weights}")
            else:
                if any(v < 0 for v in values):
                    issues.append(f"Weights must be non-negative: {weights}")
                total = sum(values)
                if abs(total - 1.0) > 0.01:
                    issues.append(f"Matching weights don't sum to 1: {total}")

    if "profiles" in config:
        profiles = config["profiles"] or {}
        if not isinstance(profiles, dict):
            issues.append(f"profiles must be a mapping, got {type(profiles).__name__}")
        else:
            total_questions = profiles.get("total_questions", 13)
            minimum = profiles.get("minimum_answers", 10)
            if not isinstance(total_questions, int) or isinstance(total_questions, bool):
                issues.append(f"profiles.total_questions must be an integer, got {total_questions!r}")
            elif not isinstance(minimum, int) or isinstance(minimum, bool):
                issues.append(f"profiles.minimum_answers must be an integer, got {minimum!r}")
            elif total_questions <= 0:
                issues.append(f"profiles.total_questions must be positive, got {total_questions}")
            elif not 0 <= minimum <= total_questions:
                issues.append(
                    f"profiles.minimum_answers must be in [0, {total_questions}], got {minimum}"
                )

    if "global" in config:
        global_config = config["global"]
        if not isinstance(global_config, dict):
            issues.append(f"global must be a mapping, got {type(global_config).__name__}")
        elif not isinstance(global_config.get("log_level"), str):
            issues.append("Missing or invalid global.log_level")

    return issues


def get_config_value(config: Dict[str, Any], path: str, default: Any = None) -> Any:
    """
    Get a nested configuration value using dot notation.

    Args:
        config: Configuration dictionary
        path: Dot-separated path (e.g., "weights.lifestyle")
        default: Default value if path doesn't exist

    Returns:
        Configuration value or default
    """
    keys = path.split(".")
    value = config
    for key in keys:
        if isinstance(value, dict) and key in value:
            value = value[key]
        else:
            return default
    return value
