"""
Command-line runner for compatibility scoring.

Usage:
    python -m housematch.run --config configs/config.yaml \
        --user user.json --match match.json
    python -m housematch.run --user user.json --candidates pool.json
    python -m housematch.run --trust trust.json

The runner performs the following steps:
1. Load and validate configuration
2. Load respondents from JSON
3. Score the user against one match or a candidate pool
4. Report questionnaire completion for the user
5. Optionally compute a trust score, deriving profile completion from
   the user's answers when the trust file omits it
6. Print the result as JSON
"""

import argparse
import json
import logging
import sys
from typing import Dict, Any, Optional

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)


def setup_logging(log_level: str) -> None:
    """Configure logging level from config."""
    level = getattr(logging, str(log_level).upper(), logging.INFO)
    logging.getLogger().setLevel(level)


def run_scoring(
    config_path: str,
    user_path: Optional[str] = None,
    match_path: Optional[str] = None,
    candidates_path: Optional[str] = None,
    trust_path: Optional[str] = None
) -> Dict[str, Any]:
    """
    Run compatibility and trust scoring from files.

    Args:
        config_path: Path to the configuration YAML file
        user_path: JSON file with the user respondent
        match_path: JSON file with a single match respondent
        candidates_path: JSON file with a list of candidate respondents
        trust_path: JSON file with trust score inputs

    Returns:
        Dictionary with the computed results
    """
    from .configs import load_config, validate_config, get_config_value
    from .data_loading import load_respondent, load_respondents, load_trust_inputs
    from .scoring import CompatibilityEngine, TrustScoreCalculator
    from .analytics import LoggingAnalyticsSink
    from .evaluation import score_pool, compute_score_distribution_stats
    from .profiles import ProfileConfig, summarize_completion

    config = load_config(config_path)
    setup_logging(get_config_value(config, "global.log_level", "INFO"))

    issues = validate_config(config)
    for issue in issues:
        logger.warning(f"Config issue: {issue}")

    analytics = LoggingAnalyticsSink(level=logging.DEBUG)
    profile_config = ProfileConfig.from_config(config)
    result: Dict[str, Any] = {}
    user = None

    if (match_path or candidates_path) and not user_path:
        raise ValueError("--user is required when scoring a match or candidate pool")

    if user_path:
        engine = CompatibilityEngine.from_config(config, analytics=analytics)
        user = load_respondent(user_path)
        result["profile"] = summarize_completion(user.answers, profile_config)

        if match_path:
            match = load_respondent(match_path)
            breakdown = engine.calculate_for(user, match)
            logger.info(f"Overall compatibility with {match.respondent_id}: {breakdown.overall}")
            result["compatibility"] = breakdown.to_dict()

        if candidates_path:
            candidates = load_respondents(candidates_path)
            pool = score_pool(user, candidates, engine=engine)
            quantiles = get_config_value(config, "evaluation.quantiles", [0.1, 0.25, 0.5, 0.75, 0.9])
            stats = compute_score_distribution_stats(pool["overall"].to_numpy(), quantiles)
            logger.info("\n" + stats.summary())
            result["pool"] = json.loads(pool.to_json(orient="records"))
            result["distribution"] = stats.to_dict()

    if trust_path:
        inputs = load_trust_inputs(trust_path)
        if inputs.profile_completion is None:
            if user is None:
                raise ValueError("Trust inputs lack profileCompletion; pass --user to derive it")
            inputs.profile_completion = result["profile"]["completion"]
            logger.info(f"Derived profile completion from answers: {inputs.profile_completion}")
        calculator = TrustScoreCalculator(analytics=analytics)
        result["trust_score"] = calculator.calculate(inputs)
        logger.info(f"Trust score: {result['trust_score']}")

    if not (set(result) - {"profile"}):
        raise ValueError("Nothing to score: pass --match, --candidates or --trust")

    return result


def main(argv=None):
    """Main entry point for the scoring runner."""
    parser = argparse.ArgumentParser(
        description="Score housemate compatibility from questionnaire answers"
    )
    parser.add_argument(
        "--config",
        type=str,
        default="configs/config.yaml",
        help="Path to configuration file"
    )
    parser.add_argument("--user", type=str, default=None, help="User respondent JSON")
    parser.add_argument("--match", type=str, default=None, help="Match respondent JSON")
    parser.add_argument(
        "--candidates",
        type=str,
        default=None,
        help="JSON list of candidate respondents"
    )
    parser.add_argument("--trust", type=str, default=None, help="Trust score inputs JSON")

    args = parser.parse_args(argv)

    try:
        result = run_scoring(
            args.config,
            user_path=args.user,
            match_path=args.match,
            candidates_path=args.candidates,
            trust_path=args.trust
        )
    except (FileNotFoundError, ValueError) as e:
        logger.error(f"Scoring failed: {e}")
        return 1

    print(json.dumps(result, indent=2))
    return 0


if __name__ == "__main__":
    sys.exit(main())
