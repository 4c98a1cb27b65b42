import logging
import random

import pytest

from housematch.analytics import InMemoryAnalyticsSink
from housematch.scoring import (
    CompatibilityEngine,
    MatchingWeights,
    DEFAULT_WEIGHTS,
    calculate_compatibility,
    calculate_lifestyle_compatibility,
    calculate_social_compatibility,
    calculate_practical_compatibility,
    calculate_interest_compatibility,
)

from conftest import (
    make_answer, full_answers, CLEAN, WEEKLY_CLEAN, SLEEP, COMMUNICATION,
    INTERACTION, EXPENSES, LONG_TERM, FRIENDSHIPS,
)


def test_cleanliness_only_scenario():
    answers = [make_answer(1, CLEAN, "Living Habits")]
    lifestyle = calculate_lifestyle_compatibility(answers, list(answers))
    # (100 * 0.30 + 0 + 0 + 0) / 4 = 7.5
    assert lifestyle.score == 8
    assert lifestyle.details == ["Both prefer clean, organized living spaces"]


def test_lifestyle_different_cleanliness_gets_no_detail():
    lifestyle = calculate_lifestyle_compatibility(
        [make_answer(1, CLEAN)], [make_answer(1, WEEKLY_CLEAN)]
    )
    # (60 * 0.30) / 4 = 4.5
    assert lifestyle.score == 5
    assert lifestyle.details == []


def test_lifestyle_all_matching():
    lifestyle = calculate_lifestyle_compatibility(full_answers(), full_answers())
    assert lifestyle.score == 25
    assert lifestyle.details == [
        "Both prefer clean, organized living spaces",
        f"Similar bedtime schedules ({SLEEP})",
        "Shared approach to guest policies",
    ]


def test_social_details():
    social = calculate_social_compatibility(
        [make_answer(3, INTERACTION), make_answer(8, COMMUNICATION)],
        [make_answer(3, INTERACTION), make_answer(8, COMMUNICATION)]
    )
    # (100 * 40 + 0 * 30 + 100 * 30) / 300
    assert social.score == 23
    assert social.details == [
        "Both enjoy occasional shared activities",
        "Similar communication styles",
        "Mutual respect for personal space",
    ]


def test_social_communication_only():
    social = calculate_social_compatibility(
        [make_answer(8, COMMUNICATION)], [make_answer(8, COMMUNICATION)]
    )
    assert social.score == 10
    assert social.details == ["Similar communication styles", "Mutual respect for personal space"]


def test_practical_mixed_factors():
    practical = calculate_practical_compatibility(
        [make_answer(9, 5), make_answer(10, EXPENSES), make_answer(11, [LONG_TERM, FRIENDSHIPS])],
        [make_answer(9, 4), make_answer(10, EXPENSES), make_answer(11, [LONG_TERM])]
    )
    # (75 * 40 + 100 * 30 + 50 * 30) / 300
    assert practical.score == 25
    assert practical.details == ["Prefer equal expense splitting"]


def test_practical_all_details():
    practical = calculate_practical_compatibility(full_answers(), full_answers())
    assert practical.score == 33
    assert practical.details == [
        "Both prioritize timely bill payments",
        "Prefer equal expense splitting",
        "Long-term housing commitment",
    ]


def test_interest_compatibility():
    interests = calculate_interest_compatibility(
        ["Cooking", "Yoga", "Movies", "Hiking"], ["Cooking", "Movies", "Photography"]
    )
    assert interests.score == 40
    assert interests.shared_interests == ["Cooking", "Movies"]


def test_interest_compatibility_is_case_sensitive():
    interests = calculate_interest_compatibility(["cooking"], ["Cooking"])
    assert interests.score == 0
    assert interests.shared_interests == []


def test_empty_interests_score_zero():
    interests = calculate_interest_compatibility([], [])
    assert interests.score == 0
    assert interests.shared_interests == []


def test_identical_interests_score_full():
    labels = ["Cooking", "Yoga", "Cooking"]
    interests = calculate_interest_compatibility(labels, list(labels))
    assert interests.score == 100
    assert interests.shared_interests == ["Cooking", "Yoga"]


def test_calculate_compatibility_breakdown(user, match):
    breakdown = calculate_compatibility(
        user.answers, user.interests, match.answers, match.interests
    )
    assert breakdown.lifestyle.score == 25
    assert breakdown.social.score == 18
    assert breakdown.practical.score == 25
    assert breakdown.interests.score == 40
    # 25 * 0.35 + 18 * 0.25 + 25 * 0.25 + 40 * 0.15 = 25.5
    assert breakdown.overall == 26
    assert breakdown.social.details == ["Similar communication styles", "Mutual respect for personal space"]


def test_identical_respondents():
    answers = full_answers()
    breakdown = calculate_compatibility(answers, ["Yoga"], full_answers(), ["Yoga"])
    assert breakdown.category_scores() == {
        "lifestyle": 25, "social": 33, "practical": 33, "interests": 100
    }
    assert breakdown.overall == 40


def test_empty_inputs_do_not_raise():
    breakdown = calculate_compatibility([], [], [], [])
    assert breakdown.overall == 0
    assert breakdown.category_scores() == {"lifestyle": 0, "social": 0, "practical": 0, "interests": 0}
    assert breakdown.lifestyle.details == []
    assert breakdown.interests.shared_interests == []


def test_one_sided_answers_score_zero():
    breakdown = calculate_compatibility(full_answers(), ["Yoga"], [], [])
    assert breakdown.overall == 0


def test_unscored_question_ids_are_ignored(user, match):
    baseline = calculate_compatibility(user.answers, user.interests, match.answers, match.interests)
    extra = [make_answer(2, "Daily"), make_answer(12, "Someone tidy"), make_answer(99, "x")]
    with_extra = calculate_compatibility(
        user.answers + extra, user.interests, match.answers + extra, match.interests
    )
    assert with_extra.to_dict() == baseline.to_dict()


def test_custom_weights():
    weights = MatchingWeights(lifestyle=1.0, social=0.0, practical=0.0, interests=0.0)
    breakdown = calculate_compatibility(full_answers(), [], full_answers(), [], weights)
    assert breakdown.overall == breakdown.lifestyle.score == 25


def test_non_normalized_weights_are_not_clamped():
    weights = MatchingWeights(lifestyle=1.0, social=1.0, practical=1.0, interests=1.0)
    breakdown = calculate_compatibility(full_answers(), ["Yoga"], full_answers(), ["Yoga"], weights)
    assert breakdown.overall == 25 + 33 + 33 + 100


def test_determinism(user, match):
    first = calculate_compatibility(user.answers, user.interests, match.answers, match.interests)
    second = calculate_compatibility(user.answers, user.interests, match.answers, match.interests)
    assert first.to_dict() == second.to_dict()


def test_numeric_scores_are_swap_invariant(user, match):
    forward = calculate_compatibility(user.answers, user.interests, match.answers, match.interests)
    backward = calculate_compatibility(match.answers, match.interests, user.answers, user.interests)
    assert forward.overall == backward.overall
    assert forward.category_scores() == backward.category_scores()
    assert set(forward.interests.shared_interests) == set(backward.interests.shared_interests)


OPTIONS = ["first", "second", "third", None]
GOALS = ["long", "friends", "network", "cheap"]


def _random_answers(rng):
    answers = []
    for qid in (1, 3, 4, 5, 6, 7, 8, 10):
        value = rng.choice(OPTIONS)
        if value is not None:
            answers.append(make_answer(qid, value))
    if rng.random() < 0.8:
        answers.append(make_answer(9, rng.randint(1, 5)))
    if rng.random() < 0.8:
        answers.append(make_answer(11, rng.sample(GOALS, rng.randint(0, 4))))
    return answers


def _random_interests(rng):
    return rng.sample(["Cooking", "Yoga", "Movies", "Hiking", "Art", "Music"], rng.randint(0, 6))


def test_scores_stay_in_range_and_interests_are_subsets():
    rng = random.Random(7)
    for _ in range(200):
        user_answers, match_answers = _random_answers(rng), _random_answers(rng)
        user_interests, match_interests = _random_interests(rng), _random_interests(rng)

        breakdown = calculate_compatibility(user_answers, user_interests, match_answers, match_interests)
        swapped = calculate_compatibility(match_answers, match_interests, user_answers, user_interests)

        assert 0 <= breakdown.overall <= 100
        for score in breakdown.category_scores().values():
            assert isinstance(score, int)
            assert 0 <= score <= 100
        assert set(breakdown.interests.shared_interests) <= set(user_interests)
        assert set(breakdown.interests.shared_interests) <= set(match_interests)
        assert breakdown.category_scores() == swapped.category_scores()
        assert breakdown.overall == swapped.overall


def test_engine_uses_default_weights(user, match):
    engine = CompatibilityEngine()
    assert engine.weights == DEFAULT_WEIGHTS
    assert engine.calculate_for(user, match).overall == 26


def test_engine_reports_to_analytics(user, match):
    sink = InMemoryAnalyticsSink()
    engine = CompatibilityEngine(analytics=sink)
    engine.calculate_for(user, match)

    events = sink.events_of("compatibility_calculated")
    assert len(events) == 1
    assert events[0].properties == {
        "overall": 26, "lifestyle": 25, "social": 18, "practical": 25, "interests": 40
    }


def test_engine_warns_on_non_normalized_weights(caplog):
    with caplog.at_level(logging.WARNING, logger="housematch.scoring.engine"):
        CompatibilityEngine(weights=MatchingWeights(lifestyle=0.9))
    assert "not 1.0" in caplog.text


def test_engine_from_config():
    engine = CompatibilityEngine.from_config({"weights": {"lifestyle": 0.4, "interests": 0.1}})
    assert engine.weights == MatchingWeights(lifestyle=0.4, social=0.25, practical=0.25, interests=0.1)


def test_breakdown_detail_lines(user, match):
    breakdown = CompatibilityEngine().calculate_for(user, match)
    lines = breakdown.detail_lines()
    assert lines[0] == "Both prefer clean, organized living spaces"
    assert lines[-1] == "Prefer equal expense splitting"


def test_malformed_answers_score_zero_without_raising():
    user_answers = [make_answer(9, float("nan")), make_answer(11, [{"goal": "long"}])]
    match_answers = [make_answer(9, 3), make_answer(11, [{"goal": "long"}])]
    breakdown = calculate_compatibility(user_answers, [], match_answers, [])
    assert breakdown.practical.score == 0
    assert breakdown.overall == 0


@pytest.mark.parametrize("question_id,value", [
    (1, [CLEAN]),
    (1, True),
    (8, {"style": COMMUNICATION}),
    (9, "5"),
    (11, LONG_TERM),
])
def test_answer_of_wrong_kind_scores_zero(question_id, value):
    answers = [make_answer(question_id, value)]
    breakdown = calculate_compatibility(answers, [], list(answers), [])
    assert breakdown.category_scores() == {"lifestyle": 0, "social": 0, "practical": 0, "interests": 0}


def test_kind_must_match_on_both_sides():
    practical = calculate_practical_compatibility(
        [make_answer(11, [LONG_TERM])], [make_answer(11, LONG_TERM)]
    )
    assert practical.score == 0


def test_float_scale_answers_are_scored():
    practical = calculate_practical_compatibility([make_answer(9, 4.5)], [make_answer(9, 3.5)])
    # (75 * 40) / 300
    assert practical.score == 10


def test_non_string_interest_labels_are_ignored():
    interests = calculate_interest_compatibility(["Cooking", {"name": "Yoga"}], ["Cooking", None])
    assert interests.score == 100
    assert interests.shared_interests == ["Cooking"]
