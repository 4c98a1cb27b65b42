import pytest

from housematch.scoring import QuestionnaireAnswer, Respondent

CLEAN = "I clean as I go and keep everything spotless"
WEEKLY_CLEAN = "I do a thorough clean weekly and maintain tidiness"
SLEEP = "10 PM - 7 AM"
NOISE = "I prefer low noise but some is okay"
GUESTS = "Occasional guests with advance notice"
INTERACTION = "Regular check-ins and occasional hangouts"
MEALS = "Enjoy occasional shared meals"
COMMUNICATION = "Think it through, then have a calm discussion"
EXPENSES = "Split everything equally down the middle"
LONG_TERM = "A long-term living arrangement (1+ years)"
FRIENDSHIPS = "Building genuine friendships"


def make_answer(question_id, answer, category="General"):
    return QuestionnaireAnswer(question_id=question_id, answer=answer, category=category)


def full_answers(**overrides):
    """One answer for every scored question; override by 'q<id>'."""
    base = {
        1: CLEAN,
        3: INTERACTION,
        4: MEALS,
        5: SLEEP,
        6: NOISE,
        7: GUESTS,
        8: COMMUNICATION,
        9: 5,
        10: EXPENSES,
        11: [LONG_TERM, FRIENDSHIPS],
    }
    for key, value in overrides.items():
        base[int(key.lstrip("q"))] = value
    return [make_answer(qid, value) for qid, value in base.items() if value is not None]


@pytest.fixture
def user():
    return Respondent(
        answers=full_answers(),
        interests=["Cooking", "Yoga", "Movies", "Hiking"],
        respondent_id="emma"
    )


@pytest.fixture
def match():
    return Respondent(
        answers=full_answers(q3="Friendly but mostly independent living", q4=None, q9=4, q11=[LONG_TERM]),
        interests=["Cooking", "Movies", "Photography"],
        respondent_id="liam"
    )
