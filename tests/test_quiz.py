import random

import pytest

from quizcli.quiz import (
    Difficulty,
    Question,
    QuizSession,
    base_value,
    questions_for,
    shuffled_order,
)


@pytest.mark.parametrize(
    "difficulty, expected",
    [
        (Difficulty.EASY, 2),
        (Difficulty.MEDIUM, 4),
        (Difficulty.HARD, 6),
        (Difficulty.MIXED, 3),
    ],
)
def test_base_value(difficulty, expected):
    assert base_value(difficulty) == expected


def test_mixed_is_all_levels_concatenated():
    mixed = questions_for(Difficulty.MIXED)
    assert mixed == (
        questions_for(Difficulty.EASY)
        + questions_for(Difficulty.MEDIUM)
        + questions_for(Difficulty.HARD)
    )
    assert len(mixed) == 18


def test_first_easy_question():
    first = questions_for(Difficulty.EASY)[0]
    assert first.prompt == "Qual a capital do Brasil?"
    assert first.options[1] == "B) Brasília"
    assert first.correct == "b"


def test_difficulty_from_menu_key():
    assert Difficulty("3") is Difficulty.HARD


def test_all_answers_are_valid_choices():
    for question in questions_for(Difficulty.MIXED):
        assert question.correct in ("a", "b", "c")
        assert len(question.options) == 3


def test_shuffled_order_is_permutation():
    order = shuffled_order(10, random.Random(1))
    assert sorted(order) == list(range(10))


def test_shuffled_order_is_deterministic_for_seed():
    first = shuffled_order(18, random.Random(42))
    second = shuffled_order(18, random.Random(42))
    assert sorted(first) == list(range(18))
    assert first == second


def test_shuffled_order_empty_and_negative():
    assert shuffled_order(0, random.Random(0)) == []
    with pytest.raises(ValueError):
        shuffled_order(-1, random.Random(0))


def test_session_iterates_every_question_once():
    session = QuizSession(Difficulty.MEDIUM, random.Random(3))
    asked = list(session)
    assert len(asked) == len(questions_for(Difficulty.MEDIUM))
    assert set(asked) == set(questions_for(Difficulty.MEDIUM))


def test_streak_bonus_grows_and_resets():
    session = QuizSession(Difficulty.HARD, random.Random(0))
    question = questions_for(Difficulty.HARD)[0]

    first = session.answer(question, question.correct)
    assert first.correct
    assert first.points == session.base_value
    assert session.bonus == 1

    second = session.answer(question, question.correct)
    assert second.points == session.base_value + 1
    assert session.score == first.points + second.points

    wrong = session.answer(question, "a")
    assert not wrong.correct
    assert wrong.points == 0
    assert wrong.correct_answer == "b"
    assert session.bonus == 0
    assert session.score == first.points + second.points


def test_invalid_choice_raises():
    session = QuizSession(Difficulty.EASY, random.Random(0))
    question = Question("?", ("A) x", "B) y", "C) z"), "a")
    with pytest.raises(ValueError):
        session.answer(question, "d")
    assert session.score == 0