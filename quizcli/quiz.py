"""Quiz questions, difficulty levels and scoring."""

from __future__ import annotations

import random
from dataclasses import dataclass, field
from enum import Enum
from typing import Iterator

CHOICES = ("a", "b", "c")


@dataclass(frozen=True)
class Question:
    """A multiple-choice question with three options and one right answer."""

    prompt: str
    options: tuple[str, str, str]
    correct: str


class Difficulty(Enum):
    """Difficulty levels, keyed by the menu key that selects them."""

    EASY = "1"
    MEDIUM = "2"
    HARD = "3"
    MIXED = "4"


_EASY = (
    Question("Qual a capital do Brasil?", ("A) São Paulo", "B) Brasília", "C) Rio de Janeiro"), "b"),
    Question("2 + 2 é igual a:", ("A) 3", "B) 4", "C) 5"), "b"),
    Question("Cor do céu num dia limpo?", ("A) Azul", "B) Verde", "C) Vermelho"), "a"),
    Question("Qual é o contrário de alto?", ("A) Grande", "B) Curto", "C) Baixo"), "c"),
    Question("Quantas pernas tem um cachorro?", ("A) 2", "B) 4", "C) 6"), "b"),
    Question("A cor do semáforo que significa 'pare' é:", ("A) Verde", "B) Vermelho", "C) Amarelo"), "b"),
)

_MEDIUM = (
    Question("Maior planeta do sistema solar?", ("A) Marte", "B) Júpiter", "C) Terra"), "b"),
    Question("Qual linguagem estamos usando aqui?", ("A) Python", "B) Java", "C) C"), "c"),
    Question("Quantos continentes existem?", ("A) 5", "B) 6", "C) 7"), "c"),
    Question("Qual é o nome do satélite natural da Terra?", ("A) Lua", "B) Estrela", "C) Sol"), "a"),
    Question("Quantos segundos tem um minuto?", ("A) 60", "B) 100", "C) 90"), "a"),
    Question("Qual animal é conhecido por sua memória?", ("A) Elefante", "B) Gato", "C) Tartaruga"), "a"),
)

_HARD = (
    Question("Quem descobriu a gravidade?", ("A) Einstein", "B) Newton", "C) Galileu"), "b"),
    Question("Velocidade da luz em km/s?", ("A) 300.000", "B) 150.000", "C) 1.000.000"), "a"),
    Question("Qual a fórmula da água?", ("A) CO2", "B) H2O", "C) O2"), "b"),
    Question("Qual o ano da Independência do Brasil?", ("A) 1822", "B) 1889", "C) 1500"), "a"),
    Question("Quantos elementos tem a tabela periódica atualmente?", ("A) 118", "B) 112", "C) 108"), "a"),
    Question("Quem pintou a Mona Lisa?", ("A) Picasso", "B) Da Vinci", "C) Van Gogh"), "b"),
)

_QUESTIONS = {
    Difficulty.EASY: _EASY,
    Difficulty.MEDIUM: _MEDIUM,
    Difficulty.HARD: _HARD,
    Difficulty.MIXED: _EASY + _MEDIUM + _HARD,
}

_BASE_VALUES = {
    Difficulty.EASY: 2,
    Difficulty.MEDIUM: 4,
    Difficulty.HARD: 6,
    Difficulty.MIXED: 3,
}


def questions_for(difficulty: Difficulty) -> tuple[Question, ...]:
    """Return the questions asked at ``difficulty``, in their fixed order."""
    return _QUESTIONS[Difficulty(difficulty)]


def base_value(difficulty: Difficulty) -> int:
    """Return the points a correct answer is worth before any streak bonus."""
    return _BASE_VALUES[Difficulty(difficulty)]


def shuffled_order(count: int, rng: random.Random | None = None) -> list[int]:
    """Return a random permutation of ``range(count)``."""
    if count < 0:
        raise ValueError("count must not be negative")
    rng = rng if rng is not None else random.Random()
    order = list(range(count))
    rng.shuffle(order)
    return order


@dataclass(frozen=True)
class AnswerResult:
    """Outcome of answering one question."""

    correct: bool
    points: int
    correct_answer: str


@dataclass
class QuizSession:
    """One round of questions at a difficulty, with score and streak bonus."""

    difficulty: Difficulty
    rng: random.Random | None = None
    questions: tuple[Question, ...] = field(init=False)
    base_value: int = field(init=False)
    order: list[int] = field(init=False)
    score: int = field(init=False, default=0)
    bonus: int = field(init=False, default=0)

    def __post_init__(self) -> None:
        self.difficulty = Difficulty(self.difficulty)
        self.questions = questions_for(self.difficulty)
        self.base_value = base_value(self.difficulty)
        self.order = shuffled_order(len(self.questions), self.rng)

    def __iter__(self) -> Iterator[Question]:
        return (self.questions[index] for index in self.order)

    def answer(self, question: Question, choice: str) -> AnswerResult:
        """Score ``choice`` for ``question``.

        A right answer earns the base value plus the current streak bonus and
        raises the bonus by one; a wrong one resets the bonus.
        """
        if choice not in CHOICES:
            raise ValueError(f"invalid choice: {choice!r}")
        if choice == question.correct:
            points = self.base_value + self.bonus
            self.score += points
            self.bonus += 1
            return AnswerResult(True, points, question.correct)
        self.bonus = 0
        return AnswerResult(False, 0, question.correct)