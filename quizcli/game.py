"""The interactive quiz: menu, questions, results and the program entry point."""

from __future__ import annotations

import argparse
import random

from quizcli.keyboard import Keyboard
from quizcli.quiz import CHOICES, AnswerResult, Difficulty, Question, QuizSession
from quizcli.screen import Color, Screen
from quizcli.timer import Timer

RESULT_TICKS = 10
END_TICKS = 30
QUIT_KEYS = ("q", "Q")


class Game:
    """Drives the quiz on a screen, reading keys from a keyboard."""

    def __init__(
        self,
        screen: Screen,
        keyboard: Keyboard,
        timer: Timer,
        rng: random.Random | None = None,
    ) -> None:
        self.screen = screen
        self.keyboard = keyboard
        self.timer = timer
        self.rng = rng if rng is not None else random.Random()

    def _print_at(self, x: int, y: int, text: str) -> None:
        self.screen.gotoxy(x, y)
        self.screen.write(text)

    def show_menu(self) -> None:
        self.screen.clear()
        self.screen.set_color(Color.YELLOW, Color.DARKGRAY)
        self._print_at(10, 5, "=== QUIZ CLI ===")
        self._print_at(10, 7, "Escolha a dificuldade:")
        self._print_at(12, 9, "1 - Fácil")
        self._print_at(12, 10, "2 - Médio")
        self._print_at(12, 11, "3 - Difícil")
        self._print_at(12, 12, "4 - Misto")
        self._print_at(12, 14, "Q - Sair")
        self._print_at(10, 16, "Pressione uma tecla...")
        self.screen.update()

    def choose_difficulty(self) -> Difficulty | None:
        """Wait for a menu key; return the chosen level, or None to quit."""
        while True:
            key = self.keyboard.readch()
            if key in QUIT_KEYS:
                return None
            try:
                return Difficulty(key)
            except ValueError:
                continue

    def show_question(self, session: QuizSession, question: Question) -> None:
        self.screen.clear()
        self.screen.set_color(Color.CYAN, Color.DARKGRAY)
        self._print_at(0, 0, f"Pontuação: {session.score} | Bônus: +{session.bonus}")
        self._print_at(5, 5, question.prompt)
        for row, option in enumerate(question.options, start=7):
            self._print_at(7, row, option)
        self._print_at(5, 11, "Escolha a resposta: (a / b / c)")

    def show_result(self, result: AnswerResult) -> None:
        self.screen.gotoxy(5, 13)
        if result.correct:
            self.screen.write(f"✔ Correto! +{result.points} pontos")
        else:
            self.screen.write(f"✘ Errado! Resposta correta era: {result.correct_answer}")
        self.screen.update()
        self.timer.wait_ticks(RESULT_TICKS)

    def play_round(self, difficulty: Difficulty) -> int:
        """Ask every question at ``difficulty`` once; return the final score."""
        session = QuizSession(difficulty, self.rng)
        for question in session:
            self.show_question(session, question)
            self.screen.update()
            choice = self.keyboard.readch()
            if choice in CHOICES:
                self.show_result(session.answer(question, choice))

        self.screen.clear()
        self._print_at(10, 10, f"Quiz encerrado! Pontuação final: {session.score}")
        self.screen.update()
        self.timer.wait_ticks(END_TICKS)
        return session.score

    def run(self) -> None:
        """Show the menu and play rounds until the player quits."""
        while True:
            self.show_menu()
            difficulty = self.choose_difficulty()
            if difficulty is None:
                break
            self.play_round(difficulty)

        self.screen.clear()
        self._print_at(10, 10, "Obrigado por jogar! :)")
        self.screen.update()
        self.timer.wait_ticks(END_TICKS)


def main(argv: list[str] | None = None) -> int:
    """Run the quiz in the current terminal."""
    parser = argparse.ArgumentParser(prog="quizcli", description="Terminal multiple-choice quiz.")
    parser.parse_args(argv)

    screen = Screen()
    keyboard = Keyboard()
    timer = Timer(100)
    screen.init(True)
    keyboard.init()
    try:
        Game(screen, keyboard, timer, random.Random()).run()
    finally:
        keyboard.destroy()
        screen.destroy()
        timer.destroy()
    return 0