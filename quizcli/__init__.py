"""A multiple-choice quiz game for ANSI terminals, with its screen, keyboard and timer helpers."""

__version__ = "0.1.0"
__all__ = ["screen", "keyboard", "timer", "quiz", "game"]