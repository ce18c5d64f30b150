# quizcli

`quizcli` is a small multiple-choice quiz game for ANSI terminals. The questions
are in Brazilian Portuguese, and each one has three options: a, b and c.

## Installing

```
pip install .
```

Keyboard input uses `termios`, so the game runs only on POSIX systems.

## Playing

```
quizcli
```

A menu asks you to pick a difficulty:

| Key | Level | Base points per correct answer |
|-----|-------|-------------------------------|
| `1` | Fácil (easy) | 2 |
| `2` | Médio (medium) | 4 |
| `3` | Difícil (hard) | 6 |
| `4` | Misto (mixed, all 18 questions) | 3 |
| `q` / `Q` | quit | – |

The game ignores any other key on the menu.

The questions of the chosen level come in random order, and each is asked once.
Answer with `a`, `b` or `c`:

- A correct answer earns the base value plus the current streak bonus. The bonus
  then goes up by one.
- A wrong answer earns nothing and resets the bonus to zero.
- Any other key skips the question. The score and the bonus stay as they are.

After each answer the result shows for about a second. When the round is over,
the final score shows for about three seconds, and then the menu comes back.

While it runs, the game turns off line buffering, echo and signal keys in the
terminal, and it hides the cursor. It puts the terminal back as it was when it
exits. `quizcli --help` describes the command. It takes no other options.

## Using the pieces

- `quizcli.screen`
  - `Screen(stream=None)` writes ANSI control sequences to a stream, by default
    `sys.stdout`. It has methods for the cursor (`home_cursor`, `show_cursor`,
    `hide_cursor`, `gotoxy`), for the screen (`clear`, `update`, `init`,
    `destroy`), for text modes (`set_normal`, `set_bold`, `set_blink`,
    `set_reverse`), for colour (`set_color`) and for the line-drawing character set
    (`box_enable`, `box_disable`).
  - `goto_sequence(x, y)` returns the raw escape string for a cursor move,
    clamped to an 80×24 screen.
  - `color_sequence(fg, bg)` returns the raw escape string for a colour pair.
    Colours are members of `Color`.
- `quizcli.keyboard.Keyboard(fd=None)` reads single keys from a terminal. It is
  a context manager, or you can call `init()` and `destroy()` yourself.
  `keyhit()` checks for a waiting key without blocking. `readch()` returns the
  next key, and raises `EOFError` when input has ended.
- `quizcli.timer.Timer(delay_ms, clock=None)` is a millisecond interval timer.
  `time_over()` returns `True` and restarts once more than the delay has passed.
  `wait_ticks(n)` blocks until the timer has fired `n` times. `elapsed_ms()` and
  `describe()` report the time since the last restart.
- `quizcli.quiz`
  - `QuizSession(difficulty, rng=None)` takes a `Difficulty`. Iterating over it
    yields the questions in shuffled order.
  - `answer(question, choice)` applies the scoring rules and returns an
    `AnswerResult`. It raises `ValueError` for a choice other than a, b or c.
  - `questions_for`, `base_value` and `shuffled_order` return the question
    sets, the point values and the random question order.
- `quizcli.game.Game(screen, keyboard, timer, rng=None)` drives the menu and the
  rounds. `quizcli.game.main()` is the entry point of the `quizcli` command.

## What it does not do

The question sets are built in. There is no way to load your own questions.
Scores are not saved between rounds or runs. `Screen.init` accepts a
`draw_borders` flag, but it draws no border.

## Running the tests

```
pip install .[test]
pytest
```