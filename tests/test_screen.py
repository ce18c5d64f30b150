import io
import re

import pytest

from quizcli.screen import (
    BOX_DISABLE,
    BOX_ENABLE,
    CLEAR_SCREEN,
    HIDE_CURSOR,
    HOME_CURSOR,
    MAXX,
    MAXY,
    NORMAL_TEXT,
    RESET_COLORS,
    SHOW_CURSOR,
    Color,
    Screen,
    color_sequence,
    goto_sequence,
)


def _coords(seq):
    match = re.fullmatch(r"\033\[f\033\[(\d+)B\033\[(\d+)C", seq)
    assert match is not None
    return int(match.group(2)), int(match.group(1))


class _FlushStream(io.StringIO):
    def __init__(self):
        super().__init__()
        self.flushes = 0

    def flush(self):
        self.flushes += 1
        super().flush()


@pytest.fixture
def screen_and_buffer():
    buffer = io.StringIO()
    return Screen(buffer), buffer


def test_home_cursor_writes_sequence(screen_and_buffer):
    screen, buffer = screen_and_buffer
    screen.home_cursor()
    assert buffer.getvalue() == "\033[f"


def test_goto_in_range_round_trips():
    for x, y in [(0, 0), (5, 5), (10, 16), (MAXX - 1, MAXY)]:
        assert _coords(goto_sequence(x, y)) == (x, y)


def test_goto_clamps_negative():
    assert goto_sequence(-5, -3) == goto_sequence(0, 0)


def test_goto_clamps_large():
    assert _coords(goto_sequence(500, 500)) == (MAXX - 1, MAXY)


def test_color_normal_foreground():
    assert color_sequence(Color.RED, Color.BLACK) == "\033[0;31;40m"


def test_color_bright_foreground():
    assert color_sequence(Color.YELLOW, Color.DARKGRAY) == "\033[1;33;48m"


@pytest.mark.parametrize("base", list(Color)[:8])
def test_bright_is_bold_base(base):
    bright = Color(base + 8)
    for bg in Color:
        assert color_sequence(bright, bg) == color_sequence(base, bg).replace("[0;", "[1;", 1)


def test_clear_writes_home_then_clear(screen_and_buffer):
    screen, buffer = screen_and_buffer
    screen.clear()
    assert buffer.getvalue() == HOME_CURSOR + CLEAR_SCREEN


def test_init_hides_cursor(screen_and_buffer):
    screen, buffer = screen_and_buffer
    screen.init(True)
    assert buffer.getvalue() == HOME_CURSOR + CLEAR_SCREEN + HOME_CURSOR + HIDE_CURSOR


def test_destroy_restores_terminal(screen_and_buffer):
    screen, buffer = screen_and_buffer
    screen.destroy()
    out = buffer.getvalue()
    assert out.startswith(RESET_COLORS + NORMAL_TEXT)
    assert out.endswith(SHOW_CURSOR)


def test_gotoxy_and_set_color_write(screen_and_buffer):
    screen, buffer = screen_and_buffer
    screen.gotoxy(7, 9)
    screen.set_color(Color.CYAN, Color.DARKGRAY)
    assert buffer.getvalue() == goto_sequence(7, 9) + color_sequence(Color.CYAN, Color.DARKGRAY)


def test_box_mode_toggles(screen_and_buffer):
    screen, buffer = screen_and_buffer
    screen.box_enable()
    screen.box_disable()
    assert buffer.getvalue() == BOX_ENABLE + BOX_DISABLE


def test_text_modes_are_distinct(screen_and_buffer):
    screen, buffer = screen_and_buffer
    outputs = []
    for method in (screen.set_normal, screen.set_bold, screen.set_blink, screen.set_reverse):
        buffer.seek(0)
        buffer.truncate()
        method()
        outputs.append(buffer.getvalue())
    assert len(set(outputs)) == 4
    assert outputs[0] == NORMAL_TEXT


def test_write_and_update_flushes():
    stream = _FlushStream()
    screen = Screen(stream)
    screen.write("hello")
    screen.update()
    assert stream.getvalue() == "hello"
    assert stream.flushes == 1