import pytest

from forgecore import platform


def test_console_write_wraps_message_in_colour(capsys):
    platform.console_write("hello", 3)
    captured = capsys.readouterr()
    assert captured.out == "\x1b[1;32mhello\x1b[0m"
    assert captured.err == ""


def test_console_write_error_goes_to_stderr(capsys):
    platform.console_write_error("bad", 0)
    captured = capsys.readouterr()
    assert captured.err == "\x1b[0;41mbad\x1b[0m"
    assert captured.out == ""


@pytest.mark.parametrize(
    "colour, code",
    [(0, "0;41"), (1, "1;31"), (2, "1;33"), (3, "1;32"), (4, "1;34"), (5, "1;30")],
)
def test_colour_codes_per_level(capsys, colour, code):
    platform.console_write("x", colour)
    assert capsys.readouterr().out == f"\x1b[{code}mx\x1b[0m"


def test_absolute_time_is_monotonic():
    first = platform.get_absolute_time()
    second = platform.get_absolute_time()
    assert second >= first


def test_sleep_blocks_for_roughly_the_time_given():
    start = platform.get_absolute_time()
    platform.sleep(20)
    assert platform.get_absolute_time() - start >= 0.015


def test_sleep_rejects_negative_time():
    with pytest.raises(ValueError):
        platform.sleep(-1)