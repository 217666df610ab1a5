from datetime import datetime

import pytest

from softraster.logs import (
    COLOR_RESET,
    LogLevel,
    debug_log,
    filename_from_path,
    format_log_line,
)

NOW = datetime(2024, 3, 5, 7, 9)


def test_filename_from_windows_path():
    assert filename_from_path("C:\\src\\engine\\engine.cpp") == "engine.cpp"


def test_filename_without_separator_is_unchanged():
    assert filename_from_path("engine.cpp") == "engine.cpp"


def test_uncolored_line_layout():
    line = format_log_line(LogLevel.INFO, "game.cpp", 12, "hello", NOW, False)
    assert line == "2024-03-05 07:09 game.cpp:12 [INFO] hello\n"


@pytest.mark.parametrize(
    "level, label",
    [
        (LogLevel.DEBUG, "[DEBUG]"),
        (LogLevel.INFO, "[INFO]"),
        (LogLevel.WARNING, "[WARNING]"),
        (LogLevel.ERROR, "[ERROR]"),
        (LogLevel.FATAL, "[FATAL]"),
    ],
)
def test_level_labels(level, label):
    line = format_log_line(level, "f.cpp", 1, "msg", NOW, False)
    assert f" {label} msg\n" in line


def test_colored_line_wraps_in_color_codes():
    line = format_log_line(LogLevel.WARNING, "f.cpp", 1, "careful", NOW, True)
    assert line.startswith("\033[33m")
    assert line.endswith("careful\n" + COLOR_RESET)


def test_fatal_uses_red_background():
    line = format_log_line(LogLevel.FATAL, "f.cpp", 1, "dead", NOW, True)
    assert line.startswith("\033[41m\033[30m")


def test_info_has_no_color_prefix_but_keeps_reset():
    plain = format_log_line(LogLevel.INFO, "f.cpp", 1, "x", NOW, False)
    colored = format_log_line(LogLevel.INFO, "f.cpp", 1, "x", NOW, True)
    assert colored == plain + COLOR_RESET


def test_long_message_is_truncated():
    line = format_log_line(LogLevel.INFO, "f.cpp", 1, "a" * 5000, NOW, False)
    assert len(line) == 1023
    assert line.startswith("2024-03-05 07:09 f.cpp:1 [INFO] aaa")


def test_integer_level_is_accepted():
    assert format_log_line(3, "f.cpp", 1, "m", NOW, False) == format_log_line(
        LogLevel.ERROR, "f.cpp", 1, "m", NOW, False
    )


def test_debug_log_writes_to_stdout(capsys):
    debug_log(LogLevel.ERROR, "f.cpp", 3, "boom")
    out = capsys.readouterr().out
    assert "f.cpp:3 [ERROR] boom\n" in out
    assert out.count("\n") == 1