import pytest

from softraster.commands import (
    AudioID,
    PlaySound,
    Quit,
    SetWindowTitle,
    ToggleFullscreen,
    run_commands,
)


class FakeWindow:
    def __init__(self):
        self.calls = []

    def toggle_fullscreen(self):
        self.calls.append(("toggle_fullscreen",))

    def set_title(self, title):
        self.calls.append(("set_title", title))


class FakeAudio:
    def __init__(self):
        self.played = []

    def play(self, sound_id):
        self.played.append(sound_id)


def test_no_commands_does_not_quit():
    window, audio = FakeWindow(), FakeAudio()
    assert run_commands([], window, audio) is False
    assert window.calls == []
    assert audio.played == []


def test_quit_command_requests_quit():
    assert run_commands([Quit()], FakeWindow(), FakeAudio()) is True


def test_window_commands_run_in_order():
    window = FakeWindow()
    commands = [SetWindowTitle("Game"), ToggleFullscreen(), SetWindowTitle("Other")]
    assert run_commands(commands, window, FakeAudio()) is False
    assert window.calls == [
        ("set_title", "Game"),
        ("toggle_fullscreen",),
        ("set_title", "Other"),
    ]


def test_play_sound_uses_audio_player():
    audio = FakeAudio()
    run_commands([PlaySound(AudioID(7)), PlaySound(AudioID(1))], FakeWindow(), audio)
    assert audio.played == [AudioID(7), AudioID(1)]


def test_quit_does_not_stop_remaining_commands():
    window = FakeWindow()
    assert run_commands([Quit(), ToggleFullscreen()], window, FakeAudio()) is True
    assert window.calls == [("toggle_fullscreen",)]


def test_unknown_command_raises():
    with pytest.raises(TypeError):
        run_commands(["not a command"], FakeWindow(), FakeAudio())