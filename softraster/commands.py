"""Commands queued by the game and carried out by the engine."""

from dataclasses import dataclass


@dataclass(frozen=True)
class AudioID:
    """Handle to a sound held by an audio player."""

    value: int = 0


@dataclass(frozen=True)
class Quit:
    """Ask the application to quit."""


@dataclass(frozen=True)
class ToggleFullscreen:
    """Switch the window between windowed and fullscreen."""


@dataclass(frozen=True)
class SetWindowTitle:
    """Change the window title."""

    window_title: str


@dataclass(frozen=True)
class PlaySound:
    """Play a loaded sound."""

    sound_id: AudioID


def run_commands(commands, window, audio):
    """Carry out ``commands`` in order; return True if one of them asked to quit."""
    should_quit = False
    for command in commands:
        match command:
            case Quit():
                should_quit = True
            case ToggleFullscreen():
                window.toggle_fullscreen()
            case SetWindowTitle(window_title=title):
                window.set_title(title)
            case PlaySound(sound_id=sound_id):
                audio.play(sound_id)
            case _:
                raise TypeError(f"unknown command: {command!r}")
    return should_quit