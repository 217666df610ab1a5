"""State of a single digital button across frames."""


class Button:
    """Tracks whether a button is down and whether it changed this frame."""

    def __init__(self):
        self._pressed = False
        self._just_changed = False

    def update(self, pressed):
        """Record the button state for the current frame."""
        self._just_changed = self._pressed != pressed
        self._pressed = bool(pressed)

    def is_pressed(self):
        return self._pressed

    def is_released(self):
        return not self._pressed

    def was_pressed_now(self):
        """True only on the frame the button went down."""
        return self._pressed and self._just_changed

    def was_released_now(self):
        """True only on the frame the button came up."""
        return not self._pressed and self._just_changed