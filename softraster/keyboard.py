"""Keyboard state built from key events, advanced once per frame."""

from softraster.button import Button


class Keyboard:
    """Collects key events and turns them into per-key button state."""

    def __init__(self):
        self._key_events = {}
        self._active_keys = set()
        self._key_states = {}

    def on_key_event(self, key_id, pressed):
        """Record a key event; only the first event per key counts each frame."""
        self._key_events.setdefault(key_id, pressed)
        self._active_keys.add(key_id)

    def update(self):
        """Apply the frame's events to every key seen so far."""
        for key_id in self._active_keys:
            state = self._key_states.setdefault(key_id, Button())
            pressed = self._key_events.get(key_id, state.is_pressed())
            state.update(pressed)
        self._key_events.clear()

    def key_is_pressed(self, key_id):
        state = self._key_states.get(key_id)
        return state.is_pressed() if state else False

    def key_is_released(self, key_id):
        state = self._key_states.get(key_id)
        return state.is_released() if state else True

    def key_was_pressed_now(self, key_id):
        state = self._key_states.get(key_id)
        return state.was_pressed_now() if state else False

    def key_was_released_now(self, key_id):
        state = self._key_states.get(key_id)
        return state.was_released_now() if state else False