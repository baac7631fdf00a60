"""Keyboard state tracking from window events."""

import pygame

from .defs import MAX_KEYBOARD_KEYS


class QuitRequested(Exception):
    """Raised when the window asks the game to quit."""


class Keyboard:
    """Which keys are currently held down, by scancode."""

    def __init__(self):
        self._down = set()

    def press(self, key):
        """Mark ``key`` as held; scancodes out of range are ignored."""
        code = int(key)
        if 0 <= code < MAX_KEYBOARD_KEYS:
            self._down.add(code)

    def release(self, key):
        """Mark ``key`` as released."""
        self._down.discard(int(key))

    def is_down(self, key):
        return int(key) in self._down

    def any_down(self, *args):
        """True if any of the given keys is held."""
        return any(self.is_down(key) for key in args)

    def consume(self, *args):
        """Release the given keys; return whether any of them was held."""
        was_down = self.any_down(*args)
        for key in args:
            self.release(key)
        return was_down

    def handle_event(self, event):
        """Update state from one event; raise QuitRequested on quit."""
        if event.type == pygame.QUIT:
            raise QuitRequested()
        if event.type not in (pygame.KEYDOWN, pygame.KEYUP):
            return
        if getattr(event, "repeat", 0):
            return
        scancode = getattr(event, "scancode", None)
        if scancode is None:
            return
        if event.type == pygame.KEYDOWN:
            self.press(scancode)
        else:
            self.release(scancode)

    def poll(self, events=None):
        """Handle each event, taking pending window events if none are given."""
        if events is None:
            events = pygame.event.get()
        for event in events:
            self.handle_event(event)