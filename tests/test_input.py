import pygame
import pytest

from kara.defs import MAX_KEYBOARD_KEYS, Key
from kara.input import Keyboard, QuitRequested


def test_press_and_release():
    keyboard = Keyboard()
    keyboard.press(Key.A)
    assert keyboard.is_down(Key.A)
    keyboard.release(Key.A)
    assert not keyboard.is_down(Key.A)


def test_out_of_range_ignored():
    keyboard = Keyboard()
    keyboard.press(MAX_KEYBOARD_KEYS)
    assert not keyboard.is_down(MAX_KEYBOARD_KEYS)


def test_any_down():
    keyboard = Keyboard()
    keyboard.press(Key.UP)
    assert keyboard.any_down(Key.W, Key.UP)
    assert not keyboard.any_down(Key.S, Key.DOWN)


def test_consume_clears_keys():
    keyboard = Keyboard()
    keyboard.press(Key.W)
    assert keyboard.consume(Key.W, Key.UP) is True
    assert not keyboard.is_down(Key.W)
    assert keyboard.consume(Key.W, Key.UP) is False


def test_key_events():
    keyboard = Keyboard()
    keyboard.poll([pygame.event.Event(pygame.KEYDOWN, scancode=int(Key.SPACE))])
    assert keyboard.is_down(Key.SPACE)
    keyboard.poll([pygame.event.Event(pygame.KEYUP, scancode=int(Key.SPACE))])
    assert not keyboard.is_down(Key.SPACE)


def test_repeat_events_ignored():
    keyboard = Keyboard()
    keyboard.handle_event(pygame.event.Event(pygame.KEYDOWN, scancode=int(Key.TAB), repeat=1))
    assert not keyboard.is_down(Key.TAB)


def test_quit_raises():
    keyboard = Keyboard()
    with pytest.raises(QuitRequested):
        keyboard.poll([pygame.event.Event(pygame.QUIT)])