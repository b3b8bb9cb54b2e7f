"""Tests for keyboard-to-symbol translation."""

import pygame

from combobeat.key_input import InputSource, KeyboardInput


def key_event(kind, key):
    return pygame.event.Event(kind, key=key)


def test_keydown_queues_symbol_with_time():
    source = KeyboardInput()
    source.feed_event(key_event(pygame.KEYDOWN, pygame.K_z), now=123.0)
    source.feed_event(key_event(pygame.KEYDOWN, pygame.K_SPACE), now=130.0)
    first = source.poll()
    second = source.poll()
    assert (first.symbol, first.time_ms) == ("Z", 123.0)
    assert second.symbol == "SPACE"
    assert source.poll() is None


def test_unmapped_keys_and_events_are_ignored():
    source = KeyboardInput()
    source.feed_event(key_event(pygame.KEYDOWN, pygame.K_q))
    source.feed_event(pygame.event.Event(pygame.QUIT))
    assert source.poll() is None


def test_direction_keys_are_tracked_as_held():
    source = KeyboardInput()
    source.feed_event(key_event(pygame.KEYDOWN, pygame.K_LEFT), now=0.0)
    assert source.held == {"LEFT"}
    source.feed_event(key_event(pygame.KEYUP, pygame.K_LEFT), now=10.0)
    assert source.held == set()
    assert source.poll().symbol == "LEFT"
    assert source.poll() is None


def test_close_drops_pending_presses():
    source = KeyboardInput()
    source.feed_event(key_event(pygame.KEYDOWN, pygame.K_x))
    source.close()
    assert source.poll() is None


def test_keyboard_is_an_input_source():
    assert isinstance(KeyboardInput(), InputSource)
