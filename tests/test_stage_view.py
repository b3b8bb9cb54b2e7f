"""Tests for the stage view's input handling."""

import pygame

from combobeat.key_input import KeyboardInput
from combobeat.views.base import ViewContext
from combobeat.views.stage_view import StageView


def enter_stage():
    keyboard = KeyboardInput()
    view = StageView()
    view.on_enter(ViewContext((960, 540), keyboard_input=keyboard))
    return view, keyboard


def press(keyboard, key, now):
    keyboard.feed_event(pygame.event.Event(pygame.KEYDOWN, key=key), now=now)


def test_missed_command_key_clears_command_label():
    view, keyboard = enter_stage()
    view._commands.set_label("ATTACK 104.0", 0.0)
    # the lane is empty, so the press has no note to hit
    press(keyboard, pygame.K_z, 100.0)
    view.update(0.0)
    assert view._commands.current_label(100.0) == ""
    assert view._recognizer.entries() == []
    assert view._popups[-1].label == "miss"


def test_missed_space_keeps_command_label():
    view, keyboard = enter_stage()
    view._commands.set_label("DEFEND", 0.0)
    press(keyboard, pygame.K_SPACE, 100.0)
    view.update(0.0)
    assert view._commands.current_label(100.0) == "DEFEND"
