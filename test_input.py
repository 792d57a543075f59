# -*- coding: utf-8 -*-
import pytest

glfw = pytest.importorskip("glfw")

from movingblocks.core.input import InputManager
from movingblocks.math import Vec2


@pytest.fixture
def input_manager(monkeypatch):
    monkeypatch.setattr(glfw, "set_key_callback", lambda *a: None)
    monkeypatch.setattr(glfw, "set_cursor_pos_callback", lambda *a: None)
    return InputManager(window=None)

def test_pointer_unknown_until_first_move(input_manager):
    assert input_manager.pointer is None

def test_pointer_last_value_wins(input_manager):
    input_manager._mouse_move_cb(None, 10.0, 20.0)
    input_manager._mouse_move_cb(None, 30.5, 40.0)
    assert input_manager.pointer == Vec2(30.5, 40.0)

def test_key_state(input_manager):
    input_manager._key_cb(None, glfw.KEY_F9, 0, glfw.PRESS, 0)
    assert input_manager.is_key_pressed(glfw.KEY_F9)
    input_manager._key_cb(None, glfw.KEY_F9, 0, glfw.RELEASE, 0)
    assert not input_manager.is_key_pressed(glfw.KEY_F9)
    assert not input_manager.is_key_pressed(glfw.KEY_ESCAPE)
