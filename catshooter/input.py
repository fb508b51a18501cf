"""Keyboard and mouse state tracking with press, trigger, release and repeat."""

from __future__ import annotations

from enum import IntEnum
from typing import Iterable, Optional

NUM_KEY_MAX = 256
NUM_MOUSE_BUTTONS = 4
_DOWN = 0x80


class Key(IntEnum):
    """Keyboard scan codes."""

    ESCAPE = 0x01
    Q = 0x10
    W = 0x11
    E = 0x12
    R = 0x13
    T = 0x14
    Y = 0x15
    I = 0x17  # noqa: E741
    A = 0x1E
    S = 0x1F
    D = 0x20
    F = 0x21
    G = 0x22
    H = 0x23
    J = 0x24
    K = 0x25
    L = 0x26
    SPACE = 0x39
    UP = 0xC8
    LEFT = 0xCB
    RIGHT = 0xCD
    DOWN = 0xD0


def _snapshot(state: Iterable[int], size: int) -> bytes:
    data = bytes(state)
    if len(data) != size:
        raise ValueError(f"expected {size} state bytes, got {len(data)}")
    return data


class Keyboard:
    """Tracks the current and previous keyboard state."""

    def __init__(self) -> None:
        self._state = bytes(NUM_KEY_MAX)
        self._old_state = bytes(NUM_KEY_MAX)

    def update(self, state: Optional[Iterable[int]]) -> None:
        """Advance one frame; None means the device could not be read."""
        self._old_state = self._state
        if state is not None:
            self._state = _snapshot(state, NUM_KEY_MAX)

    def is_pressed(self, key: int) -> bool:
        return bool(self._state[key] & _DOWN)

    def is_triggered(self, key: int) -> bool:
        return bool(self._state[key] & _DOWN) and not self._old_state[key] & _DOWN

    def is_released(self, key: int) -> bool:
        return bool(self._old_state[key] & _DOWN) and not self._state[key] & _DOWN

    def is_repeated(self, key: int) -> bool:
        return bool(self._old_state[key] & _DOWN) and bool(self._state[key] & _DOWN)


class Mouse:
    """Tracks the current and previous mouse button state."""

    def __init__(self) -> None:
        self._buttons = bytes(NUM_MOUSE_BUTTONS)
        self._old_buttons = bytes(NUM_MOUSE_BUTTONS)

    def update(self, buttons: Optional[Iterable[int]]) -> None:
        """Advance one frame; None means the device could not be read."""
        self._old_buttons = self._buttons
        if buttons is not None:
            self._buttons = _snapshot(buttons, NUM_MOUSE_BUTTONS)

    def is_pressed(self, button: int) -> bool:
        return bool(self._buttons[button] & _DOWN)

    def on_button_down(self, button: int) -> bool:
        return not self._old_buttons[button] & _DOWN and bool(self._buttons[button] & _DOWN)

    def on_button_up(self, button: int) -> bool:
        return bool(self._old_buttons[button] & _DOWN) and not self._buttons[button] & _DOWN

    def is_repeated(self, button: int) -> bool:
        return bool(self._old_buttons[button] & _DOWN) and bool(self._buttons[button] & _DOWN)