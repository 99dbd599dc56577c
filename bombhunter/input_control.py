"""Keyboard state tracking with press, hold and release detection."""

from __future__ import annotations

from enum import IntEnum
from typing import Iterable

KEYCODE_MAX = 256


class Key(IntEnum):
    """Key codes used by the game."""

    ESCAPE = 0x01
    Z = 0x2C
    SPACE = 0x39
    LEFT = 0xCB
    RIGHT = 0xCD


def _in_range(key_code: int) -> bool:
    return 0 <= key_code < KEYCODE_MAX


class InputControl:
    """Keeps the key state of the current and the previous frame."""

    def __init__(self) -> None:
        self._now: frozenset[int] = frozenset()
        self._old: frozenset[int] = frozenset()

    def update(self, pressed: Iterable[int]) -> None:
        """Advance one frame; ``pressed`` holds the codes of keys held down."""
        self._old = self._now
        self._now = frozenset(int(k) for k in pressed if _in_range(int(k)))

    def get_key(self, key_code: int) -> bool:
        """True while the key is held in this frame and the previous one."""
        return _in_range(key_code) and key_code in self._now and key_code in self._old

    def get_key_down(self, key_code: int) -> bool:
        """True on the frame the key is first pressed."""
        return (
            _in_range(key_code)
            and key_code in self._now
            and key_code not in self._old
        )

    def get_key_up(self, key_code: int) -> bool:
        """True on the frame the key is released."""
        return (
            _in_range(key_code)
            and key_code not in self._now
            and key_code in self._old
        )