"""Floating score text shown where an enemy was hit."""

from __future__ import annotations

from typing import Any

import pygame

from .game_object import draw_rotated
from .resource_manager import ResourceManager
from .vector2d import Vector2D

DIGIT_IMAGE_PATHS = tuple(f"Resource/Images/Score/{n}.png" for n in range(10))
MINUS_IMAGE_PATH = "Resource/Images/FlyText/-.png"

_MAX_DIGITS = 3
_DIGIT_STEP = 12
_MINUS_OFFSET = 24
_ONES_OFFSET = 48


class FlyText:
    """Draws a signed number of up to three digits next to a location."""

    def __init__(self) -> None:
        self.rm = ResourceManager.get_instance()
        self.number_image: list[Any] = []
        self.digits: tuple[int, ...] = ()
        self.score = 0

    def initialize(self) -> None:
        """Load the digit images and the minus sign."""
        self.number_image = [
            self.rm.get_images(path)[0]
            for path in (*DIGIT_IMAGE_PATHS, MINUS_IMAGE_PATH)
        ]

    def set_fly_text(self, ft: int) -> None:
        """Set the number to show; only its three lowest digits are kept."""
        self.score = ft
        remaining = abs(ft)
        digits: list[int] = []
        while remaining >= 1 and len(digits) < _MAX_DIGITS:
            remaining, digit = divmod(remaining, 10)
            digits.append(digit)
        # Least significant digit first.
        self.digits = tuple(digits)

    def draw(self, screen: pygame.Surface, location: Vector2D) -> None:
        """Draw the number with its ones digit 48 pixels right of ``location``."""
        if self.score < 0:
            draw_rotated(
                screen, self.number_image[10], location.x + _MINUS_OFFSET, location.y, 1.0, 0.0
            )
        for index, digit in reversed(list(enumerate(self.digits))):
            x = location.x + _ONES_OFFSET - _DIGIT_STEP * index
            draw_rotated(screen, self.number_image[digit], x, location.y, 1.0, 0.0)

    def finalize(self) -> None:
        """Drop the loaded images."""
        self.number_image.clear()