"""Score, high score and remaining time display."""

from __future__ import annotations

import re
from pathlib import Path
from typing import Any

import pygame

from .game_object import draw_rotated
from .resource_manager import ResourceError, ResourceManager

FRAME_RATE = 144
TIME_LIMIT = 60
HIGH_SCORE_PATH = "Resource/dat/High_Score.csv"

NUMBER_IMAGE_PATHS = (
    *(f"Resource/Images/Score/{n}.png" for n in range(10)),
    "Resource/Images/FlyText/-.png",
)
FONT_IMAGE_PATHS = (
    "Resource/Images/Score/font-21.png",
    "Resource/Images/Score/hs.png",
    "Resource/Images/TimeLimit/timer-03.png",
)

_MAX_SCORE_DIGITS = 10
_ROW_Y = 460
_DIGIT_STEP = 12
_HIGH_SCORE_PATTERN = re.compile(r"\s*([+-]?\d{1,10})")


def split_digits(value: int, limit: int) -> list[int]:
    """Decimal digits of ``value``, most significant first.

    At most the ``limit`` lowest digits are kept; values below 1 give ``[0]``.
    """
    value = int(value)
    if value < 1:
        return [0]
    return [int(c) for c in str(value)[-limit:]]


class Score:
    """Tracks the score, the persisted high score and the countdown timer."""

    def __init__(self, high_score_path: str | Path = HIGH_SCORE_PATH) -> None:
        self.high_score_path = Path(high_score_path)
        self.rm = ResourceManager.get_instance()
        self.score = 0
        self.high_score = 0
        self.time = 0
        self.count_time = 0
        self.number_image: list[Any] = []
        self.font_image: list[Any] = []

    def initialize(self) -> None:
        """Read the high score, load the images and start the countdown."""
        self.high_score = self._read_high_score()
        self.number_image = [self.rm.get_images(p)[0] for p in NUMBER_IMAGE_PATHS]
        self.font_image = [self.rm.get_images(p)[0] for p in FONT_IMAGE_PATHS]
        self.score = 0
        self.time = TIME_LIMIT

    def _read_high_score(self) -> int:
        try:
            text = self.high_score_path.read_text(encoding="utf-8")
        except OSError as exc:
            raise ResourceError(f"{self.high_score_path} could not be opened") from exc
        match = _HIGH_SCORE_PATTERN.match(text)
        return int(match.group(1)) if match else self.high_score

    def update(self) -> None:
        """Count a frame; one second passes every FRAME_RATE frames."""
        self.count_time += 1
        if self.count_time >= FRAME_RATE:
            self.time -= 1
            self.count_time = 0

    def _draw_digit(self, screen: pygame.Surface, digit: int, x: float) -> None:
        draw_rotated(screen, self.number_image[digit], x, _ROW_Y, 1.0, 0.0)

    def _draw_number(
        self, screen: pygame.Surface, value: int, left: float, zero_x: float
    ) -> None:
        if value < 1:
            self._draw_digit(screen, 0, zero_x)
            return
        for index, digit in enumerate(split_digits(value, _MAX_SCORE_DIGITS)):
            self._draw_digit(screen, digit, left + _DIGIT_STEP * index)

    def draw(self, screen: pygame.Surface) -> None:
        """Draw labels, score, high score and the two-digit timer."""
        for image, x, scale in zip(self.font_image, (240, 440, 30), (1.0, 1.0, 0.5)):
            draw_rotated(screen, image, x, _ROW_Y, scale, 0.0)
        self._draw_number(screen, self.score, 280, 292)
        self._draw_number(screen, self.high_score, 490, 502)
        tens, ones = divmod(max(self.time, 0) % 100, 10)
        self._draw_digit(screen, tens, 50)
        self._draw_digit(screen, ones, 62)

    def finalize(self) -> None:
        """Drop the loaded images."""
        self.number_image.clear()
        self.font_image.clear()

    def add_score(self, scr: int) -> None:
        """Add ``scr`` to the score, never letting it fall below zero."""
        self.score = max(self.score + scr, 0)

    def set_high_score(self) -> None:
        """Store the score as the new high score if it beats the old one."""
        if self.high_score < self.score:
            self.high_score = self.score
            try:
                self.high_score_path.write_text(f"{self.high_score},\n", encoding="utf-8")
            except OSError as exc:
                raise ResourceError(
                    f"{self.high_score_path} could not be opened"
                ) from exc