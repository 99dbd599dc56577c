"""Time-up screen that shows an evaluation of the final score."""

from __future__ import annotations

from enum import IntEnum
from typing import Any

import pygame

from .game_object import draw_rotated
from .resource_manager import ResourceManager

DISPLAY_FRAMES = 300


class Evaluation(IntEnum):
    """What the time-up screen shows."""

    FINISH = 0
    BAD = 1
    GOOD = 2
    OK = 3
    PERFECT = 4


IMAGE_PATHS = {
    Evaluation.FINISH: "Resource/Images/Evaluation/Finish.png",
    Evaluation.BAD: "Resource/Images/Evaluation/BAD.png",
    Evaluation.GOOD: "Resource/Images/Evaluation/GOOD.png",
    Evaluation.OK: "Resource/Images/Evaluation/OK.png",
    Evaluation.PERFECT: "Resource/Images/Evaluation/Perfect.png",
}

SOUND_PATHS = {
    Evaluation.FINISH: "Resource/Sounds/Evaluation/BGM_timeup.wav",
    Evaluation.BAD: "Resource/Sounds/Evaluation/SE_bad.wav",
    Evaluation.GOOD: "Resource/Sounds/Evaluation/SE_good.wav",
    Evaluation.OK: "Resource/Sounds/Evaluation/SE_ok.wav",
    Evaluation.PERFECT: "Resource/Sounds/Evaluation/SE_perfect.wav",
}


def evaluate(sco: int) -> Evaluation:
    """Grade a final score."""
    if sco >= 1500:
        return Evaluation.PERFECT
    if sco >= 1000:
        return Evaluation.GOOD
    if sco >= 500:
        return Evaluation.OK
    return Evaluation.BAD


def _is_playing(sound: Any) -> bool:
    return sound.get_num_channels() > 0


class TimeUp:
    """Shows "finish" and then, after a delay, the evaluation of the score."""

    def __init__(self) -> None:
        self.rm = ResourceManager.get_instance()
        self.images: dict[Evaluation, Any] = {}
        self.sounds: dict[Evaluation, Any] = {}
        self.evaluation = Evaluation.FINISH
        self.count = 0

    def initialize(self) -> None:
        """Load images and sounds and restart the delay."""
        self.images = {e: self.rm.get_images(p)[0] for e, p in IMAGE_PATHS.items()}
        self.sounds = {e: self.rm.get_sounds(p)[0] for e, p in SOUND_PATHS.items()}
        self.evaluation = Evaluation.FINISH
        self.count = DISPLAY_FRAMES

    def update(self, sco: int) -> None:
        """Play the music and switch to the evaluation of ``sco`` when due."""
        self.count -= 1
        if self.count < 0:
            self.count = 0
            return
        bgm = self.sounds[Evaluation.FINISH]
        if not _is_playing(bgm):
            bgm.play(loops=-1)
        if self.count == 1:
            self.evaluation = evaluate(sco)
            self.sounds[self.evaluation].play()

    def draw(self, screen: pygame.Surface) -> None:
        """Draw the current image in the middle of the screen."""
        draw_rotated(screen, self.images.get(self.evaluation), 320, 240, 1.0, 0.0)

    def finalize(self) -> None:
        """Stop the sounds and drop everything loaded."""
        for sound in self.sounds.values():
            if _is_playing(sound):
                sound.stop()
        self.images.clear()
        self.sounds.clear()