"""Enemies that cross the screen and can be bombed."""

from __future__ import annotations

import random
from dataclasses import dataclass
from typing import Optional

import pygame

from .fly_text import FlyText
from .game_object import GameObject, ObjectType, draw_rotated
from .vector2d import Vector2D

EXPLOSION_SOUND_PATH = "Resource/Sounds/explosion.wav"


@dataclass(frozen=True)
class _Kind:
    images: tuple[str, ...]
    sound: str
    box: float
    score: int


KINDS = {
    ObjectType.BOX_ENEMY: _Kind(
        ("Resource/Images/BoxEnemy/1.png", "Resource/Images/BoxEnemy/2.png"),
        "Resource/Sounds/Boss_gahee.wav",
        64.0,
        10,
    ),
    ObjectType.FLY_ENEMY: _Kind(
        ("Resource/Images/WingEnemy/1.png", "Resource/Images/WingEnemy/2.png"),
        "Resource/Sounds/teki_gahee.wav",
        64.0,
        10,
    ),
    ObjectType.HARPY: _Kind(
        ("Resource/Images/Harpy/1.png", "Resource/Images/Harpy/2.png"),
        "Resource/Sounds/pokan.wav",
        64.0,
        -20,
    ),
    ObjectType.GOLD_ENEMY: _Kind(
        tuple(f"Resource/Images/GoldEnemy/{n}.png" for n in range(1, 6)),
        "Resource/Sounds/arrows_perfect03_short.wav",
        32.0,
        100,
    ),
}

_SCREEN_RIGHT = 630
_ANIMATION_FRAMES = 30
_FADE_STEP = 2
_SINK_SPEED = 0.1


class Enemy(GameObject):
    """Walks or flies sideways; box enemies shoot, all fade out when bombed."""

    def __init__(self, rng: Optional[random.Random] = None) -> None:
        super().__init__()
        self.rng = rng if rng is not None else random.Random()
        self.sounds: list = []
        self.animation_count = 0
        self.anime_time = 0
        self.shot_count = 0
        self.shot_rand = 0
        self.alpha = 0
        self.blend_flag = False
        self.anim_location = Vector2D()
        self.fly_text = FlyText()

    def _rand(self, limit: int) -> int:
        return self.rng.randint(0, limit)

    def initialize(self) -> None:
        """Load the resources of this kind of enemy and pick its speed."""
        kind = KINDS.get(self.type)
        if kind is None:
            raise ValueError(f"{self.type!r} is not an enemy type")
        self.animation = [self.rm.get_images(path)[0] for path in kind.images]
        self.sounds = [
            self.rm.get_sounds(kind.sound)[0],
            self.rm.get_sounds(EXPLOSION_SOUND_PATH)[0],
        ]
        self.box_size = Vector2D(kind.box)
        self.score = kind.score

        speed = (self._rand(10) + 10.0) / 10.0
        if self.location.x >= 50.0:
            speed = -speed

        self.radian = 0.0
        self.shot_rand = 100
        self.image = self.animation[0]
        self.alpha = 255
        self.fly_text.initialize()
        self.direction = Vector2D(speed, 0.0)

    def update(self) -> None:
        if not self.blend_flag:
            self.shot_count += 1
            if self.type == ObjectType.BOX_ENEMY:
                if self.shot_count >= self.shot_rand:
                    self.shot_flag = True
                    self.shot_count = 0
                    self.shot_rand = (self._rand(2) + 1) * 100
                else:
                    self.shot_flag = False
            if self.location.x < 0 or self.location.x > _SCREEN_RIGHT:
                self.finalize()
        else:
            self.shot_flag = False

        self._movement()
        self._anime_control()

        if self.alpha <= 0:
            self.finalize()

    def draw(self, screen: pygame.Surface) -> None:
        flip = not self.direction.x > 0.0
        if self.blend_flag:
            self.fly_text.draw(screen, self.anim_location)
            if self.image is not None:
                faded = self.image.copy()
                faded.set_alpha(max(0, min(255, self.alpha)))
                draw_rotated(
                    screen,
                    faded,
                    self.anim_location.x,
                    self.anim_location.y,
                    0.5,
                    self.radian,
                    flip,
                )
        else:
            draw_rotated(
                screen, self.image, self.location.x, self.location.y, 0.5, self.radian, flip
            )

    def finalize(self) -> None:
        """Mark the enemy for removal."""
        self.animation.clear()
        self.anim_location = Vector2D()
        self.deleted = True

    def on_hit_collision(self, hit_object: GameObject) -> None:
        """When bombed, show the points and start sinking and fading."""
        if hit_object.type != ObjectType.BOMB or self.blend_flag:
            return
        for sound in self.sounds:
            sound.play()
        self.fly_text.set_fly_text(self.score)
        self.blend_flag = True
        self.box_size = Vector2D()
        self.anim_location = self.location
        self.direction = Vector2D(0.0, _SINK_SPEED)
        self.location = Vector2D()
        self.score = 0

    def _movement(self) -> None:
        if self.blend_flag:
            self.anim_location = self.anim_location + self.direction
        else:
            self.location = self.location + self.direction

    def _anime_control(self) -> None:
        if self.blend_flag:
            self.alpha -= _FADE_STEP
            return
        if not self.animation:
            return
        self.animation_count += 1
        if self.animation_count >= _ANIMATION_FRAMES:
            self.animation_count = 0
            self.anime_time += 1
            if self.image is self.animation[-1]:
                self.anime_time = 0
                self.image = self.animation[0]
            else:
                self.image = self.animation[self.anime_time]