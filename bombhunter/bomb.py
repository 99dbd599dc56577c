"""Bomb dropped by the player; it falls, drifts and explodes."""

from __future__ import annotations

import pygame

from .game_object import GameObject, ObjectType, draw_rotated
from .vector2d import Vector2D

IMAGE_PATHS = (
    "Resource/Images/Bomb/Bomb.png",
    "Resource/Images/Blast/1.png",
    "Resource/Images/Blast/2.png",
    "Resource/Images/Blast/3.png",
)
SOUND_PATH = "Resource/Sounds/explosion.wav"

_DEGREE = 3.14 / 180
_DOWN_ANGLE = 90 * _DEGREE
_LEFT_ANGLE = 180 * _DEGREE
_TURN_STEP = 0.5 * _DEGREE
_DRIFT_STEP = 0.01
_THROW_SPEED = 2.0
_FALL_SPEED = 2.0
_GROUND_Y = 400
_ANIMATION_FRAMES = 10

_NOT_TARGETS = (ObjectType.PLAYER, ObjectType.BOMB, ObjectType.ENEMY_BULLET)


class Bomb(GameObject):
    """Falls from where it was dropped and blasts on an enemy or the ground."""

    def __init__(self) -> None:
        super().__init__()
        self.anime_flag = False
        self.anime_count = 0
        self.anime_num = 0
        self.anim_location = Vector2D()

    def initialize(self) -> None:
        """Load images and sound and start falling straight down."""
        self.animation = [self.rm.get_images(path)[0] for path in IMAGE_PATHS]
        self.sound = self.rm.get_sounds(SOUND_PATH)[0]
        self.radian = _DOWN_ANGLE
        self.box_size = Vector2D(32.0)
        self.direction = Vector2D(0.0, _FALL_SPEED)
        self.image = self.animation[0]

    def update(self) -> None:
        self._movement()
        self._anime_control()

    def draw(self, screen: pygame.Surface) -> None:
        where = self.anim_location if self.anime_flag else self.location
        draw_rotated(screen, self.image, where.x, where.y, 0.5, self.radian)

    def finalize(self) -> None:
        """Mark the bomb for removal."""
        self.location = Vector2D()
        self.deleted = True
        self.animation.clear()
        self.sound = None

    def on_hit_collision(self, hit_object: GameObject) -> None:
        """Take the player's momentum, or blast on touching an enemy."""
        kind = hit_object.type
        if kind == ObjectType.PLAYER:
            if hit_object.direction.x > 0:
                self.radian = 0.0
                self.direction = Vector2D(_THROW_SPEED, self.direction.y)
            elif hit_object.direction.x < 0:
                self.radian = _LEFT_ANGLE
                self.direction = Vector2D(-_THROW_SPEED, self.direction.y)
        if kind not in _NOT_TARGETS:
            self.anime_flag = True
            self.anim_location = self.location
            self.direction = Vector2D()
            self.box_size = Vector2D()

    def _movement(self) -> None:
        if self.radian < _DOWN_ANGLE:
            self.radian += _TURN_STEP
            self.direction = Vector2D(self.direction.x - _DRIFT_STEP, self.direction.y)
        elif self.radian > _DOWN_ANGLE:
            self.radian -= _TURN_STEP
            self.direction = Vector2D(self.direction.x + _DRIFT_STEP, self.direction.y)

        if not self.anime_flag:
            self.location = self.location + self.direction

        if self.location.y >= _GROUND_Y:
            if self.sound is not None:
                self.sound.play()
            self.anim_location = self.location
            self.location = Vector2D()
            self.direction = Vector2D()
            self.anime_flag = True
            self.box_size = Vector2D()

    def _anime_control(self) -> None:
        if not self.anime_flag:
            return
        self.anime_count += 1
        if self.anime_count >= _ANIMATION_FRAMES:
            self.radian = 0.0
            self.anime_num += 1
            if self.anime_num < len(self.animation):
                self.image = self.animation[self.anime_num]
            else:
                self.finalize()
            self.anime_count = 0