"""Bullets fired by enemies toward the player."""

from __future__ import annotations

import pygame

from .game_object import GameObject, ObjectType, draw_rotated
from .vector2d import Vector2D

IMAGE_PATHS = (
    "Resource/Images/EnemyBullet/1.png",
    "Resource/Images/EnemyBullet/eff1.png",
    "Resource/Images/EnemyBullet/eff2.png",
    "Resource/Images/EnemyBullet/eff3.png",
)
SOUND_PATH = "Resource/Sounds/bishi.wav"

_SCREEN_WIDTH = 640
_ANIMATION_FRAMES = 5


class EnemyBullet(GameObject):
    """Moves in a straight line and bursts when it hits the player."""

    def __init__(self) -> None:
        super().__init__()
        self.anime_flag = False
        self.anime_count = 0
        self.anime_num = 0

    def initialize(self) -> None:
        """Load the images and sound and set size and penalty."""
        self.animation = [self.rm.get_images(path)[0] for path in IMAGE_PATHS]
        self.sound = self.rm.get_sounds(SOUND_PATH)[0]
        self.radian = 0.0
        self.box_size = Vector2D(16.0)
        self.image = self.animation[0]
        self.score = -20

    def update(self) -> None:
        self._movement()
        self._anime_control()
        x, y = self.location
        if x < self.box_size.x or x > self.box_size.x + _SCREEN_WIDTH or y < self.box_size.y:
            self.finalize()

    def draw(self, screen: pygame.Surface) -> None:
        draw_rotated(screen, self.image, self.location.x, self.location.y, 0.5, self.radian)

    def finalize(self) -> None:
        """Mark the bullet for removal."""
        self.animation.clear()
        self.location = Vector2D()
        self.deleted = True
        self.sound = None

    def on_hit_collision(self, hit_object: GameObject) -> None:
        """Stop and start the burst animation when hitting the player."""
        if hit_object.type == ObjectType.PLAYER:
            if self.sound is not None:
                self.sound.play()
            self.anime_flag = True
            self.box_size = Vector2D()
            self.direction = Vector2D()

    def _movement(self) -> None:
        self.location = self.location + self.direction

    def _anime_control(self) -> None:
        if not self.anime_flag:
            return
        self.anime_count += 1
        if self.anime_count >= _ANIMATION_FRAMES:
            self.anime_num += 1
            if self.anime_num < len(self.animation):
                self.image = self.animation[self.anime_num]
            else:
                self.finalize()
            self.anime_count = 0