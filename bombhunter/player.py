"""The player's character, moved left and right with the arrow keys."""

from __future__ import annotations

import pygame

from .game_object import GameObject, draw_rotated
from .input_control import InputControl, Key
from .vector2d import Vector2D

IMAGE_PATHS = (
    "Resource/Images/Tri-pilot/1.png",
    "Resource/Images/Tri-pilot/2.png",
)

_SPEED = 2.0
_LEFT_LIMIT = 30.0
_RIGHT_LIMIT = 610.0
_ANIMATION_FRAMES = 30


class Player(GameObject):
    """Flies horizontally along the top of the screen."""

    def __init__(self, input_control: InputControl) -> None:
        super().__init__()
        self.input_control = input_control
        self.animation_count = 0
        self.flip = False

    def initialize(self) -> None:
        """Load the animation frames and set the hit box."""
        self.animation = [self.rm.get_images(path)[0] for path in IMAGE_PATHS]
        self.radian = 0.0
        self.box_size = Vector2D(64.0)
        self.image = self.animation[0]

    def update(self) -> None:
        self._movement()
        self._anime_control()

    def draw(self, screen: pygame.Surface) -> None:
        draw_rotated(
            screen, self.image, self.location.x, self.location.y, 0.5, self.radian, self.flip
        )

    def finalize(self) -> None:
        self.animation.clear()

    def on_hit_collision(self, hit_object: GameObject) -> None:
        """The player is not affected by collisions."""

    def _movement(self) -> None:
        if self.input_control.get_key(Key.LEFT):
            if self.location.x > _LEFT_LIMIT:
                self.direction = Vector2D(-_SPEED, self.direction.y)
                self.flip = True
        elif self.input_control.get_key(Key.RIGHT):
            if self.location.x < _RIGHT_LIMIT:
                self.direction = Vector2D(_SPEED, self.direction.y)
                self.flip = False
        else:
            self.direction = Vector2D(0.0, self.direction.y)
        self.location = self.location + self.direction

    def _anime_control(self) -> None:
        self.animation_count += 1
        if self.animation_count >= _ANIMATION_FRAMES:
            self.animation_count = 0
            if self.image is self.animation[0]:
                self.image = self.animation[1]
            else:
                self.image = self.animation[0]