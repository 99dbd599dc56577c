"""Base class for everything that lives in the scene."""

from __future__ import annotations

import math
from enum import IntEnum
from typing import Any, Optional

import pygame

from .resource_manager import ResourceManager
from .vector2d import Vector2D

_HITBOX_COLOR = (255, 0, 0)


class ObjectType(IntEnum):
    """Kinds of objects in the scene."""

    PLAYER = 0
    BOMB = 1
    BOX_ENEMY = 2
    FLY_ENEMY = 3
    HARPY = 4
    GOLD_ENEMY = 5
    ENEMY_BULLET = 6


def draw_rotated(
    screen: pygame.Surface,
    image: Optional[pygame.Surface],
    x: float,
    y: float,
    scale: float,
    radian: float,
    flip: bool = False,
) -> None:
    """Draw ``image`` centred on (x, y), scaled, rotated clockwise by ``radian``."""
    if image is None:
        return
    surface = pygame.transform.flip(image, True, False) if flip else image
    if scale != 1.0 or radian != 0.0:
        surface = pygame.transform.rotozoom(surface, -math.degrees(radian), scale)
    rect = surface.get_rect(center=(int(x), int(y)))
    screen.blit(surface, rect)


class GameObject:
    """An object with a position and a hit box centred on that position."""

    def __init__(self) -> None:
        self.location = Vector2D()
        self.box_size = Vector2D()
        self.direction = Vector2D()
        self.radian = 0.0
        self.image: Any = None
        self.sound: Any = None
        self.type = ObjectType.PLAYER
        self.deleted = False
        self.shot_flag = False
        self.score = 0
        self.animation: list[Any] = []
        self.rm = ResourceManager.get_instance()

    def initialize(self) -> None:
        """Prepare the object after its type, location and direction are set."""

    def update(self) -> None:
        """Advance the object by one frame."""

    def draw(self, screen: pygame.Surface) -> None:
        """Draw the outline of the hit box."""
        top_left = self.location - self.box_size / 2.0
        width, height = self.box_size
        rect = pygame.Rect(int(top_left.x), int(top_left.y), int(width), int(height))
        pygame.draw.rect(screen, _HITBOX_COLOR, rect, 1)

    def finalize(self) -> None:
        """Release what the object holds."""

    def on_hit_collision(self, hit_object: "GameObject") -> None:
        """React to overlapping ``hit_object``."""