"""The game scene: spawning, collisions, scoring and the time-up screen."""

from __future__ import annotations

import math
import random
from itertools import combinations
from pathlib import Path
from typing import Any, Callable, Optional, TypeVar

import pygame

from .bomb import Bomb
from .enemy import Enemy
from .enemy_bullet import EnemyBullet
from .game_object import GameObject, ObjectType
from .input_control import InputControl, Key
from .player import Player
from .resource_manager import ResourceManager
from .score import HIGH_SCORE_PATH, Score
from .time_up import TimeUp
from .vector2d import Vector2D

MAX_ENEMY = 6
SCREEN_SIZE = (640, 480)
BACKGROUND_PATH = "Resource/Images/BackGround.png"
BGM_PATH = "Resource/Sounds/Evaluation/BGM_arrows.wav"
BOMB_DROP_SOUND_PATH = "Resource/Sounds/pan.wav"

PLAYER_START = Vector2D(320.0, 50.0)
_SPAWN_RIGHT_X = 600.0
_SPAWN_LEFT_X = 40.0
_GROUND_Y = 400.0
_SKY_Y = 200.0

_NOT_ENEMIES = (ObjectType.PLAYER, ObjectType.BOMB, ObjectType.ENEMY_BULLET)
_SPAWN_ORDER = (
    ObjectType.BOX_ENEMY,
    ObjectType.FLY_ENEMY,
    ObjectType.HARPY,
    ObjectType.GOLD_ENEMY,
)

T = TypeVar("T")


def boxes_overlap(a: GameObject, b: GameObject) -> bool:
    """True when the centred hit boxes of ``a`` and ``b`` overlap."""
    diff = a.location - b.location
    half = (a.box_size + b.box_size) / 2.0
    return abs(diff.x) < half.x and abs(diff.y) < half.y


def _is_playing(sound: Any) -> bool:
    return sound.get_num_channels() > 0


class Scene:
    """Holds every object of a round and runs the frame logic."""

    def __init__(
        self,
        input_control: InputControl,
        rng: Optional[random.Random] = None,
        high_score_path: str | Path = HIGH_SCORE_PATH,
    ) -> None:
        self.input_control = input_control
        self.rng = rng if rng is not None else random.Random()
        self.rm = ResourceManager.get_instance()
        self.objects: list[GameObject] = []
        self.sounds: list[Any] = []
        self.background: Any = None
        self.count_time = 0
        self.count_rand = 0
        self.create_rand = 0
        self.enemy_rand = 0
        self.enemy_count = 0
        self.scores = Score(high_score_path)
        self.time_up = TimeUp()

    def _rand(self, limit: int) -> int:
        return self.rng.randint(0, limit)

    def initialize(self) -> None:
        """Start a new round with the player alone on screen."""
        self.scores.initialize()
        self.time_up.initialize()
        self.create_object(Player, PLAYER_START, ObjectType.PLAYER)
        self.enemy_count = 0
        self.count_time = 1
        self.count_rand = 100
        self.enemy_rand = 3
        self.background = self.rm.get_images(BACKGROUND_PATH)[0]
        self.sounds = [
            self.rm.get_sounds(BGM_PATH)[0],
            self.rm.get_sounds(BOMB_DROP_SOUND_PATH)[0],
        ]

    def create_object(
        self,
        cls: type[T],
        location: Vector2D,
        object_type: ObjectType,
        direction: Vector2D | float | None = None,
    ) -> T:
        """Create, place, initialise and add an object of class ``cls``."""
        factories: dict[type, Callable[[], Any]] = {
            Player: lambda: Player(self.input_control),
            Enemy: lambda: Enemy(self.rng),
        }
        instance = factories.get(cls, cls)()
        if not isinstance(instance, GameObject):
            raise TypeError(f"{cls!r} does not make game objects")
        if direction is None:
            direction = Vector2D()
        elif not isinstance(direction, Vector2D):
            direction = Vector2D(direction)
        instance.type = object_type
        instance.location = location
        instance.direction = direction
        instance.initialize()
        self.objects.append(instance)
        return instance

    def update(self) -> None:
        """Advance one frame of play, or of the time-up screen."""
        if self.scores.time > 0:
            self._update_play()
        else:
            self._update_time_up()

    def _update_play(self) -> None:
        self.count_time += 1
        bgm = self.sounds[0]
        if not _is_playing(bgm):
            bgm.play(loops=-1)

        for obj in list(self.objects):
            obj.update()

        if self.count_time >= self.count_rand:
            if self.enemy_count < MAX_ENEMY:
                self._spawn_enemy()
                self.enemy_count += 1
                self.create_rand = self._rand(1)
            self.count_rand = (self._rand(1) + 1) * 100
            self.enemy_rand = self._rand(3)
            self.count_time = 0

        for a, b in combinations(list(self.objects), 2):
            self._hit_check(a, b)

        if self.input_control.get_key_down(Key.Z):
            self.sounds[1].play()
            self.create_object(Bomb, self.objects[0].location, ObjectType.BOMB)

        player_location = self.objects[0].location
        for obj in list(self.objects):
            if obj.shot_flag:
                offset = player_location - obj.location
                distance = math.hypot(offset.x, offset.y)
                self.create_object(
                    EnemyBullet, obj.location, ObjectType.ENEMY_BULLET, offset / distance
                )

        removed = [obj for obj in self.objects if obj.deleted]
        self.objects = [obj for obj in self.objects if not obj.deleted]
        self.enemy_count -= sum(1 for obj in removed if obj.type not in _NOT_ENEMIES)

        self.scores.update()

    def _spawn_enemy(self) -> None:
        x = _SPAWN_RIGHT_X if self.create_rand == 0 else _SPAWN_LEFT_X
        kind = _SPAWN_ORDER[self.enemy_rand]
        if kind in (ObjectType.FLY_ENEMY, ObjectType.HARPY):
            location = Vector2D(x, _SKY_Y + self._rand(100))
        else:
            location = Vector2D(x, _GROUND_Y)
        self.create_object(Enemy, location, kind)

    def _update_time_up(self) -> None:
        self.sounds[0].stop()
        self.scores.set_high_score()
        self.time_up.update(self.scores.score)
        if self.input_control.get_key_down(Key.SPACE):
            self.finalize()
            self.initialize()

    def _hit_check(self, a: GameObject, b: GameObject) -> None:
        if not boxes_overlap(a, b):
            return
        if a.type != b.type:
            kinds = (a.type, b.type)
            bomb_on_target = ObjectType.BOMB in kinds and ObjectType.ENEMY_BULLET not in kinds
            bullet_on_player = (
                a.type == ObjectType.PLAYER and b.type == ObjectType.ENEMY_BULLET
            )
            if bomb_on_target or bullet_on_player:
                self.scores.add_score(a.score)
                self.scores.add_score(b.score)
        a.on_hit_collision(b)
        b.on_hit_collision(a)

    def draw(self, screen: pygame.Surface) -> None:
        """Draw the background and either the round or the time-up screen."""
        if self.background is not None:
            screen.blit(pygame.transform.scale(self.background, SCREEN_SIZE), (0, 0))
        if self.scores.time > 0:
            for obj in self.objects:
                obj.draw(screen)
            self.scores.draw(screen)
        else:
            self.time_up.draw(screen)

    def finalize(self) -> None:
        """Release the round's objects and resources."""
        self.scores.finalize()
        self.time_up.finalize()
        if not self.objects:
            return
        for obj in self.objects:
            obj.finalize()
        self.objects.clear()
        self.sounds.clear()
        self.background = None