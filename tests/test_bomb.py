import wave
from pathlib import Path

import pygame
import pytest

from bombhunter.bomb import IMAGE_PATHS, SOUND_PATH, Bomb
from bombhunter.game_object import GameObject, ObjectType
from bombhunter.resource_manager import ResourceError, ResourceManager
from bombhunter.vector2d import Vector2D


def _write_image(path):
    path.parent.mkdir(parents=True, exist_ok=True)
    surface = pygame.Surface((8, 8))
    surface.fill((10, 20, 30))
    pygame.image.save(surface, str(path))


def _write_sound(path):
    path.parent.mkdir(parents=True, exist_ok=True)
    with wave.open(str(path), "wb") as out:
        out.setnchannels(1)
        out.setsampwidth(2)
        out.setframerate(22050)
        out.writeframes(b"\x00\x00" * 22050)


@pytest.fixture
def rm(tmp_path, monkeypatch):
    monkeypatch.setenv("SDL_VIDEODRIVER", "dummy")
    monkeypatch.setenv("SDL_AUDIODRIVER", "dummy")
    monkeypatch.chdir(tmp_path)
    pygame.display.init()
    pygame.display.set_mode((1, 1))
    pygame.mixer.init()
    for path in IMAGE_PATHS:
        _write_image(tmp_path / path)
    _write_sound(tmp_path / SOUND_PATH)
    ResourceManager.delete_instance()
    manager = ResourceManager.get_instance()
    yield manager
    ResourceManager.delete_instance()
    pygame.mixer.quit()
    pygame.display.quit()


@pytest.fixture
def bomb(rm):
    b = Bomb()
    b.type = ObjectType.BOMB
    b.initialize()
    b.location = Vector2D(100.0, 100.0)
    return b


def _other(kind, direction=Vector2D()):
    obj = GameObject()
    obj.type = kind
    obj.direction = direction
    return obj


def test_initialize_sets_size_direction_and_image(rm, bomb):
    assert bomb.box_size == Vector2D(32.0)
    assert bomb.direction == Vector2D(0.0, 2.0)
    assert bomb.image is rm.get_images(IMAGE_PATHS[0])[0]


def test_falls_straight_down(bomb):
    start = bomb.location
    bomb.update()
    assert bomb.location == start + Vector2D(0.0, 2.0)
    assert bomb.anime_flag is False


def test_explodes_on_ground(rm, bomb):
    bomb.location = Vector2D(100.0, 399.0)
    bomb.update()
    assert bomb.anime_flag is True
    assert bomb.location == Vector2D()
    assert bomb.box_size == Vector2D()
    assert bomb.anim_location == Vector2D(100.0, 401.0)
    assert rm.get_sounds(SOUND_PATH)[0].get_num_channels() == 1


def test_blast_animation_then_removal(rm, bomb):
    bomb.location = Vector2D(100.0, 399.0)
    for _ in range(10):
        bomb.update()
    assert bomb.image is rm.get_images(IMAGE_PATHS[1])[0]
    for _ in range(29):
        bomb.update()
    assert bomb.deleted is False
    bomb.update()
    assert bomb.deleted is True


def test_player_moving_right_throws_bomb(bomb):
    bomb.on_hit_collision(_other(ObjectType.PLAYER, Vector2D(2.0, 0.0)))
    assert bomb.direction.x == 2.0
    assert bomb.radian == 0.0
    bomb.update()
    assert 0.0 < bomb.radian
    assert bomb.direction.x < 2.0


def test_player_moving_left_throws_bomb_left(bomb):
    bomb.on_hit_collision(_other(ObjectType.PLAYER, Vector2D(-2.0, 0.0)))
    assert bomb.direction.x == -2.0
    assert bomb.radian > 90 * (3.14 / 180)


def test_enemy_hit_starts_blast(bomb):
    bomb.on_hit_collision(_other(ObjectType.BOX_ENEMY))
    assert bomb.anime_flag is True
    assert bomb.direction == Vector2D()
    assert bomb.box_size == Vector2D()


def test_bullet_hit_is_ignored(bomb):
    bomb.on_hit_collision(_other(ObjectType.ENEMY_BULLET))
    assert bomb.anime_flag is False
    assert bomb.box_size == Vector2D(32.0)


def test_missing_image_raises(rm):
    Path(IMAGE_PATHS[2]).unlink()
    with pytest.raises(ResourceError):
        Bomb().initialize()