import pygame
import pytest

from bombhunter.resource_manager import ResourceManager
from bombhunter.time_up import (
    DISPLAY_FRAMES,
    IMAGE_PATHS,
    SOUND_PATHS,
    Evaluation,
    TimeUp,
    evaluate,
)


class FakeSound:
    def __init__(self):
        self.plays = []
        self.playing = False

    def play(self, loops=0):
        self.plays.append(loops)
        self.playing = True

    def stop(self):
        self.playing = False

    def get_num_channels(self):
        return 1 if self.playing else 0


class FakeAssets:
    def __init__(self):
        self.images = {}
        self.sounds = {}

    def image(self, name):
        surface = pygame.Surface((4, 4), pygame.SRCALPHA, 32)
        surface.fill((len(self.images) * 30 % 256, 80, 160, 255))
        self.images[name] = surface
        return surface

    def sound(self, name):
        sound = FakeSound()
        self.sounds[name] = sound
        return sound

    def manager(self):
        return ResourceManager(self.image, self.sound)


@pytest.fixture
def assets():
    return FakeAssets()


@pytest.fixture
def time_up(assets):
    screen = TimeUp()
    screen.rm = assets.manager()
    screen.initialize()
    return screen


@pytest.mark.parametrize(
    "sco, grade",
    [
        (1500, Evaluation.PERFECT),
        (1499, Evaluation.GOOD),
        (1000, Evaluation.GOOD),
        (999, Evaluation.OK),
        (500, Evaluation.OK),
        (499, Evaluation.BAD),
        (0, Evaluation.BAD),
    ],
)
def test_evaluate(sco, grade):
    assert evaluate(sco) == grade


def test_initialize_state(time_up):
    assert time_up.evaluation == Evaluation.FINISH
    assert time_up.count == DISPLAY_FRAMES


def test_first_update_starts_looping_music(time_up, assets):
    time_up.update(0)
    assert time_up.count == DISPLAY_FRAMES - 1
    assert assets.sounds[SOUND_PATHS[Evaluation.FINISH]].plays == [-1]
    time_up.update(0)
    assert time_up.count == DISPLAY_FRAMES - 2
    assert assets.sounds[SOUND_PATHS[Evaluation.FINISH]].plays == [-1]


def test_evaluation_appears_after_delay(time_up, assets):
    for _ in range(DISPLAY_FRAMES - 2):
        time_up.update(1200)
    assert time_up.evaluation == Evaluation.FINISH
    time_up.update(1200)
    assert time_up.evaluation == Evaluation.GOOD
    assert assets.sounds[SOUND_PATHS[Evaluation.GOOD]].plays == [0]


def test_count_stops_at_zero(time_up):
    for _ in range(DISPLAY_FRAMES + 5):
        time_up.update(0)
    assert time_up.count == 0
    assert time_up.evaluation == Evaluation.BAD


def test_draw_shows_current_image(time_up, assets):
    for _ in range(DISPLAY_FRAMES - 1):
        time_up.update(2000)
    screen = pygame.Surface((640, 480))
    time_up.draw(screen)
    expected = assets.images[IMAGE_PATHS[Evaluation.PERFECT]].get_at((0, 0))
    assert screen.get_at((320, 240)) == expected


def test_finalize_stops_sounds(time_up, assets):
    time_up.update(0)
    bgm = assets.sounds[SOUND_PATHS[Evaluation.FINISH]]
    time_up.finalize()
    assert bgm.playing is False
    assert time_up.sounds == {}
    assert time_up.images == {}