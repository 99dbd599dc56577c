import pygame
import pytest

from bombhunter.resource_manager import (
    MaterialParam,
    ResourceError,
    ResourceManager,
    load_divided_image,
    load_image,
    load_sound,
)


class _FakeSound:
    def __init__(self, name):
        self.name = name
        self.stopped = False

    def stop(self):
        self.stopped = True


class _Loaders:
    def __init__(self, images=None):
        self.image_calls = []
        self.sound_calls = []
        self.images = images or {}

    def image(self, name):
        self.image_calls.append(name)
        return self.images.get(name, f"img:{name}")

    def sound(self, name):
        self.sound_calls.append(name)
        return _FakeSound(name)


def _manager(loaders):
    return ResourceManager(loaders.image, loaders.sound)


def test_images_are_cached():
    loaders = _Loaders()
    rm = _manager(loaders)
    first = rm.get_images("a.png")
    second = rm.get_images("a.png")
    assert first == second == ("img:a.png",)
    assert loaders.image_calls == ["a.png"]


def test_sounds_are_cached():
    loaders = _Loaders()
    rm = _manager(loaders)
    first = rm.get_sounds("s.wav")
    assert rm.get_sounds("s.wav")[0] is first[0]
    assert loaders.sound_calls == ["s.wav"]


def test_missing_image_raises():
    rm = ResourceManager(lambda name: None, lambda name: None)
    with pytest.raises(ResourceError):
        rm.get_images("missing.png")
    with pytest.raises(ResourceError):
        rm.get_sounds("missing.wav")


def test_material_param_is_accepted():
    loaders = _Loaders()
    rm = _manager(loaders)
    assert rm.get_images(MaterialParam("b.png")) == ("img:b.png",)
    assert loaders.image_calls == ["b.png"]


def _sheet(colors, size):
    sheet = pygame.Surface((2 * size, 2 * size))
    for (col, row), color in colors.items():
        sheet.fill(color, pygame.Rect(col * size, row * size, size, size))
    return sheet


def test_divided_images_follow_row_order():
    colors = {
        (0, 0): (255, 0, 0),
        (1, 0): (0, 255, 0),
        (0, 1): (0, 0, 255),
        (1, 1): (255, 255, 0),
    }
    loaders = _Loaders({"sheet.png": _sheet(colors, 4)})
    rm = _manager(loaders)
    pieces = rm.get_images("sheet.png", 3, 2, 2, 4, 4)
    assert len(pieces) == 3
    assert all(p.get_size() == (4, 4) for p in pieces)
    got = [tuple(p.get_at((0, 0)))[:3] for p in pieces]
    assert got == [colors[(0, 0)], colors[(1, 0)], colors[(0, 1)]]


def test_divided_images_reject_too_many_cells():
    loaders = _Loaders({"sheet.png": pygame.Surface((8, 8))})
    rm = _manager(loaders)
    with pytest.raises(ResourceError):
        rm.get_images("sheet.png", 5, 2, 2, 4, 4)


def test_divided_images_reject_small_sheet():
    loaders = _Loaders({"sheet.png": pygame.Surface((6, 6))})
    rm = _manager(loaders)
    with pytest.raises(ResourceError):
        rm.get_images("sheet.png", 4, 2, 2, 4, 4)


def test_unload_stops_sounds_and_forgets_cache():
    loaders = _Loaders()
    rm = _manager(loaders)
    rm.get_images("a.png")
    sound = rm.get_sounds("s.wav")[0]
    rm.unload_resources_all()
    assert sound.stopped
    rm.get_images("a.png")
    assert loaders.image_calls == ["a.png", "a.png"]


def test_singleton_lifecycle():
    ResourceManager.delete_instance()
    first = ResourceManager.get_instance()
    assert ResourceManager.get_instance() is first
    ResourceManager.delete_instance()
    second = ResourceManager.get_instance()
    assert second is not first
    ResourceManager.delete_instance()


def test_default_loaders_reject_missing_files(tmp_path):
    missing = str(tmp_path / "none.png")
    with pytest.raises(ResourceError):
        load_image(missing)
    with pytest.raises(ResourceError):
        load_divided_image(missing, 2, 2, 1, 4, 4)
    with pytest.raises(ResourceError):
        load_sound(str(tmp_path / "none.wav"))


def test_load_divided_image_from_file(tmp_path):
    path = tmp_path / "sheet.bmp"
    pygame.image.save(pygame.Surface((8, 4)), str(path))
    pieces = load_divided_image(str(path), 2, 2, 1, 4, 4)
    assert [p.get_size() for p in pieces] == [(4, 4), (4, 4)]