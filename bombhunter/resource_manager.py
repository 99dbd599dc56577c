"""Cached loading of images and sounds."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Callable, ClassVar, Optional

import pygame


class ResourceError(Exception):
    """Raised when an image or sound cannot be loaded."""


@dataclass(frozen=True)
class MaterialParam:
    """Description of an image file, possibly a sheet of equal cells."""

    file_path: str
    all_num: int = 1
    num_x: int = 1
    num_y: int = 1
    size_x: int = 0
    size_y: int = 0


def _require_file(file_name: str) -> Path:
    path = Path(file_name)
    if not path.is_file():
        raise ResourceError(f"{file_name} not found")
    return path


def load_image(file_name: str) -> pygame.Surface:
    """Load a single image."""
    path = _require_file(file_name)
    try:
        return pygame.image.load(str(path))
    except (pygame.error, OSError) as exc:
        raise ResourceError(f"{file_name} could not be loaded") from exc


def _split_sheet(
    sheet: Any,
    file_name: str,
    all_num: int,
    num_x: int,
    num_y: int,
    size_x: int,
    size_y: int,
) -> list[Any]:
    if all_num < 1 or num_x < 1 or num_y < 1 or all_num > num_x * num_y:
        raise ResourceError(f"{file_name}: invalid division {all_num} of {num_x}x{num_y}")
    if size_x <= 0 or size_y <= 0:
        raise ResourceError(f"{file_name}: invalid cell size {size_x}x{size_y}")
    width, height = sheet.get_size()
    if num_x * size_x > width or num_y * size_y > height:
        raise ResourceError(f"{file_name}: image is smaller than its division")
    cells = [
        (col * size_x, row * size_y) for row in range(num_y) for col in range(num_x)
    ]
    return [
        sheet.subsurface(pygame.Rect(left, top, size_x, size_y))
        for left, top in cells[:all_num]
    ]


def load_divided_image(
    file_name: str, all_num: int, num_x: int, num_y: int, size_x: int, size_y: int
) -> list[pygame.Surface]:
    """Load an image sheet and cut it into cells, row by row."""
    sheet = load_image(file_name)
    return _split_sheet(sheet, file_name, all_num, num_x, num_y, size_x, size_y)


def load_sound(file_name: str) -> Any:
    """Load a sound, starting the mixer if needed."""
    path = _require_file(file_name)
    try:
        if not pygame.mixer.get_init():
            pygame.mixer.init()
        return pygame.mixer.Sound(str(path))
    except (pygame.error, OSError) as exc:
        raise ResourceError(f"{file_name} could not be loaded") from exc


class ResourceManager:
    """Loads each image and sound file once and hands out the cached handles."""

    _instance: ClassVar[Optional["ResourceManager"]] = None

    def __init__(
        self,
        image_loader: Optional[Callable[[str], Any]] = None,
        sound_loader: Optional[Callable[[str], Any]] = None,
    ) -> None:
        self._image_loader = image_loader or load_image
        self._sound_loader = sound_loader or load_sound
        self._images: dict[str, tuple[Any, ...]] = {}
        self._sounds: dict[str, tuple[Any, ...]] = {}

    @classmethod
    def get_instance(cls) -> "ResourceManager":
        """Return the shared manager, creating it on first use."""
        if cls._instance is None:
            cls._instance = cls()
        return cls._instance

    @classmethod
    def delete_instance(cls) -> None:
        """Unload everything held by the shared manager and drop it."""
        if cls._instance is not None:
            cls._instance.unload_resources_all()
            cls._instance = None

    def _load_image(self, file_name: str) -> Any:
        image = self._image_loader(file_name)
        if image is None:
            raise ResourceError(f"{file_name} not found")
        return image

    def get_images(
        self,
        file_name: str | MaterialParam,
        all_num: int = 1,
        num_x: int = 1,
        num_y: int = 1,
        size_x: int = 0,
        size_y: int = 0,
    ) -> tuple[Any, ...]:
        """Return the images of a file, loading them on first request."""
        if isinstance(file_name, MaterialParam):
            param = file_name
            file_name, all_num = param.file_path, param.all_num
            num_x, num_y = param.num_x, param.num_y
            size_x, size_y = param.size_x, param.size_y

        if file_name not in self._images:
            if all_num == 1:
                images: tuple[Any, ...] = (self._load_image(file_name),)
            else:
                sheet = self._load_image(file_name)
                images = tuple(
                    _split_sheet(sheet, file_name, all_num, num_x, num_y, size_x, size_y)
                )
            self._images[file_name] = images
        return self._images[file_name]

    def get_sounds(self, file_name: str) -> tuple[Any, ...]:
        """Return the sound of a file, loading it on first request."""
        if file_name not in self._sounds:
            sound = self._sound_loader(file_name)
            if sound is None:
                raise ResourceError(f"{file_name} not found")
            self._sounds[file_name] = (sound,)
        return self._sounds[file_name]

    def unload_resources_all(self) -> None:
        """Stop all sounds and forget every cached image and sound."""
        for sounds in self._sounds.values():
            for sound in sounds:
                stop = getattr(sound, "stop", None)
                if callable(stop):
                    stop()
        self._images.clear()
        self._sounds.clear()