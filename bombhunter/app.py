"""Window, main loop and command line entry point."""

from __future__ import annotations

import argparse
import sys
from typing import Any, Optional, Sequence

import pygame

from .input_control import InputControl, Key
from .resource_manager import ResourceError, ResourceManager
from .scene import SCREEN_SIZE, Scene
from .score import FRAME_RATE, HIGH_SCORE_PATH

_KEY_MAP = {
    pygame.K_ESCAPE: Key.ESCAPE,
    pygame.K_z: Key.Z,
    pygame.K_SPACE: Key.SPACE,
    pygame.K_LEFT: Key.LEFT,
    pygame.K_RIGHT: Key.RIGHT,
}


def _is_down(key_states: Any, key: int) -> bool:
    try:
        return bool(key_states[key])
    except (IndexError, KeyError):
        return False


def pressed_keys(key_states: Any) -> frozenset[Key]:
    """Game key codes of the keys held in a pygame key-state table."""
    return frozenset(
        game_key for pg_key, game_key in _KEY_MAP.items() if _is_down(key_states, pg_key)
    )


def _run(screen: pygame.Surface, scene: Scene, input_control: InputControl) -> None:
    clock = pygame.time.Clock()
    while True:
        if any(event.type == pygame.QUIT for event in pygame.event.get()):
            return
        keys = pygame.key.get_pressed()
        if _is_down(keys, pygame.K_ESCAPE):
            return
        input_control.update(pressed_keys(keys))
        scene.update()
        screen.fill((0, 0, 0))
        scene.draw(screen)
        pygame.display.flip()
        clock.tick(FRAME_RATE)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Open the window and play until it is closed or Escape is pressed."""
    parser = argparse.ArgumentParser(prog="bombhunter", description="Bombing Hunter")
    parser.add_argument(
        "--high-score",
        default=HIGH_SCORE_PATH,
        help="file that keeps the high score",
    )
    args = parser.parse_args(argv)

    pygame.init()
    result = 0
    try:
        screen = pygame.display.set_mode(SCREEN_SIZE)
        pygame.display.set_caption("Bombing Hunter")
        input_control = InputControl()
        scene = Scene(input_control, high_score_path=args.high_score)
        try:
            scene.initialize()
            _run(screen, scene, input_control)
        except ResourceError as exc:
            print(exc, file=sys.stderr)
            result = 1
        finally:
            scene.finalize()
            ResourceManager.delete_instance()
    finally:
        pygame.quit()
    return result