"""The game's entry point: start-up checks, window and main loop."""

from __future__ import annotations

import argparse
import sys
import time
from typing import Dict, List, Optional, Sequence

import pygame
from pygame.math import Vector2

from .actor import Actor
from .controllers import InputAction, Key
from .game import DEFAULT_SCREEN_SIZE, World
from .objects import HealActor, Wall
from .physics import Collider, ObjectType, ResponseType, is_blocking, is_overlap
from .resources import ResourceNotFoundError, Resources
from .textures import Texture2D

WINDOW_TITLE = "Platformer2D"
BACKGROUND = (255, 255, 255)


def _check_block(texture: Texture2D) -> bool:
    actor = Actor(texture, "mush1", (0.0, 0.0), (100.0, 100.0), 0.0)
    actor.collider = Collider(ObjectType.CHARACTER, (0.0, 0.0))
    actor.collider.set_collision_response(ObjectType.CHARACTER, ResponseType.IGNORE)
    actor.collider.set_collision_response(ObjectType.STATIC_OBJECT, ResponseType.BLOCK)
    wall = Wall(texture, "wall", (0.0, 101.0), (100.0, 100.0), 0.0)
    return is_blocking(
        wall.collider.position,
        actor.collider.position + Vector2(0.0, 20.0),
        actor.collider.size,
        wall.collider.size,
        actor.collider,
        wall.collider,
    )


def _check_overlap(texture: Texture2D) -> bool:
    actor = Actor(texture, "mush1", (0.0, 0.0), (100.0, 100.0), 0.0)
    actor.collider = Collider(ObjectType.CHARACTER, (0.0, 0.0))
    actor.collider.set_collision_response(
        ObjectType.INTERACTIVE_OBJECT, ResponseType.OVERLAP
    )
    heal = HealActor(texture, "wall", (0.0, 101.0), (100.0, 100.0), 0.0)
    return is_overlap(
        heal.collider.position,
        actor.collider.position + Vector2(0.0, 20.0),
        actor.collider.size,
        heal.collider.size,
        actor.collider,
        heal.collider,
    )


def run_physics_checks(texture: Texture2D) -> Dict[str, bool]:
    """Run the start-up physics self-checks; each should come out True."""
    return {
        "block_between_two_objects": _check_block(texture),
        "overlap_between_two_objects": _check_overlap(texture),
    }


def _key_of(code: int) -> Optional[Key]:
    try:
        return Key(code)
    except ValueError:
        return None


_KEY_ACTIONS = {pygame.KEYDOWN: InputAction.PRESS, pygame.KEYUP: InputAction.RELEASE}
_MOUSE_ACTIONS = {
    pygame.MOUSEBUTTONDOWN: InputAction.PRESS,
    pygame.MOUSEBUTTONUP: InputAction.RELEASE,
}


def _dispatch(world: World, event: pygame.event.Event) -> bool:
    """Route one event to the player; return False when the game should stop."""
    if event.type == pygame.QUIT:
        return False
    character = world.main_character
    if character is None:
        return True
    if event.type in _KEY_ACTIONS:
        key = _key_of(event.key)
        if key is not None and character.handle_key(key, _KEY_ACTIONS[event.type]):
            return False
    elif event.type in _MOUSE_ACTIONS:
        character.handle_mouse(event.button, _MOUSE_ACTIONS[event.type], event.pos)
    return True


def run(resources: Resources, screen_size: Sequence[int] = DEFAULT_SCREEN_SIZE) -> int:
    """Open the window and play until it is closed; return an exit status."""
    pygame.init()
    try:
        try:
            surface = pygame.display.set_mode((int(screen_size[0]), int(screen_size[1])))
        except pygame.error as exc:
            print(f"Cant create a window: {exc}", file=sys.stderr)
            return 1
        pygame.display.set_caption(WINDOW_TITLE)
        world = World(resources, screen_size, surface)
        world.begin_play()

        last = time.perf_counter()
        running = True
        while running:
            for event in pygame.event.get():
                if not _dispatch(world, event):
                    running = False
            surface.fill(BACKGROUND)
            now = time.perf_counter()
            world.update(now - last)
            last = now
            pygame.display.flip()
    finally:
        pygame.quit()
    return 0


def _positive(text: str) -> int:
    value = int(text)
    if value <= 0:
        raise argparse.ArgumentTypeError("must be a positive integer")
    return value


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(
        prog="mushroom-dungeon", description="A top-down mushroom shooter."
    )
    parser.add_argument(
        "--resources",
        help="directory holding the resources folder (default: the program's directory)",
    )
    parser.add_argument("--width", type=_positive, default=DEFAULT_SCREEN_SIZE[0])
    parser.add_argument("--height", type=_positive, default=DEFAULT_SCREEN_SIZE[1])
    args = parser.parse_args(argv)

    if args.resources:
        resources = Resources(args.resources)
    else:
        resources = Resources.from_executable(sys.argv[0])

    try:
        texture = resources.load_all()
    except ResourceNotFoundError as exc:
        print(exc, file=sys.stderr)
        return 1

    print("Physic tests: ")
    for name, passed in run_physics_checks(texture).items():
        print(f"{name}: {int(passed)}")

    return run(resources, (args.width, args.height))


if __name__ == "__main__":
    sys.exit(main())