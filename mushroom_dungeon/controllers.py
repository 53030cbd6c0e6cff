"""Keyboard input mapping and movement controllers."""

from __future__ import annotations

import enum
from typing import Any, Optional, Sequence

import pygame
from pygame.math import Vector2

UP_VECTOR = Vector2(0.0, 1.0)
RIGHT_VECTOR = Vector2(1.0, 0.0)


class InputAction(enum.Enum):
    """What happened to a key or button."""

    PRESS = enum.auto()
    RELEASE = enum.auto()
    REPEAT = enum.auto()


class Key(enum.Enum):
    """Keys the game reacts to, valued by their pygame key codes."""

    ESCAPE = pygame.K_ESCAPE
    W = pygame.K_w
    S = pygame.K_s
    D = pygame.K_d
    A = pygame.K_a


_DIRECTIONS = {
    Key.W: UP_VECTOR,
    Key.S: -UP_VECTOR,
    Key.D: RIGHT_VECTOR,
    Key.A: -RIGHT_VECTOR,
}


def movement_for_key(key: Key, action: InputAction) -> Vector2:
    """Return the change to a move vector caused by ``action`` on ``key``.

    Pressing adds the key's direction, releasing takes it away again,
    and anything else changes nothing.
    """
    direction = _DIRECTIONS.get(key)
    if direction is None:
        return Vector2(0.0, 0.0)
    if action is InputAction.PRESS:
        return Vector2(direction)
    if action is InputAction.RELEASE:
        return -direction
    return Vector2(0.0, 0.0)


class Controller:
    """Holds a move vector and speed, and whether move input is ignored."""

    def __init__(self, move_speed: float = 0.0) -> None:
        self.move_speed = float(move_speed)
        self.move_vector = Vector2(0.0, 0.0)
        self.paused = False
        self.ignore_move_input = False

    def change_move_vector(self, value: Sequence[float]) -> None:
        self.move_vector += Vector2(value)


class PlayerController(Controller):
    """A controller driven by the keyboard."""

    def __init__(self, move_speed: float) -> None:
        super().__init__(move_speed)
        self.character: Optional[Any] = None

    def handle_key(self, key: Key, action: InputAction) -> bool:
        """Apply a key event; return True when the player asks to quit."""
        if action is InputAction.PRESS:
            if key is Key.ESCAPE:
                return True
            if self.ignore_move_input:
                return False
        delta = movement_for_key(key, action)
        if delta != Vector2(0.0, 0.0):
            self.change_move_vector(delta)
        return False

    def set_character(self, character: Any) -> None:
        self.character = character