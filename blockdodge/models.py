"""Lightweight data models used across the game."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from pygame.math import Vector2


class Direction(Enum):
    """Travel direction of a block. World y grows upward."""

    LEFT = (-1, 0)
    RIGHT = (1, 0)
    UP = (0, 1)
    DOWN = (0, -1)

    @property
    def vector(self) -> Vector2:
        return Vector2(self.value)


class Axis(Enum):
    """The two partitions of the spawn pool."""

    VERTICAL = "vertical"       # top/bottom edges, blocks move up/down
    HORIZONTAL = "horizontal"   # left/right edges, blocks move left/right


class SpawnMode(Enum):
    POOL = "pool"
    UNIFORM = "uniform"


@dataclass
class SpawnInfo:
    """
    One candidate slot in the spawn pool.

    Attributes
    ----------
    location : tuple[float, float]
        The (x, y) world position a block spawned here starts at.
    direction : Direction
        The direction the spawned block travels.
    spawned : bool
        Whether the slot is taken. Only written when spawn tracking is on.
    """
    location: tuple[float, float]
    direction: Direction
    spawned: bool = False


@dataclass(frozen=True)
class InputState:
    """
    Abstract per-frame input: four held directions plus a teleport press.

    ``teleport`` must be true only on the frame the action was pressed.
    """
    up: bool = False
    down: bool = False
    left: bool = False
    right: bool = False
    teleport: bool = False

    def axis(self) -> tuple[int, int]:
        """Combine opposing pairs into (x, y) values in {-1, 0, 1}."""
        return (int(self.right) - int(self.left), int(self.up) - int(self.down))


@dataclass(frozen=True)
class RenderInfo:
    """What an external renderer needs to draw one live entity."""
    position: tuple[float, float]
    size: tuple[float, float]
    color: tuple[int, int, int]
