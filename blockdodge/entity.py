"""Entity types owned by a session: the player square and the blocks."""

from __future__ import annotations

from pygame.math import Vector2

from blockdodge.models import Direction, RenderInfo


class Entity:
    """
    Axis-aligned square with a centre position, fixed size and scalar speed.

    ``velocity`` is in world units per second.
    """

    def __init__(self, position: tuple[float, float], size: tuple[float, float],
                 velocity: float, color: tuple[int, int, int]) -> None:
        self.position = Vector2(position)
        self.size = Vector2(size)
        self.velocity = velocity
        self.color = color
        self.alive = True

    @property
    def half_size(self) -> Vector2:
        return self.size / 2

    def render_info(self) -> RenderInfo:
        return RenderInfo(
            (self.position.x, self.position.y),
            (self.size.x, self.size.y),
            self.color,
        )

    def __repr__(self) -> str:
        return f"{type(self).__name__}(pos=({self.position.x:.1f}, {self.position.y:.1f}), alive={self.alive})"


class Block(Entity):
    """An obstacle that travels in one fixed direction forever."""

    def __init__(self, position: tuple[float, float], size: tuple[float, float], velocity: float,
                 direction: Direction, color: tuple[int, int, int]) -> None:
        super().__init__(position, size, velocity, color)
        self._direction = direction

    @property
    def direction(self) -> Direction:
        return self._direction


class Player(Entity):
    """The controllable square. Destroyed on its first collision."""

    def __init__(self, position: tuple[float, float], size: tuple[float, float], velocity: float,
                 teleport_distance: float, color: tuple[int, int, int]) -> None:
        super().__init__(position, size, velocity, color)
        self.teleport_distance = teleport_distance

    def destroy(self) -> None:
        self.alive = False
