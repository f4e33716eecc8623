"""Frame-rate independent movement and screen wraparound."""

from __future__ import annotations

from pygame.math import Vector2

from blockdodge.entity import Block, Entity


def wrap(position: Vector2, half_size: Vector2, bounds: tuple[float, float]) -> bool:
    """
    Teleport ``position`` to the opposite edge once it has fully left the screen.

    Each axis is checked on its own. The reset is hard: the position lands
    exactly on the opposite edge however far it overshot.

    Parameters
    ----------
    position : Vector2
        Entity centre, modified in place.
    half_size : Vector2
        Half of the entity's width and height.
    bounds : tuple[float, float]
        Screen (width, height) in world units, centred on the origin.

    Returns
    -------
    bool
        True if either axis wrapped.
    """
    wrapped = False
    for axis in (0, 1):
        edge = bounds[axis] / 2
        limit = edge + half_size[axis]
        if position[axis] > limit:
            position[axis] = -edge
            wrapped = True
        elif position[axis] < -limit:
            position[axis] = edge
            wrapped = True
    return wrapped


def displace(entity: Entity, axis_vector: Vector2, delta_seconds: float, bounds: tuple[float, float]) -> None:
    """Move ``entity`` along ``axis_vector`` at its own speed, then wrap."""
    entity.position += axis_vector * (entity.velocity * delta_seconds)
    wrap(entity.position, entity.half_size, bounds)


def advance(block: Block, delta_seconds: float, bounds: tuple[float, float]) -> None:
    displace(block, block.direction.vector, delta_seconds, bounds)


def advance_all(blocks: list[Block], delta_seconds: float, bounds: tuple[float, float]) -> None:
    for block in blocks:
        advance(block, delta_seconds, bounds)
