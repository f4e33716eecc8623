"""Axis-aligned bounding-box collision between the player and blocks."""

from __future__ import annotations

from blockdodge.entity import Block, Entity, Player


def overlaps(a: Entity, b: Entity) -> bool:
    """Strict AABB test: touching edges do not count."""
    dx = abs(a.position.x - b.position.x)
    dy = abs(a.position.y - b.position.y)
    return dx < (a.half_size.x + b.half_size.x) and dy < (a.half_size.y + b.half_size.y)


def find_hit(player: Player, blocks: list[Block]) -> Block | None:
    """Return the first live block overlapping the player, if any."""
    for block in blocks:
        if block.alive and overlaps(player, block):
            return block
    return None


def check(player: Player, blocks: list[Block]) -> bool:
    """
    Destroy the player if it overlaps any block.

    Returns
    -------
    bool
        True if the player was hit this frame.
    """
    if find_hit(player, blocks) is None:
        return False
    player.destroy()
    return True
