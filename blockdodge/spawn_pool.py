"""Precomputed spawn slots along the four screen edges.

Vertical-edge slots sit on the top and bottom edges and send blocks down or
up; horizontal-edge slots sit on the left and right edges and send blocks
right or left. The pool is built once per session.
"""

from __future__ import annotations

import random

from blockdodge.config import GameConfig
from blockdodge.errors import ConfigurationError, EmptyPoolError
from blockdodge.models import Axis, Direction, SpawnInfo


def edge_offsets(extent: float, size: float) -> list[float]:
    """Centres of as many ``size``-wide cells as fit in ``extent``, centred on 0."""
    count = max(1, int(extent // size))
    start = -(count - 1) * size / 2
    return [start + i * size for i in range(count)]


class SpawnPositionPool:
    """
    Two ordered lists of ``SpawnInfo``, one per orientation.

    Notes
    - Picking does not mark a slot spawned unless ``mark_spawned`` is set, so
      by default the same slot can be reused any number of times.
    - ``pick`` only looks at the chosen axis; a full axis fails even if the
      other one still has room.
    """

    def __init__(self, vertical: list[SpawnInfo], horizontal: list[SpawnInfo], mark_spawned: bool = False) -> None:
        self.vertical = vertical
        self.horizontal = horizontal
        self.mark_spawned = mark_spawned

    @classmethod
    def build(cls, config: GameConfig) -> SpawnPositionPool:
        """
        Lay out one slot per block-sized cell along every edge.

        Parameters
        ----------
        config : GameConfig
            Supplies the screen bounds, block size and the tracking toggle.

        Returns
        -------
        SpawnPositionPool
            The populated pool.
        """
        width, height = config.bounds
        block_w, block_h = config.block_size
        half_w, half_h = width / 2, height / 2

        vertical = []
        for x in edge_offsets(width, block_w):
            vertical.append(SpawnInfo((x, half_h), Direction.DOWN))
            vertical.append(SpawnInfo((x, -half_h), Direction.UP))

        horizontal = []
        for y in edge_offsets(height, block_h):
            horizontal.append(SpawnInfo((-half_w, y), Direction.RIGHT))
            horizontal.append(SpawnInfo((half_w, y), Direction.LEFT))

        return cls(vertical, horizontal, mark_spawned=config.mark_spawned)

    def slots(self, axis: Axis) -> list[SpawnInfo]:
        return self.vertical if axis is Axis.VERTICAL else self.horizontal

    def free_count(self, axis: Axis | None = None) -> int:
        """Number of slots not marked spawned, on one axis or both."""
        axes = (axis,) if axis is not None else (Axis.VERTICAL, Axis.HORIZONTAL)
        return sum(1 for a in axes for info in self.slots(a) if not info.spawned)

    def pick(self, rng: random.Random, axis: Axis | None = None) -> SpawnInfo:
        """
        Choose a free slot, picking the axis uniformly first when none is given.

        Raises
        ------
        EmptyPoolError
            If every slot on the chosen axis is marked spawned.
        """
        if axis is None:
            axis = rng.choice((Axis.VERTICAL, Axis.HORIZONTAL))

        candidates = [info for info in self.slots(axis) if not info.spawned]
        if not candidates:
            raise EmptyPoolError(f"No free {axis.value} spawn slot")

        choice = rng.choice(candidates)
        if self.mark_spawned:
            choice.spawned = True
        return choice

    def release_all(self) -> None:
        for info in self.vertical + self.horizontal:
            info.spawned = False

    def validate(self, required_slots: int) -> None:
        """
        Fail fast on a pool that can never satisfy the configured spawns.

        ``pick`` commits to an axis before looking for a free slot, so every
        axis must be able to serve the whole demand on its own.

        Parameters
        ----------
        required_slots : int
            Blocks that must be placed at startup.
        """
        for axis in (Axis.VERTICAL, Axis.HORIZONTAL):
            if not self.slots(axis):
                raise ConfigurationError(f"Spawn pool has no {axis.value} slots")
            if self.mark_spawned and self.free_count(axis) < required_slots:
                raise ConfigurationError(
                    f"Spawn pool has {self.free_count(axis)} free {axis.value} slots "
                    f"but {required_slots} blocks must spawn at start"
                )
