from __future__ import annotations

import random

from blockdodge.config import GameConfig
from blockdodge.entity import Block
from blockdodge.errors import EmptyPoolError
from blockdodge.logger import GameLogger
from blockdodge.models import Direction, SpawnMode
from blockdodge.spawn_pool import SpawnPositionPool

DIRECTIONS = tuple(Direction)

# Tolerance for accumulated float clock readings landing just short of a boundary
_EPSILON = 1e-9


def random_direction(rng: random.Random) -> Direction:
    """Uniform pick over the four directions."""
    return rng.choice(DIRECTIONS)


class FixedIntervalTrigger:
    """
    Fires once per elapsed interval of wall-clock time.

    Notes
    - Driven by absolute clock readings, not frame deltas, so the cadence is
      the same at any frame rate.
    - A long frame that spans several intervals reports each of them, up to
      ``max_per_check``; the rest are dropped.
    """

    def __init__(self, interval_seconds: float, max_per_check: int = 8) -> None:
        if interval_seconds <= 0:
            raise ValueError("interval_seconds must be > 0")
        if max_per_check < 1:
            raise ValueError("max_per_check must be >= 1")
        self.interval = interval_seconds
        self.max_per_check = max_per_check
        self.next_fire_at: float | None = None  # seconds timestamp of next fire

    def start(self, now: float) -> None:
        self.next_fire_at = now + self.interval

    def due(self, now: float) -> int:
        """
        Number of intervals that elapsed since the last check.

        Parameters
        ----------
        now : float
            Current wall-clock reading in seconds.
        """
        # Set initial schedule on first call
        if self.next_fire_at is None:
            self.start(now)
            return 0

        count = 0
        while now + _EPSILON >= self.next_fire_at:
            count += 1
            self.next_fire_at += self.interval
        return min(count, self.max_per_check)


class BlockSpawner:
    """
    Responsible for creating blocks at game start and on a fixed cadence.

    Two placement variants are supported:
    - POOL: draw a slot (location and direction) from the spawn pool.
    - UNIFORM: anywhere on screen with a uniformly random direction.

    A cycle that finds no free pool slot is skipped and retried on the next
    interval.
    """

    def __init__(self, config: GameConfig, pool: SpawnPositionPool, rng: random.Random,
                 logger: GameLogger | None = None) -> None:
        self.config = config
        self.pool = pool
        self.rng = rng
        self.logger = logger
        self.trigger = FixedIntervalTrigger(config.spawn_interval_seconds, config.max_spawns_per_tick)
        self.spawned = 0
        self.skipped = 0

    def make_block(self, color: tuple[int, int, int]) -> Block:
        """
        Build one block using the configured placement variant.

        Raises
        ------
        EmptyPoolError
            In POOL mode when the chosen axis has no free slot.
        """
        if self.config.spawn_mode is SpawnMode.UNIFORM:
            width, height = self.config.bounds
            location = (self.rng.uniform(-width / 2, width / 2), self.rng.uniform(-height / 2, height / 2))
            direction = random_direction(self.rng)
        else:
            info = self.pool.pick(self.rng)
            location, direction = info.location, info.direction

        return Block(location, self.config.block_size, self.config.block_speed, direction, color)

    def _spawn(self, blocks: list[Block], color: tuple[int, int, int], source: str) -> Block | None:
        try:
            block = self.make_block(color)
        except EmptyPoolError as e:
            self.skipped += 1
            if self.logger:
                self.logger.log_spawn_skipped(f"{source}: {e}")
            return None

        blocks.append(block)
        self.spawned += 1
        if self.logger:
            self.logger.log_spawn((block.position.x, block.position.y), block.direction.name, source)
        return block

    def spawn_initial(self, blocks: list[Block], count: int) -> list[Block]:
        """
        Spawn the starting blocks.

        Parameters
        ----------
        blocks : list[Block]
            Session block list, appended to.
        count : int
            Number of blocks to attempt.

        Returns
        -------
        list[Block]
            The blocks actually created.
        """
        created = []
        for _ in range(count):
            block = self._spawn(blocks, self.config.initial_block_color, "initial")
            if block is not None:
                created.append(block)
        return created

    def spawn_periodic(self, blocks: list[Block]) -> Block | None:
        """Spawn exactly one runtime block, or None if the cycle was skipped."""
        return self._spawn(blocks, self.config.runtime_block_color, "periodic")

    def maybe_spawn(self, now: float, blocks: list[Block]) -> int:
        """
        Spawn one block per interval that has elapsed on the wall clock.

        Returns
        -------
        int
            Number of blocks created this call.
        """
        created = 0
        for _ in range(self.trigger.due(now)):
            if self.spawn_periodic(blocks) is not None:
                created += 1
        return created
