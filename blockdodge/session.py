"""Top-level simulation state and the per-frame update order.

A ``DodgeSession`` owns the player slot, the block list, the spawn pool and
the RNG. The host calls ``start`` once and then ``tick`` every frame; nothing
in here draws, polls devices or sleeps.
"""

from __future__ import annotations

import random
import time
from collections.abc import Callable, Iterator

from blockdodge.collision import check, find_hit
from blockdodge.config import GameConfig
from blockdodge.entity import Block, Player
from blockdodge.errors import GameError, MissingPlayerError
from blockdodge.logger import GameLogger
from blockdodge.models import InputState, RenderInfo, SpawnMode
from blockdodge.motion import advance_all
from blockdodge.player import PlayerController
from blockdodge.spawn_pool import SpawnPositionPool
from blockdodge.spawner import BlockSpawner


class DodgeSession:
    """
    One play session, from the first frame until the player is hit.

    Per tick, in order: player input -> periodic spawns -> block motion ->
    collision. After the player is destroyed only block motion keeps running,
    so the field stays animated behind a game-over overlay.
    """

    def __init__(self, config: GameConfig | None = None, clock: Callable[[], float] | None = None,
                 rng: random.Random | None = None, logger: GameLogger | None = None,
                 pool: SpawnPositionPool | None = None) -> None:
        """
        Parameters
        ----------
        config : GameConfig | None
            Tunables; defaults to ``GameConfig()``.
        clock : Callable[[], float] | None
            Monotonic wall-clock reader in seconds used for spawn cadence.
        rng : random.Random | None
            Source of randomness; seeded from ``config.seed`` when omitted.
        logger : GameLogger | None
            Event log, or None to skip logging.
        pool : SpawnPositionPool | None
            Prebuilt spawn pool; built from the config when omitted. Its
            ``mark_spawned`` is overwritten with ``config.mark_spawned``.
        """
        self.config = config or GameConfig()
        self.config.validate()
        self.clock = clock or time.monotonic
        self.rng = rng or random.Random(self.config.seed)
        self.logger = logger
        self.pool = pool or SpawnPositionPool.build(self.config)
        self.pool.mark_spawned = self.config.mark_spawned

        self.player: Player | None = None
        self.blocks: list[Block] = []
        self.spawner = BlockSpawner(self.config, self.pool, self.rng, logger)
        self.controller = PlayerController(self.config.bounds, self.config.wrap_after_teleport)

        self.started = False
        self.game_over = False
        self.elapsed_seconds = 0.0      # simulated time survived
        self.teleports = 0

    # --------------------------------- Setup ----------------------------------------

    def spawn_player(self) -> Player:
        """Fill the player slot at the centre of the screen."""
        if self.player is not None:
            raise MissingPlayerError("A player already exists; exactly one is allowed")
        self.player = Player(
            (0.0, 0.0),
            self.config.player_size,
            self.config.player_speed,
            self.config.teleport_distance,
            self.config.player_color,
        )
        return self.player

    def start(self) -> None:
        """
        Spawn the player and the starting blocks and arm the spawn timer.

        Raises
        ------
        ConfigurationError
            If the spawn pool cannot hold the starting blocks.
        """
        if self.started:
            raise GameError("Session already started")
        if self.config.spawn_mode is SpawnMode.POOL:
            self.pool.validate(self.config.initial_block_count)

        self.spawn_player()
        self.spawner.spawn_initial(self.blocks, self.config.initial_block_count)
        self.spawner.trigger.start(self.clock())
        self.started = True

    # --------------------------------- Queries --------------------------------------

    def require_player(self) -> Player:
        if self.player is None or not self.player.alive:
            raise MissingPlayerError("Expected exactly one live player, found none")
        return self.player

    @property
    def player_alive(self) -> bool:
        return self.player is not None and self.player.alive

    @property
    def blocks_spawned(self) -> int:
        return self.spawner.spawned

    @property
    def spawns_skipped(self) -> int:
        return self.spawner.skipped

    def renderables(self) -> Iterator[RenderInfo]:
        """Live entities in draw order: blocks, then the player on top."""
        for block in self.blocks:
            if block.alive:
                yield block.render_info()
        if self.player_alive:
            yield self.player.render_info()

    # --------------------------------- Update ---------------------------------------

    def tick(self, input_state: InputState, delta_seconds: float) -> bool:
        """
        Advance the simulation by one frame.

        Parameters
        ----------
        input_state : InputState
            Input sampled for this frame.
        delta_seconds : float
            Time since the previous frame, >= 0.

        Returns
        -------
        bool
            True if the player was destroyed during this frame.
        """
        if delta_seconds < 0:
            raise ValueError(f"delta_seconds must be >= 0, got {delta_seconds}")
        if not self.started:
            raise MissingPlayerError("Session has not been started; no player exists yet")

        bounds = self.config.bounds

        if self.game_over:
            advance_all(self.blocks, delta_seconds, bounds)
            return False

        player = self.require_player()
        start = (player.position.x, player.position.y)
        if self.controller.update(input_state, player, delta_seconds):
            self.teleports += 1
            if self.logger:
                self.logger.log_teleport(start, (player.position.x, player.position.y))
        self.elapsed_seconds += delta_seconds

        self.spawner.maybe_spawn(self.clock(), self.blocks)
        advance_all(self.blocks, delta_seconds, bounds)

        if not check(player, self.blocks):
            return False

        self.player = None
        self.game_over = True
        if self.logger:
            hit = find_hit(player, self.blocks)
            self.logger.log_collision(
                (player.position.x, player.position.y),
                (hit.position.x, hit.position.y),
                self.elapsed_seconds,
            )
        return True
