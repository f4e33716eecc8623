from __future__ import annotations

import pytest

from blockdodge.config import GameConfig
from blockdodge.entity import Block
from blockdodge.errors import ConfigurationError, GameError, MissingPlayerError
from blockdodge.logger import GameLogger
from blockdodge.models import Direction, InputState, SpawnInfo
from blockdodge.session import DodgeSession
from blockdodge.spawn_pool import SpawnPositionPool

IDLE = InputState()


def _run(session: DodgeSession, clock, delta: float, frames: int, input_state: InputState = IDLE) -> None:
    for _ in range(frames):
        clock.advance(delta)
        session.tick(input_state, delta)


def test_start_creates_player_and_initial_blocks(config: GameConfig, clock) -> None:
    session = DodgeSession(config, clock=clock)

    session.start()

    assert session.player_alive
    assert (session.player.position.x, session.player.position.y) == (0, 0)
    assert len(session.blocks) == 5
    assert session.blocks_spawned == 5


def test_tick_before_start_is_missing_player(config: GameConfig, clock) -> None:
    session = DodgeSession(config, clock=clock)

    with pytest.raises(MissingPlayerError):
        session.tick(IDLE, 1 / 60)
    with pytest.raises(MissingPlayerError):
        session.require_player()


def test_only_one_player_allowed(config: GameConfig, clock) -> None:
    session = DodgeSession(config, clock=clock)
    session.start()

    with pytest.raises(MissingPlayerError):
        session.spawn_player()
    with pytest.raises(GameError):
        session.start()


def test_negative_delta_is_rejected(config: GameConfig, clock) -> None:
    session = DodgeSession(config, clock=clock)
    session.start()

    with pytest.raises(ValueError):
        session.tick(IDLE, -0.1)


def test_start_rejects_pool_too_small_for_tracked_spawns(clock) -> None:
    config = GameConfig(mark_spawned=True, initial_block_count=100)

    with pytest.raises(ConfigurationError):
        DodgeSession(config, clock=clock).start()


def test_start_rejects_pool_with_an_empty_axis(clock) -> None:
    pool = SpawnPositionPool([SpawnInfo((200.0, 450.0), Direction.DOWN)], [])
    session = DodgeSession(GameConfig(initial_block_count=20), clock=clock, pool=pool)

    with pytest.raises(ConfigurationError, match="no horizontal slots"):
        session.start()

    assert session.blocks == []
    assert session.spawns_skipped == 0


@pytest.mark.parametrize("mark_spawned", [False, True])
def test_injected_pool_follows_config_tracking(far_pool, clock, mark_spawned: bool) -> None:
    far_pool.mark_spawned = not mark_spawned

    session = DodgeSession(GameConfig(mark_spawned=mark_spawned), clock=clock, pool=far_pool)

    assert session.pool is far_pool
    assert far_pool.mark_spawned is mark_spawned


@pytest.mark.parametrize(("delta", "frames"), [(1 / 30, 240), (1 / 60, 480)])
def test_periodic_spawns_follow_wall_clock(far_pool, clock, delta: float, frames: int) -> None:
    session = DodgeSession(GameConfig(initial_block_count=0), clock=clock, pool=far_pool)
    session.start()

    _run(session, clock, delta, frames)

    assert session.player_alive
    assert session.blocks_spawned == 4
    assert len(session.blocks) == 4


def test_end_to_end_idle_second_then_one_interval(far_pool, clock) -> None:
    session = DodgeSession(GameConfig(seed=99), clock=clock, pool=far_pool)
    session.start()
    starts = [(b.position.x, b.position.y, b.direction) for b in session.blocks]
    assert len(starts) == 5

    _run(session, clock, 1 / 60, 60)

    assert session.player_alive
    assert (session.player.position.x, session.player.position.y) == (0, 0)
    assert len(session.blocks) == 5
    for block, (x, y, direction) in zip(session.blocks, starts):
        step = direction.vector * 300.0
        assert block.position.x == pytest.approx(x + step.x)
        assert block.position.y == pytest.approx(y + step.y)

    clock.advance(1.0)
    session.tick(IDLE, 1.0)

    assert session.player_alive
    assert len(session.blocks) == 6


def test_collision_ends_the_session(config: GameConfig, clock, tmp_path) -> None:
    log_file = tmp_path / "log.md"
    session = DodgeSession(config.replace(initial_block_count=0), clock=clock, logger=GameLogger(str(log_file)))
    session.start()
    session.blocks.append(Block((200, 0), (80, 80), 300.0, Direction.LEFT, (255, 0, 0)))

    destroyed = session.tick(IDLE, 0.5)

    assert destroyed is True
    assert session.game_over
    assert session.player is None
    assert not session.player_alive
    assert session.elapsed_seconds == pytest.approx(0.5)
    assert "| COLLISION |" in log_file.read_text(encoding="utf-8")
    with pytest.raises(MissingPlayerError):
        session.require_player()


def test_after_game_over_blocks_move_but_nothing_spawns(config: GameConfig, clock) -> None:
    session = DodgeSession(config.replace(initial_block_count=0), clock=clock)
    session.start()
    block = Block((50, 0), (80, 80), 300.0, Direction.UP, (255, 0, 0))
    session.blocks.append(block)
    assert session.tick(IDLE, 0.0) is True

    clock.advance(10.0)
    assert session.tick(IDLE, 0.5) is False

    assert block.position.y == pytest.approx(150)
    assert session.blocks == [block]
    assert session.elapsed_seconds == 0


def test_teleports_are_counted_and_logged(config: GameConfig, clock, tmp_path) -> None:
    log_file = tmp_path / "log.md"
    session = DodgeSession(config.replace(initial_block_count=0), clock=clock, logger=GameLogger(str(log_file)))
    session.start()

    session.tick(InputState(right=True, teleport=True), 0.0)
    session.tick(InputState(right=True), 0.0)

    assert session.teleports == 1
    assert session.player.position.x == 150
    assert "| TELEPORT |" in log_file.read_text(encoding="utf-8")


def test_cancelled_teleport_is_still_counted(config: GameConfig, clock) -> None:
    session = DodgeSession(config.replace(initial_block_count=0), clock=clock)
    session.start()

    session.tick(InputState(up=True, down=True, teleport=True), 0.0)

    assert session.teleports == 1
    assert (session.player.position.x, session.player.position.y) == (0, 0)


def test_renderables_draw_player_last(config: GameConfig, clock) -> None:
    session = DodgeSession(config, clock=clock)
    session.start()

    infos = list(session.renderables())

    assert len(infos) == 6
    assert infos[-1].color == config.player_color
    assert infos[-1].size == (40, 40)
    assert all(info.size == (80, 80) for info in infos[:-1])


def test_same_seed_same_field(clock) -> None:
    first = DodgeSession(GameConfig(seed=5), clock=clock)
    second = DodgeSession(GameConfig(seed=5), clock=clock)
    first.start()
    second.start()

    assert [tuple(b.position) for b in first.blocks] == [tuple(b.position) for b in second.blocks]
    assert [b.direction for b in first.blocks] == [b.direction for b in second.blocks]
