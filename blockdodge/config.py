"""Tunable game configuration.

``GameConfig`` starts from the values in ``constants`` and can be overridden
in code (``replace``) or from a flat TOML file (``from_toml``)::

    player_speed = 450.0
    spawn_interval_seconds = 1.5
    spawn_mode = "uniform"
    block_size = [60, 60]
"""

from __future__ import annotations

import dataclasses
import tomllib
from dataclasses import dataclass, fields
from typing import Any

from blockdodge import constants
from blockdodge.errors import ConfigurationError
from blockdodge.models import SpawnMode

_PAIR_FIELDS = {"player_size", "block_size"}
_COLOR_FIELDS = {"player_color", "initial_block_color", "runtime_block_color"}
_BOOL_FIELDS = {"mark_spawned", "wrap_after_teleport"}
_INT_FIELDS = {"width", "height", "fps", "initial_block_count", "max_spawns_per_tick", "seed"}


@dataclass(frozen=True)
class GameConfig:
    width: int = constants.WIDTH
    height: int = constants.HEIGHT
    fps: int = constants.FPS

    player_size: tuple[float, float] = constants.PLAYER_SIZE
    player_speed: float = constants.PLAYER_SPEED
    teleport_distance: float = constants.PLAYER_TELEPORT_DISTANCE
    player_color: tuple[int, int, int] = constants.PLAYER_COLOR
    wrap_after_teleport: bool = constants.WRAP_AFTER_TELEPORT

    block_size: tuple[float, float] = constants.BLOCK_SIZE
    block_speed: float = constants.BLOCK_SPEED
    initial_block_color: tuple[int, int, int] = constants.INITIAL_BLOCK_COLOR
    runtime_block_color: tuple[int, int, int] = constants.RUNTIME_BLOCK_COLOR

    initial_block_count: int = constants.INITIAL_BLOCK_COUNT
    spawn_interval_seconds: float = constants.SPAWN_INTERVAL_SECONDS
    max_spawns_per_tick: int = constants.MAX_SPAWNS_PER_TICK
    spawn_mode: SpawnMode = SpawnMode(constants.SPAWN_MODE)
    mark_spawned: bool = constants.MARK_SPAWNED

    seed: int | None = None

    @property
    def bounds(self) -> tuple[float, float]:
        """Screen extent (width, height) in world units."""
        return (float(self.width), float(self.height))

    def replace(self, **changes: Any) -> GameConfig:
        """Return a validated copy with ``changes`` applied."""
        config = dataclasses.replace(self, **changes)
        config.validate()
        return config

    def validate(self) -> None:
        """
        Raise ``ConfigurationError`` if any value is out of range.
        """
        if self.width <= 0 or self.height <= 0:
            raise ConfigurationError(f"Screen size must be positive, got {self.width}x{self.height}")
        if self.fps <= 0:
            raise ConfigurationError(f"fps must be positive, got {self.fps}")
        for name in _PAIR_FIELDS:
            w, h = getattr(self, name)
            if w <= 0 or h <= 0:
                raise ConfigurationError(f"{name} must be positive, got {w}x{h}")
        for name in ("player_speed", "block_speed", "teleport_distance"):
            if getattr(self, name) < 0:
                raise ConfigurationError(f"{name} must not be negative")
        if self.initial_block_count < 0:
            raise ConfigurationError("initial_block_count must not be negative")
        if self.spawn_interval_seconds <= 0:
            raise ConfigurationError("spawn_interval_seconds must be positive")
        if self.max_spawns_per_tick < 1:
            raise ConfigurationError("max_spawns_per_tick must be at least 1")

    # --------------------------------- Loading ----------------------------------------

    @classmethod
    def from_mapping(cls, data: dict[str, Any]) -> GameConfig:
        """
        Build a config from plain values, e.g. a parsed TOML document.

        Parameters
        ----------
        data : dict[str, Any]
            Field names mapped to raw values. Missing fields keep their defaults.

        Returns
        -------
        GameConfig
            A validated config.
        """
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(data) - known)
        if unknown:
            raise ConfigurationError(f"Unknown config keys: {', '.join(unknown)}")

        config = cls(**{name: _coerce(name, raw) for name, raw in data.items()})
        config.validate()
        return config

    @classmethod
    def from_toml(cls, path: str) -> GameConfig:
        """Load overrides from a flat TOML file."""
        try:
            with open(path, "rb") as f:
                data = tomllib.load(f)
        except (OSError, tomllib.TOMLDecodeError) as e:
            raise ConfigurationError(f"Failed to read config {path}: {e}") from e
        return cls.from_mapping(data)


def _coerce(name: str, raw: Any) -> Any:
    if name == "spawn_mode":
        try:
            return SpawnMode(raw)
        except ValueError:
            raise ConfigurationError(f"spawn_mode must be 'pool' or 'uniform', got {raw!r}") from None

    if name in _BOOL_FIELDS:
        if not isinstance(raw, bool):
            raise ConfigurationError(f"{name} must be true or false, got {raw!r}")
        return raw

    if name in _PAIR_FIELDS or name in _COLOR_FIELDS:
        length = 2 if name in _PAIR_FIELDS else 3
        if not isinstance(raw, (list, tuple)) or len(raw) != length or not all(_is_number(v) for v in raw):
            raise ConfigurationError(f"{name} must be a list of {length} numbers, got {raw!r}")
        return tuple(raw)

    if name in _INT_FIELDS:
        if not isinstance(raw, int) or isinstance(raw, bool):
            raise ConfigurationError(f"{name} must be an integer, got {raw!r}")
        return raw

    if not _is_number(raw):
        raise ConfigurationError(f"{name} must be a number, got {raw!r}")
    return float(raw)


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)
