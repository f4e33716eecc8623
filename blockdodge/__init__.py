"""Simulation core for Block Dodge: spawning, motion, wraparound and collision."""

from blockdodge.config import GameConfig
from blockdodge.errors import ConfigurationError, EmptyPoolError, GameError, MissingPlayerError
from blockdodge.models import Axis, Direction, InputState, RenderInfo, SpawnInfo, SpawnMode
from blockdodge.session import DodgeSession
