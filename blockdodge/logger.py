"""Markdown logger for gameplay events (spawns, teleports, collisions)."""

from __future__ import annotations

import datetime


class GameLogger:
    """Handles logging of game events to markdown file."""

    def __init__(self, log_file: str):
        """
        Initialize the game logger.

        Parameters
        ----------
        log_file : str
            Path to the log file
        """
        self.log_file = log_file
        self.setup_log()

    def setup_log(self) -> None:
        """Initialize the log file with headers."""
        try:
            with open(self.log_file, 'w', encoding='utf-8') as f:
                f.write("# Block Dodge Game Log\n\n")
                f.write(f"Log started at: {datetime.datetime.now().strftime('%Y-%m-%d %H:%M:%S')}\n\n")
                f.write("## Simulation Events\n\n")
                f.write("| Timestamp | Event | Position (x,y) | Details |\n")
                f.write("|-----------|-------|----------------|---------|\n")
        except OSError as e:
            print(f"Failed to initialize log file: {e}")

    def _write_row(self, event: str, pos: tuple[float, float] | None, details: str) -> None:
        timestamp = datetime.datetime.now().strftime('%H:%M:%S.%f')[:-3]  # Include milliseconds
        where = f"({pos[0]:.1f}, {pos[1]:.1f})" if pos is not None else "-"
        try:
            with open(self.log_file, 'a', encoding='utf-8') as f:
                f.write(f"| {timestamp} | {event} | {where} | {details} |\n")
        except OSError as e:
            print(f"Failed to log {event.lower()}: {e}")

    def log_spawn(self, pos: tuple[float, float], direction: str, source: str) -> None:
        """
        Log a block spawn.

        Parameters
        ----------
        pos : tuple[float, float]
            World position the block starts at
        direction : str
            Name of the direction the block travels
        source : str
            "initial" or "periodic"
        """
        self._write_row("SPAWN", pos, f"{source} block moving {direction}")

    def log_spawn_skipped(self, reason: str) -> None:
        """Log a spawn cycle that produced no block."""
        self._write_row("SKIP", None, reason)

    def log_teleport(self, start: tuple[float, float], end: tuple[float, float]) -> None:
        self._write_row("TELEPORT", start, f"to ({end[0]:.1f}, {end[1]:.1f})")

    def log_collision(self, pos: tuple[float, float], block_pos: tuple[float, float], survived_seconds: float) -> None:
        """
        Log the collision that destroyed the player.

        Parameters
        ----------
        pos : tuple[float, float]
            Player position at impact
        block_pos : tuple[float, float]
            Position of the block that was hit
        survived_seconds : float
            Simulated time the player stayed alive
        """
        self._write_row(
            "COLLISION", pos,
            f"hit block at ({block_pos[0]:.1f}, {block_pos[1]:.1f}) after {survived_seconds:.2f}s",
        )
