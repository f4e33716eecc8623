"""Player movement from abstract directional input."""

from __future__ import annotations

from pygame.math import Vector2

from blockdodge.entity import Player
from blockdodge.models import Direction, InputState
from blockdodge.motion import displace, wrap

# Held signal -> direction a teleport jumps along
_TELEPORT_DIRECTIONS = (
    ("up", Direction.UP),
    ("down", Direction.DOWN),
    ("left", Direction.LEFT),
    ("right", Direction.RIGHT),
)


class PlayerController:
    """
    Applies one frame of input to the player.

    Continuous motion follows the combined axis vector and is wrap-checked.
    A teleport press jumps ``teleport_distance`` along every held direction,
    each checked on its own, so a diagonal hold jumps on both axes.
    """

    def __init__(self, bounds: tuple[float, float], wrap_after_teleport: bool = False) -> None:
        self.bounds = bounds
        self.wrap_after_teleport = wrap_after_teleport

    def update(self, input_state: InputState, player: Player, delta_seconds: float) -> bool:
        """
        Move the player for one frame.

        Parameters
        ----------
        input_state : InputState
            Held directions and whether teleport was pressed this frame.
        player : Player
            The live player, modified in place.
        delta_seconds : float
            Frame time.

        Returns
        -------
        bool
            True if teleport was pressed with at least one direction held,
            including when opposite holds cancel the jump out.
        """
        displace(player, Vector2(input_state.axis()), delta_seconds, self.bounds)

        if not input_state.teleport:
            return False

        held = [direction for signal, direction in _TELEPORT_DIRECTIONS if getattr(input_state, signal)]
        if not held:
            return False

        # Opposite holds still count as a teleport, even though they cancel
        jump = Vector2(0, 0)
        for direction in held:
            jump += direction.vector * player.teleport_distance

        player.position += jump
        if self.wrap_after_teleport:
            wrap(player.position, player.half_size, self.bounds)
        return True
