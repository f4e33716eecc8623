from __future__ import annotations

from blockdodge.collision import check, find_hit, overlaps
from blockdodge.entity import Block, Player
from blockdodge.models import Direction


def _player() -> Player:
    return Player((0, 0), (40, 40), 600.0, 150.0, (128, 128, 255))


def _block(x: float, y: float) -> Block:
    return Block((x, y), (80, 80), 300.0, Direction.LEFT, (255, 128, 255))


def test_boxes_overlap_inside_combined_half_extents() -> None:
    assert overlaps(_player(), _block(50, 0))
    assert overlaps(_block(50, 0), _player())


def test_boxes_apart_do_not_overlap() -> None:
    assert not overlaps(_player(), _block(100, 0))


def test_touching_edges_do_not_overlap() -> None:
    assert not overlaps(_player(), _block(60, 0))
    assert not overlaps(_player(), _block(0, -60))


def test_overlap_needs_both_axes() -> None:
    assert not overlaps(_player(), _block(50, 70))
    assert overlaps(_player(), _block(-59, 59))


def test_check_destroys_player_on_hit() -> None:
    player = _player()
    far, near = _block(200, 200), _block(50, 0)

    assert check(player, [far, near]) is True
    assert player.alive is False
    assert near.alive and far.alive


def test_check_without_overlap_keeps_player() -> None:
    player = _player()

    assert check(player, [_block(100, 0), _block(0, 300)]) is False
    assert check(player, []) is False
    assert player.alive is True


def test_dead_blocks_are_ignored() -> None:
    block = _block(0, 0)
    block.alive = False

    assert find_hit(_player(), [block]) is None
