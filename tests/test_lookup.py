import pytest

from bitchess.lookup import knight_lookup, knight_table, ray_lookup, ray_table
from bitchess.types import Direction


def _squares(bb):
    return {sq for sq in range(64) if bb >> sq & 1}


def test_tables_have_one_entry_per_square():
    assert len(knight_table()) == 64
    assert len(ray_table()) == 64
    assert all(len(row) == 8 for row in ray_table())


def test_knight_from_corner():
    assert _squares(knight_lookup(0)) == {10, 17}


def test_knight_in_centre_has_eight_targets():
    assert len(_squares(knight_lookup(27))) == 8


def test_knight_lookup_is_symmetric():
    for a in range(64):
        for b in _squares(knight_lookup(a)):
            assert a in _squares(knight_lookup(b))


def test_knight_targets_never_wrap_files():
    for sq in range(64):
        for target in _squares(knight_lookup(sq)):
            assert abs(sq % 8 - target % 8) in (1, 2)
            assert abs(sq // 8 - target // 8) in (1, 2)


def test_north_ray_from_a1_is_file_a():
    assert ray_lookup(0, Direction.NORTH) == 0x0101010101010101 & ~1


def test_ray_from_edge_is_empty():
    assert ray_lookup(63, Direction.NORTH) == 0
    assert ray_lookup(7, Direction.EAST) == 0
    assert ray_lookup(0, Direction.SOUTH_WEST) == 0


def test_ray_accepts_plain_int_direction():
    assert ray_lookup(0, 1) == ray_lookup(0, Direction.NORTH_EAST)


def test_long_diagonal_reaches_corner():
    ray = ray_lookup(0, Direction.NORTH_EAST)
    assert len(_squares(ray)) == 7
    assert 63 in _squares(ray)


@pytest.mark.parametrize("direction", list(Direction))
def test_rays_are_symmetric_with_opposite_direction(direction):
    opposite = Direction((direction + 4) % 8)
    for a in range(64):
        for b in _squares(ray_lookup(a, direction)):
            assert a in _squares(ray_lookup(b, opposite))


@pytest.mark.parametrize("direction", list(Direction))
def test_ray_never_contains_origin(direction):
    for sq in range(64):
        ray = ray_lookup(sq, direction)
        assert ray & (1 << sq) == 0
        assert sq not in _squares(ray)