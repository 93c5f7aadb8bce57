import pytest

from tile import Tile


def test_default_tile_is_empty():
    tile = Tile()
    assert tile.value() == 0
    assert tile.is_empty()
    assert not tile


def test_int_round_trip():
    for value in (0, 2, 4, 2048, 65536):
        assert int(Tile(value)) == value
        assert Tile(int(Tile(value))) == Tile(value)


def test_merge_equal_tiles_doubles():
    merged = Tile(8).merge_with(Tile(8))
    assert merged == Tile(16)
    assert merged.value() == 16


def test_merge_empty_tiles_stays_empty():
    assert Tile(0).merge_with(Tile(0)).is_empty()


def test_merge_does_not_mutate_operands():
    a, b = Tile(2), Tile(2)
    a.merge_with(b)
    assert a.value() == 2
    assert b.value() == 2


def test_merge_unequal_tiles_raises():
    with pytest.raises(ValueError):
        Tile(2).merge_with(Tile(4))


def test_negative_value_rejected():
    with pytest.raises(ValueError):
        Tile(-2)


def test_non_integer_rejected():
    with pytest.raises(TypeError):
        Tile(2.0)
    with pytest.raises(TypeError):
        Tile(True)


def test_equality_and_hash():
    assert Tile(4) == Tile(4)
    assert Tile(4) != Tile(2)
    assert len({Tile(4), Tile(4), Tile(2)}) == 2
    assert repr(Tile(32)) == "Tile(32)"


def test_numpy_integers_accepted():
    np = pytest.importorskip("numpy")
    assert Tile(np.int64(2)) == Tile(2)
    assert Tile(np.int32(2048)).value() == 2048
    assert type(Tile(np.int32(4)).value()) is int
    with pytest.raises(TypeError):
        Tile(np.float64(2.0))
