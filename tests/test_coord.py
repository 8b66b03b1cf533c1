from clashtui.coord import Coord


def test_lock_keeps_offsets():
    coord = Coord(x=3, y=4)
    coord.lock()
    assert coord == Coord(x=3, y=4, hold=True)


def test_end_resets_to_default():
    coord = Coord(x=3, y=4, hold=True)
    coord.end()
    assert coord == Coord()


def test_toggle_locks_then_resets():
    coord = Coord(x=2, y=1)
    coord.toggle()
    assert coord.hold is True
    assert (coord.x, coord.y) == (2, 1)
    coord.toggle()
    assert coord == Coord()


def test_ordering_compares_fields_in_order():
    assert Coord(x=1, y=9) < Coord(x=2, y=0)
    assert Coord(x=1, y=1) < Coord(x=1, y=1, hold=True)