from ttkjson.location import Location, Position


def test_position_defaults():
    assert Position() == Position(None, 1, 1)


def test_lines_resets_column():
    pos = Position(None, 4, 9)
    pos.lines(2)
    assert pos.column == 1
    assert pos.line == 4 + 2


def test_columns_never_below_one():
    pos = Position(column=3)
    pos.columns(-10)
    assert pos.column == 1


def test_add_sub_round_trip_leaves_original():
    pos = Position("f.json", 2, 3)
    moved = pos + 5
    assert moved - 5 == pos
    assert pos == Position("f.json", 2, 3)
    assert moved.line == pos.line


def test_position_str_with_and_without_file():
    assert str(Position("a.json", 2, 3)) == "a.json:2.3"
    assert str(Position(None, 2, 3)) == str(Position("", 2, 3))


def test_position_equality_compares_filename_value():
    assert Position("x", 1, 1) == Position("".join(["x"]), 1, 1)
    assert not Position("x", 1, 1) == Position("y", 1, 1)


def test_location_single_position_is_zero_width():
    loc = Location(Position(None, 3, 4))
    assert loc.begin == loc.end
    assert loc.begin is not loc.end


def test_columns_extend_end_only():
    loc = Location()
    before = Position(**vars(loc.begin))
    loc.columns(4)
    assert loc.begin == before
    assert loc.end == before + 4


def test_step_moves_begin_to_end():
    loc = Location()
    loc.columns(3)
    loc.step()
    assert loc.begin == loc.end
    loc.columns(1)
    assert loc.begin != loc.end


def test_join_locations():
    a = Location(Position(None, 1, 1), Position(None, 1, 5))
    b = Location(Position(None, 2, 1), Position(None, 2, 8))
    joined = a + b
    assert joined.begin == a.begin
    assert joined.end == b.end


def test_add_width_returns_new_location():
    loc = Location()
    wider = loc + 4
    assert wider.end == loc.end + 4
    assert loc.begin == loc.end


def test_str_single_column_range_shows_begin_only():
    loc = Location(Position(None, 7, 2))
    loc.columns(1)
    assert str(loc) == str(loc.begin)


def test_str_same_line_range():
    loc = Location()
    loc.columns(4)
    assert str(loc) == "1.1-4"


def test_str_multi_line_range():
    loc = Location()
    loc.lines(1)
    loc.columns(3)
    assert str(loc) == "1.1-2.3"


def test_str_different_files():
    loc = Location(Position("a", 1, 1), Position("b", 2, 3))
    assert str(loc).startswith(str(loc.begin) + "-")
    assert str(loc).endswith("-" + str(loc.end - 1))