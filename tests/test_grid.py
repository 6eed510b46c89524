import pytest

from termpath import Cell, Grid, InvalidEndpoints
from termpath.grid import MIN_HEIGHT, MIN_WIDTH


def test_empty_default_endpoints():
    g = Grid.empty(20, 10)
    assert g.start == 5 * 20 + 5
    assert g.end == 5 * 20 + 15
    assert all(c is Cell.EMPTY for c in g.cells)


def test_rejects_bad_shape():
    with pytest.raises(ValueError):
        Grid(0, 5, [], 0, 1)
    with pytest.raises(ValueError):
        Grid(3, 3, [Cell.EMPTY] * 8, 0, 1)


@pytest.mark.parametrize("start, end", [(3, 3), (0, 50), (-1, 4), (50, 0)])
def test_rejects_bad_endpoints(start, end):
    with pytest.raises(ValueError):
        Grid(10, 5, [Cell.EMPTY] * 50, start, end)


def test_empty_single_cell_has_no_room_for_both_endpoints():
    with pytest.raises(ValueError):
        Grid.empty(1, 1)


def test_for_viewport_leaves_hud_rows_and_floors():
    g = Grid.for_viewport(80, 24)
    assert (g.width, g.height) == (80, 22)
    tiny = Grid.for_viewport(3, 3)
    assert (tiny.width, tiny.height) == (MIN_WIDTH, MIN_HEIGHT)


def test_index_xy():
    g = Grid.empty(10, 5)
    assert g.index(3, 2) == 23
    assert g.xy(23) == (3, 2)
    assert g.manhattan(0, 49) == 9 + 4


@pytest.mark.parametrize("index, expected", [
    (0, [10, 1]),
    (12, [2, 22, 11, 13]),
    (9, [19, 8]),
    (49, [39, 48]),
    (40, [30, 41]),
])
def test_neighbors4_order_and_no_wraparound(index, expected):
    assert Grid.empty(10, 5).neighbors4(index) == expected


def test_toggle_wall_flips_and_bumps_revision():
    g = Grid.empty(10, 5, start=0, end=49)
    assert g.toggle_wall(12)
    assert g.is_wall(12)
    assert g.revision == 1
    assert g.toggle_wall(12)
    assert not g.is_wall(12)
    assert g.revision == 2


def test_toggle_wall_on_endpoint_is_noop():
    g = Grid.empty(10, 5, start=0, end=49)
    assert not g.toggle_wall(0)
    assert not g.toggle_wall(49)
    assert not g.is_wall(0) and not g.is_wall(49)
    assert g.revision == 0


def test_toggle_wall_out_of_range():
    with pytest.raises(IndexError):
        Grid.empty(10, 5).toggle_wall(50)


def test_paint_wall_only_sets():
    g = Grid.empty(10, 5, start=0, end=49)
    assert g.paint_wall(3)
    assert not g.paint_wall(3)
    assert g.is_wall(3)
    assert not g.paint_wall(0)


def test_set_endpoints_reject_conflicts():
    g = Grid.empty(10, 5, start=0, end=49)
    g.toggle_wall(7)
    with pytest.raises(InvalidEndpoints):
        g.set_start(7)
    with pytest.raises(InvalidEndpoints):
        g.set_start(49)
    with pytest.raises(InvalidEndpoints):
        g.set_end(0)
    assert (g.start, g.end) == (0, 49)

    assert g.set_end(8)
    assert g.end == 8
    assert not g.set_end(8)


def test_clear_walls():
    g = Grid.empty(10, 5)
    for i in (1, 2, 3):
        g.toggle_wall(i)
    rev = g.revision
    g.clear_walls()
    assert not any(g.is_wall(i) for i in range(g.size()))
    assert g.revision == rev + 1


def test_resize_keeps_overlap_and_resets_rest():
    g = Grid.empty(12, 6, start=0, end=5)
    g.toggle_wall(g.index(1, 1))
    g.toggle_wall(g.index(11, 5))

    assert g.resize(10, 5)
    assert (g.width, g.height) == (10, 5)
    assert len(g.cells) == 50
    assert g.is_wall(g.index(1, 1))
    assert sum(g.is_wall(i) for i in range(g.size())) == 1

    assert g.resize(14, 8)
    assert g.is_wall(g.index(1, 1))
    assert sum(g.is_wall(i) for i in range(g.size())) == 1
    assert (g.start, g.end) == (0, 5)


def test_resize_unchanged_and_floor():
    g = Grid.empty(12, 6)
    rev = g.revision
    assert not g.resize(12, 6)
    assert g.revision == rev
    assert g.resize(3, 2)
    assert (g.width, g.height) == (MIN_WIDTH, MIN_HEIGHT)


def test_resize_clamps_and_separates_endpoints():
    g = Grid.empty(20, 10, start=9 * 20 + 15, end=9 * 20 + 18)
    g.resize(10, 5)
    # both clamp to (9, 4), the last cell; end steps back one
    assert g.start == 49
    assert g.end == 48


def test_resize_clears_wall_under_relocated_endpoint():
    g = Grid.empty(20, 10, start=2 * 20 + 15, end=0)
    g.toggle_wall(2 * 20 + 9)
    g.resize(10, 5)
    assert g.start == g.index(9, 2)
    assert not g.is_wall(g.start)


def test_save_load(tmp_path):
    g = Grid.empty(12, 6, start=3, end=70)
    g.toggle_wall(14)
    g.toggle_wall(40)
    path = tmp_path / "layouts" / "g.txt"
    g.save(str(path))

    loaded = Grid.load(str(path))
    assert (loaded.width, loaded.height) == (12, 6)
    assert (loaded.start, loaded.end) == (3, 70)
    assert loaded.cells == g.cells


def test_load_legacy_rows(tmp_path):
    path = tmp_path / "legacy.txt"
    path.write_text("1000\n0110\n0001\n")
    g = Grid.load(str(path))
    assert (g.width, g.height) == (4, 3)
    assert (g.start, g.end) == (0, 11)
    assert not g.is_wall(0) and not g.is_wall(11)
    assert g.is_wall(5) and g.is_wall(6)


def test_random_is_seeded_and_keeps_endpoints_open():
    a = Grid.random(15, 10, p_blocked=0.4, seed=3)
    b = Grid.random(15, 10, p_blocked=0.4, seed=3)
    assert a.cells == b.cells
    assert not a.is_wall(a.start) and not a.is_wall(a.end)
    assert any(a.is_wall(i) for i in range(a.size()))


def _write_layout(tmp_path, header, rows):
    path = tmp_path / "layout.txt"
    path.write_text(header + "\n" + "".join(r + "\n" for r in rows))
    return str(path)


@pytest.mark.parametrize("header", ["GRID 10 5 3 3", "GRID 10 5 0 999"])
def test_load_rejects_bad_endpoints(tmp_path, header):
    with pytest.raises(ValueError):
        Grid.load(_write_layout(tmp_path, header, ["0" * 10] * 5))


@pytest.mark.parametrize("rows", [
    ["0" * 10] * 4 + ["0" * 11],
    ["0" * 10] * 4 + ["0" * 9],
    ["0" * 10] * 4,
    ["0" * 10] * 6,
])
def test_load_rejects_rows_not_matching_header(tmp_path, rows):
    with pytest.raises(ValueError):
        Grid.load(_write_layout(tmp_path, "GRID 10 5 0 49", rows))


def test_load_rejects_ragged_legacy_rows(tmp_path):
    path = tmp_path / "legacy.txt"
    path.write_text("1000\n01100\n0001\n")
    with pytest.raises(ValueError):
        Grid.load(str(path))


def test_load_clears_walls_under_endpoints(tmp_path):
    g = Grid.load(_write_layout(tmp_path, "GRID 10 5 0 49", ["1" * 10] * 5))
    assert not g.is_wall(0) and not g.is_wall(49)
    assert g.is_wall(1) and g.is_wall(48)
    assert not g.toggle_wall(0)
