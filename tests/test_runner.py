from pathviz.controller import CellMark
from pathviz.grid import Grid
from pathviz.runner import run_search


def test_run_search_open_grid():
    stats = run_search(Grid.create(5, 5, (0, 0), (4, 4)))
    assert stats.reached
    assert stats.cost == 8
    assert stats.path[0] == (0, 0) and stats.path[-1] == (4, 4)
    assert stats.visited == 9
    assert stats.opened >= stats.visited
    assert stats.closed >= set(stats.path)
    assert stats.elapsed_sec >= 0


def test_run_search_unreachable():
    g = Grid.from_strings([
        "S#.",
        ".#.",
        ".#F",
    ])
    stats = run_search(g)
    assert not stats.reached
    assert stats.path == [] and stats.cost == 0
    assert (stats.opened, stats.visited) == (3, 3)
    assert stats.closed == {(0, 0), (1, 0), (2, 0)}
    assert stats.frontier == set()


def test_marks_layer_path_over_closed_over_open():
    g = Grid.create(3, 3, (0, 0), (0, 2))
    stats = run_search(g)
    marks = stats.marks()
    assert all(marks[s] is CellMark.PATH for s in stats.path)
    for s in stats.closed - set(stats.path):
        assert marks[s] is CellMark.VISITED
    for s in stats.frontier - stats.closed - set(stats.path):
        assert marks[s] is CellMark.OPEN
