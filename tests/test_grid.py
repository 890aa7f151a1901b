import math

import pytest

from pathviz.errors import GridError
from pathviz.grid import Grid, reset_grid


def test_create_sets_roles_and_clears_scores():
    g = Grid.create(3, 4, (0, 0), (2, 3))
    assert (g.rows, g.cols) == (3, 4)
    assert len(g.nodes) == 3 and all(len(row) == 4 for row in g.nodes)
    assert g.start.coord == (0, 0) and g.start.is_start
    assert g.finish.coord == (2, 3) and g.finish.is_finish
    assert sum(n.is_start for n in g) == 1
    assert sum(n.is_finish for n in g) == 1
    for n in g:
        assert n.g_score == n.h_score == n.f_score == math.inf
        assert not n.is_visited and n.previous_node is None and not n.is_wall


@pytest.mark.parametrize("rows, cols, start, finish", [
    (0, 3, (0, 0), (0, 1)),
    (3, 3, (0, 0), (0, 0)),
    (3, 3, (3, 0), (0, 0)),
    (3, 3, (0, 0), (0, -1)),
])
def test_create_rejects_bad_layout(rows, cols, start, finish):
    with pytest.raises(GridError):
        Grid.create(rows, cols, start, finish)


def test_from_strings():
    g = Grid.from_strings([
        "S.#",
        ".##",
        "..F",
    ])
    assert g.start.coord == (0, 0)
    assert g.finish.coord == (2, 2)
    assert g.walls() == {(0, 2), (1, 1), (1, 2)}


@pytest.mark.parametrize("picture", [["S.."], ["S.F", "..F"], ["S.F", ".."], []])
def test_from_strings_rejects_bad_pictures(picture):
    with pytest.raises(GridError):
        Grid.from_strings(picture)


def test_neighbors_are_axis_aligned_and_bounded():
    g = Grid.create(3, 3, (0, 0), (2, 2))
    assert [n.coord for n in g.neighbors(g.node((1, 1)))] == [(0, 1), (2, 1), (1, 0), (1, 2)]
    assert [n.coord for n in g.neighbors(g.node((0, 0)))] == [(1, 0), (0, 1)]
    assert [n.coord for n in g.neighbors(g.node((2, 2)))] == [(1, 2), (2, 1)]


def test_single_cell_row_has_two_neighbors_at_most():
    g = Grid.create(1, 5, (0, 0), (0, 4))
    assert [n.coord for n in g.neighbors(g.node((0, 2)))] == [(0, 1), (0, 3)]


def test_start_and_finish_never_become_walls():
    g = Grid.create(2, 2, (0, 0), (1, 1))
    assert not g.set_wall((0, 0), True)
    assert not g.toggle_wall((1, 1))
    assert g.walls() == set()
    assert g.toggle_wall((0, 1))
    assert g.walls() == {(0, 1)}
    assert g.toggle_wall((0, 1))
    assert g.walls() == set()


def test_node_out_of_bounds():
    g = Grid.create(2, 2, (0, 0), (1, 1))
    with pytest.raises(GridError):
        g.node((2, 0))
    with pytest.raises(GridError):
        g.set_wall((-1, 0))


def test_membership_is_by_identity():
    g = Grid.create(2, 2, (0, 0), (1, 1))
    other = Grid.create(2, 2, (0, 0), (1, 1))
    assert g.start in g
    assert other.start not in g


def test_reset_keeps_walls_and_clears_search_state():
    g = Grid.create(3, 3, (0, 0), (2, 2), walls=[(1, 1)])
    n = g.node((0, 1))
    n.g_score, n.h_score, n.f_score = 1, 3, 4
    n.is_visited = True
    n.previous_node = g.start

    fresh = reset_grid(g)
    assert fresh is not g
    assert fresh.walls() == {(1, 1)}
    assert fresh.start.coord == (0, 0) and fresh.finish.coord == (2, 2)
    assert all(not m.has_search_state() for m in fresh)
    assert all(fresh.node(m.coord) is not m for m in g)


def test_reset_is_idempotent():
    g = Grid.create(4, 4, (0, 0), (3, 3), walls=[(0, 1), (2, 2)])
    once = g.reset()
    twice = once.reset()
    assert once.walls() == twice.walls() == {(0, 1), (2, 2)}
    for a, b in zip(once, twice):
        assert a.coord == b.coord
        assert (a.is_start, a.is_finish, a.is_wall) == (b.is_start, b.is_finish, b.is_wall)
        assert a.g_score == b.g_score == math.inf
        assert not a.is_visited and not b.is_visited


def test_random_is_seeded_and_keeps_endpoints_clear():
    a = Grid.random(8, 8, (0, 0), (7, 7), p_wall=0.5, seed=3)
    b = Grid.random(8, 8, (0, 0), (7, 7), p_wall=0.5, seed=3)
    assert a.walls() == b.walls()
    assert a.walls()
    assert not a.start.is_wall and not a.finish.is_wall
