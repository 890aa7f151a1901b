from PIL import Image

from pathviz.grid import Grid
from pathviz.runner import run_search
from pathviz.viz import Colors, draw_grid_png


def pixel(img, s, cell):
    r, c = s
    return img.getpixel((c * cell + cell // 2, r * cell + cell // 2))


def test_png_shows_roles_walls_and_path(tmp_path):
    g = Grid.from_strings([
        "S.#",
        "...",
        "#.F",
    ])
    stats = run_search(g)
    out = draw_grid_png(g, stats.marks(), stats.path, str(tmp_path / "out" / "run.png"), cell=10)

    img = Image.open(out).convert("RGB")
    assert img.size == (30, 30)
    assert pixel(img, (0, 0), 10) == Colors.START
    assert pixel(img, (2, 2), 10) == Colors.FINISH
    assert pixel(img, (0, 2), 10) == Colors.WALL
    assert pixel(img, (2, 0), 10) == Colors.WALL
    for s in stats.path[1:-1]:
        assert pixel(img, s, 10) == Colors.PATH


def test_png_without_a_run_is_plain(tmp_path):
    g = Grid.create(2, 4, (0, 0), (1, 3))
    out = draw_grid_png(g, out_png=str(tmp_path / "plain.png"), cell=8)
    img = Image.open(out).convert("RGB")
    assert img.size == (32, 16)
    assert pixel(img, (0, 1), 8) == Colors.FLOOR
