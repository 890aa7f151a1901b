# pathviz/cli.py
from __future__ import annotations
import argparse, csv, logging, os, sys
from typing import List, Optional

from .config import config_for_size
from .errors import PathvizError
from .grid import Grid
from .runner import RunStats, run_search
from .types import Coord

def format_stats(name: str, s: RunStats) -> str:
    return (f"{name:20s} | reached={s.reached!s:5s} | cost={s.cost:4d} | "
            f"opened={s.opened:5d} | visited={s.visited:5d} | "
            f"time={s.elapsed_sec*1000:7.1f} ms")

def parse_coord(text: str) -> Coord:
    try:
        r, c = (int(v) for v in text.split(","))
    except ValueError:
        raise argparse.ArgumentTypeError(f"expected ROW,COL, got {text!r}")
    return (r, c)

def build_grid(args: argparse.Namespace, seed: Optional[int] = None) -> Grid:
    cfg = config_for_size(args.rows, args.cols,
                          **{k: v for k, v in (("start", args.start), ("finish", args.finish)) if v})
    if args.p > 0:
        grid = Grid.random(cfg.rows, cfg.cols, cfg.start, cfg.finish, p_wall=args.p, seed=seed)
    else:
        grid = Grid.create(cfg.rows, cfg.cols, cfg.start, cfg.finish)
    for w in args.wall or []:
        grid.set_wall(w, True)
    return grid

# -------- subcommands --------

def cmd_solve(args: argparse.Namespace) -> None:
    grid = build_grid(args, seed=args.seed)
    stats = run_search(grid)
    print(format_stats(f"{grid.rows}x{grid.cols}", stats))
    if not stats.reached:
        print("no path from", grid.start.coord, "to", grid.finish.coord)
    if args.png:
        from .viz import draw_grid_png
        print("wrote", draw_grid_png(grid, stats.marks(), stats.path, args.png, cell=args.cell))

def cmd_bench(args: argparse.Namespace) -> None:
    rows = []
    for i in range(args.count):
        seed = (args.seed + i) if args.seed is not None else None
        stats = run_search(build_grid(args, seed=seed))
        name = f"grid_{i:03d}"
        print(format_stats(name, stats))
        rows.append({
            "grid": name,
            "seed": seed,
            "reached": stats.reached,
            "cost": stats.cost,
            "opened": stats.opened,
            "visited": stats.visited,
            "time_sec": round(stats.elapsed_sec, 6),
        })
    if args.csv and rows:
        out_dir = os.path.dirname(args.csv)
        if out_dir:
            os.makedirs(out_dir, exist_ok=True)
        with open(args.csv, "w", newline="") as f:
            writer = csv.DictWriter(f, fieldnames=list(rows[0].keys()))
            writer.writeheader()
            writer.writerows(rows)
        print("wrote CSV:", args.csv)

def cmd_view(args: argparse.Namespace) -> None:
    from .pygame_viewer import run_viewer
    cfg = config_for_size(args.rows, args.cols, cell_size=args.cell,
                          step_interval_ms=args.speed, fps=args.fps)
    run_viewer(cfg, fullscreen=args.fullscreen)

def _add_grid_args(p: argparse.ArgumentParser, rows: int, cols: int) -> None:
    p.add_argument("--rows", type=int, default=rows)
    p.add_argument("--cols", type=int, default=cols)
    p.add_argument("--start", type=parse_coord, default=None, help="ROW,COL (default: left of the middle row)")
    p.add_argument("--finish", type=parse_coord, default=None, help="ROW,COL (default: right of the middle row)")
    p.add_argument("--p", type=float, default=0.0, help="wall probability for random walls")
    p.add_argument("--wall", type=parse_coord, action="append", help="ROW,COL of a wall; repeatable")
    p.add_argument("--seed", type=int, default=None)

def build_argparser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(description="Stepwise A* on a 4-connected grid")
    p.add_argument("--log-level", type=str, default="WARNING",
                   choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    sub = p.add_subparsers(dest="cmd", required=True)

    s = sub.add_parser("solve", help="run A* to completion on one grid")
    _add_grid_args(s, 10, 20)
    s.add_argument("--png", type=str, default="", help="write a snapshot of the finished run")
    s.add_argument("--cell", type=int, default=24, help="cell size in pixels for --png")
    s.set_defaults(func=cmd_solve)

    b = sub.add_parser("bench", help="run A* on a series of random grids")
    _add_grid_args(b, 51, 51)
    b.set_defaults(p=0.30)
    b.add_argument("--count", type=int, default=30)
    b.add_argument("--csv", type=str, default="")
    b.set_defaults(func=cmd_bench)

    v = sub.add_parser("view", help="open the interactive visualizer")
    v.add_argument("--rows", type=int, default=10)
    v.add_argument("--cols", type=int, default=20)
    v.add_argument("--cell", type=int, default=48, help="Cell size in pixels")
    v.add_argument("--speed", type=int, default=50, help="Milliseconds per step when playing")
    v.add_argument("--fps", type=int, default=60)
    v.add_argument("--fullscreen", action="store_true", help="Start in fullscreen (toggle Alt+Enter / F11)")
    v.set_defaults(func=cmd_view)

    return p

def main(argv: Optional[List[str]] = None) -> int:
    ap = build_argparser()
    args = ap.parse_args(argv)
    logging.basicConfig(level=getattr(logging, args.log_level),
                        format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    try:
        args.func(args)
    except PathvizError as e:
        print(f"error: {e}", file=sys.stderr)
        return 2
    return 0
