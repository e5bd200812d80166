# gridpath/cli.py
from __future__ import annotations
import argparse, csv, logging, os
from typing import List, Optional, Tuple

from . import config
from .types import Coord
from .grid import Grid
from .runner import SearchResult, SearchStepper, run_search
from .search import get_algorithm
from .viz import draw_grid_png, render_ascii

logger = logging.getLogger(__name__)

def parse_coord(text: str) -> Coord:
    try:
        r, c = (int(part) for part in text.split(","))
    except ValueError:
        raise argparse.ArgumentTypeError(f"expected ROW,COL, got {text!r}") from None
    return r, c

def format_stats(s: SearchResult) -> str:
    return (f"{s.algorithm:10s} | found={s.found!s:5s} | length={s.length:4d} | "
            f"visited={len(s.visited):6d} | time={s.elapsed_sec*1000:7.1f} ms")

def _endpoints(args: argparse.Namespace) -> Tuple[Coord, Coord]:
    start = args.start if args.start is not None else (0, 0)
    goal = args.end if args.end is not None else (args.rows - 1, args.cols - 1)
    return start, goal

def _make_grid(args: argparse.Namespace, seed: Optional[int], start: Coord, goal: Coord) -> Grid:
    return Grid.random(args.rows, args.cols, p_blocked=args.p, seed=seed, keep_free=(start, goal))

def run_all_algs(grid: Grid, start: Coord, goal: Coord,
                 out_dir: str | None = None, base_tag: str = "run") -> List[SearchResult]:
    results: List[SearchResult] = []
    for name in config.ALGORITHM_NAMES:
        grid.reset_colors()
        res = run_search(grid, start, goal, name)
        results.append(res)
        if out_dir:
            draw_grid_png(grid, res.path, start, goal, os.path.join(out_dir, f"{base_tag}_{name}.png"))
    grid.reset_colors()
    return results

# -------- subcommands --------

def cmd_demo(args: argparse.Namespace) -> None:
    start, goal = _endpoints(args)
    grid = _make_grid(args, args.seed, start, goal)
    os.makedirs(args.out, exist_ok=True)
    for res in run_all_algs(grid, start, goal, out_dir=args.out, base_tag=f"grid_{args.seed}"):
        print(format_stats(res))
    logger.info("wrote images to %s", args.out)

def cmd_trace(args: argparse.Namespace) -> None:
    start, goal = _endpoints(args)
    grid = _make_grid(args, args.seed, start, goal)
    stepper = SearchStepper(get_algorithm(args.alg), grid, start, goal)
    step = 0
    while True:
        ev = stepper.advance()
        if ev is None:
            break
        step += 1
        print(f"{step:5d} visit {ev.cell.pos}{'  <- goal' if ev.is_goal else ''}")
    print(render_ascii(grid, stepper.path, start, goal))
    if stepper.path is None:
        print("no path")
    else:
        print(f"path ({len(stepper.path)} cells):", " ".join(f"{r},{c}" for r, c in stepper.path))

def cmd_bench(args: argparse.Namespace) -> None:
    start, goal = _endpoints(args)
    rows = []
    for i in range(args.count):
        seed = args.seed + i if args.seed is not None else None
        grid = _make_grid(args, seed, start, goal)
        for res in run_all_algs(grid, start, goal):
            print(f"grid {i:03d} :: {format_stats(res)}")
            rows.append({
                "grid": i,
                "seed": seed,
                "alg": res.algorithm,
                "found": res.found,
                "length": res.length,
                "visited": len(res.visited),
                "time_sec": round(res.elapsed_sec, 6),
            })
    if args.csv and rows:
        with open(args.csv, "w", newline="") as f:
            writer = csv.DictWriter(f, fieldnames=list(rows[0].keys()))
            writer.writeheader()
            writer.writerows(rows)
        print("wrote CSV:", args.csv)

def _add_grid_args(p: argparse.ArgumentParser) -> None:
    p.add_argument("--rows", type=int, default=config.DEFAULT_ROWS)
    p.add_argument("--cols", type=int, default=config.DEFAULT_COLS)
    p.add_argument("--p", type=float, default=config.DEFAULT_P_BLOCKED, help="block probability")
    p.add_argument("--seed", type=int, default=0)
    p.add_argument("--start", type=parse_coord, default=None, help="ROW,COL (default 0,0)")
    p.add_argument("--end", type=parse_coord, default=None, help="ROW,COL (default bottom-right)")

def build_argparser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(description="Grid pathfinding: DFS, BFS, Dijkstra and A*")
    p.add_argument("-v", "--verbose", action="store_true", help="debug logging")
    sub = p.add_subparsers(dest="cmd", required=True)

    d = sub.add_parser("demo", help="run all algorithms on one random grid and save PNGs")
    _add_grid_args(d)
    d.add_argument("--out", type=str, default=config.DEFAULT_OUT_DIR)
    d.set_defaults(func=cmd_demo)

    t = sub.add_parser("trace", help="print the visit order of one algorithm")
    _add_grid_args(t)
    t.add_argument("--alg", choices=config.ALGORITHM_NAMES, default="bfs")
    t.set_defaults(func=cmd_trace)

    b = sub.add_parser("bench", help="run all algorithms on a series of random grids")
    _add_grid_args(b)
    b.add_argument("--count", type=int, default=30)
    b.add_argument("--csv", type=str, default="")
    b.set_defaults(func=cmd_bench)

    return p

def main(argv: Optional[List[str]] = None):
    ap = build_argparser()
    args = ap.parse_args(argv)
    if args.rows < 1 or args.cols < 1:
        ap.error("--rows and --cols must be positive")
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO,
                        format="%(levelname)s %(name)s: %(message)s")
    args.func(args)

if __name__ == "__main__":
    main()
