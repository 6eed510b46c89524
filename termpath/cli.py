# termpath/cli.py
from __future__ import annotations
import argparse, csv, logging, os, os.path
from typing import List

from .grid import HUD_ROWS, Grid
from .session import DEFAULT_TICK_MS
from .planners import RunStats, run_all_algs, run_search
from .types import Algorithm
from .viz import draw_search_png

def format_stats(s: RunStats) -> str:
    return (f"{s.algorithm.label:10s} | found={s.found!s:5s} | moves={s.moves:4d} | "
            f"expanded={s.expansions:6d} | steps={s.steps:6d} | stale={s.stale_pops:4d} | "
            f"time={s.elapsed_sec*1000:7.1f} ms")

# -------- subcommands --------

def cmd_gen(args: argparse.Namespace) -> None:
    os.makedirs(args.out, exist_ok=True)
    for i in range(args.count):
        grid = Grid.random(args.width, args.height, p_blocked=args.p,
                           seed=(args.seed + i) if args.seed is not None else None)
        path = os.path.join(args.out, f"grid_{i:03d}.txt")
        grid.save(path)
        print("wrote", path)

def cmd_demo(args: argparse.Namespace) -> None:
    grid = Grid.load(args.env)
    os.makedirs(args.out, exist_ok=True)
    base = os.path.splitext(os.path.basename(args.env))[0]
    if args.alg is not None:
        state, st = run_search(grid, args.alg)
        draw_search_png(grid, state, os.path.join(args.out, f"{base}_{args.alg.value}.png"))
        results = [st]
    else:
        results = run_all_algs(grid, out_dir=args.out, base_tag=base)
    for st in results:
        print(format_stats(st))

def cmd_bench(args: argparse.Namespace) -> None:
    envs = sorted(p for p in os.listdir(args.envdir) if p.endswith(".txt"))
    if not envs:
        raise SystemExit(f"no .txt layouts in {args.envdir}")
    os.makedirs(args.out, exist_ok=True)
    rows: List[dict] = []
    for fname in envs:
        grid = Grid.load(os.path.join(args.envdir, fname))
        base = os.path.splitext(fname)[0]
        for st in run_all_algs(grid, out_dir=args.out, base_tag=base):
            print(f"{fname} :: {format_stats(st)}")
            rows.append({
                "env": fname,
                "alg": st.algorithm.value,
                "found": st.found,
                "moves": st.moves,
                "expanded": st.expansions,
                "steps": st.steps,
                "stale": st.stale_pops,
                "time_sec": round(st.elapsed_sec, 6),
            })
    if args.csv:
        with open(args.csv, "w", newline="") as f:
            writer = csv.DictWriter(f, fieldnames=list(rows[0].keys()))
            writer.writeheader()
            writer.writerows(rows)
        print("wrote CSV:", args.csv)

def cmd_view(args: argparse.Namespace) -> None:
    from .pygame_viewer import launch  # pygame is only needed for the viewer
    launch(args)

def add_view_arguments(p: argparse.ArgumentParser) -> None:
    p.add_argument("--load", type=str, default=None, help="Load a saved layout (.txt)")
    p.add_argument("--width", type=int, default=60, help="Grid width in cells")
    p.add_argument("--height", type=int, default=30 + HUD_ROWS, help="Window height in cells, HUD rows included")
    p.add_argument("--cell", type=int, default=16, help="Cell size in pixels")
    p.add_argument("--fps", type=int, default=60, help="Frames per second")
    p.add_argument("--tick-ms", type=int, default=DEFAULT_TICK_MS, help="Milliseconds between search steps")

def build_argparser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(description="Step-by-step BFS / Dijkstra / A* on a grid")
    p.add_argument("-v", "--verbose", action="store_true", help="debug logging")
    sub = p.add_subparsers(dest="cmd", required=True)

    g = sub.add_parser("gen", help="generate random layouts")
    g.add_argument("--count", type=int, default=10)
    g.add_argument("--width", type=int, default=40)
    g.add_argument("--height", type=int, default=20)
    g.add_argument("--p", type=float, default=0.30)
    g.add_argument("--out", type=str, default="envs")
    g.add_argument("--seed", type=int, default=None)
    g.set_defaults(func=cmd_gen)

    d = sub.add_parser("demo", help="run all algorithms on one layout and save PNGs")
    d.add_argument("--env", type=str, required=True)
    d.add_argument("--out", type=str, default="runs")
    d.add_argument("--alg", type=Algorithm.parse, default=None, help="bfs | dijkstra | astar (default: all)")
    d.set_defaults(func=cmd_demo)

    b = sub.add_parser("bench", help="run all algorithms on every .txt in a folder")
    b.add_argument("--envdir", type=str, required=True)
    b.add_argument("--out", type=str, default="runs")
    b.add_argument("--csv", type=str, default="")
    b.set_defaults(func=cmd_bench)

    v = sub.add_parser("view", help="interactive pygame viewer")
    add_view_arguments(v)
    v.set_defaults(func=cmd_view)

    return p

def main(argv: List[str] | None = None):
    ap = build_argparser()
    args = ap.parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO,
                        format="%(levelname)s %(name)s: %(message)s")
    args.func(args)
