"""
life.py

Conway's Game of Life on a bounded board, in the terminal or as a GIF.

Example (built-in R-pentomino, 2 generations per second)
-------
python life.py

Example (pattern file, 200 generations, exported as GIF)
-------
python life.py -f patterns/glider.lif --rows 40 --cols 60 \
       --turns 200 --rate 10 --gif out/glider.gif

Defaults may come from a YAML file (same keys as the flags, e.g.
`rows: 40`, `age-color: true`); flags given on the command line win:

python life.py --config life.yaml --turns 50
"""
from __future__ import annotations

import argparse
import pathlib
import sys
from typing import List, Optional, TextIO, Tuple

from adapters.gif_writer import GifRenderer
from adapters.pacing import Pacer
from adapters.run_logger import log_event
from adapters.terminal import TerminalRenderer
from config import LifeConfig, load_config
from driver import Simulation
from errors import LifeError
from grid import Grid
from shapes import Shape, parse_shape

EXIT_FATAL = 2


def read_pattern(path) -> str:
    """Pattern source: raw text of a LIF 1.05/1.06 file."""
    return pathlib.Path(path).read_text(encoding="utf-8", errors="replace")


def build_parser(defaults: LifeConfig) -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(description="Conway's Game of Life on a bounded board.")
    p.add_argument("--config", type=pathlib.Path, help="YAML file with default settings.")
    p.add_argument("-f", "--file", help="Load life pattern from LIF 1.05/1.06 file.")
    p.add_argument("--deltax", dest="delta_x", type=int, help="X translation for loaded shape (default: auto).")
    p.add_argument("--deltay", dest="delta_y", type=int, help="Y translation for loaded shape (default: auto).")
    p.add_argument("--rows", type=int, help="Number of rows.")
    p.add_argument("--cols", type=int, help="Number of columns.")
    p.add_argument("--turns", type=int, help="Number of generations to simulate (0 = unlimited).")
    p.add_argument("-r", "--rate", type=int, help="Generations per second (0 = press Enter to step).")
    p.add_argument("--color", dest="age_color", action="store_true", help="Use color to show cell age.")
    p.add_argument("--shape", dest="age_shape", action="store_true", help="Use shapes to show cell age.")
    p.add_argument("--gif", help="Write the evolution to this GIF file instead of the terminal.")
    p.add_argument("--random", type=int, help="Start from N randomly placed cells instead of the R-pentomino.")
    p.add_argument("--seed", type=int, help="RNG seed for --random.")
    p.add_argument("--log-file", help="JSONL run log (empty string disables).")
    p.set_defaults(**defaults.to_dict())
    return p


def parse_config(argv: List[str] | None = None) -> LifeConfig:
    """
    Two passes: pick up --config first, then parse everything else with the
    file's values as defaults.
    """
    top = argparse.ArgumentParser(add_help=False)
    top.add_argument("--config", type=pathlib.Path)
    known, _ = top.parse_known_args(argv)

    parser = build_parser(LifeConfig())
    if known.config is not None:
        try:
            parser = build_parser(load_config(known.config))
        except (OSError, ValueError, TypeError) as e:
            parser.error(f"cannot load config {known.config}: {e}")

    args = vars(parser.parse_args(argv))
    args.pop("config", None)
    cfg = LifeConfig(**args)

    if cfg.rate < 0:
        parser.error("--rate must be >= 0")
    if cfg.turns < 0:
        parser.error("--turns must be >= 0")
    if cfg.random < 0:
        parser.error("--random must be >= 0")
    if cfg.gif:
        if cfg.turns == 0:
            parser.error("option --gif requires number of generations to simulate (--turns)")
        if cfg.rate == 0:
            parser.error("option --gif requires a positive --rate")
    return cfg


def build_simulation(cfg: LifeConfig) -> Tuple[Simulation, Optional[Shape]]:
    """
    Grid + seed. Every failure here happens before the first generation is
    shown. The parsed shape is returned too (None for the built-in seeds).
    """
    sim = Simulation(Grid(cfg.rows, cfg.cols), turns=cfg.turns, rate=cfg.rate)
    shape = None
    if cfg.file:
        shape = parse_shape(read_pattern(cfg.file))
        sim.seed_shape(shape, (cfg.delta_x, cfg.delta_y))
    elif cfg.random:
        sim.seed_random(cfg.random, cfg.seed)
    else:
        sim.seed_builtin()
    return sim, shape


def run(cfg: LifeConfig, stream: Optional[TextIO] = None) -> int:
    out = stream if stream is not None else sys.stdout
    sim, shape = build_simulation(cfg)
    log_event(
        "start",
        log_file=cfg.log_file,
        rows=cfg.rows,
        cols=cfg.cols,
        pattern=cfg.file,
        description=list(shape.description) if shape else [],
        dialect=shape.dialect if shape else None,
        alive=sim.grid.alive,
        turns=cfg.turns,
        rate=cfg.rate,
    )

    if cfg.gif:
        renderer = GifRenderer(cfg.gif)
        last = sim.run(renderer)
        print(f"\nReached generation {last}", file=out)
        print("Generating GIF ... ", end="", file=out)
        path = renderer.save()
        print(f"done.\n[{path}]", file=out)
    else:
        renderer = TerminalRenderer(out, age_shape=cfg.age_shape, age_color=cfg.age_color)
        renderer.clear()
        last = sim.run(renderer, Pacer(cfg.rate))
        print(f"\nReached generation {last}", file=out)

    log_event("finish", log_file=cfg.log_file, generation=last, alive=sim.grid.alive, gif=cfg.gif)
    return last


def main(argv: List[str] | None = None) -> None:
    cfg = parse_config(argv)
    try:
        run(cfg)
    except (LifeError, OSError) as e:
        print(f"ERROR: {e}", file=sys.stderr)
        log_event("error", log_file=cfg.log_file, type=type(e).__name__, message=str(e))
        sys.exit(EXIT_FATAL)
    except KeyboardInterrupt:
        print()
        log_event("interrupted", log_file=cfg.log_file)


if __name__ == "__main__":
    main()
