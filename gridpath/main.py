# gridpath/main.py
"""Command-line entry point: load a map, solve it and print the path."""

from __future__ import annotations

from pathlib import Path
from typing import Optional, Sequence
import argparse
import logging
import os
import sys

from dotenv import load_dotenv

from .config import CONFIG_PATH, Config, load_config
from .errors import MapParseError
from .maps.text_grid import TextGrid
from .render.text_view import TextView
from .search.solver import AStarSolver

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

SAMPLE_MAP = (
    "#   O    ###   X  ###\n"
    "#       ###       ###\n"
    "##  ######   ########\n"
    "#        ##   #######\n"
    "#                   #\n"
)

EXIT_FOUND = 0
EXIT_NO_PATH = 1
EXIT_BAD_MAP = 2


def configure_logging(cfg: Config) -> None:
    """Apply the configured root level and per-module overrides."""

    level_str = os.getenv("GRIDPATH_LOG_LEVEL", cfg.logging.global_level).upper()
    numeric_level = getattr(logging, level_str, logging.WARNING)
    logging.basicConfig(level=numeric_level, format=LOG_FORMAT, force=True)

    for module_name, module_level in cfg.logging.module_levels.items():
        module_numeric_level = getattr(logging, str(module_level).upper(), None)
        if module_numeric_level is not None:
            logging.getLogger(module_name).setLevel(module_numeric_level)
        else:
            logger.warning(
                "Invalid log level '%s' for module '%s' in config.", module_level, module_name
            )


def bootstrap(config_path: str | Path = CONFIG_PATH) -> Config:
    """Load ``.env`` and the YAML config, then set up logging."""

    env_path = Path(".env")
    if env_path.exists():
        load_dotenv(env_path)

    cfg = load_config(Path(config_path))
    configure_logging(cfg)
    return cfg


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="gridpath", description="Find a shortest path through a text map with A*"
    )
    parser.add_argument(
        "map_file",
        nargs="?",
        type=Path,
        default=None,
        help="Map file (O start, X end, space empty, # obstacle). Default: built-in sample",
    )
    diagonal = parser.add_mutually_exclusive_group()
    diagonal.add_argument(
        "--diagonal", dest="diagonal", action="store_true", default=None,
        help="Allow diagonal moves",
    )
    diagonal.add_argument(
        "--no-diagonal", dest="diagonal", action="store_false",
        help="Only allow up/down/left/right moves",
    )
    parser.add_argument("--config", type=Path, default=CONFIG_PATH, help="YAML config file")
    colour = parser.add_mutually_exclusive_group()
    colour.add_argument(
        "--colour", dest="colour", action="store_true", default=None,
        help="Colour the rendered map",
    )
    colour.add_argument(
        "--no-colour", dest="colour", action="store_false", help="Plain text output"
    )
    return parser.parse_args(argv)


def run(
    layout: str,
    allow_diagonal: bool,
    view: TextView,
) -> int:
    """Solve ``layout`` and print the result. Returns the process exit code."""

    try:
        grid = TextGrid(layout)
    except MapParseError as exc:
        print(f"invalid map: {exc}", file=sys.stderr)
        return EXIT_BAD_MAP

    solver = AStarSolver(grid, allow_diagonal=allow_diagonal)
    path = solver.solve()
    if not path and not solver.endpoints_valid():
        logger.warning("Start or end cell is blocked")

    out = view.stream if view.stream is not None else sys.stdout
    out.write(f"path_length: {len(path)}\n")
    for pos in path:
        out.write(f"path: {pos.x} {pos.y}\n")
    view.render(grid, path)
    return EXIT_FOUND if path else EXIT_NO_PATH


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = parse_args(argv)
    cfg = bootstrap(args.config)

    if args.map_file is not None:
        try:
            layout = args.map_file.read_text(encoding="utf-8")
        except OSError as exc:
            print(f"cannot read map: {exc}", file=sys.stderr)
            return EXIT_BAD_MAP
    else:
        layout = SAMPLE_MAP

    allow_diagonal = cfg.solver.allow_diagonal if args.diagonal is None else args.diagonal
    colour = cfg.render.colour if args.colour is None else args.colour
    view = TextView(colour=colour, path_glyph=cfg.render.path_glyph)
    logger.info("Solving %s (diagonal=%s)", args.map_file or "sample map", allow_diagonal)
    return run(layout, allow_diagonal, view)


if __name__ == "__main__":
    sys.exit(main())
