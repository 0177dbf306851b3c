"""Simple configuration loader for gridpath."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict

import yaml


CONFIG_PATH = Path(__file__).resolve().parents[1] / "config.yaml"


@dataclass
class SolverConfig:
    """Configuration values for the solver section."""

    allow_diagonal: bool = False


@dataclass
class RenderConfig:
    """How found paths are drawn."""

    colour: bool = False
    path_glyph: str = "W"


@dataclass
class LoggingConfig:
    """Root log level plus optional per-module overrides."""

    global_level: str = "WARNING"
    module_levels: Dict[str, str] = field(default_factory=dict)


@dataclass
class Config:
    """Top level configuration dataclass."""

    solver: SolverConfig
    render: RenderConfig
    logging: LoggingConfig


def _parse_config(data: dict[str, Any]) -> Config:
    """Convert raw ``data`` into :class:`Config`."""

    solver_data = data.get("solver", {}) or {}
    solver = SolverConfig(
        allow_diagonal=bool(solver_data.get("allow_diagonal", False)),
    )

    render_data = data.get("render", {}) or {}
    glyph = str(render_data.get("path_glyph", "W")) or "W"
    render = RenderConfig(
        colour=bool(render_data.get("colour", False)),
        path_glyph=glyph[:1],
    )

    logging_data = data.get("logging", {}) or {}
    log_cfg = LoggingConfig(
        global_level=str(logging_data.get("global_level", "WARNING")).upper(),
        module_levels=dict(logging_data.get("module_levels") or {}),
    )

    return Config(solver=solver, render=render, logging=log_cfg)


def load_config(path: Path = CONFIG_PATH) -> Config:
    """Load configuration from ``path`` and return a :class:`Config`."""

    path = Path(path)
    if path.is_file():
        raw = yaml.safe_load(path.read_text()) or {}
    else:
        raw = {}
    return _parse_config(raw)


__all__ = [
    "Config",
    "SolverConfig",
    "RenderConfig",
    "LoggingConfig",
    "load_config",
]
