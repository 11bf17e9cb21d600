"""Persistent app settings schema and load/save helpers."""

from __future__ import annotations

import json
import math
import os
import platform
from dataclasses import asdict, dataclass, field
from pathlib import Path
from typing import Any

from lifeview_renderer import parse_hex_color
from lifeview_sim import DEFAULT_SCENE_NAME, list_scenes


CONFIG_VERSION = 2

_SCALE_MODES = ("stretch", "aspect", "center", "upper_left")
_SEED_POLICIES = ("wrap", "reject")
_EXIT_KEYS = ("escape", "q", "space")


@dataclass
class GridConfig:
    width: int = 80
    height: int = 60
    seed_policy: str = "wrap"
    scene: str = "showcase"


@dataclass
class WindowConfig:
    title: str = "LifeView"
    width: int = 800
    height: int = 600
    borderless: bool = False
    resizable: bool = True
    scale_mode: str = "stretch"


@dataclass
class ColorsConfig:
    palette: str = "Classic"
    background: str | None = None
    foreground: str | None = None


@dataclass
class RunConfig:
    frame_delay_ms: int = 100
    exit_key: str = "escape"
    max_generations: int | None = None


@dataclass
class DiagnosticsConfig:
    keep_log_files: int = 7


@dataclass
class PerformanceConfig:
    cpu_percent_max: float = 50.0
    rss_mb_max: float = 300.0
    fps_min: float = 5.0


@dataclass
class AppConfig:
    config_version: int = CONFIG_VERSION
    grid: GridConfig = field(default_factory=GridConfig)
    window: WindowConfig = field(default_factory=WindowConfig)
    colors: ColorsConfig = field(default_factory=ColorsConfig)
    run: RunConfig = field(default_factory=RunConfig)
    diagnostics: DiagnosticsConfig = field(default_factory=DiagnosticsConfig)
    performance: PerformanceConfig = field(default_factory=PerformanceConfig)


def config_dir() -> Path:
    system = platform.system()
    if system == "Windows":
        base = Path(os.environ.get("APPDATA", Path.home() / "AppData" / "Roaming"))
        return base / "LifeView"
    if system == "Darwin":
        return Path.home() / "Library" / "Application Support" / "LifeView"
    return Path.home() / ".config" / "lifeview"


def config_path() -> Path:
    return config_dir() / "config.json"


def _merge(dataclass_type, raw: dict[str, Any]):
    defaults = dataclass_type()  # type: ignore[misc]
    if not isinstance(raw, dict):
        return defaults
    for k, v in raw.items():
        if hasattr(defaults, k):
            setattr(defaults, k, v)
    return defaults


def _clamp(value: Any, low: int, high: int, fallback: int) -> int:
    try:
        number = int(value)
    except (TypeError, ValueError):
        return fallback
    return max(low, min(high, number))


def _normalize_grid(cfg: AppConfig) -> None:
    cfg.grid.width = _clamp(cfg.grid.width, 1, 4096, GridConfig.width)
    cfg.grid.height = _clamp(cfg.grid.height, 1, 4096, GridConfig.height)
    if cfg.grid.seed_policy not in _SEED_POLICIES:
        cfg.grid.seed_policy = "wrap"
    if cfg.grid.scene not in list_scenes():
        cfg.grid.scene = DEFAULT_SCENE_NAME


def _normalize_window(cfg: AppConfig) -> None:
    cfg.window.width = _clamp(cfg.window.width, 64, 8192, WindowConfig.width)
    cfg.window.height = _clamp(cfg.window.height, 64, 8192, WindowConfig.height)
    cfg.window.borderless = bool(cfg.window.borderless)
    cfg.window.resizable = bool(cfg.window.resizable)
    if cfg.window.scale_mode not in _SCALE_MODES:
        cfg.window.scale_mode = "stretch"


def _normalize_run(cfg: AppConfig) -> None:
    cfg.run.frame_delay_ms = _clamp(cfg.run.frame_delay_ms, 0, 5000, RunConfig.frame_delay_ms)
    if cfg.run.exit_key not in _EXIT_KEYS:
        cfg.run.exit_key = "escape"
    if cfg.run.max_generations is not None:
        cfg.run.max_generations = _clamp(cfg.run.max_generations, 0, 10**9, 0)


def _normalize_diagnostics(cfg: AppConfig) -> None:
    cfg.diagnostics.keep_log_files = _clamp(cfg.diagnostics.keep_log_files, 2, 90, DiagnosticsConfig.keep_log_files)


def _normalize_colors(cfg: AppConfig) -> None:
    if not isinstance(cfg.colors.palette, str):
        cfg.colors.palette = ColorsConfig.palette
    for name in ("background", "foreground"):
        value = getattr(cfg.colors, name)
        if value is None:
            continue
        try:
            parse_hex_color(value)
        except (AttributeError, ValueError):
            setattr(cfg.colors, name, None)


def _float(value: Any, low: float, fallback: float) -> float:
    try:
        number = float(value)
    except (TypeError, ValueError):
        return fallback
    if math.isnan(number):
        return fallback
    return max(low, number)


def _normalize_performance(cfg: AppConfig) -> None:
    cfg.performance.cpu_percent_max = _float(cfg.performance.cpu_percent_max, 1.0, PerformanceConfig.cpu_percent_max)
    cfg.performance.rss_mb_max = _float(cfg.performance.rss_mb_max, 64.0, PerformanceConfig.rss_mb_max)
    cfg.performance.fps_min = _float(cfg.performance.fps_min, 1.0, PerformanceConfig.fps_min)


def _section(data: dict[str, Any], name: str) -> dict[str, Any]:
    value = data.get(name)
    return dict(value) if isinstance(value, dict) else {}


def _migrate(raw: dict[str, Any]) -> dict[str, Any]:
    version = _clamp(raw.get("config_version", 1), 1, CONFIG_VERSION, 1)
    data = dict(raw)

    if version < 2:
        # v1 kept the frame delay and colors at the top level.
        run = _section(data, "run")
        if "frame_delay_ms" in data:
            run.setdefault("frame_delay_ms", data.pop("frame_delay_ms"))
        data["run"] = run
        colors = _section(data, "colors")
        if "palette" in data:
            colors.setdefault("palette", data.pop("palette"))
        data["colors"] = colors
        data["config_version"] = 2

    return data


def load_config(path: Path | None = None) -> AppConfig:
    path = path or config_path()
    if not path.exists():
        return AppConfig()

    try:
        raw = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, ValueError):
        return AppConfig()
    if not isinstance(raw, dict):
        return AppConfig()

    data = _migrate(raw)
    cfg = AppConfig(
        config_version=_clamp(data.get("config_version"), 1, CONFIG_VERSION, CONFIG_VERSION),
        grid=_merge(GridConfig, data.get("grid", {})),
        window=_merge(WindowConfig, data.get("window", {})),
        colors=_merge(ColorsConfig, data.get("colors", {})),
        run=_merge(RunConfig, data.get("run", {})),
        diagnostics=_merge(DiagnosticsConfig, data.get("diagnostics", {})),
        performance=_merge(PerformanceConfig, data.get("performance", {})),
    )

    _normalize_grid(cfg)
    _normalize_window(cfg)
    _normalize_run(cfg)
    _normalize_colors(cfg)
    _normalize_diagnostics(cfg)
    _normalize_performance(cfg)
    return cfg


def save_config(cfg: AppConfig, path: Path | None = None) -> Path:
    cfg.config_version = CONFIG_VERSION
    path = path or config_path()
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(asdict(cfg), indent=2, sort_keys=True), encoding="utf-8")
    return path
