"""CLI entrypoints for the LifeView window, headless runs, snapshots, and diagnostics."""

from __future__ import annotations

import argparse
import json
import time
from dataclasses import asdict
from pathlib import Path

from lifeview_core import (
    AppConfig,
    DiagnosticsExporter,
    LifeRunner,
    PerformanceController,
    PerformanceTargets,
    build_doctor_payload,
    build_framebuffer,
    build_grid,
    build_runner,
    load_config,
)
from lifeview_core.logging_setup import configure_logging, get_logger
from lifeview_display import HeadlessDisplay, Key
from lifeview_renderer import list_palettes
from lifeview_sim import get_pattern, list_patterns, list_scenes


def _print_json(data: object) -> None:
    print(json.dumps(data, indent=2, sort_keys=True, default=str))


def _positive_int(text: str) -> int:
    value = int(text)
    if value < 1:
        raise argparse.ArgumentTypeError(f"must be at least 1, got {value}")
    return value


def _load_with_overrides(args: argparse.Namespace) -> AppConfig:
    cfg = load_config()
    if getattr(args, "scene", None):
        cfg.grid.scene = args.scene
    if getattr(args, "palette", None):
        cfg.colors.palette = args.palette
    if getattr(args, "width", None) is not None:
        cfg.grid.width = args.width
    if getattr(args, "height", None) is not None:
        cfg.grid.height = args.height
    if getattr(args, "seed_policy", None):
        cfg.grid.seed_policy = args.seed_policy
    if getattr(args, "delay_ms", None) is not None:
        cfg.run.frame_delay_ms = max(0, args.delay_ms)
    return cfg


def cmd_run(args: argparse.Namespace) -> int:
    from .app import run_gui

    cfg = _load_with_overrides(args)
    if args.scale_mode:
        cfg.window.scale_mode = args.scale_mode
    if args.borderless:
        cfg.window.borderless = True
    return run_gui(cfg)


def cmd_headless(args: argparse.Namespace) -> int:
    cfg = _load_with_overrides(args)
    if args.delay_ms is None:
        cfg.run.frame_delay_ms = 0
    cfg.run.max_generations = args.generations

    runner = build_runner(cfg, HeadlessDisplay())
    status = runner.run()
    payload = asdict(status)
    payload["state"] = status.state.value
    payload["grid"] = {"width": runner.grid.width, "height": runner.grid.height}
    if args.cells:
        payload["live_cells"] = runner.grid.live_cells()
    _print_json(payload)
    return 0


def cmd_snapshot(args: argparse.Namespace) -> int:
    cfg = _load_with_overrides(args)
    grid = build_grid(cfg)
    framebuffer = build_framebuffer(cfg)
    for _ in range(args.generations):
        grid.step()
    grid.render(framebuffer)

    out = framebuffer.save_png(Path(args.out).expanduser(), scale=args.scale)
    _print_json(
        {
            "success": True,
            "path": str(out),
            "generation": grid.generation,
            "population": grid.population,
            "size": [framebuffer.width * args.scale, framebuffer.height * args.scale],
        }
    )
    return 0


def cmd_patterns(_args: argparse.Namespace) -> int:
    patterns = []
    for name in list_patterns():
        pattern = get_pattern(name)
        patterns.append(
            {
                "name": pattern.name,
                "kind": pattern.kind.value,
                "width": pattern.width,
                "height": pattern.height,
                "cells": len(pattern.cells),
            }
        )
    _print_json({"patterns": patterns, "scenes": list_scenes(), "palettes": list_palettes()})
    return 0


def cmd_benchmark(args: argparse.Namespace) -> int:
    cfg = _load_with_overrides(args)
    perf = PerformanceController(
        PerformanceTargets(
            cpu_percent_max=cfg.performance.cpu_percent_max,
            rss_mb_max=cfg.performance.rss_mb_max,
            fps_min=cfg.performance.fps_min,
        )
    )
    runner = LifeRunner(
        grid=build_grid(cfg),
        framebuffer=build_framebuffer(cfg),
        display=HeadlessDisplay(),
        frame_delay_ms=0,
        exit_key=Key(cfg.run.exit_key),
    )

    start = time.perf_counter()
    deadline = start + args.seconds
    samples = []
    while time.perf_counter() < deadline:
        status = runner.tick()
        if status.frames % 50 == 0:
            samples.append(asdict(perf.sample(status.fps)))

    elapsed = max(time.perf_counter() - start, 1e-9)
    status = runner.status
    generations_per_s = status.frames / elapsed
    final = perf.sample(generations_per_s)
    samples.append(asdict(final))

    cpu_max = max(s["cpu_percent"] for s in samples)
    rss_max = max(s["rss_mb"] for s in samples)
    pass_cpu = cpu_max <= cfg.performance.cpu_percent_max
    pass_mem = rss_max <= cfg.performance.rss_mb_max
    pass_fps = generations_per_s >= cfg.performance.fps_min

    _print_json(
        {
            "seconds": args.seconds,
            "grid": {"width": runner.grid.width, "height": runner.grid.height},
            "generations": status.generation,
            "generations_per_s": generations_per_s,
            "population": status.population,
            "budget": {
                "targets": asdict(perf.targets),
                "max_observed": {"cpu_percent": cpu_max, "rss_mb": rss_max},
                "pass": bool(pass_cpu and pass_mem and pass_fps),
                "checks": {"cpu": pass_cpu, "memory": pass_mem, "fps": pass_fps},
            },
        }
    )
    return 0


def cmd_doctor(args: argparse.Namespace) -> int:
    cfg = load_config()
    payload = build_doctor_payload(cfg)

    if args.export:
        exporter = DiagnosticsExporter()
        out_dir = Path(args.out_dir).expanduser().resolve() if args.out_dir else None
        bundle = exporter.bundle(cfg=cfg, doctor_payload=payload, recent_run_events=[], output_dir=out_dir)
        payload["diagnostics_bundle"] = str(bundle)

    _print_json(payload)
    return 0


def _add_world_args(cmd: argparse.ArgumentParser) -> None:
    cmd.add_argument("--scene", choices=list_scenes(), default=None, help="Starting scene")
    cmd.add_argument("--palette", choices=list_palettes(), default=None, help="Cell palette")
    cmd.add_argument("--width", type=_positive_int, default=None, help="Grid width in cells")
    cmd.add_argument("--height", type=_positive_int, default=None, help="Grid height in cells")
    cmd.add_argument("--seed-policy", choices=["wrap", "reject"], default=None, help="Out-of-range seed handling")
    cmd.add_argument("--delay-ms", type=int, default=None, help="Delay between generations")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="lifeview", description="Conway's Game of Life on a toroidal grid")
    sub = parser.add_subparsers(dest="command", required=True)

    run_cmd = sub.add_parser("run", help="Open the simulation window")
    _add_world_args(run_cmd)
    run_cmd.add_argument("--scale-mode", choices=["stretch", "aspect", "center", "upper_left"], default=None)
    run_cmd.add_argument("--borderless", action="store_true", help="Hide window decorations")
    run_cmd.set_defaults(func=cmd_run)

    headless_cmd = sub.add_parser("headless", help="Run generations without a window")
    _add_world_args(headless_cmd)
    headless_cmd.add_argument("--generations", type=int, default=100)
    headless_cmd.add_argument("--cells", action="store_true", help="Include final live cells in output")
    headless_cmd.set_defaults(func=cmd_headless)

    snap_cmd = sub.add_parser("snapshot", help="Write a PNG of the grid after N generations")
    _add_world_args(snap_cmd)
    snap_cmd.add_argument("--generations", type=int, default=0)
    snap_cmd.add_argument("--out", required=True, help="Output PNG path")
    snap_cmd.add_argument("--scale", type=_positive_int, default=1, help="Integer pixel scale factor")
    snap_cmd.set_defaults(func=cmd_snapshot)

    patterns_cmd = sub.add_parser("patterns", help="List built-in patterns, scenes, and palettes")
    patterns_cmd.set_defaults(func=cmd_patterns)

    bench_cmd = sub.add_parser("benchmark", help="Measure generations per second")
    _add_world_args(bench_cmd)
    bench_cmd.add_argument("--seconds", type=int, default=10)
    bench_cmd.set_defaults(func=cmd_benchmark)

    doctor_cmd = sub.add_parser("doctor", help="Print environment diagnostics")
    doctor_cmd.add_argument("--export", action="store_true", help="Export offline diagnostics bundle")
    doctor_cmd.add_argument("--out-dir", default=None, help="Optional output directory for diagnostics bundle")
    doctor_cmd.set_defaults(func=cmd_doctor)

    return parser


def main(argv: list[str] | None = None) -> int:
    configure_logging(console=False)
    parser = build_parser()
    args = parser.parse_args(argv)
    try:
        return int(args.func(args))
    except (ValueError, KeyError) as exc:
        get_logger().error(f"startup failed: {exc}", extra={"event": "startup_failed"})
        _print_json({"success": False, "error": str(exc)})
        return 2


if __name__ == "__main__":
    raise SystemExit(main())
