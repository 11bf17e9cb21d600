"""Fixed-interval run loop: step, render, present, sleep, poll for exit."""

from __future__ import annotations

import time
from dataclasses import dataclass
from datetime import datetime, timezone
from enum import Enum
from typing import Any, Callable

from lifeview_display import DisplaySurface, Key
from lifeview_renderer import Framebuffer, get_palette, parse_hex_color
from lifeview_sim import LifeGrid, SeedPolicy, scene_cells

from .config import AppConfig
from .logging_setup import get_logger


class RunState(str, Enum):
    IDLE = "Idle"
    RUNNING = "Running"
    STOPPED = "Stopped"


@dataclass
class RunStatus:
    state: RunState = RunState.IDLE
    generation: int = 0
    population: int = 0
    frames: int = 0
    fps: float = 0.0
    stop_reason: str | None = None


class LifeRunner:
    def __init__(
        self,
        grid: LifeGrid,
        framebuffer: Framebuffer,
        display: DisplaySurface,
        frame_delay_ms: int = 100,
        exit_key: Key = Key.ESCAPE,
        max_generations: int | None = None,
        sleep: Callable[[float], None] | None = None,
        clock: Callable[[], float] = time.perf_counter,
    ) -> None:
        if frame_delay_ms < 0:
            raise ValueError("frame_delay_ms must be non-negative")
        self.grid = grid
        self.framebuffer = framebuffer
        self.display = display
        self.frame_delay_ms = frame_delay_ms
        self.exit_key = Key(exit_key)
        self.max_generations = max_generations

        self._sleep = sleep or time.sleep
        self._clock = clock
        self._status = RunStatus(generation=grid.generation, population=grid.population)
        self._events: list[dict[str, Any]] = []
        self._last_tick: float | None = None
        self._logger = get_logger()

    @property
    def status(self) -> RunStatus:
        return self._status

    def recent_events(self, limit: int = 200) -> list[dict[str, Any]]:
        return self._events[-limit:]

    def _log_event(self, event: str, **fields: Any) -> None:
        row = {
            "ts_utc": datetime.now(timezone.utc).isoformat(),
            "event": event,
            "state": self._status.state.value,
        }
        row.update(fields)
        self._events.append(row)
        if len(self._events) > 1000:
            self._events = self._events[-1000:]

    def stop_reason(self) -> str | None:
        if not self.display.is_open():
            return "window_closed"
        if self.display.is_key_down(self.exit_key):
            return "exit_key"
        if self.max_generations is not None and self.grid.generation >= self.max_generations:
            return "generation_limit"
        return None

    def should_continue(self) -> bool:
        """Poll the stop conditions once and remember why the run should end."""
        self._status.stop_reason = self.stop_reason()
        return self._status.stop_reason is None

    def tick(self) -> RunStatus:
        self.grid.step()
        self.grid.render(self.framebuffer)
        self.display.update_with_buffer(self.framebuffer.buffer, self.framebuffer.width, self.framebuffer.height)

        now = self._clock()
        if self._last_tick is not None:
            elapsed = max(now - self._last_tick, 1e-9)
            fps = 1.0 / elapsed
            self._status.fps = fps if self._status.fps == 0 else (0.75 * self._status.fps + 0.25 * fps)
        self._last_tick = now

        self._status.generation = self.grid.generation
        self._status.population = self.grid.population
        self._status.frames += 1
        self._log_event("frame", generation=self._status.generation, population=self._status.population)
        return self._status

    def run(self) -> RunStatus:
        self._status.state = RunState.RUNNING
        self._status.stop_reason = None
        self._log_event("run_start", width=self.grid.width, height=self.grid.height)
        self._logger.info(
            f"run started grid={self.grid.width}x{self.grid.height} delay_ms={self.frame_delay_ms}",
            extra={"event": "run_start", "population": self.grid.population},
        )

        delay_s = self.frame_delay_ms / 1000
        while self.should_continue():
            self.tick()
            self._sleep(delay_s)

        self._status.state = RunState.STOPPED
        self._log_event("run_stop", reason=self._status.stop_reason, frames=self._status.frames)
        self._logger.info(
            f"run stopped reason={self._status.stop_reason}",
            extra={
                "event": "run_stop",
                "generation": self._status.generation,
                "population": self._status.population,
            },
        )
        return self._status


def build_grid(cfg: AppConfig) -> LifeGrid:
    return LifeGrid(
        cfg.grid.width,
        cfg.grid.height,
        scene_cells(cfg.grid.scene),
        seed_policy=SeedPolicy(cfg.grid.seed_policy),
    )


def build_framebuffer(cfg: AppConfig) -> Framebuffer:
    palette = get_palette(cfg.colors.palette)
    background = cfg.colors.background or palette.background
    foreground = cfg.colors.foreground or palette.foreground

    framebuffer = Framebuffer(cfg.grid.width, cfg.grid.height)
    framebuffer.set_background_color(parse_hex_color(background))
    framebuffer.set_current_color(parse_hex_color(foreground))
    framebuffer.clear()
    return framebuffer


def build_runner(
    cfg: AppConfig,
    display: DisplaySurface,
    sleep: Callable[[float], None] | None = None,
) -> LifeRunner:
    return LifeRunner(
        grid=build_grid(cfg),
        framebuffer=build_framebuffer(cfg),
        display=display,
        frame_delay_ms=cfg.run.frame_delay_ms,
        exit_key=Key(cfg.run.exit_key),
        max_generations=cfg.run.max_generations,
        sleep=sleep,
    )
