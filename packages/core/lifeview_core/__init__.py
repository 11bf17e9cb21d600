"""Core app services for settings, logging, the run loop, and diagnostics."""

from .config import AppConfig, load_config, save_config
from .diagnostics import DiagnosticsExporter, build_doctor_payload
from .performance import BudgetStatus, PerformanceController, PerformanceTargets
from .runner import LifeRunner, RunState, RunStatus, build_framebuffer, build_grid, build_runner

__all__ = [
    "AppConfig",
    "BudgetStatus",
    "DiagnosticsExporter",
    "LifeRunner",
    "PerformanceController",
    "PerformanceTargets",
    "RunState",
    "RunStatus",
    "build_doctor_payload",
    "build_framebuffer",
    "build_grid",
    "build_runner",
    "load_config",
    "save_config",
]
