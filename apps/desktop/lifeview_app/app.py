"""Desktop window runtime."""

from __future__ import annotations

from lifeview_core import AppConfig, build_runner, load_config
from lifeview_core.logging_setup import configure_logging, get_logger, install_crash_hooks
from lifeview_display import DisplayUnavailableError, ScaleMode, WindowOptions


def window_options(cfg: AppConfig) -> WindowOptions:
    return WindowOptions(
        title=cfg.window.title,
        width=cfg.window.width,
        height=cfg.window.height,
        borderless=cfg.window.borderless,
        resizable=cfg.window.resizable,
        scale_mode=ScaleMode(cfg.window.scale_mode),
    )


def run_gui(cfg: AppConfig | None = None) -> int:
    cfg = cfg or load_config()
    configure_logging(keep_files=cfg.diagnostics.keep_log_files)
    install_crash_hooks()
    logger = get_logger()

    from lifeview_display.window import QtWindowDisplay

    try:
        display = QtWindowDisplay(window_options(cfg))
    except DisplayUnavailableError as exc:
        logger.error(f"display unavailable: {exc}", extra={"event": "display_unavailable"})
        return 1

    try:
        runner = build_runner(cfg, display, sleep=display.sleep)
        status = runner.run()
    finally:
        display.close()

    logger.info(
        f"app shutdown reason={status.stop_reason}",
        extra={"event": "shutdown", "generation": status.generation, "exit_code": 0},
    )
    return 0
