"""Diagnostics export helpers for local support bundles."""

from __future__ import annotations

import json
import platform
import tempfile
import zipfile
from dataclasses import asdict, is_dataclass
from datetime import datetime, timezone
from importlib import metadata
from pathlib import Path
from typing import Any

from lifeview_display import display_available
from lifeview_renderer import list_palettes
from lifeview_sim import list_patterns, list_scenes

from .config import AppConfig, config_path
from .logging_setup import log_dir


def _jsonable(value: Any) -> Any:
    if is_dataclass(value):
        return asdict(value)
    if isinstance(value, Path):
        return str(value)
    return value


def _package_version(name: str) -> str | None:
    try:
        return metadata.version(name)
    except metadata.PackageNotFoundError:
        return None


def build_doctor_payload(cfg: AppConfig) -> dict[str, Any]:
    return {
        "ts_utc": datetime.now(timezone.utc).isoformat(),
        "platform": platform.platform(),
        "python": platform.python_version(),
        "libraries": {
            "PySide6": _package_version("PySide6"),
            "numpy": _package_version("numpy"),
            "Pillow": _package_version("Pillow"),
            "psutil": _package_version("psutil"),
        },
        "display_available": display_available(),
        "config_path": str(config_path()),
        "config": asdict(cfg),
        "palettes": list_palettes(),
        "patterns": list_patterns(),
        "scenes": list_scenes(),
    }


class DiagnosticsExporter:
    def __init__(self, app_name: str = "LifeView") -> None:
        self.app_name = app_name

    def bundle(
        self,
        cfg: AppConfig,
        doctor_payload: dict[str, Any],
        recent_run_events: list[dict[str, Any]] | None = None,
        output_dir: Path | None = None,
        logs_dir: Path | None = None,
    ) -> Path:
        output_base = output_dir or Path(tempfile.gettempdir())
        output_base.mkdir(parents=True, exist_ok=True)
        stamp = datetime.now().strftime("%Y%m%d-%H%M%S")
        zip_path = output_base / f"lifeview-diagnostics-{stamp}.zip"

        logs_base = logs_dir or log_dir()
        logs = sorted(logs_base.glob("*.log*"))

        with zipfile.ZipFile(zip_path, "w", compression=zipfile.ZIP_DEFLATED) as zf:
            manifest = {
                "app": self.app_name,
                "created_utc": datetime.now(timezone.utc).isoformat(),
                "host": platform.platform(),
                "python": platform.python_version(),
                "config_path": str(config_path()),
                "log_dir": str(logs_base),
            }
            zf.writestr("manifest.json", json.dumps(manifest, indent=2, sort_keys=True))
            zf.writestr("doctor.json", json.dumps(doctor_payload, indent=2, sort_keys=True, default=_jsonable))
            zf.writestr("config.json", json.dumps(asdict(cfg), indent=2, sort_keys=True))
            zf.writestr(
                "run_events.json",
                json.dumps(recent_run_events or [], indent=2, sort_keys=True, default=_jsonable),
            )

            for item in logs:
                zf.write(item, arcname=f"logs/{item.name}")

        return zip_path
