"""
Load and expose app config (YAML). Used by the pipeline to get output path, oracle settings, etc.
Image size, plane window and iteration count are constants in fractpunk.fractal, not config.
"""
import os
from pathlib import Path
from typing import Any

import yaml

API_KEY_ENV = "OPENAI_API_KEY"


def _project_root() -> Path:
    return Path(__file__).resolve().parent.parent


def load_config(config_path: Path | None = None) -> dict[str, Any]:
    """Load config from YAML. Path is optional; defaults to config/default.yaml."""
    if config_path is None:
        config_path = _project_root() / "config" / "default.yaml"
    path = Path(config_path)
    if not path.exists():
        return _apply_env(_defaults())
    with open(path, encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}
    return _apply_env(merge_config(_defaults(), data))


def merge_config(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    """Merge override into base one section deep, so a partial section keeps the other defaults."""
    out = {k: dict(v) if isinstance(v, dict) else v for k, v in base.items()}
    for key, value in (override or {}).items():
        if value is None and isinstance(out.get(key), dict):
            continue  # empty YAML section
        if isinstance(out.get(key), dict) and not isinstance(value, dict):
            raise ValueError(f"Config section {key!r} must be a mapping, got {type(value).__name__}")
        if isinstance(value, dict) and isinstance(out.get(key), dict):
            out[key] = {**out[key], **value}
        else:
            out[key] = value
    return out


def _defaults() -> dict[str, Any]:
    return {
        "output": {"path": "fractpunk_fractal.png"},
        "render": {"seed": None, "mark": "line"},
        "oracle": {
            "enabled": True,
            "endpoint": "https://api.openai.com/v1/chat/completions",
            "model": "gpt-4",
            "api_key": "YOUR_OPENAI_API_KEY",
            "timeout": None,
            "max_retries": 0,
            "fallback_on_error": False,
        },
    }


def _apply_env(config: dict[str, Any]) -> dict[str, Any]:
    key = os.environ.get(API_KEY_ENV)
    if key:
        config.setdefault("oracle", {})["api_key"] = key
    return config


def get_output_path(config: dict[str, Any]) -> Path:
    """Output PNG path. Relative paths resolve against the working directory."""
    return Path(config.get("output", {}).get("path") or "fractpunk_fractal.png")
