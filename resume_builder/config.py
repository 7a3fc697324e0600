"""Runtime configuration: optional YAML file overlaid with environment variables."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

# config key -> environment variable that overrides it
ENV_VARS: Dict[str, str] = {
    "store": "RESUME_BUILDER_STORE",
    "db_path": "RESUME_BUILDER_DB_PATH",
    "state_file": "RESUME_BUILDER_STATE_FILE",
    "log_level": "RESUME_BUILDER_LOG_LEVEL",
}
CONFIG_PATH_ENV = "RESUME_BUILDER_CONFIG"

DEFAULTS: Dict[str, Any] = {
    "store": "memory",
    "db_path": "workspace/resumes.db",
    "state_file": "",
    "log_level": "INFO",
}

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


@dataclass
class AppConfig:
    store: str = "memory"
    db_path: str = "workspace/resumes.db"
    state_file: Optional[str] = None
    log_level: str = "INFO"


def load_raw_config(config_path: Optional[str] = None) -> Dict[str, Any]:
    """Merge defaults, the YAML file (if any) and environment overrides.

    *config_path* falls back to ``$RESUME_BUILDER_CONFIG``.  A missing file is
    an error only when a path was given explicitly.
    """
    raw: Dict[str, Any] = dict(DEFAULTS)

    path_value = config_path or os.environ.get(CONFIG_PATH_ENV, "").strip()
    if path_value:
        path = Path(path_value)
        if not path.exists():
            raise FileNotFoundError(f"Config file not found: {path_value}")
        with open(path, encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
        if not isinstance(data, dict):
            raise ValueError(f"Config file must contain a mapping: {path_value}")
        raw.update({key: _resolve_placeholder(value) for key, value in data.items()})

    for key, env_name in ENV_VARS.items():
        env_value = os.environ.get(env_name, "").strip()
        if env_value:
            raw[key] = env_value

    return raw


def build_config(raw: Dict[str, Any]) -> AppConfig:
    return AppConfig(
        store=str(raw.get("store") or DEFAULTS["store"]).strip().lower(),
        db_path=str(raw.get("db_path") or DEFAULTS["db_path"]),
        state_file=str(raw["state_file"]) if raw.get("state_file") else None,
        log_level=str(raw.get("log_level") or DEFAULTS["log_level"]).strip().upper(),
    )


def load_config(config_path: Optional[str] = None) -> AppConfig:
    return build_config(load_raw_config(config_path))


def configure_logging(level: str = "INFO") -> None:
    """Install a basic stream handler for CLI and server runs."""
    logging.basicConfig(level=getattr(logging, level.upper(), logging.INFO), format=LOG_FORMAT)


def _resolve_placeholder(value: Any) -> Any:
    """Resolve ``${VAR_NAME}`` string values from the environment."""
    if not isinstance(value, str):
        return value
    if value.startswith("${") and value.endswith("}"):
        return os.environ.get(value[2:-1], "")
    return value
