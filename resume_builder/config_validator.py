"""Configuration validator for Resume Builder startup checks."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Any, Dict, List

VALID_STORES = ("memory", "sqlite")
VALID_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class Severity(Enum):
    ERROR = "error"
    WARNING = "warning"


@dataclass
class ConfigError:
    """A single configuration issue."""
    field: str
    message: str
    severity: Severity


def validate_config(raw_config: Dict[str, Any]) -> List[ConfigError]:
    """Validate raw configuration and return a list of issues.

    Args:
        raw_config: Merged config dict (see :func:`resume_builder.config.load_raw_config`)

    Returns:
        List of ConfigError (empty = valid)
    """
    errors: List[ConfigError] = []

    # --- Store backend ---
    store = str(raw_config.get("store", "") or "").strip().lower()
    if store not in VALID_STORES:
        errors.append(ConfigError(
            field="store",
            message=f"store must be one of {', '.join(VALID_STORES)}, got {raw_config.get('store')!r}",
            severity=Severity.ERROR,
        ))

    # --- SQLite path ---
    db_path = raw_config.get("db_path", "")
    if store == "sqlite":
        if not db_path or not isinstance(db_path, str):
            errors.append(ConfigError(
                field="db_path",
                message="db_path must be a non-empty string when store is sqlite",
                severity=Severity.ERROR,
            ))
        elif Path(db_path).is_dir():
            errors.append(ConfigError(
                field="db_path",
                message=f"db_path points to a directory: {db_path}",
                severity=Severity.ERROR,
            ))

    # --- State file ---
    state_file = raw_config.get("state_file")
    if state_file and store == "sqlite":
        errors.append(ConfigError(
            field="state_file",
            message="state_file is only used by the memory store and will be ignored",
            severity=Severity.WARNING,
        ))
    if store == "memory" and not state_file:
        errors.append(ConfigError(
            field="state_file",
            message="memory store without state_file: resumes are lost on restart",
            severity=Severity.WARNING,
        ))

    # --- Log level ---
    log_level = str(raw_config.get("log_level", "INFO") or "").strip().upper()
    if log_level not in VALID_LOG_LEVELS:
        errors.append(ConfigError(
            field="log_level",
            message=f"log_level must be one of {', '.join(VALID_LOG_LEVELS)}, got {raw_config.get('log_level')!r}",
            severity=Severity.ERROR,
        ))

    return errors


def has_errors(issues: List[ConfigError]) -> bool:
    """Check if any issues are errors (not just warnings)."""
    return any(e.severity == Severity.ERROR for e in issues)
