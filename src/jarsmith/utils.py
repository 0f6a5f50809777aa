"""Shared helpers: environment-derived paths and log level."""

import logging
import os
from pathlib import Path

PROJECT_FILE = "jarsmith.toml"
DEFAULT_BUILD_DIR = "jarsmith_build"


def build_dir(project_dir: Path) -> Path:
    """Workspace root for a project.

    ``JARSMITH_BUILD_DIR`` overrides the default ``<project>/jarsmith_build``.
    Relative overrides are resolved against the project directory.
    """
    override = os.getenv("JARSMITH_BUILD_DIR", "").strip()
    if not override:
        return project_dir / DEFAULT_BUILD_DIR
    path = Path(os.path.expanduser(override))
    return path if path.is_absolute() else project_dir / path


def log_level(default: int = logging.INFO) -> int:
    """Resolve ``JARSMITH_LOG_LEVEL`` (name or number), falling back to default."""
    raw = os.getenv("JARSMITH_LOG_LEVEL", "").strip()
    if not raw:
        return default
    if raw.isdigit():
        return int(raw)
    level = logging.getLevelName(raw.upper())
    return level if isinstance(level, int) else default
