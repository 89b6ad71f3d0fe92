"""
Settings — Runtime configuration for kannot.

Sources, later ones win:
1. Defaults
2. YAML file (optional)
3. Environment: KANNOT_BACKEND, KANNOT_FIXTURES, KANNOT_LOG_LEVEL, KANNOT_LOG_FORMAT
"""

import os
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Optional, Union

import yaml

from kannot.core.errors import BackendError

BACKENDS = ("stub", "recorded")

_ENV = {
    "backend": "KANNOT_BACKEND",
    "fixtures": "KANNOT_FIXTURES",
    "log_level": "KANNOT_LOG_LEVEL",
    "log_format": "KANNOT_LOG_FORMAT",
}


@dataclass
class Settings:
    """Which backend to analyze with, and how to log."""

    backend: str = "stub"
    fixtures: Optional[str] = None
    log_level: str = "info"
    log_format: str = "console"


def load_settings(path: Union[str, Path, None] = None) -> Settings:
    """
    Load settings from an optional YAML file, then the environment.

    Raises:
        FileNotFoundError: If `path` is given and doesn't exist
        ValueError: If the file is not a mapping or names an unknown key
    """
    data = {}
    if path is not None:
        path = Path(path)
        if not path.exists():
            raise FileNotFoundError(f"Config not found: {path}")
        with open(path, encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
        if not isinstance(data, dict):
            raise ValueError(f"Config must be a mapping: {path}")

    known = {f.name for f in fields(Settings)}
    unknown = set(data) - known
    if unknown:
        raise ValueError(f"Unknown config keys: {', '.join(sorted(unknown))}")

    for key, env_var in _ENV.items():
        if os.environ.get(env_var):
            data[key] = os.environ[env_var]

    return Settings(**data)


def build_backend(settings: Settings):
    """
    Instantiate the configured analyzer backend.

    Raises:
        BackendError: For an unknown backend, or `recorded` without fixtures
    """
    from kannot.proc.backends import RecordedBackend, StubBackend

    if settings.backend == "stub":
        return StubBackend()
    if settings.backend == "recorded":
        if not settings.fixtures:
            raise BackendError("The recorded backend needs a fixtures file")
        return RecordedBackend.from_file(settings.fixtures)
    raise BackendError(
        f"Unknown backend '{settings.backend}' (expected one of {', '.join(BACKENDS)})"
    )
