"""Configuration helpers for the ClosetIQ service."""

from dataclasses import dataclass
from pathlib import Path
import os
from typing import Dict, Optional

DEFAULT_GEMINI_MODEL = "gemini-pro"
EXPLANATION_BACKENDS = ("template", "gemini")

# AppConfig field -> (settings file key, environment variable)
_SETTINGS = {
    "explanation_backend": ("explanation_backend", "EXPLANATION_BACKEND"),
    "gemini_model": ("gemini_model", "GEMINI_MODEL"),
    "api_key": ("google_api_key", "GOOGLE_API_KEY"),
    "log_level": ("log_level", "LOG_LEVEL"),
}


@dataclass
class AppConfig:
    """Configuration values for the ClosetIQ service.

    Only the outer layers read configuration. The matching and analytics
    engines use fixed constants and take no settings.
    """

    explanation_backend: str = "template"
    gemini_model: str = DEFAULT_GEMINI_MODEL
    api_key: Optional[str] = None
    log_level: str = "INFO"
    environment: str | None = None

    def __post_init__(self) -> None:
        self.explanation_backend = self.explanation_backend.lower()
        self.log_level = self.log_level.upper()
        if self.explanation_backend not in EXPLANATION_BACKENDS:
            raise ValueError(
                f"Unsupported explanation backend '{self.explanation_backend}'. "
                f"Allowed: {list(EXPLANATION_BACKENDS)}"
            )

    @classmethod
    def from_env(cls) -> "AppConfig":
        """Build a config from the process environment and an optional settings file.

        The file is ``APP_CONFIG_PATH`` when set, otherwise
        ``<CLOSET_CONFIG_DIR>/<APP_ENV>.yaml``. Environment variables win over
        file values, so the Gemini key can stay out of the file.
        """

        path = _settings_path()
        file_values = _read_settings_file(path) if path and path.exists() else {}

        values: Dict[str, str] = {}
        for field_name, (file_key, env_var) in _SETTINGS.items():
            value = os.getenv(env_var) or file_values.get(file_key)
            if value:
                values[field_name] = value
        return cls(environment=os.getenv("APP_ENV"), **values)


def _settings_path() -> Optional[Path]:
    explicit = os.getenv("APP_CONFIG_PATH")
    if explicit:
        return Path(explicit)
    env_name = os.getenv("APP_ENV")
    if env_name:
        return Path(os.getenv("CLOSET_CONFIG_DIR", "config/environments")) / f"{env_name}.yaml"
    return None


def _read_settings_file(path: Path) -> Dict[str, str]:
    """Read the known ``key: value`` lines of a flat settings file, ignoring the rest."""

    known = {file_key for file_key, _ in _SETTINGS.values()}
    values: Dict[str, str] = {}
    for line in path.read_text().splitlines():
        key, sep, raw_value = line.partition(":")
        key = key.strip()
        if sep and key in known:
            values[key] = raw_value.strip().strip("\"'")
    return values


__all__ = ["AppConfig", "DEFAULT_GEMINI_MODEL", "EXPLANATION_BACKENDS"]
