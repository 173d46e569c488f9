"""Configuration management with XDG paths, atomic writes, and precedence resolution.

This module handles the small amount of persistent configuration oasmodel
has:

* **Directory layout** -- XDG Base Directory compliant on Linux/BSD,
  ``~/.oasmodel/`` on macOS and Windows. See :func:`get_config_dir`.
* **Settings** -- A single :class:`Settings` JSON file storing defaults
  for new documents, encoding and output.
* **Precedence resolution** -- :func:`load_settings` layers environment
  variables over the config file over built-in defaults.

All file writes use an atomic temp-file-then-rename strategy
(:func:`atomic_write`), which :func:`~oasmodel.loader.save_document` reuses
for documents.
"""

from __future__ import annotations

import json
import os
import platform
import tempfile
from pathlib import Path
from typing import Any, Optional

from pydantic import BaseModel, Field, ValidationError

from oasmodel.exceptions import ConfigError
from oasmodel.models import DEFAULT_OPENAPI_VERSION

_APP_NAME = "oasmodel"
_CONFIG_FILENAME = "config.json"

_ENV_OVERRIDES = {
    "OASMODEL_OPENAPI_VERSION": "openapi_version",
    "OASMODEL_INDENT": "indent",
    "OASMODEL_OUTPUT_FORMAT": "output_format",
    "OASMODEL_HTTP_TIMEOUT": "http_timeout",
}


class Settings(BaseModel):
    """User-wide settings persisted at ``~/.config/oasmodel/config.json``.

    Loaded by :func:`load_settings` and saved by :func:`save_settings`.
    Environment variables override values read from the file.
    """

    openapi_version: str = Field(
        default=DEFAULT_OPENAPI_VERSION,
        description="Version tag written into new documents",
    )
    indent: int = Field(default=2, ge=0, description="Indentation for written documents")
    output_format: str = Field(
        default="auto", description="Output format: auto, json, plain, rich"
    )
    http_timeout: float = Field(
        default=30.0, gt=0, description="Timeout in seconds when fetching documents"
    )


# --- XDG path resolution ---


def _is_xdg_platform() -> bool:
    """Return True if the platform supports XDG Base Directory spec (Linux/FreeBSD)."""
    return platform.system() == "Linux" or platform.system().endswith("BSD")


def _fallback_base_dir() -> Path:
    """Fallback base directory for non-XDG platforms (macOS, Windows)."""
    return Path.home() / f".{_APP_NAME}"


def _xdg_base(env_var: str, default_segments: tuple[str, ...]) -> Path:
    """Resolve an XDG base directory from an env var with fallback segments under $HOME."""
    env_value = os.environ.get(env_var, "")
    if env_value:
        return Path(env_value)
    base = Path.home()
    for seg in default_segments:
        base = base / seg
    return base


def get_config_dir() -> Path:
    """Return the configuration directory, creating it if necessary.

    On Linux/BSD: ``$XDG_CONFIG_HOME/oasmodel/`` (default ``~/.config/oasmodel/``).
    On macOS/Windows: ``~/.oasmodel/``.

    Returns:
        Absolute path to the configuration directory (guaranteed to exist).
    """
    if _is_xdg_platform():
        base = _xdg_base("XDG_CONFIG_HOME", (".config",))
        path = base / _APP_NAME
    else:
        path = _fallback_base_dir()
    path.mkdir(parents=True, exist_ok=True)
    return path


# --- Atomic file writes ---


def atomic_write(path: Path, data: str) -> None:
    """Write data to file atomically using temp file + rename.

    The temporary file is created in the same directory as *path* so that
    ``os.replace`` is guaranteed to be an atomic rename on POSIX systems.
    On success the temp file is renamed over *path*; on any failure the temp
    file is cleaned up.
    """
    path.parent.mkdir(parents=True, exist_ok=True)

    fd = None
    tmp_path: Optional[str] = None
    try:
        fd = tempfile.NamedTemporaryFile(
            mode="w",
            dir=path.parent,
            prefix=f".{path.name}.",
            suffix=".tmp",
            delete=False,
            encoding="utf-8",
        )
        tmp_path = fd.name
        fd.write(data)
        fd.flush()
        os.fsync(fd.fileno())
        fd.close()
        fd = None  # prevent double-close in finally
        os.replace(tmp_path, path)
    except BaseException:
        # Clean up the temp file on any error (including KeyboardInterrupt).
        if fd is not None:
            fd.close()
        if tmp_path is not None:
            try:
                os.unlink(tmp_path)
            except OSError:
                pass
        raise


# --- Settings ---


def _settings_path() -> Path:
    """Path to the settings file."""
    return get_config_dir() / _CONFIG_FILENAME


def _read_settings_file() -> dict[str, Any]:
    path = _settings_path()
    if not path.is_file():
        return {}
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except (json.JSONDecodeError, OSError) as exc:
        raise ConfigError(f"Invalid config at {path}: {exc}") from exc
    if not isinstance(data, dict):
        raise ConfigError(f"Invalid config at {path}: expected a JSON object")
    return data


def load_settings() -> Settings:
    """Resolve settings with the full precedence chain.

    Precedence (high to low):
        1. Environment variables (``OASMODEL_OPENAPI_VERSION``,
           ``OASMODEL_INDENT``, ``OASMODEL_OUTPUT_FORMAT``,
           ``OASMODEL_HTTP_TIMEOUT``)
        2. User config (``~/.config/oasmodel/config.json``)
        3. Defaults

    Returns:
        The effective :class:`Settings`.

    Raises:
        ConfigError: If the config file is not a valid JSON object, or if a
            file value or environment override fails validation.
    """
    data = _read_settings_file()
    for env_var, field_name in _ENV_OVERRIDES.items():
        value = os.environ.get(env_var)
        if value:
            data[field_name] = value
    try:
        return Settings.model_validate(data)
    except ValidationError as exc:
        raise ConfigError(f"Invalid settings: {exc}") from exc


def save_settings(settings: Settings) -> None:
    """Persist *settings* atomically to the config directory."""
    data = settings.model_dump(mode="json")
    atomic_write(_settings_path(), json.dumps(data, indent=2) + "\n")
