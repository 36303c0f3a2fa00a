"""Configuration loading for eddyctl.

The packaged defaults are read first; a user file at
``$XDG_CONFIG_HOME/eddyctl/config.yaml`` may then override individual keys.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from importlib import resources
from importlib.resources.abc import Traversable
from pathlib import Path
from typing import Any

from eddyctl.core.documents import read_yaml, validate_document
from eddyctl.core.errors import ConfigLoadError, ConfigValidationError
from eddyctl.core.service_data import DEFAULT_SERVICE_UUIDS, normalize_uuid

_SCHEMA_NAME = "config.schema.json"
LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True)
class Config:
    log_level: str = "WARNING"
    service_uuids: tuple[str, ...] = DEFAULT_SERVICE_UUIDS
    drop_unknown_frames: bool = True


@dataclass(frozen=True)
class LoadedConfig:
    config: Config
    sources: tuple[str, ...]


def _user_config_path() -> Path:
    xdg_config = Path(os.environ.get("XDG_CONFIG_HOME", Path.home() / ".config"))
    return xdg_config / "eddyctl/config.yaml"


def _packaged_config_path() -> Traversable:
    return resources.files("eddyctl.defaults").joinpath("config.yaml")


def _read_config(path: Path | Traversable) -> dict[str, Any]:
    doc = read_yaml(path, load_error=ConfigLoadError, validation_error=ConfigValidationError)
    validate_document(doc, _SCHEMA_NAME, path, validation_error=ConfigValidationError)
    return doc


def build_config(doc: dict[str, Any]) -> Config:
    defaults = Config()
    service_uuids = defaults.service_uuids
    if "service_uuids" in doc:
        service_uuids = tuple(normalize_uuid(uuid) for uuid in doc["service_uuids"])
    return Config(
        log_level=doc.get("log_level", defaults.log_level),
        service_uuids=service_uuids,
        drop_unknown_frames=doc.get("drop_unknown_frames", defaults.drop_unknown_frames),
    )


def load_config(path: Path | None = None) -> LoadedConfig:
    """Load defaults merged with the user file (or ``path`` when given)."""
    packaged = _packaged_config_path()
    merged = _read_config(packaged)
    sources = [str(packaged)]

    user_path = path or _user_config_path()
    if path is not None and not path.is_file():
        raise ConfigLoadError(f"Config file {path} does not exist")
    if user_path.is_file():
        user_doc = _read_config(user_path)
        LOGGER.debug("Overriding config keys %s from %s", sorted(user_doc), user_path)
        merged.update(user_doc)
        sources.append(str(user_path))

    return LoadedConfig(config=build_config(merged), sources=tuple(sources))
