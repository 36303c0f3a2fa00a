from __future__ import annotations

from pathlib import Path

import pytest

from eddyctl.core.config import Config, load_config
from eddyctl.core.errors import ConfigLoadError, ConfigValidationError
from eddyctl.core.service_data import DEFAULT_SERVICE_UUIDS, EDDYSTONE_SERVICE_UUID


def test_packaged_defaults() -> None:
    loaded = load_config()
    assert loaded.config == Config()
    assert loaded.config.service_uuids == DEFAULT_SERVICE_UUIDS
    assert len(loaded.sources) == 1


def test_user_config_overrides_keys(isolated_config_home: Path, write_file) -> None:
    write_file(
        isolated_config_home / "eddyctl" / "config.yaml",
        """
log_level: INFO
service_uuids: ["feaa"]
drop_unknown_frames: false
""",
    )

    loaded = load_config()
    assert loaded.config.log_level == "INFO"
    assert loaded.config.service_uuids == (EDDYSTONE_SERVICE_UUID,)
    assert loaded.config.drop_unknown_frames is False
    assert len(loaded.sources) == 2


def test_partial_user_config_keeps_defaults(isolated_config_home: Path, write_file) -> None:
    write_file(isolated_config_home / "eddyctl" / "config.yaml", "log_level: DEBUG\n")

    config = load_config().config
    assert config.log_level == "DEBUG"
    assert config.service_uuids == DEFAULT_SERVICE_UUIDS
    assert config.drop_unknown_frames is True


def test_explicit_path(tmp_path: Path, write_file) -> None:
    path = write_file(tmp_path / "custom.yaml", "log_level: ERROR\n")
    assert load_config(path).config.log_level == "ERROR"


def test_explicit_missing_path(tmp_path: Path) -> None:
    with pytest.raises(ConfigLoadError):
        load_config(tmp_path / "missing.yaml")


@pytest.mark.parametrize(
    "content",
    [
        "log_level: LOUD\n",
        "unknown_key: 1\n",
        "service_uuids: []\n",
        "service_uuids: ['zzzz']\n",
        "log_level: INFO\nlog_level: DEBUG\n",
        "- just\n- a list\n",
        "log_level: [unclosed\n",
    ],
)
def test_invalid_user_config_rejected(isolated_config_home: Path, write_file, content: str) -> None:
    write_file(isolated_config_home / "eddyctl" / "config.yaml", content)

    with pytest.raises(ConfigValidationError):
        load_config()
