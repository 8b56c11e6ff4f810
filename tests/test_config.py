from __future__ import annotations

import json
from pathlib import Path

import pytest

from sliding_window import (
    InvalidArgumentError,
    SlidingWindow,
    WindowSettings,
    load_window_settings,
    validate_settings,
)


def test_settings_defaults() -> None:
    settings = WindowSettings()
    assert settings.initial_capacity == 8
    assert settings.window_size is None
    assert settings.step_size is None
    assert settings.log_level == "INFO"
    assert settings.json_logs is False


def test_validate_settings_normalizes_log_level() -> None:
    settings = validate_settings({"initial_capacity": 16, "log_level": "debug"})
    assert settings.initial_capacity == 16
    assert settings.log_level == "DEBUG"


@pytest.mark.parametrize(
    "config",
    [
        {"initial_capacity": 0},
        {"initial_capacity": "8"},
        {"initial_capacity": 2.5},
        {"initial_capacity": True},
        {"window_size": 0},
        {"step_size": -1},
        {"log_level": "LOUD"},
        {"unknown": 1},
    ],
)
def test_validate_settings_rejects_invalid_values(config: dict[str, object]) -> None:
    with pytest.raises(InvalidArgumentError) as excinfo:
        validate_settings(config)
    assert excinfo.value.__cause__ is not None


def test_validate_settings_requires_mapping() -> None:
    with pytest.raises(InvalidArgumentError):
        validate_settings([("initial_capacity", 4)])  # type: ignore[arg-type]


def test_load_window_settings_from_yaml_section(tmp_path: Path) -> None:
    path = tmp_path / "window.yml"
    path.write_text("sliding_window:\n  initial_capacity: 4\n  window_size: 3\n", encoding="utf-8")

    settings = load_window_settings(path)

    assert settings.initial_capacity == 4
    assert settings.window_size == 3


def test_load_window_settings_from_json(tmp_path: Path) -> None:
    path = tmp_path / "window.json"
    path.write_text(json.dumps({"initial_capacity": 32, "json_logs": True}), encoding="utf-8")

    settings = load_window_settings(path)

    assert settings.initial_capacity == 32
    assert settings.json_logs is True


def test_load_window_settings_empty_file_uses_defaults(tmp_path: Path) -> None:
    path = tmp_path / "empty.yaml"
    path.write_text("", encoding="utf-8")
    assert load_window_settings(path) == WindowSettings()


def test_load_window_settings_rejects_non_mapping(tmp_path: Path) -> None:
    path = tmp_path / "list.yaml"
    path.write_text("- 1\n- 2\n", encoding="utf-8")
    with pytest.raises(InvalidArgumentError):
        load_window_settings(path)


def test_load_window_settings_rejects_malformed_json(tmp_path: Path) -> None:
    path = tmp_path / "broken.json"
    path.write_text("{not json", encoding="utf-8")
    with pytest.raises(InvalidArgumentError):
        load_window_settings(path)


def test_load_window_settings_missing_file(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError):
        load_window_settings(tmp_path / "missing.yml")


def test_window_from_settings() -> None:
    window = SlidingWindow.from_settings(WindowSettings(initial_capacity=2), values=[1, 2, 3])
    assert window.values() == [1, 2, 3]
    assert window.capacity() == 4
