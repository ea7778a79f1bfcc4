import os

import pytest

import config_paths
from app_state import AppState


@pytest.fixture(autouse=True)
def clear_overrides(monkeypatch):
    monkeypatch.delenv(config_paths.THEME_PATH_ENV, raising=False)
    monkeypatch.delenv(config_paths.DATA_PATH_ENV, raising=False)


def test_resolve_paths_relative_to_base():
    theme, data = config_paths.resolve_paths(os.path.join("/opt", "timetable"))
    assert theme == os.path.join("/opt", "timetable", "assets", "styles", "theme.conf")
    assert data == os.path.join("/opt", "timetable", "data", "schedule.csv")


def test_resolve_paths_from_sentinel_dir_goes_up():
    base = os.path.join("/opt", "timetable", "src-tauri")
    theme, data = config_paths.resolve_paths(base)
    assert theme == os.path.join(base, "..", "assets", "styles", "theme.conf")
    assert data == os.path.join(base, "..", "data", "schedule.csv")
    assert os.path.normpath(data) == os.path.join("/opt", "timetable", "data", "schedule.csv")


def test_sentinel_must_be_last_segment():
    base = os.path.join("/opt", "src-tauri", "app")
    _, data = config_paths.resolve_paths(base)
    assert data == os.path.join(base, "data", "schedule.csv")


def test_load_config_defaults_to_cwd(monkeypatch, tmp_path):
    monkeypatch.chdir(tmp_path)
    cfg = config_paths.load_config()
    assert os.path.samefile(os.path.dirname(os.path.dirname(cfg["DATA_PATH"])), tmp_path)
    assert cfg["THEME_PATH"].endswith(os.path.join("assets", "styles", "theme.conf"))


def test_load_config_env_overrides(monkeypatch, tmp_path):
    monkeypatch.setenv(config_paths.THEME_PATH_ENV, str(tmp_path / "t.conf"))
    monkeypatch.setenv(config_paths.DATA_PATH_ENV, str(tmp_path / "d.csv"))
    cfg = config_paths.load_config("/somewhere")
    assert cfg["THEME_PATH"] == str(tmp_path / "t.conf")
    assert cfg["DATA_PATH"] == str(tmp_path / "d.csv")


def test_empty_env_override_is_ignored(monkeypatch):
    monkeypatch.setenv(config_paths.DATA_PATH_ENV, "")
    cfg = config_paths.load_config("/somewhere")
    assert cfg["DATA_PATH"] == os.path.join("/somewhere", "data", "schedule.csv")


def test_app_state_from_cwd(monkeypatch):
    state = AppState.from_cwd(os.path.join("/srv", "src-tauri"))
    assert state.data_path == os.path.join("/srv", "src-tauri", "..", "data", "schedule.csv")
    with pytest.raises(AttributeError):
        state.data_path = "/tmp/other.csv"
