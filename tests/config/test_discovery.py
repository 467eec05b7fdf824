"""Tests for rovercli.toml discovery."""

from pathlib import Path

import pytest

from rovercli.config.discovery import (
    CONFIG_ENV_VAR,
    CONFIG_FILENAME,
    find_config,
    resolve_config,
)


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv(CONFIG_ENV_VAR, raising=False)


def test_finds_in_start_dir(tmp_path: Path) -> None:
    cfg = tmp_path / CONFIG_FILENAME
    cfg.write_text("")
    assert find_config(tmp_path) == cfg.resolve()


def test_walks_up(tmp_path: Path) -> None:
    cfg = tmp_path / CONFIG_FILENAME
    cfg.write_text("")
    nested = tmp_path / "a" / "b"
    nested.mkdir(parents=True)
    assert find_config(nested) == cfg.resolve()


def test_env_var_wins(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    (tmp_path / CONFIG_FILENAME).write_text("")
    other = tmp_path / "other.toml"
    other.write_text("")
    monkeypatch.setenv(CONFIG_ENV_VAR, str(other))
    assert find_config(tmp_path) == other


def test_env_var_missing_file(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv(CONFIG_ENV_VAR, str(tmp_path / "nope.toml"))
    assert find_config(tmp_path) is None


def test_explicit_beats_env_and_walk_up(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    (tmp_path / CONFIG_FILENAME).write_text("")
    from_env = tmp_path / "env.toml"
    from_env.write_text("")
    monkeypatch.setenv(CONFIG_ENV_VAR, str(from_env))
    explicit = tmp_path / "explicit.toml"
    explicit.write_text("")
    assert resolve_config(str(explicit), start=tmp_path) == explicit


def test_explicit_missing_file_means_no_config(tmp_path: Path) -> None:
    (tmp_path / CONFIG_FILENAME).write_text("")
    assert resolve_config(str(tmp_path / "missing.toml"), start=tmp_path) is None


def test_without_explicit_falls_back_to_walk_up(tmp_path: Path) -> None:
    cfg = tmp_path / CONFIG_FILENAME
    cfg.write_text("")
    assert resolve_config(None, start=tmp_path) == cfg.resolve()
