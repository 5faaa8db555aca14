"""Tests for graphreach.toml walk-up discovery."""

from pathlib import Path

import pytest

from graphreach.config.discovery import CONFIG_ENV_VAR, CONFIG_FILENAME, find_config


@pytest.fixture(autouse=True)
def _no_env_config(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv(CONFIG_ENV_VAR, raising=False)


class TestFindConfig:
    def test_in_start_directory(self, tmp_path: Path) -> None:
        config = tmp_path / CONFIG_FILENAME
        config.write_text("")
        assert find_config(tmp_path) == config.resolve()

    def test_walks_up(self, tmp_path: Path) -> None:
        config = tmp_path / CONFIG_FILENAME
        config.write_text("")
        deep = tmp_path / "a" / "b" / "c"
        deep.mkdir(parents=True)
        assert find_config(deep) == config.resolve()

    def test_nearest_wins(self, tmp_path: Path) -> None:
        (tmp_path / CONFIG_FILENAME).write_text("")
        inner = tmp_path / "inner"
        inner.mkdir()
        (inner / CONFIG_FILENAME).write_text("")
        assert find_config(inner) == (inner / CONFIG_FILENAME).resolve()

    def test_defaults_to_cwd(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        (tmp_path / CONFIG_FILENAME).write_text("")
        monkeypatch.chdir(tmp_path)
        assert find_config() == (tmp_path / CONFIG_FILENAME).resolve()


class TestEnvOverride:
    def test_env_var_wins(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        (tmp_path / CONFIG_FILENAME).write_text("")
        elsewhere = tmp_path / "elsewhere.toml"
        elsewhere.write_text("")
        monkeypatch.setenv(CONFIG_ENV_VAR, str(elsewhere))
        assert find_config(tmp_path) == elsewhere

    def test_env_var_missing_file(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        (tmp_path / CONFIG_FILENAME).write_text("")
        monkeypatch.setenv(CONFIG_ENV_VAR, str(tmp_path / "missing.toml"))
        assert find_config(tmp_path) is None
