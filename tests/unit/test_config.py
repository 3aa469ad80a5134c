"""Unit tests for settings loading and validation."""

from __future__ import annotations

from pathlib import Path

import pytest

from sweeper.services import config
from sweeper.services.config import Settings, SettingsError, load_settings


def test_missing_file_gives_defaults(tmp_path: Path) -> None:
    assert load_settings(tmp_path / "settings.toml") == Settings()


def test_values_are_read_from_toml(tmp_path: Path) -> None:
    path = tmp_path / "settings.toml"
    path.write_text(
        'concurrency = 3\nmanifest = "package.json"\nartifact = "node_modules"\n'
        'use_trash = true\nlog_level = "debug"\n'
    )

    settings = load_settings(path)

    assert settings == Settings(
        concurrency=3,
        manifest="package.json",
        artifact="node_modules",
        use_trash=True,
        log_level="DEBUG",
    )


def test_unknown_keys_are_ignored(tmp_path: Path, caplog: pytest.LogCaptureFixture) -> None:
    path = tmp_path / "settings.toml"
    path.write_text("colour = true\nconcurrency = 2\n")

    assert load_settings(path).concurrency == 2
    assert "Ignoring unknown setting 'colour'" in caplog.text


@pytest.mark.parametrize(
    "content",
    [
        "concurrency = 0\n",
        "concurrency = true\n",
        'concurrency = "8"\n',
        'artifact = ""\n',
        'manifest = "a/Cargo.toml"\n',
        'use_trash = "yes"\n',
        'log_level = "LOUD"\n',
        "concurrency = \n",
    ],
)
def test_invalid_settings_raise(tmp_path: Path, content: str) -> None:
    path = tmp_path / "settings.toml"
    path.write_text(content)

    with pytest.raises(SettingsError):
        load_settings(path)


def test_default_path_lives_in_user_config_dir(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    class FakeDirs:
        user_config_dir = str(tmp_path / "config")
        user_log_dir = str(tmp_path / "logs")

    monkeypatch.setattr(config, "app_dirs", lambda: FakeDirs())

    assert config.default_settings_path() == tmp_path / "config" / "settings.toml"
    assert config.ensure_app_dirs() == tmp_path / "config"
    assert (tmp_path / "logs").is_dir()


def test_merged_skips_unset_overrides() -> None:
    settings = Settings(concurrency=4, use_trash=True)

    merged = settings.merged(concurrency=None, use_trash=None, artifact="build")

    assert merged == Settings(concurrency=4, use_trash=True, artifact="build")
