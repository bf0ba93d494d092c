"""Tests for nodetext configuration."""

from __future__ import annotations

import os
import tomllib
from pathlib import Path

import pytest

from nodetext.config import (
    DEFAULT_MAX_SNIPPET_LENGTH,
    EmbeddingsConfig,
    NodeTextConfig,
    get_default_config_toml,
)
from nodetext.errors import ConfigError
from nodetext.paths import CONFIG_FILE


@pytest.fixture
def isolated(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Run in an empty project dir with an empty home and no NODETEXT_ env vars."""
    home = tmp_path / "home"
    home.mkdir()
    project = tmp_path / "project"
    project.mkdir()
    monkeypatch.setenv("HOME", str(home))
    monkeypatch.chdir(project)
    for key in [k for k in os.environ if k.startswith("NODETEXT_")]:
        monkeypatch.delenv(key)
    return project


class TestEmbeddingsConfig:
    """Test embeddings defaults."""

    def test_defaults(self) -> None:
        config = EmbeddingsConfig()
        assert config.max_snippet_length == DEFAULT_MAX_SNIPPET_LENGTH == 500
        assert config.model_id == "Snowflake/snowflake-arctic-embed-xs"
        assert config.batch_size == 16
        assert config.dimensions == 384
        assert config.device == "webgpu"

    def test_partial_config_keeps_defaults(self) -> None:
        config = EmbeddingsConfig(max_snippet_length=120)
        assert config.max_snippet_length == 120
        assert config.batch_size == 16

    def test_invalid_device_rejected(self) -> None:
        with pytest.raises(ValueError):
            EmbeddingsConfig(device="cuda")  # type: ignore[arg-type]


class TestNodeTextConfig:
    """Test configuration loading and defaults."""

    def test_default_config(self, isolated: Path) -> None:
        config = NodeTextConfig.load()
        assert config.version == "1.0"
        assert config.embeddings.max_snippet_length == 500

    def test_load_from_explicit_path(self, isolated: Path, tmp_path: Path) -> None:
        path = tmp_path / "custom.toml"
        path.write_text("[embeddings]\nmax_snippet_length = 250\nbatch_size = 4\n")

        config = NodeTextConfig.load(path)

        assert config.embeddings.max_snippet_length == 250
        assert config.embeddings.batch_size == 4

    def test_load_from_project_dir(self, isolated: Path) -> None:
        (isolated / CONFIG_FILE).write_text("[embeddings]\ndevice = \"wasm\"\n")

        config = NodeTextConfig.load()

        assert config.embeddings.device == "wasm"

    def test_project_file_beats_home_file(self, isolated: Path, tmp_path: Path) -> None:
        (tmp_path / "home" / CONFIG_FILE).write_text("[embeddings]\nbatch_size = 99\n")
        (isolated / CONFIG_FILE).write_text("[embeddings]\nbatch_size = 3\n")

        assert NodeTextConfig.load().embeddings.batch_size == 3

    def test_home_file_used_as_fallback(self, isolated: Path, tmp_path: Path) -> None:
        (tmp_path / "home" / CONFIG_FILE).write_text("[embeddings]\nbatch_size = 99\n")

        assert NodeTextConfig.load().embeddings.batch_size == 99

    def test_env_overrides_file(self, isolated: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        (isolated / CONFIG_FILE).write_text("[embeddings]\nmax_snippet_length = 250\nbatch_size = 4\n")
        monkeypatch.setenv("NODETEXT_EMBEDDINGS__MAX_SNIPPET_LENGTH", "42")

        config = NodeTextConfig.load()

        assert config.embeddings.max_snippet_length == 42
        assert config.embeddings.batch_size == 4

    def test_invalid_toml_raises_config_error(self, isolated: Path) -> None:
        (isolated / CONFIG_FILE).write_text("[embeddings\n")

        with pytest.raises(ConfigError):
            NodeTextConfig.load()

    def test_invalid_value_raises_config_error(self, isolated: Path) -> None:
        (isolated / CONFIG_FILE).write_text("[embeddings]\nbatch_size = 0\n")

        with pytest.raises(ConfigError) as exc_info:
            NodeTextConfig.load()

        assert exc_info.value.context["path"] == str(isolated.resolve() / CONFIG_FILE)


class TestDefaultConfigToml:
    """Test the generated default config file."""

    def test_parses_to_defaults(self, isolated: Path) -> None:
        data = tomllib.loads(get_default_config_toml())

        config = NodeTextConfig(**data)

        assert config.embeddings == EmbeddingsConfig()
