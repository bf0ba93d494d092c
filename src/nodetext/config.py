"""Configuration models for nodetext."""

from __future__ import annotations

import logging
import tomllib
from pathlib import Path
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field, ValidationError
from pydantic_settings import BaseSettings, PydanticBaseSettingsSource, SettingsConfigDict

from nodetext.errors import ConfigError
from nodetext.paths import get_config_locations

logger = logging.getLogger(__name__)

# Snippet budget used when no config (or no max_snippet_length) is given
DEFAULT_MAX_SNIPPET_LENGTH = 500

# Nodes per embedding batch
DEFAULT_BATCH_SIZE = 16


class EmbeddingsConfig(BaseModel):
    """Embeddings configuration.

    Only ``max_snippet_length`` shapes the generated text. The model settings
    travel with it for whoever calls the embedding model downstream.
    """

    model_config = ConfigDict(protected_namespaces=())

    max_snippet_length: int = Field(
        default=DEFAULT_MAX_SNIPPET_LENGTH,
        description="Maximum characters of source snippet per document",
    )
    model_id: str = Field(
        default="Snowflake/snowflake-arctic-embed-xs",
        description="Embedding model identifier",
    )
    batch_size: int = Field(
        default=DEFAULT_BATCH_SIZE,
        ge=1,
        description="Number of nodes embedded per batch",
    )
    dimensions: int = Field(
        default=384,
        ge=1,
        description="Embedding vector dimensions",
    )
    device: Literal["webgpu", "wasm"] = Field(
        default="webgpu",
        description="Inference device for the embedding model",
    )


class NodeTextConfig(BaseSettings):
    """Main nodetext configuration."""

    model_config = SettingsConfigDict(
        env_prefix="NODETEXT_",
        env_nested_delimiter="__",
        extra="ignore",
    )

    version: str = Field(default="1.0", description="Config version")
    embeddings: EmbeddingsConfig = Field(default_factory=EmbeddingsConfig)

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        # Environment overrides values read from config files
        return env_settings, init_settings, dotenv_settings, file_secret_settings

    @classmethod
    def load(cls, config_path: Path | None = None) -> NodeTextConfig:
        """Load configuration from file and environment.

        Resolution order (highest to lowest priority):
        1. Environment variables
        2. Provided config file path
        3. .nodetextrc.toml in current directory
        4. .nodetextrc.toml in home directory
        5. Built-in defaults

        Raises:
            ConfigError: If the chosen file is not valid TOML or does not
                validate
        """
        config_data: dict[str, Any] = {}

        locations = []
        if config_path:
            locations.append(config_path)
        locations.extend(get_config_locations())

        source: Path | None = None
        for loc in locations:
            if loc.exists():
                try:
                    with open(loc, "rb") as f:
                        config_data = tomllib.load(f)
                except tomllib.TOMLDecodeError as e:
                    raise ConfigError(f"Invalid TOML in {loc}: {e}", path=str(loc)) from e
                source = loc
                break

        if source is not None:
            logger.debug(f"Loaded configuration from {source}")

        try:
            return cls(**config_data)
        except ValidationError as e:
            raise ConfigError(
                f"Invalid configuration: {e}",
                path=str(source) if source else None,
            ) from e


def get_default_config_toml() -> str:
    """Generate default .nodetextrc.toml content."""
    return f"""# nodetext configuration

version = "1.0"

[embeddings]
max_snippet_length = {DEFAULT_MAX_SNIPPET_LENGTH}  # File nodes are capped at 300 regardless
model_id = "Snowflake/snowflake-arctic-embed-xs"
batch_size = {DEFAULT_BATCH_SIZE}
dimensions = 384
device = "webgpu"  # webgpu | wasm
"""


__all__ = [
    "DEFAULT_MAX_SNIPPET_LENGTH",
    "DEFAULT_BATCH_SIZE",
    "EmbeddingsConfig",
    "NodeTextConfig",
    "get_default_config_toml",
]
