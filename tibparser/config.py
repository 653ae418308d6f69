"""Configuration management for the phrase parser."""

import os
from pathlib import Path
from typing import Literal, Optional

import yaml
from pydantic import BaseModel, Field, field_validator

DEFAULT_SOLR_URL = "https://mandala-index.internal.lib.virginia.edu/solr/kmassets/select"
CONFIG_ENV_VAR = "TIBPARSER_CONFIG"


def _default_headers() -> dict[str, str]:
    return {
        "User-Agent": (
            "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
            "(KHTML, like Gecko) Chrome/142.0.0.0 Safari/537.36"
        ),
        "Accept": "application/json, text/javascript, */*; q=0.01",
        "Accept-Language": "en-US,en;q=0.9",
        "Referer": "https://staging.thlib.org",
    }


class DictionaryConfig(BaseModel):
    """Configuration for the dictionary backend."""

    backend: Literal["solr", "wordlist"] = "solr"
    base_url: str = DEFAULT_SOLR_URL
    timeout_seconds: float = Field(default=10.0, gt=0)
    fields: list[str] = Field(
        default_factory=lambda: ["uid", "id", "header", "name_tibt", "name_latin"]
    )
    rows: int = Field(default=1, ge=1)
    headers: dict[str, str] = Field(default_factory=_default_headers)
    verify_ssl: bool = True
    wordlist_path: Optional[Path] = Field(
        default=None, description="CSV with id, name_tibt and name_latin columns"
    )

    @field_validator("base_url")
    @classmethod
    def validate_base_url(cls, v: str) -> str:
        """Only accept absolute http(s) URLs."""
        v = v.strip()
        if not v.startswith(("http://", "https://")):
            raise ValueError(f"Dictionary URL must start with http:// or https://: {v}")
        return v

    @field_validator("wordlist_path", mode="before")
    @classmethod
    def convert_to_path(cls, v):
        """Convert string to Path."""
        if v is None or v == "":
            return None
        return Path(v) if isinstance(v, str) else v


class SegmentationConfig(BaseModel):
    """Configuration for the segmentation loop."""

    max_iterations: int = Field(
        default=100, ge=1, description="Safety cap on loop iterations per sub-phrase"
    )


class ServerConfig(BaseModel):
    """Configuration for the HTTP API."""

    host: str = "0.0.0.0"
    port: int = Field(default=8000, ge=1, le=65535)
    route_prefix: str = "/tibetan/v1"


class Config(BaseModel):
    """Main configuration for the phrase parser."""

    dictionary: DictionaryConfig = Field(default_factory=DictionaryConfig)
    segmentation: SegmentationConfig = Field(default_factory=SegmentationConfig)
    server: ServerConfig = Field(default_factory=ServerConfig)

    @classmethod
    def from_yaml(cls, path: str | Path) -> "Config":
        """Load configuration from a YAML file."""
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
        return cls(**(data or {}))

    @classmethod
    def from_env(cls) -> "Config":
        """Load the file named by ``TIBPARSER_CONFIG``, or fall back to defaults."""
        path = os.environ.get(CONFIG_ENV_VAR)
        if path:
            return cls.from_yaml(path)
        return cls()

    def to_yaml(self, path: str | Path) -> None:
        """Save configuration to a YAML file."""
        data = self.model_dump(mode="json")
        with open(path, "w", encoding="utf-8") as f:
            yaml.dump(data, f, default_flow_style=False, allow_unicode=True)
