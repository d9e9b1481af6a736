"""Application configuration: settings schema and config.yaml loader"""

import os
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, Field


CONFIG_FILE = "config.yaml"
ENV_PREFIX = "DOCINDEX_"

DEFAULT_EXCLUDE_DIRS = [
    "node_modules", ".git", "dist", "coverage", ".vite", "playwright-report", "test-results",
]
DEFAULT_HIGHLIGHT_LANGUAGES = [
    "typescript", "javascript", "json", "sql", "bash", "yaml",
    "markdown", "html", "css", "vue", "text", "dockerfile",
    "scss", "shell", "sh", "zsh",
]


class Settings(BaseModel):
    docs_root:      str = Field(default=".",     description="Directory scanned for markdown files")
    output_dir:     str = Field(default="dist",  description="Directory for the emitted static index")
    index_filename: str = Field(default="docs-index.json", description="Name of the static index asset")
    exclude_dirs:   list[str] = Field(default_factory=lambda: list(DEFAULT_EXCLUDE_DIRS))
    parser_config:  str = Field(default="gfm-like", description="MarkdownIt parser preset name")
    linkify:        bool = Field(default=True,    description="Autolink bare URLs in rendered HTML")
    highlight_theme: str = Field(default="default", description="Pygments style used for code fences")
    highlight_languages: list[str] = Field(default_factory=lambda: list(DEFAULT_HIGHLIGHT_LANGUAGES))
    host:           str = "127.0.0.1"
    port:           int = Field(default=5173, ge=1, le=65535)
    base_url:       str = Field(default="http://127.0.0.1:5173", description="Where the client fetches the index")
    dev_mode:       bool = Field(default=False,   description="Fetch /api/docs instead of the static asset")
    fetch_timeout:  float = Field(default=10.0, gt=0, description="Client HTTP timeout in seconds")
    log_level:      str = Field(default="INFO", pattern="^(DEBUG|INFO|WARNING|ERROR|CRITICAL)$")


def _env_value(name: str, raw: str) -> Any:
    """List fields are read from env vars as comma-separated values."""
    if Settings.model_fields[name].annotation == list[str]:
        return [item.strip() for item in raw.split(",") if item.strip()]
    return raw


def load_config(overrides: dict[str, Any] = None) -> Settings:
    """Load Settings from config.yaml, then DOCINDEX_<FIELD> env vars, then non-None CLI overrides."""
    data: dict[str, Any] = {}
    if Path(CONFIG_FILE).exists():
        try:
            data = yaml.safe_load(Path(CONFIG_FILE).read_text()) or {}
        except yaml.YAMLError as e:
            raise ValueError(f"Invalid {CONFIG_FILE}: {e}") from e
        if not isinstance(data, dict):
            raise ValueError(f"Invalid {CONFIG_FILE}: expected a mapping, got {type(data).__name__}")

    for name in Settings.model_fields:
        if val := os.getenv(f"{ENV_PREFIX}{name.upper()}"):
            data[name] = _env_value(name, val)

    if overrides:
        data.update({k: v for k, v in overrides.items() if v is not None})
    return Settings(**data)
