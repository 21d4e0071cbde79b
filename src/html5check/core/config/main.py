"""Configuration management for html5check."""

from __future__ import annotations

from pathlib import Path
from typing import Self

import yaml
from pydantic import BaseModel, Field, field_validator
from rich.console import Console

from html5check.core.report import DEFAULT_IGNORED_PATTERNS, compile_ignored_patterns
from html5check.core.validator import DEFAULT_TIMEOUT
from html5check.errors import ConfigLoadingError

console = Console(stderr=True)


class ValidatorConfig(BaseModel):
    """Validator service settings."""

    url: str = "http://localhost:8888/"  # default port of a locally run Nu validator
    timeout: float = DEFAULT_TIMEOUT
    ignore: list[str] = Field(default_factory=lambda: list(DEFAULT_IGNORED_PATTERNS))

    @field_validator("ignore")
    @classmethod
    def check_ignore_patterns(cls, value: list[str]) -> list[str]:
        compile_ignored_patterns(value)
        return value


class Html5CheckConfig(BaseModel):
    """Main html5check configuration."""

    validator: ValidatorConfig = Field(default_factory=ValidatorConfig)
    wrapper: str | None = None

    @classmethod
    def get_config_path(cls) -> Path:
        """Get the path to the configuration file."""
        return Path.cwd() / "html5check.yaml"

    @classmethod
    def load_config(cls) -> Self:
        """Load configuration from html5check.yaml file."""
        config_path = cls.get_config_path()

        if not config_path.exists():
            raise ConfigLoadingError(f"No configuration file at {config_path}")

        try:
            with open(config_path, encoding="utf-8") as f:
                config_data = yaml.safe_load(f) or {}
            return cls(**config_data)
        except (OSError, ValueError, TypeError, yaml.YAMLError) as e:
            console.print(f"[red]{e.__class__.__name__} loading configuration:[/red] {e}")
            raise ConfigLoadingError(f"Could not load {config_path}") from e

    @classmethod
    def load_or_default(cls) -> Self:
        """Load html5check.yaml when present, default configuration otherwise."""
        if not cls.get_config_path().exists():
            return cls()
        return cls.load_config()

    def save(self) -> Path:
        """Save configuration to html5check.yaml file."""
        config_path = self.get_config_path()

        try:
            with open(config_path, "w", encoding="utf-8") as f:
                yaml.safe_dump(self.model_dump(exclude_none=True), f, sort_keys=False)
        except (OSError, ValueError) as e:
            console.print(f"[red]Error saving configuration:[/red] {e}")
            raise ConfigLoadingError(f"Could not save {config_path}") from e
        else:
            console.print(f"[green]Configuration saved to {config_path}[/green]")

        return config_path
