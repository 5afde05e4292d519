"""Configuration models for todoappend."""

from __future__ import annotations

import json
import logging
import os
from pathlib import Path
from typing import Any
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

import click
from pydantic import BaseModel, Field, ValidationError, field_validator

from todoappend.clock import DEFAULT_TIMEZONE

logger = logging.getLogger(__name__)

APP_NAME = "todoappend"
CONFIG_ENV_VAR = "TODOAPPEND_CONFIG"


class Template(BaseModel):
    """A reusable bundle of projects, contexts and priority."""

    name: str
    projects: list[str] = Field(default_factory=list)
    contexts: list[str] = Field(default_factory=list)
    priority: str | None = None

    @field_validator("priority", mode="before")
    @classmethod
    def _normalise_priority(cls, value: Any) -> str | None:
        if not value:
            return None
        value = str(value).strip().upper()
        if len(value) != 1 or not "A" <= value <= "Z":
            raise ValueError(f"priority must be a single letter A-Z, got {value!r}")
        return value

    def tag_string(self) -> str:
        """Space-joined ``+project`` then ``@context`` tokens."""
        tags = [f"+{p}" for p in self.projects] + [f"@{c}" for c in self.contexts]
        return " ".join(tags)


def default_templates() -> list[Template]:
    return [
        Template(name="Work/General", projects=["work"]),
        Template(name="Work/Meeting", projects=["work"], contexts=["meeting"], priority="A"),
        Template(name="Personal/General", projects=["personal"]),
    ]


class AppConfig(BaseModel):
    """Main configuration for todoappend."""

    file_path: str = "~/todo.txt"
    timezone: str = DEFAULT_TIMEZONE
    urgent_window_days: int = Field(default=7, ge=0)
    templates: list[Template] = Field(default_factory=default_templates)

    @field_validator("timezone")
    @classmethod
    def _check_timezone(cls, value: str) -> str:
        try:
            ZoneInfo(value)
        except (ZoneInfoNotFoundError, ValueError) as e:
            raise ValueError(f"unknown time zone: {value}") from e
        return value

    @field_validator("templates", mode="before")
    @classmethod
    def _templates_list(cls, value: Any) -> Any:
        if not isinstance(value, list):
            return []
        return value

    @property
    def task_file(self) -> Path:
        """The task file path with a leading ``~`` expanded."""
        return Path(self.file_path).expanduser()

    def get_template(self, index: int | None) -> Template | None:
        """Return the template at ``index``, or None when out of range."""
        if index is None or index < 0 or index >= len(self.templates):
            return None
        return self.templates[index]

    @classmethod
    def load(cls, path: Path | None = None) -> AppConfig:
        """Load configuration from file or return defaults.

        A file that cannot be read or does not validate falls back to
        the defaults rather than failing.
        """
        if path is None:
            path = default_config_path()

        if not path.exists():
            return cls()

        try:
            with open(path, encoding="utf-8") as f:
                data = json.load(f)
            return cls.model_validate(data)
        except (OSError, UnicodeDecodeError, json.JSONDecodeError, ValidationError) as e:
            logger.warning("Ignoring unusable config %s: %s", path, e)
            return cls()

    def save(self, path: Path | None = None) -> None:
        """Save configuration to file."""
        if path is None:
            path = default_config_path()

        path.parent.mkdir(parents=True, exist_ok=True)

        with open(path, "w", encoding="utf-8") as f:
            json.dump(self.model_dump(), f, indent=2, ensure_ascii=False)


def default_config_path() -> Path:
    """Config location: ``$TODOAPPEND_CONFIG`` or the per-user app dir."""
    override = os.environ.get(CONFIG_ENV_VAR)
    if override:
        return Path(override).expanduser()
    return Path(click.get_app_dir(APP_NAME)) / "config.json"
