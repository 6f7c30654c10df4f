"""Configuration models for snappydoo."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from snappydoo.errors import ConfigError

# Key of the configuration block inside package.json
CONFIG_BLOCK = "snappydoo"


class ViewportConfig(BaseModel):
    width: int = 1000
    height: int = 600
    device_scale_factor: float = 2


class RenderServiceConfig(BaseModel):
    preview_url: str = "https://api.slack.com/docs/messages/builder"
    message_param: str = "msg"
    loading_indicator_selector: str = "#message_loading_indicator"
    container_selector: str = "#msgs_div"
    render_timeout_seconds: int = 30
    padding: int = 0
    headless: bool = True
    viewport: ViewportConfig = Field(default_factory=ViewportConfig)

    @field_validator("render_timeout_seconds")
    @classmethod
    def positive_timeout(cls, v: int) -> int:
        if v <= 0:
            raise ValueError("render_timeout_seconds must be positive")
        return v


class SnappydooConfig(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    # Paths, relative to the working directory
    input_path: Optional[str] = Field(default=None, alias="in")
    output_path: Optional[str] = Field(default=None, alias="out")

    # Fixture categories to skip
    exclude: list[str] = Field(default_factory=list)

    render: RenderServiceConfig = Field(default_factory=RenderServiceConfig)

    @classmethod
    def load(cls, path: str | Path) -> "SnappydooConfig":
        """Load config from a JSON file.

        If the document has a ``snappydoo`` block (the package.json
        convention) only that block is used. A package.json without the
        block yields an empty config.
        """
        path = Path(path)
        if not path.exists():
            raise FileNotFoundError(f"Config file not found: {path}")
        try:
            with open(path) as f:
                data = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            raise ConfigError(f"Cannot read config file {path}: {e}") from e

        if not isinstance(data, dict):
            raise ConfigError(f"Config file {path} must contain a JSON object")
        if CONFIG_BLOCK in data:
            data = data[CONFIG_BLOCK]
        elif path.name == "package.json":
            data = {}

        try:
            return cls.model_validate(data)
        except ValidationError as e:
            raise ConfigError(f"Invalid configuration in {path}: {e}") from e

    def save(self, path: str | Path) -> None:
        """Save config to a JSON file.

        An existing package.json keeps its other keys; the config is
        written to its ``snappydoo`` block. Render settings are written
        only where they differ from the defaults.
        """
        path = Path(path)
        block = self.model_dump(by_alias=True, exclude_none=True, exclude={"render"})
        render = _prune_empty(self.render.model_dump(exclude_defaults=True))
        if render:
            block["render"] = render
        data: dict = block
        if path.name == "package.json":
            data = {}
            if path.exists():
                with open(path) as f:
                    data = json.load(f)
            data[CONFIG_BLOCK] = block
        path.parent.mkdir(parents=True, exist_ok=True)
        with open(path, "w") as f:
            json.dump(data, f, indent=2)
            f.write("\n")

    def with_overrides(
        self, input_path: Optional[str] = None, output_path: Optional[str] = None,
    ) -> "SnappydooConfig":
        """Return a copy where the given command line paths take precedence."""
        updates = {}
        if input_path:
            updates["input_path"] = input_path
        if output_path:
            updates["output_path"] = output_path
        return self.model_copy(update=updates)

    def require_paths(self) -> tuple[Path, Path]:
        """Return (input root, output root), failing if either is unset."""
        if not self.input_path or not self.output_path:
            raise ConfigError("Please specify both an output and an input path.")
        return Path(self.input_path), Path(self.output_path)


def _prune_empty(data: dict) -> dict:
    """Drop nested blocks left empty after excluding defaults."""
    pruned = {}
    for key, value in data.items():
        if isinstance(value, dict):
            value = _prune_empty(value)
            if not value:
                continue
        pruned[key] = value
    return pruned
