"""Configuration model for building gradients from raw text."""

from __future__ import annotations

import codecs
import json
from pathlib import Path
from typing import Any, Dict, Literal, Mapping, Optional

import yaml
from pydantic import BaseModel, ConfigDict, field_validator

from .gradient import WindowGradient, gradient


class GradientConfig(BaseModel):
    """How raw text is turned into a sequence and how far the gradient runs."""

    model_config = ConfigDict(extra="forbid")

    max_width: Optional[int] = None
    mode: Literal["chars", "bytes", "tokens"] = "chars"
    separator: Optional[str] = None
    encoding: str = "utf-8"
    join: bool = True

    @field_validator("max_width")
    @classmethod
    def _non_negative_width(cls, value: Optional[int]) -> Optional[int]:
        if value is not None and value < 0:
            raise ValueError("max_width must be >= 0")
        return value

    @field_validator("separator")
    @classmethod
    def _non_empty_separator(cls, value: Optional[str]) -> Optional[str]:
        if value == "":
            raise ValueError("separator must not be empty; omit it to split on whitespace")
        return value

    @field_validator("encoding")
    @classmethod
    def _known_encoding(cls, value: str) -> str:
        try:
            codecs.lookup(value)
        except LookupError as exc:
            raise ValueError(f"unknown encoding: {value}") from exc
        return value

    @classmethod
    def from_mapping(cls, cfg: Mapping[str, Any]) -> "GradientConfig":
        return cls.model_validate(dict(cfg))

    def tokenize(self, text: str) -> Any:
        """Convert ``text`` into the sequence the gradient walks over."""

        if self.mode == "bytes":
            return text.encode(self.encoding)
        if self.mode == "tokens":
            return text.split(self.separator)
        return text

    def build(self, text: str) -> WindowGradient:
        return gradient(self.tokenize(text), max_width=self.max_width)

    def render(self, window: Any) -> Any:
        """Copy a window out as a JSON-friendly value."""

        if not self.join:
            return list(window)
        if self.mode == "bytes":
            return bytes(window).hex()
        if self.mode == "tokens":
            return (self.separator or " ").join(window)
        return "".join(window)


def load_gradient_config(path: str | Path) -> GradientConfig:
    """Load a :class:`GradientConfig` from YAML or JSON.

    Files ending in ``.yml`` or ``.yaml`` are read with PyYAML, anything else
    is parsed as JSON. The document must be a mapping at the top level.
    """

    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Configuration file not found: {path}")

    text = path.read_text(encoding="utf-8")
    try:
        if path.suffix.lower() in {".yml", ".yaml"}:
            loaded = yaml.safe_load(text)
        else:
            loaded = json.loads(text)
    except (yaml.YAMLError, json.JSONDecodeError) as exc:
        raise ValueError(f"Could not parse configuration {path}: {exc}") from exc

    if loaded is None:
        loaded = {}
    if not isinstance(loaded, Mapping):
        raise ValueError("Gradient config file must contain a mapping/object at the top level")
    return GradientConfig.from_mapping(loaded)


def merge_overrides(config: GradientConfig, overrides: Mapping[str, Any]) -> GradientConfig:
    """Apply non-None overrides (e.g. from CLI flags) on top of ``config``."""

    updates: Dict[str, Any] = {k: v for k, v in overrides.items() if v is not None}
    return GradientConfig.from_mapping({**config.model_dump(), **updates})
