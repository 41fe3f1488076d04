from __future__ import annotations

from dataclasses import asdict, dataclass, field, fields
from pathlib import Path
from typing import Any, List, Mapping, MutableMapping

import yaml

DEFAULT_TOOLS = (
    "readability",
    "style-check",
    "pronouns",
    "hedge-words",
    "acronym-checker",
    "parallel-structure",
    "header-shift",
)

DEFAULT_HISTORY_LIMIT = 20


@dataclass(slots=True)
class WordsworthConfig:
    """Configuration options for running the writing analyzers."""

    reader_context: str = ""
    tools: List[str] = field(default_factory=lambda: list(DEFAULT_TOOLS))
    include_jargon: bool = False
    history_limit: int = DEFAULT_HISTORY_LIMIT

    def to_dict(self) -> dict[str, Any]:
        """Return a mutable dictionary representation of the configuration."""
        return dict(asdict(self))


def _build_kwargs(data: Mapping[str, Any]) -> dict[str, Any]:
    allowed = {field.name for field in fields(WordsworthConfig)}
    kwargs = {key: data[key] for key in data if key in allowed}
    if "tools" in kwargs:
        tools = kwargs["tools"]
        kwargs["tools"] = [tools] if isinstance(tools, str) else list(tools)
    return kwargs


def config_from_dict(data: Mapping[str, Any] | None) -> WordsworthConfig:
    """Build a WordsworthConfig from a dictionary-like input."""
    if data is None:
        return WordsworthConfig()
    return WordsworthConfig(**_build_kwargs(data))


def config_from_yaml(path: str | Path) -> WordsworthConfig:
    """Load configuration from a YAML file."""
    contents = Path(path).read_text(encoding="utf-8")
    parsed = yaml.safe_load(contents) or {}
    if not isinstance(parsed, MutableMapping):
        raise ValueError("Configuration YAML must define a mapping.")
    return config_from_dict(parsed)


def load_config(path: str | Path | None = None) -> WordsworthConfig:
    """Load configuration from YAML when provided, otherwise return defaults."""
    if path is None:
        return WordsworthConfig()
    return config_from_yaml(path)
