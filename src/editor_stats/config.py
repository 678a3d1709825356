from __future__ import annotations

from dataclasses import asdict, dataclass, field, fields
from pathlib import Path
from typing import Any, List, Mapping, MutableMapping

import yaml


@dataclass(slots=True)
class EditorStatsConfig:
    """Configuration options for editor sessions and the command line."""

    new_document_name: str = "New File"
    encoding: str = "utf-8"
    input_extensions: List[str] = field(default_factory=lambda: [".txt", ".md"])
    log_level: str = "WARNING"

    def to_dict(self) -> dict[str, Any]:
        """Return a mutable dictionary representation of the configuration."""
        return dict(asdict(self))


def _build_kwargs(data: Mapping[str, Any]) -> dict[str, Any]:
    allowed = {item.name for item in fields(EditorStatsConfig)}
    kwargs = {key: data[key] for key in data if key in allowed}
    if "input_extensions" in kwargs:
        extensions = kwargs["input_extensions"]
        if isinstance(extensions, str):
            extensions = [extensions]
        if not isinstance(extensions, (list, tuple)):
            raise ValueError("input_extensions must be a string or a list of strings.")
        kwargs["input_extensions"] = [_normalize_extension(ext) for ext in extensions]
    return kwargs


def _normalize_extension(value: object) -> str:
    ext = str(value).strip().lower()
    if ext and not ext.startswith("."):
        ext = "." + ext
    return ext


def config_from_dict(data: Mapping[str, Any] | None) -> EditorStatsConfig:
    """Build an EditorStatsConfig from a dictionary-like input."""
    if data is None:
        return EditorStatsConfig()
    return EditorStatsConfig(**_build_kwargs(data))


def config_from_yaml(path: str | Path) -> EditorStatsConfig:
    """Load configuration from a YAML file."""
    contents = Path(path).read_text(encoding="utf-8")
    parsed = yaml.safe_load(contents) or {}
    if not isinstance(parsed, MutableMapping):
        raise ValueError("Configuration YAML must define a mapping.")
    return config_from_dict(parsed)


def load_config(path: str | Path | None = None) -> EditorStatsConfig:
    """Load configuration from YAML when provided, otherwise return defaults."""
    if path is None:
        return EditorStatsConfig()
    return config_from_yaml(path)
