from __future__ import annotations

import json
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Any, Mapping, Optional

import yaml

from tag_pages.errors import ConfigError

DEFAULT_TAG_PAGE_DIR = "Tags"
DEFAULT_FRONTMATTER_QUERY_PROPERTY = "tage-page-query"

# persisted (camelCase) key -> field name
_KEYS = {
    "tagPageDir": "tag_page_dir",
    "frontmatterQueryProperty": "frontmatter_query_property",
    "bulletedSubItems": "bulleted_sub_items",
    "includeLines": "include_lines",
}
_BOOL_FIELDS = {"bulleted_sub_items", "include_lines"}

@dataclass(frozen=True)
class TagPageConfig:
    tag_page_dir: str = DEFAULT_TAG_PAGE_DIR
    frontmatter_query_property: str = DEFAULT_FRONTMATTER_QUERY_PROPERTY
    bulleted_sub_items: bool = True
    include_lines: bool = True   # False => list file links only

    def __post_init__(self) -> None:
        d = (self.tag_page_dir or "").strip().strip("/")
        object.__setattr__(self, "tag_page_dir", d or DEFAULT_TAG_PAGE_DIR)

    @classmethod
    def from_mapping(cls, data: Optional[Mapping[str, Any]]) -> "TagPageConfig":
        """
        Build a config from a persisted settings record.

        Accepts the camelCase keys the settings file is written with, or the
        snake_case field names. Unknown keys are ignored, missing keys keep
        their defaults.
        """
        if data is None:
            return cls()
        if not isinstance(data, Mapping):
            raise ConfigError("settings must be a mapping")

        fields = {}
        for key, value in data.items():
            name = _KEYS.get(key, key)
            if name not in cls.__dataclass_fields__:
                continue
            if value is None:
                continue
            if name in _BOOL_FIELDS:
                if not isinstance(value, bool):
                    raise ConfigError(f"{key} must be true or false, got {value!r}")
            elif not isinstance(value, str):
                raise ConfigError(f"{key} must be a string, got {value!r}")
            fields[name] = value
        return cls(**fields)

    def with_overrides(self, **overrides: Any) -> "TagPageConfig":
        return replace(self, **{k: v for k, v in overrides.items() if v is not None})

    def contains(self, path: str) -> bool:
        """True when a vault-relative path lies inside tag_page_dir."""
        p = path.replace("\\", "/").lstrip("/")
        return p.startswith(self.tag_page_dir + "/")

def load_config(path: Optional[Path]) -> TagPageConfig:
    if path is None:
        return TagPageConfig()
    path = Path(path).expanduser()
    if not path.exists():
        return TagPageConfig()
    try:
        text = path.read_text(encoding="utf-8")
        # data.json as the host writes it; anything else is read as YAML
        data = json.loads(text) if path.suffix == ".json" else yaml.safe_load(text)
    except (OSError, UnicodeDecodeError, ValueError, yaml.YAMLError) as e:
        raise ConfigError(f"cannot read settings {path}: {e}") from e
    return TagPageConfig.from_mapping(data or {})
