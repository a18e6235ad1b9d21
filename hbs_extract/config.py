"""
Hbs tag sources configuration.

A tag source maps a module name used in an import declaration to the
export(s) of that module acting as an hbs tag:

    "hbs-source-with-default-export": "default"     # import hbs from '...'
    "hbs-source-with-named-export": "handlebars"    # import { handlebars } from '...'
    "hbs-source-with-renamed-export": "hbs"         # import { hbs as h } from '...'
    "hbs-source-with-many-exports": ["a", "b"]      # import { a, b } from '...'
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from types import MappingProxyType
from typing import Any, Dict, FrozenSet, List, Mapping, Optional, Union

from ruamel.yaml import YAML
from ruamel.yaml.error import YAMLError

from .errors import ConfigError

DEFAULT_SPECIFIER = "default"

# What a tag source value may look like after normalization.
TagSpecifier = Union[str, FrozenSet[str]]
TagSources = Mapping[str, TagSpecifier]

DEFAULT_HBS_TAG_SOURCES: TagSources = MappingProxyType({
    "ember-cli-htmlbars": "hbs",
    "htmlbars-inline-precompile": DEFAULT_SPECIFIER,
    "ember-cli-htmlbars-inline-precompile": DEFAULT_SPECIFIER,
    "@glimmerx/component": "hbs",
    "@glimmer/core": frozenset({"createTemplate", "precompileTemplate"}),
})

_yaml = YAML(typ="safe")


def normalize_specifier(source: str, value: Any) -> TagSpecifier:
    """
    Validate a single tag source value.

    Args:
        source: Module name (used in error messages)
        value: "default", an export name or a collection of export names

    Returns:
        The export name as is, or a frozenset of export names
    """
    if isinstance(value, str):
        if not value:
            raise ConfigError(f"Empty hbs tag specifier for source {source!r}")
        return value

    if isinstance(value, (list, tuple, set, frozenset)):
        names = frozenset(value)
        if not names or not all(isinstance(n, str) and n for n in names):
            raise ConfigError(
                f"Hbs tag specifier list for source {source!r} must contain non-empty strings"
            )
        return names

    raise ConfigError(
        f"Invalid hbs tag specifier for source {source!r}: "
        f"expected a string or a list of strings, got {type(value).__name__}"
    )


def normalize_tag_sources(raw: Optional[Mapping[str, Any]]) -> Dict[str, TagSpecifier]:
    """Validate a whole tag source mapping."""
    if not raw:
        return {}
    if not isinstance(raw, Mapping):
        raise ConfigError(f"Hbs tag sources must be a mapping, got {type(raw).__name__}")

    out: Dict[str, TagSpecifier] = {}
    for source, value in raw.items():
        if not isinstance(source, str) or not source:
            raise ConfigError(f"Hbs tag source name must be a non-empty string: {source!r}")
        out[source] = normalize_specifier(source, value)
    return out


def merge_tag_sources(*overrides: Optional[Mapping[str, Any]]) -> TagSources:
    """
    Merge caller tag sources over the built-in defaults.

    Later mappings take precedence on key collision. The defaults themselves
    are never mutated.
    """
    merged: Dict[str, TagSpecifier] = dict(DEFAULT_HBS_TAG_SOURCES)
    for override in overrides:
        merged.update(normalize_tag_sources(override))
    return MappingProxyType(merged)


def parse_tag_source_arg(arg: str) -> Dict[str, TagSpecifier]:
    """
    Parse a `MODULE=SPEC` command line value.

    SPEC is `default` or a comma-separated list of export names.
    """
    source, sep, spec = arg.partition("=")
    source = source.strip()
    if not sep or not source:
        raise ConfigError(f"Invalid tag source '{arg}'. Expected 'MODULE=SPEC'")

    names = [name.strip() for name in spec.split(",") if name.strip()]
    if not names:
        raise ConfigError(f"Invalid tag source '{arg}': no export names given")

    value: Any = names[0] if len(names) == 1 else names
    return {source: normalize_specifier(source, value)}


@dataclass
class ExtractCfg:
    """Extraction configuration loaded from YAML or built from CLI options."""
    hbs_tag_sources: Dict[str, TagSpecifier] = field(default_factory=dict)

    @staticmethod
    def from_dict(d: Optional[Mapping[str, Any]]) -> ExtractCfg:
        """Load configuration from YAML dictionary."""
        if not d:
            return ExtractCfg()

        unknown = sorted(set(d) - {"hbs_tag_sources"})
        if unknown:
            raise ConfigError(f"Unknown configuration keys: {', '.join(map(str, unknown))}")

        return ExtractCfg(hbs_tag_sources=normalize_tag_sources(d.get("hbs_tag_sources")))

    def with_overrides(self, overrides: List[Mapping[str, Any]]) -> ExtractCfg:
        """Return a copy with additional tag sources applied on top."""
        sources = dict(self.hbs_tag_sources)
        for override in overrides:
            sources.update(normalize_tag_sources(override))
        return ExtractCfg(hbs_tag_sources=sources)


def load_config(path: Path) -> ExtractCfg:
    """
    Read extraction configuration from a YAML file.

    Raises:
        ConfigError: If the file is missing, unreadable or malformed
    """
    if not path.is_file():
        raise ConfigError(f"Config file not found: {path}")

    try:
        raw = _yaml.load(path.read_text(encoding="utf-8")) or {}
    except YAMLError as e:
        raise ConfigError(f"Failed to parse config {path}: {e}") from e

    if not isinstance(raw, dict):
        raise ConfigError(f"YAML must be a mapping: {path}")

    return ExtractCfg.from_dict(raw)


__all__ = [
    "DEFAULT_SPECIFIER",
    "DEFAULT_HBS_TAG_SOURCES",
    "TagSpecifier",
    "TagSources",
    "normalize_specifier",
    "normalize_tag_sources",
    "merge_tag_sources",
    "parse_tag_source_arg",
    "ExtractCfg",
    "load_config",
]
