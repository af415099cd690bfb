"""
Namespace profile loader.

XPath queries over harvested records use short prefixes (``atom:id``) that
must be bound to full namespace URIs before evaluation. The bindings are
shared by many contributors, so they are grouped into named profiles in
`config/namespaces.yml`:

    profiles:
      arxiv:
        "http://www.w3.org/2005/Atom": atom
        "http://arxiv.org/schemas/atom": arxiv

Each profile maps namespace URI to prefix and is exposed as an immutable
`NamespaceBinder`.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path
from types import MappingProxyType
from typing import Any

import yaml

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class NamespaceBinder:
    """Immutable namespace URI to prefix mapping."""

    uri_to_prefix: Mapping[str, str] = field(default_factory=dict)

    def __post_init__(self) -> None:
        for uri, prefix in self.uri_to_prefix.items():
            if not isinstance(uri, str) or not uri:
                raise ValueError(f"Namespace URI must be a non-empty string, got {uri!r}")
            if not isinstance(prefix, str) or not prefix:
                raise ValueError(f"Prefix for namespace '{uri}' must be a non-empty string")
        # Copy so later changes to the caller's dict never leak in
        object.__setattr__(self, "uri_to_prefix", MappingProxyType(dict(self.uri_to_prefix)))

    def bind(self) -> dict[str, str]:
        """Return the prefix to URI map expected by the XPath engine."""
        return {prefix: uri for uri, prefix in self.uri_to_prefix.items()}

    def __len__(self) -> int:
        return len(self.uri_to_prefix)

    def __hash__(self) -> int:
        return hash(frozenset(self.uri_to_prefix.items()))


def _project_root() -> Path:
    """Return the project root path based on this file's location."""
    return Path(__file__).resolve().parent.parent.parent


def load_namespace_profiles(config_path: str | None = None) -> dict[str, NamespaceBinder]:
    """
    Load namespace profiles from YAML file.

    Args:
        config_path: Optional override for the config file path. When omitted,
            the function reads `config/namespaces.yml` relative to the project root.

    Returns:
        Dictionary mapping profile names to `NamespaceBinder` objects.

    Raises:
        FileNotFoundError: If the configuration file does not exist.
        ValueError: If the YAML file cannot be parsed or has invalid structure.
    """
    path = Path(config_path) if config_path else _project_root() / "config" / "namespaces.yml"
    if not path.exists():
        logger.error("Namespace configuration file not found: %s", path)
        raise FileNotFoundError(f"Namespace configuration file not found: {path}")

    try:
        with path.open("r", encoding="utf-8") as handle:
            raw_config: Mapping[str, Any] | None = yaml.safe_load(handle)
    except yaml.YAMLError as exc:
        logger.error("Failed to parse namespace configuration: %s", exc)
        raise ValueError(f"Invalid YAML in namespace configuration: {exc}") from exc

    if not raw_config:
        logger.warning("Namespace configuration file is empty: %s", path)
        return {}

    profiles_section = raw_config.get("profiles")
    if not isinstance(profiles_section, Mapping):
        raise ValueError("`profiles` section is missing or invalid in namespace configuration")

    profiles: dict[str, NamespaceBinder] = {}
    for profile_name, mapping in profiles_section.items():
        if mapping is None:
            mapping = {}
        if not isinstance(mapping, Mapping):
            raise ValueError(f"Invalid namespace profile '{profile_name}': expected a mapping")
        profiles[str(profile_name)] = NamespaceBinder(dict(mapping))

    logger.info(
        "Loaded namespace configuration",
        extra={
            "profiles_count": len(profiles),
            "profiles": sorted(profiles),
        },
    )
    return profiles


def get_namespace_profile(name: str, config_path: str | None = None) -> NamespaceBinder:
    """
    Look up a single namespace profile by name.

    Raises:
        KeyError: If the profile is not defined.
    """
    profiles = load_namespace_profiles(config_path)
    try:
        return profiles[name]
    except KeyError:
        logger.error(
            "Unknown namespace profile: %s",
            name,
            extra={"available_profiles": sorted(profiles)},
        )
        raise


__all__ = ["NamespaceBinder", "get_namespace_profile", "load_namespace_profiles"]
