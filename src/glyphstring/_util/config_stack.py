"""Layered config resolution.

Domain-agnostic: knows nothing about glyphs or mark data.

Terminology
-----------
- **Scope**: a single config layer (e.g. "defaults", "global", "env", "cli").
- **Stack**: an ordered list of scopes, lowest-priority first.
- **deep_merge**: recursive dict merge where ``None`` means "not set here".
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any

import yaml


def deep_merge(base: dict, override: dict) -> dict:
    """Recursively merge *override* into *base*, returning a **new** dict.

    * Nested dicts are merged key by key.
    * A ``None`` value in *override* leaves the base value in place, so a
      layer can mention a key without setting it (e.g. an unset env var).
    * Any other value replaces the base value wholesale.
    """
    merged = dict(base)
    for key, ov in override.items():
        if ov is None:
            continue
        bv = merged.get(key)
        if isinstance(ov, dict) and isinstance(bv, dict):
            merged[key] = deep_merge(bv, ov)
        else:
            merged[key] = ov
    return merged


def _lookup(data: dict, dotted: str) -> Any:
    node: Any = data
    for part in dotted.split("."):
        if not isinstance(node, dict):
            return None
        node = node.get(part)
    return node


@dataclass(frozen=True)
class ConfigScope:
    """A single layer in the config stack."""

    level: str
    source: Path | None
    data: dict


class ConfigStack:
    """Ordered collection of config scopes, lowest-priority first.

    Usage::

        stack = ConfigStack()
        stack.push(ConfigScope("defaults", None, DEFAULTS))
        stack.push(load_yaml_scope("global", path))
        stack.get("marks.data_file")
    """

    def __init__(self) -> None:
        self._scopes: list[ConfigScope] = []

    def push(self, scope: ConfigScope) -> None:
        """Append a scope (higher priority than all previous)."""
        self._scopes.append(scope)

    def resolve(self) -> dict:
        """Deep-merge all scopes in order and return the result."""
        result: dict = {}
        for scope in self._scopes:
            result = deep_merge(result, scope.data)
        return result

    def get(self, dotted: str, default: Any = None) -> Any:
        """Resolved value at a dotted path such as ``"logging.debug"``."""
        value = _lookup(self.resolve(), dotted)
        return default if value is None else value

    def provenance(self, dotted: str) -> str | None:
        """Name of the highest-priority scope that sets *dotted*."""
        for scope in reversed(self._scopes):
            if _lookup(scope.data, dotted) is not None:
                return scope.level
        return None

    @property
    def scopes(self) -> list[ConfigScope]:
        """Read-only access to the scope list (for diagnostics)."""
        return list(self._scopes)


def load_yaml_scope(level: str, path: Path) -> ConfigScope:
    """Load a YAML file into a ConfigScope.  Returns empty data if missing.

    Raises ``ValueError`` if the document is not a mapping.
    """
    if path.is_file():
        data = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    else:
        data = {}
    if not isinstance(data, dict):
        raise ValueError(f"{path}: top level must be a mapping, got {type(data).__name__}")
    return ConfigScope(level=level, source=path, data=data)
