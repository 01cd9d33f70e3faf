"""Registry and loaders for the reference tables bundled with feixing.

Every table is a JSON list stored next to this module. Tables are read once
per process and handed out as tuples so callers cannot mutate shared state.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from functools import cache
from pathlib import Path
from typing import Any

from ..utils.io import load_json_document

__all__ = [
    "DATA_DIR",
    "TABLE_REGISTRY",
    "TableNotFoundError",
    "load_table",
    "list_table_keys",
]

DATA_DIR = Path(__file__).resolve().parent


class TableNotFoundError(KeyError):
    """Raised when an unknown table key is requested."""


TABLE_REGISTRY: dict[str, Mapping[str, str]] = {
    "bagua": {"filename": "bagua.json", "kind": "symbol"},
    "branches": {"filename": "branches.json", "kind": "ganzhi"},
    "jiuxing": {"filename": "jiuxing.json", "kind": "symbol"},
    "planets": {"filename": "planets.json", "kind": "symbol"},
    "solar_terms": {"filename": "solar_terms.json", "kind": "calendar"},
    "stems": {"filename": "stems.json", "kind": "ganzhi"},
    "wuxing": {"filename": "wuxing.json", "kind": "symbol"},
}


@cache
def load_table(key: str) -> tuple[Mapping[str, Any], ...]:
    """Return the rows of the table registered under ``key``."""

    if key not in TABLE_REGISTRY:
        raise TableNotFoundError(key)
    filename = TABLE_REGISTRY[key].get("filename")
    if not filename:
        raise ValueError(f"Table metadata for '{key}' missing filename field")
    payload = load_json_document(DATA_DIR / filename)
    if not isinstance(payload, list):
        raise ValueError(f"Table '{key}' must be a JSON list")
    return tuple(payload)


def list_table_keys(kind: str | None = None) -> Iterable[str]:
    """Yield the registered table keys filtered by kind."""

    for name, metadata in TABLE_REGISTRY.items():
        if kind is None or metadata.get("kind") == kind:
            yield name
