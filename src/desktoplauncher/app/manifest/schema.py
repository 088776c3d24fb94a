"""Schema helpers for launcher manifests."""

from __future__ import annotations

import json
from functools import lru_cache
from importlib import resources
from typing import Any, Iterator, List, Tuple

from jsonschema import Draft202012Validator

_SCHEMA_RESOURCE = "launcher_manifest.schema.json"
_SCHEMA_PACKAGE = "desktoplauncher.resources"


class ManifestError(ValueError):
    """Raised when a launcher manifest is malformed."""

    def __init__(self, message: str, *, errors: List[Tuple[str, str]] | None = None) -> None:
        super().__init__(message)
        self.errors = list(errors or [])


@lru_cache(maxsize=1)
def _load_schema() -> dict[str, Any]:
    resource = resources.files(_SCHEMA_PACKAGE) / _SCHEMA_RESOURCE
    with resource.open("r", encoding="utf-8") as handle:
        return json.load(handle)


@lru_cache(maxsize=1)
def _validator() -> Draft202012Validator:
    return Draft202012Validator(_load_schema())


def iter_schema_errors(manifest: Any) -> Iterator[Tuple[str, str]]:
    """Yield (path, message) pairs for schema issues in the manifest."""
    for error in sorted(_validator().iter_errors(manifest), key=lambda item: list(map(str, item.absolute_path))):
        path = ".".join(str(item) for item in error.absolute_path) or "<root>"
        yield path, error.message


def ensure_valid(manifest: Any, *, source: str = "manifest") -> None:
    errors = list(iter_schema_errors(manifest))
    if errors:
        details = "; ".join(f"{path}: {message}" for path, message in errors)
        raise ManifestError(f"Invalid launcher {source}: {details}", errors=errors)


__all__ = ["ManifestError", "ensure_valid", "iter_schema_errors"]
