"""Launcher manifest helpers."""

from .mapping import builder_from_manifest, descriptor_to_manifest, resolve_member
from .schema import ManifestError, ensure_valid, iter_schema_errors

__all__ = [
    "ManifestError",
    "builder_from_manifest",
    "descriptor_to_manifest",
    "ensure_valid",
    "iter_schema_errors",
    "resolve_member",
]
