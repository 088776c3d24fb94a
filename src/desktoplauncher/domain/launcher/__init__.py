"""Launcher domain exports."""

from .builder import LauncherBuilder, LocalizedField
from .serializer import render_descriptor
from .value_objects import (
    Category,
    CategoryTier,
    DesktopEnvironment,
    LauncherDescriptor,
    LauncherType,
    LauncherValidationError,
)

__all__ = [
    "Category",
    "CategoryTier",
    "DesktopEnvironment",
    "LauncherBuilder",
    "LauncherDescriptor",
    "LauncherType",
    "LauncherValidationError",
    "LocalizedField",
    "render_descriptor",
]
