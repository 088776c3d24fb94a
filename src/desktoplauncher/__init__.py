"""Build, render and install freedesktop launcher files."""

from __future__ import annotations

__version__ = "0.1.0"

from desktoplauncher.domain.launcher import (  # noqa: E402
    Category,
    CategoryTier,
    DesktopEnvironment,
    LauncherBuilder,
    LauncherDescriptor,
    LauncherType,
    LauncherValidationError,
    LocalizedField,
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
    "__version__",
]
