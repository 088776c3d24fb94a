"""Launcher installation service."""

from .service import (
    InstallDirectoryError,
    InstallResult,
    LauncherExistsError,
    LauncherInstallError,
    LauncherInstaller,
    LauncherPermissionError,
    LauncherWriteError,
)

__all__ = [
    "InstallDirectoryError",
    "InstallResult",
    "LauncherExistsError",
    "LauncherInstallError",
    "LauncherInstaller",
    "LauncherPermissionError",
    "LauncherWriteError",
]
