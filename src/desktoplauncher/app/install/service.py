"""Application service installing launcher files."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field
from pathlib import Path

from desktoplauncher.adapters.chmod_permissions import ChmodPermissionSetter
from desktoplauncher.domain.launcher import LauncherDescriptor
from desktoplauncher.domain.launcher.value_objects import validate_file_name
from desktoplauncher.ports.permissions import PermissionSetter
from desktoplauncher.settings import RuntimeSettings, load_settings

logger = logging.getLogger(__name__)


class LauncherInstallError(RuntimeError):
    """Base class for failures raised while installing a launcher."""


class InstallDirectoryError(LauncherInstallError):
    """Raised when the launcher directory is missing or not writable."""


class LauncherExistsError(LauncherInstallError):
    """Raised when the target launcher exists and overwriting is disabled."""


class LauncherWriteError(LauncherInstallError):
    """Raised when the launcher file cannot be written."""


class LauncherPermissionError(LauncherInstallError):
    """Raised in strict mode when the launcher cannot be made executable."""


@dataclass(frozen=True)
class InstallResult:
    path: Path
    overwritten: bool
    permissions_applied: bool


@dataclass
class LauncherInstaller:
    """Writes rendered launchers into an applications directory."""

    settings: RuntimeSettings
    permission_setter: PermissionSetter = field(default_factory=ChmodPermissionSetter)
    system: bool = False
    strict_permissions: bool = False

    @classmethod
    def default(cls) -> "LauncherInstaller":
        return cls(load_settings())

    @property
    def target_dir(self) -> Path:
        if self.system:
            return self.settings.system_applications_dir
        return self.settings.applications_dir

    def target_path(self, file_name: str) -> Path:
        return self.target_dir / f"{validate_file_name(file_name)}.desktop"

    def install(self, descriptor: LauncherDescriptor, *, overwrite: bool = False) -> InstallResult:
        directory = self._writable_dir()
        target = directory / descriptor.filename()
        overwritten = False
        if target.exists():
            if not overwrite:
                raise LauncherExistsError(f"Launcher '{target.name}' already exists in {directory}")
            try:
                target.unlink()
            except OSError as exc:
                # a stale file that cannot be removed shows up as a write failure below
                logger.debug("could not remove existing launcher %s: %s", target, exc)
            overwritten = True

        try:
            with target.open("w", encoding="utf-8", newline="") as handle:
                handle.write(descriptor.render())
        except OSError as exc:
            raise LauncherWriteError(f"Failed to write launcher {target}: {exc}") from exc

        permissions_applied = self._make_executable(target)
        logger.info("installed launcher %s", target)
        return InstallResult(path=target, overwritten=overwritten, permissions_applied=permissions_applied)

    def uninstall(self, file_name: str) -> bool:
        target = self.target_path(file_name)
        if not target.exists():
            return False
        try:
            target.unlink()
        except OSError as exc:
            raise LauncherWriteError(f"Failed to remove launcher {target}: {exc}") from exc
        logger.info("removed launcher %s", target)
        return True

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _writable_dir(self) -> Path:
        directory = self.target_dir
        if not directory.is_dir() or not os.access(directory, os.W_OK):
            raise InstallDirectoryError(f"Can't write to directory {directory}")
        return directory

    def _make_executable(self, target: Path) -> bool:
        result = self.permission_setter.make_executable(target)
        if result.ok:
            return True
        message = f"Could not mark launcher {target} executable"
        if result.returncode is not None:
            message += f" (exit status {result.returncode})"
        if result.detail:
            message += f": {result.detail}"
        if self.strict_permissions:
            raise LauncherPermissionError(message)
        logger.warning(message)
        return False


__all__ = [
    "InstallDirectoryError",
    "InstallResult",
    "LauncherExistsError",
    "LauncherInstallError",
    "LauncherInstaller",
    "LauncherPermissionError",
    "LauncherWriteError",
]
