"""Runtime settings for desktoplauncher."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

HOME_ENV = "DESKTOPLAUNCHER_HOME"
SYSTEM_APPLICATIONS_DIR = Path("/usr/share/applications")


@dataclass(frozen=True)
class RuntimeSettings:
    home_dir: Path
    system_applications_dir: Path = SYSTEM_APPLICATIONS_DIR

    @property
    def applications_dir(self) -> Path:
        return self.home_dir / ".local" / "share" / "applications"

    @property
    def manifest_dir(self) -> Path:
        return self.home_dir / ".config" / "desktoplauncher" / "manifests"


def _default_home_dir() -> Path:
    override = os.getenv(HOME_ENV)
    if override:
        return Path(override).expanduser()
    return Path.home()


def load_settings() -> RuntimeSettings:
    return RuntimeSettings(home_dir=_default_home_dir())


__all__ = ["HOME_ENV", "RuntimeSettings", "load_settings"]
