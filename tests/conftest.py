from __future__ import annotations

import os
import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
SANDBOX_HOME = ROOT / ".test_place" / "home"
os.environ.setdefault("DESKTOPLAUNCHER_HOME", str(SANDBOX_HOME))
SANDBOX_HOME.mkdir(parents=True, exist_ok=True)
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

from desktoplauncher.ports.permissions import PermissionResult, PermissionSetter  # noqa: E402
from desktoplauncher.settings import RuntimeSettings  # noqa: E402


class RecordingPermissionSetter(PermissionSetter):
    def __init__(self, result: PermissionResult | None = None) -> None:
        self.result = result or PermissionResult(ok=True, returncode=0)
        self.calls: list[Path] = []

    def make_executable(self, path: Path) -> PermissionResult:
        self.calls.append(path)
        return self.result


@pytest.fixture()
def runtime_settings(tmp_path: Path) -> RuntimeSettings:
    home = tmp_path / "home"
    settings = RuntimeSettings(home_dir=home, system_applications_dir=tmp_path / "system" / "applications")
    settings.applications_dir.mkdir(parents=True, exist_ok=True)
    return settings


@pytest.fixture()
def permission_setter() -> RecordingPermissionSetter:
    return RecordingPermissionSetter()
