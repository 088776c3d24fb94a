"""Port definitions for changing file permissions."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class PermissionResult:
    """Outcome of a permission change."""

    ok: bool
    returncode: int | None = None
    detail: str = ""


class PermissionSetter(ABC):
    @abstractmethod
    def make_executable(self, path: Path) -> PermissionResult:
        """Grant execute permission on ``path`` to owner, group and others."""


__all__ = ["PermissionResult", "PermissionSetter"]
