"""Permission setter backed by the system ``chmod`` command."""

from __future__ import annotations

import subprocess
from dataclasses import dataclass
from pathlib import Path
from typing import Sequence

from desktoplauncher.ports.permissions import PermissionResult, PermissionSetter


@dataclass
class ChmodPermissionSetter(PermissionSetter):
    """Runs ``chmod a+x <path>`` and reports its exit status."""

    command: Sequence[str] = ("chmod", "a+x")

    def make_executable(self, path: Path) -> PermissionResult:
        args = [*self.command, str(path)]
        try:
            result = subprocess.run(
                args,
                stdout=subprocess.PIPE,
                stderr=subprocess.PIPE,
                text=True,
            )
        except OSError as exc:
            return PermissionResult(ok=False, detail=f"{args[0]}: {exc}")
        return PermissionResult(
            ok=result.returncode == 0,
            returncode=result.returncode,
            detail=result.stderr.strip(),
        )


__all__ = ["ChmodPermissionSetter"]
