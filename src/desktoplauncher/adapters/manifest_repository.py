"""Filesystem repository for launcher manifests."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import List

import yaml

from desktoplauncher.app.manifest import ManifestError, builder_from_manifest, descriptor_to_manifest
from desktoplauncher.domain.launcher import LauncherBuilder, LauncherDescriptor
from desktoplauncher.domain.launcher.value_objects import validate_file_name
from desktoplauncher.settings import load_settings

logger = logging.getLogger(__name__)


class LauncherManifestRepository:
    """Persists launcher manifests as ``<file_name>.yaml`` documents."""

    def __init__(self, base_dir: Path) -> None:
        self._base_dir = base_dir.expanduser().resolve()

    @classmethod
    def default(cls) -> "LauncherManifestRepository":
        return cls(load_settings().manifest_dir)

    @property
    def base_dir(self) -> Path:
        return self._base_dir

    def path_for(self, file_name: str) -> Path:
        return self._base_dir / f"{validate_file_name(file_name)}.yaml"

    def list(self) -> List[str]:
        if not self._base_dir.exists():
            return []
        return [path.stem for path in sorted(self._base_dir.glob("*.yaml"))]

    def load(self, file_name: str) -> LauncherBuilder:
        return self.load_path(self.path_for(file_name))

    def load_path(self, path: Path) -> LauncherBuilder:
        try:
            data = yaml.safe_load(path.read_text(encoding="utf-8"))
        except FileNotFoundError as exc:
            raise ManifestError(f"Manifest {path} not found") from exc
        except yaml.YAMLError as exc:
            raise ManifestError(f"Manifest {path} is not valid YAML: {exc}") from exc
        return builder_from_manifest(data, source=f"manifest {path}")

    def save(self, descriptor: LauncherDescriptor, *, overwrite: bool = False) -> Path:
        self._base_dir.mkdir(parents=True, exist_ok=True)
        target = self.path_for(descriptor.file_name)
        if target.exists() and not overwrite:
            raise ManifestError(f"Manifest '{target.name}' already exists; pass overwrite=True to replace it")
        payload = descriptor_to_manifest(descriptor)
        target.write_text(yaml.safe_dump(payload, sort_keys=False, allow_unicode=True), encoding="utf-8")
        logger.info("saved launcher manifest %s", target)
        return target

    def remove(self, file_name: str) -> bool:
        target = self.path_for(file_name)
        if not target.exists():
            return False
        target.unlink()
        return True


__all__ = ["LauncherManifestRepository"]
