"""Conversion between launcher manifests and the launcher domain."""

from __future__ import annotations

from enum import Enum
from typing import Any, Dict, Mapping, Type, TypeVar

from desktoplauncher.domain.launcher import (
    Category,
    DesktopEnvironment,
    LauncherBuilder,
    LauncherDescriptor,
    LauncherType,
    LauncherValidationError,
)

from .schema import ManifestError, ensure_valid

E = TypeVar("E", bound=Enum)

_SCALARS = ("try_exec", "icon", "comment", "generic_name", "path", "startup_wm_class")
_FLAGS = ("terminal", "no_display", "startup_notify")


def resolve_member(enum_cls: Type[E], token: str) -> E:
    """Look up an enum member by name or label, ignoring case."""

    wanted = token.strip().lower()
    for member in enum_cls:
        label = getattr(member, "label", member.name)
        if wanted in (member.name.lower(), label.lower()):
            return member
    raise ManifestError(f"Unknown {enum_cls.__name__} '{token}'")


def builder_from_manifest(data: Any, *, source: str = "manifest") -> LauncherBuilder:
    ensure_valid(data, source=source)
    try:
        builder = LauncherBuilder(
            data["file_name"],
            resolve_member(LauncherType, data["type"]),
            data["name"],
            data["exec"],
        )
        for key in _SCALARS:
            if key in data:
                getattr(builder, key)(data[key])
        for key in _FLAGS:
            if key in data:
                getattr(builder, key)(data[key])
        for token in data.get("categories", []):
            builder.add_category(resolve_member(Category, token))
        builder.add_keywords(data.get("keywords", []))
        for mime_type in data.get("mime_types", []):
            builder.add_mime_type(mime_type)
        for token in data.get("only_show_in", []):
            builder.add_only_show_in(resolve_member(DesktopEnvironment, token))
        for token in data.get("not_show_in", []):
            builder.add_not_show_in(resolve_member(DesktopEnvironment, token))
        for tag, value in data.get("name_lang", {}).items():
            builder.add_name_lang(tag, value)
        for tag, value in data.get("generic_name_lang", {}).items():
            builder.add_generic_name_lang(tag, value)
        for tag, value in data.get("comment_lang", {}).items():
            builder.add_comment_lang(tag, value)
    except LauncherValidationError as exc:
        raise ManifestError(f"Invalid launcher {source}: {exc}") from exc
    return builder


def descriptor_to_manifest(descriptor: LauncherDescriptor) -> Dict[str, Any]:
    payload: Dict[str, Any] = {
        "file_name": descriptor.file_name,
        "type": descriptor.kind.label,
        "name": descriptor.name,
        "exec": descriptor.exec,
    }
    for key in _SCALARS:
        value = getattr(descriptor, key)
        if value is not None:
            payload[key] = value
    for key in _FLAGS:
        if getattr(descriptor, key):
            payload[key] = True
    if descriptor.categories:
        payload["categories"] = sorted(item.label for item in descriptor.categories)
    if descriptor.keywords:
        payload["keywords"] = sorted(descriptor.keywords)
    if descriptor.mime_types:
        payload["mime_types"] = sorted(descriptor.mime_types)
    if descriptor.only_show_in:
        payload["only_show_in"] = sorted(item.label for item in descriptor.only_show_in)
    if descriptor.not_show_in:
        payload["not_show_in"] = sorted(item.label for item in descriptor.not_show_in)
    for key in ("name_lang", "generic_name_lang", "comment_lang"):
        values: Mapping[str, str] = getattr(descriptor, key)
        if values:
            payload[key] = dict(sorted(values.items()))
    return payload


__all__ = ["builder_from_manifest", "descriptor_to_manifest", "resolve_member"]
