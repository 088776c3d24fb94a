"""Fluent builder accumulating validated launcher fields."""

from __future__ import annotations

from enum import Enum
from typing import Dict, Iterable, Set

from .value_objects import (
    Category,
    DesktopEnvironment,
    LauncherDescriptor,
    LauncherType,
    LauncherValidationError,
    normalise_lang_tag,
    require_string,
    require_text,
    validate_file_name,
    validate_mime_type,
)


class LocalizedField(str, Enum):
    NAME = "name"
    GENERIC_NAME = "generic_name"
    COMMENT = "comment"


class LauncherBuilder:
    """Collects launcher attributes and produces :class:`LauncherDescriptor` snapshots.

    Every setter validates its own input and raises :class:`LauncherValidationError`
    before touching any state, so a rejected call leaves the builder as it was.
    """

    def __init__(self, file_name: str, kind: LauncherType, name: str, exec: str) -> None:
        self._file_name = validate_file_name(file_name)
        if not isinstance(kind, LauncherType):
            raise LauncherValidationError(f"Unknown launcher type {kind!r}")
        self._kind = kind
        self._name = require_text("name", name)
        self._exec = require_text("exec", exec)

        self._try_exec: str | None = None
        self._icon: str | None = None
        self._comment: str | None = None
        self._generic_name: str | None = None
        self._path: str | None = None
        self._startup_wm_class: str | None = None
        self._terminal = False
        self._no_display = False
        self._startup_notify = False
        self._categories: Set[Category] = set()
        self._keywords: Set[str] = set()
        self._mime_types: Set[str] = set()
        self._only_show_in: Set[DesktopEnvironment] = set()
        self._not_show_in: Set[DesktopEnvironment] = set()
        self._localized: Dict[LocalizedField, Dict[str, str]] = {item: {} for item in LocalizedField}

    @property
    def file_name(self) -> str:
        return self._file_name

    # ------------------------------------------------------------------
    # Scalars
    # ------------------------------------------------------------------

    def try_exec(self, value: str) -> "LauncherBuilder":
        self._try_exec = require_text("try_exec", value)
        return self

    def icon(self, value: str) -> "LauncherBuilder":
        self._icon = require_text("icon", value)
        return self

    def comment(self, value: str) -> "LauncherBuilder":
        self._comment = require_text("comment", value)
        return self

    def generic_name(self, value: str) -> "LauncherBuilder":
        self._generic_name = require_text("generic_name", value)
        return self

    def path(self, value: str) -> "LauncherBuilder":
        self._path = require_text("path", value)
        return self

    def startup_wm_class(self, value: str) -> "LauncherBuilder":
        self._startup_wm_class = require_text("startup_wm_class", value)
        return self

    def terminal(self, value: bool = True) -> "LauncherBuilder":
        self._terminal = bool(value)
        return self

    def no_display(self, value: bool = True) -> "LauncherBuilder":
        self._no_display = bool(value)
        return self

    def startup_notify(self, value: bool = True) -> "LauncherBuilder":
        self._startup_notify = bool(value)
        return self

    # ------------------------------------------------------------------
    # Collections
    # ------------------------------------------------------------------

    def add_category(self, category: Category) -> "LauncherBuilder":
        if not isinstance(category, Category):
            raise LauncherValidationError(f"Unknown category {category!r}")
        self._categories.add(category)
        return self

    def add_keyword(self, keyword: str) -> "LauncherBuilder":
        self._keywords.add(require_text("keyword", keyword))
        return self

    def add_keywords(self, keywords: Iterable[str]) -> "LauncherBuilder":
        accepted = [require_text("keyword", item) for item in keywords]
        self._keywords.update(accepted)
        return self

    def add_only_show_in(self, environment: DesktopEnvironment) -> "LauncherBuilder":
        self._only_show_in.add(_require_environment(environment))
        return self

    def add_not_show_in(self, environment: DesktopEnvironment) -> "LauncherBuilder":
        self._not_show_in.add(_require_environment(environment))
        return self

    def add_mime_type(self, mime_type: str) -> "LauncherBuilder":
        self._mime_types.add(validate_mime_type(mime_type))
        return self

    def add_language_variant(self, tag: str, value: str, target: LocalizedField) -> "LauncherBuilder":
        """Store ``value`` under the normalised language ``tag`` of ``target``."""

        try:
            field = LocalizedField(target)
        except ValueError as exc:
            raise LauncherValidationError(f"Unknown localized field {target!r}") from exc
        normalised = normalise_lang_tag(tag)
        self._localized[field][normalised] = require_string(f"{field.value} for {normalised!r}", value)
        return self

    def add_name_lang(self, tag: str, value: str) -> "LauncherBuilder":
        return self.add_language_variant(tag, value, LocalizedField.NAME)

    def add_generic_name_lang(self, tag: str, value: str) -> "LauncherBuilder":
        return self.add_language_variant(tag, value, LocalizedField.GENERIC_NAME)

    def add_comment_lang(self, tag: str, value: str) -> "LauncherBuilder":
        return self.add_language_variant(tag, value, LocalizedField.COMMENT)

    # ------------------------------------------------------------------

    def build(self) -> LauncherDescriptor:
        return LauncherDescriptor(
            file_name=self._file_name,
            kind=self._kind,
            name=self._name,
            exec=self._exec,
            try_exec=self._try_exec,
            icon=self._icon,
            comment=self._comment,
            generic_name=self._generic_name,
            path=self._path,
            startup_wm_class=self._startup_wm_class,
            terminal=self._terminal,
            no_display=self._no_display,
            startup_notify=self._startup_notify,
            categories=frozenset(self._categories),
            keywords=frozenset(self._keywords),
            mime_types=frozenset(self._mime_types),
            only_show_in=frozenset(self._only_show_in),
            not_show_in=frozenset(self._not_show_in),
            name_lang=dict(self._localized[LocalizedField.NAME]),
            generic_name_lang=dict(self._localized[LocalizedField.GENERIC_NAME]),
            comment_lang=dict(self._localized[LocalizedField.COMMENT]),
        )


def _require_environment(environment: object) -> DesktopEnvironment:
    if not isinstance(environment, DesktopEnvironment):
        raise LauncherValidationError(f"Unknown desktop environment {environment!r}")
    return environment


__all__ = ["LauncherBuilder", "LocalizedField"]
