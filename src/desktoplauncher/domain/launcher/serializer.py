"""Renders launcher descriptors into the ``[Desktop Entry]`` text format."""

from __future__ import annotations

from typing import TYPE_CHECKING, Iterable, List, Mapping

if TYPE_CHECKING:  # pragma: no cover
    from .value_objects import LauncherDescriptor

SECTION_HEADER = "[Desktop Entry]"
# Launcher files always use LF, independent of the host platform.
LINE_SEPARATOR = "\n"


def _bool(value: bool) -> str:
    return "true" if value else "false"


def _list_value(items: Iterable[str]) -> str:
    return "".join(f"{item};" for item in items)


class _Lines:
    def __init__(self) -> None:
        self._parts: List[str] = []

    def line(self, text: str = "") -> None:
        self._parts.append(text + LINE_SEPARATOR)

    def pair(self, key: str, value: str) -> None:
        self.line(f"{key}={value}")

    def optional(self, key: str, value: str | None) -> None:
        if value is not None:
            self.pair(key, value)

    def localized(self, key: str, values: Mapping[str, str]) -> None:
        for tag, value in values.items():
            self.pair(f"{key}[{tag}]", value)

    def listing(self, key: str, items: Iterable[str]) -> None:
        items = list(items)
        if items:
            self.pair(key, _list_value(items))

    def text(self) -> str:
        return "".join(self._parts)


def render_descriptor(descriptor: "LauncherDescriptor") -> str:
    """Return the launcher file content for ``descriptor``.

    Keys are emitted in a fixed order. Values are written verbatim; callers
    must keep ``=``, ``;`` and newlines out of them. Entries inside list and
    localized keys follow set/mapping iteration order, which is unspecified.
    """

    out = _Lines()
    out.line(SECTION_HEADER)
    out.pair("Type", descriptor.kind.label)

    out.pair("Name", descriptor.name)
    out.localized("Name", descriptor.name_lang)

    out.pair("Exec", descriptor.exec)
    out.optional("Icon", descriptor.icon)

    out.optional("Comment", descriptor.comment)
    out.localized("Comment", descriptor.comment_lang)

    out.listing("Categories", (category.label for category in descriptor.categories))
    out.optional("Path", descriptor.path)
    out.listing("Keywords", descriptor.keywords)
    out.optional("TryExec", descriptor.try_exec)
    out.pair("Terminal", _bool(descriptor.terminal))

    out.optional("GenericName", descriptor.generic_name)
    if descriptor.generic_name_lang:
        out.localized("GenericName", descriptor.generic_name_lang)
        # Historical output keeps a blank line after localized generic names.
        out.line()

    out.pair("NoDisplay", _bool(descriptor.no_display))
    out.listing("OnlyShowIn", (env.label for env in descriptor.only_show_in))
    out.listing("NotShowIn", (env.label for env in descriptor.not_show_in))
    out.listing("MimeType", descriptor.mime_types)
    out.pair("StartupNotify", _bool(descriptor.startup_notify))
    out.optional("StartupWMClass", descriptor.startup_wm_class)
    return out.text()


__all__ = ["LINE_SEPARATOR", "SECTION_HEADER", "render_descriptor"]
