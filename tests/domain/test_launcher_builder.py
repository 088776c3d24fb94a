from __future__ import annotations

import dataclasses

import pytest

from desktoplauncher.domain.launcher import (
    Category,
    CategoryTier,
    DesktopEnvironment,
    LauncherBuilder,
    LauncherDescriptor,
    LauncherType,
    LauncherValidationError,
    LocalizedField,
)


def make_builder() -> LauncherBuilder:
    return LauncherBuilder("myapp", LauncherType.APPLICATION, "My App", "/usr/bin/myapp")


@pytest.mark.parametrize("file_name", ["a", "myapp", "app2", "x0y1z2"])
def test_builder_accepts_valid_file_names(file_name: str) -> None:
    builder = LauncherBuilder(file_name, LauncherType.APPLICATION, "App", "app")
    assert builder.build().file_name == file_name


@pytest.mark.parametrize("file_name", ["", "MyApp", "2app", "my-app", "my app", "app.desktop", "myapp\n"])
def test_builder_rejects_invalid_file_names(file_name: str) -> None:
    with pytest.raises(LauncherValidationError):
        LauncherBuilder(file_name, LauncherType.APPLICATION, "App", "app")


@pytest.mark.parametrize(
    "name, exec_command",
    [("", "app"), ("App", ""), (None, "app"), ("App", None)],
)
def test_builder_requires_name_and_exec(name: object, exec_command: object) -> None:
    with pytest.raises(LauncherValidationError):
        LauncherBuilder("app", LauncherType.APPLICATION, name, exec_command)  # type: ignore[arg-type]


def test_builder_rejects_unknown_kind() -> None:
    with pytest.raises(LauncherValidationError):
        LauncherBuilder("app", "Application", "App", "app")  # type: ignore[arg-type]


def test_builder_chains_and_collects_fields() -> None:
    descriptor = (
        make_builder()
        .icon("myapp")
        .comment("Does things")
        .generic_name("Thing Doer")
        .path("/opt/myapp")
        .try_exec("/usr/bin/myapp")
        .startup_wm_class("MyApp")
        .terminal()
        .no_display()
        .startup_notify()
        .add_category(Category.NETWORK)
        .add_category(Category.NETWORK)
        .add_keyword("mail")
        .add_keywords(["mail", "inbox"])
        .add_only_show_in(DesktopEnvironment.GNOME)
        .add_not_show_in(DesktopEnvironment.KDE)
        .add_mime_type("text/plain")
        .build()
    )

    assert descriptor.icon == "myapp"
    assert descriptor.path == "/opt/myapp"
    assert descriptor.terminal and descriptor.no_display and descriptor.startup_notify
    assert descriptor.categories == frozenset({Category.NETWORK})
    assert descriptor.keywords == frozenset({"mail", "inbox"})
    assert descriptor.only_show_in == frozenset({DesktopEnvironment.GNOME})
    assert descriptor.not_show_in == frozenset({DesktopEnvironment.KDE})
    assert descriptor.mime_types == frozenset({"text/plain"})


def test_optional_scalars_reject_empty_strings() -> None:
    builder = make_builder()
    with pytest.raises(LauncherValidationError):
        builder.icon("")
    assert builder.build().icon is None


def test_language_tags_are_normalised() -> None:
    descriptor = make_builder().add_name_lang(" DE ", "Mein App").build()
    assert dict(descriptor.name_lang) == {"de": "Mein App"}


def test_language_variant_overwrites_previous_value() -> None:
    descriptor = (
        make_builder()
        .add_comment_lang("fr", "Premier")
        .add_language_variant("FR", "Second", LocalizedField.COMMENT)
        .build()
    )
    assert dict(descriptor.comment_lang) == {"fr": "Second"}


@pytest.mark.parametrize("tag", ["deutsch", "d", "", "   ", " e "])
def test_language_tags_outside_length_range_are_rejected(tag: str) -> None:
    builder = make_builder()
    with pytest.raises(LauncherValidationError):
        builder.add_generic_name_lang(tag, "x")
    assert dict(builder.build().generic_name_lang) == {}


def test_mime_type_validation() -> None:
    builder = make_builder().add_mime_type("text/plain")
    with pytest.raises(LauncherValidationError):
        builder.add_mime_type("textplain")
    assert builder.build().mime_types == frozenset({"text/plain"})


def test_build_returns_independent_snapshots() -> None:
    builder = make_builder().add_keyword("one").add_name_lang("de", "Eins")
    first = builder.build()
    builder.add_keyword("two").add_name_lang("fr", "Deux").terminal()
    second = builder.build()

    assert first.keywords == frozenset({"one"})
    assert dict(first.name_lang) == {"de": "Eins"}
    assert first.terminal is False
    assert second.keywords == frozenset({"one", "two"})
    assert dict(second.name_lang) == {"de": "Eins", "fr": "Deux"}


def test_descriptor_is_immutable() -> None:
    descriptor = make_builder().add_name_lang("de", "Mein App").build()
    with pytest.raises(dataclasses.FrozenInstanceError):
        descriptor.name = "Other"  # type: ignore[misc]
    with pytest.raises(TypeError):
        descriptor.name_lang["fr"] = "Mon App"  # type: ignore[index]


def test_category_tiers() -> None:
    assert Category.NETWORK.tier is CategoryTier.CORE
    assert Category.EMAIL.tier is CategoryTier.ADDITIONAL
    assert Category.TRAYICON.tier is CategoryTier.RESERVED
    assert Category.TWODGRAPHICS.label == "2DGraphics"


@pytest.mark.parametrize(
    "overrides",
    [
        {"mime_types": {"textplain"}},
        {"name_lang": {"deutsch": "x"}},
        {"comment_lang": {"de": None}},
        {"icon": ""},
        {"startup_wm_class": ""},
        {"keywords": {""}},
        {"categories": {"Network"}},
        {"only_show_in": {Category.NETWORK}},
        {"not_show_in": {"GNOME"}},
    ],
)
def test_descriptor_constructor_enforces_field_invariants(overrides: dict[str, object]) -> None:
    with pytest.raises(LauncherValidationError):
        LauncherDescriptor(
            file_name="app",
            kind=LauncherType.APPLICATION,
            name="App",
            exec="app",
            **overrides,  # type: ignore[arg-type]
        )


def test_descriptor_constructor_normalises_language_tags() -> None:
    descriptor = LauncherDescriptor(
        file_name="app",
        kind=LauncherType.APPLICATION,
        name="App",
        exec="app",
        generic_name_lang={" FR ": "Appli"},
    )
    assert dict(descriptor.generic_name_lang) == {"fr": "Appli"}


def test_language_variant_values_must_be_strings() -> None:
    builder = make_builder()
    with pytest.raises(LauncherValidationError):
        builder.add_name_lang("de", None)  # type: ignore[arg-type]
    with pytest.raises(LauncherValidationError):
        builder.add_comment_lang("de", 42)  # type: ignore[arg-type]
    assert "Name[de]" not in builder.build().render()


def test_language_variant_rejects_unknown_target() -> None:
    builder = make_builder()
    with pytest.raises(LauncherValidationError):
        builder.add_language_variant("de", "x", "keywords")  # type: ignore[arg-type]
    assert builder.add_language_variant("de", "Mein App", "name").build().name_lang["de"] == "Mein App"  # type: ignore[arg-type]


def test_equal_descriptors_hash_equally() -> None:
    first = make_builder().add_name_lang("de", "Mein App").add_category(Category.NETWORK).build()
    second = make_builder().add_category(Category.NETWORK).add_name_lang("de", "Mein App").build()

    assert first == second
    assert hash(first) == hash(second)
    assert len({first, second, make_builder().build()}) == 2
