"""Tests for services/resolver.py."""

from __future__ import annotations

import dataclasses
import logging

import pytest

from componentscan.application.services.resolver import (
    ComponentResolver,
    apply_prefix,
    default_async_import,
    default_import,
    scan_components,
    sort_by_depth,
)
from componentscan.domain.exceptions import HookResultError
from componentscan.domain.model import Component, ResolverConfig
from tests.factories import FailingGlob, FakeGlob, make_component, make_scan_directory

POSIX = ResolverConfig(windows_paths=False)


def _names(components: list[Component] | tuple[Component, ...]) -> list[str]:
    return [c.pascal_name for c in components]


async def _resolve(tree: dict[str, list[str]], *directories, config=POSIX):
    resolver = ComponentResolver(glob=FakeGlob(tree), config=config)
    return await resolver.resolve(directories, "/src")


class TestSortByDepth:
    """Tests for sort_by_depth."""

    def test_deepest_first(self) -> None:
        shallow = make_scan_directory("/src/components")
        deep = make_scan_directory("/src/components/base/forms")
        middle = make_scan_directory("/src/components/base")

        assert sort_by_depth([shallow, deep, middle]) == [deep, middle, shallow]

    def test_equal_depth_keeps_input_order(self) -> None:
        first = make_scan_directory("/src/components")
        second = make_scan_directory("/src/widgets")

        assert sort_by_depth([first, second]) == [first, second]
        assert sort_by_depth([second, first]) == [second, first]


class TestApplyPrefix:
    """Tests for apply_prefix."""

    def test_prepends_prefix(self) -> None:
        component = apply_prefix(make_component("Header"), "app")

        assert component.pascal_name == "AppHeader"
        assert component.kebab_name == "app-header"

    def test_existing_prefix_unchanged(self) -> None:
        component = apply_prefix(make_component("AppBar"), "app")

        assert component.pascal_name == "AppBar"
        assert component.kebab_name == "app-bar"

    def test_no_prefix(self) -> None:
        original = make_component("Header")

        assert apply_prefix(original, None) is original
        assert apply_prefix(original, "") is original

    def test_kebab_prefix_is_cased(self) -> None:
        component = apply_prefix(make_component("Header"), "MyApp")

        assert component.pascal_name == "MyAppHeader"
        assert component.kebab_name == "my-app-header"


class TestImportSnippets:
    """Tests for default import expressions."""

    def test_default_import(self) -> None:
        component = make_component("Header")

        assert default_import(component) == "require('/src/components/Header.vue').default"

    def test_default_async_import(self) -> None:
        component = make_component("Header", export="Header")

        assert default_async_import(component) == (
            "function () { return import('/src/components/Header.vue'"
            ' /* webpackChunkName: "components/Header" */)'
            ".then(function(m) { return m['Header'] || m }) }"
        )


class TestResolveBasics:
    """Tests for eager/lazy record generation."""

    async def test_two_records_per_file(self) -> None:
        result = await _resolve(
            {"/src/components": ["Header.vue", "form/index.vue"]},
            make_scan_directory("/src/components"),
        )

        assert _names(result.components) == ["Header", "LazyHeader", "Form", "LazyForm"]
        assert result.collisions == ()

    async def test_eager_record(self) -> None:
        result = await _resolve(
            {"/src/components": ["Header.vue"]},
            make_scan_directory("/src/components"),
        )
        eager = result.components[0]

        assert eager.kebab_name == "header"
        assert eager.file_path == "/src/components/Header.vue"
        assert eager.short_path == "components/Header.vue"
        assert eager.chunk_name == "components/Header"
        assert eager.import_ == "require('/src/components/Header.vue').default"
        assert eager.async_import == default_async_import(eager)
        assert eager.async_ is False

    async def test_lazy_record(self) -> None:
        result = await _resolve(
            {"/src/components": ["Header.vue"]},
            make_scan_directory("/src/components"),
        )
        eager, lazy = result.components

        assert lazy.pascal_name == "LazyHeader"
        assert lazy.kebab_name == "lazy-header"
        assert lazy.async_ is True
        assert lazy.import_ == eager.async_import
        assert lazy.file_path == eager.file_path
        assert lazy.chunk_name == eager.chunk_name

    async def test_lazy_prefix_always_added(self) -> None:
        result = await _resolve(
            {"/src/components": ["LazyLoader.vue"]},
            make_scan_directory("/src/components"),
        )

        assert _names(result.components) == ["LazyLoader", "LazyLazyLoader"]

    async def test_custom_lazy_prefix(self) -> None:
        result = await _resolve(
            {"/src/components": ["Header.vue"]},
            make_scan_directory("/src/components"),
            config=ResolverConfig(lazy_prefix="async", windows_paths=False),
        )

        assert result.components[1].pascal_name == "AsyncHeader"
        assert result.components[1].kebab_name == "async-header"

    async def test_global_flag(self) -> None:
        result = await _resolve(
            {"/src/global": ["Toast.vue"], "/src/components": ["Header.vue"]},
            make_scan_directory("/src/global", global_="dev"),
            make_scan_directory("/src/components"),
        )

        flags = {c.pascal_name: c.global_ for c in result.components}
        assert flags == {
            "Toast": True,
            "LazyToast": True,
            "Header": False,
            "LazyHeader": False,
        }

    async def test_windows_chunk_names(self) -> None:
        result = await _resolve(
            {"/src/components": ["form/Input.vue"]},
            make_scan_directory("/src/components"),
            config=ResolverConfig(windows_paths=True),
        )

        assert result.components[0].chunk_name == "components_form_Input"

    async def test_duplicate_matches_emitted_once(self) -> None:
        result = await _resolve(
            {"/src/components": ["Header.vue", "Header.vue"]},
            make_scan_directory("/src/components"),
        )

        assert _names(result.components) == ["Header", "LazyHeader"]
        assert result.collisions == ()

    async def test_glob_receives_patterns_and_ignores(self) -> None:
        glob = FakeGlob({})
        directory = make_scan_directory(
            "/src/components",
            pattern=["**/*.vue", "!**/*.spec.vue"],
            ignore=["legacy/**"],
        )

        await ComponentResolver(glob=glob, config=POSIX).resolve([directory], "/src")

        assert glob.calls == [
            (("**/*.vue",), "/src/components", ("legacy/**", "**/*.spec.vue")),
        ]

    async def test_empty_directories(self) -> None:
        result = await _resolve({})

        assert result.components == ()


class TestResolveOrdering:
    """Tests for depth ordering and nested directories."""

    async def test_deeper_directory_claims_file(self) -> None:
        glob = FakeGlob(
            {
                "/src/components": ["Header.vue", "base/Button.vue"],
                "/src/components/base": ["Button.vue"],
            }
        )
        directories = [
            make_scan_directory("/src/components"),
            make_scan_directory("/src/components/base", prefix="base"),
        ]

        result = await ComponentResolver(glob=glob, config=POSIX).resolve(directories, "/src")

        assert _names(result.components) == [
            "BaseButton",
            "LazyBaseButton",
            "Header",
            "LazyHeader",
        ]
        assert [call[1] for call in glob.calls] == ["/src/components/base", "/src/components"]

    async def test_shallow_directory_does_not_duplicate(self) -> None:
        result = await _resolve(
            {
                "/src/components": ["base/Button.vue"],
                "/src/components/base": ["Button.vue"],
            },
            make_scan_directory("/src/components"),
            make_scan_directory("/src/components/base"),
        )

        paths = [c.file_path for c in result.components]
        assert paths == ["/src/components/base/Button.vue"] * 2

    async def test_discovery_order_within_directory(self) -> None:
        result = await _resolve(
            {"/src/components": ["Zebra.vue", "Apple.vue"]},
            make_scan_directory("/src/components"),
        )

        assert _names(result.eager) == ["Zebra", "Apple"]


class TestResolveCollisions:
    """Tests for naming collisions within one directory."""

    async def test_second_file_dropped(self) -> None:
        result = await _resolve(
            {"/src/c": ["Bar/index.vue", "Bar.vue"]},
            make_scan_directory("/src/c"),
        )

        assert _names(result.components) == ["Bar", "LazyBar"]
        assert result.components[0].file_path == "/src/c/Bar/index.vue"

        (collision,) = result.collisions
        assert collision.name == "Bar"
        assert collision.kept_path == "/src/c/Bar/index.vue"
        assert collision.rejected_path == "/src/c/Bar.vue"

    async def test_collision_logged(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.WARNING):
            await _resolve(
                {"/src/c": ["Bar/index.vue", "Bar.vue"]},
                make_scan_directory("/src/c"),
            )

        (record,) = [r for r in caplog.records if r.levelno == logging.WARNING]
        assert "`Bar`" in record.getMessage()
        assert "/src/c/Bar.vue" in record.getMessage()
        assert "/src/c/Bar/index.vue" in record.getMessage()

    async def test_same_file_name_in_two_directories(self) -> None:
        result = await _resolve(
            {"/src/a": ["Header.vue"], "/src/b": ["Header.vue"]},
            make_scan_directory("/src/a", prefix="a"),
            make_scan_directory("/src/b", prefix="b"),
        )

        assert _names(result.eager) == ["AHeader", "BHeader"]
        assert result.collisions == ()

    async def test_non_ascii_names_do_not_collide(self) -> None:
        result = await _resolve(
            {"/src/c": ["Äpfel.vue", "Öpfel.vue"]},
            make_scan_directory("/src/c"),
        )

        assert _names(result.eager) == ["Äpfel", "Öpfel"]
        assert [c.kebab_name for c in result.eager] == ["äpfel", "öpfel"]
        assert result.collisions == ()

    async def test_names_unique_across_run(self) -> None:
        result = await _resolve(
            {
                "/src/components": ["Header.vue", "form/index.vue", "base/Button.vue"],
                "/src/components/base": ["Button.vue", "Icon.vue"],
                "/src/layouts": ["Header.vue", "Sidebar.vue"],
            },
            make_scan_directory("/src/components"),
            make_scan_directory("/src/components/base", prefix="base"),
            make_scan_directory("/src/layouts", prefix="layout"),
        )

        names = _names(result.components)
        assert len(names) == 12
        assert len(set(names)) == len(names)
        assert result.collisions == ()


class TestResolveExtendComponent:
    """Tests for the extend_component hook."""

    async def test_sync_hook_replaces_draft(self) -> None:
        def hook(component: Component) -> Component:
            return dataclasses.replace(component, export="Header")

        result = await _resolve(
            {"/src/components": ["Header.vue"]},
            make_scan_directory("/src/components", extend_component=hook),
        )
        eager, lazy = result.components

        assert eager.import_ == "require('/src/components/Header.vue').Header"
        assert "m['Header']" in lazy.import_

    async def test_async_hook(self) -> None:
        async def hook(component: Component) -> Component:
            return dataclasses.replace(component, pascal_name="Masthead")

        result = await _resolve(
            {"/src/components": ["Header.vue"]},
            make_scan_directory("/src/components", extend_component=hook),
        )

        assert _names(result.components) == ["Masthead", "LazyMasthead"]

    async def test_hook_returning_none_keeps_draft(self) -> None:
        seen: list[Component] = []

        def hook(component: Component) -> None:
            seen.append(component)

        result = await _resolve(
            {"/src/components": ["Header.vue"]},
            make_scan_directory("/src/components", prefix="app", extend_component=hook),
        )

        assert seen[0].pascal_name == "AppHeader"
        assert seen[0].import_ == ""
        assert _names(result.components) == ["AppHeader", "LazyAppHeader"]

    async def test_custom_import_kept(self) -> None:
        def hook(component: Component) -> Component:
            return dataclasses.replace(component, import_="customImport()")

        result = await _resolve(
            {"/src/components": ["Header.vue"]},
            make_scan_directory("/src/components", extend_component=hook),
        )
        eager, lazy = result.components

        assert eager.import_ == "customImport()"
        assert lazy.import_.startswith("function () { return import(")

    async def test_invalid_hook_result_raises(self) -> None:
        with pytest.raises(HookResultError, match="got str"):
            await _resolve(
                {"/src/components": ["Header.vue"]},
                make_scan_directory("/src/components", extend_component=lambda c: "oops"),
            )

    async def test_hook_error_propagates(self) -> None:
        def hook(component: Component) -> Component:
            raise RuntimeError("hook failed")

        with pytest.raises(RuntimeError, match="hook failed"):
            await _resolve(
                {"/src/components": ["Header.vue"]},
                make_scan_directory("/src/components", extend_component=hook),
            )


class TestResolveFailures:
    """Tests for upstream failures."""

    async def test_glob_error_propagates(self) -> None:
        resolver = ComponentResolver(glob=FailingGlob(OSError("disk gone")), config=POSIX)

        with pytest.raises(OSError, match="disk gone"):
            await resolver.resolve([make_scan_directory()], "/src")


class TestScanComponents:
    """Tests for scan_components convenience function."""

    async def test_returns_list(self) -> None:
        result = await scan_components(
            [make_scan_directory("/src/components")],
            "/src",
            glob=FakeGlob({"/src/components": ["Header.vue"]}),
            config=POSIX,
        )

        assert isinstance(result, list)
        assert _names(result) == ["Header", "LazyHeader"]
