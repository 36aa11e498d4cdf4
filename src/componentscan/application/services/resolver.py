"""Resolver service: scan directories -> ordered component records.

Deeper directories are scanned first and claim their files; a shallower
directory later skips everything under an already scanned root.
Directories and files are processed strictly one after another because
every step reads the names and paths claimed by the previous ones.
"""

from __future__ import annotations

import inspect
import logging
from dataclasses import dataclass, field, replace
from typing import TYPE_CHECKING

from componentscan.application.naming.path_namer import name_file
from componentscan.domain.exceptions import HookResultError
from componentscan.domain.model import (
    Component,
    NamingCollision,
    ResolutionResult,
    ResolverConfig,
)
from componentscan.infrastructure.casing import to_kebab_case, to_pascal_case
from componentscan.infrastructure.globbing import PathGlob

if TYPE_CHECKING:
    from collections.abc import Iterable
    from pathlib import PurePath

    from componentscan.domain.model import ScanDirectory
    from componentscan.domain.ports import GlobPort

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class _RunState:
    """Bookkeeping of one resolve() call, discarded afterwards."""

    claimed_paths: set[str] = field(default_factory=set)
    scanned_roots: list[str] = field(default_factory=list)
    components: list[Component] = field(default_factory=list)
    collisions: list[NamingCollision] = field(default_factory=list)


def sort_by_depth(directories: Iterable[ScanDirectory]) -> list[ScanDirectory]:
    """Order directories deepest first. Equal depths keep input order."""
    return sorted(directories, key=lambda d: d.depth, reverse=True)


def apply_prefix(component: Component, prefix: str | None) -> Component:
    """Prepend directory prefix to both names unless already present.

    Example:
        prefix "app": Header -> AppHeader / app-header, AppBar unchanged
    """
    if not prefix:
        return component

    pascal_prefix = to_pascal_case(prefix)
    kebab_prefix = to_kebab_case(prefix)

    pascal_name = component.pascal_name
    if not pascal_name.startswith(pascal_prefix):
        pascal_name = pascal_prefix + pascal_name

    kebab_name = component.kebab_name
    if not kebab_name.startswith(kebab_prefix):
        kebab_name = _join_kebab(kebab_prefix, kebab_name)

    return replace(component, pascal_name=pascal_name, kebab_name=kebab_name)


def _join_kebab(prefix: str, name: str) -> str:
    return f"{prefix}-{name}" if name else prefix


def default_import(component: Component) -> str:
    """Synchronous binding of the component export."""
    return f"require('{component.file_path}').{component.export}"


def default_async_import(component: Component) -> str:
    """Thunk loading the file as a named chunk, resolving to the export or module."""
    return (
        "function () { "
        f"return import('{component.file_path}'"
        f" /* webpackChunkName: \"{component.chunk_name}\" */)"
        f".then(function(m) {{ return m['{component.export}'] || m }})"
        " }"
    )


class ComponentResolver:
    """Turns scan directories into eager/lazy component pairs.

    One instance can serve many runs; all run state lives in resolve().

    Methods:
        resolve(): Full run, returns components and collisions
    """

    def __init__(
        self,
        glob: GlobPort | None = None,
        config: ResolverConfig | None = None,
    ) -> None:
        """Initialize resolver.

        Args:
            glob: File discovery adapter. Uses PathGlob if None.
            config: Resolver settings. Uses defaults if None.
        """
        self._glob = glob if glob is not None else PathGlob()
        self._config = config or ResolverConfig()

    async def resolve(
        self,
        directories: Iterable[ScanDirectory],
        source_root: str | PurePath,
    ) -> ResolutionResult:
        """Scan all directories and build component records.

        Args:
            directories: Scan directories, any order
            source_root: Project source root, stripped from short paths

        Returns:
            ResolutionResult with components in directory-then-discovery order

        Raises:
            HookResultError: extend_component returned an invalid value
            Exception: Anything raised by the glob adapter or a hook, unchanged
        """
        state = _RunState()

        for directory in sort_by_depth(directories):
            await self._scan_directory(directory, source_root, state)

        logger.debug(
            "resolved %d components from %d directories, %d collisions",
            len(state.components) // 2,
            len(state.scanned_roots),
            len(state.collisions),
        )
        return ResolutionResult(
            components=tuple(state.components),
            collisions=tuple(state.collisions),
        )

    async def _scan_directory(
        self,
        directory: ScanDirectory,
        source_root: str | PurePath,
        state: _RunState,
    ) -> None:
        """Process all matches of one directory, then mark it scanned."""
        root = str(directory.path)
        # Names are unique per directory scan; maps name -> claiming file
        resolved_names: dict[str, str] = {}

        matches = await self._glob.list(
            directory.include_patterns,
            cwd=directory.path,
            ignore=directory.exclude_patterns,
        )
        logger.debug("scanning %s: %d matches", root, len(matches))

        for relative in matches:
            file_path = str(directory.path / relative)

            if any(file_path.startswith(scanned) for scanned in state.scanned_roots):
                logger.debug("skipping %s: covered by a deeper directory", file_path)
                continue
            if file_path in state.claimed_paths:
                continue

            resolved = name_file(
                file_path,
                directory.path,
                source_root,
                index_marker=self._config.index_marker,
                windows_paths=self._config.windows_paths,
            )

            kept_path = resolved_names.get(resolved.pascal_name)
            if kept_path is not None:
                collision = NamingCollision(
                    name=resolved.pascal_name,
                    kept_path=kept_path,
                    rejected_path=file_path,
                    directory=directory.path,
                )
                logger.warning("%s", collision)
                state.collisions.append(collision)
                continue
            resolved_names[resolved.pascal_name] = file_path

            draft = apply_prefix(
                Component(
                    pascal_name=resolved.pascal_name,
                    kebab_name=resolved.kebab_name,
                    file_path=resolved.file_path,
                    short_path=resolved.short_path,
                    chunk_name=resolved.chunk_name,
                    global_=bool(directory.global_),
                ),
                directory.prefix,
            )
            component = await self._extend(directory, draft)

            state.components.extend(self._variants(component))
            state.claimed_paths.add(file_path)

        state.scanned_roots.append(root)

    async def _extend(self, directory: ScanDirectory, draft: Component) -> Component:
        """Run extend_component; its result replaces the draft, None keeps it."""
        if directory.extend_component is None:
            return draft

        result = directory.extend_component(draft)
        if inspect.isawaitable(result):
            result = await result

        if result is None:
            return draft
        if not isinstance(result, Component):
            raise HookResultError(draft.file_path, type(result))
        return result

    def _variants(self, component: Component) -> tuple[Component, Component]:
        """Build the eager record and its lazy counterpart."""
        import_ = component.import_ or default_import(component)
        async_import = component.async_import or default_async_import(component)

        eager = replace(component, import_=import_, async_import=async_import, async_=False)
        lazy = replace(
            eager,
            pascal_name=to_pascal_case(self._config.lazy_prefix) + component.pascal_name,
            kebab_name=_join_kebab(to_kebab_case(self._config.lazy_prefix), component.kebab_name),
            import_=async_import,
            async_=True,
        )
        return eager, lazy


async def scan_components(
    directories: Iterable[ScanDirectory],
    source_root: str | PurePath,
    *,
    glob: GlobPort | None = None,
    config: ResolverConfig | None = None,
) -> list[Component]:
    """Resolve components and return the flat record list.

    Collisions are logged and dropped; use ComponentResolver.resolve()
    to inspect them.
    """
    result = await ComponentResolver(glob=glob, config=config).resolve(directories, source_root)
    return list(result.components)
