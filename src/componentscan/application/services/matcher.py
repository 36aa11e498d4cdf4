"""Lookup of components by registered name."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterable, Mapping, Sequence

    from componentscan.domain.model import Component


def build_index(components: Iterable[Component]) -> Mapping[str, Component]:
    """Map PascalCase and kebab-case names to components. First record wins."""
    index: dict[str, Component] = {}
    for component in components:
        for name in component.names:
            index.setdefault(name, component)
    return index


def match(tags: Iterable[str], components: Sequence[Component]) -> list[Component]:
    """Find the component named by each tag.

    Result follows tags order. Unknown tags are omitted.

    Example:
        >>> match(["Header", "missing-tag"], components)
        [Component(pascal_name='Header', ...)]
    """
    index = build_index(components)
    return [index[tag] for tag in tags if tag in index]
