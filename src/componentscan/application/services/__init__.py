"""Application services: component resolution and lookup."""

from componentscan.application.services.matcher import build_index, match
from componentscan.application.services.resolver import (
    ComponentResolver,
    apply_prefix,
    default_async_import,
    default_import,
    scan_components,
    sort_by_depth,
)

__all__ = [
    "ComponentResolver",
    "apply_prefix",
    "build_index",
    "default_async_import",
    "default_import",
    "match",
    "scan_components",
    "sort_by_depth",
]
