"""Domain model: immutable records and configuration."""

from componentscan.domain.model.component import Component
from componentscan.domain.model.config import ResolverConfig
from componentscan.domain.model.naming_collision import NamingCollision
from componentscan.domain.model.resolution_result import ResolutionResult
from componentscan.domain.model.scan_directory import (
    ExtendComponent,
    GlobalMode,
    ScanDirectory,
)

__all__ = [
    "Component",
    "ExtendComponent",
    "GlobalMode",
    "NamingCollision",
    "ResolutionResult",
    "ResolverConfig",
    "ScanDirectory",
]
