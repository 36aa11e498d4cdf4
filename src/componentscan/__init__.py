"""componentscan - discover component files and derive their registration names."""

__version__ = "0.1.0"

from componentscan.application.services.matcher import match
from componentscan.application.services.resolver import ComponentResolver, scan_components
from componentscan.domain.model import (
    Component,
    NamingCollision,
    ResolutionResult,
    ResolverConfig,
    ScanDirectory,
)

__all__ = [
    "Component",
    "ComponentResolver",
    "NamingCollision",
    "ResolutionResult",
    "ResolverConfig",
    "ScanDirectory",
    "__version__",
    "match",
    "scan_components",
]
