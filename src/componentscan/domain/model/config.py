"""Resolver configuration."""

import sys
from dataclasses import dataclass, field


def _is_windows() -> bool:
    return sys.platform.startswith("win")


@dataclass(frozen=True, slots=True)
class ResolverConfig:
    """Run-independent resolver settings.

    Attributes:
        lazy_prefix: Prefix of the lazy variant names ("lazy" -> LazyFoo, lazy-foo)
        index_marker: PascalCase file stem named after its directory instead
        windows_paths: Escape backslashes in file_path and flatten chunk_name.
            Defaults to the host platform.
    """

    lazy_prefix: str = "lazy"
    index_marker: str = "Index"
    windows_paths: bool = field(default_factory=_is_windows)

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not self.lazy_prefix:
            raise ValueError("lazy_prefix must not be empty")
        if not self.index_marker:
            raise ValueError("index_marker must not be empty")
