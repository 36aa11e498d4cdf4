"""Naming collision value object."""

from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True, slots=True)
class NamingCollision:
    """Two files of one directory scan resolved to the same name.

    The first file keeps the name; the second produces no components.

    Attributes:
        name: Contested PascalCase name
        kept_path: File that claimed the name first
        rejected_path: File that was dropped
        directory: Scan directory root
    """

    name: str
    kept_path: str
    rejected_path: str
    directory: Path

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not self.kept_path or not self.rejected_path:
            raise ValueError("collision paths must not be empty")
        if self.kept_path == self.rejected_path:
            raise ValueError(f"collision requires two distinct files, got {self.kept_path}")

    def __str__(self) -> str:
        """Format as multi-line diagnostic."""
        return (
            f"Two component files resolving to the same name `{self.name}`:\n"
            f"\n - {self.rejected_path}"
            f"\n - {self.kept_path}"
        )
