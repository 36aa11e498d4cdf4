"""Glob capability port (interface)."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from collections.abc import Sequence
    from pathlib import Path


class GlobPort(Protocol):
    """Contract for file discovery.

    componentscan provides PathGlob as default adapter.
    Tests and callers can plug any object with the same method.
    """

    async def list(
        self,
        patterns: Sequence[str],
        *,
        cwd: Path,
        ignore: Sequence[str] = (),
    ) -> list[str]:
        """List files under cwd matching any pattern.

        Args:
            patterns: Glob patterns relative to cwd
            cwd: Directory to scan
            ignore: Exclusion globs relative to cwd

        Returns:
            Relative file paths in a deterministic order
        """
        ...
