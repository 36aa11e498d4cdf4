"""Filesystem glob adapter.

Implements GlobPort with pathlib globbing in a worker thread.
Brace alternatives ("*.{vue,js}") are expanded before globbing.
Ignore globs use fnmatch: * matches any characters including /.
Files and directories starting with "." only match when the pattern
names a dot segment.
"""

from __future__ import annotations

import asyncio
import fnmatch
import logging
import re
from pathlib import Path
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Sequence

logger = logging.getLogger(__name__)

# Directories never worth descending into
DEFAULT_EXCLUDES = frozenset(
    {
        "__pycache__",
        ".git",
        "node_modules",
    },
)

# Innermost brace group with at least one comma
_BRACE_PATTERN = re.compile(r"\{([^{}]*,[^{}]*)\}")


class PathGlob:
    """Default GlobPort adapter backed by pathlib.

    Results are POSIX relative paths, de-duplicated and sorted, so
    repeated runs over the same tree yield the same order.
    """

    def __init__(self, excludes: frozenset[str] = DEFAULT_EXCLUDES) -> None:
        """Initialize adapter.

        Args:
            excludes: Directory names skipped anywhere in the tree
        """
        self._excludes = excludes

    async def list(
        self,
        patterns: Sequence[str],
        *,
        cwd: Path,
        ignore: Sequence[str] = (),
    ) -> list[str]:
        """List files under cwd matching any pattern, minus ignored ones."""
        return await asyncio.to_thread(self.list_sync, patterns, cwd=cwd, ignore=ignore)

    def list_sync(
        self,
        patterns: Sequence[str],
        *,
        cwd: Path,
        ignore: Sequence[str] = (),
    ) -> list[str]:
        """Blocking variant of list()."""
        root = Path(cwd)
        if not root.is_dir():
            logger.debug("scan directory %s does not exist, no matches", root)
            return []

        found: set[str] = set()
        for pattern in expand_patterns(patterns):
            allow_dot = names_dot_segment(pattern)
            for path in root.glob(pattern):
                if not path.is_file():
                    continue
                relative = path.relative_to(root)
                if self._excludes.intersection(relative.parts[:-1]):
                    continue
                if not allow_dot and any(part.startswith(".") for part in relative.parts):
                    continue
                rel = relative.as_posix()
                if not is_ignored(rel, ignore):
                    found.add(rel)

        return sorted(found)


def expand_braces(pattern: str) -> list[str]:
    """Expand brace alternatives into plain glob patterns.

    Groups without a comma stay literal.

    Example:
        >>> expand_braces("**/*.{vue,js}")
        ['**/*.vue', '**/*.js']
    """
    match = _BRACE_PATTERN.search(pattern)
    if match is None:
        return [pattern]

    head, tail = pattern[: match.start()], pattern[match.end() :]
    expanded: list[str] = []
    for option in match.group(1).split(","):
        expanded.extend(expand_braces(f"{head}{option}{tail}"))
    return expanded


def expand_patterns(patterns: Sequence[str]) -> list[str]:
    """Expand braces of every pattern, dropping duplicates, order kept."""
    return list(dict.fromkeys(p for pattern in patterns for p in expand_braces(pattern)))


def names_dot_segment(pattern: str) -> bool:
    """Check if a pattern segment explicitly starts with "."."""
    return any(segment.startswith(".") for segment in pattern.split("/"))


def is_ignored(relative_path: str, ignore: Sequence[str]) -> bool:
    """Check if POSIX relative path matches any ignore glob.

    A leading "**/" also matches at the root: "**/*.spec.py" ignores
    both "a.spec.py" and "sub/a.spec.py". Braces are expanded.
    """
    for pattern in expand_patterns(ignore):
        if fnmatch.fnmatchcase(relative_path, pattern):
            return True
        if pattern.startswith("**/") and fnmatch.fnmatchcase(relative_path, pattern[3:]):
            return True
    return False
