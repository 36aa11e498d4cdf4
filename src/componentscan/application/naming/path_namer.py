"""Path namer: discovered file path -> component name and paths.

Directory structure is the primary namespace, the file name is secondary:
- an index file, or a file named like its folder, takes the folder name
- other files get the folder path prepended, unless the file name
  already starts with it (singular form of the last segment accepted)

All functions are pure and total over well-formed path strings.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path, PurePath

from componentscan.infrastructure.casing import to_kebab_case, to_pascal_case

# Joins directory prefix and file name inside the raw candidate.
# Casing drops it, so it only marks a word boundary.
NAME_SEPARATOR = "/"


@dataclass(frozen=True, slots=True)
class ResolvedName:
    """Name and path fields derived for one file.

    Attributes:
        pascal_name: Candidate name in PascalCase
        kebab_name: Candidate name in kebab-case
        file_path: Absolute path, escaped when windows paths are on
        short_path: Path relative to source root, forward slashes
        chunk_name: short_path without extension
    """

    pascal_name: str
    kebab_name: str
    file_path: str
    short_path: str
    chunk_name: str


def candidate_name(
    file_path: str | PurePath,
    root: str | PurePath,
    index_marker: str = "Index",
) -> str:
    """Raw component name of file_path inside scan root.

    Args:
        file_path: Discovered file, located under root
        root: Scan directory root
        index_marker: PascalCase stem that is replaced by the folder name

    Returns:
        Candidate name, possibly containing NAME_SEPARATOR

    Example:
        >>> candidate_name("/src/Foo/Bar/Baz.vue", "/src/Foo")
        'Bar/Baz'
    """
    file = PurePath(file_path)
    base = to_pascal_case(file.stem)
    parent_dir_name = to_pascal_case(file.parent.name)
    path_prefix = to_pascal_case(os.path.relpath(file.parent, root))

    if base in (index_marker, parent_dir_name):
        return path_prefix
    # Single trailing "s" only: Items/ItemCard stays ItemCard
    if not base.startswith(path_prefix.removesuffix("s")):
        return f"{path_prefix}{NAME_SEPARATOR}{base}"
    return base


def short_path(file_path: str, source_root: str | PurePath) -> str:
    """Strip source root, normalize to forward slashes, drop leading slash."""
    stripped = file_path.replace(str(source_root), "", 1)
    return stripped.replace("\\", "/").removeprefix("/")


def chunk_name(short: str, *, windows_paths: bool = False) -> str:
    """Chunk identifier: short path without extension.

    With windows_paths, separators are flattened to "_".
    """
    chunk = os.path.splitext(short)[0]
    if windows_paths:
        chunk = chunk.replace("/", "_")
    return chunk


def escape_file_path(file_path: str, *, windows_paths: bool = False) -> str:
    """Escape backslashes for embedding in generated source text."""
    if windows_paths:
        return file_path.replace("\\", "\\\\")
    return file_path


def name_file(
    file_path: str,
    root: Path,
    source_root: str | PurePath,
    *,
    index_marker: str = "Index",
    windows_paths: bool = False,
) -> ResolvedName:
    """Derive all name and path fields for one discovered file.

    Args:
        file_path: Absolute path of the discovered file
        root: Root of the scan directory that found it
        source_root: Project source root, stripped from short_path
        index_marker: PascalCase stem replaced by the folder name
        windows_paths: Escape file_path and flatten chunk_name

    Returns:
        ResolvedName with cased names and derived paths
    """
    name = candidate_name(file_path, root, index_marker)
    short = short_path(file_path, source_root)

    return ResolvedName(
        pascal_name=to_pascal_case(name),
        kebab_name=to_kebab_case(name),
        file_path=escape_file_path(file_path, windows_paths=windows_paths),
        short_path=short,
        chunk_name=chunk_name(short, windows_paths=windows_paths),
    )
