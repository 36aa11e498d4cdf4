"""Component naming from file paths."""

from componentscan.application.naming.path_namer import (
    ResolvedName,
    candidate_name,
    chunk_name,
    escape_file_path,
    name_file,
    short_path,
)

__all__ = [
    "ResolvedName",
    "candidate_name",
    "chunk_name",
    "escape_file_path",
    "name_file",
    "short_path",
]
