"""Infrastructure layer: filesystem glob adapter and string casing."""

from componentscan.infrastructure.casing import (
    split_words,
    to_camel_case,
    to_kebab_case,
    to_pascal_case,
)
from componentscan.infrastructure.globbing import PathGlob

__all__ = [
    "PathGlob",
    "split_words",
    "to_camel_case",
    "to_kebab_case",
    "to_pascal_case",
]
