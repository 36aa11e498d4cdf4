"""Scan directory configuration entity."""

from __future__ import annotations

from collections.abc import Awaitable, Callable, Sequence
from dataclasses import dataclass, field
from pathlib import Path
from typing import Literal, TypeAlias

from componentscan.domain.exceptions import InvalidHookError
from componentscan.domain.model.component import Component

# Hook may be sync or async; None keeps the draft component
ExtendComponent: TypeAlias = Callable[[Component], Component | None | Awaitable[Component | None]]

GlobalMode: TypeAlias = bool | Literal["dev"]


@dataclass(frozen=True, slots=True)
class ScanDirectory:
    """One configured root plus the glob rules that define its components.

    Attributes:
        path: Root directory to scan
        pattern: Glob pattern(s), relative to path. A single string is
            normalized to a one-element tuple. Entries starting with "!"
            act as extra ignore globs.
        ignore: Exclusion globs, relative to path
        prefix: Name prefix applied to every component found here
        global_: True/False, or "dev" for development-only global registration
        extend_component: Optional hook replacing the draft component
    """

    path: Path
    pattern: str | Sequence[str]
    ignore: Sequence[str] = ()
    prefix: str | None = None
    global_: GlobalMode = False
    extend_component: ExtendComponent | None = field(default=None, compare=False)

    def __post_init__(self) -> None:
        """Validate and normalize. FAIL-FIRST."""
        if self.path is None or self.path == "":
            raise ValueError("path must not be empty")
        object.__setattr__(self, "path", Path(self.path))

        if isinstance(self.pattern, str):
            object.__setattr__(self, "pattern", (self.pattern,))
        else:
            object.__setattr__(self, "pattern", tuple(self.pattern))
        if not self.pattern or not all(self.pattern):
            raise ValueError("pattern must contain at least one non-empty glob")
        if not self.include_patterns:
            raise ValueError(f"pattern must contain a non-negated glob, got {self.pattern}")

        if isinstance(self.ignore, str):
            raise TypeError("ignore must be a sequence of globs, not str")
        object.__setattr__(self, "ignore", tuple(self.ignore))

        if self.global_ not in (True, False, "dev"):
            raise ValueError(f"global_ must be True, False or 'dev', got {self.global_!r}")

        if self.extend_component is not None and not callable(self.extend_component):
            raise InvalidHookError(type(self.extend_component))

    @property
    def depth(self) -> int:
        """Number of non-empty path segments, used for scan ordering."""
        return len([part for part in str(self.path).replace("\\", "/").split("/") if part])

    @property
    def dev_only(self) -> bool:
        """Global registration applies only in development mode."""
        return self.global_ == "dev"

    @property
    def include_patterns(self) -> tuple[str, ...]:
        """Positive glob patterns."""
        return tuple(p for p in self.pattern if not p.startswith("!"))

    @property
    def exclude_patterns(self) -> tuple[str, ...]:
        """Ignore globs plus negated entries of pattern."""
        negated = tuple(p[1:] for p in self.pattern if p.startswith("!") and len(p) > 1)
        return (*self.ignore, *negated)
