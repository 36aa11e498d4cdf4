"""Result of one resolution run."""

from dataclasses import dataclass

from componentscan.domain.model.component import Component
from componentscan.domain.model.naming_collision import NamingCollision


@dataclass(frozen=True, slots=True)
class ResolutionResult:
    """Components in emission order plus the collisions met on the way.

    Attributes:
        components: Eager/lazy pairs, directory-then-discovery order
        collisions: Dropped files, in detection order
    """

    components: tuple[Component, ...]
    collisions: tuple[NamingCollision, ...] = ()

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if len(self.components) % 2:
            raise ValueError(
                f"components must come in eager/lazy pairs, got {len(self.components)} records"
            )

    @property
    def eager(self) -> tuple[Component, ...]:
        """Eager records only."""
        return tuple(c for c in self.components if not c.async_)

    @property
    def lazy(self) -> tuple[Component, ...]:
        """Lazy records only."""
        return tuple(c for c in self.components if c.async_)

    @property
    def has_collisions(self) -> bool:
        """Check if any file was dropped."""
        return bool(self.collisions)
