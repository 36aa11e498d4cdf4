"""Base reporter class for resolution output."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from componentscan.domain.model import ResolutionResult


class BaseReporter(ABC):
    """Base class for reporters.

    Concrete reporters must implement the report() method.

    Example:
        class CountReporter(BaseReporter):
            def report(self, result: ResolutionResult) -> None:
                print(f"Components: {len(result.eager)}")
    """

    @abstractmethod
    def report(self, result: ResolutionResult) -> None:
        """Report resolution result.

        Implementation decides output format and destination.

        Args:
            result: Components and collisions of one run
        """
