"""JSON reporter for code generators.

Stdlib-only reporter for JSON output.
"""

from __future__ import annotations

import json
import sys
from typing import TYPE_CHECKING, TextIO

from componentscan.application.reporters._base import BaseReporter

if TYPE_CHECKING:
    from componentscan.domain.model import NamingCollision, ResolutionResult


class JSONReporter(BaseReporter):
    """JSON reporter for machine-readable output.

    Components are written as camelCase records, in emission order,
    so a generator can emit one registration per entry.
    """

    def __init__(
        self,
        output: TextIO | None = None,
        *,
        indent: int | None = 2,
    ) -> None:
        """Initialize reporter.

        Args:
            output: Output stream (default: sys.stdout)
            indent: JSON indentation (default: 2, None for compact)
        """
        self._output = output if output is not None else sys.stdout
        self._indent = indent

    def report(self, result: ResolutionResult) -> None:
        """Write resolution result as JSON."""
        json.dump(self.result_to_dict(result), self._output, indent=self._indent)
        self._output.write("\n")

    def result_to_dict(self, result: ResolutionResult) -> dict[str, object]:
        """Convert ResolutionResult to JSON-serializable dict."""
        return {
            "summary": {
                "component_count": len(result.eager),
                "record_count": len(result.components),
                "collision_count": len(result.collisions),
            },
            "components": [c.to_dict() for c in result.components],
            "collisions": [self._collision_to_dict(c) for c in result.collisions],
        }

    def _collision_to_dict(self, collision: NamingCollision) -> dict[str, str]:
        return {
            "name": collision.name,
            "keptPath": collision.kept_path,
            "rejectedPath": collision.rejected_path,
            "directory": str(collision.directory),
        }
