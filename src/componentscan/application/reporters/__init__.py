"""Reporters for resolution results.

JSONReporter feeds code generators, ConsoleReporter renders rich tables.
"""

from componentscan.application.reporters._base import BaseReporter
from componentscan.application.reporters.console import ConsoleConfig, ConsoleReporter
from componentscan.application.reporters.json_reporter import JSONReporter

__all__ = [
    "BaseReporter",
    "ConsoleConfig",
    "ConsoleReporter",
    "JSONReporter",
]
