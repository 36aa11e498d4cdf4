"""Domain exceptions."""

from componentscan.domain.exceptions.base import ComponentScanError
from componentscan.domain.exceptions.hook import HookResultError, InvalidHookError

__all__ = [
    "ComponentScanError",
    "HookResultError",
    "InvalidHookError",
]
