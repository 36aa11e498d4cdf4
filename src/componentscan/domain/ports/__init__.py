"""Ports: interfaces implemented by infrastructure adapters."""

from componentscan.domain.ports.glob import GlobPort

__all__ = ["GlobPort"]
