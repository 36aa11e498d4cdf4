"""Base exceptions for componentscan domain."""


class ComponentScanError(Exception):
    """Root exception for all componentscan errors.

    All domain exceptions inherit from this.
    Allows catching all componentscan-specific errors.
    """
