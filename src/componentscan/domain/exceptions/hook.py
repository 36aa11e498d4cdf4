"""Extension hook exceptions."""

from componentscan.domain.exceptions.base import ComponentScanError


class InvalidHookError(ComponentScanError, TypeError):
    """extend_component is not callable.

    Attributes:
        hook_type: Type of the rejected value
    """

    def __init__(self, hook_type: type) -> None:
        self.hook_type = hook_type
        super().__init__(f"extend_component must be callable, got {hook_type.__name__}")


class HookResultError(ComponentScanError, TypeError):
    """extend_component returned something other than Component or None.

    Attributes:
        file_path: File whose draft component was passed to the hook
        result_type: Type of the returned value
    """

    def __init__(self, file_path: str, result_type: type) -> None:
        if not file_path:
            raise ValueError("file_path must not be empty")

        self.file_path = file_path
        self.result_type = result_type
        super().__init__(
            f"extend_component for {file_path} must return Component or None, "
            f"got {result_type.__name__}"
        )
