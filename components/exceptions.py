"""
Component exceptions.

Missing content never raises: absent configuration, assets and metadata
degrade to defaults. These exceptions cover failures of the component
lifecycle itself.
"""


class ComponentError(Exception):
    """Base exception for all component errors."""

    pass


class ActivationError(ComponentError):
    """
    Exception raised when a component cannot be activated.

    Thrown when the dependency bundle handed to a component is unusable,
    e.g. the component has no backing resource, or when a host service
    fails during activation.

    Attributes:
        message: Error description
        resource_path: Path of the component resource, if known
        original_error: Original exception that caused this error
    """

    def __init__(
        self,
        message: str,
        resource_path: str | None = None,
        original_error: Exception = None,
    ):
        """
        Initialize ActivationError.

        Args:
            message: Human-readable error message
            resource_path: Path of the component resource being activated
            original_error: Original exception for context
        """
        super().__init__(message)
        self.message = message
        self.resource_path = resource_path
        self.original_error = original_error

    def __str__(self):
        if self.resource_path:
            return f"{self.resource_path}: {self.message}"
        return self.message
