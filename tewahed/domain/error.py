"""Domain layer errors."""


class DomainError(Exception):
    """Base domain error."""

    pass


class ValidationError(DomainError):
    """Domain validation error.

    Raised for malformed input the caller can correct, such as content
    length, a missing discussion root or a reply that is nested too deep.
    """

    pass


class NotFoundError(DomainError):
    """Raised when a requested resource is not found."""

    def __init__(self, resource: str, identifier: str):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} not found: {identifier}")


class ForbiddenError(DomainError):
    """Raised when the moderation policy denies an operation."""

    def __init__(self, message: str):
        super().__init__(message)


class UnauthenticatedError(DomainError):
    """Raised when an operation requiring a viewer is called without one."""

    def __init__(self, action: str):
        self.action = action
        super().__init__(f"Authentication required to {action}")


class StoreError(DomainError):
    """Opaque persistence failure.

    The original exception is chained as ``__cause__``; the message is
    safe to show to clients.
    """

    def __init__(self, operation: str):
        self.operation = operation
        super().__init__(f"Failed to {operation}")
