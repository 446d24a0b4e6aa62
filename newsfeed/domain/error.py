"""Domain layer errors.

NotFoundError, InvalidArgumentError and InvalidStateError are caller errors:
they carry a message fit for the UI and are never retried. InconsistentError
signals broken data upstream and is reported as a generic failure.
"""


class DomainError(Exception):
    """Base domain error."""

    pass


class NotFoundError(DomainError):
    """Raised when a requested resource is not found."""

    def __init__(self, resource: str, identifier: object):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} not found: {identifier}")


class InvalidArgumentError(DomainError):
    """Raised when an argument has a value the operation doesn't accept."""

    pass


class InvalidStateError(DomainError):
    """Raised when a requested transition would be a no-op."""

    pass


class InconsistentError(DomainError):
    """Raised when stored data breaks an invariant (e.g. a dangling parent)."""

    pass


class UnauthenticatedError(DomainError):
    """Raised when an operation needs a user and there is none."""

    def __init__(self, message: str = "You must be authenticated to do this."):
        super().__init__(message)


class ForbiddenError(DomainError):
    """Raised when the user may not perform the operation."""

    pass


class NotAuthorizedError(ForbiddenError):
    """Raised when a user attempts to change content they don't own."""

    def __init__(self, resource: str, resource_id: object, user_id: object):
        super().__init__(
            f"User {user_id} is not authorized to modify {resource} {resource_id}"
        )


class ContentDeletedError(InvalidStateError):
    """Raised when attempting to change removed content."""

    def __init__(self, resource: str, resource_id: object):
        super().__init__(f"Cannot modify deleted {resource} {resource_id}")
