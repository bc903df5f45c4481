"""Domain layer errors."""


class DomainError(Exception):
    """Base domain error."""

    pass


class ValidationError(DomainError):
    """Domain validation error."""

    pass


class NotFoundError(DomainError):
    """Raised when a requested resource is not found."""

    def __init__(self, resource: str, identifier: str):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} not found: {identifier}")


class NotAuthorizedError(DomainError):
    """Raised when a user attempts to act on a resource they don't own."""

    def __init__(self, resource: str, resource_id: str, user_id: str):
        super().__init__(
            f"User {user_id} is not authorized to modify {resource} {resource_id}"
        )


class UnauthenticatedError(DomainError):
    """Raised when an operation requires a signed-in user and there is none."""

    def __init__(self, action: str):
        self.action = action
        super().__init__(f"You must log in to {action}")


class AlreadyVotedError(DomainError):
    """Raised when a user upvotes a work they have already voted for."""

    def __init__(self, user_id: str, work_id: str):
        self.user_id = user_id
        self.work_id = work_id
        super().__init__(f"User {user_id} has already voted for work {work_id}")
