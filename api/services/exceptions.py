"""Domain exceptions raised by the service layer.

Routes never catch these; app-level handlers in ``main`` map them to
HTTP responses (400, 404 and 500 respectively).
"""


class DomainError(Exception):
    """Base class for every error the service layer raises on purpose."""

    pass


class ValidationError(DomainError):
    """Raised when an input violates a business rule."""

    def __init__(self, field: str, message: str):
        self.field = field
        self.message = message
        super().__init__(message)


class NotFoundError(DomainError):
    """Raised when the entity with the given id does not exist."""

    def __init__(self, entity: str, entity_id: int | str):
        self.entity = entity
        self.entity_id = entity_id
        self.message = f"{entity} with id {entity_id} not found"
        super().__init__(self.message)


class ExternalServiceError(DomainError):
    """Raised when a subsystem (usually the database) fails unexpectedly.

    ``message`` is safe to show to clients; ``cause`` is kept for logs only.
    """

    def __init__(
        self, subsystem: str, message: str, cause: BaseException | None = None
    ):
        self.subsystem = subsystem
        self.message = message
        self.cause = cause
        super().__init__(message)
