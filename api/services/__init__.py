"""Service layer for business logic.

Services encapsulate validation and mapping, keeping routes thin and focused
on HTTP handling.

Layer hierarchy:
    Routes (HTTP) -> Services (Business Logic) -> Repositories (Database)

Services should:
- Validate every input before touching a repository
- Raise ValidationError / NotFoundError / ExternalServiceError
- Map ORM rows to response schemas explicitly

Services should NOT:
- Directly execute SQL queries (use repositories)
- Know about HTTP request/response details
- Commit (the request-scoped session does)
"""

from services.base import EntityService
from services.exceptions import (
    DomainError,
    ExternalServiceError,
    NotFoundError,
    ValidationError,
)

__all__ = [
    "DomainError",
    "EntityService",
    "ExternalServiceError",
    "NotFoundError",
    "ValidationError",
]
