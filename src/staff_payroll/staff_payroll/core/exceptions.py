from __future__ import annotations

from typing import Iterable, Optional


class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules.

    ``errors`` lists every violated constraint, not just the first one.
    """

    def __init__(self, message: str, errors: Optional[Iterable[str]] = None):
        self.errors = list(errors) if errors else [message]
        super().__init__(message)


class NotFoundError(DomainError):
    """Raised when a referenced entity does not exist."""

    def __init__(self, entity: str, entity_id: object):
        self.entity = entity
        self.entity_id = entity_id
        super().__init__(f"{entity} '{entity_id}' not found")
