"""
Custom exceptions for repokit.

Only a handful of conditions are errors here. A missing entity is normally
reported as absence (None, an empty list, a silent no-op), never raised.
"""

from typing import Any, Dict, Optional


class RepoKitException(Exception):
    """Base exception for all repokit errors."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        self.message = message
        self.details = details or {}
        super().__init__(self.message)


class InvalidArgumentException(RepoKitException, ValueError):
    """
    Raised when an argument cannot be used.

    The repository raises it when save() cannot establish an identifier.
    Generators and query objects raise it for out-of-range input.
    """

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message=message, details=details)


class EntityNotFoundException(RepoKitException, LookupError):
    """Raised when a reference is requested for an identifier that is not stored."""

    def __init__(self, entity_id: Any, entity_type: Optional[str] = None):
        message = f"Entity not found: {entity_id}"
        if entity_type:
            message = f"{entity_type} not found: {entity_id}"
        super().__init__(
            message=message, details={"entity_id": entity_id, "entity_type": entity_type}
        )
