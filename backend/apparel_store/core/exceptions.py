"""
Domain Exceptions

Failure conditions raised by the service and repository layers. The error
handlers in core.error_handlers translate each of them into a problem
document with the matching HTTP status.
"""
from typing import Any, Dict, Optional


class ApparelStoreError(Exception):
    """Base exception for all application errors"""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        self.message = message
        self.details = details or {}
        super().__init__(message)


class NotFoundError(ApparelStoreError):
    """Raised when a target aggregate or nested resource does not exist"""
    pass


class ApparelOrderError(ApparelStoreError):
    """Raised when an apparel order request violates a business rule"""
    pass


class ConcurrencyConflictError(ApparelStoreError):
    """Raised when an update was based on a stale version of an entity"""

    def __init__(self, entity_name: str, entity_id: Any,
                 expected_version: Optional[int] = None,
                 current_version: Optional[int] = None):
        self.entity_name = entity_name
        self.entity_id = entity_id
        self.expected_version = expected_version
        self.current_version = current_version

        message = f"{entity_name} with id {entity_id} was modified concurrently"
        if expected_version is not None and current_version is not None:
            message += f" (expected version {expected_version}, current version {current_version})"

        details = {
            "entity": entity_name,
            "id": entity_id,
            "expected_version": expected_version,
            "current_version": current_version,
        }
        super().__init__(message, details)
