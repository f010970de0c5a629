"""
Service errors

Every failure the services report on purpose is a ServiceError carrying a
`kind` tag. The API layer switches on that tag to pick the HTTP status, so
callers never need to match on exception subclasses.
"""
from enum import Enum
from typing import Any, Dict, List, Optional


class ErrorKind(str, Enum):
    NOT_FOUND = "not_found"
    BUSINESS_RULE = "business_rule"
    VALIDATION = "validation"


class ServiceError(Exception):
    """
    Tagged error raised by the domain and service layers

    Attributes:
        kind: What went wrong (see ErrorKind)
        message: Human readable description, surfaced as `detail`
        errors: Field name -> list of messages (validation failures only)
        details: Extra context, e.g. the missing entity and key
    """

    def __init__(
        self,
        kind: ErrorKind,
        message: str,
        errors: Optional[Dict[str, List[str]]] = None,
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message)
        self.kind = kind
        self.message = message
        self.errors = errors
        self.details = details

    def __repr__(self) -> str:
        return f"ServiceError(kind={self.kind.value!r}, message={self.message!r})"


class NotFoundError(ServiceError):
    def __init__(self, entity: str, key: Any):
        super().__init__(
            ErrorKind.NOT_FOUND,
            f"{entity} with ID '{key}' not found.",
            details={"entityName": entity, "key": str(key)},
        )


class BusinessRuleError(ServiceError):
    def __init__(self, message: str):
        super().__init__(ErrorKind.BUSINESS_RULE, message)


class ValidationFailed(ServiceError):
    def __init__(self, message: str, errors: Optional[Dict[str, List[str]]] = None):
        super().__init__(ErrorKind.VALIDATION, message, errors=errors)
