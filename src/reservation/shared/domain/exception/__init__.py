from .exceptions import (
    BusinessRuleViolationException,
    DomainException,
    DuplicateResourceException,
    FieldError,
    InvalidTransitionException,
    PersistenceException,
    ResourceNotFoundException,
    ValidationException,
)

__all__ = [
    "BusinessRuleViolationException",
    "DomainException",
    "DuplicateResourceException",
    "FieldError",
    "InvalidTransitionException",
    "PersistenceException",
    "ResourceNotFoundException",
    "ValidationException",
]
