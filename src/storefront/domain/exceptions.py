"""Domain-level exceptions.

Every failure in the storefront flow is a subclass of DomainException so
the CLI layer can catch them uniformly and display a notification. None of
them is fatal: the operation that raised can always be retried.
"""

from __future__ import annotations


class DomainException(Exception):
    """Base class for all domain errors."""


class ValidationError(DomainException):
    """Local input was rejected before any remote call was made."""


class FormValidationError(ValidationError):
    """A form-shaped record failed validation on one or more fields."""

    def __init__(self, errors: dict[str, str]) -> None:
        self.errors = dict(errors)
        summary = "; ".join(f"{name}: {message}" for name, message in self.errors.items())
        super().__init__(summary or "Invalid form")


class EntityNotFoundError(DomainException):
    """A requested product or order does not exist."""


class GatewayError(DomainException):
    """The backend rejected a call or could not be reached."""


class AccessDeniedError(DomainException):
    """The caller lacks the role required for an operation."""
