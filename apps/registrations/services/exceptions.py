"""
Domain-specific exceptions for registrations app.

These exceptions represent business rule violations and should be
caught in views and converted to appropriate HTTP responses.
"""


class RegistrationsServiceError(Exception):
    """Base exception for all registrations service errors."""
    pass


class DuplicateRegistrationError(RegistrationsServiceError):
    """Raised when a person with the same characteristics is already registered."""
    pass


class UnknownGroupError(RegistrationsServiceError):
    """Raised when a group name is not part of the roster."""
    pass


class RegistrationError(RegistrationsServiceError):
    """Raised when a registration cannot be stored."""
    pass
