"""Custom exceptions for weekplan."""


class WeekplanError(Exception):
    """Base exception for all weekplan errors."""

    pass


class ConfigurationError(WeekplanError):
    """Raised when a configuration file is structurally invalid."""

    pass


class InvalidStartStateError(WeekplanError):
    """Raised when planning is requested without a start state."""

    pass


class ValidationError(WeekplanError):
    """Raised when task-set validation fails."""

    pass


class CircularDependencyError(ValidationError):
    """Raised when a circular dependency is detected."""

    pass


class MissingReferenceError(ValidationError):
    """Raised when a task depends on an ID that does not exist."""

    pass


class IdealWindowError(ValidationError):
    """Raised when a task is longer than every one of its ideal windows."""

    pass


class ParseError(WeekplanError):
    """Raised when a task file cannot be read or parsed."""

    pass
