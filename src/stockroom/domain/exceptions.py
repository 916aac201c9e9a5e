"""Domain-level exceptions.

Every failure the Product can signal is a subclass of DomainException so
the CLI layer can catch them uniformly. Callers that need to react
differently branch on the subclass (or on ``kind``), never on the message.
"""

from __future__ import annotations


class DomainException(Exception):
    """Base class for all domain errors."""

    kind = "domain_error"
    retryable = False

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class InvalidArgumentError(DomainException):
    """Malformed input, independent of the product's current state."""

    kind = "invalid_argument"

    def __init__(self, field: str, message: str) -> None:
        super().__init__(message)
        self.field = field


class OutOfRangeError(DomainException):
    """A numeric input violates a static bound."""

    kind = "out_of_range"

    def __init__(self, field: str, message: str) -> None:
        super().__init__(message)
        self.field = field


class DomainRuleViolation(DomainException):
    """Well-formed input that conflicts with the product's current state.

    Unlike the argument errors this one may succeed later, once the state
    changes (e.g. after restocking).
    """

    kind = "domain_rule_violation"
    retryable = True

    def __init__(self, message: str, current_value: int, requested_value: int) -> None:
        super().__init__(message)
        self.current_value = current_value
        self.requested_value = requested_value
