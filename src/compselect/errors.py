"""Exception hierarchy for compselect.

User-code errors raised while registering a rule surface to the caller
unchanged. Notation errors never escape ``ComponentSelectionRules.module``
raw; they become the ``__cause__`` of an :class:`InvalidUserCodeError`.
"""

from __future__ import annotations


class CompselectError(Exception):
    """Base class for all compselect errors."""


class InvalidUserCodeError(CompselectError):
    """Raised when caller-supplied code (an action, a block, a notation) is unusable."""


class UnsupportedNotationError(CompselectError):
    """Raised when a notation cannot be converted to a module identifier.

    Attributes:
        notation: The offending value, kept for diagnostics.
    """

    def __init__(self, notation: object, reason: str | None = None) -> None:
        self.notation = notation
        self.reason = reason
        message = f"Cannot convert the provided notation to a module identifier: {notation}."
        if reason:
            message = f"{message} {reason}"
        super().__init__(message)


class RuleEvaluationError(InvalidUserCodeError):
    """Raised when a rule action fails while being applied to a candidate."""


class ConfigurationError(CompselectError):
    """Raised when settings or declarative rule files are invalid."""
