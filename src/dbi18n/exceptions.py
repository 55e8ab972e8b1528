"""Exception hierarchy for dbi18n.

All library errors inherit from I18nException so callers can catch the
whole family at once or target a single condition.

Categories:
- Argument errors: a lookup was called with an unusable key or arguments
- Configuration errors: a collaborator is missing or misconfigured

A key without a matching record is never an error: lookups echo the key.
"""

from __future__ import annotations


class I18nException(Exception):
    """Base exception for all dbi18n errors.

    Args:
        message: Human-readable error description.
        code: Machine-readable error code (e.g. "I18N_INVALID_KEY").
        context: Arbitrary key-value pairs for error context and debugging.
    """

    def __init__(
        self,
        message: str,
        code: str | None = None,
        context: dict | None = None,
    ) -> None:
        super().__init__(message)
        self.code = code
        self.context: dict = context if context is not None else {}


# =============================================================================
# Argument Exceptions
# =============================================================================


class InvalidKeyException(I18nException, ValueError):
    """The lookup key is None, empty or whitespace-only."""

    def __init__(self, key: object) -> None:
        super().__init__(
            "Localization key must be a non-empty string",
            code="I18N_INVALID_KEY",
            context={"key": key},
        )


class MessageFormatException(I18nException, ValueError):
    """A resolved text could not be formatted with the given arguments."""


# =============================================================================
# Configuration Exceptions
# =============================================================================


class MissingCollaboratorException(I18nException):
    """A required collaborator (such as the caller context) was not provided."""


class ResourceScopeException(I18nException):
    """No resource was bound and the caller context offers no resource hint."""


class MisconfiguredStoreException(I18nException):
    """The record store cannot expose a collection of localization records."""
