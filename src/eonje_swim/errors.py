from __future__ import annotations


class EonjeSwimError(Exception):
    """Base class for application errors surfaced to the user."""


class CalendarNotFoundError(EonjeSwimError):
    """Raised when a token does not resolve to a stored calendar."""

    def __init__(self, token: str) -> None:
        super().__init__(f"Calendar '{token}' was not found.")
        self.token = token


class RemoteStoreError(EonjeSwimError):
    """Raised when a call to the hosted backend fails."""


class InvalidLinkError(EonjeSwimError):
    """Raised when a pasted share link does not carry a usable token."""


class InvalidInputError(EonjeSwimError):
    """Raised when an argument fails validation before reaching the backend."""
