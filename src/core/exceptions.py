"""Custom exceptions shared by the service, domain and API layers."""


class GameTestingError(Exception):
    """Top-level exception for anything raised on purpose by this application."""


class NotFoundError(GameTestingError):
    """A publisher, game or tester ID does not resolve to a stored record."""


class OwnershipMismatchError(GameTestingError):
    """A game was addressed under a publisher that does not own it."""


class InvalidRequestError(GameTestingError, ValueError):
    """Request data rejected at the API boundary (pydantic wraps it into a ValidationError)."""
