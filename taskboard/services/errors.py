"""Domain errors raised by services; taskboard.main maps them to HTTP responses."""


class ServiceError(Exception):
    """Base class for errors surfaced to API callers as status code + message."""

    status_code: int = 500

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class ValidationError(ServiceError):
    """Malformed or mismatched input that passed schema validation."""

    status_code = 400


class ConflictError(ServiceError):
    """A unique key (email, tag name) is already taken."""

    status_code = 409


class AuthenticationError(ServiceError):
    """Bad credentials, or a missing/invalid bearer token."""

    status_code = 401


class AuthorizationError(ServiceError):
    """Authenticated, but not allowed to perform the operation."""

    status_code = 403


class InvalidActivationCodeError(AuthorizationError):
    """Admin self-registration attempted without the correct activation code."""

    status_code = 401


class NotFoundError(ServiceError):
    """Referenced entity does not exist."""

    status_code = 404
