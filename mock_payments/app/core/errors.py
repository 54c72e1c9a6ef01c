class PaymentValidationError(ValueError):
    """Raised when a payment request fails one of the input checks."""


class AuthenticationRequiredError(Exception):
    """Raised when the Authorization header is missing or not valid Basic auth."""


class InvalidCredentialsError(Exception):
    """Raised when Basic auth credentials do not match the configured pair."""


class StorageUnavailableError(Exception):
    """Raised when the transaction store cannot be written or read."""
