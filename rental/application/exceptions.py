class BookingFlowError(RuntimeError):
    """Raised when a lifecycle action is not offered in the current state."""
    pass


class ListingNotFoundError(LookupError):
    """Raised when a car id is not in the listing source."""
    pass


class InsightUpstreamError(RuntimeError):
    """Raised when the insight provider fails (timeouts, network errors, service unavailable)."""
    pass


class InsightContractError(RuntimeError):
    """Raised when the insight adapter gets a response in the wrong format or missing data."""
    pass


class AuthError(RuntimeError):
    """Base class for auth gateway failures."""
    pass


class InvalidCredentialsError(AuthError):
    pass


class EmailAlreadyExistsError(AuthError):
    pass


class UserNotFoundError(AuthError):
    pass
