"""Domain exceptions for the vendor order console."""


class DomainError(Exception):
    """Base class for every domain error."""

    def __init__(self, message: str, code: str | None = None):
        self.message = message
        self.code = code or self.__class__.__name__
        super().__init__(self.message)


# === Form errors ===


class ValidationError(DomainError):
    """A required form field is missing or invalid. Never reaches the network."""

    def __init__(self, field: str, message: str):
        super().__init__(message=message, code="VALIDATION_ERROR")
        self.field = field


class ReadOnlyLocationError(DomainError):
    """The round-trip return slot is derived from the pickup and cannot be edited."""

    def __init__(self, position: int):
        super().__init__(
            message="Return location is automatically set to pickup location for round trip",
            code="READ_ONLY_LOCATION",
        )
        self.position = position


class ReorderNotAllowedError(DomainError):
    """Stops can only be reordered for round trips and multi-city trips."""

    def __init__(self, trip_type: str):
        super().__init__(
            message=f"Locations cannot be reordered for {trip_type} trips",
            code="REORDER_NOT_ALLOWED",
        )
        self.trip_type = trip_type


class InvalidTransitionError(DomainError):
    """The order workflow does not allow this action in its current state."""

    def __init__(self, current_state: str, action: str):
        super().__init__(
            message=f"Cannot {action} while order workflow is in state '{current_state}'",
            code="INVALID_TRANSITION",
        )
        self.current_state = current_state
        self.action = action


class OrderNotCancellableError(DomainError):
    """Only pending orders can be cancelled by the vendor."""

    def __init__(self, order_id: int | str, trip_status: str):
        super().__init__(
            message=f"Order {order_id} cannot be cancelled: status is '{trip_status}'",
            code="ORDER_NOT_CANCELLABLE",
        )
        self.order_id = order_id
        self.trip_status = trip_status


class FormSessionNotFoundError(DomainError):
    def __init__(self, session_id: str):
        super().__init__(
            message=f"Order form session not found: {session_id}",
            code="FORM_SESSION_NOT_FOUND",
        )
        self.session_id = session_id


# === Backend API errors ===


class ApiError(DomainError):
    """A call to the backend failed. Subclasses carry the user-facing message."""

    default_message = "Something went wrong. Please try again."

    def __init__(
        self,
        message: str | None = None,
        code: str | None = None,
        status_code: int | None = None,
        detail: str | None = None,
    ):
        super().__init__(message=message or self.default_message, code=code)
        self.status_code = status_code
        self.detail = detail
        self._generic = False

    # Classified failures (auth, server, timeout, network) keep their fixed message.
    detail_first = False

    def user_message(self, fallback: str | None = None, prefer_detail: bool = False) -> str:
        """Message to show the user.

        Server detail wins for unclassified failures, or when ``prefer_detail``
        is set. Otherwise this error's message, then the caller fallback.
        """
        if self.detail and (prefer_detail or self.detail_first):
            return self.detail
        if not self._generic or not fallback:
            return self.message
        return fallback


class AuthError(ApiError):
    default_message = "Authentication failed. Please login again."

    def __init__(self, detail: str | None = None):
        super().__init__(code="AUTH_FAILED", status_code=401, detail=detail)


class ServerError(ApiError):
    default_message = "Server error. Please try again later."

    def __init__(self, status_code: int = 500, detail: str | None = None):
        super().__init__(code="SERVER_ERROR", status_code=status_code, detail=detail)


class RequestTimeoutError(ApiError):
    default_message = "Request timeout. Please check your connection."

    def __init__(self, detail: str | None = None):
        super().__init__(code="REQUEST_TIMEOUT", detail=detail)


class NetworkError(ApiError):
    default_message = "Network error. Please check your internet connection."

    def __init__(self, detail: str | None = None):
        super().__init__(code="NETWORK_ERROR", detail=detail)


class UnknownApiError(ApiError):
    """Any other failure: the message is the server detail or the raw error text."""

    detail_first = True

    def __init__(
        self,
        message: str | None = None,
        status_code: int | None = None,
        detail: str | None = None,
    ):
        super().__init__(
            message=message,
            code="UNKNOWN_API_ERROR",
            status_code=status_code,
            detail=detail,
        )
        self._generic = message is None
