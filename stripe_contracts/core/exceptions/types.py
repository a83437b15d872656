from httpx import codes as status


class AppException(Exception):
    """Base application exception."""

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        details: dict | None = None,
    ):
        self.message = message
        self.status_code = status_code or status.INTERNAL_SERVER_ERROR
        self.details = details
        super().__init__(message)


class StripeAPIException(AppException):
    """Exception raised for Stripe API errors."""

    def __init__(
        self,
        message: str = "A Stripe API error occurred.",
        status_code: int = status.BAD_GATEWAY,
        stripe_code: str | None = None,
        error_type: str = "api_error",
        param: str | None = None,
        request_id: str | None = None,
        details: dict | None = None,
    ):
        super().__init__(message, status_code, details)
        self.stripe_code = stripe_code
        self.error_type = error_type
        self.param = param
        self.request_id = request_id


class StripeAuthenticationException(StripeAPIException):
    """Exception raised when Stripe rejects the API key."""

    def __init__(
        self,
        message: str = "Invalid API key provided.",
        stripe_code: str | None = None,
        request_id: str | None = None,
        details: dict | None = None,
    ):
        super().__init__(
            message,
            status.UNAUTHORIZED,
            stripe_code=stripe_code,
            error_type="authentication_error",
            request_id=request_id,
            details=details,
        )


class StripeNotFoundException(StripeAPIException):
    """Exception raised when the requested Stripe object does not exist."""

    def __init__(
        self,
        message: str = "No such object.",
        stripe_code: str | None = None,
        param: str | None = None,
        request_id: str | None = None,
        details: dict | None = None,
    ):
        super().__init__(
            message,
            status.NOT_FOUND,
            stripe_code=stripe_code,
            error_type="invalid_request_error",
            param=param,
            request_id=request_id,
            details=details,
        )


class StripeCardException(AppException):
    """Exception raised for Stripe card errors (declined, invalid, etc.)."""

    def __init__(
        self,
        message: str = "Card was declined.",
        stripe_code: str | None = None,
        decline_code: str | None = None,
        param: str | None = None,
        request_id: str | None = None,
        details: dict | None = None,
    ):
        super().__init__(message, status.PAYMENT_REQUIRED, details)
        self.stripe_code = stripe_code
        self.decline_code = decline_code
        self.param = param
        self.request_id = request_id


class IdempotencyException(AppException):
    """Exception raised for Stripe idempotency errors."""

    def __init__(
        self,
        message: str = "Idempotency key was used with different parameters.",
        request_id: str | None = None,
        details: dict | None = None,
    ):
        super().__init__(message, status.CONFLICT, details)
        self.request_id = request_id


class RateLimitException(AppException):
    """Exception raised when Stripe rate limit is exceeded."""

    def __init__(
        self,
        message: str = "Stripe rate limit exceeded. Please try again later.",
        details: dict | None = None,
    ):
        super().__init__(message, status.TOO_MANY_REQUESTS, details)


class StripeConnectionException(AppException):
    """Exception raised when Stripe cannot be reached."""

    def __init__(
        self,
        message: str = "Unable to connect to Stripe. Please try again later.",
        details: dict | None = None,
    ):
        super().__init__(message, status.SERVICE_UNAVAILABLE, details)


__all__ = [
    "AppException",
    "StripeAPIException",
    "StripeAuthenticationException",
    "StripeNotFoundException",
    "StripeCardException",
    "IdempotencyException",
    "RateLimitException",
    "StripeConnectionException",
]
