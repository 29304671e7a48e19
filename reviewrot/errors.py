"""Exception types shared across ReviewRot."""


class ReviewRotError(Exception):
    """Base exception for ReviewRot errors."""
    pass


class InputValidationError(ReviewRotError):
    """A request is missing required fields."""
    pass


class NotFoundError(ReviewRotError):
    """Business lookup yielded nothing."""

    def __init__(self, business_name: str):
        super().__init__(f"Business not found: {business_name}")
        self.business_name = business_name


class ProviderError(ReviewRotError):
    """A business data provider call failed."""
    pass


class AuthenticationError(ProviderError):
    """Invalid or missing provider API key."""
    pass


class RateLimitError(ProviderError):
    """Provider rate limit exceeded."""
    pass


class SinkError(ReviewRotError):
    """Delivering a lead to a store, webhook or notifier failed."""

    def __init__(self, sink: str, message: str):
        super().__init__(f"{sink}: {message}")
        self.sink = sink
