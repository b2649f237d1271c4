"""Error types raised by the outbound clients and the component host."""


class TransportFailure(RuntimeError):
    """An outbound HTTP call failed: non-2xx status, network error or unreadable body."""

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.status_code = status_code

    @property
    def is_client_error(self) -> bool:
        return self.status_code is not None and 400 <= self.status_code < 500

    @property
    def is_server_error(self) -> bool:
        return self.status_code is not None and 500 <= self.status_code < 600


class TokenRequestError(TransportFailure):
    """Access token could not be obtained from the identity provider."""


class RecommendationRequestError(TransportFailure):
    """Decision service call did not return a usable response."""


class ComponentError(RuntimeError):
    """A component or its host broke the invocation contract."""
