"""Exceptions raised by prommongo."""


class PrommongoException(Exception):
    """Base class for all prommongo errors."""


class MetricsRegistrationError(PrommongoException):
    """A collector could not be registered with a CollectorRegistry.

    Raised when a metric family name collides with one that is already
    registered.  The registry's original error is chained as ``__cause__``.
    """

    def __init__(self, collector: str, reason: str) -> None:
        self.collector = collector
        self.reason = reason
        super().__init__(f"Failed to register {collector}: {reason}")
