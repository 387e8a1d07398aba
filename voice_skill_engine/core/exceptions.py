"""Core exception types shared across layers."""


class DispatchError(RuntimeError):
    """Base error for request dispatch failures."""


class HandlerNotFoundError(DispatchError):
    """Raised when no registered handler accepts the incoming request."""


__all__ = [
    "DispatchError",
    "HandlerNotFoundError",
]
