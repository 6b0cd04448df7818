"""
Error taxonomy shared by every kubecreate module.

All errors are terminal for the current invocation. Library code raises
them unchanged; only the CLI converts them into user-facing messages.
"""

from typing import Any, List, Optional, Sequence


class KubeCreateError(Exception):
    """Base class for all kubecreate errors."""


class ValidationError(KubeCreateError, ValueError):
    """One or more required parameters are missing."""

    def __init__(self, missing: Sequence[str]):
        self.missing: List[str] = list(missing)
        super().__init__("\n".join(f"Parameter: {name} is required" for name in self.missing))


class ParameterTypeError(KubeCreateError, TypeError):
    """A parameter value has the wrong shape for a generator."""

    def __init__(self, key: str, value: Any, expected: str = "string"):
        self.key = key
        self.value = value
        super().__init__(f"expected {expected}, saw {value!r} for '{key}'")


class NotFoundError(KubeCreateError, LookupError):
    """A named generator or a remote object does not exist."""

    def __init__(self, message: str, status: Optional[Any] = None):
        self.status = status
        super().__init__(message)


class EncodingError(KubeCreateError):
    """Serialization of an object, annotation or query parameters failed."""


class TransportError(KubeCreateError):
    """
    The REST call failed.

    Either the network failed (the httpx exception is chained as __cause__)
    or the server answered with a non-success status.
    """

    def __init__(self, message: str, status_code: Optional[int] = None, status: Optional[Any] = None):
        self.status_code = status_code
        self.status = status
        super().__init__(message)


class UsageError(KubeCreateError):
    """The command was invoked with missing positional arguments."""


__all__ = [
    "KubeCreateError",
    "ValidationError",
    "ParameterTypeError",
    "NotFoundError",
    "EncodingError",
    "TransportError",
    "UsageError",
]
