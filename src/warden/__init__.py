"""Warden: deterministic resource lifecycles with chained errors."""

from warden.errors import (
    ErrorKind,
    InvalidArgumentError,
    ResourceCloseError,
    ResourceClosedError,
    ResourceError,
    ResourceFaultyError,
)
from warden.resources.managed import ManagedResource, scoped
from warden.utils.arithmetic import divide

__version__ = "0.1.0"

__all__ = [
    "ErrorKind",
    "InvalidArgumentError",
    "ManagedResource",
    "ResourceCloseError",
    "ResourceClosedError",
    "ResourceError",
    "ResourceFaultyError",
    "divide",
    "scoped",
]
