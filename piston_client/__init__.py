"""Client for the Piston code execution API."""

from .version import __version__
from .client.client import PistonClient
from .client.config import DEFAULT_BASE_URL, ClientConfig
from .core.errors import (
    PistonError,
    ClientConfigError,
    TransportError,
    RateLimitExhaustedError,
    PistonConnectionError,
    DecodeError,
)
from .core.models import Runtime, ExecutionStepDetails, ExecutionResults, StagedFile


__all__ = [
    "__version__",
    "PistonClient",
    "DEFAULT_BASE_URL",
    "ClientConfig",
    "PistonError",
    "ClientConfigError",
    "TransportError",
    "RateLimitExhaustedError",
    "PistonConnectionError",
    "DecodeError",
    "Runtime",
    "ExecutionStepDetails",
    "ExecutionResults",
    "StagedFile",
]
