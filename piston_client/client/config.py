#piston_client\client\config.py
from dataclasses import dataclass
from typing import Optional
from urllib.parse import urlparse

from piston_client.core.errors import ClientConfigError


DEFAULT_BASE_URL = "https://emkc.org/api/v2/piston"

LIMIT_FIELDS = (
    "compile_timeout",
    "run_timeout",
    "compile_cpu_time",
    "run_cpu_time",
    "compile_memory_limit",
    "run_memory_limit",
)


@dataclass(frozen=True)
class ClientConfig:
    base_url: str = DEFAULT_BASE_URL
    retries: int = 3

    # Limits passed through to the execution service (ms / bytes)
    compile_timeout: Optional[int] = None
    run_timeout: Optional[int] = None
    compile_cpu_time: Optional[int] = None
    run_cpu_time: Optional[int] = None
    compile_memory_limit: Optional[int] = None
    run_memory_limit: Optional[int] = None

    # Client-side transport timeout in seconds; None waits indefinitely
    request_timeout: Optional[float] = None

    def limits(self) -> dict:
        """Configured limits, unset ones omitted."""
        return {
            name: getattr(self, name)
            for name in LIMIT_FIELDS
            if getattr(self, name) is not None
        }


def validate_client_config(config: ClientConfig) -> None:
    # -------------------------
    # Endpoint
    # -------------------------
    if not config.base_url:
        raise ClientConfigError("base_url is required")

    parsed = urlparse(config.base_url)
    if parsed.scheme not in ("http", "https") or not parsed.netloc:
        raise ClientConfigError(f"base_url must be an http(s) URL, got {config.base_url!r}")

    # -------------------------
    # Retry
    # -------------------------
    if isinstance(config.retries, bool) or not isinstance(config.retries, int):
        raise ClientConfigError("retries must be an int")

    if config.retries < 1:
        raise ClientConfigError("retries must be at least 1")

    # -------------------------
    # Limits
    # -------------------------
    for name, value in config.limits().items():
        if isinstance(value, bool) or not isinstance(value, int):
            raise ClientConfigError(f"{name} must be an int")
        if value < 0:
            raise ClientConfigError(f"{name} must not be negative")

    if config.request_timeout is not None and config.request_timeout <= 0:
        raise ClientConfigError("request_timeout must be positive")
