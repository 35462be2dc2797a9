# piston_client/core/errors.py

# -----------------------------
# Base Errors
# -----------------------------

class PistonError(Exception):
    """Base class for all Piston client errors."""
    pass


# -----------------------------
# Configuration Errors
# -----------------------------

class ClientConfigError(PistonError):
    """Invalid client construction parameters."""
    pass


# -----------------------------
# Transport Errors
# -----------------------------

class TransportError(PistonError):
    """The API answered with a status other than 200 or 429."""

    def __init__(self, status_code: int, body: str):
        self.status_code = status_code
        self.body = body
        super().__init__(f"Request failed with status code {status_code}, {body}")


class RateLimitExhaustedError(PistonError):
    """Every attempt was answered with 429 Too Many Requests."""

    def __init__(self, attempts: int):
        self.attempts = attempts
        super().__init__("Request failed due to rate limits after too many attempts")


class PistonConnectionError(PistonError):
    """No response was received from the API."""
    pass


# -----------------------------
# Decoding Errors
# -----------------------------

class DecodeError(PistonError):
    """Response payload is not valid JSON or has an unexpected shape."""
    pass
