"""Value types returned by the Piston API."""

from dataclasses import dataclass, field
from typing import Optional, Tuple


@dataclass(frozen=True)
class Runtime:
    """A language/version pair the execution service can run code in."""

    language: str
    version: str
    aliases: Tuple[str, ...] = field(default_factory=tuple)
    runtime: Optional[str] = None


@dataclass(frozen=True)
class ExecutionStepDetails:
    """Outcome of one compile or run phase."""

    stdout: str
    stderr: str
    output: str

    # Exit status
    code: Optional[int] = None
    signal: Optional[str] = None
    message: Optional[str] = None
    status: Optional[str] = None

    # Resource usage
    cpu_time: Optional[int] = None  # ms
    wall_time: Optional[int] = None  # ms
    memory: Optional[int] = None  # bytes

    @property
    def succeeded(self) -> bool:
        """True when the phase exited with code 0 and was not signalled."""
        return self.code == 0 and self.signal is None


@dataclass(frozen=True)
class ExecutionResults:
    """Both phases of one execution request."""

    language: str
    version: str
    run: ExecutionStepDetails
    compile: Optional[ExecutionStepDetails] = None


@dataclass(frozen=True)
class StagedFile:
    """Source file queued for the next execution request."""

    content: str
    name: Optional[str] = None
    encoding: Optional[str] = None
