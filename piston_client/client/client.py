# piston_client/client/client.py
"""Piston API client."""

import logging
from typing import List, Optional, Tuple

import requests

from piston_client.client.config import DEFAULT_BASE_URL, ClientConfig, validate_client_config
from piston_client.client.http import HttpMethod, RequestExecutor
from piston_client.client.schemas import ExecuteRequest, FileSpec
from piston_client.core.decoding import ResultDecoder
from piston_client.core.models import ExecutionResults, Runtime, StagedFile

logger = logging.getLogger(__name__)


class PistonClient:
    """
    Client for the Piston code execution API.

    Files added with add_file() are sent with every execute() call until
    clear_files() is called. They are not cleared after execution.

    A single instance is not safe for concurrent use without external
    synchronization.
    """

    def __init__(
        self,
        base_url: str = DEFAULT_BASE_URL,
        retries: int = 3,
        compile_timeout: Optional[int] = None,
        run_timeout: Optional[int] = None,
        compile_cpu_time: Optional[int] = None,
        run_cpu_time: Optional[int] = None,
        compile_memory_limit: Optional[int] = None,
        run_memory_limit: Optional[int] = None,
        request_timeout: Optional[float] = None,
        session: Optional[requests.Session] = None,
    ):
        """
        Initialize client.

        Args:
            base_url: Base URL of the API
            retries: Number of attempts made when the rate limit is reached
            compile_timeout: Max wall-time for the compile stage in milliseconds
            run_timeout: Max wall-time for the run stage in milliseconds
            compile_cpu_time: Max CPU-time for the compile stage in milliseconds
            run_cpu_time: Max CPU-time for the run stage in milliseconds
            compile_memory_limit: Max memory for the compile stage in bytes
            run_memory_limit: Max memory for the run stage in bytes
            request_timeout: Client-side timeout per HTTP request in seconds
            session: Optional requests session to reuse

        Raises:
            ClientConfigError: If any parameter is invalid
        """
        self.config = ClientConfig(
            base_url=base_url,
            retries=retries,
            compile_timeout=compile_timeout,
            run_timeout=run_timeout,
            compile_cpu_time=compile_cpu_time,
            run_cpu_time=run_cpu_time,
            compile_memory_limit=compile_memory_limit,
            run_memory_limit=run_memory_limit,
            request_timeout=request_timeout,
        )
        validate_client_config(self.config)

        self._executor = RequestExecutor(
            base_url=self.config.base_url,
            retries=self.config.retries,
            timeout=self.config.request_timeout,
            session=session,
        )
        self._files: List[StagedFile] = []

    def __enter__(self) -> "PistonClient":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def close(self) -> None:
        self._executor.close()

    # -------------------------
    # FILES
    # -------------------------

    def add_file(
        self,
        content: str,
        name: Optional[str] = None,
        encoding: Optional[str] = None,
    ) -> None:
        """
        Stage a file to be sent with the next execution.

        Args:
            content: Content of the file
            name: Name of the file
            encoding: Encoding of the content (e.g., "utf8", "base64", "hex")
        """
        self._files.append(StagedFile(content=content, name=name, encoding=encoding))

    def clear_files(self) -> None:
        """Remove all staged files."""
        self._files.clear()

    @property
    def files(self) -> Tuple[StagedFile, ...]:
        return tuple(self._files)

    # -------------------------
    # API
    # -------------------------

    def runtimes(self) -> List[Runtime]:
        """
        Get supported languages along with their versions and aliases.

        Returns:
            List of runtimes, in the order the API returns them
        """
        data = self._executor.request(method=HttpMethod.GET, path="/runtimes")
        return ResultDecoder.runtimes(data)

    def execute(
        self,
        language: str,
        version: str,
        stdin: Optional[str] = None,
        args: Optional[List[str]] = None,
    ) -> ExecutionResults:
        """
        Execute the staged files.

        Args:
            language: Language to run (name or alias)
            version: Version of the language (SemVer or range)
            stdin: Text passed to the program on stdin
            args: Arguments passed to the program

        Returns:
            ExecutionResults

        Raises:
            TransportError: If the API rejects the request
            RateLimitExhaustedError: If every attempt was rate limited
        """
        request = ExecuteRequest(
            language=language,
            version=version,
            files=[
                FileSpec(name=f.name, content=f.content, encoding=f.encoding)
                for f in self._files
            ],
            stdin=stdin,
            args=args,
            **self.config.limits(),
        )

        data = self._executor.request(
            method=HttpMethod.POST,
            path="/execute",
            body=request.to_payload(),
        )
        results = ResultDecoder.execution_results(data)

        logger.info(
            f"[piston] Executed {results.language}-{results.version} "
            f"({len(self._files)} file(s)): exit code {results.run.code}"
        )

        return results
