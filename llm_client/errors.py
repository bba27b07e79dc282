from __future__ import annotations

from typing import Optional


class LLMClientError(RuntimeError):
    """Base error for remote text-generation calls."""


class LLMUnavailableError(LLMClientError):
    """Network failure, timeout or non-2xx status from the inference service."""

    def __init__(self, message: str, status_code: Optional[int] = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class ModelWarmingError(LLMUnavailableError):
    """The remote model is still loading (HTTP 503); retrying shortly should work."""

    def __init__(self, message: str = "Remote model is warming up") -> None:
        super().__init__(message, status_code=503)


class UnexpectedResponseError(LLMClientError):
    """The service answered, but not in a shape that carries generated text."""
