from .client import LLMClient, llm_client
from .errors import LLMClientError, LLMUnavailableError, ModelWarmingError, UnexpectedResponseError

__all__ = [
    "LLMClient",
    "llm_client",
    "LLMClientError",
    "LLMUnavailableError",
    "ModelWarmingError",
    "UnexpectedResponseError",
]
