import logging
import os
from dataclasses import dataclass
from typing import Literal, Optional

from dotenv import load_dotenv


# Load environment variables from .env at import time so that
# HF_API_KEY, HF_MODEL_REPO_ID, etc. are available everywhere.
load_dotenv()


LLMProvider = Literal["huggingface", "groq", "openai"]


@dataclass
class LLMConfig:
    provider: LLMProvider = os.getenv("LLM_PROVIDER", "huggingface")  # type: ignore[assignment]
    # Gemma instruction-tuned model by default; the prompt uses its chat-turn format.
    model: str = os.getenv("LLM_MODEL") or os.getenv("HF_MODEL_REPO_ID", "google/gemma-2b-it")
    base_url: str = os.getenv("HF_API_URL", "https://api-inference.huggingface.co/models")
    api_key: Optional[str] = os.getenv("HF_API_KEY")
    timeout_s: float = float(os.getenv("LLM_TIMEOUT_S", "30"))
    # High temperature: question generation favours diversity over determinism.
    temperature: float = float(os.getenv("LLM_TEMPERATURE", "0.9"))


@dataclass
class GenerationConfig:
    max_new_tokens: int = int(os.getenv("GEN_MAX_NEW_TOKENS", "300"))
    top_p: float = float(os.getenv("GEN_TOP_P", "0.95"))
    top_k: int = int(os.getenv("GEN_TOP_K", "50"))
    repetition_penalty: float = float(os.getenv("GEN_REPETITION_PENALTY", "1.2"))
    history_size: int = int(os.getenv("GEN_HISTORY_SIZE", "5"))
    history_keys: int = int(os.getenv("GEN_HISTORY_KEYS", "256"))
    seed_range: int = 10000


@dataclass
class EmbeddingConfig:
    model_name: str = os.getenv("EMBEDDING_MODEL", "sentence-transformers/all-MiniLM-L6-v2")
    prewarm: bool = os.getenv("EMBEDDING_PREWARM", "1") in ("1", "true", "True")


@dataclass
class LoggingConfig:
    level: str = os.getenv("LOG_LEVEL", "INFO").upper()


llm_config = LLMConfig()
generation_config = GenerationConfig()
embedding_config = EmbeddingConfig()
logging_config = LoggingConfig()


def configure_logging(level: Optional[str] = None) -> None:
    """
    Install a single human-readable console handler on the root logger.
    """
    logging.basicConfig(
        level=level or logging_config.level,
        format="[%(asctime)s] %(levelname)s %(name)s :: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
