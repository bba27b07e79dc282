from __future__ import annotations

import asyncio
import json
import logging
import os
from typing import Any, Dict, Optional

import requests
from groq import Groq
from openai import OpenAI

from config import LLMProvider, generation_config, llm_config

from .errors import LLMUnavailableError, ModelWarmingError, UnexpectedResponseError


logger = logging.getLogger(__name__)


class LLMClient:
    """
    Pluggable text-generation client: Hugging Face Inference API by default,
    with Groq and OpenAI chat completions as alternatives.

    Every failure surfaces as an `LLMClientError` subclass so callers can
    tell a warming model (503) from any other outage.
    """

    def __init__(
        self,
        provider: LLMProvider | None = None,
        model: Optional[str] = None,
        temperature: Optional[float] = None,
        api_key: Optional[str] = None,
        base_url: Optional[str] = None,
        timeout_s: Optional[float] = None,
        client: Any = None,
    ) -> None:
        self.provider: LLMProvider = provider or llm_config.provider
        self.model = model or llm_config.model
        self.temperature = temperature if temperature is not None else llm_config.temperature
        self.api_key = api_key if api_key is not None else llm_config.api_key
        self.base_url = (base_url or llm_config.base_url).rstrip("/")
        self.timeout_s = timeout_s if timeout_s is not None else llm_config.timeout_s

        if self.provider == "openai":
            self._client = client or OpenAI(api_key=os.getenv("OPENAI_API_KEY"), timeout=self.timeout_s)
        elif self.provider == "groq":
            self._client = client or Groq(api_key=os.getenv("GROQ_API_KEY"), timeout=self.timeout_s)
        else:
            # Hugging Face uses the plain HTTP API; no SDK client is needed
            self._client = None
            if not self.api_key:
                logger.warning("HF_API_KEY is not set. Question generation will use fallback templates.")
            else:
                logger.info("Using HF model: %s", self.model)

    def generate(
        self,
        prompt: str,
        max_new_tokens: Optional[int] = None,
        top_p: Optional[float] = None,
        top_k: Optional[int] = None,
        repetition_penalty: Optional[float] = None,
    ) -> str:
        """
        Send a single sampled completion request and return the generated text.
        """
        max_new_tokens = max_new_tokens or generation_config.max_new_tokens
        top_p = top_p if top_p is not None else generation_config.top_p
        top_k = top_k if top_k is not None else generation_config.top_k
        if repetition_penalty is None:
            repetition_penalty = generation_config.repetition_penalty

        if self.provider in ("openai", "groq"):
            return self._chat_completion(prompt, max_new_tokens, top_p)

        payload: Dict[str, Any] = {
            "inputs": prompt,
            "parameters": {
                "max_new_tokens": max_new_tokens,
                "return_full_text": False,
                "temperature": self.temperature,
                "top_p": top_p,
                "top_k": top_k,
                "do_sample": True,
                "repetition_penalty": repetition_penalty,
            },
            "options": {
                "wait_for_model": True,
                "use_cache": False,
            },
        }
        headers = {
            "Authorization": f"Bearer {self.api_key}",
            "Content-Type": "application/json",
        }
        url = f"{self.base_url}/{self.model}"
        try:
            resp = requests.post(url, json=payload, headers=headers, timeout=self.timeout_s)
        except requests.RequestException as exc:
            raise LLMUnavailableError(f"Inference request failed: {exc}") from exc

        if resp.status_code == 503:
            logger.warning("HF model %s is loading: %s", self.model, resp.text[:200])
            raise ModelWarmingError()
        if resp.status_code >= 400:
            logger.error("HF inference error status=%s body=%s", resp.status_code, resp.text[:200])
            raise LLMUnavailableError(f"Inference returned status {resp.status_code}", status_code=resp.status_code)

        try:
            data = resp.json()
        except ValueError as exc:
            raise UnexpectedResponseError("Inference payload was not JSON") from exc
        logger.debug("Raw HF response: %s", json.dumps(data, indent=2))
        return _extract_generated_text(data)

    async def agenerate(self, prompt: str, **kwargs: Any) -> str:
        """
        Run `generate` in a worker thread so the event loop stays free.
        """
        return await asyncio.to_thread(self.generate, prompt, **kwargs)

    def _chat_completion(self, prompt: str, max_tokens: int, top_p: float) -> str:
        try:
            response = self._client.chat.completions.create(  # type: ignore[union-attr]
                model=self.model,
                temperature=self.temperature,
                top_p=top_p,
                max_tokens=max_tokens,
                messages=[{"role": "user", "content": prompt}],
            )
        except Exception as exc:
            status = getattr(exc, "status_code", None)
            if status == 503:
                raise ModelWarmingError() from exc
            raise LLMUnavailableError(f"{self.provider} request failed: {exc}", status_code=status) from exc
        return response.choices[0].message.content or ""


def _extract_generated_text(data: Any) -> str:
    if isinstance(data, list):
        first = data[0] if data else None
        if isinstance(first, dict):
            return str(first.get("generated_text") or "")
        return ""
    if isinstance(data, dict) and data.get("generated_text"):
        return str(data["generated_text"])
    raise UnexpectedResponseError("Unexpected response format from Hugging Face")


# Shared default client
llm_client = LLMClient()
