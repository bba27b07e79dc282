from __future__ import annotations

import logging
import random
import time
from collections import OrderedDict, deque
from typing import Callable, Deque, List, Optional, Tuple

from config import GenerationConfig, generation_config
from fallback_chain import StrategyOutcome, run_chain
from llm_client import LLMClient, LLMClientError, ModelWarmingError, llm_client
from prompts import AVOID_RECENT_CLAUSE, PROMPT_VERBS, QUESTION_GENERATION_PROMPT

from .models import QuestionResult
from .parsing import parse_generated_text
from .templates import WARMING_UP_RESULT, fallback_question


logger = logging.getLogger(__name__)

HistoryKey = Tuple[str, str, str]


class QuestionGenerator:
    """
    Generates one interview question per call from the remote model,
    degrading to canned templates so a usable question always comes back.

    Keeps the last few questions per (topic, sub_topic, difficulty) and asks
    the model to avoid them; an exact repeat is rejected.
    """

    def __init__(
        self,
        client: Optional[LLMClient] = None,
        rng: Optional[random.Random] = None,
        clock: Optional[Callable[[], float]] = None,
        config: Optional[GenerationConfig] = None,
    ) -> None:
        self._client = client or llm_client
        self._rng = rng or random.Random()
        self._clock = clock or time.time
        self._config = config or generation_config
        self._history: "OrderedDict[HistoryKey, Deque[str]]" = OrderedDict()

    @staticmethod
    def _key(topic: str, sub_topic: str, difficulty: Optional[str]) -> HistoryKey:
        return (topic, sub_topic, difficulty or "")

    def recent_questions(self, topic: str, sub_topic: str, difficulty: Optional[str] = None) -> List[str]:
        return list(self._history.get(self._key(topic, sub_topic, difficulty), ()))

    def _remember(self, key: HistoryKey, question: str) -> None:
        history = self._history.setdefault(key, deque(maxlen=self._config.history_size))
        history.append(question)
        # Least recently used keys are evicted first.
        self._history.move_to_end(key)
        while len(self._history) > self._config.history_keys:
            self._history.popitem(last=False)

    def build_prompt(self, topic: str, sub_topic: str, difficulty: Optional[str] = None) -> str:
        verb = self._rng.choice(PROMPT_VERBS)
        seed = self._rng.randrange(self._config.seed_range)
        recent = self.recent_questions(topic, sub_topic, difficulty)
        avoid = AVOID_RECENT_CLAUSE.format(questions=" | ".join(recent)) if recent else ""
        return QUESTION_GENERATION_PROMPT.format(
            verb=verb,
            level=f"{difficulty} level " if difficulty else "",
            sub_topic=sub_topic,
            topic=topic,
            avoid=avoid,
            seed=seed,
        )

    async def generate(self, topic: str, sub_topic: str, difficulty: Optional[str] = None) -> QuestionResult:
        result: QuestionResult = await run_chain(
            "question generation",
            [self._from_remote_model, self._from_templates],
            topic,
            sub_topic,
            difficulty,
        )
        if result is not WARMING_UP_RESULT:
            self._remember(self._key(topic, sub_topic, difficulty), result.question)
        return result

    async def _from_remote_model(
        self, topic: str, sub_topic: str, difficulty: Optional[str]
    ) -> StrategyOutcome[QuestionResult]:
        prompt = self.build_prompt(topic, sub_topic, difficulty)
        try:
            text = await self._client.agenerate(
                prompt,
                max_new_tokens=self._config.max_new_tokens,
                top_p=self._config.top_p,
                top_k=self._config.top_k,
                repetition_penalty=self._config.repetition_penalty,
            )
        except ModelWarmingError as exc:
            return StrategyOutcome.retryable(WARMING_UP_RESULT, str(exc))
        except LLMClientError as exc:
            logger.error("AI generation error: %s", exc)
            return StrategyOutcome.fatal(str(exc))
        except Exception as exc:  # noqa: BLE001
            logger.exception("Unexpected failure calling the inference service")
            return StrategyOutcome.fatal(str(exc))

        result = parse_generated_text(text, topic, sub_topic)
        if result is None:
            return StrategyOutcome.fatal("model output held malformed JSON")
        if result.question in self.recent_questions(topic, sub_topic, difficulty):
            return StrategyOutcome.fatal("model repeated a recent question")
        return StrategyOutcome.success(result)

    async def _from_templates(
        self, topic: str, sub_topic: str, difficulty: Optional[str]
    ) -> StrategyOutcome[QuestionResult]:
        return StrategyOutcome.success(fallback_question(topic, sub_topic, self._clock()))
