from __future__ import annotations

import asyncio
import concurrent.futures
import logging
import threading
from enum import Enum
from typing import Any, Callable, Optional

from config import embedding_config


logger = logging.getLogger(__name__)


class ModelState(str, Enum):
    UNINITIALIZED = "uninitialized"
    LOADING = "loading"
    READY = "ready"
    FAILED = "failed"


def _load_sentence_transformer(model_name: str) -> Any:
    # Imported here so a missing or broken install counts as a load failure.
    from sentence_transformers import SentenceTransformer

    return SentenceTransformer(model_name)


class EmbeddingModel:
    """
    Process-scoped owner of the local sentence-embedding model.

    At most one load runs per process, on its own thread. Callers from any
    thread or event loop that arrive while it is in flight await the same
    pending result. A successful load is cached; a failed one is terminal
    and `get_instance` returns None from then on.
    """

    def __init__(
        self,
        model_name: Optional[str] = None,
        loader: Optional[Callable[[str], Any]] = None,
    ) -> None:
        self.model_name = model_name or embedding_config.model_name
        self._loader = loader or _load_sentence_transformer
        self._state = ModelState.UNINITIALIZED
        self._handle: Any = None
        self._pending: Optional[concurrent.futures.Future] = None
        self._lock = threading.Lock()
        self.load_error: Optional[BaseException] = None

    @property
    def state(self) -> ModelState:
        return self._state

    async def get_instance(self) -> Any:
        if self._state is ModelState.READY:
            return self._handle
        if self._state is ModelState.FAILED:
            return None
        # wrap_future gives each caller a future bound to its own loop.
        return await asyncio.wrap_future(self._start_load())

    async def warm_up(self) -> bool:
        return await self.get_instance() is not None

    def _start_load(self) -> concurrent.futures.Future:
        with self._lock:
            if self._pending is None:
                pending: concurrent.futures.Future = concurrent.futures.Future()
                # Running futures cannot be cancelled by a departing waiter.
                pending.set_running_or_notify_cancel()
                self._pending = pending
                self._state = ModelState.LOADING
                threading.Thread(
                    target=self._load,
                    args=(pending,),
                    name="embedding-model-load",
                    daemon=True,
                ).start()
            return self._pending

    def _load(self, pending: concurrent.futures.Future) -> None:
        logger.info("Loading sentence-transformer model %s for evaluation...", self.model_name)
        try:
            handle = self._loader(self.model_name)
        except Exception as exc:  # noqa: BLE001
            logger.error("Failed to load evaluation model: %s", exc)
            self.load_error = exc
            self._state = ModelState.FAILED
            pending.set_result(None)
            return
        self._handle = handle
        self.load_error = None
        self._state = ModelState.READY
        logger.info("Evaluation model loaded.")
        pending.set_result(handle)


# Shared process-wide instance
embedding_model = EmbeddingModel()
