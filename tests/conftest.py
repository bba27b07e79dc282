import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from embedding_model import EmbeddingModel


class FakeExtractor:
    """Stands in for a SentenceTransformer: maps known texts to fixed vectors."""

    def __init__(self, vectors=None, error=None):
        self.vectors = vectors or {}
        self.error = error
        self.calls = 0

    def encode(self, texts, normalize_embeddings=False, show_progress_bar=True):
        self.calls += 1
        if self.error is not None:
            raise self.error
        return [self.vectors[text] for text in texts]


@pytest.fixture
def extractor_factory():
    return FakeExtractor


@pytest.fixture
def failing_model():
    def _loader(name):
        raise OSError(f"cannot download {name}")

    return EmbeddingModel(model_name="test/model", loader=_loader)
