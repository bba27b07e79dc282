from .model import EmbeddingModel, ModelState, embedding_model

__all__ = ["EmbeddingModel", "ModelState", "embedding_model"]
