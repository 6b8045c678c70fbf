from .event_embedding import EventEmbeddingMemoryRepository, cosine_similarity

__all__ = ["EventEmbeddingMemoryRepository", "cosine_similarity"]
