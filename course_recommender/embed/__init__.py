# Embedding providers. Each exposes embed(text) -> vector (flat or batch-of-one).

from .local import LocalEmbedder
from .ollama import OllamaEmbedder

__all__ = ["LocalEmbedder", "OllamaEmbedder"]
