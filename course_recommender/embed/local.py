# Local sentence-transformers embedder (no external API calls).

from __future__ import annotations

import os
import threading
from typing import List

from ..errors import ProviderUnavailable

# Silence tokenizer parallelism warnings
os.environ.setdefault("TOKENIZERS_PARALLELISM", "false")


class LocalEmbedder:
    def __init__(self, model_name: str = "BAAI/bge-small-en-v1.5", device: str = "cpu"):
        self.model_name = model_name
        self.device = device
        self._model = None
        self._lock = threading.Lock()

    def _get_model(self):
        """Lazy-load the SentenceTransformer model once."""
        with self._lock:
            if self._model is None:
                from sentence_transformers import SentenceTransformer  # heavy import delayed

                self._model = SentenceTransformer(self.model_name, device=self.device)
        return self._model

    def embed(self, text: str) -> List[float]:
        try:
            model = self._get_model()
            vec = model.encode([text], convert_to_numpy=True, show_progress_bar=False)
        except Exception as e:
            raise ProviderUnavailable(f"Local embedding failed: {e}") from e
        # batch of one; the vector normalizer unwraps it
        return vec.tolist()
