# Embedding client for Ollama's /api/embeddings endpoint.
# Returns the raw vector; shape normalization happens in search.vectors.

from __future__ import annotations

from typing import List

import requests

from ..errors import ProviderUnavailable


class OllamaEmbedder:
    def __init__(self, host: str = "http://localhost:11434", model: str = "bge-m3:latest", timeout: float = 30.0):
        self.host = host.rstrip("/")
        self.model = model
        self.timeout = timeout

    def embed(self, text: str) -> List[float]:
        url = f"{self.host}/api/embeddings"
        try:
            resp = requests.post(url, json={"model": self.model, "prompt": text}, timeout=self.timeout)
            resp.raise_for_status()
            return resp.json()["embedding"]
        except (requests.RequestException, KeyError, ValueError) as e:
            raise ProviderUnavailable(f"Ollama embedding failed: {e}") from e
