# Client for Ollama local inference.
# Accepts a model name and exposes generate(messages, params).

from typing import Any, Dict, List, Tuple

import requests

from ..types import Message, ModelParams


class OllamaClient:
    def __init__(self, model: str = "mistral:7b-instruct", host: str = "http://localhost:11434", timeout: float = 180):
        self.model = model
        self.host = host.rstrip("/")
        self.timeout = timeout

    def generate(self, messages: List[Message], params: ModelParams) -> Tuple[str, Dict[str, Any]]:
        payload = {
            "model": self.model,
            "messages": [{"role": m.role, "content": m.content} for m in messages],
            "stream": False,
            "options": {
                "temperature": float(params.temperature if params.temperature is not None else 0.7),
                "num_predict": int(params.max_tokens or 1500),
            },
        }
        resp = requests.post(f"{self.host}/api/chat", json=payload, timeout=self.timeout)
        resp.raise_for_status()
        data = resp.json()
        text = (data.get("message") or {}).get("content", "")
        return text.strip(), {"engine": "ollama", "model": self.model}
