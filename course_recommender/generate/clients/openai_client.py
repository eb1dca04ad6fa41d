# Client for the OpenAI Chat Completions API.
# Same interface as OllamaClient and EchoDevClient.

from typing import Any, Dict, List, Optional, Tuple

from openai import OpenAI

from ..types import Message, ModelParams


class OpenAIClient:
    def __init__(self, model: str = "gpt-4", api_key: Optional[str] = None):
        self.model = model
        self.client = OpenAI(api_key=api_key)

    def generate(self, messages: List[Message], params: ModelParams) -> Tuple[str, Dict[str, Any]]:
        formatted = [{"role": m.role, "content": m.content} for m in messages]
        resp = self.client.chat.completions.create(
            model=self.model,
            messages=formatted,
            temperature=params.temperature if params.temperature is not None else 0.7,
            max_tokens=params.max_tokens or 1500,
        )
        content = resp.choices[0].message.content if resp.choices else None
        meta = {"engine": "openai", "model": self.model}
        return (content or "").strip(), meta
