# ChatGenerator:
# - accepts any model client (OpenAI, Ollama, Echo) exposing generate(messages, params)
# - renders the retrieved profiles into the system message
# - returns ChatResponse

from __future__ import annotations
import logging
import os
from pathlib import Path
from typing import List, Optional

import yaml

from ..errors import ProviderUnavailable
from ..search.context import render_context
from ..search.prompts import build_system_prompt
from ..search.types import ProfileRecord
from .types import ChatResponse, Message, ModelParams, normalize_role

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = str(Path(__file__).with_name("config.yaml"))
DEFAULT_FALLBACK_REPLY = "Sorry, I could not generate a response."


class ChatGenerator:
    def __init__(self, model_client, config_path: str = DEFAULT_CONFIG_PATH):
        self.model_client = model_client
        self.config_path = config_path
        self.cfg = self._load_config()

    def _load_config(self):
        if not os.path.exists(self.config_path):
            return {}
        with open(self.config_path, "r", encoding="utf-8") as f:
            return yaml.safe_load(f) or {}

    def compose_system_message(self, profiles: List[ProfileRecord]) -> str:
        """System prompt with the rendered profile context embedded."""
        return build_system_prompt(
            intro=self.cfg.get("intro", "").strip(),
            context=render_context(profiles),
            criteria=self.cfg.get("criteria", "").strip(),
            style=self.cfg.get("style", "").strip(),
            language=self.cfg.get("language", "English"),
        )

    def build_messages(self, user_message: str, history: List[Message], profiles: List[ProfileRecord]) -> List[Message]:
        turns = [Message(role=normalize_role(m.role), content=m.content) for m in history]
        return [
            Message(role="system", content=self.compose_system_message(profiles)),
            *turns,
            Message(role="user", content=user_message),
        ]

    def chat(
        self,
        user_message: str,
        history: List[Message],
        profiles: List[ProfileRecord],
        temperature: Optional[float] = None,
        max_tokens: Optional[int] = None,
    ) -> ChatResponse:
        """Main entry point for generation."""
        messages = self.build_messages(user_message, history, profiles)
        params = ModelParams(
            temperature=temperature if temperature is not None else self.cfg.get("temperature", 0.7),
            max_tokens=max_tokens or self.cfg.get("max_tokens", 1500),
        )

        try:
            response_text, meta = self.model_client.generate(messages, params)
        except Exception as e:
            raise ProviderUnavailable(f"Chat model failed: {e}") from e

        if not response_text:
            logger.warning("Model returned an empty reply")
            response_text = self.cfg.get("fallback_reply", DEFAULT_FALLBACK_REPLY)
        return ChatResponse(text=response_text, profiles=[p.slug or p.id for p in profiles], meta=meta)
