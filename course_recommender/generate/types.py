# Simple, typed dataclasses shared across generator modules.

from __future__ import annotations
from dataclasses import dataclass
from typing import List, Optional, Dict, Any

# Chat UIs label model turns "ai"; chat APIs expect "assistant".
ROLE_ALIASES = {"ai": "assistant"}


def normalize_role(role: str) -> str:
    return ROLE_ALIASES.get(role, role)


@dataclass
class Message:
    """Single chat turn: system, user, or assistant."""
    role: str
    content: str


@dataclass
class ModelParams:
    """LLM parameters per request."""
    temperature: Optional[float] = None
    max_tokens: Optional[int] = None


@dataclass
class ChatResponse:
    """Final response from the generator."""
    text: str
    profiles: List[str]
    meta: Dict[str, Any]
