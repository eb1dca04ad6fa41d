# Builds the collaborators (store, embedder, index, model client) from Settings.
# Heavy clients are imported only when selected.

from __future__ import annotations

import logging
from pathlib import Path

from .generate.clients.echo_dev_client import EchoDevClient
from .search import Retriever
from .settings import Settings

logger = logging.getLogger(__name__)

PROJECT_ROOT = Path(__file__).resolve().parents[1]


def _resolve_path(path: str) -> str:
    # relative paths are anchored at the project root, not the working directory
    p = Path(path).expanduser()
    return str(p if p.is_absolute() else PROJECT_ROOT / p)


def build_store(cfg: Settings):
    if cfg.REDIS_URL:
        from .store.redis_store import RedisProfileStore
        return RedisProfileStore.from_url(cfg.REDIS_URL)
    from .store.yaml_store import YamlProfileStore
    return YamlProfileStore(_resolve_path(cfg.PROFILES_PATH))


def build_embedder(cfg: Settings):
    backend = cfg.EMBED_BACKEND.lower()
    if backend == "ollama":
        from .embed.ollama import OllamaEmbedder
        return OllamaEmbedder(host=cfg.OLLAMA_HOST, model=cfg.EMBED_MODEL, timeout=cfg.REQUEST_TIMEOUT)
    if backend == "local":
        from .embed.local import LocalEmbedder
        return LocalEmbedder(model_name=cfg.EMBED_MODEL)
    if backend != "none":
        logger.warning("Unknown EMBED_BACKEND %r; using keyword search only", cfg.EMBED_BACKEND)
    return None


def build_index(cfg: Settings):
    """Load the pre-built FAISS index when configured. A missing index disables the fast path."""
    if not cfg.FAISS_INDEX_PATH:
        return None
    from .embed.faiss_index import ProfileIndex
    try:
        return ProfileIndex.load(_resolve_path(cfg.FAISS_INDEX_PATH))
    except (OSError, RuntimeError) as e:
        logger.warning("FAISS index unavailable (%s); embedding profiles per request", e)
        return None


def build_model_client(cfg: Settings):
    if cfg.USE_OLLAMA:
        from .generate.clients.ollama_client import OllamaClient
        return OllamaClient(model=cfg.OLLAMA_MODEL, host=cfg.OLLAMA_HOST)
    if cfg.OPENAI_API_KEY:
        from .generate.clients.openai_client import OpenAIClient
        return OpenAIClient(model=cfg.OPENAI_MODEL, api_key=cfg.OPENAI_API_KEY)
    return EchoDevClient()


def build_retriever(cfg: Settings, store=None) -> Retriever:
    return Retriever(
        store=store if store is not None else build_store(cfg),
        embedder=build_embedder(cfg),
        index=build_index(cfg),
        top_k=cfg.TOP_K,
        max_workers=cfg.EMBED_WORKERS,
    )


def describe(cfg: Settings) -> dict:
    return {
        "embed_backend": cfg.EMBED_BACKEND,
        "faiss_index": bool(cfg.FAISS_INDEX_PATH),
        "store": "redis" if cfg.REDIS_URL else "yaml",
    }
