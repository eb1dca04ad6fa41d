# ============================================================
# Course Recommender FastAPI App
# ------------------------------------------------------------
# This app wires everything together:
#   - Profile store (Redis or YAML catalog)
#   - Hybrid retriever (vector search with keyword fallback)
#   - Chat generator (OpenAI, Ollama, or Echo clients)
# ============================================================

import logging
from functools import lru_cache
from typing import Any, Dict, List, Optional

from fastapi import Depends, FastAPI, Query, Request
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from course_recommender import __version__
from course_recommender.errors import InputError
from course_recommender.factory import build_model_client, build_retriever, describe
from course_recommender.generate import ChatGenerator, ChatResponse, Message
from course_recommender.log import configure_logging
from course_recommender.search import Retriever
from course_recommender.settings import settings

configure_logging(settings.LOG_LEVEL)
logger = logging.getLogger(__name__)

GENERIC_ERROR = "An error occurred while generating the recommendation."

# ------------------------------------------------------------
# 🔧 Collaborators (built once per process, overridable in tests)
# ------------------------------------------------------------
@lru_cache(maxsize=1)
def get_retriever() -> Retriever:
    return build_retriever(settings)


@lru_cache(maxsize=1)
def get_generator() -> ChatGenerator:
    return ChatGenerator(model_client=build_model_client(settings))

# ------------------------------------------------------------
# 🚀 FastAPI init
# ------------------------------------------------------------
app = FastAPI(title="Course Recommender API", version=__version__)


@app.exception_handler(InputError)
async def input_error_handler(request: Request, exc: InputError):
    return JSONResponse(status_code=400, content={"error": str(exc)})


@app.exception_handler(Exception)
async def unhandled_error_handler(request: Request, exc: Exception):
    # covers collaborator construction in Depends, which runs outside the route's try
    logger.error("Unhandled error on %s", request.url.path, exc_info=exc)
    return JSONResponse(status_code=500, content={"error": GENERIC_ERROR})

# ------------------------------------------------------------
# 📦 Pydantic models
# ------------------------------------------------------------
class ChatTurn(BaseModel):
    role: str
    content: str

class RecommendRequest(BaseModel):
    message: Optional[str] = None
    history: Optional[List[ChatTurn]] = None
    temperature: Optional[float] = None
    max_tokens: Optional[int] = None

class RecommendPayload(BaseModel):
    response: str
    profiles: List[str]
    meta: Dict[str, Any]

class RetrieveResponse(BaseModel):
    query: str
    method: str
    profiles: List[Dict[str, Any]]

# ------------------------------------------------------------
# 💬 Recommendation route
# ------------------------------------------------------------
@app.post("/recommend", response_model=RecommendPayload)
@app.post("/chat", response_model=RecommendPayload)
def recommend(
    req: RecommendRequest,
    retriever: Retriever = Depends(get_retriever),
    chat_gen: ChatGenerator = Depends(get_generator),
):
    if not req.message or not req.message.strip():
        raise InputError("message is required")

    try:
        # --- 1) Retrieve profiles ---
        result = retriever.retrieve(req.message)

        # --- 2) Build history ---
        history = [Message(**h.model_dump()) for h in (req.history or [])]

        # --- 3) Generate ---
        out: ChatResponse = chat_gen.chat(
            user_message=req.message,
            history=history,
            profiles=result.profiles,
            temperature=req.temperature if req.temperature is not None else settings.TEMPERATURE,
            max_tokens=req.max_tokens or settings.MAX_TOKENS,
        )
    except Exception:
        logger.exception("Recommendation failed")
        return JSONResponse(status_code=500, content={"error": GENERIC_ERROR})

    return RecommendPayload(
        response=out.text,
        profiles=out.profiles,
        meta={
            "method": result.method,
            "engine": (out.meta or {}).get("engine"),
            "model": (out.meta or {}).get("model"),
        },
    )

# ------------------------------------------------------------
# 🔎 Retrieval-only route
# ------------------------------------------------------------
@app.get("/retrieve", response_model=RetrieveResponse)
def retrieve_endpoint(
    q: str = Query(..., min_length=1, description="Search query"),
    top_k: Optional[int] = Query(None, ge=1, le=50),
    retriever: Retriever = Depends(get_retriever),
):
    if top_k is not None and top_k != retriever.top_k:
        retriever = Retriever(
            store=retriever.store,
            embedder=retriever.embedder,
            index=retriever.index,
            top_k=top_k,
            max_workers=retriever.max_workers,
        )
    try:
        result = retriever.retrieve(q)
    except Exception:
        logger.exception("Retrieval failed")
        return JSONResponse(status_code=500, content={"error": "Profile search failed."})
    return {"query": q, "method": result.method, "profiles": [p.to_dict() for p in result.profiles]}

# ------------------------------------------------------------
# 🧭 Health checks
# ------------------------------------------------------------
@app.get("/healthz")
def healthz():
    return {
        "ok": True,
        "env": settings.ENV,
        "debug": settings.DEBUG,
        "app": settings.app_name,
        "config": describe(settings),
    }

@app.get("/health")
def health():
    return {"status": "ok", "env": settings.ENV}

@app.get("/")
def hello():
    return {"message": f"{settings.app_name} service running."}
