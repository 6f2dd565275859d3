# ============================================================
# chat-relay FastAPI App
# ------------------------------------------------------------
# This app wires everything together:
#   - one provider client chosen at startup (mock, HTTP, Google, OpenAI)
#   - /api/chat for whole replies
#   - /api/chat/stream for paced, chunked replies
# ============================================================

from contextlib import asynccontextmanager
from typing import Any, List, Literal, Optional
import json
import logging

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, StreamingResponse
from pydantic import BaseModel

# --- Local imports ---
from chatrelay.settings import Settings, get_settings
from chatrelay.generate import (
    ChatGenerator,
    Message,
    UpstreamError,
    build_client,
    stream_reply,
)
from chatrelay.generate.normalize import to_json

logger = logging.getLogger("chatrelay")


# ------------------------------------------------------------
# 📦 Pydantic models
# ------------------------------------------------------------
class ChatTurn(BaseModel):
    role: Literal["system", "user", "assistant"]
    content: str
    time: Optional[str] = None


class ChatRequest(BaseModel):
    messages: Optional[List[ChatTurn]] = None


# ------------------------------------------------------------
# 🧠 Helpers
# ------------------------------------------------------------
def messages_required() -> JSONResponse:
    return JSONResponse(status_code=400, content={"error": "messages required"})


def to_messages(req: ChatRequest) -> List[Message]:
    return [Message(**t.model_dump()) for t in req.messages or []]


def error_details(exc: Exception) -> Any:
    """Short, client-safe description of a failure."""
    if isinstance(exc, UpstreamError):
        return exc.detail
    return str(exc) or type(exc).__name__


def jsonable_raw(raw: Any) -> Any:
    try:
        return jsonable_encoder(raw)
    except Exception:
        return json.loads(to_json(raw))


def get_generator(request: Request) -> ChatGenerator:
    return request.app.state.generator


# ------------------------------------------------------------
# 🚀 FastAPI init
# ------------------------------------------------------------
def create_app(settings: Optional[Settings] = None, generator: Optional[ChatGenerator] = None) -> FastAPI:
    """Build the app.

    Without `generator`, the provider client is built from `settings` when
    the app starts and closed when it shuts down. An injected generator is
    used as-is and left open.
    """
    settings = settings or get_settings()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        owned = generator is None
        if not settings.LLM_API_URL:
            logger.warning("LLM_API_URL not set. Set it in .env")
        if not settings.LLM_API_KEY:
            logger.warning("LLM_API_KEY not set. Set it in .env")
        app.state.generator = generator or ChatGenerator(
            model_client=build_client(settings), model=settings.LLM_MODEL
        )
        logger.info("Engine: %s", app.state.generator.engine)
        try:
            yield
        finally:
            if owned:
                await app.state.generator.aclose()

    app = FastAPI(title="chat-relay API", version="0.1", lifespan=lifespan)
    app.state.settings = settings
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # ------------------------------------------------------------
    # 💬 Chat routes
    # ------------------------------------------------------------
    @app.post("/api/chat")
    async def chat(req: ChatRequest, request: Request):
        if not req.messages:
            return messages_required()
        messages = to_messages(req)
        logger.info("Incoming chat: %d message(s)", len(messages))
        try:
            result = await get_generator(request).generate(messages)
            return {"reply": result.text, "raw": jsonable_raw(result.raw)}
        except Exception as e:
            logger.exception("LLM request failed: %s", e)
            return JSONResponse(
                status_code=500,
                content={"error": "LLM request failed", "details": jsonable_raw(error_details(e))},
            )

    @app.post("/api/chat/stream")
    async def chat_stream(req: ChatRequest, request: Request):
        if not req.messages:
            return messages_required()
        messages = to_messages(req)
        logger.info("Incoming stream: %d message(s)", len(messages))
        body = stream_reply(
            get_generator(request),
            messages,
            chunk_chars=settings.STREAM_CHUNK_CHARS,
            delay=settings.stream_delay,
        )
        return StreamingResponse(
            body,
            media_type="text/plain; charset=utf-8",
            headers={"Cache-Control": "no-cache", "X-Accel-Buffering": "no"},
        )

    # ------------------------------------------------------------
    # 🧭 Health checks
    # ------------------------------------------------------------
    @app.get("/health")
    def health():
        return {"status": "ok", "env": settings.ENV}

    @app.get("/")
    def hello(request: Request):
        engine = getattr(request.app.state, "generator", None)
        return {
            "message": f"{settings.app_name} service running.",
            "engine": engine.engine if engine else None,
        }

    return app


logging.basicConfig(
    level=logging.DEBUG if get_settings().DEBUG else logging.INFO,
    format="[%(asctime)s] %(levelname)s - %(message)s",
)

app = create_app()
