"""FastAPI application exposing the medical assistant /chat endpoint."""

from contextlib import asynccontextmanager
import logging

from fastapi import Depends, FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, PlainTextResponse
from starlette.datastructures import Headers

from medguide.agents.medical_agent import answer_question
from medguide.config import ensure_api_key, settings
from medguide.knowledge.loader import KnowledgeBase, load_knowledge
from medguide.schemas.chat import ChatRequest, ChatResponse

logger = logging.getLogger("uvicorn.error")

ONLINE_MESSAGE = "Medical AI Server is Online!"
DATA_NOT_LOADED_ANSWER = "Error: Medical data not loaded."
FALLBACK_ANSWER = "I had trouble understanding that."
BODY_TOO_LARGE_ANSWER = "Request body too large."


class BodySizeLimitMiddleware:
    """Reject requests whose body exceeds ``max_request_bytes``.

    The body is counted as it streams in, so chunked uploads without a
    ``Content-Length`` header are bounded too. Accepted bodies are replayed
    to the application unchanged.
    """

    def __init__(self, app):
        self.app = app

    async def __call__(self, scope, receive, send):
        if scope["type"] != "http":
            await self.app(scope, receive, send)
            return

        limit = settings.max_request_bytes
        content_length = Headers(scope=scope).get("content-length", "")
        if content_length.isdigit() and int(content_length) > limit:
            await self._reject(scope, receive, send, content_length)
            return

        chunks = []
        received = 0
        while True:
            message = await receive()
            if message["type"] != "http.request":
                return
            body = message.get("body", b"")
            received += len(body)
            if received > limit:
                await self._reject(scope, receive, send, f">{limit}")
                return
            chunks.append(body)
            if not message.get("more_body", False):
                break

        body = b"".join(chunks)
        replayed = False

        async def replay():
            nonlocal replayed
            if replayed:
                return await receive()
            replayed = True
            return {"type": "http.request", "body": body, "more_body": False}

        await self.app(scope, replay, send)

    @staticmethod
    async def _reject(scope, receive, send, size):
        logger.warning("Rejected request body of %s bytes", size)
        response = JSONResponse(status_code=413, content={"answer": BODY_TOO_LARGE_ANSWER})
        await response(scope, receive, send)


@asynccontextmanager
async def lifespan(app: FastAPI):
    ensure_api_key(settings)
    app.state.knowledge = load_knowledge(settings.knowledge_path)
    yield


app = FastAPI(title="Medical Guide Assistant", version="0.1.0", lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)
app.add_middleware(BodySizeLimitMiddleware)


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    """Unreadable request bodies get the same fixed answer as pipeline failures."""
    logger.error("Invalid chat request: %s", exc.errors())
    return JSONResponse(status_code=500, content={"answer": FALLBACK_ANSWER})


def get_knowledge(request: Request) -> KnowledgeBase:
    return getattr(request.app.state, "knowledge", None) or KnowledgeBase()


@app.get("/", response_class=PlainTextResponse)
def root():
    return ONLINE_MESSAGE


@app.post("/chat", response_model=ChatResponse, response_model_exclude_none=True)
def chat(request: ChatRequest, knowledge: KnowledgeBase = Depends(get_knowledge)):
    """Answer a text or audio question from the loaded knowledge document.

    Returns the model's ``answer``/``topic`` object, or a fixed 500 body when
    the knowledge text is missing or any downstream step fails.
    """
    logger.info(
        "Received request. Has audio? %s. Question: %s",
        bool(request.audio),
        request.question,
    )
    if not knowledge.is_loaded:
        return JSONResponse(status_code=500, content={"answer": DATA_NOT_LOADED_ANSWER})

    try:
        parsed = answer_question(knowledge, request)
    except Exception:
        logger.exception("AI error")
        return JSONResponse(status_code=500, content={"answer": FALLBACK_ANSWER})

    return ChatResponse(answer=parsed.answer, topic=parsed.topic)
