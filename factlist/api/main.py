"""FastAPI main application for the Fact Check List demo."""

import logging
import uuid
from datetime import datetime
from typing import Dict, Optional
from contextlib import asynccontextmanager

from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import FileResponse, RedirectResponse

from .. import __version__
from ..config import settings
from ..models.content import DemoContent, MalformedContentError, load_content
from ..models.schemas import QuizSessionResponse, SelectRequest
from ..components.quiz_engine import QuizEngine, UnknownOptionError
from ..components.verdict_renderer import render_facts
from ..services.actions import resolve_static_asset

# Configure logging
logging.basicConfig(
    level=settings.LOG_LEVEL,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)

# In-memory quiz sessions, one QuizEngine per page view
sessions: Dict[str, Dict] = {}

# Page content (singleton)
_content: Optional[DemoContent] = None


def get_content() -> DemoContent:
    """Get or load the page content."""
    global _content
    if _content is None:
        _content = load_content(settings.CONTENT_FILE)
    return _content


def cleanup_old_sessions():
    """Remove old sessions if storage exceeds limit."""
    if len(sessions) > settings.MAX_SESSIONS_STORED:
        sorted_sessions = sorted(
            sessions.items(),
            key=lambda x: x[1].get("created_at", ""),
        )
        # Remove oldest 10% of sessions
        to_remove = len(sessions) - int(settings.MAX_SESSIONS_STORED * 0.9)
        for session_id, _ in sorted_sessions[:to_remove]:
            del sessions[session_id]
        logger.info(f"Cleaned up {to_remove} old quiz sessions")


def sanitize_error_message(error: Exception) -> str:
    """Sanitize error message to prevent information leakage.

    Args:
        error: The exception that occurred

    Returns:
        Safe error message for clients
    """
    if settings.DEBUG_MODE:
        return str(error)

    if isinstance(error, MalformedContentError):
        return "Page content is misconfigured"
    return "An internal error occurred"


def get_engine(session_id: str) -> QuizEngine:
    if session_id not in sessions:
        raise HTTPException(
            status_code=404,
            detail=f"Quiz session not found: {session_id}"
        )
    return sessions[session_id]["engine"]


def session_response(session_id: str) -> QuizSessionResponse:
    return QuizSessionResponse.from_snapshot(session_id, get_engine(session_id).snapshot())


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan manager."""
    # Startup
    logger.info("Starting Fact Check List demo API...")
    logger.info(f"Content source: {settings.CONTENT_FILE or 'built-in'}")
    logger.info(f"Static assets: {settings.STATIC_DIR}")

    yield

    # Shutdown
    logger.info("Shutting down Fact Check List demo API...")


def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""

    app = FastAPI(
        title="Fact Check List Pattern",
        description="Teaching demo: verdict cards and a spot-the-error quiz",
        version=__version__,
        lifespan=lifespan,
        docs_url="/docs",
        redoc_url="/redoc",
    )

    # Add CORS middleware with configurable origins
    cors_origins = [
        origin.strip()
        for origin in settings.CORS_ORIGINS.split(",")
        if origin.strip()
    ]

    app.add_middleware(
        CORSMiddleware,
        allow_origins=cors_origins,
        allow_credentials=True,
        allow_methods=["GET", "POST", "DELETE"],
        allow_headers=["Content-Type"],
    )

    return app


# Create app instance
app = create_app()


# ==================== Health Check ====================

@app.get("/health")
async def health_check():
    """Health check endpoint."""
    return {
        "status": "healthy",
        "timestamp": datetime.utcnow().isoformat(),
        "version": __version__
    }


@app.get("/config")
async def get_config():
    """Get current configuration (non-sensitive)."""
    return {
        "content_file": settings.CONTENT_FILE,
        "start_url": settings.START_URL,
        "guide_filename": settings.GUIDE_FILENAME,
        "max_sessions_stored": settings.MAX_SESSIONS_STORED,
    }


# ==================== Content ====================

def _load_or_fail() -> DemoContent:
    try:
        return get_content()
    except MalformedContentError as e:
        logger.error(f"Content loading failed: {e}")
        raise HTTPException(
            status_code=500,
            detail=sanitize_error_message(e)
        )


@app.get("/content")
async def get_page_content():
    """Full page content with every fact rendered.

    Returns:
        The static page content plus a ``rendered_facts`` list holding the
        verdict presentation of each fact
    """
    content = _load_or_fail()
    return {
        **content.model_dump(mode="json"),
        "rendered_facts": [
            fact.model_dump(mode="json") for fact in render_facts(content.facts)
        ],
    }


@app.get("/facts")
async def get_facts():
    """Rendered fact cards, in page order."""
    content = _load_or_fail()
    rendered = render_facts(content.facts)
    return {
        "facts": [fact.model_dump(mode="json") for fact in rendered],
        "count": len(rendered)
    }


# ==================== Quiz Sessions ====================

@app.post("/quiz/sessions", response_model=QuizSessionResponse, status_code=201)
async def create_quiz_session():
    """Start a new quiz in the unanswered state."""
    content = _load_or_fail()

    cleanup_old_sessions()

    session_id = str(uuid.uuid4())
    sessions[session_id] = {
        "engine": QuizEngine(content.quiz),
        "created_at": datetime.utcnow().isoformat(),
    }

    logger.info(f"Created quiz session: {session_id}")

    return session_response(session_id)


@app.get("/quiz/sessions/{session_id}", response_model=QuizSessionResponse)
async def get_quiz_session(session_id: str):
    """Current quiz state, with feedback once answered."""
    return session_response(session_id)


@app.post("/quiz/sessions/{session_id}/select", response_model=QuizSessionResponse)
async def select_option(session_id: str, request: SelectRequest):
    """Select a quiz option.

    Selecting after an evaluation keeps the previous feedback until the
    answer is checked again.
    """
    engine = get_engine(session_id)

    try:
        engine.select(request.option_id)
    except UnknownOptionError as e:
        raise HTTPException(status_code=400, detail=str(e))

    return session_response(session_id)


@app.post("/quiz/sessions/{session_id}/evaluate", response_model=QuizSessionResponse)
async def evaluate_answer(session_id: str):
    """Check the selected answer.

    Raises:
        HTTPException: 409 when no option has been selected yet
    """
    engine = get_engine(session_id)

    if not engine.can_evaluate:
        raise HTTPException(
            status_code=409,
            detail="Select an option before checking the answer"
        )

    engine.evaluate()

    return session_response(session_id)


@app.post("/quiz/sessions/{session_id}/reset", response_model=QuizSessionResponse)
async def reset_quiz(session_id: str):
    """Clear the selection and any feedback."""
    get_engine(session_id).reset()
    return session_response(session_id)


@app.delete("/quiz/sessions/{session_id}")
async def delete_quiz_session(session_id: str):
    """Delete a quiz session."""
    if session_id not in sessions:
        raise HTTPException(
            status_code=404,
            detail="Quiz session not found"
        )

    del sessions[session_id]

    return {"message": "Quiz session deleted successfully"}


# ==================== Environment Actions ====================

@app.get("/start")
async def start_fact_checking():
    """Send the browser to the external assistant."""
    logger.info(f"Redirecting to {settings.START_URL}")
    return RedirectResponse(url=settings.START_URL, status_code=307)


@app.get("/guide")
async def download_guide():
    """Serve the Fact Check List Pattern guide as a download."""
    try:
        path = resolve_static_asset(settings.STATIC_DIR, settings.GUIDE_ASSET_PATH)
    except ValueError as e:
        logger.error(f"Invalid guide asset path: {e}")
        raise HTTPException(status_code=500, detail=sanitize_error_message(e))

    if not path.is_file():
        raise HTTPException(status_code=404, detail="Guide not available")

    return FileResponse(
        path,
        filename=settings.GUIDE_FILENAME,
    )


# ==================== Run Server ====================

if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "factlist.api.main:app",
        host=settings.API_HOST,
        port=settings.API_PORT,
        reload=True
    )
