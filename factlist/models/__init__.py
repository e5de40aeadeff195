"""Data models for the Fact Check List demo."""

from .schemas import (
    Verdict,
    Fact,
    VerdictPresentation,
    FactPresentation,
    QuizOption,
    QuizConfig,
    QuizPhase,
    QuizState,
    QuizExplanation,
    QuizFeedback,
    SelectRequest,
    QuizSessionResponse,
)
from .content import DemoContent, DEFAULT_CONTENT, MalformedContentError, load_content

__all__ = [
    "Verdict",
    "Fact",
    "VerdictPresentation",
    "FactPresentation",
    "QuizOption",
    "QuizConfig",
    "QuizPhase",
    "QuizState",
    "QuizExplanation",
    "QuizFeedback",
    "SelectRequest",
    "QuizSessionResponse",
    "DemoContent",
    "DEFAULT_CONTENT",
    "MalformedContentError",
    "load_content",
]
