"""Behavioral components of the demo page."""

from .verdict_renderer import render_verdict, render_fact, render_facts, format_correction
from .quiz_engine import QuizEngine, UnknownOptionError

__all__ = [
    "render_verdict",
    "render_fact",
    "render_facts",
    "format_correction",
    "QuizEngine",
    "UnknownOptionError",
]
