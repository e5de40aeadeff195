"""Static page content and the content loading boundary."""

import json
import logging
from pathlib import Path
from typing import List, Optional, Union

from pydantic import BaseModel, Field, ValidationError

from .schemas import Fact, QuizConfig, QuizOption, Verdict

logger = logging.getLogger(__name__)


class MalformedContentError(ValueError):
    """Raised when page content cannot be loaded or fails validation."""


class ChecklistCategory(BaseModel):
    """One kind of checkable fact (date, name, event...)."""

    name: str
    icon: str


class CaseStudy(BaseModel):
    """Real-world example of the pattern applied to a draft."""

    title: str
    description: str
    claim: str
    corrections: List[str] = Field(default_factory=list)


class CallToAction(BaseModel):
    heading: str
    tagline: str
    start_label: str = "Start Fact-Checking"
    download_label: str = "Download Fact Check List Pattern Guide"


class DemoContent(BaseModel):
    """Everything the page shows, supplied to the components by the view layer."""

    title: str
    intro: str
    flow_steps: List[str] = Field(default_factory=list)
    checklist_categories: List[ChecklistCategory] = Field(default_factory=list)
    facts_heading: str = "Hallucinations vs. Corrected Facts"
    facts: List[Fact] = Field(default_factory=list)
    quiz: QuizConfig
    case_study: Optional[CaseStudy] = None
    cta: Optional[CallToAction] = None
    footer: str = ""


DEFAULT_CONTENT = DemoContent(
    title="Fact Check List Pattern",
    intro=(
        "AI can write fast, but not always accurately. The Fact Check List Pattern "
        "helps you turn fluent text into trustworthy prose by breaking claims into "
        "small, checkable facts and verifying each one before you publish."
    ),
    flow_steps=["Claim", "Checklist", "Verified Output"],
    checklist_categories=[
        ChecklistCategory(name="Date", icon="calendar"),
        ChecklistCategory(name="Name", icon="id-card"),
        ChecklistCategory(name="Event", icon="flag"),
        ChecklistCategory(name="Logic", icon="sigma"),
    ],
    facts=[
        Fact(label="World War I began in 1915.", verdict=Verdict.FALSE, correction="1914"),
        Fact(
            label="Einstein won the Nobel Prize for relativity.",
            verdict=Verdict.FALSE,
            correction="He won in 1921 for the photoelectric effect.",
        ),
        Fact(label="The Eiffel Tower is in Berlin.", verdict=Verdict.FALSE, correction="It's in Paris."),
    ],
    quiz=QuizConfig(
        options=[
            QuizOption(
                id="A",
                text="The Treaty of Versailles was signed in 1919.",
                correct=True,
                explanation="Treaty of Versailles was signed in 1919.",
            ),
            QuizOption(
                id="B",
                text="The Great Wall of China is visible from space with the naked eye.",
                correct=False,
                explanation=(
                    "Astronauts report it's not visible to the naked eye; "
                    "photos require telephoto lenses/conditions."
                ),
            ),
            QuizOption(
                id="C",
                text="The Amazon River flows through Brazil.",
                correct=True,
                explanation="The Amazon River does flow through Brazil.",
            ),
        ],
        correct_message=(
            'Nice catch! "B" is false: it\'s a myth that the Great Wall '
            "is visible unaided from space."
        ),
        incorrect_message=(
            'Not quite. The inaccurate statement is "{option_id}". '
            "Try again or expand the explanations below."
        ),
    ),
    case_study=CaseStudy(
        title="Real-World Case: History Essay Correction",
        description=(
            "A student uses AI to draft an essay. The Fact Check List Pattern "
            "flags each claim before submission."
        ),
        claim="WWI began in 1915 and the Treaty of Versailles was signed in 1920.",
        corrections=[
            "WWI began in 1914",
            "Treaty of Versailles was signed in 1919",
        ],
    ),
    cta=CallToAction(
        heading="Use the Fact Check List Pattern next time you write!",
        tagline="Break claims → Check facts → Publish with confidence.",
    ),
    footer="Built as a teaching demo. No external data fetched.",
)


def load_content(path: Optional[Union[str, Path]] = None) -> DemoContent:
    """Load page content.

    Args:
        path: JSON file with the page content, or None/empty for the built-in content

    Returns:
        Validated DemoContent

    Raises:
        MalformedContentError: If the file is missing, is not JSON, or does
            not describe valid content (unknown verdict tags, a quiz without
            exactly one inaccurate option...)
    """
    if not path:
        return DEFAULT_CONTENT

    path = Path(path)
    logger.info(f"Loading page content from {path}")

    try:
        raw = path.read_text(encoding="utf-8")
    except OSError as e:
        raise MalformedContentError(f"Cannot read content file {path}: {e}") from e

    try:
        data = json.loads(raw)
    except json.JSONDecodeError as e:
        raise MalformedContentError(f"Content file {path} is not valid JSON: {e}") from e

    try:
        content = DemoContent.model_validate(data)
    except ValidationError as e:
        raise MalformedContentError(f"Content file {path} is malformed: {e}") from e

    logger.info(
        f"Loaded {len(content.facts)} facts and {len(content.quiz.options)} quiz options"
    )
    return content
