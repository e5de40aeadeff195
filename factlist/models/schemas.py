"""Pydantic data models for the Fact Check List demo."""

from enum import Enum
from typing import Optional, List, Dict, Any
from pydantic import BaseModel, Field, field_validator, model_validator


class Verdict(str, Enum):
    """Accuracy classification of a fact."""
    ACCURATE = "accurate"
    FALSE = "false"
    MISLEADING = "misleading"
    UNVERIFIABLE = "unverifiable"


class Fact(BaseModel):
    """A claim shown on the page together with its verdict."""

    label: str = Field(..., min_length=1, description="The claim text")
    verdict: Verdict = Field(..., description="Accuracy classification of the claim")
    correction: Optional[str] = Field(
        default=None,
        description="Replacement value for a false or misleading claim"
    )

    class Config:
        frozen = True
        json_schema_extra = {
            "example": {
                "label": "World War I began in 1915.",
                "verdict": "false",
                "correction": "1914"
            }
        }


class VerdictPresentation(BaseModel):
    """Visual representation of a verdict."""

    verdict: Verdict
    icon: str = Field(..., min_length=1, description="Icon glyph identifier")
    label_text: str = Field(..., min_length=1, description="Display label")
    color_class: str = Field(..., min_length=1, description="CSS color class")

    class Config:
        frozen = True


class FactPresentation(BaseModel):
    """A fact together with everything the view needs to draw it."""

    fact: Fact
    presentation: VerdictPresentation
    correction_text: Optional[str] = Field(
        default=None,
        description="Rendered correction segment, absent when the fact has no correction"
    )


class QuizOption(BaseModel):
    """One selectable answer of the quiz."""

    id: str = Field(..., min_length=1, description="Identifier, unique within a quiz")
    text: str = Field(..., description="Statement shown to the user")
    correct: bool = Field(..., description="Ground truth: whether the statement is accurate")
    explanation: str = Field(default="", description="One-sentence justification")

    class Config:
        frozen = True


class QuizConfig(BaseModel):
    """Static configuration of a "spot the error" quiz."""

    title: str = "Interactive Quiz: Spot the Error"
    prompt: str = "Select the statement that is inaccurate."
    options: List[QuizOption] = Field(..., min_length=1)
    correct_message: str = Field(..., description="Shown when the inaccurate option is picked")
    incorrect_message: str = Field(
        ...,
        description="Shown for any other pick; may reference {option_id}"
    )

    @field_validator("options")
    @classmethod
    def check_options(cls, options: List[QuizOption]) -> List[QuizOption]:
        ids = [option.id for option in options]
        duplicates = sorted({i for i in ids if ids.count(i) > 1})
        if duplicates:
            raise ValueError(f"Duplicate option ids: {duplicates}")

        inaccurate = [option.id for option in options if not option.correct]
        if len(inaccurate) != 1:
            raise ValueError(
                f"Exactly one option must be inaccurate, found {len(inaccurate)}: {inaccurate}"
            )
        return options

    @field_validator("incorrect_message")
    @classmethod
    def check_incorrect_message(cls, message: str) -> str:
        try:
            message.format(option_id="A")
        except (KeyError, IndexError, ValueError) as e:
            raise ValueError(
                f"incorrect_message may only reference {{option_id}}: {e!r}"
            ) from e
        return message

    @property
    def inaccurate_option(self) -> QuizOption:
        """The single option the user is asked to identify."""
        return next(option for option in self.options if not option.correct)

    def get_option(self, option_id: str) -> Optional[QuizOption]:
        for option in self.options:
            if option.id == option_id:
                return option
        return None

    class Config:
        frozen = True


class QuizPhase(str, Enum):
    """Phase of the quiz state machine."""
    UNANSWERED = "unanswered"
    ANSWERED = "answered"


class QuizState(BaseModel):
    """State of a single quiz instance.

    ``answered_id`` is the selection that was evaluated. It is frozen at
    evaluation time, so ``selected_id`` may move on while feedback stays
    put until the next evaluation.
    """

    phase: QuizPhase = Field(default=QuizPhase.UNANSWERED)
    selected_id: Optional[str] = Field(default=None, description="Currently selected option")
    answered_id: Optional[str] = Field(default=None, description="Option that was evaluated")

    @model_validator(mode="after")
    def check_phase(self) -> "QuizState":
        if self.phase == QuizPhase.ANSWERED and not self.answered_id:
            raise ValueError("An answered quiz requires an evaluated option")
        if self.phase == QuizPhase.UNANSWERED and self.answered_id is not None:
            raise ValueError("An unanswered quiz cannot carry an evaluated option")
        return self

    @property
    def submitted(self) -> bool:
        return self.phase == QuizPhase.ANSWERED

    class Config:
        frozen = True


class QuizExplanation(BaseModel):
    """Ground truth for one option, revealed with the feedback."""

    option_id: str
    status_label: str = Field(..., description='"Accurate" or "False"')
    justification: str


class QuizFeedback(BaseModel):
    """Feedback derived from an answered quiz."""

    is_correct_pick: bool
    message: str
    explanations: List[QuizExplanation] = Field(default_factory=list)


# API Request/Response Models

class SelectRequest(BaseModel):
    """Request model for selecting a quiz option."""

    option_id: str = Field(..., min_length=1, max_length=64)

    class Config:
        json_schema_extra = {
            "example": {
                "option_id": "B"
            }
        }


class QuizSessionResponse(BaseModel):
    """Response model for quiz session endpoints."""

    session_id: str = Field(..., description="Unique session identifier")
    state: QuizState
    submitted: bool
    can_evaluate: bool = Field(..., description="Whether the check-answer action is available")
    options: List[QuizOption] = Field(default_factory=list)
    feedback: Optional[QuizFeedback] = Field(
        default=None,
        description="Feedback (when answered)"
    )

    @classmethod
    def from_snapshot(cls, session_id: str, snapshot: Dict[str, Any]) -> "QuizSessionResponse":
        return cls(session_id=session_id, **snapshot)
