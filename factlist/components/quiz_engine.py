"""Quiz Engine for the "spot the error" quiz."""

import logging
from typing import Any, Dict, List, Optional

from ..models.schemas import (
    QuizConfig,
    QuizExplanation,
    QuizFeedback,
    QuizPhase,
    QuizState,
)

logger = logging.getLogger(__name__)


class UnknownOptionError(ValueError):
    """Raised when selecting an option id the quiz does not define."""


class QuizEngine:
    """State machine behind the quiz widget.

    The quiz is either unanswered or answered. Selecting an option is
    allowed in both phases; evaluating freezes the current selection as
    the evaluated answer, and feedback is derived from that frozen answer
    until the next evaluation or a reset.
    """

    def __init__(self, config: QuizConfig):
        """Initialize the Quiz Engine.

        Args:
            config: Quiz options and messages
        """
        self.config = config
        self._state = QuizState()

    @property
    def state(self) -> QuizState:
        return self._state

    @property
    def selected_id(self) -> Optional[str]:
        return self._state.selected_id

    @property
    def submitted(self) -> bool:
        return self._state.submitted

    @property
    def can_evaluate(self) -> bool:
        """Whether the check-answer action is available."""
        return bool(self._state.selected_id)

    def select(self, option_id: str) -> QuizState:
        """Select an option; the last selection wins.

        Args:
            option_id: Id of one of the configured options

        Returns:
            The new state

        Raises:
            UnknownOptionError: If the quiz has no option with this id
        """
        if self.config.get_option(option_id) is None:
            raise UnknownOptionError(
                f"Unknown option: {option_id}. "
                f"Choose from: {[o.id for o in self.config.options]}"
            )

        self._state = self._state.model_copy(update={"selected_id": option_id})
        logger.debug(f"Selected option {option_id} ({self._state.phase.value})")
        return self._state

    def evaluate(self) -> bool:
        """Submit the current selection.

        Returns:
            True if the quiz moved to the answered phase, False when there
            was nothing selected (no-op)
        """
        if not self.can_evaluate:
            logger.debug("Evaluate requested without a selection, ignoring")
            return False

        self._state = QuizState(
            phase=QuizPhase.ANSWERED,
            selected_id=self._state.selected_id,
            answered_id=self._state.selected_id,
        )
        logger.info(f"Evaluated answer {self._state.answered_id}")
        return True

    def reset(self) -> QuizState:
        """Return to the initial unanswered state."""
        self._state = QuizState()
        logger.debug("Quiz reset")
        return self._state

    def explanations(self) -> List[QuizExplanation]:
        """Ground truth for every option, in configured order."""
        return [
            QuizExplanation(
                option_id=option.id,
                status_label="Accurate" if option.correct else "False",
                justification=option.explanation,
            )
            for option in self.config.options
        ]

    def feedback(self) -> Optional[QuizFeedback]:
        """Feedback for the evaluated answer, or None while unanswered."""
        if not self._state.submitted:
            return None

        inaccurate_id = self.config.inaccurate_option.id
        is_correct_pick = self._state.answered_id == inaccurate_id

        if is_correct_pick:
            message = self.config.correct_message
        else:
            message = self.config.incorrect_message.format(option_id=inaccurate_id)

        return QuizFeedback(
            is_correct_pick=is_correct_pick,
            message=message,
            explanations=self.explanations(),
        )

    def snapshot(self) -> Dict[str, Any]:
        """Everything the view layer needs to draw the quiz."""
        return {
            "state": self._state,
            "submitted": self._state.submitted,
            "can_evaluate": self.can_evaluate,
            "options": list(self.config.options),
            "feedback": self.feedback(),
        }
