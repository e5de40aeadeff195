"""Verdict Renderer: maps a fact's verdict to its visual representation."""

import logging
from typing import Dict, Iterable, List, Optional

from ..models.schemas import Fact, FactPresentation, Verdict, VerdictPresentation

logger = logging.getLogger(__name__)


CORRECTION_PREFIX = "→ Correction: "

_PRESENTATIONS: Dict[Verdict, VerdictPresentation] = {
    Verdict.ACCURATE: VerdictPresentation(
        verdict=Verdict.ACCURATE,
        icon="check-circle-2",
        label_text="Accurate",
        color_class="text-emerald-600",
    ),
    Verdict.FALSE: VerdictPresentation(
        verdict=Verdict.FALSE,
        icon="x-circle",
        label_text="False",
        color_class="text-rose-600",
    ),
    Verdict.MISLEADING: VerdictPresentation(
        verdict=Verdict.MISLEADING,
        icon="alert-triangle",
        label_text="Misleading",
        color_class="text-amber-600",
    ),
    Verdict.UNVERIFIABLE: VerdictPresentation(
        verdict=Verdict.UNVERIFIABLE,
        icon="help-circle",
        label_text="Unverifiable",
        color_class="text-slate-600",
    ),
}


def _check_presentations(table: Dict[Verdict, VerdictPresentation]) -> None:
    """Every Verdict member needs a presentation."""
    missing = [v.value for v in Verdict if v not in table]
    if missing:
        raise RuntimeError(f"No presentation defined for verdicts: {missing}")


_check_presentations(_PRESENTATIONS)


def render_verdict(verdict: Verdict) -> VerdictPresentation:
    """Return the icon, label and color for a verdict.

    Args:
        verdict: One of the Verdict members

    Returns:
        The VerdictPresentation for the verdict

    Raises:
        ValueError: If the value is not a Verdict member
    """
    if not isinstance(verdict, Verdict):
        raise ValueError(
            f"Unknown verdict: {verdict!r}. "
            f"Choose from: {[v.value for v in Verdict]}"
        )
    return _PRESENTATIONS[verdict]


def format_correction(correction: Optional[str]) -> Optional[str]:
    """Render the correction segment, or None when there is nothing to show."""
    if not correction:
        return None
    return f"{CORRECTION_PREFIX}{correction}"


def render_fact(fact: Fact) -> FactPresentation:
    """Compute everything needed to display a single fact."""
    presentation = render_verdict(fact.verdict)
    logger.debug(f"Rendered fact '{fact.label[:40]}' as {presentation.label_text}")

    return FactPresentation(
        fact=fact,
        presentation=presentation,
        correction_text=format_correction(fact.correction),
    )


def render_facts(facts: Iterable[Fact]) -> List[FactPresentation]:
    """Render facts in order."""
    return [render_fact(fact) for fact in facts]
