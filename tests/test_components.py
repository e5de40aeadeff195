"""Tests for the Fact Check List demo components."""

import json

import pytest
from pydantic import ValidationError
from unittest.mock import Mock

from factlist.models.schemas import (
    Fact,
    QuizConfig,
    QuizOption,
    QuizPhase,
    QuizState,
    Verdict,
)
from factlist.models.content import DEFAULT_CONTENT, MalformedContentError, load_content
from factlist.components.verdict_renderer import (
    _PRESENTATIONS,
    _check_presentations,
    format_correction,
    render_fact,
    render_facts,
    render_verdict,
)
from factlist.components.quiz_engine import QuizEngine, UnknownOptionError
from factlist.services.actions import (
    ActionService,
    FileDownloader,
    LinkOpener,
    LocalFileDownloader,
)


@pytest.fixture
def engine():
    return QuizEngine(DEFAULT_CONTENT.quiz)


class TestDataModels:
    """Test Pydantic data models."""

    def test_fact_creation(self):
        """Test Fact model creation."""
        fact = Fact(label="World War I began in 1915.", verdict="false", correction="1914")

        assert fact.verdict == Verdict.FALSE
        assert fact.correction == "1914"

    def test_fact_rejects_unknown_verdict(self):
        """Unknown verdict tags fail at the model boundary."""
        with pytest.raises(ValidationError):
            Fact(label="Some claim", verdict="probably")

    def test_quiz_config_requires_single_inaccurate_option(self):
        """A quiz needs exactly one inaccurate option."""
        with pytest.raises(ValidationError):
            QuizConfig(
                options=[
                    QuizOption(id="A", text="a", correct=False),
                    QuizOption(id="B", text="b", correct=False),
                ],
                correct_message="yes",
                incorrect_message="no",
            )

        with pytest.raises(ValidationError):
            QuizConfig(
                options=[QuizOption(id="A", text="a", correct=True)],
                correct_message="yes",
                incorrect_message="no",
            )

    def test_quiz_config_rejects_duplicate_ids(self):
        """Option ids are unique within a quiz."""
        with pytest.raises(ValidationError):
            QuizConfig(
                options=[
                    QuizOption(id="A", text="a", correct=True),
                    QuizOption(id="A", text="b", correct=False),
                ],
                correct_message="yes",
                incorrect_message="no",
            )

    def test_default_quiz_configuration(self):
        """The built-in quiz has options A, B, C with B inaccurate."""
        quiz = DEFAULT_CONTENT.quiz

        assert [o.id for o in quiz.options] == ["A", "B", "C"]
        assert quiz.inaccurate_option.id == "B"

    def test_answered_state_requires_evaluated_option(self):
        """An answered quiz with no evaluated option is not representable."""
        with pytest.raises(ValidationError):
            QuizState(phase=QuizPhase.ANSWERED)

        with pytest.raises(ValidationError):
            QuizState(phase=QuizPhase.UNANSWERED, answered_id="B")

    def test_initial_state(self):
        state = QuizState()

        assert state.selected_id is None
        assert not state.submitted


class TestVerdictRenderer:
    """Test the verdict-to-presentation mapping."""

    @pytest.mark.parametrize(
        "verdict,label",
        [
            (Verdict.ACCURATE, "Accurate"),
            (Verdict.FALSE, "False"),
            (Verdict.MISLEADING, "Misleading"),
            (Verdict.UNVERIFIABLE, "Unverifiable"),
        ],
    )
    def test_labels(self, verdict, label):
        """Each verdict renders its exact label with an icon and color."""
        presentation = render_verdict(verdict)

        assert presentation.label_text == label
        assert presentation.icon
        assert presentation.color_class
        assert presentation.verdict == verdict

    def test_mapping_is_total_and_injective(self):
        """Every verdict has a presentation and labels never collide."""
        labels = [render_verdict(v).label_text for v in Verdict]

        assert len(labels) == len(Verdict)
        assert len(set(labels)) == len(labels)

    def test_semantic_colors(self):
        assert "emerald" in render_verdict(Verdict.ACCURATE).color_class
        assert "rose" in render_verdict(Verdict.FALSE).color_class
        assert "amber" in render_verdict(Verdict.MISLEADING).color_class
        assert "slate" in render_verdict(Verdict.UNVERIFIABLE).color_class

    def test_missing_presentation_fails(self):
        """A verdict without a presentation is rejected when the table is checked."""
        table = {v: p for v, p in _PRESENTATIONS.items() if v != Verdict.UNVERIFIABLE}

        with pytest.raises(RuntimeError, match="unverifiable"):
            _check_presentations(table)

        _check_presentations(_PRESENTATIONS)

    def test_rejects_raw_strings(self):
        """Only Verdict members are accepted."""
        with pytest.raises(ValueError):
            render_verdict("probably")

    def test_correction_segment(self):
        """A correction is surfaced with the arrow prefix."""
        fact = Fact(label="The Eiffel Tower is in Berlin.", verdict=Verdict.FALSE, correction="It's in Paris.")

        rendered = render_fact(fact)

        assert rendered.correction_text == "→ Correction: It's in Paris."
        assert rendered.presentation.label_text == "False"

    def test_missing_correction_is_omitted(self):
        fact = Fact(label="Water boils at 100°C at sea level.", verdict=Verdict.ACCURATE)

        assert render_fact(fact).correction_text is None
        assert format_correction("") is None

    def test_render_facts_preserves_order(self):
        rendered = render_facts(DEFAULT_CONTENT.facts)

        assert [r.fact.label for r in rendered] == [f.label for f in DEFAULT_CONTENT.facts]


class TestQuizEngine:
    """Test the quiz state machine."""

    def test_starts_unanswered(self, engine):
        assert engine.selected_id is None
        assert not engine.submitted
        assert not engine.can_evaluate
        assert engine.feedback() is None

    def test_last_selection_wins(self, engine):
        """select(x) then select(y) leaves y selected."""
        engine.select("A")
        engine.select("C")

        assert engine.selected_id == "C"
        assert engine.can_evaluate

    def test_select_unknown_option(self, engine):
        """Unknown option ids are rejected and leave the selection unchanged."""
        engine.select("A")

        with pytest.raises(UnknownOptionError):
            engine.select("Z")

        assert engine.selected_id == "A"

    def test_evaluate_without_selection_is_noop(self, engine):
        assert engine.evaluate() is False
        assert not engine.submitted
        assert engine.state == QuizState()

    def test_evaluate_keeps_selection(self, engine):
        """evaluate() does not alter the selection and marks the quiz submitted."""
        engine.select("A")

        assert engine.evaluate() is True
        assert engine.selected_id == "A"
        assert engine.submitted
        assert engine.state.phase == QuizPhase.ANSWERED

    def test_correct_catch(self, engine):
        """Picking B yields the positive message."""
        engine.select("B")
        engine.evaluate()

        feedback = engine.feedback()

        assert feedback.is_correct_pick
        assert feedback.message.startswith("Nice catch!")

    def test_wrong_catch_names_inaccurate_option(self, engine):
        """Picking A points the user at B."""
        engine.select("A")
        engine.evaluate()

        feedback = engine.feedback()

        assert not feedback.is_correct_pick
        assert feedback.message.startswith("Not quite.")
        assert '"B"' in feedback.message

    def test_explanations_always_listed(self, engine):
        """Explanations cover every option regardless of the pick."""
        engine.select("C")
        engine.evaluate()

        explanations = engine.feedback().explanations

        assert [e.option_id for e in explanations] == ["A", "B", "C"]
        assert [e.status_label for e in explanations] == ["Accurate", "False", "Accurate"]
        assert all(e.justification for e in explanations)

    def test_reset_returns_to_initial_state(self, engine):
        """reset() clears selection and submission from any state."""
        engine.reset()
        assert engine.state == QuizState()

        engine.select("A")
        engine.evaluate()
        engine.reset()

        assert engine.selected_id is None
        assert not engine.submitted
        assert engine.feedback() is None

    def test_reset_between_attempts(self, engine):
        """C, evaluate, reset, B, evaluate ends with the positive message."""
        engine.select("C")
        engine.evaluate()
        assert not engine.feedback().is_correct_pick

        engine.reset()
        assert engine.feedback() is None

        engine.select("B")
        engine.evaluate()
        assert engine.feedback().is_correct_pick

    def test_feedback_frozen_until_reevaluated(self, engine):
        """Re-selecting after evaluation keeps the old feedback until the next check."""
        engine.select("A")
        engine.evaluate()

        engine.select("B")

        assert engine.submitted
        assert engine.selected_id == "B"
        assert not engine.feedback().is_correct_pick

        engine.evaluate()
        assert engine.feedback().is_correct_pick

    def test_snapshot(self, engine):
        engine.select("B")
        snapshot = engine.snapshot()

        assert snapshot["can_evaluate"]
        assert not snapshot["submitted"]
        assert snapshot["feedback"] is None
        assert len(snapshot["options"]) == 3

    def test_custom_configuration(self):
        """The inaccurate option comes from configuration, not a fixed id."""
        config = QuizConfig(
            options=[
                QuizOption(id="x", text="Paris is in France.", correct=True),
                QuizOption(id="y", text="The Sun orbits the Earth.", correct=False),
            ],
            correct_message="Right!",
            incorrect_message="Wrong, it was {option_id}.",
        )
        engine = QuizEngine(config)

        engine.select("x")
        engine.evaluate()

        assert engine.feedback().message == "Wrong, it was y."


class TestContentLoading:
    """Test the content boundary."""

    def test_default_content(self):
        content = load_content()

        assert content is DEFAULT_CONTENT
        assert len(content.facts) == 3
        assert all(f.verdict == Verdict.FALSE for f in content.facts)

    def test_load_from_file(self, tmp_path):
        path = tmp_path / "content.json"
        path.write_text(DEFAULT_CONTENT.model_dump_json(), encoding="utf-8")

        content = load_content(path)

        assert content == DEFAULT_CONTENT

    def test_unknown_verdict_is_malformed(self, tmp_path):
        data = DEFAULT_CONTENT.model_dump(mode="json")
        data["facts"][0]["verdict"] = "sort-of"
        path = tmp_path / "content.json"
        path.write_text(json.dumps(data), encoding="utf-8")

        with pytest.raises(MalformedContentError):
            load_content(path)

    def test_invalid_json_is_malformed(self, tmp_path):
        path = tmp_path / "content.json"
        path.write_text("{not json", encoding="utf-8")

        with pytest.raises(MalformedContentError):
            load_content(path)

    @pytest.mark.parametrize("template", ["Wrong {answer}", "Wrong {}", "Wrong {option_id"])
    def test_bad_incorrect_message_is_malformed(self, tmp_path, template):
        """Message templates are checked when content loads, not when feedback is shown."""
        data = DEFAULT_CONTENT.model_dump(mode="json")
        data["quiz"]["incorrect_message"] = template
        path = tmp_path / "content.json"
        path.write_text(json.dumps(data), encoding="utf-8")

        with pytest.raises(MalformedContentError):
            load_content(path)

    def test_empty_path_uses_default_content(self):
        """An empty CONTENT_FILE value means the built-in content."""
        assert load_content("") is DEFAULT_CONTENT

    def test_missing_file_is_malformed(self, tmp_path):
        with pytest.raises(MalformedContentError):
            load_content(tmp_path / "missing.json")


class TestActionService:
    """Test the environment actions."""

    def test_start_fact_checking_opens_url(self):
        opener = Mock(spec=LinkOpener)
        service = ActionService(
            link_opener=opener,
            file_downloader=Mock(spec=FileDownloader),
            start_url="https://chat.openai.com/",
        )

        service.start_fact_checking()

        opener.open.assert_called_once_with("https://chat.openai.com/")

    def test_download_guide(self):
        downloader = Mock(spec=FileDownloader)
        service = ActionService(
            link_opener=Mock(spec=LinkOpener),
            file_downloader=downloader,
            guide_asset_path="/fact-checklist-pattern-guide.pdf",
            guide_filename="fact-checklist-pattern-guide.pdf",
        )

        service.download_guide()

        downloader.download.assert_called_once_with(
            "/fact-checklist-pattern-guide.pdf",
            "fact-checklist-pattern-guide.pdf",
        )

    def test_failures_are_not_raised(self):
        """Blocked popups or downloads never reach the caller."""
        opener = Mock(spec=LinkOpener)
        opener.open.side_effect = RuntimeError("popup blocked")
        downloader = Mock(spec=FileDownloader)
        downloader.download.side_effect = OSError("download blocked")

        service = ActionService(link_opener=opener, file_downloader=downloader)

        service.start_fact_checking()
        service.download_guide()

        opener.open.assert_called_once()
        downloader.download.assert_called_once()

    def test_local_file_downloader(self, tmp_path):
        static_dir = tmp_path / "static"
        static_dir.mkdir()
        (static_dir / "guide.pdf").write_bytes(b"%PDF-1.4")
        destination = tmp_path / "downloads"

        LocalFileDownloader(destination, static_dir=static_dir).download("/guide.pdf", "my-guide.pdf")

        assert (destination / "my-guide.pdf").read_bytes() == b"%PDF-1.4"

    def test_local_file_downloader_stays_in_static_dir(self, tmp_path):
        static_dir = tmp_path / "static"
        static_dir.mkdir()
        (tmp_path / "secret.txt").write_text("secret")

        downloader = LocalFileDownloader(tmp_path / "downloads", static_dir=static_dir)

        with pytest.raises(ValueError):
            downloader.download("/../secret.txt", "secret.txt")


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
