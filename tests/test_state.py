from unittest.mock import MagicMock, patch

import requests

from newsanalyzer.client import analyze_text
from newsanalyzer.errors import FAILURE_MESSAGE, VALIDATION_MESSAGE, AnalysisFailure
from newsanalyzer.models import AnalysisResult
from newsanalyzer.state import AnalyzerState, Status, submit

from tests.conftest import make_response

LONG_TEXT = "Government secretly replaces all tap water with lemonade."

RESULT = AnalysisResult(
    credibility_score=12,
    analysis="Implausible claim with no sources.",
    red_flags=["No named sources", "Sensational language"],
    recommendations=["Check official water utility statements"],
)


def test_short_text_never_calls_analyze():
    analyze = MagicMock()
    state = submit(AnalyzerState(), "too short", analyze)

    analyze.assert_not_called()
    assert state.status is Status.IDLE
    assert state.result is None
    assert [n.message for n in state.drain_notifications()] == [VALIDATION_MESSAGE]


def test_short_text_keeps_previous_result():
    state = AnalyzerState(status=Status.SUCCESS, result=RESULT)
    submit(state, "   tiny   ", MagicMock())
    assert state.status is Status.SUCCESS
    assert state.result is RESULT


def test_twenty_a_characters_is_sent():
    analyze = MagicMock(return_value=RESULT)
    state = submit(AnalyzerState(), "a" * 20, analyze)

    analyze.assert_called_once_with("a" * 20)
    assert state.status is Status.SUCCESS
    assert state.result is RESULT
    assert not state.loading
    assert state.drain_notifications() == []


def test_loading_while_request_in_flight():
    state = AnalyzerState()
    seen = {}

    def analyze(text):
        seen["loading"] = state.loading
        seen["result"] = state.result
        return RESULT

    state.result = RESULT
    submit(state, LONG_TEXT, analyze)
    assert seen == {"loading": True, "result": None}
    assert not state.loading


def test_start_refuses_second_submission_while_loading():
    state = AnalyzerState()
    assert state.start(LONG_TEXT)
    assert not state.start(LONG_TEXT + " again")
    assert state.pending == LONG_TEXT


def test_analysis_failure_resets_loading_and_toasts():
    analyze = MagicMock(side_effect=AnalysisFailure("completion is not valid JSON"))
    state = submit(AnalyzerState(), LONG_TEXT, analyze)

    assert state.status is Status.ERROR
    assert not state.loading
    assert state.result is None
    notes = state.drain_notifications()
    assert [(n.level, n.message) for n in notes] == [("error", FAILURE_MESSAGE)]


def test_unexpected_exception_is_reported_generically():
    state = submit(AnalyzerState(), LONG_TEXT, MagicMock(side_effect=KeyError("completion")))
    assert state.status is Status.ERROR
    assert [n.message for n in state.drain_notifications()] == [FAILURE_MESSAGE]


def test_network_rejection_end_to_end(settings):
    with patch("newsanalyzer.client.requests.post", side_effect=requests.Timeout("slow")) as post:
        state = submit(AnalyzerState(), LONG_TEXT, lambda t: analyze_text(t, settings))

    post.assert_called_once()
    assert not state.loading
    assert state.result is None
    assert [n.message for n in state.drain_notifications()] == [FAILURE_MESSAGE]


def test_non_json_completion_end_to_end(settings):
    with patch("newsanalyzer.client.requests.post") as post:
        post.return_value = make_response({"completion": "Sorry, I cannot help with that."})
        state = submit(AnalyzerState(), LONG_TEXT, lambda t: analyze_text(t, settings))

    assert state.result is None
    assert state.status is Status.ERROR
    assert [n.message for n in state.drain_notifications()] == [FAILURE_MESSAGE]


def test_default_analyzer_reads_settings_from_env(monkeypatch, good_completion):
    monkeypatch.setenv("ANALYZER_ENDPOINT", "https://env.example.test/llm")
    with patch("newsanalyzer.client.requests.post") as post:
        post.return_value = make_response({"completion": good_completion})
        state = AnalyzerState()
        assert state.start(LONG_TEXT)
        state.run()

    assert post.call_args.args[0] == "https://env.example.test/llm"
    assert state.result.credibility_score == 85


def test_new_submission_replaces_result():
    first = submit(AnalyzerState(), LONG_TEXT, MagicMock(return_value=RESULT))
    second_result = RESULT.model_copy(update={"credibility_score": 90})
    submit(first, LONG_TEXT, MagicMock(return_value=second_result))
    assert first.result.credibility_score == 90


def test_padded_text_is_sent_as_typed():
    text = "  Breaking: officials deny the moon landing report\n"
    analyze = MagicMock(return_value=RESULT)
    submit(AnalyzerState(), text, analyze)
    analyze.assert_called_once_with(text)


def test_padded_text_reaches_user_turn_verbatim(settings, good_completion):
    text = "\t Breaking: officials deny the moon landing report  \n"
    with patch("newsanalyzer.client.requests.post") as post:
        post.return_value = make_response({"completion": good_completion})
        submit(AnalyzerState(), text, lambda t: analyze_text(t, settings))

    user_turn = post.call_args.kwargs["json"]["messages"][1]["content"]
    assert text in user_turn


def test_padding_does_not_count_toward_length():
    analyze = MagicMock()
    state = submit(AnalyzerState(), "      " + "a" * 19 + "      ", analyze)
    analyze.assert_not_called()
    assert [n.message for n in state.drain_notifications()] == [VALIDATION_MESSAGE]
