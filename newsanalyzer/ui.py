# newsanalyzer/ui.py
import streamlit as st

from newsanalyzer.client import analyze_text
from newsanalyzer.render import render_result
from newsanalyzer.state import AnalyzerState

STATE_KEY = "analyzer"
TEXT_KEY = "news_text"
BUTTON_KEY = "analyze"

TOAST_ICONS = {"warning": "⚠️", "error": "🚨"}


def _state() -> AnalyzerState:
    if STATE_KEY not in st.session_state:
        st.session_state[STATE_KEY] = AnalyzerState()
    return st.session_state[STATE_KEY]


def _on_text_change():
    _state().set_text(st.session_state.get(TEXT_KEY, ""))


def _on_analyze():
    _state().start(st.session_state.get(TEXT_KEY, ""))


def render_ui():
    state = _state()

    st.title("🛡️ Fake News Analyzer")
    st.caption("Paste a news article or message to get a credibility assessment.")

    st.text_area(
        "Paste news article or text:",
        key=TEXT_KEY,
        height=120,
        placeholder="Enter the text you want to analyze...",
        on_change=_on_text_change,
    )

    # the spinner takes the button's place until the request settles
    slot = st.empty()
    if state.loading:
        with slot, st.spinner("Analyzing..."):
            state.run(analyze_text)
    slot.button("Analyze Text", key=BUTTON_KEY, type="primary", on_click=_on_analyze, disabled=state.loading)

    for n in state.drain_notifications():
        st.toast(n.message, icon=TOAST_ICONS.get(n.level))

    if state.result is not None:
        render_result(state.result)
