# newsanalyzer/render.py
from __future__ import annotations

from typing import List, Union

import streamlit as st

from newsanalyzer.models import AnalysisResult, Band

GOOD_THRESHOLD = 70
WARNING_THRESHOLD = 40

RED_FLAG_ICON = "⚠️"
RECOMMENDATION_ICON = "✅"

Number = Union[int, float]


def band_for_score(score: Number) -> Band:
    if score >= GOOD_THRESHOLD:
        return Band.GOOD
    if score >= WARNING_THRESHOLD:
        return Band.WARNING
    return Band.BAD


def format_score(score: Number) -> str:
    if float(score).is_integer():
        return f"{int(score)}%"
    return f"{score!r}%"


def score_html(score: Number) -> str:
    color = band_for_score(score).color
    return (
        f"<div style='text-align:center'>"
        f"<div style='font-size:18px;font-weight:600'>Credibility Score</div>"
        f"<div style='font-size:48px;font-weight:bold;color:{color}'>{format_score(score)}</div>"
        f"</div>"
    )


def list_items(icon: str, items: List[str]) -> List[str]:
    """One Markdown line per item, in the order received."""
    return [f"{icon} {item}" for item in items]


def render_result(result: AnalysisResult) -> None:
    with st.container(border=True):
        st.markdown(score_html(result.credibility_score), unsafe_allow_html=True)

        st.markdown("### Analysis")
        st.markdown(result.analysis)

        st.markdown("### Red Flags")
        for line in list_items(RED_FLAG_ICON, result.red_flags):
            st.markdown(line)

        st.markdown("### Recommendations")
        for line in list_items(RECOMMENDATION_ICON, result.recommendations):
            st.markdown(line)
