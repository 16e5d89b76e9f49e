"""Presentation helpers for untrusted model output."""

from __future__ import annotations

import html

from transparentgov.models.insight import InsightState, InsightStatus


def to_html(text: str) -> str:
    """Escape generated text and keep its line breaks."""
    escaped = html.escape(text, quote=True)
    return escaped.replace("\r\n", "\n").replace("\n", "<br />")


def render_state(state: InsightState, loading_text: str = "Generating...") -> str:
    """HTML fragment for one insight slot; empty while idle."""
    if state.status is InsightStatus.LOADING:
        return to_html(loading_text)
    if state.status is InsightStatus.IDLE:
        return ""
    return to_html(state.message)
