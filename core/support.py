"""
core/support.py
────────────────────────────────────────────────────────────────────────
Emotional-support ("crisis to calm") helpers: the intensity label shown
next to the slider and a paragraph splitter for the counselor reply.
"""

from __future__ import annotations

import re

from core.models.support import SupportResponse

# (inclusive upper bound, label)
_LABELS = (
    (2, "Calm"),
    (4, "Mild Distress"),
    (6, "Moderate Distress"),
    (8, "High Distress"),
)

_PARAGRAPH_BREAK = re.compile(r"\n\s*\n")


def emotional_label(intensity: int) -> str:
    for bound, label in _LABELS:
        if intensity <= bound:
            return label
    return "Crisis"


def _non_blank_lines(paragraph: str) -> list[str]:
    return [ln.strip() for ln in paragraph.splitlines() if ln.strip()]


def parse_support_response(raw: str | None) -> SupportResponse:
    """
    First paragraph is the message, the second holds coping techniques
    and the third next steps, one per line.  Missing paragraphs come back
    empty.
    """
    paragraphs = _PARAGRAPH_BREAK.split((raw or "").strip())
    paragraphs += [""] * (3 - len(paragraphs))
    return SupportResponse(
        message=paragraphs[0].strip(),
        techniques=_non_blank_lines(paragraphs[1]),
        next_steps=_non_blank_lines(paragraphs[2]),
    )
