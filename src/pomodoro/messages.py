"""Completion texts carried by notification effects."""

from __future__ import annotations

from .constants import PHASE_LONG_BREAK, PHASE_SHORT_BREAK

PHASE_LABELS: dict[str, str] = {
    PHASE_SHORT_BREAK: "short break",
    PHASE_LONG_BREAK: "long break",
}


def work_completed_message(next_break_kind: str) -> str:
    """Text sent when a work session ends and a break is due."""
    label = PHASE_LABELS.get(next_break_kind, "break")
    return f"Work session finished! Time for a {label}."


def break_completed_message(break_kind: str) -> str:
    """Text sent when a break runs out."""
    label = PHASE_LABELS.get(break_kind, "break")
    return f"{label.capitalize()} finished! Back to work."
