"""
ReadingRoom Viewer - Student-facing rendering of reading assignments.

This module provides:
- Exercise item extraction and answer checking
- Scoring
- HTML rendering of the paragraph and exercise cards
"""

from .exercise import (
    ExerciseItem,
    get_exercise_css,
    build_exercise,
    check_answer,
    calculate_score,
    render_paragraph,
    render_exercise_item,
    render_exercise,
    render_score,
)

__all__ = [
    "ExerciseItem",
    "get_exercise_css",
    "build_exercise",
    "check_answer",
    "calculate_score",
    "render_paragraph",
    "render_exercise_item",
    "render_exercise",
    "render_score",
]
