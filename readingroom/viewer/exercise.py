"""
Exercise renderer - Student-facing view of a reading assignment.

Provides:
- Exercise item extraction from actioned words
- Answer checking per action type
- Scoring support
- HTML rendering of the paragraph and the exercise cards
"""

import html
from dataclasses import dataclass
from typing import Optional

from readingroom.authoring.document import list_actioned_words
from readingroom.authoring.randomizer import DEFAULT_PLACEHOLDER, hidden_cells, present_action
from readingroom.schemas import (
    ContentDocument,
    DefineAction,
    FillAction,
    IllustrateAction,
    WordAction,
)


SCORED_KINDS = ("define", "fill")


@dataclass
class ExerciseItem:
    """One interactive word with its student-facing prompt."""
    index: int
    address: str
    word: str
    kind: str
    prompt: tuple
    action: WordAction


def get_exercise_css() -> str:
    """Get CSS styles for exercise display."""
    return """
    <style>
    .exercise-paragraph {
        font-size: 1.15em;
        line-height: 2;
        margin-bottom: 1.5em;
    }
    .exercise-word-active {
        background: #fff3e0;
        border-bottom: 2px solid #e65100;
        padding: 0 0.15em;
        border-radius: 3px;
    }
    .exercise-card {
        background: #e3f2fd;
        border-radius: 12px;
        padding: 1.2em;
        margin: 1em 0;
        border-left: 4px solid #1976D2;
    }
    .exercise-title {
        font-weight: 600;
        color: #1565C0;
        margin-bottom: 0.6em;
    }
    .exercise-chip {
        display: inline-block;
        background: white;
        border: 1px solid #90caf9;
        border-radius: 6px;
        padding: 0.2em 0.6em;
        margin: 0.2em;
    }
    .exercise-letter {
        display: inline-block;
        min-width: 1.2em;
        text-align: center;
        font-family: monospace;
        font-size: 1.3em;
        margin: 0 0.1em;
    }
    .exercise-letter-hidden {
        color: #e65100;
    }
    .exercise-images img {
        width: 30%;
        margin-right: 3%;
        border-radius: 8px;
    }
    .exercise-score-box {
        background: #e8f5e9;
        border-radius: 8px;
        padding: 1em;
        margin-top: 1.5em;
        text-align: center;
    }
    .exercise-score-value {
        font-size: 2em;
        font-weight: 700;
        color: #388E3C;
    }
    </style>
    """


def build_exercise(document: ContentDocument, placeholder: str = DEFAULT_PLACEHOLDER) -> list[ExerciseItem]:
    """Extract one exercise item per actioned word, in document order."""
    items = []
    for idx, entry in enumerate(list_actioned_words(document)):
        items.append(ExerciseItem(
            index=idx,
            address=entry.address,
            word=entry.text,
            kind=entry.action.type,
            prompt=present_action(entry.action, placeholder),
            action=entry.action,
        ))
    return items


# -----------------------------------------------------------------------------
# Answer checking
# -----------------------------------------------------------------------------

def check_answer(action: WordAction, answer) -> bool:
    """
    Check a student's answer for one action.

    - Define: answer is the token sequence in the student's order
    - Fill: answer is the completed word (case-insensitive)
    - Illustrate: answer is the index of the chosen image; any valid index
      counts as answered
    """
    if isinstance(action, DefineAction):
        if isinstance(answer, str):
            answer = answer.split()
        return list(answer) == action.definition.split()
    if isinstance(action, FillAction):
        return isinstance(answer, str) and answer.strip().upper() == action.original_word.upper()
    if isinstance(action, IllustrateAction):
        return isinstance(answer, int) and 0 <= answer < len(action.images)
    raise TypeError(f"Unknown word action: {action!r}")


def calculate_score(items: list[ExerciseItem], answers: dict) -> dict:
    """
    Score a set of answers keyed by word address.

    Unanswered items count as incorrect. Illustrate items have no correct
    image, so they are left out of the score.
    """
    scored = [item for item in items if item.kind in SCORED_KINDS]
    total = len(scored)
    if total == 0:
        return {"score": 1.0, "percent": 100, "correct": 0, "total": 0}

    correct = sum(
        1 for item in scored
        if item.address in answers and check_answer(item.action, answers[item.address])
    )
    score = correct / total
    return {
        "score": round(score, 2),
        "percent": round(score * 100),
        "correct": correct,
        "total": total,
    }


# -----------------------------------------------------------------------------
# Rendering
# -----------------------------------------------------------------------------

def render_paragraph(document: ContentDocument) -> str:
    """Render the paragraph with actioned words highlighted."""
    sentences = []
    for sentence in document.sentences:
        words = []
        for word in sentence.words:
            text = html.escape(word.text)
            if word.action is not None:
                words.append(
                    f'<span class="exercise-word-active" data-address="{word.address}">{text}</span>'
                )
            else:
                words.append(text)
        sentences.append(' '.join(words))
    return f'<div class="exercise-paragraph">{" ".join(sentences)}</div>'


def render_exercise_item(item: ExerciseItem, placeholder: str = DEFAULT_PLACEHOLDER) -> str:
    """Render a single exercise card."""
    parts = ['<div class="exercise-card">']
    word = html.escape(item.word)

    if item.kind == "define":
        parts.append(f'<div class="exercise-title">Rebuild the definition of "{word}"</div>')
        for token in item.prompt:
            parts.append(f'<span class="exercise-chip">{html.escape(token)}</span>')
    elif item.kind == "fill":
        parts.append('<div class="exercise-title">Fill in the missing letters</div>')
        hidden = hidden_cells(item.action.original_word, item.action.letters_to_hide)
        for cell, is_hidden in zip(item.prompt, hidden):
            css = "exercise-letter exercise-letter-hidden" if is_hidden else "exercise-letter"
            parts.append(f'<span class="{css}">{html.escape(cell)}</span>')
    elif item.kind == "illustrate":
        parts.append(f'<div class="exercise-title">Which picture shows "{word}"?</div>')
        parts.append('<div class="exercise-images">')
        for image in item.prompt:
            alt = html.escape(image.alt_text or item.word, quote=True)
            parts.append(f'<img src="{html.escape(image.url, quote=True)}" alt="{alt}">')
        parts.append('</div>')
    else:
        raise ValueError(f"Unknown exercise kind: {item.kind}")

    parts.append('</div>')
    return ''.join(parts)


def render_exercise(
    document: ContentDocument,
    items: Optional[list[ExerciseItem]] = None,
    placeholder: str = DEFAULT_PLACEHOLDER,
) -> str:
    """Render the full exercise: CSS, highlighted paragraph and every card."""
    items = items if items is not None else build_exercise(document, placeholder)
    parts = [get_exercise_css(), render_paragraph(document)]
    for item in items:
        parts.append(render_exercise_item(item, placeholder))
    return ''.join(parts)


def render_score(score_info: dict) -> str:
    """Render score display."""
    return f"""
    <div class="exercise-score-box">
        <div class="exercise-score-value">{score_info['percent']}%</div>
        <div>{score_info['correct']} of {score_info['total']} correct</div>
    </div>
    """
