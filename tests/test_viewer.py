"""
Exercise viewer tests: item extraction, answer checking, scoring and HTML.
"""

import pytest

from readingroom.authoring import attach_action, build
from readingroom.schemas import DefineAction, FillAction, IllustrateAction
from readingroom.viewer import (
    build_exercise,
    calculate_score,
    check_answer,
    render_exercise,
    render_paragraph,
    render_score,
)


@pytest.fixture
def configured(document, rng, three_images):
    content = attach_action(document, "s1_w2", FillAction(letters_to_hide=["P"])).unwrap()
    content = attach_action(content, "s0_w1", IllustrateAction(images=three_images)).unwrap()
    return attach_action(content, "s0_w0", DefineAction(definition="that one there"), rng).unwrap()


class TestBuildExercise:

    def test_items_in_document_order(self, configured):
        items = build_exercise(configured)
        assert [item.address for item in items] == ["s0_w0", "s0_w1", "s1_w2"]
        assert [item.kind for item in items] == ["define", "illustrate", "fill"]
        assert [item.index for item in items] == [0, 1, 2]

    def test_prompts(self, configured):
        define, illustrate, fill = build_exercise(configured, placeholder="*")
        assert sorted(define.prompt) == ["one", "that", "there"]
        assert len(illustrate.prompt) == 3
        assert fill.prompt == ("H", "A", "*", "*", "Y", "!")

    def test_no_actions(self, document):
        assert build_exercise(document) == []


class TestCheckAnswer:

    def test_define(self):
        action = DefineAction(definition="that one there", randomized_words=["one", "there", "that"])
        assert check_answer(action, ["that", "one", "there"])
        assert check_answer(action, "that one there")
        assert not check_answer(action, ["one", "that", "there"])

    def test_fill_case_insensitive(self):
        action = FillAction(letters_to_hide=["A"], hidden_letter_count=1, original_word="Cat")
        assert check_answer(action, " cat ")
        assert not check_answer(action, "cot")
        assert not check_answer(action, 3)

    def test_illustrate_index(self, three_images):
        action = IllustrateAction(images=three_images)
        assert check_answer(action, 2)
        assert not check_answer(action, 3)
        assert not check_answer(action, "0")

    def test_unknown_action(self):
        with pytest.raises(TypeError):
            check_answer(None, "x")


class TestScoring:

    def test_partial(self, configured):
        items = build_exercise(configured)
        score = calculate_score(items, {"s0_w0": "that one there", "s1_w2": "hoppy!"})
        assert score == {"score": 0.5, "percent": 50, "correct": 1, "total": 2}

    def test_all_correct(self, configured):
        items = build_exercise(configured)
        score = calculate_score(items, {"s0_w0": "that one there", "s0_w1": 0, "s1_w2": "happy!"})
        assert score["percent"] == 100

    def test_empty(self):
        assert calculate_score([], {})["percent"] == 100

    def test_illustrate_items_not_scored(self, document, three_images):
        content = attach_action(document, "s0_w1", IllustrateAction(images=three_images)).unwrap()
        items = build_exercise(content)
        assert calculate_score(items, {})["total"] == 0
        assert calculate_score(items, {"s0_w1": 5})["percent"] == 100

    def test_render_score(self):
        html = render_score({"score": 0.5, "percent": 50, "correct": 1, "total": 2})
        assert "50%" in html
        assert "1 of 2 correct" in html


class TestRendering:

    def test_paragraph_highlights_actioned_words(self, configured):
        html = render_paragraph(configured)
        assert 'data-address="s0_w1">cat</span>' in html
        assert "It was" in html

    def test_escapes_text(self, rng):
        document = build("Use <b>bold</b> & more.")
        document = attach_action(document, "s0_w1", DefineAction(definition="<i>x</i> y"), rng).unwrap()
        html = render_exercise(document)
        assert "<b>bold</b>" not in html
        assert "&lt;b&gt;bold&lt;/b&gt;" in html
        assert "<i>x</i>" not in html

    def test_placeholder_character_in_word_not_marked_hidden(self):
        document = build("Type snake_case here.")
        document = attach_action(document, "s0_w1", FillAction(letters_to_hide=["S"])).unwrap()
        html = render_exercise(document)
        assert html.count('class="exercise-letter exercise-letter-hidden"') == 2
        assert html.count('class="exercise-letter"') == 8

    def test_full_exercise(self, configured, three_images):
        html = render_exercise(configured)
        assert "<style>" in html
        assert html.count('class="exercise-card"') == 3
        assert three_images[0].url in html
        assert "Fill in the missing letters" in html
