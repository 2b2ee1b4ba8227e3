"""
Content document tests: action attachment, validation order and queries.
"""

import json

import pytest
from pydantic import ValidationError

from readingroom.authoring import (
    AddressNotFound,
    InvalidAction,
    InvalidDefinition,
    InvalidImageCount,
    NoLettersSelected,
    attach_action,
    clear_action,
    get_word,
    list_actioned_words,
    load_document,
    set_action,
    summarize_actions,
)
from readingroom.schemas import DefineAction, FillAction, IllustrateAction, ImageChoice


class TestGetWord:

    def test_resolves_address(self, document):
        result = get_word(document, "s1_w2")
        assert result.ok
        assert result.value.text == "happy!"

    def test_out_of_range(self, document):
        for address in ("s2_w0", "s0_w3", "s01_w0", "garbage", ""):
            result = get_word(document, address)
            assert not result.ok
            assert isinstance(result.error, AddressNotFound)

    def test_unwrap_raises_error(self, document):
        with pytest.raises(AddressNotFound):
            get_word(document, "s9_w9").unwrap()


class TestAttachDefine:

    def test_define_attached_with_shuffle(self, document, rng):
        result = attach_action(document, "s0_w1", DefineAction(definition="  a small furry pet  "), rng)
        action = result.unwrap().sentences[0].words[1].action
        assert isinstance(action, DefineAction)
        assert action.definition == "a small furry pet"
        assert sorted(action.randomized_words) == sorted(["a", "small", "furry", "pet"])

    def test_matching_shuffle_is_kept(self, document, rng):
        candidate = DefineAction(definition="a small pet", randomized_words=["pet", "a", "small"])
        action = attach_action(document, "s0_w1", candidate, rng).unwrap().sentences[0].words[1].action
        assert action.randomized_words == ("pet", "a", "small")

    def test_stale_shuffle_is_replaced(self, document, rng):
        candidate = DefineAction(definition="a small pet", randomized_words=["old", "words"])
        action = attach_action(document, "s0_w1", candidate, rng).unwrap().sentences[0].words[1].action
        assert sorted(action.randomized_words) == ["a", "pet", "small"]

    def test_empty_definition_rejected(self, document):
        result = attach_action(document, "s0_w1", DefineAction(definition="   "))
        assert isinstance(result.error, InvalidDefinition)
        assert result.error.message == "Please enter a definition"

    def test_accepts_json_candidate(self, document, rng):
        result = attach_action(document, "s0_w0", {"type": "define", "definition": "used before nouns"}, rng)
        assert result.unwrap().sentences[0].words[0].action.type == "define"


class TestAttachIllustrate:

    def test_three_images(self, document, three_images):
        result = attach_action(document, "s0_w1", IllustrateAction(images=three_images))
        action = result.unwrap().sentences[0].words[1].action
        assert [image.url for image in action.images] == [image.url for image in three_images]

    @pytest.mark.parametrize("count", [0, 2, 4])
    def test_wrong_image_count(self, document, count):
        images = [ImageChoice(url=f"{idx}.png") for idx in range(count)]
        result = attach_action(document, "s0_w1", IllustrateAction(images=images))
        assert isinstance(result.error, InvalidImageCount)
        assert f"(currently {count})" in result.error.message


class TestAttachFill:

    def test_fill_binds_word_and_count(self, document):
        result = attach_action(document, "s0_w1", FillAction(letters_to_hide=["a"]))
        action = result.unwrap().sentences[0].words[1].action
        assert action.original_word == "cat"
        assert action.letters_to_hide == ("A",)
        assert action.hidden_letter_count == 1

    def test_fill_drops_letters_not_in_word(self, document):
        action = attach_action(document, "s1_w2", FillAction(letters_to_hide=["P", "Z"])).unwrap() \
            .sentences[1].words[2].action
        assert action.letters_to_hide == ("P",)
        assert action.hidden_letter_count == 2

    def test_no_letters(self, document):
        result = attach_action(document, "s0_w1", FillAction(letters_to_hide=[]))
        assert isinstance(result.error, NoLettersSelected)

    def test_only_foreign_letters(self, document):
        result = attach_action(document, "s0_w1", FillAction(letters_to_hide=["Z", "Q"]))
        assert isinstance(result.error, NoLettersSelected)


class TestFailureOrder:

    def test_bad_address_wins_over_bad_action(self, document):
        result = attach_action(document, "s5_w0", DefineAction(definition=""))
        assert isinstance(result.error, AddressNotFound)

    def test_failure_leaves_document_unchanged(self, document):
        before = document.to_payload()
        attach_action(document, "s0_w1", IllustrateAction(images=[]))
        assert document.to_payload() == before

    def test_unknown_action_type(self, document):
        result = attach_action(document, "s0_w1", {"type": "spell"})
        assert not result.ok
        assert isinstance(result.error, InvalidAction)
        assert result.error.code == "invalid_action"

    def test_define_without_definition(self, document):
        result = attach_action(document, "s0_w1", {"type": "define"})
        assert isinstance(result.error, InvalidDefinition)
        assert result.error.message == "Please enter a definition"

    def test_malformed_fill_letters(self, document):
        before = document.to_payload()
        result = attach_action(document, "s0_w1", {"type": "fill", "lettersToHide": ["CA"]})
        assert isinstance(result.error, InvalidAction)
        assert document.to_payload() == before

    def test_bad_address_wins_over_malformed_payload(self, document):
        result = attach_action(document, "s9_w0", {"type": "spell"})
        assert isinstance(result.error, AddressNotFound)


class TestStructuralSharing:

    def test_only_target_path_is_copied(self, document, rng):
        updated = attach_action(document, "s0_w1", DefineAction(definition="a pet"), rng).unwrap()
        assert updated is not document
        assert document.sentences[0].words[1].action is None
        assert updated.sentences[1] is document.sentences[1]
        assert updated.sentences[0] is not document.sentences[0]
        assert updated.sentences[0].words[0] is document.sentences[0].words[0]
        assert updated.sentences[0].words[2] is document.sentences[0].words[2]
        assert updated.original_paragraph == document.original_paragraph

    def test_replacement_overwrites_previous_action(self, document, rng):
        first = attach_action(document, "s0_w1", FillAction(letters_to_hide=["C"])).unwrap()
        second = set_action(first, "s0_w1", DefineAction(definition="a pet"), rng).unwrap()
        action = second.sentences[0].words[1].action
        assert isinstance(action, DefineAction)
        assert first.sentences[0].words[1].action.type == "fill"


class TestClearAction:

    def test_clear(self, document, rng):
        updated = attach_action(document, "s0_w1", DefineAction(definition="a pet"), rng).unwrap()
        cleared = clear_action(updated, "s0_w1").unwrap()
        assert cleared.sentences[0].words[1].action is None
        assert updated.sentences[0].words[1].action is not None

    def test_clear_without_action_is_noop(self, document):
        assert clear_action(document, "s0_w1").unwrap() is document

    def test_clear_bad_address(self, document):
        assert isinstance(clear_action(document, "s3_w0").error, AddressNotFound)


class TestQueries:

    def test_list_in_document_order(self, document, rng, three_images):
        updated = attach_action(document, "s1_w2", FillAction(letters_to_hide=["H"])).unwrap()
        updated = attach_action(updated, "s0_w1", IllustrateAction(images=three_images)).unwrap()
        updated = attach_action(updated, "s0_w0", DefineAction(definition="that one"), rng).unwrap()
        listed = list_actioned_words(updated)
        assert [entry.address for entry in listed] == ["s0_w0", "s0_w1", "s1_w2"]
        assert [entry.text for entry in listed] == ["The", "cat", "happy!"]

    def test_list_empty(self, document):
        assert list_actioned_words(document) == []
        assert list_actioned_words(None) == []

    def test_summarize(self, document, rng):
        updated = attach_action(document, "s0_w1", DefineAction(definition="a pet"), rng).unwrap()
        summary = summarize_actions(updated)
        assert summary["total"] == 1
        assert summary["by_type"] == {"define": 1, "illustrate": 0, "fill": 0}
        assert summary["label"] == "1 word configured"
        assert summarize_actions(document)["label"] == "0 words configured"


class TestLoadDocument:

    def test_round_trip_through_json(self, document, rng, three_images):
        updated = attach_action(document, "s0_w1", IllustrateAction(images=three_images)).unwrap()
        updated = attach_action(updated, "s1_w2", FillAction(letters_to_hide=["p"])).unwrap()
        restored = load_document(json.loads(json.dumps(updated.to_payload())))
        assert restored == updated

    def test_rejects_malformed_payload(self):
        with pytest.raises(ValidationError):
            load_document({"originalParagraph": "Hi.", "sentences": [{"id": "x0", "text": "Hi.", "words": []}]})
