"""
Tokenizer - Split a paragraph into addressed sentences and words.

Segmentation is deliberately simple punctuation splitting:
- A sentence is a run of non-terminators followed by a run of . ! ?
- Text after the last terminator is dropped; a paragraph with no
  terminated sentence at all is taken whole
- Segments with nothing but whitespace and terminators are dropped
- Indices count surviving sentences/words only, so dropped segments never
  consume an address
"""

import re
import string

from readingroom.schemas import ContentDocument, Sentence, Word, WordAddress, sentence_id


TERMINATORS = ".!?"

_SENTENCE_RE = re.compile(r"[^.!?]+[.!?]+")


def split_sentences(paragraph: str) -> list[str]:
    """
    Split a paragraph into trimmed candidate sentences.

    Returns only segments that carry some text besides whitespace and
    sentence terminators.
    """
    segments = _SENTENCE_RE.findall(paragraph)
    if not segments:
        segments = [paragraph]

    sentences = []
    for segment in segments:
        trimmed = segment.strip()
        if not trimmed.strip(TERMINATORS + string.whitespace):
            continue
        sentences.append(trimmed)
    return sentences


def split_words(sentence: str) -> list[str]:
    return [token for token in sentence.split() if token]


def tokenize(paragraph: str) -> ContentDocument:
    """
    Build a ContentDocument from raw paragraph text.

    Pure function of the input: the same paragraph always yields the same
    structure and addresses. Empty or whitespace-only input yields a
    document with no sentences.
    """
    sentences = []
    for text in split_sentences(paragraph):
        tokens = split_words(text)
        if not tokens:
            continue
        s_idx = len(sentences)
        words = tuple(
            Word(address=str(WordAddress(s_idx, w_idx)), text=token)
            for w_idx, token in enumerate(tokens)
        )
        sentences.append(Sentence(id=sentence_id(s_idx), text=text, words=words))

    return ContentDocument(original_paragraph=paragraph, sentences=tuple(sentences))
