"""
ReadingRoom - Reading assignment authoring.

Turns a paragraph into an interactive reading exercise: each word can be
tagged with a Define, Illustrate or Fill action, and students work through
the tagged words.

Subpackages:
- schemas: Pydantic content and assignment models
- authoring: tokenizer, word-action operations, authoring workflow
- storage: assignment stores (in-memory, SQLite)
- viewer: student exercise rendering and scoring
"""

__version__ = "0.1.0"
