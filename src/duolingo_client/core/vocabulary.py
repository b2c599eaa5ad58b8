"""Vocabulary overview queries."""

from __future__ import annotations

from typing import Any


def _entries(overview: dict[str, Any] | list[dict[str, Any]]) -> list[dict[str, Any]]:
    if isinstance(overview, dict):
        return overview.get("vocab_overview") or []
    return overview


def find_related_words(
    overview: dict[str, Any] | list[dict[str, Any]],
    word: str,
) -> list[dict[str, Any]]:
    """Find vocabulary entries related to a word.

    Every entry whose normalized_string equals word.lower() is a match; for
    each match, every entry whose lexeme_id appears in the match's
    related_lexemes is collected. Results are not deduplicated, so entries
    shared by several matches appear once per match.

    Args:
        overview: Response of GET /vocabulary/overview, or its vocab_overview list
        word: Word to look up (case-insensitive)

    Returns:
        List of related vocabulary entries
    """
    entries = _entries(overview)
    needle = word.lower()
    related: list[dict[str, Any]] = []

    for entry in entries:
        if entry.get("normalized_string") != needle:
            continue
        lexemes = entry.get("related_lexemes") or []
        related.extend(e for e in entries if e.get("lexeme_id") in lexemes)

    return related
