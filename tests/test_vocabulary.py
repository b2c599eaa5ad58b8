"""Tests for related-word lookup."""

from duolingo_client.core.vocabulary import find_related_words


class TestFindRelatedWords:
    """Tests for find_related_words."""

    def test_returns_related_entry(self, sample_vocabulary):
        related = find_related_words(sample_vocabulary, "casa")
        assert [e["lexeme_id"] for e in related] == ["id2"]

    def test_case_insensitive(self, sample_vocabulary):
        related = find_related_words(sample_vocabulary, "CASA")
        assert [e["lexeme_id"] for e in related] == ["id2"]

    def test_no_match(self, sample_vocabulary):
        assert find_related_words(sample_vocabulary, "gato") == []

    def test_no_related_lexemes(self, sample_vocabulary):
        assert find_related_words(sample_vocabulary, "perro") == []

    def test_accepts_plain_list(self, sample_vocabulary):
        related = find_related_words(sample_vocabulary["vocab_overview"], "casas")
        assert [e["lexeme_id"] for e in related] == ["id1"]

    def test_duplicates_kept_across_matches(self):
        overview = [
            {"normalized_string": "ir", "lexeme_id": "a", "related_lexemes": ["c"]},
            {"normalized_string": "ir", "lexeme_id": "b", "related_lexemes": ["c"]},
            {"normalized_string": "voy", "lexeme_id": "c", "related_lexemes": []},
        ]
        related = find_related_words(overview, "ir")
        assert [e["lexeme_id"] for e in related] == ["c", "c"]

    def test_empty_overview(self):
        assert find_related_words({}, "casa") == []
