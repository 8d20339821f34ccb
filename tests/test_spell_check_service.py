"""
Tests for the vocabulary-backed spell checker:
- check: suggestions for unknown tokens, in token order
- accept_suggestion: whole-word, case-insensitive, global replacement
- ignore_suggestion: removal without memory
"""

import sys
import os
import pytest

# Add parent directory to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from models.translation import SpellingSuggestion
from models.vocabulary import VocabularyEntry
from services.spell_check_service import (
    SpellCheckService,
    accept_suggestion,
    check_spelling,
    ignore_suggestion
)
from services.vocabulary_service import VocabularyService


class TestCheck:
    """Test spelling suggestions"""

    def test_misspelled_kriol_word(self):
        suggestions = check_spelling("Mindjerr kume.", 'kriol')

        assert len(suggestions) == 1
        assert suggestions[0].original == 'Mindjerr'
        assert suggestions[0].suggestion == 'mindjer'
        assert suggestions[0].confidence == pytest.approx(1 - 1 / 8)

    def test_misspelled_portuguese_word(self):
        suggestions = check_spelling("cassa", 'pt')

        assert [(s.original, s.suggestion) for s in suggestions] == [('cassa', 'casa')]
        assert suggestions[0].confidence == pytest.approx(0.8)

    def test_known_words_and_variations_are_skipped(self):
        assert check_spelling("kasa kaza minjer bonitu", 'kriol') == []
        assert check_spelling("casa bunitu", 'pt') == []

    def test_punctuation_is_stripped(self):
        assert check_spelling('"kasa!" tarbadju, mame?', 'kriol') == []

        suggestions = check_spelling('kasaa!', 'kriol')
        assert suggestions[0].original == 'kasaa'

    def test_short_tokens_are_skipped(self):
        assert check_spelling("i n' a", 'kriol') == []

    def test_unknown_words_without_similar_candidates(self):
        assert check_spelling("xyzzy", 'kriol') == []

    def test_unsupported_language(self):
        assert check_spelling("cassa", 'en') == []
        assert check_spelling("kaza", 'fr') == []

    def test_empty_text(self):
        assert check_spelling("", 'kriol') == []
        assert check_spelling("   ", 'pt') == []

    def test_suggestions_follow_token_order(self):
        store = VocabularyService(
            pt_to_kriol=[],
            kriol_to_pt=[
                VocabularyEntry(word='bianda', translation='comida', target_lang='pt'),
                VocabularyEntry(word='tabanka', translation='aldeia', target_lang='pt'),
            ],
            phrases=[]
        )
        suggestions = SpellCheckService(store).check("tabanca bianda bianta", 'kriol')

        assert [s.original for s in suggestions] == ['tabanca', 'bianta']
        assert [s.suggestion for s in suggestions] == ['tabanka', 'bianda']

    def test_no_memory_between_checks(self):
        first = check_spelling("cassa", 'pt')
        remaining = ignore_suggestion(first, 'cassa')
        assert remaining == []

        assert check_spelling("cassa", 'pt') == first


class TestAcceptSuggestion:
    """Test whole-word replacement"""

    def test_replaces_all_occurrences_case_insensitively(self):
        assert accept_suggestion("Kaza grandi, kaza!", 'kaza', 'kasa') == "kasa grandi, kasa!"

    def test_does_not_touch_longer_words(self):
        assert accept_suggestion("kazamentu kaza", 'kaza', 'kasa') == "kazamentu kasa"

    def test_regex_characters_are_literal(self):
        assert accept_suggestion("a.b ab", 'a.b', 'x') == "x ab"

    def test_replacement_is_literal(self):
        assert accept_suggestion("kaza", 'kaza', r'k\1sa') == r'k\1sa'

    def test_text_without_original_is_unchanged(self):
        assert accept_suggestion("bon dia", 'kaza', 'kasa') == "bon dia"


class TestIgnoreSuggestion:
    """Test suggestion removal"""

    def test_removes_only_matching_original(self):
        suggestions = [
            SpellingSuggestion(original='kaza', suggestion='kasa', confidence=0.75),
            SpellingSuggestion(original='cassa', suggestion='casa', confidence=0.8),
        ]
        remaining = ignore_suggestion(suggestions, 'kaza')

        assert [s.original for s in remaining] == ['cassa']
        # the input list is left untouched
        assert len(suggestions) == 2
