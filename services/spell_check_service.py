"""
Spell Check Service
Flags tokens missing from the vocabulary and suggests the closest known spelling
"""

import re
import logging
from typing import List

from models.translation import SpellingSuggestion
from services.vocabulary_service import VocabularyService, vocabulary_service

logger = logging.getLogger(__name__)

# Stripped from both ends of a token before checking it
PUNCTUATION = '.,!?;:\'"'

SPELL_CHECK_LANGUAGES = ('kriol', 'pt')

# Tokens shorter than this (after stripping punctuation) are never checked
MIN_TOKEN_LENGTH = 2


def strip_punctuation(token: str) -> str:
    return token.strip(PUNCTUATION)


class SpellCheckService:
    """Vocabulary-backed spell checker for Kriol and Portuguese"""

    def __init__(self, store: VocabularyService = vocabulary_service):
        self.store = store

    def check(self, text: str, lang: str) -> List[SpellingSuggestion]:
        """
        Check every token of the text against lang's vocabulary.

        Args:
            text: Free-form text, split on whitespace
            lang: 'kriol' or 'pt'; any other language yields no suggestions

        Returns:
            One SpellingSuggestion per unknown token that has a similar
            vocabulary word, in token order
        """
        if lang not in SPELL_CHECK_LANGUAGES:
            return []

        suggestions: List[SpellingSuggestion] = []

        for token in text.split():
            clean_token = strip_punctuation(token)
            if len(clean_token) < MIN_TOKEN_LENGTH:
                continue

            if self.store.exists(clean_token, lang):
                continue

            similar = self.store.find_similar(clean_token, lang)
            if similar:
                best = similar[0]
                suggestions.append(SpellingSuggestion(
                    original=clean_token,
                    suggestion=best.word,
                    confidence=best.similarity
                ))

        if suggestions:
            logger.debug(f"Spell check ({lang}): {len(suggestions)} suggestion(s)")
        return suggestions


def accept_suggestion(text: str, original: str, suggestion: str) -> str:
    """
    Replace every whole-word occurrence of original with suggestion.

    Matching is case-insensitive and bounded by word boundaries, so the
    original is not replaced inside longer words.
    """
    pattern = re.compile(rf'\b{re.escape(original)}\b', re.IGNORECASE)
    return pattern.sub(lambda _: suggestion, text)


def ignore_suggestion(suggestions: List[SpellingSuggestion], original: str) -> List[SpellingSuggestion]:
    """Drop the suggestions for original; nothing is remembered for the next check"""
    return [s for s in suggestions if s.original != original]


spell_check_service = SpellCheckService()


def check_spelling(text: str, lang: str) -> List[SpellingSuggestion]:
    return spell_check_service.check(text, lang)
