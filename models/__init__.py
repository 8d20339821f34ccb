"""
Domain models

Pydantic models shared by the services and routes:
- Vocabulary models (ExamplePair, VocabularyEntry, PhraseEntry, SimilarWord)
- Translation models (TranslationResult, SpellingSuggestion, RemoteTranslation)
- LanguageInfo and UserUsage
"""

from .vocabulary import ExamplePair, VocabularyEntry, PhraseEntry, SimilarWord
from .translation import (
    TranslationSource,
    TranslationResult,
    SpellingSuggestion,
    RemoteTranslation
)
from .language import LanguageInfo
from .user import UserUsage, FREE_TRANSLATIONS_LIMIT

__all__ = [
    'ExamplePair',
    'VocabularyEntry',
    'PhraseEntry',
    'SimilarWord',
    'TranslationSource',
    'TranslationResult',
    'SpellingSuggestion',
    'RemoteTranslation',
    'LanguageInfo',
    'UserUsage',
    'FREE_TRANSLATIONS_LIMIT'
]
