"""
Vocabulary Service - Lookup and ranking over the static dictionary tables

Tables are direction specific:
- PT_TO_KRIOL is used for Portuguese-sourced lookups (lang 'pt')
- KRIOL_TO_PT is used for Kriol-sourced lookups (lang 'kriol')

Lookup resolves by exact word first, then by variation; in both passes the
first entry in table order wins. Partial matching is left to find_similar().
"""

import logging
from typing import Dict, List, Optional, Sequence

from data.vocabulary import PT_TO_KRIOL, KRIOL_TO_PT, COMMON_PHRASES
from models.vocabulary import VocabularyEntry, PhraseEntry, SimilarWord
from services.similarity import similarity

logger = logging.getLogger(__name__)

# Only candidates strictly between these bounds are offered as similar words
MIN_SIMILARITY = 0.6
MAX_SIMILAR_WORDS = 3


def normalize(text: str) -> str:
    """Lowercase and trim, the normalization shared by every lookup"""
    return text.lower().strip()


class VocabularyService:
    """Read-only access to the direction tables and the phrase table"""

    def __init__(
        self,
        pt_to_kriol: Sequence[VocabularyEntry] = PT_TO_KRIOL,
        kriol_to_pt: Sequence[VocabularyEntry] = KRIOL_TO_PT,
        phrases: Sequence[PhraseEntry] = COMMON_PHRASES
    ):
        self.pt_to_kriol = tuple(pt_to_kriol)
        self.kriol_to_pt = tuple(kriol_to_pt)
        self.phrases = tuple(phrases)

    def _table_for(self, lang: str) -> Sequence[VocabularyEntry]:
        """Return the table whose words are in the given language"""
        if lang == 'kriol':
            return self.kriol_to_pt
        if lang == 'pt':
            return self.pt_to_kriol
        raise ValueError(f"Unsupported vocabulary language: {lang}. Supported languages: kriol, pt")

    def _table_for_direction(self, from_lang: str, to_lang: str) -> Optional[Sequence[VocabularyEntry]]:
        if from_lang == 'pt' and to_lang == 'kriol':
            return self.pt_to_kriol
        if from_lang == 'kriol' and to_lang == 'pt':
            return self.kriol_to_pt
        return None

    def lookup(self, word: str, from_lang: str, to_lang: str) -> Optional[VocabularyEntry]:
        """
        Find the entry translating a word from one language to the other.

        Args:
            word: The word to look up (normalized to lowercase and stripped)
            from_lang: Source language code ('pt' or 'kriol')
            to_lang: Target language code ('kriol' or 'pt')

        Returns:
            The first entry whose word matches exactly, else the first entry
            with a matching variation, else None. Unsupported directions
            always return None.
        """
        table = self._table_for_direction(from_lang, to_lang)
        if table is None:
            logger.debug(f"No vocabulary table for direction {from_lang} -> {to_lang}")
            return None

        normalized_word = normalize(word)

        for entry in table:
            if entry.word.lower() == normalized_word:
                return entry

        for entry in table:
            if any(v.lower() == normalized_word for v in entry.variations):
                return entry

        return None

    def top_by_frequency(self, lang: str, n: int = 5) -> List[VocabularyEntry]:
        """Return at most n entries of lang's table, most frequent first (ties keep table order)"""
        table = self._table_for(lang)
        return sorted(table, key=lambda entry: entry.frequency, reverse=True)[:max(n, 0)]

    def exists(self, word: str, lang: str) -> bool:
        """Check if a word, or a known variation of one, is in lang's table"""
        normalized_word = normalize(word)
        return any(entry.matches(normalized_word) for entry in self._table_for(lang))

    def find_similar(self, word: str, lang: str) -> List[SimilarWord]:
        """
        Find vocabulary spellings close to the given word.

        Each entry's word and each of its variations are scored as separate
        candidates. Exact matches (similarity 1.0) are excluded.

        Returns:
            At most 3 SimilarWord objects, highest similarity first
        """
        normalized_word = normalize(word)
        candidates: List[SimilarWord] = []

        for entry in self._table_for(lang):
            for candidate in (entry.word, *entry.variations):
                score = similarity(normalized_word, candidate.lower())
                if MIN_SIMILARITY < score < 1:
                    candidates.append(SimilarWord(word=candidate, similarity=score))

        candidates.sort(key=lambda c: c.similarity, reverse=True)
        return candidates[:MAX_SIMILAR_WORDS]

    def find_phrase(self, text: str, lang: str) -> Optional[PhraseEntry]:
        """Return the phrase whose lang column equals the whole normalized text"""
        normalized_text = normalize(text)
        for phrase in self.phrases:
            column = phrase.column(lang)
            if column and column.lower() == normalized_text:
                return phrase
        return None

    def find_direction_gaps(self) -> Dict[str, List[VocabularyEntry]]:
        """
        Report entries whose translation has no counterpart in the reverse table.

        An entry is a gap when its translation is neither a word nor a
        variation in the other direction's table.

        Returns:
            Dictionary with 'pt_to_kriol' and 'kriol_to_pt' lists of entries
        """
        def missing(table, reverse_table):
            return [
                entry for entry in table
                if not any(r.matches(normalize(entry.translation)) for r in reverse_table)
            ]

        gaps = {
            'pt_to_kriol': missing(self.pt_to_kriol, self.kriol_to_pt),
            'kriol_to_pt': missing(self.kriol_to_pt, self.pt_to_kriol),
        }
        logger.info(
            f"Direction gaps: {len(gaps['pt_to_kriol'])} pt->kriol, "
            f"{len(gaps['kriol_to_pt'])} kriol->pt"
        )
        return gaps


# Shared instance over the compiled-in tables
vocabulary_service = VocabularyService()


def search_vocabulary(word: str, from_lang: str, to_lang: str) -> Optional[VocabularyEntry]:
    return vocabulary_service.lookup(word, from_lang, to_lang)


def get_top_words(lang: str, limit: int = 5) -> List[VocabularyEntry]:
    return vocabulary_service.top_by_frequency(lang, limit)


def word_exists(word: str, lang: str) -> bool:
    return vocabulary_service.exists(word, lang)


def find_similar_words(word: str, lang: str) -> List[SimilarWord]:
    return vocabulary_service.find_similar(word, lang)
