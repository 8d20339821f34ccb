"""
Vocabulary Pydantic Models

Immutable records for the static dictionary tables:
- ExamplePair: an (original, translated) usage sentence
- VocabularyEntry: one word in a direction-specific table
- PhraseEntry: a whole sentence in Kriol, Portuguese and English
- SimilarWord: a spelling candidate with its similarity score
"""

from pydantic import BaseModel, ConfigDict, Field
from typing import Tuple

# Languages that have a column in the phrase table
PHRASE_LANGUAGES = ("kriol", "pt", "en")


class ExamplePair(BaseModel):
    """A usage example: the sentence in the source language and its translation."""
    model_config = ConfigDict(frozen=True)

    original: str = Field(description="Example sentence in the entry's source language")
    translated: str = Field(description="The same sentence in the target language")


class VocabularyEntry(BaseModel):
    """A single dictionary record.

    Example:
    {
        "word": "casa",
        "translation": "kasa",
        "variations": ["kaza"],
        "target_lang": "kriol",
        "examples": [{"original": "A minha casa é bonita", "translated": "Ña kasa bonitu"}],
        "category": "substantivo",
        "frequency": 100
    }
    """
    model_config = ConfigDict(frozen=True)

    word: str = Field(description="Canonical spelling in the table's source language")
    translation: str = Field(description="Canonical rendering in the target language")
    variations: Tuple[str, ...] = Field(
        default=(),
        description="Alternate accepted spellings of word (not of translation)"
    )
    target_lang: str = Field(description="Language code of the translation field")
    examples: Tuple[ExamplePair, ...] = Field(default=())
    category: str = Field(default="", description="Part of speech, informational only")
    frequency: int = Field(default=1, gt=0, description="Usage weight, higher is more common")

    def matches(self, normalized_word: str) -> bool:
        """True if the normalized word is this entry's word or one of its variations."""
        if self.word.lower() == normalized_word:
            return True
        return any(v.lower() == normalized_word for v in self.variations)


class PhraseEntry(BaseModel):
    """Whole-sentence equivalents, matched by full-string equality only."""
    model_config = ConfigDict(frozen=True)

    kriol: str
    pt: str
    en: str

    def column(self, lang: str) -> str:
        """Return the phrase in the given language, or an empty string if there is no such column."""
        return getattr(self, lang) if lang in PHRASE_LANGUAGES else ""


class SimilarWord(BaseModel):
    """A vocabulary word close to a queried spelling."""
    word: str
    similarity: float = Field(gt=0.0, lt=1.0)
