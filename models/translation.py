"""
Translation Pydantic Models

Output envelopes produced fresh for every request:
- SpellingSuggestion: best vocabulary match for a misspelled token
- TranslationResult: what the resolver returns to callers
- RemoteTranslation: normalized response of the remote translator
"""

from pydantic import BaseModel, Field
from typing import List, Literal, Optional

from models.vocabulary import ExamplePair

TranslationSource = Literal["vocabulary", "phrase", "ai"]


class SpellingSuggestion(BaseModel):
    """Example: {"original": "kaza", "suggestion": "kasa", "confidence": 0.75}"""
    original: str = Field(description="Token as found in the text, punctuation stripped")
    suggestion: str = Field(description="Closest vocabulary spelling")
    confidence: float = Field(ge=0.0, le=1.0, description="Similarity of the suggestion")


class TranslationResult(BaseModel):
    """Result of a translate call.

    examples and suggestions are None when nothing was collected, so callers
    can tell "no data" apart from an empty list.
    """
    translation: str
    source: TranslationSource
    confidence: float = Field(ge=0.0, le=1.0)
    examples: Optional[List[ExamplePair]] = None
    suggestions: Optional[List[SpellingSuggestion]] = None
    # True when the AI fallback failed and the vocabulary result was returned instead
    degraded: bool = False

    def to_dict(self) -> dict:
        return self.model_dump(exclude_none=True)


class RemoteTranslation(BaseModel):
    """Response of the remote translation capability: {"translation": "...", "confidence": 0.95}"""
    translation: str = Field(min_length=1)
    confidence: Optional[float] = Field(default=None, ge=0.0, le=1.0)
