"""
Translation Service - Resolves a translation from phrases, vocabulary or the AI fallback

The resolver is an explicit state machine:
1. PHRASE_CHECK: whole-text match against the phrase table -> DONE on hit
2. VOCAB_LOOKUP: token-by-token vocabulary substitution
3. CONFIDENCE_GATE: hits / tokens above the threshold -> DONE with the vocabulary result
4. AI_FALLBACK: one remote translation call; on failure the vocabulary
   result is returned instead (the degrade path), never an error
"""

import enum
import logging
import re
from dataclasses import dataclass, field
from typing import Callable, List, Optional

from models.translation import RemoteTranslation, SpellingSuggestion, TranslationResult
from models.vocabulary import ExamplePair
from services.errors import RemoteTranslationError
from services.language_utils import get_language_name, is_spell_checkable
from services.llm_translation_service import AI_CONFIDENCE
from services.spell_check_service import PUNCTUATION, SpellCheckService, strip_punctuation
from services.vocabulary_service import VocabularyService, vocabulary_service

logger = logging.getLogger(__name__)

# Above this share of dictionary hits the vocabulary result is good enough
CONFIDENCE_THRESHOLD = 0.3

# At most this many usage examples are surfaced per translation
MAX_EXAMPLES = 2

TRAILING_PUNCTUATION = re.compile(f"[{re.escape(PUNCTUATION)}]+$")

# (text, from_lang_name, to_lang_name) -> RemoteTranslation, raises RemoteTranslationError
RemoteTranslator = Callable[[str, str, str], RemoteTranslation]


class ResolverState(enum.Enum):
    PHRASE_CHECK = "phrase_check"
    VOCAB_LOOKUP = "vocab_lookup"
    CONFIDENCE_GATE = "confidence_gate"
    AI_FALLBACK = "ai_fallback"
    DONE = "done"


@dataclass
class VocabularyPass:
    """Scratch state of the token-by-token pass, local to one translate call"""
    tokens: List[str] = field(default_factory=list)
    hits: int = 0
    total: int = 0
    examples: List[ExamplePair] = field(default_factory=list)

    @property
    def confidence(self) -> float:
        return self.hits / self.total if self.total else 0.0

    @property
    def translation(self) -> str:
        return " ".join(self.tokens)


class TranslationResolver:
    """Phrase table -> vocabulary -> AI fallback translation pipeline"""

    def __init__(
        self,
        store: VocabularyService = vocabulary_service,
        remote_translator: Optional[RemoteTranslator] = None,
        confidence_threshold: float = CONFIDENCE_THRESHOLD
    ):
        self.store = store
        self.spell_checker = SpellCheckService(store)
        self.remote_translator = remote_translator
        self.confidence_threshold = confidence_threshold

    def _transition(self, state: ResolverState, next_state: ResolverState) -> ResolverState:
        logger.debug(f"Resolver: {state.value} -> {next_state.value}")
        return next_state

    def match_phrase(self, text: str, from_lang: str, to_lang: str) -> Optional[TranslationResult]:
        """Return a phrase result if the whole text is a known phrase with a to_lang column"""
        phrase = self.store.find_phrase(text, from_lang)
        if phrase is None:
            return None

        translation = phrase.column(to_lang)
        if not translation:
            return None

        return TranslationResult(translation=translation, source="phrase", confidence=1.0)

    def substitute_vocabulary(self, text: str, from_lang: str, to_lang: str) -> VocabularyPass:
        """
        Translate token by token, keeping unknown tokens as they are.

        Trailing punctuation of a translated token is carried over to its
        translation. Examples are collected from the first entries that have
        them, until MAX_EXAMPLES have been gathered.
        """
        vocab_pass = VocabularyPass()

        for token in text.split():
            vocab_pass.total += 1
            suffix_match = TRAILING_PUNCTUATION.search(token)
            suffix = suffix_match.group(0) if suffix_match else ""

            entry = self.store.lookup(strip_punctuation(token), from_lang, to_lang)
            if entry is None:
                vocab_pass.tokens.append(token)
                continue

            vocab_pass.tokens.append(entry.translation + suffix)
            vocab_pass.hits += 1
            if entry.examples and len(vocab_pass.examples) < MAX_EXAMPLES:
                vocab_pass.examples.extend(entry.examples)

        return vocab_pass

    @staticmethod
    def _vocabulary_result(
        vocab_pass: VocabularyPass,
        suggestions: List[SpellingSuggestion],
        include_examples: bool = True,
        degraded: bool = False
    ) -> TranslationResult:
        examples = vocab_pass.examples[:MAX_EXAMPLES] if include_examples else []
        return TranslationResult(
            translation=vocab_pass.translation,
            source="vocabulary",
            confidence=vocab_pass.confidence,
            examples=examples or None,
            suggestions=suggestions or None,
            degraded=degraded
        )

    def _translate_remotely(self, text: str, from_lang: str, to_lang: str) -> RemoteTranslation:
        if self.remote_translator is None:
            logger.warning("No remote translator configured, AI fallback unavailable")
            raise RemoteTranslationError("No remote translator configured")
        return self.remote_translator(text, get_language_name(from_lang), get_language_name(to_lang))

    def translate(self, text: str, from_lang: str, to_lang: str) -> TranslationResult:
        """
        Translate text from one language to another.

        Args:
            text: Free-form input text
            from_lang: Source language code (e.g., 'pt', 'kriol', 'en')
            to_lang: Target language code

        Returns:
            TranslationResult. Remote failures degrade to the vocabulary
            result; they are logged and never raised.
        """
        state = ResolverState.PHRASE_CHECK

        phrase_result = self.match_phrase(text, from_lang, to_lang)
        if phrase_result is not None:
            state = self._transition(state, ResolverState.DONE)
            logger.info(f"Phrase match for '{text[:50]}' ({from_lang} -> {to_lang})")
            return phrase_result

        state = self._transition(state, ResolverState.VOCAB_LOOKUP)
        vocab_pass = self.substitute_vocabulary(text, from_lang, to_lang)

        state = self._transition(state, ResolverState.CONFIDENCE_GATE)
        suggestions = self.spell_checker.check(text, from_lang) if is_spell_checkable(from_lang) else []

        if vocab_pass.total == 0:
            # Nothing to translate: never send empty text to the remote translator
            state = self._transition(state, ResolverState.DONE)
            return self._vocabulary_result(vocab_pass, suggestions)

        logger.debug(
            f"Vocabulary coverage {vocab_pass.hits}/{vocab_pass.total} "
            f"= {vocab_pass.confidence:.2f}"
        )
        if vocab_pass.confidence > self.confidence_threshold:
            state = self._transition(state, ResolverState.DONE)
            return self._vocabulary_result(vocab_pass, suggestions)

        state = self._transition(state, ResolverState.AI_FALLBACK)
        try:
            remote = self._translate_remotely(text, from_lang, to_lang)
        except RemoteTranslationError as e:
            logger.error(f"AI translation failed, using vocabulary fallback: {e}", exc_info=True)
            state = self._transition(state, ResolverState.DONE)
            return self._vocabulary_result(vocab_pass, suggestions, include_examples=False, degraded=True)

        state = self._transition(state, ResolverState.DONE)
        return TranslationResult(
            translation=remote.translation,
            source="ai",
            confidence=remote.confidence if remote.confidence is not None else AI_CONFIDENCE,
            suggestions=suggestions or None
        )


def get_remote_translator(app_config) -> Optional[RemoteTranslator]:
    """
    Build the remote translator selected by REMOTE_TRANSLATOR.

    Args:
        app_config: Mapping with REMOTE_TRANSLATOR ('llm', 'http' or None),
            and for 'http' TRANSLATION_ENDPOINT_URL, TRANSLATION_API_KEY,
            TRANSLATION_TIMEOUT

    Raises:
        ValueError: If the mode is unknown or the endpoint URL is missing
    """
    mode = app_config.get("REMOTE_TRANSLATOR")
    if not mode:
        return None

    mode = mode.lower()
    if mode == "llm":
        from services.llm_translation_service import LLMTranslationService
        return LLMTranslationService()
    if mode == "http":
        from services.remote_translation_client import RemoteTranslationClient
        return RemoteTranslationClient(
            endpoint_url=app_config.get("TRANSLATION_ENDPOINT_URL"),
            api_key=app_config.get("TRANSLATION_API_KEY"),
            timeout=float(app_config.get("TRANSLATION_TIMEOUT", 30.0))
        )

    raise ValueError(f"Unsupported REMOTE_TRANSLATOR: {mode}. Supported: llm, http")


def translate(
    text: str,
    from_lang: str,
    to_lang: str,
    remote_translator: Optional[RemoteTranslator] = None
) -> TranslationResult:
    """Convenience entry point over the compiled-in vocabulary"""
    return TranslationResolver(remote_translator=remote_translator).translate(text, from_lang, to_lang)
