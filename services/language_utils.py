"""Language utility functions for mapping between language codes, display info and prompt names"""
from typing import Optional, Dict, List
from models.language import LanguageInfo

SUPPORTED_LANGUAGES: List[LanguageInfo] = [
    LanguageInfo(code='pt', name='Português', flag='🇧🇷', native='Português'),
    LanguageInfo(code='en', name='English', flag='🇺🇸', native='English'),
    LanguageInfo(code='fr', name='French', flag='🇫🇷', native='Français'),
    LanguageInfo(code='de', name='German', flag='🇩🇪', native='Deutsch'),
    LanguageInfo(code='kriol', name='Crioulo da Guiné-Bissau', flag='🇬🇼', native='Kriol'),
    LanguageInfo(code='wo', name='Wolof', flag='🇸🇳', native='Wolof'),
]

# Names used when asking the LLM to translate (the prompt is written in Portuguese)
PROMPT_LANGUAGE_NAMES: Dict[str, str] = {
    'pt': 'Português',
    'en': 'Inglês',
    'fr': 'Francês',
    'de': 'Alemão',
    'kriol': 'Crioulo da Guiné-Bissau (Guineense/Kriol)',
    'wo': 'Wolof',
}

# Languages with a vocabulary table, and therefore spell checking
SPELL_CHECKABLE_CODES = frozenset(['kriol', 'pt'])


def get_language_info(language_code: str) -> Optional[LanguageInfo]:
    """
    Get display information for a language code.

    Args:
        language_code: Language code (e.g., "pt", "kriol")

    Returns:
        LanguageInfo, or None if the code is not supported
    """
    return next((lang for lang in SUPPORTED_LANGUAGES if lang.code == language_code), None)


def get_language_name(language_code: str) -> str:
    """
    Convert a language code to the name used in translation prompts.

    Unknown codes are returned unchanged.
    """
    return PROMPT_LANGUAGE_NAMES.get(language_code, language_code)


def is_supported_code(language_code: str) -> bool:
    """Check if a language code is one of the supported languages."""
    return get_language_info(language_code) is not None


def is_spell_checkable(language_code: str) -> bool:
    """Check if the language has a vocabulary to spell check against."""
    return language_code in SPELL_CHECKABLE_CODES
