"""
Language Detection Service
Heuristic Kriol / Portuguese classifier based on indicator words and orthographic patterns
"""

import re
import logging
from typing import Optional

logger = logging.getLogger(__name__)

UNKNOWN = 'unknown'

# Closed-class and high-frequency words diagnostic of Kriol
KRIOL_INDICATORS = frozenset([
    "n'", 'bu', 'no', 'elis', 'ka', 'ta', 'na', 'ku', 'di', 'pa',
    'kasa', 'omi', 'mindjer', 'mininu', 'bianda', 'tarbadju', 'papia',
    'kume', 'durmi', 'bai', 'bin', 'odja', 'sibi', 'pudi', 'tene',
    'tcheu', 'kuma', 'undi', 'kantu', 'pabia', 'tabanka', 'tchon',
    'tchuba', 'fidju', 'mame', 'pape', 'amigu', 'djungutu', 'barsa',
    'yabri', 'grandi', 'pekenu', 'bonitu', 'djintis', 'tchiga',
])

# Portuguese words that differ from their Kriol counterparts
PT_INDICATORS = frozenset([
    'você', 'está', 'são', 'não', 'sim', 'fazer', 'dizer', 'comer',
    'beber', 'dormir', 'trabalho', 'casa', 'homem', 'mulher', 'filho',
    'mãe', 'pai', 'amigo', 'bonito', 'grande', 'pequeno', 'água',
    'comida', 'escola', 'livro', 'carro', 'terra', 'chuva', 'peixe',
])

# n' is the first person pronoun ("n' bai" = I go); also accept the typographic apostrophe
PRONOUN_PATTERN = re.compile(r"n['’]")
PARTICLE_PATTERN = re.compile(r'\b(ku|di|pa|na|ta)\b')
TCH_PATTERN = re.compile(r'tch[a-z]+')
DJ_PATTERN = re.compile(r'dj[a-z]+')


def score_text(text: str) -> tuple:
    """
    Score normalized text for both languages.

    Returns:
        (kriol_score, pt_score)
    """
    normalized_text = text.lower().strip()
    kriol_score = 0
    pt_score = 0

    for token in normalized_text.split():
        if token in KRIOL_INDICATORS:
            kriol_score += 1
        if token in PT_INDICATORS:
            pt_score += 1

    if PRONOUN_PATTERN.search(normalized_text):
        kriol_score += 2
    if PARTICLE_PATTERN.search(normalized_text):
        kriol_score += 1
    if TCH_PATTERN.search(normalized_text):
        kriol_score += 1
    if DJ_PATTERN.search(normalized_text):
        kriol_score += 1

    return kriol_score, pt_score


def detect_language(text: str) -> str:
    """
    Guess whether text is Kriol or Portuguese.

    Kriol wins when its score is strictly greater and at least 1;
    otherwise Portuguese wins with any positive score; otherwise the
    text is reported as unknown rather than guessed.

    Args:
        text: Free-form input text (empty text is tolerated)

    Returns:
        'kriol', 'pt' or 'unknown'
    """
    kriol_score, pt_score = score_text(text)
    logger.debug(f"Language scores: kriol={kriol_score}, pt={pt_score}")

    if kriol_score > pt_score and kriol_score >= 1:
        return 'kriol'
    if pt_score > 0:
        return 'pt'
    return UNKNOWN


def detect_language_hint(text: str, min_length: int = 2) -> Optional[str]:
    """Live-typing helper: None for too-short text or an unknown result, else the language code"""
    if not text or len(text.strip()) < min_length:
        return None

    detected = detect_language(text)
    return detected if detected != UNKNOWN else None
