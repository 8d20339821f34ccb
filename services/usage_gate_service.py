"""
Usage Gate Service - Free plan translation allowance

The usage counter belongs to the user-session component; it is always
passed in, never read from ambient storage.
"""

import logging

from models.user import UserUsage, FREE_TRANSLATIONS_LIMIT

logger = logging.getLogger(__name__)


def can_translate(usage: UserUsage) -> bool:
    """
    Check whether a signed-in user may run another translation.

    Premium users are never limited. Everyone else needs a verified
    email and must be under their translation limit.
    """
    if usage.plan == 'premium':
        return True

    if not usage.email_verified:
        logger.debug("Translation blocked: email not verified")
        return False

    allowed = usage.translations_used < usage.translations_limit
    if not allowed:
        logger.info(f"Translation limit reached: {usage.translations_used}/{usage.translations_limit}")
    return allowed


def anonymous_can_translate(translations_used: int, limit: int = FREE_TRANSLATIONS_LIMIT) -> bool:
    """Check the allowance of a visitor who is not signed in"""
    return translations_used < limit
