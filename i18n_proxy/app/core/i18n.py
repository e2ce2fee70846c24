"""
Request language detection helpers.
Keeps the caller's language for the current request in a context variable
so that handlers and the translation interceptor can read it without access
to the request object.
"""

from typing import Optional
from contextvars import ContextVar

from babel import Locale, UnknownLocaleError

from i18n_proxy.app.core.config import settings
from i18n_proxy.app.core.logging import get_logger

logger = get_logger()

# Context variable to store current language for async operations
current_language: ContextVar[str] = ContextVar(
    "current_language", default=settings.NATIVE_LANGUAGE or ""
)


def set_language(language: str) -> None:
    """
    Set the caller language for the current request.

    Args:
        language: Language code (e.g., 'en', 'ar', 'fr')
    """
    if language in settings.SUPPORTED_LANGUAGES:
        current_language.set(language)
    else:
        logger.warning(f"Attempted to set unsupported language: {language}")
        current_language.set(settings.NATIVE_LANGUAGE or "")


def get_current_language() -> str:
    return current_language.get()


def language_code(tag: str) -> str:
    """
    Reduce a locale tag such as 'fr-FR' or 'pt_BR' to its language code.

    Babel is asked first; tags it does not know are split by hand.
    """
    tag = tag.strip()
    if not tag:
        return ""
    try:
        return Locale.parse(tag.replace("-", "_")).language
    except (UnknownLocaleError, ValueError):
        return tag.split("-")[0].split("_")[0].lower()


def parse_accept_language(accept_language: Optional[str]) -> str:
    """
    Parse the Accept-Language header and return the best match.

    Args:
        accept_language: Accept-Language header value

    Returns:
        Best matching language code from supported languages

    Example:
        >>> parse_accept_language("fr-FR,fr;q=0.9,en-US;q=0.8,en;q=0.7")
        "fr"
    """
    if not accept_language:
        return settings.NATIVE_LANGUAGE

    # Format: "en-US,en;q=0.9,fr;q=0.8"
    languages = []
    for lang_entry in accept_language.split(","):
        parts = lang_entry.strip().split(";")
        if parts[0].strip() == "*":
            continue
        lang = language_code(parts[0])

        quality = 1.0
        if len(parts) > 1:
            try:
                quality = float(parts[1].split("=")[1])
            except (IndexError, ValueError):
                pass

        languages.append((lang, quality))

    # Sort by quality (highest first); sort is stable so header order breaks ties
    languages.sort(key=lambda x: x[1], reverse=True)

    for lang, _ in languages:
        if lang in settings.SUPPORTED_LANGUAGES:
            return lang

    return settings.NATIVE_LANGUAGE
