"""
Dictionary lookup contract and the gettext catalog implementation.

The interceptor only depends on DictionaryService; where translations come
from is up to the implementation. CatalogDictionaryService reads the
``messages.po`` catalog of every supported language, where each msgid is
native text and each msgstr the text in that language.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path

from babel.messages.pofile import read_po

from i18n_proxy.app.core.config import settings
from i18n_proxy.app.core.logging import get_logger
from i18n_proxy.app.translation.models import Language, TranslationResult

logger = get_logger("translation")

# Base directory for translations
LOCALES_DIR = Path(__file__).parent.parent / "locales"


class DictionaryService(ABC):
    """Abstract interface for dictionary lookups."""

    @abstractmethod
    async def translate(
        self, source: Language, target: Language, text: str
    ) -> TranslationResult:
        """
        Look up ``text`` written in ``source`` and return its ``target`` form.

        Args:
            source: Language the text is written in
            target: Language to translate into
            text: Text to look up

        Returns:
            TranslationResult; both fields are None when there is no mapping.
            Implementations must not raise for a missing mapping and must be
            safe to call concurrently.
        """
        pass


@dataclass(frozen=True)
class Catalog:
    language: str
    forward: dict[str, str]
    reverse: dict[str, str]


@lru_cache(maxsize=None)
def load_catalog(locales_dir: Path, language: str) -> Catalog | None:
    """
    Parse the catalog of one language once.

    Args:
        locales_dir: Directory holding ``<lang>/LC_MESSAGES/messages.po``
        language: Language code (e.g., 'ar', 'fr')

    Returns:
        Catalog or None if the language has no catalog
    """
    po_file = locales_dir / language / "LC_MESSAGES" / "messages.po"
    try:
        with open(po_file, "rb") as f:
            po_catalog = read_po(f, locale=language)
    except FileNotFoundError:
        logger.warning(f"Translation file not found for language: {language}")
        return None

    forward: dict[str, str] = {}
    reverse: dict[str, str] = {}
    for message in po_catalog:
        # The header entry has an empty msgid, plural entries are not lookups
        if not message.id or not isinstance(message.id, str):
            continue
        if not message.string or message.fuzzy:
            continue
        forward[message.id] = message.string
        # First native text wins when two msgids share a translation
        reverse.setdefault(message.string, message.id)

    logger.debug(f"Loaded {len(forward)} catalog entries for {language}")
    return Catalog(language=language, forward=forward, reverse=reverse)


class CatalogDictionaryService(DictionaryService):
    def __init__(self, native_language: Language, locales_dir: Path = LOCALES_DIR):
        self.native_language = native_language
        self.locales_dir = Path(locales_dir)

    def _catalog(self, language: Language) -> Catalog | None:
        if language.code not in settings.SUPPORTED_LANGUAGES:
            logger.warning(f"Unsupported language: {language}")
            return None
        return load_catalog(self.locales_dir, language.code)

    async def translate(
        self, source: Language, target: Language, text: str
    ) -> TranslationResult:
        if source == self.native_language:
            catalog = self._catalog(target)
            if catalog is None:
                return TranslationResult.missing()
            return TranslationResult(native_key=text, foreign_value=catalog.forward.get(text))

        if target == self.native_language:
            catalog = self._catalog(source)
            if catalog is None:
                return TranslationResult.missing()
            return TranslationResult(native_key=catalog.reverse.get(text), foreign_value=text)

        # Neither side is native: chain through the native text
        source_catalog = self._catalog(source)
        target_catalog = self._catalog(target)
        if source_catalog is None or target_catalog is None:
            return TranslationResult.missing()
        native_key = source_catalog.reverse.get(text)
        if native_key is None:
            return TranslationResult.missing()
        return TranslationResult(
            native_key=native_key, foreign_value=target_catalog.forward.get(native_key)
        )
