from i18n_proxy.app.core.config import settings
from i18n_proxy.app.core.logging import get_logger
from i18n_proxy.app.translation.dictionary import CatalogDictionaryService, LOCALES_DIR
from i18n_proxy.app.translation.exceptions import ConfigurationError
from i18n_proxy.app.translation.interceptor import TranslationInterceptor
from i18n_proxy.app.translation.models import Language

logger = get_logger()


def build_interceptor(native_language: str | None = None) -> TranslationInterceptor:
    native_language = native_language or settings.NATIVE_LANGUAGE
    try:
        dictionary_service = CatalogDictionaryService(
            native_language=Language(native_language or ""), locales_dir=LOCALES_DIR
        )
        interceptor = TranslationInterceptor(
            dictionary_service=dictionary_service, native_language=native_language
        )
    except ConfigurationError as e:
        logger.error(f"Translation interceptor cannot start: {e.message}")
        raise
    logger.info(f"Translation interceptor ready, native language: {native_language}")
    return interceptor


interceptor = build_interceptor()
