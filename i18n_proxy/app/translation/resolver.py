from i18n_proxy.app.core.i18n import get_current_language
from i18n_proxy.app.translation.models import Language


class LocaleResolver:
    """Reads the caller language and decides whether translation applies."""

    def __init__(self, native_language: Language):
        self.native_language = native_language

    def resolve(self) -> Language:
        # Outside of a request the context variable holds the native language
        return Language(get_current_language() or self.native_language.code)

    @staticmethod
    def should_translate(request_language: Language, native_language: Language) -> bool:
        return request_language.code != native_language.code
