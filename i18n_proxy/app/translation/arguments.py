import inspect
import typing
from dataclasses import dataclass
from typing import Any, Callable, Mapping

from i18n_proxy.app.core.logging import get_logger
from i18n_proxy.app.translation.dictionary import DictionaryService
from i18n_proxy.app.translation.exceptions import MarkerConfigurationError
from i18n_proxy.app.translation.markers import (
    ARGUMENT_MARKERS,
    TranslatableRegex,
    TranslatableString,
)
from i18n_proxy.app.translation.models import Language

logger = get_logger("translation")

ArgumentMarker = TranslatableString | TranslatableRegex


@dataclass(frozen=True)
class ArgumentRule:
    name: str
    marker: ArgumentMarker | None = None


def build_argument_rules(handler: Callable) -> tuple[ArgumentRule, ...]:
    """
    Read the argument markers of ``handler`` once, in signature order.

    Raises:
        MarkerConfigurationError: a parameter carries more than one marker,
            a marker sits on ``*args``/``**kwargs``, or a regex marker names
            capture groups its pattern does not have.
    """
    signature = inspect.signature(handler)
    hints = typing.get_type_hints(handler, include_extras=True)
    rules = []

    for name, parameter in signature.parameters.items():
        annotation = hints.get(name, parameter.annotation)
        markers = [
            meta
            for meta in getattr(annotation, "__metadata__", ())
            if isinstance(meta, ARGUMENT_MARKERS)
        ]
        if len(markers) > 1:
            raise MarkerConfigurationError(
                handler.__qualname__, name, "more than one translation marker"
            )
        marker = markers[0] if markers else None

        if marker is not None and parameter.kind in (
            inspect.Parameter.VAR_POSITIONAL,
            inspect.Parameter.VAR_KEYWORD,
        ):
            raise MarkerConfigurationError(
                handler.__qualname__, name, "variadic parameters cannot be translated"
            )
        if isinstance(marker, TranslatableRegex):
            if not marker.target_groups:
                raise MarkerConfigurationError(
                    handler.__qualname__, name, "no target groups"
                )
            groups = marker.pattern.groups
            if any(group < 0 or group > groups for group in marker.target_groups):
                raise MarkerConfigurationError(
                    handler.__qualname__,
                    name,
                    f"target groups {marker.target_groups} out of range for {groups} groups",
                )

        rules.append(ArgumentRule(name=name, marker=marker))

    return tuple(rules)


class ArgumentRewriter:
    def __init__(self, dictionary_service: DictionaryService):
        self.dictionary_service = dictionary_service

    async def rewrite(
        self,
        rules: tuple[ArgumentRule, ...],
        arguments: Mapping[str, Any],
        request_language: Language,
        native_language: Language,
    ) -> dict[str, Any]:
        """
        Return ``arguments`` with every marked value translated into the
        native language. Keys and their order are preserved.
        """
        markers = {rule.name: rule.marker for rule in rules}
        rewritten = {}

        for name, value in arguments.items():
            marker = markers.get(name)
            if marker is None or value is None:
                rewritten[name] = value
                continue
            if not isinstance(value, str):
                raise TypeError(
                    f"Argument '{name}' is marked translatable but is "
                    f"{type(value).__name__}, not str"
                )

            if isinstance(marker, TranslatableRegex):
                rewritten[name] = await self._translate_segments(
                    marker, value, request_language, native_language
                )
            else:
                rewritten[name] = await self._translate_text(
                    value, request_language, native_language
                )

        return rewritten

    async def _translate_text(
        self, text: str, request_language: Language, native_language: Language
    ) -> str:
        result = await self.dictionary_service.translate(
            request_language, native_language, text
        )
        if not result.native_key:
            logger.debug(f"No {request_language}->{native_language} mapping for {text!r}")
            return text
        return result.native_key

    async def _translate_segments(
        self,
        marker: TranslatableRegex,
        text: str,
        request_language: Language,
        native_language: Language,
    ) -> str:
        working = text
        # Matches are taken from the original input, substitutions go to the copy
        for match in marker.pattern.finditer(text + marker.delimiter):
            for group in marker.target_groups:
                captured = match.group(group)
                if not captured:
                    continue
                result = await self.dictionary_service.translate(
                    request_language, native_language, captured
                )
                if result.native_key:
                    # Every occurrence is replaced, not only the matched span
                    working = working.replace(captured, result.native_key)
                else:
                    logger.debug(
                        f"No {request_language}->{native_language} mapping for {captured!r}"
                    )
        return working
