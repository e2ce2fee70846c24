"""
Translation interceptor for API handlers.

Handlers decorated with ``interceptor.i18n`` get their marked arguments
translated from the caller's language into the native language before they
run, and the body of the EntityResponse they return translated back into the
caller's language afterwards. Callers speaking the native language go
straight through.
"""

import functools
import inspect
from typing import Any, Callable

from starlette.concurrency import run_in_threadpool

from i18n_proxy.app.core.logging import get_logger
from i18n_proxy.app.translation.arguments import (
    ArgumentRewriter,
    ArgumentRule,
    build_argument_rules,
)
from i18n_proxy.app.translation.dictionary import DictionaryService
from i18n_proxy.app.translation.exceptions import ConfigurationError
from i18n_proxy.app.translation.models import Language
from i18n_proxy.app.translation.resolver import LocaleResolver
from i18n_proxy.app.translation.responses import EntityResponse, ResponseRewriter

logger = get_logger("translation")


class TranslationInterceptor:
    def __init__(
        self,
        dictionary_service: DictionaryService,
        native_language: str | None,
        resolver: LocaleResolver | None = None,
    ):
        if not native_language:
            raise ConfigurationError()
        self.native_language = Language(native_language)
        self.dictionary_service = dictionary_service
        self.resolver = resolver or LocaleResolver(self.native_language)
        self.argument_rewriter = ArgumentRewriter(dictionary_service)
        self.response_rewriter = ResponseRewriter(dictionary_service)

    def i18n(self, handler: Callable) -> Callable:
        """
        Register ``handler`` as translatable.

        Argument markers are read here, once. The returned coroutine function
        keeps the handler's signature so FastAPI resolves its parameters as
        before.

        Usage:
            @router.get("/items/{category}")
            @interceptor.i18n
            async def list_items(category: Annotated[str, TranslatableString()]):
                return EntityResponse(...)
        """
        rules = build_argument_rules(handler)
        signature = inspect.signature(handler)

        @functools.wraps(handler)
        async def wrapper(*args, **kwargs):
            return await self.intercept(handler, signature, rules, args, kwargs)

        wrapper.__i18n_rules__ = rules
        return wrapper

    async def intercept(
        self,
        handler: Callable,
        signature: inspect.Signature,
        rules: tuple[ArgumentRule, ...],
        args: tuple,
        kwargs: dict[str, Any],
    ) -> Any:
        request_language = self.resolver.resolve()

        if not self.resolver.should_translate(request_language, self.native_language):
            return await self._invoke(handler, args, kwargs)

        logger.debug(
            f"Translating {handler.__qualname__} for {request_language} "
            f"(native {self.native_language})"
        )

        bound = signature.bind(*args, **kwargs)
        bound.arguments = await self.argument_rewriter.rewrite(
            rules, bound.arguments, request_language, self.native_language
        )

        result = await self._invoke(handler, bound.args, bound.kwargs)

        if not isinstance(result, EntityResponse):
            return result
        return await self.response_rewriter.rewrite_response(
            result, self.native_language, request_language
        )

    @staticmethod
    async def _invoke(handler: Callable, args, kwargs) -> Any:
        if inspect.iscoroutinefunction(handler):
            return await handler(*args, **kwargs)
        return await run_in_threadpool(handler, *args, **kwargs)
