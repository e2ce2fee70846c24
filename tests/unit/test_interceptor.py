"""Unit tests for TranslationInterceptor."""

import inspect
from typing import Annotated
from unittest.mock import AsyncMock

import pytest

from i18n_proxy.app.translation.exceptions import ConfigurationError
from i18n_proxy.app.translation.interceptor import TranslationInterceptor
from i18n_proxy.app.translation.markers import TranslatableString, translatable
from i18n_proxy.app.translation.models import Language, TranslationResult
from i18n_proxy.app.translation.responses import EntityResponse
from tests.fixtures import StaticResolver


class Reply:
    def __init__(self, message: str):
        self._message = message

    @translatable
    def getMessage(self) -> str:
        return self._message


def make_interceptor(dictionary, caller: str) -> TranslationInterceptor:
    return TranslationInterceptor(
        dictionary_service=dictionary,
        native_language="en",
        resolver=StaticResolver(Language("en"), Language(caller)),
    )


@pytest.mark.unit
class TestConstruction:
    @pytest.mark.parametrize("native_language", [None, ""])
    def test_missing_native_language_is_fatal(self, dictionary, native_language):
        with pytest.raises(ConfigurationError) as exc_info:
            TranslationInterceptor(dictionary_service=dictionary, native_language=native_language)
        assert exc_info.value.error_code == "CONFIGURATION_ERROR"

    def test_native_language_is_wrapped(self, dictionary):
        interceptor = TranslationInterceptor(dictionary_service=dictionary, native_language="en")
        assert interceptor.native_language == Language("en")

    def test_wrapper_keeps_handler_signature(self, dictionary):
        interceptor = make_interceptor(dictionary, "fr")

        async def handler(greeting: Annotated[str, TranslatableString()], page: int = 1):
            pass

        wrapped = interceptor.i18n(handler)

        assert inspect.iscoroutinefunction(wrapped)
        assert inspect.signature(wrapped) == inspect.signature(handler)
        assert wrapped.__name__ == "handler"
        assert [rule.name for rule in wrapped.__i18n_rules__] == ["greeting", "page"]


@pytest.mark.unit
class TestIntercept:
    @pytest.mark.asyncio
    async def test_translates_arguments_and_response(self, dictionary):
        dictionary.add("fr", "en", "hello", native_key="bonjour-native")
        dictionary.add("en", "fr", "ok", foreign_value="d'accord")
        interceptor = make_interceptor(dictionary, "fr")
        received = {}

        @interceptor.i18n
        async def greet(greeting: Annotated[str, TranslatableString()]):
            received["greeting"] = greeting
            return EntityResponse(Reply("ok"), status_code=201)

        response = await greet(greeting="hello")

        assert received == {"greeting": "bonjour-native"}
        assert response.status_code == 201
        assert response.entity == {"message": "d'accord"}

    @pytest.mark.asyncio
    async def test_positional_arguments_are_rewritten(self, dictionary):
        dictionary.add("fr", "en", "Meubles", native_key="Furniture")
        interceptor = make_interceptor(dictionary, "fr")

        @interceptor.i18n
        async def handler(page: int, category: Annotated[str, TranslatableString()]):
            return page, category

        assert await handler(3, "Meubles") == (3, "Furniture")

    @pytest.mark.asyncio
    async def test_native_caller_is_passed_through(self):
        dictionary = AsyncMock()
        interceptor = make_interceptor(dictionary, "en")
        original = EntityResponse(Reply("ok"))

        @interceptor.i18n
        async def greet(greeting: Annotated[str, TranslatableString()]):
            assert greeting == "hello"
            return original

        assert await greet("hello") is original
        dictionary.translate.assert_not_called()

    @pytest.mark.asyncio
    async def test_sync_handler_runs_in_threadpool(self, dictionary):
        dictionary.add("fr", "en", "Meubles", native_key="Furniture")
        interceptor = make_interceptor(dictionary, "fr")

        @interceptor.i18n
        def handler(category: Annotated[str, TranslatableString()]):
            return category.upper()

        assert await handler("Meubles") == "FURNITURE"

    @pytest.mark.asyncio
    async def test_non_entity_result_is_returned_as_is(self, dictionary):
        interceptor = make_interceptor(dictionary, "fr")
        body = {"message": "ok"}

        @interceptor.i18n
        async def handler():
            return body

        assert await handler() is body
        assert dictionary.calls == []

    @pytest.mark.asyncio
    async def test_null_body_response_is_returned_unchanged(self, dictionary):
        interceptor = make_interceptor(dictionary, "fr")
        original = EntityResponse(None, status_code=404)

        @interceptor.i18n
        async def handler():
            return original

        assert await handler() is original

    @pytest.mark.asyncio
    async def test_marked_non_string_argument_raises(self, dictionary):
        interceptor = make_interceptor(dictionary, "fr")
        handler_body = AsyncMock()

        @interceptor.i18n
        async def handler(count: Annotated[int, TranslatableString()]):
            await handler_body(count)

        with pytest.raises(TypeError):
            await handler(5)
        handler_body.assert_not_called()

    @pytest.mark.asyncio
    async def test_dictionary_failure_propagates(self):
        dictionary = AsyncMock()
        dictionary.translate.side_effect = RuntimeError("lookup failed")
        interceptor = make_interceptor(dictionary, "fr")

        @interceptor.i18n
        async def handler(title: Annotated[str, TranslatableString()]):
            return title

        with pytest.raises(RuntimeError, match="lookup failed"):
            await handler("bonjour")

    @pytest.mark.asyncio
    async def test_handler_failure_propagates(self, dictionary):
        interceptor = make_interceptor(dictionary, "fr")

        @interceptor.i18n
        async def handler():
            raise ValueError("boom")

        with pytest.raises(ValueError):
            await handler()

    @pytest.mark.asyncio
    async def test_lookups_are_not_cached(self):
        dictionary = AsyncMock()
        dictionary.translate.return_value = TranslationResult(native_key="Furniture")
        interceptor = make_interceptor(dictionary, "fr")

        @interceptor.i18n
        async def handler(category: Annotated[str, TranslatableString()]):
            return category

        await handler("Meubles")
        await handler("Meubles")

        assert dictionary.translate.await_count == 2
