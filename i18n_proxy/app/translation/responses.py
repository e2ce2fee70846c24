from typing import Any, Mapping

from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse
from starlette.background import BackgroundTask

from i18n_proxy.app.core.logging import get_logger
from i18n_proxy.app.translation.dictionary import DictionaryService
from i18n_proxy.app.translation.models import Language
from i18n_proxy.app.translation.shapes import AccessorShape, is_named_tuple, resolve_shape

logger = get_logger("translation")

# Recomputed by Starlette for every rendered body
_RENDER_HEADERS = (b"content-length", b"content-type")


def take_snapshot(entity: Any) -> dict[str, Any] | None:
    """Member values of bodies that render as a mapping of their members."""
    if entity is None:
        return None
    shape = resolve_shape(type(entity))
    if isinstance(shape, AccessorShape) or is_named_tuple(type(entity)):
        return shape.snapshot(entity)
    return None


class EntityResponse(JSONResponse):
    """
    JSON response that keeps its unrendered body.

    Handlers registered with the translation interceptor return this so the
    body can be rewritten after the handler ran. Accessor-shaped bodies are
    rendered as the mapping of their accessors and NamedTuples as the mapping
    of their fields. Accessors are read once, here, and the values are kept
    in ``snapshot`` for the response rewriter.
    """

    def __init__(
        self,
        entity: Any = None,
        status_code: int = 200,
        headers: Mapping[str, str] | None = None,
        media_type: str | None = None,
        background: BackgroundTask | None = None,
    ) -> None:
        self.entity = entity
        self.snapshot = take_snapshot(entity)
        super().__init__(
            content=jsonable_encoder(entity if self.snapshot is None else self.snapshot),
            status_code=status_code,
            headers=headers,
            media_type=media_type,
            background=background,
        )

    def with_entity(self, entity: Any) -> "EntityResponse":
        """A copy carrying ``entity`` with the same status, headers and background."""
        response = EntityResponse(
            entity,
            status_code=self.status_code,
            media_type=self.media_type,
            background=self.background,
        )
        response.raw_headers = [
            (key, value) for key, value in response.raw_headers if key in _RENDER_HEADERS
        ] + [
            (key, value) for key, value in self.raw_headers if key not in _RENDER_HEADERS
        ]
        return response


class ResponseRewriter:
    def __init__(self, dictionary_service: DictionaryService):
        self.dictionary_service = dictionary_service

    async def rewrite(
        self,
        body: Any,
        native_language: Language,
        request_language: Language,
        snapshot: Mapping[str, Any] | None = None,
    ) -> dict[str, Any] | None:
        """
        Build the translated mapping of ``body``.

        Translatable textual members are replaced by their foreign value,
        every other member is copied unchanged. Returns None for a None body
        or a body type with no recognised shape. Member values are read from
        ``snapshot`` when the caller already took one.
        """
        if body is None:
            return None
        shape = resolve_shape(type(body))
        if shape is None:
            logger.debug(f"No response shape for {type(body).__name__}, body left as is")
            return None

        if snapshot is None:
            snapshot = shape.snapshot(body)

        mapping = {}
        for member in shape.members:
            value = snapshot[member.name]
            if member.translatable and isinstance(value, str):
                result = await self.dictionary_service.translate(
                    native_language, request_language, value
                )
                if result.foreign_value:
                    value = result.foreign_value
                else:
                    logger.debug(
                        f"No {native_language}->{request_language} mapping for {value!r}"
                    )
            mapping[member.name] = value
        return mapping

    async def rewrite_response(
        self,
        response: EntityResponse,
        native_language: Language,
        request_language: Language,
    ) -> EntityResponse:
        mapping = await self.rewrite(
            response.entity, native_language, request_language, response.snapshot
        )
        if mapping is None:
            return response
        return response.with_entity(mapping)
