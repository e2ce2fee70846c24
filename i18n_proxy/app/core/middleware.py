"""
Middleware for detecting the caller language in FastAPI.
"""

from typing import Callable
from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware

from i18n_proxy.app.core.i18n import (
    get_current_language,
    language_code,
    parse_accept_language,
    set_language,
)
from i18n_proxy.app.core.logging import get_logger

logger = get_logger()


class LanguageMiddleware(BaseHTTPMiddleware):
    """
    Middleware to detect and set the caller language for each request.

    Language detection priority:
    1. 'X-Language' or 'X-Locale' custom header (explicit override)
    2. 'Accept-Language' standard header
    3. Native language from settings
    """

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        # Health checks are never translated
        if request.url.path == "/health":
            return await call_next(request)

        language = request.headers.get("X-Language") or request.headers.get("X-Locale")
        if language:
            language = language_code(language)
        else:
            language = parse_accept_language(request.headers.get("Accept-Language"))

        # Unsupported codes fall back to the native language
        set_language(language)
        language = get_current_language()

        request.state.language = language

        response = await call_next(request)

        response.headers["Content-Language"] = language

        return response
