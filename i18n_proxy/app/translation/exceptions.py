"""
Exceptions raised by the translation layer.

Missing translations and unrecognised response bodies are not errors and
never raise; everything here signals a wiring or declaration mistake.
"""


class TranslationLayerError(Exception):
    """Base exception for the translation layer."""

    def __init__(self, message: str, error_code: str):
        super().__init__(message)
        self.message = message
        self.error_code = error_code


class ConfigurationError(TranslationLayerError):
    """The interceptor cannot be built from the supplied settings."""

    def __init__(self, message: str = "Language is not declared"):
        super().__init__(message=message, error_code="CONFIGURATION_ERROR")


class MarkerConfigurationError(TranslationLayerError):
    """A handler parameter carries markers that cannot be applied."""

    def __init__(self, handler: str, parameter: str, reason: str):
        message = f"Invalid translation marker on {handler}({parameter}): {reason}"
        super().__init__(message=message, error_code="MARKER_CONFIGURATION_ERROR")
        self.handler = handler
        self.parameter = parameter
