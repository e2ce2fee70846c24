from dataclasses import dataclass


@dataclass(frozen=True)
class Language:
    """A language identified by its code. Codes compare case-sensitively."""

    code: str

    def __str__(self) -> str:
        return self.code


@dataclass(frozen=True)
class TranslationResult:
    """
    Outcome of one dictionary lookup.

    native_key is the text in the native language, foreign_value the text in
    the caller's language. None or "" means the dictionary has no mapping.
    """

    native_key: str | None = None
    foreign_value: str | None = None

    @classmethod
    def missing(cls) -> "TranslationResult":
        return cls()
