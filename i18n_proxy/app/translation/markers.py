"""
Declarative translation markers.

Argument markers go into the ``Annotated`` metadata of a handler parameter::

    async def search(
        category: Annotated[str, TranslatableString()],
        filters: Annotated[str, TranslatableRegex(r"(\\w+):([^,]+)", (2,), ",")],
    ): ...

Response markers go into the ``Annotated`` metadata of a model field
(``Translatable()``) or decorate a zero-argument accessor (``@translatable``).
"""

import re
from dataclasses import dataclass, field
from typing import Callable, TypeVar

TRANSLATABLE_ATTR = "__i18n_translatable__"

F = TypeVar("F", bound=Callable)


@dataclass(frozen=True)
class TranslatableString:
    """The whole argument is one translatable string."""


@dataclass(frozen=True)
class TranslatableRegex:
    """
    The argument holds several translatable substrings.

    Each ``delimiter``-terminated segment is matched by ``regex``; the
    substrings captured by ``target_groups`` are translated. ``delimiter`` is a
    literal string, not a regex fragment.
    """

    regex: str
    target_groups: tuple[int, ...] = (1,)
    delimiter: str = ","
    pattern: re.Pattern = field(init=False, repr=False, compare=False)

    def __post_init__(self):
        object.__setattr__(self, "target_groups", tuple(self.target_groups))
        # The delimiter is a literal sentinel, both in the pattern and the input
        object.__setattr__(
            self, "pattern", re.compile(self.regex + re.escape(self.delimiter))
        )


@dataclass(frozen=True)
class Translatable:
    """The response member is translated before it leaves the handler."""


ARGUMENT_MARKERS = (TranslatableString, TranslatableRegex)


def translatable(accessor: F) -> F:
    """Mark a zero-argument accessor of an accessor-shaped response body."""
    target = accessor.fget if isinstance(accessor, property) else accessor
    setattr(target, TRANSLATABLE_ATTR, True)
    return accessor


def is_translatable(member) -> bool:
    # properties keep the flag on their getter
    if isinstance(member, property):
        member = member.fget
    return bool(getattr(member, TRANSLATABLE_ATTR, False))
