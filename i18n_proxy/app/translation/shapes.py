"""
Structural descriptors of response bodies.

A body type is described once, the first time it is seen, as either a
FieldShape (a pydantic/SQLModel model, a dataclass or a NamedTuple) or an
AccessorShape (an object read through zero-argument methods or properties,
declaring at least one @translatable accessor). Types that are neither have no
shape and are never rewritten.
"""

import dataclasses
import inspect
import typing
from collections.abc import Mapping, Sequence, Set
from dataclasses import dataclass
from enum import Enum
from functools import lru_cache
from operator import attrgetter
from typing import Any, Callable, ClassVar

from pydantic import BaseModel

from i18n_proxy.app.translation.markers import Translatable, is_translatable


@dataclass(frozen=True)
class Member:
    name: str
    translatable: bool
    getter: Callable[[Any], Any]


@dataclass(frozen=True)
class ResponseShape:
    kind: ClassVar[str] = ""

    members: tuple[Member, ...]

    def snapshot(self, body: Any) -> dict[str, Any]:
        """Read every member of ``body`` without translating anything."""
        return {member.name: member.getter(body) for member in self.members}


@dataclass(frozen=True)
class AccessorShape(ResponseShape):
    kind: ClassVar[str] = "accessors"


@dataclass(frozen=True)
class FieldShape(ResponseShape):
    kind: ClassVar[str] = "fields"


def accessor_key(accessor_name: str) -> str:
    """
    Derive the output key of an accessor.

    Example:
        >>> accessor_key("getTitle")
        "title"
        >>> accessor_key("get_title")
        "title"
        >>> accessor_key("status")
        "status"
    """
    for prefix in ("get_", "get"):
        if accessor_name.startswith(prefix) and len(accessor_name) > len(prefix):
            return accessor_name[len(prefix):].lower()
    return accessor_name.lower()


def _has_marker(annotation: Any, extra_metadata: typing.Iterable = ()) -> bool:
    metadata = list(getattr(annotation, "__metadata__", ())) + list(extra_metadata)
    return any(isinstance(meta, Translatable) for meta in metadata)


def is_named_tuple(cls: type) -> bool:
    return issubclass(cls, tuple) and hasattr(cls, "_fields")


def _field_shape(cls: type) -> FieldShape | None:
    if issubclass(cls, BaseModel):
        # pydantic keeps foreign Annotated metadata on the FieldInfo
        marked = {
            name: _has_marker(None, info.metadata)
            for name, info in cls.model_fields.items()
        }
    elif dataclasses.is_dataclass(cls):
        hints = typing.get_type_hints(cls, include_extras=True)
        marked = {
            f.name: _has_marker(hints.get(f.name)) for f in dataclasses.fields(cls)
        }
    elif is_named_tuple(cls):
        hints = typing.get_type_hints(cls, include_extras=True)
        marked = {name: _has_marker(hints.get(name)) for name in cls._fields}
    else:
        return None

    # Without any marker every textual field is translated
    translate_all = not any(marked.values())

    return FieldShape(
        members=tuple(
            Member(name=name, translatable=translate_all or flag, getter=attrgetter(name))
            for name, flag in marked.items()
        )
    )


def _is_accessor(raw: Any) -> bool:
    if isinstance(raw, property):
        return raw.fget is not None
    if not inspect.isfunction(raw):
        return False
    parameters = list(inspect.signature(raw).parameters.values())[1:]
    return all(
        p.default is not inspect.Parameter.empty
        or p.kind in (inspect.Parameter.VAR_POSITIONAL, inspect.Parameter.VAR_KEYWORD)
        for p in parameters
    )


def _call_accessor(name: str) -> Callable[[Any], Any]:
    def getter(body: Any) -> Any:
        return getattr(body, name)()

    return getter


def _accessor_shape(cls: type) -> AccessorShape | None:
    if cls.__module__ == "builtins" or issubclass(cls, (Mapping, Sequence, Set, Enum)):
        return None

    members = {}
    # Subclass definitions win over the ones they override
    for klass in reversed(cls.__mro__[:-1]):
        for name, raw in vars(klass).items():
            if name.startswith("_"):
                members.pop(name, None)
                continue
            if not _is_accessor(raw):
                members.pop(name, None)
                continue
            getter = attrgetter(name) if isinstance(raw, property) else _call_accessor(name)
            members[name] = Member(
                name=accessor_key(name), translatable=is_translatable(raw), getter=getter
            )

    # Plain objects with methods are not accessor views
    if not any(member.translatable for member in members.values()):
        return None
    return AccessorShape(members=tuple(members.values()))


@lru_cache(maxsize=None)
def resolve_shape(cls: type) -> ResponseShape | None:
    """Describe the response type ``cls``; None when it has neither shape."""
    return _field_shape(cls) or _accessor_shape(cls)
