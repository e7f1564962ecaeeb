"""
Noun resolution.

``noun`` answers "what kind of thing is this value?" with a short label and
``type_noun`` answers the same question for a class. Strings are their own
noun; anything implementing :class:`~apropos.base.Nameable` provides one;
data-model adapters register further providers through ``noun.register``.
"""

from functools import singledispatch
from typing import Any

from apropos.base import Nameable, NameableType

# Label used when a data-model object cannot name its own entity
FALLBACK_NOUN = "Object"


@singledispatch
def _provided_noun(value: Any) -> str:
    raise TypeError(f"No noun provider for {type(value).__name__!r}")


@_provided_noun.register
def _string_noun(value: str) -> str:
    return value


def noun(value: Any) -> str:
    """Return the noun describing ``value``.

    A ``Nameable`` value always answers for itself; registered providers only
    cover values that do not.

    Raises:
        TypeError: If no noun provider is registered for the value's type.
    """
    if isinstance(value, Nameable):
        return value.noun
    return _provided_noun(value)


# Adapters add providers with ``noun.register(cls, func)``
noun.register = _provided_noun.register


def type_noun(cls: type) -> str:
    """Return the noun a ``NameableType`` subclass declares for itself."""
    if isinstance(cls, type) and issubclass(cls, NameableType):
        return cls.type_noun
    raise TypeError(f"{cls!r} does not declare a type noun")
