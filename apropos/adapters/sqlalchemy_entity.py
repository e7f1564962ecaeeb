"""
SQLAlchemy entity nouns.

A mapped object's noun is the name of its mapped entity: the class name, or
``__entity_name__`` when the model declares one. Objects whose mapping cannot
be resolved, such as instances created without ORM instrumentation or of
classes that were never mapped, fall back to ``FALLBACK_NOUN``.
"""

from typing import Any, Optional

from sqlalchemy import inspect
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import InstanceState

from apropos.base import Nameable
from apropos.logger import get_logger
from apropos.noun import FALLBACK_NOUN, noun

logger = get_logger(__name__)


def entity_name(obj: Any) -> Optional[str]:
    """Return the entity name of a mapped object, or None if it has none."""
    try:
        state = inspect(obj, raiseerr=False)
        if not isinstance(state, InstanceState):
            return None
        mapped_class = state.mapper.class_
    except SQLAlchemyError as e:
        logger.debug(f"Mapping for {type(obj).__name__} could not be resolved: {e}")
        return None

    name = getattr(mapped_class, "__entity_name__", None) or mapped_class.__name__
    if not isinstance(name, str) or not name:
        return None
    return name


def entity_noun(obj: Any) -> str:
    """Noun for a mapped object, degrading to ``FALLBACK_NOUN``."""
    name = entity_name(obj)
    if name is None:
        logger.debug(f"No entity name for {type(obj).__name__}, using {FALLBACK_NOUN!r}")
        return FALLBACK_NOUN
    return name


class EntityNoun:
    """
    Mixin for declarative models whose noun is their entity name.

        class Apple(EntityNoun, Base):
            __tablename__ = "apples"
            ...

        Apple().noun  # "Apple"
    """

    @property
    def noun(self) -> str:
        return entity_noun(self)


Nameable.register(EntityNoun)


def register(base: type) -> type:
    """Resolve nouns for every instance of ``base`` by entity name.

    Use this with a declarative base to cover all its models without the
    ``EntityNoun`` mixin. Returns ``base`` so it can be used as a decorator.
    """
    noun.register(base, entity_noun)
    return base
