from abc import ABC, abstractmethod
from typing import ClassVar


class Nameable(ABC):
    """
    A value that can describe its own kind with a noun.
    """

    @property
    @abstractmethod
    def noun(self) -> str:
        """
        The noun for this value, computed from its current state.
        """
        raise NotImplementedError("Subclasses must implement this method")


class NameableType(ABC):
    """
    A type that declares a noun for itself, independent of any instance.

    Concrete subclasses must set ``type_noun`` to a non-empty string literal.
    Intermediate bases can pass ``abstract=True`` in the class keywords to
    defer the declaration to their own subclasses.
    """

    type_noun: ClassVar[str]

    def __init_subclass__(cls, abstract: bool = False, **kwargs):
        super().__init_subclass__(**kwargs)
        if abstract:
            return
        declared = getattr(cls, "type_noun", None)
        if not isinstance(declared, str) or not declared:
            raise TypeError(
                f"{cls.__name__} must declare a non-empty 'type_noun' string"
            )


def declare_type_noun(type_noun: str):
    """Class decorator declaring ``type_noun`` for a class that cannot inherit
    from ``NameableType``, for example an ORM model with its own metaclass.

    The class is registered as a virtual ``NameableType`` subclass and, like
    ``TypeNamed``, as a ``Nameable`` whose instances answer with the type noun
    unless the class already defines ``noun``.
    """
    if not isinstance(type_noun, str) or not type_noun:
        raise TypeError("type_noun must be a non-empty string")

    def decorate(cls: type) -> type:
        cls.type_noun = type_noun
        if not hasattr(cls, "noun"):
            cls.noun = property(lambda self: self.type_noun)
        NameableType.register(cls)
        Nameable.register(cls)
        return cls

    return decorate


class TypeNamed(NameableType, Nameable, abstract=True):
    """
    Instance noun bound to the class's declared type noun.

    Subclasses may still override ``noun`` for instance-specific labels.
    """

    @property
    def noun(self) -> str:
        return self.type_noun
