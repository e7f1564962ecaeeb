"""
Identifier composition.

The package defines no verbs of its own. Applications declare the actions
their UI offers and prefix them to nouns:

    pick = Verb("pick")
    pick("Banana")          # "pickBanana"

    class Apple(TypeNamed):
        type_noun = "Apple"
        pick = Verb("pick")

    Apple.pick              # "pickApple"
    Apple().pick            # "pickApple"
"""

from typing import TYPE_CHECKING, Any, Dict, Iterable, Iterator, List, Optional

from apropos.logger import get_logger
from apropos.noun import noun, type_noun

if TYPE_CHECKING:
    from apropos.config import AproposConfig

logger = get_logger(__name__)


def _validate_verb(verb: Any) -> str:
    if not isinstance(verb, str) or not verb:
        raise ValueError(f"Verb must be a non-empty string, got {verb!r}")
    return verb


def subject_noun(subject: Any) -> str:
    """Noun of a value, or the declared type noun when given a class."""
    if isinstance(subject, type):
        return type_noun(subject)
    return noun(subject)


def compose_identifier(verb: str, subject: Any) -> str:
    """Build the identifier ``verb + noun`` for a value or a class."""
    return _validate_verb(verb) + subject_noun(subject)


class Verb:
    """
    An action name that composes identifiers.

    Called with a subject it returns the identifier. Set as a class attribute
    it acts as a read-only property, composing with the type noun on the class
    and with the instance noun on instances.
    """

    def __init__(self, name: str):
        self._name = _validate_verb(name)

    @property
    def name(self) -> str:
        return self._name

    def __call__(self, subject: Any) -> str:
        return compose_identifier(self._name, subject)

    def __get__(self, instance: Any, owner: type) -> str:
        if instance is None:
            return compose_identifier(self._name, owner)
        return compose_identifier(self._name, instance)

    def __set__(self, instance: Any, value: Any):
        raise AttributeError(f"Verb {self._name!r} is read-only")

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Verb):
            return self._name == other._name
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self._name)

    def __repr__(self) -> str:
        return f"Verb({self._name!r})"


class VerbSet:
    """
    The ordered set of verbs an application offers for its subjects.
    """

    def __init__(self, verbs: Iterable[str]):
        self._verbs: Dict[str, Verb] = {}
        for name in verbs:
            verb = Verb(name)
            self._verbs.setdefault(verb.name, verb)

    @classmethod
    def from_config(cls, config: "AproposConfig") -> "VerbSet":
        return cls(config.verbs)

    def __iter__(self) -> Iterator[str]:
        return iter(self._verbs)

    def __len__(self) -> int:
        return len(self._verbs)

    def __contains__(self, verb: object) -> bool:
        return verb in self._verbs

    @property
    def names(self) -> List[str]:
        return list(self._verbs)

    def identifier(self, verb: str, subject: Any) -> str:
        """
        Identifier for ``verb`` applied to ``subject``.

        Raises:
            KeyError: If ``verb`` is not part of this set.
        """
        if verb not in self._verbs:
            raise KeyError(f"Unknown verb {verb!r}")
        return self._verbs[verb](subject)

    def identifiers(self, subject: Any) -> Dict[str, str]:
        """Every identifier for ``subject``, keyed by verb."""
        subject_label = subject_noun(subject)
        return {name: name + subject_label for name in self._verbs}

    def match(self, identifier: str, subject: Any) -> Optional[str]:
        """
        Return the verb that composes ``identifier`` for ``subject``.

        Returns None when no verb in the set produces it.
        """
        for name, candidate in self.identifiers(subject).items():
            if candidate == identifier:
                return name
        logger.debug(f"Identifier {identifier!r} matches no verb for {subject_noun(subject)!r}")
        return None
