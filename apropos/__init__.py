from .base import Nameable, NameableType, TypeNamed, declare_type_noun
from .noun import FALLBACK_NOUN, noun, type_noun
from .adapters.pydantic_model import model_noun
from .verbs import Verb, VerbSet, compose_identifier
from .config import AproposConfig, ConfigError, ConfigManager

__all__ = [
    "Nameable",
    "NameableType",
    "TypeNamed",
    "declare_type_noun",
    "FALLBACK_NOUN",
    "noun",
    "type_noun",
    "model_noun",
    "Verb",
    "VerbSet",
    "compose_identifier",
    "AproposConfig",
    "ConfigError",
    "ConfigManager",
]
