from .nameable import Nameable, NameableType, TypeNamed, declare_type_noun

__all__ = ["Nameable", "NameableType", "TypeNamed", "declare_type_noun"]
