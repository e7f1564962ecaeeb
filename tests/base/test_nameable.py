import pytest

from apropos import noun
from apropos.base import Nameable, NameableType, TypeNamed, declare_type_noun


class TestNameable:
    """Test cases for the instance capability."""

    def test_cannot_instantiate_without_noun(self):
        """A Nameable subclass must implement noun."""

        class Incomplete(Nameable):
            pass

        with pytest.raises(TypeError):
            Incomplete()

    def test_noun_from_state(self):
        """The noun may depend on the instance."""

        class Labelled(Nameable):
            def __init__(self, label):
                self.label = label

            @property
            def noun(self) -> str:
                return self.label

        assert Labelled("Kiwi").noun == "Kiwi"
        assert Labelled("Plum").noun == "Plum"


class TestNameableType:
    """Test cases for the type capability."""

    def test_declared_literal(self):
        """The type noun is the declared literal."""

        class Banana(NameableType):
            type_noun = "Banana"

        assert Banana.type_noun == "Banana"

    def test_missing_literal_rejected(self):
        """A concrete type without a noun fails at class definition."""
        with pytest.raises(TypeError, match="type_noun"):

            class Nothing(NameableType):
                pass

    def test_empty_literal_rejected(self):
        with pytest.raises(TypeError):

            class Empty(NameableType):
                type_noun = ""

    def test_non_string_literal_rejected(self):
        with pytest.raises(TypeError):

            class Numbered(NameableType):
                type_noun = 42

    def test_abstract_intermediate_base(self):
        """Abstract bases defer the declaration to their subclasses."""

        class Fruit(NameableType, abstract=True):
            pass

        class Pear(Fruit):
            type_noun = "Pear"

        assert Pear.type_noun == "Pear"
        with pytest.raises(TypeError):

            class Unnamed(Fruit):
                pass

    def test_subclass_inherits_literal(self):
        class Apple(NameableType):
            type_noun = "Apple"

        class GrannySmith(Apple):
            pass

        assert GrannySmith.type_noun == "Apple"


class TestTypeNamed:
    """Test cases for instance nouns bound to the type noun."""

    def test_instance_noun_is_type_noun(self):
        class Banana(TypeNamed):
            type_noun = "Banana"

        assert Banana().noun == "Banana"
        assert isinstance(Banana(), Nameable)

    def test_override_instance_noun(self):
        class Basket(TypeNamed):
            type_noun = "Basket"

            def __init__(self, contents):
                self.contents = contents

            @property
            def noun(self) -> str:
                return f"{self.contents}Basket"

        assert Basket.type_noun == "Basket"
        assert Basket("Apple").noun == "AppleBasket"


class TestDeclareTypeNoun:
    """Test cases for the declare_type_noun decorator."""

    def test_registers_virtual_subclass(self):
        @declare_type_noun("Melon")
        class Melon:
            pass

        assert Melon.type_noun == "Melon"
        assert issubclass(Melon, NameableType)

    def test_instance_noun_from_type_noun(self):
        @declare_type_noun("Melon")
        class Melon:
            pass

        melon = Melon()
        assert isinstance(melon, Nameable)
        assert melon.noun == "Melon"
        assert noun(melon) == "Melon"

    def test_keeps_existing_noun(self):
        @declare_type_noun("Melon")
        class Slice:
            @property
            def noun(self):
                return "MelonSlice"

        assert Slice().noun == "MelonSlice"
        assert Slice.type_noun == "Melon"

    def test_rejects_empty(self):
        with pytest.raises(TypeError):
            declare_type_noun("")
