from sqlalchemy import create_engine, select
from sqlalchemy.orm import DeclarativeBase, Mapped, Session, mapped_column

from apropos import VerbSet, declare_type_noun
from apropos.adapters.sqlalchemy_entity import EntityNoun, register
from apropos.logger import get_logger, setup_default_logging

setup_default_logging(level="DEBUG")
logger = get_logger("examples.fruit_picker")


class Base(DeclarativeBase):
    pass


register(Base)


@declare_type_noun("Apple")
class Apple(Base):
    __tablename__ = "apples"

    id: Mapped[int] = mapped_column(primary_key=True)


@declare_type_noun("Banana")
class Banana(Base):
    __tablename__ = "bananas"

    id: Mapped[int] = mapped_column(primary_key=True)


class Loose(EntityNoun):
    pass


verbs = VerbSet(["pick", "peel", "eat"])


def prepare(identifier: str) -> str:
    if identifier == verbs.identifier("pick", Apple):
        return "show apple picker"
    if identifier == verbs.identifier("peel", Banana):
        return "show banana peeler"
    return "nothing to show"


engine = create_engine("sqlite://")
Base.metadata.create_all(engine)

with Session(engine) as session:
    session.add_all([Apple(), Banana()])
    session.commit()

    for selected in [*session.scalars(select(Apple)), *session.scalars(select(Banana))]:
        for verb in verbs:
            identifier = verbs.identifier(verb, selected)
            logger.info(f"{identifier}: {prepare(identifier)}")

# Entity-less objects still get an identifier
logger.info(verbs.identifier("eat", Loose()))
logger.info(verbs.identifier("pick", "Cherry"))
