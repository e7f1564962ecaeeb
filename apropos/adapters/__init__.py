"""
Noun providers for data-model objects.

``pydantic_model`` is loaded with the package. ``sqlalchemy_entity`` needs the
``sqlalchemy`` extra and is imported explicitly:

    from apropos.adapters.sqlalchemy_entity import EntityNoun, register
"""
