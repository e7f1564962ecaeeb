"""
pydantic model nouns.

A model's noun is its schema title: ``model_config["title"]`` when set,
otherwise the model class name.
"""

from pydantic import BaseModel

from apropos.noun import FALLBACK_NOUN, noun


@noun.register
def model_noun(model: BaseModel) -> str:
    title = type(model).model_config.get("title") or type(model).__name__
    if not isinstance(title, str) or not title:
        return FALLBACK_NOUN
    return title
