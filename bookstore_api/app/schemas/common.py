"""
Shared schema building blocks.

The storefront speaks camelCase JSON (``bookId``, ``coverImage``) while the
Python side uses snake_case attributes.  ``CamelModel`` bridges the two:
fields are populated by either name and serialised by alias.  Every
successful service call returns its payload wrapped in an ``Envelope``.
"""

from typing import Generic, TypeVar

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

T = TypeVar("T")


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class Envelope(CamelModel, Generic[T]):
    """Result envelope: the payload lives under ``data``."""

    data: T
