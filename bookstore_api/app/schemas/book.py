"""
Pydantic schema for catalog books.

Books are seeded once at start-up and never change afterwards, so a single
read schema is enough.
"""

from decimal import Decimal
from typing import Annotated

from pydantic import ConfigDict, Field, PlainSerializer

from .common import CamelModel

# Serialised as a JSON number, like the storefront expects.
Price = Annotated[
    Decimal,
    Field(ge=0, max_digits=10, decimal_places=2),
    PlainSerializer(float, return_type=float, when_used="json"),
]


class Book(CamelModel):
    """A catalog entry.  Frozen: the catalog never changes at runtime."""

    model_config = ConfigDict(frozen=True)

    id: int
    isbn: str = Field(..., min_length=1, examples=["9781234567897"])
    title: str
    author: str
    year: int
    price: Price
    cover_image: str = Field(..., description="URI of the cover picture")
    description: str = ""
