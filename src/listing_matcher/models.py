"""In-memory records passed between the data layer and the matcher."""

from __future__ import annotations

from dataclasses import dataclass, field, replace


@dataclass(frozen=True)
class Product:
    """A canonical product.  ``name`` is its unique identity."""

    name: str
    manufacturer: str
    family: str
    model: str

    def with_manufacturer(self, manufacturer: str) -> Product:
        return replace(self, manufacturer=manufacturer)


@dataclass(frozen=True)
class Listing:
    """A vendor listing: a free-text title plus some metadata."""

    title: str
    manufacturer: str
    currency: str
    price: str


@dataclass
class MatchedResult:
    """All listings matched to one product, in the order they were matched."""

    product_name: str
    listings: list[Listing] = field(default_factory=list)

    def append(self, listing: Listing) -> None:
        self.listings.append(listing)
