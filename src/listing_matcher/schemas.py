from pydantic import BaseModel, ConfigDict, Field

from .models import Listing, MatchedResult, Product


# --- Input records ---

class ProductRecord(BaseModel):
    """One line of a products file."""

    model_config = ConfigDict(extra="forbid", populate_by_name=True, coerce_numbers_to_str=True)

    product_name: str = ""
    manufacturer: str = ""
    family: str = ""
    model: str = ""
    announced_date: str = Field("", alias="announced-date")

    def to_product(self) -> Product:
        return Product(self.product_name, self.manufacturer, self.family, self.model)


class ListingRecord(BaseModel):
    """One line of a listings file, also used for rejects and result entries."""

    model_config = ConfigDict(extra="forbid", coerce_numbers_to_str=True)

    title: str = ""
    manufacturer: str = ""
    currency: str = ""
    price: str = ""

    def to_listing(self) -> Listing:
        return Listing(self.title, self.manufacturer, self.currency, self.price)

    @classmethod
    def from_listing(cls, listing: Listing) -> "ListingRecord":
        return cls(
            title=listing.title,
            manufacturer=listing.manufacturer,
            currency=listing.currency,
            price=listing.price,
        )


# --- Output records ---

class MatchedResultRecord(BaseModel):
    product_name: str
    listings: list[ListingRecord] = []

    @classmethod
    def from_result(cls, result: MatchedResult) -> "MatchedResultRecord":
        return cls(
            product_name=result.product_name,
            listings=[ListingRecord.from_listing(l) for l in result.listings],
        )


# --- API ---

class MatchRequest(BaseModel):
    products: list[ProductRecord]
    listings: list[ListingRecord]
    threshold: float | None = Field(None, ge=0.0, le=1.0)


class MatchResponse(BaseModel):
    results: list[MatchedResultRecord]
    rejects: list[ListingRecord]
    product_count: int
    listing_count: int
    match_count: int
    reject_count: int
    match_percentage: float


class HealthResponse(BaseModel):
    status: str = "ok"
    version: str
    default_threshold: float
