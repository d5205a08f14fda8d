"""Single-pass match run: index every product, then match every listing."""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from dataclasses import dataclass

from .matcher import RecordMatcher
from .models import Listing, MatchedResult, Product

logger = logging.getLogger(__name__)


@dataclass
class MatchReport:
    """Outcome of one match run."""

    results: list[MatchedResult]
    rejects: list[Listing]
    product_count: int
    listing_count: int
    match_count: int
    reject_count: int

    @property
    def match_percentage(self) -> float:
        if not self.listing_count:
            return 0.0
        return self.match_count * 100 / self.listing_count


def run_matching(
    products: Sequence[Product],
    listings: Sequence[Listing],
    threshold: float,
    aliases: Mapping[str, str] | None = None,
) -> MatchReport:
    """Match ``listings`` against ``products`` with a fresh matcher."""
    matcher = RecordMatcher(threshold, aliases)

    logger.info("Inserting %d products...", len(products))
    for product in products:
        matcher.add_product(product)
    logger.debug("Widest model key: %d words.", matcher.max_model_words)

    logger.info("Processing %d listings (threshold=%.2f)...", len(listings), threshold)
    for listing in listings:
        matcher.add_listing(listing)

    report = MatchReport(
        results=matcher.matched_results,
        rejects=matcher.reject_list,
        product_count=len(products),
        listing_count=len(listings),
        match_count=matcher.match_count,
        reject_count=matcher.reject_count,
    )
    logger.info(
        "Matched %d items of %d (%.2f%%).",
        report.match_count, report.listing_count, report.match_percentage,
    )
    return report
