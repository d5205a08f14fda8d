"""Run a one-off match of listings against a product set."""

from __future__ import annotations

from fastapi import APIRouter

from ..config import settings
from ..pipeline import run_matching
from ..schemas import ListingRecord, MatchedResultRecord, MatchRequest, MatchResponse

router = APIRouter(prefix="/api", tags=["match"])


@router.post("/match", response_model=MatchResponse)
def match_listings(body: MatchRequest):
    threshold = body.threshold if body.threshold is not None else settings.match_threshold
    report = run_matching(
        [p.to_product() for p in body.products],
        [l.to_listing() for l in body.listings],
        threshold,
        settings.manufacturer_aliases,
    )
    return MatchResponse(
        results=[MatchedResultRecord.from_result(r) for r in report.results],
        rejects=[ListingRecord.from_listing(l) for l in report.rejects],
        product_count=report.product_count,
        listing_count=report.listing_count,
        match_count=report.match_count,
        reject_count=report.reject_count,
        match_percentage=round(report.match_percentage, 2),
    )
