"""Confidence scoring for a (listing, product) pairing.

A candidate is scored in two steps.  First the deal-breakers: any of them
forces the score to 0.0.

  Manufacturer mismatch                     → reject
  No listing manufacturer and the product
  manufacturer is not in the title          → reject
  Fragment-only match and no family in title → reject

Otherwise four sub-scores in [0, 1] are combined:

  Model position       (distance_score)     → weight 0.70
  Family position      (or a fallback)      → weight 0.15
  Matched key length   (words / max words)  → weight 0.15
  Full model match     (primary vs fragment) → weight 0.10

The weighted sum is clamped to [0, 1]; it only tops 1.0 for near-perfect
matches.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from .models import Listing, Product
from .text import distance_score, word_count

DISTANCE_WEIGHT = 0.7
FAMILY_WEIGHT = 0.15
KEY_LENGTH_WEIGHT = 0.15
PRIMARY_WEIGHT = 0.1

# Family score when the title doesn't name the family.  Listings often leave
# it out, so this is only a mild penalty.
NO_FAMILY_SCORE = 0.4

# Expected word offsets in a title: "<manufacturer> <family> <model> ..."
MFGR_POS = 0
FAMILY_POS = 1
MODEL_POS = 2


@dataclass(frozen=True)
class Candidate:
    """A product that might be what a listing is selling."""

    key: str                      # index key the product was found under
    product: Product
    model_distance: int           # words between the key and MODEL_POS
    family_distance: int | None   # None: family not in the title
    mfgr_distance: int | None     # None: manufacturer not in the title
    is_secondary: bool            # found via a model fragment, not the full model
    score: float


def cmp_mfgr(a: str, b: str) -> bool:
    """Case-insensitive check that the shorter string is contained in the longer.

    Catches pairs like "kodak" / "eastman kodak".
    """
    a, b = a.lower(), b.lower()
    if len(a) > len(b):
        a, b = b, a
    return a in b


def reject_reason(
    listing: Listing,
    desc: Sequence[str],
    product: Product,
    family_distance: int | None,
    mfgr_distance: int | None,
    is_secondary: bool,
) -> str | None:
    """Return why this pairing can never be a match, or None if it might be."""
    mfgr = listing.manufacturer or (desc[0] if desc else "")
    if not cmp_mfgr(mfgr, product.manufacturer):
        return "manufacturer mismatch"
    if not listing.manufacturer and mfgr_distance is None:
        return "manufacturer not in title"
    if is_secondary and family_distance is None:
        return "fragment match without family"
    return None


def score_candidate(
    listing: Listing,
    desc: Sequence[str],
    key: str,
    product: Product,
    model_distance: int,
    family_distance: int | None,
    mfgr_distance: int | None,
    is_secondary: bool,
    max_key_words: int,
) -> float:
    """Confidence (0.0 – 1.0) that ``listing`` is selling ``product``.

    ``max_key_words`` is the widest key in the full-model index.
    """
    if reject_reason(listing, desc, product, family_distance, mfgr_distance, is_secondary):
        return 0.0

    dist_score = distance_score(model_distance, len(desc))

    if family_distance is not None:
        family_score = distance_score(family_distance, len(desc))
    elif not listing.manufacturer:
        # No manufacturer and no family: too little to go on
        family_score = 0.0
    else:
        family_score = NO_FAMILY_SCORE

    size_score = min(1.0, word_count(key) / max(1, max_key_words))
    primary_score = 0.0 if is_secondary else 1.0

    total = (
        DISTANCE_WEIGHT * dist_score
        + FAMILY_WEIGHT * family_score
        + KEY_LENGTH_WEIGHT * size_score
        + PRIMARY_WEIGHT * primary_score
    )
    return max(0.0, min(1.0, total))
