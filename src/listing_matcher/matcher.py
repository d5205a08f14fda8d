"""Match free-text listings to known products.

Usage: add every product with ``add_product`` first, then feed listings to
``add_listing``.  Each listing either lands in the result for its best
product or in the reject list.  Adding products after listings doesn't
crash but earlier listings were matched against an incomplete index.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping

from .index import ModelIndex
from .models import Listing, MatchedResult, Product
from .scoring import FAMILY_POS, MFGR_POS, MODEL_POS, Candidate, score_candidate
from .text import model_fragments, multi_word_distance, split_to_words

logger = logging.getLogger(__name__)

# Listing manufacturer fields mostly use a name that contains, or is
# contained in, the product's.  These don't, so the product side is
# rewritten on the way in.
DEFAULT_MANUFACTURER_ALIASES: dict[str, str] = {"fujifilm": "fuji"}


def title_words(title: str) -> list[str]:
    """Lowercase ``title`` and split it into the word list candidates are searched in.

    No empty words are kept, so "Canon, PowerShot A85" still puts the model at
    offset 2.
    """
    words = (w.replace(",", "") for w in split_to_words(title.lower()))
    return [w for w in words if w]


def _ranking_key(candidate: Candidate) -> tuple[float, bool, str]:
    # Highest score first; ties go to full-model matches, then product name.
    return (-candidate.score, candidate.is_secondary, candidate.product.name)


class RecordMatcher:
    """Indexes products by model and matches listings against them.

    ``threshold`` is the minimum score (0.0 – 1.0) a candidate needs to be
    accepted.  ``aliases`` maps a lowercase product manufacturer to the name
    it should be indexed under; None uses ``DEFAULT_MANUFACTURER_ALIASES``.
    """

    def __init__(
        self,
        threshold: float,
        aliases: Mapping[str, str] | None = None,
    ) -> None:
        if not 0.0 <= threshold <= 1.0:
            raise ValueError(f"threshold must be between 0.0 and 1.0, got {threshold}")
        self.threshold = threshold
        if aliases is None:
            aliases = DEFAULT_MANUFACTURER_ALIASES
        self._aliases = {k.lower(): v for k, v in aliases.items()}

        # Products by full model name, and by model-like words of it
        self._models = ModelIndex()
        self._model_fragments = ModelIndex()

        self._matches: dict[str, MatchedResult] = {}
        self._rejects: list[Listing] = []

    # ------------------------------------------------------------------
    # Index build
    # ------------------------------------------------------------------

    def _apply_aliases(self, product: Product) -> Product:
        alias = self._aliases.get(product.manufacturer.lower())
        if alias is None:
            return product
        return product.with_manufacturer(alias)

    def add_product(self, product: Product) -> Product:
        """Index ``product``; returns the (possibly aliased) copy that was indexed."""
        prod = self._apply_aliases(product)
        model = prod.model.lower()

        self._models.insert(model, prod)
        for fragment in model_fragments(model):
            self._model_fragments.insert(fragment, prod)
        return prod

    # ------------------------------------------------------------------
    # Query
    # ------------------------------------------------------------------

    def _make_candidate(
        self,
        listing: Listing,
        desc: list[str],
        key: str,
        ndx: int,
        product: Product,
        is_secondary: bool,
    ) -> Candidate:
        model_distance = abs(ndx - MODEL_POS)
        family_distance = multi_word_distance(product.family.lower(), FAMILY_POS, desc)
        mfgr_distance = multi_word_distance(product.manufacturer.lower(), MFGR_POS, desc)
        return Candidate(
            key=key,
            product=product,
            model_distance=model_distance,
            family_distance=family_distance,
            mfgr_distance=mfgr_distance,
            is_secondary=is_secondary,
            score=score_candidate(
                listing, desc, key, product,
                model_distance, family_distance, mfgr_distance,
                is_secondary, self._models.max_word_count,
            ),
        )

    def _find_candidates(
        self, listing: Listing, desc: list[str], is_secondary: bool
    ) -> list[Candidate]:
        """Look up every span of ``desc`` in one index, widest spans first."""
        index = self._model_fragments if is_secondary else self._models
        result: list[Candidate] = []

        for size in range(index.max_word_count, 0, -1):
            for ndx in range(len(desc) - size + 1):
                key = " ".join(desc[ndx:ndx + size])
                index.for_each(key, lambda product: result.append(
                    self._make_candidate(listing, desc, key, ndx, product, is_secondary)
                ))

        return result

    def rank_candidates(self, listing: Listing) -> list[Candidate]:
        """All candidates for ``listing``, best first."""
        desc = title_words(listing.title)
        candidates = (
            self._find_candidates(listing, desc, is_secondary=False)
            + self._find_candidates(listing, desc, is_secondary=True)
        )
        return sorted(candidates, key=_ranking_key)

    def best_candidate(self, listing: Listing) -> Candidate | None:
        """The best candidate scoring at least ``threshold``, or None.

        A score of 0.0 means a deal-breaker fired and is never accepted, even
        with a threshold of 0.0.
        """
        for candidate in self.rank_candidates(listing):
            if candidate.score > 0.0 and candidate.score >= self.threshold:
                return candidate
        return None

    def add_listing(self, listing: Listing) -> Candidate | None:
        """Match ``listing`` to a product or add it to the rejects.

        Returns the accepted candidate, or None if the listing was rejected.
        """
        candidate = self.best_candidate(listing)
        if candidate is None:
            self._rejects.append(listing)
            logger.debug("Rejected listing: %s", listing.title)
            return None

        name = candidate.product.name
        result = self._matches.get(name)
        if result is None:
            result = self._matches[name] = MatchedResult(name)
        result.append(listing)
        logger.debug(
            "Matched '%s' -> '%s' (key=%r, score=%.3f)",
            listing.title, name, candidate.key, candidate.score,
        )
        return candidate

    # ------------------------------------------------------------------
    # Results
    # ------------------------------------------------------------------

    @property
    def max_model_words(self) -> int:
        return self._models.max_word_count

    @property
    def matched_results(self) -> list[MatchedResult]:
        """One result per matched product, sorted by product name."""
        return [self._matches[name] for name in sorted(self._matches)]

    @property
    def reject_list(self) -> list[Listing]:
        return list(self._rejects)

    @property
    def match_count(self) -> int:
        return sum(len(r.listings) for r in self._matches.values())

    @property
    def reject_count(self) -> int:
        return len(self._rejects)
