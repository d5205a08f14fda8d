"""Word splitting and positional distance helpers shared by the index and scorer.

Every place that needs to break a title or a product field into words goes
through ``split_to_words`` so that word offsets mean the same thing
everywhere.  Case folding is the caller's job.
"""

from __future__ import annotations

import re
from collections.abc import Sequence

# Space, tab and comma are the only separators.
_SEPARATOR_RE = re.compile(r"[ \t,]+")

# A model-like word holds "letters then digits" (a85, dsc-w310) or a run of
# three or more digits (1000, d-3000).
_MODEL_LETTERS_DIGITS_RE = re.compile(r"[a-z]+[0-9]+")
_MODEL_DIGITS_RE = re.compile(r"[0-9]{3,}")

# Titles shorter than this are padded when scoring positional distance.
MIN_DISTANCE_SPAN = 7


def split_to_words(text: str) -> list[str]:
    """Split text into words on spaces, tabs and commas.

    Runs of separators count as one, so "canon, powershot" is two words and
    offsets into the result only count real words.
    """
    return [w for w in _SEPARATOR_RE.split(text) if w]


def word_count(text: str) -> int:
    return len(split_to_words(text))


def is_model_like(word: str) -> bool:
    """Check if a (lowercase) word looks like a model code."""
    return bool(
        _MODEL_LETTERS_DIGITS_RE.search(word) or _MODEL_DIGITS_RE.search(word)
    )


def model_fragments(model: str) -> list[str]:
    """Return the model-like words of a lowercase model string, in order."""
    return [w for w in split_to_words(model) if is_model_like(w)]


def word_distance(key: str, ref_pos: int, desc: Sequence[str]) -> int | None:
    """Distance in words between ``key`` in ``desc`` and ``ref_pos``.

    ``key`` may span several words; it must then appear contiguously.  When
    it appears more than once the closest occurrence wins.  Returns None if
    ``key`` does not appear at all.
    """
    key_words = split_to_words(key)
    if not key_words:
        return None

    size = len(key_words)
    best: int | None = None
    for ndx in range(len(desc) - size + 1):
        if list(desc[ndx:ndx + size]) == key_words:
            dist = abs(ndx - ref_pos)
            if best is None or dist < best:
                best = dist
    return best


def multi_word_distance(keys: str, ref_pos: int, desc: Sequence[str]) -> int | None:
    """Like ``word_distance`` but each word of ``keys`` is looked up on its own.

    The closest of the individual distances is returned, or None if no word
    of ``keys`` appears in ``desc``.
    """
    distances = [
        d for d in (word_distance(k, ref_pos, desc) for k in split_to_words(keys))
        if d is not None
    ]
    if not distances:
        return None
    return min(distances)


def distance_score(distance: int, desc_len: int) -> float:
    """Score a positional distance: 1.0 at the expected position, falling to 0.

    Short descriptions are padded to ``MIN_DISTANCE_SPAN`` words so a small
    absolute distance in a short title isn't penalised too hard.
    """
    span = max(desc_len, MIN_DISTANCE_SPAN)
    return max(0, span - distance) / span
