"""Read and write line-delimited JSON data files.

Input files hold one JSON object per line.  A line that isn't valid JSON,
isn't an object, or carries keys the record type doesn't know is skipped
with a warning; known keys that are missing default to "".
"""

from __future__ import annotations

import json
import logging
from collections.abc import Iterable, Iterator
from pathlib import Path
from typing import TypeVar

from pydantic import BaseModel, ValidationError

from .models import Listing, MatchedResult, Product
from .schemas import ListingRecord, MatchedResultRecord, ProductRecord

logger = logging.getLogger(__name__)

RecordT = TypeVar("RecordT", bound=BaseModel)


class DataFileError(Exception):
    """Raised when a data file can't be read or written."""

    def __init__(self, path: Path | str, reason: str) -> None:
        self.path = str(path)
        self.reason = reason
        super().__init__(f"{path}: {reason}")


def _read_lines(path: Path) -> list[str]:
    try:
        return path.read_text(encoding="utf-8").splitlines()
    except (OSError, UnicodeDecodeError) as e:
        raise DataFileError(path, f"cannot read file ({e})") from e


def iter_records(path: Path | str, record_type: type[RecordT]) -> Iterator[RecordT]:
    """Yield each valid record of ``path`` parsed as ``record_type``."""
    path = Path(path)
    for lineno, line in enumerate(_read_lines(path), start=1):
        if not line.strip():
            continue
        try:
            data = json.loads(line)
            yield record_type.model_validate(data)
        except (json.JSONDecodeError, ValidationError) as e:
            logger.warning("Skipping invalid record in '%s' line %d: %s", path, lineno, e)


def read_products(path: Path | str) -> list[Product]:
    return [r.to_product() for r in iter_records(path, ProductRecord)]


def read_listings(path: Path | str) -> list[Listing]:
    return [r.to_listing() for r in iter_records(path, ListingRecord)]


def _write_records(path: Path | str, records: Iterable[BaseModel]) -> int:
    path = Path(path)
    count = 0
    try:
        with path.open("w", encoding="utf-8") as f:
            for record in records:
                f.write(json.dumps(record.model_dump(), ensure_ascii=False))
                f.write("\n")
                count += 1
    except OSError as e:
        raise DataFileError(path, f"cannot write file ({e})") from e
    return count


def write_results(path: Path | str, results: Iterable[MatchedResult]) -> int:
    """Write one ``{"product_name", "listings"}`` line per result; returns the line count."""
    return _write_records(path, (MatchedResultRecord.from_result(r) for r in results))


def write_rejects(path: Path | str, listings: Iterable[Listing]) -> int:
    return _write_records(path, (ListingRecord.from_listing(l) for l in listings))
