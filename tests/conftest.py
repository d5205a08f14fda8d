"""Test fixtures: a small product catalogue and listings against it."""

import json
from pathlib import Path

import pytest

from listing_matcher.matcher import RecordMatcher
from listing_matcher.models import Listing, Product


@pytest.fixture()
def products() -> list[Product]:
    return [
        Product("Canon_PowerShot_A85", "Canon", "PowerShot", "A85"),
        Product("Sony_Cyber-shot_DSC-W310", "Sony", "Cyber-shot", "DSC-W310"),
        Product("Fujifilm_FinePix_S2500HD", "Fujifilm", "FinePix", "S2500HD"),
        Product("Toshiba_PDR-M60", "Toshiba", "Digital", "PDR M60"),
    ]


@pytest.fixture()
def listings() -> list[Listing]:
    return [
        Listing("Canon PowerShot A85 Digital Camera", "Canon", "USD", "199.99"),
        Listing("Sony Cyber-shot DSC-W310 12.1MP Digital Camera", "Sony", "USD", "89.00"),
        Listing("Fuji FinePix S2500HD 12MP", "", "CAD", "149.99"),
        Listing("Generic USB cable for cameras", "", "USD", "4.99"),
        Listing("Toshiba M60 replacement battery", "Toshiba", "USD", "12.50"),
    ]


@pytest.fixture()
def matcher(products) -> RecordMatcher:
    m = RecordMatcher(0.5)
    for p in products:
        m.add_product(p)
    return m


def _write_jsonl(path: Path, rows: list) -> Path:
    path.write_text("".join(json.dumps(r) + "\n" for r in rows), encoding="utf-8")
    return path


@pytest.fixture()
def products_file(tmp_path) -> Path:
    return _write_jsonl(tmp_path / "products.txt", [
        {"product_name": "Canon_PowerShot_A85", "manufacturer": "Canon",
         "family": "PowerShot", "model": "A85", "announced-date": "2004-03-17T19:00:00.000-05:00"},
        {"product_name": "Sony_Cyber-shot_DSC-W310", "manufacturer": "Sony",
         "family": "Cyber-shot", "model": "DSC-W310"},
    ])


@pytest.fixture()
def listings_file(tmp_path) -> Path:
    return _write_jsonl(tmp_path / "listings.txt", [
        {"title": "Canon PowerShot A85 Digital Camera", "manufacturer": "Canon",
         "currency": "USD", "price": "199.99"},
        {"title": "Sony Cyber-shot DSC-W310", "manufacturer": "Sony",
         "currency": "USD", "price": "89.00"},
        {"title": "Lens cap 52mm", "manufacturer": "", "currency": "USD", "price": "3.00"},
    ])
