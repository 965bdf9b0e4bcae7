"""Catalog — verifies the fixed product list and case-insensitive name search.

Tests:
    - Catalog holds exactly 10 products, ids p1..p10 in order
    - Search is a case-insensitive substring match that keeps catalog order
    - Unmatched queries return an empty list, never raise
"""

import dataclasses

import pytest

from commerce_api.core.catalog import CATALOG, catalog_size, search_catalog


def test_catalog_has_ten_products_in_order():
    assert catalog_size() == 10
    assert [p.id for p in CATALOG] == [f"p{i}" for i in range(1, 11)]


def test_catalog_names_are_unique():
    names = [p.name for p in CATALOG]
    assert len(set(names)) == len(names)


def test_search_widget_matches_both_widgets():
    results = search_catalog("widget")
    assert [p.name for p in results] == ["Widget Pro", "Widget Basic"]


def test_search_is_case_insensitive():
    assert search_catalog("GADGET") == search_catalog("gadget")
    assert len(search_catalog("gAdGeT")) == 2


def test_search_matches_substring_inside_name():
    results = search_catalog("board")
    assert [p.id for p in results] == ["p7"]


def test_search_without_match_returns_empty_list():
    assert search_catalog("nonexistentxyz") == []


def test_catalog_products_are_immutable():
    with pytest.raises(dataclasses.FrozenInstanceError):
        CATALOG[0].name = "Changed"
