"""
Unit Tests for utils/catalog_loader.py

Covers the bundled catalog content and validation of custom catalog files.
"""

import json
from collections import Counter

import pytest

import config
from exceptions import InvalidCatalogException
from utils.catalog_loader import load_catalog, parse_catalog

EXPECTED_CATALOG = [
    ("Quantum Gaming Laptop", 2499.99, "Electronics", 4.9, 2156),
    ("Smart Fitness Tracker Pro", 349.99, "Electronics", 4.7, 1247),
    ("Ergonomic Gaming Chair Elite", 599.99, "Furniture", 4.8, 892),
    ("Artisan Coffee Blend", 34.99, "Food & Beverages", 4.9, 3421),
    ("Professional Studio Monitor", 1299.99, "Electronics", 4.9, 678),
    ("Smart Home Hub", 199.99, "Electronics", 4.6, 945),
    ("Wireless Noise-Canceling Headphones", 449.99, "Electronics", 4.8, 1567),
    ("Mechanical Gaming Keyboard", 179.99, "Electronics", 4.7, 1123),
]


def _write_catalog(path, entries):
    path.write_text(json.dumps(entries), encoding="utf-8")
    return path


class TestBundledCatalog:

    def test_exact_entries_in_order(self):
        """Test the bundled file holds the 8 reference items verbatim"""
        entries = load_catalog(config.DEFAULT_CATALOG_FILE)

        assert [(e.name, e.price, e.category, e.rating, e.reviews) for e in entries] == EXPECTED_CATALOG

    def test_all_in_stock_with_image(self):
        entries = load_catalog(config.DEFAULT_CATALOG_FILE)

        assert all(e.in_stock is True for e in entries)
        assert all(e.image.startswith("https://images.unsplash.com/photo-") for e in entries)
        assert all(e.description for e in entries)
        assert all(e.id is None for e in entries)

    def test_first_entry_strings(self):
        laptop = load_catalog(config.DEFAULT_CATALOG_FILE)[0]

        assert laptop.description == ("Next-generation gaming laptop with RTX 4080, 32GB RAM, "
                                      "and 1TB NVMe SSD for ultimate performance")
        assert laptop.image == ("https://images.unsplash.com/photo-1603302576837-37561b2e2302"
                                "?w=400&h=300&fit=crop")

    def test_category_tally(self):
        entries = load_catalog(config.DEFAULT_CATALOG_FILE)

        assert Counter(e.category for e in entries) == {
            "Electronics": 6,
            "Furniture": 1,
            "Food & Beverages": 1,
        }


class TestCatalogValidation:

    def test_optional_fields_get_defaults(self):
        entries = parse_catalog([{"name": "Desk Lamp", "price": 19.5, "category": "Furniture"}])

        lamp = entries[0]
        assert lamp.description == ""
        assert lamp.rating == 0.0
        assert lamp.reviews == 0
        assert lamp.image == ""
        assert lamp.in_stock is True

    def test_top_level_must_be_list(self):
        with pytest.raises(InvalidCatalogException, match="must be a list"):
            parse_catalog({"name": "Desk Lamp"})

    def test_entry_must_be_object(self):
        with pytest.raises(InvalidCatalogException, match="entry 0 is not an object"):
            parse_catalog(["Desk Lamp"])

    def test_missing_required_field(self):
        with pytest.raises(InvalidCatalogException, match="missing price"):
            parse_catalog([{"name": "Desk Lamp", "category": "Furniture"}])

    def test_unknown_field(self):
        with pytest.raises(InvalidCatalogException, match="unknown fields sku"):
            parse_catalog([{"name": "Desk Lamp", "price": 1, "category": "Furniture", "sku": "X"}])

    @pytest.mark.parametrize("override", [
        {"price": -0.01},
        {"rating": 5.1},
        {"rating": -1},
        {"reviews": -3},
        {"name": "   "},
    ])
    def test_invalid_values(self, override):
        entry = {"name": "Desk Lamp", "price": 19.5, "category": "Furniture", **override}

        with pytest.raises(InvalidCatalogException):
            parse_catalog([entry])

    def test_boundary_values_accepted(self):
        entries = parse_catalog([{"name": "Sticker", "price": 0, "category": "Misc", "rating": 5.0, "reviews": 0}])
        assert entries[0].price == 0
        assert entries[0].rating == 5.0

    def test_duplicate_names(self):
        entry = {"name": "Desk Lamp", "price": 19.5, "category": "Furniture"}

        with pytest.raises(InvalidCatalogException, match="duplicate item name 'Desk Lamp'"):
            parse_catalog([entry, dict(entry)])


class TestLoadCatalogFile:

    def test_custom_file(self, tmp_path):
        path = _write_catalog(tmp_path / "catalog.json", [
            {"name": "Desk Lamp", "price": 19.5, "category": "Furniture"},
            {"name": "Tea Sampler", "price": 12.0, "category": "Food & Beverages"},
        ])

        assert [e.name for e in load_catalog(path)] == ["Desk Lamp", "Tea Sampler"]

    def test_missing_file(self, tmp_path):
        with pytest.raises(InvalidCatalogException, match="file not found"):
            load_catalog(tmp_path / "nope.json")

    def test_malformed_json(self, tmp_path):
        path = tmp_path / "catalog.json"
        path.write_text("[{\"name\": ", encoding="utf-8")

        with pytest.raises(InvalidCatalogException, match="malformed JSON"):
            load_catalog(path)

    def test_invalid_utf8(self, tmp_path):
        path = tmp_path / "catalog.json"
        path.write_bytes(b"\xff\xfe[]")

        with pytest.raises(InvalidCatalogException, match="not valid UTF-8"):
            load_catalog(path)

    def test_directory_instead_of_file(self, tmp_path):
        with pytest.raises(InvalidCatalogException, match="cannot read file"):
            load_catalog(tmp_path)
