"""
Catalog Loader

Loads the item catalog that is published on every start from a JSON file.
The file holds a list of objects with the Item columns, for example:

    [{"name": "Smart Home Hub", "price": 199.99, "category": "Electronics",
      "description": "...", "rating": 4.6, "reviews": 945,
      "image": "https://...", "in_stock": true}]

Usage:
    from utils.catalog_loader import load_catalog

    entries = load_catalog(config.DEFAULT_CATALOG_FILE)
"""

import json
import logging
from pathlib import Path

from pydantic import ValidationError

from exceptions.seed import InvalidCatalogException
from models.item import ItemDTO

logger = logging.getLogger(__name__)

REQUIRED_FIELDS = ("name", "price", "category")

# Optional columns of a catalog entry and their values when omitted
CATALOG_DEFAULTS = {
    "description": "",
    "rating": 0.0,
    "reviews": 0,
    "image": "",
    "in_stock": True,
}


def parse_catalog(raw_entries: list, source: str = "<memory>") -> list[ItemDTO]:
    """
    Validate raw catalog entries.

    Args:
        raw_entries: Decoded JSON list of item objects
        source: Name of the origin, used in error messages

    Returns:
        list[ItemDTO] in file order, without ids

    Raises:
        InvalidCatalogException: On wrong shape, missing or invalid fields, duplicate names
    """
    if not isinstance(raw_entries, list):
        raise InvalidCatalogException(source, "top-level value must be a list of items")

    entries = []
    seen_names = set()
    for index, raw in enumerate(raw_entries):
        if not isinstance(raw, dict):
            raise InvalidCatalogException(source, f"entry {index} is not an object")

        missing = [field for field in REQUIRED_FIELDS if raw.get(field) is None]
        if missing:
            raise InvalidCatalogException(source, f"entry {index} is missing {', '.join(missing)}")

        unknown = set(raw) - set(REQUIRED_FIELDS) - set(CATALOG_DEFAULTS)
        if unknown:
            raise InvalidCatalogException(source, f"entry {index} has unknown fields {', '.join(sorted(unknown))}")

        try:
            entry = ItemDTO.model_validate({**CATALOG_DEFAULTS, **raw})
        except ValidationError as e:
            raise InvalidCatalogException(source, f"entry {index} ({raw.get('name')}): {e}")

        # Name is the key catalog sync matches rows on
        if entry.name in seen_names:
            raise InvalidCatalogException(source, f"duplicate item name '{entry.name}'")
        seen_names.add(entry.name)
        entries.append(entry)

    return entries


def load_catalog(path: Path | str) -> list[ItemDTO]:
    """
    Load and validate the catalog file.

    Raises:
        InvalidCatalogException: If the file cannot be read or decoded, or fails validation
    """
    path = Path(path)
    try:
        with open(path, "r", encoding="utf-8") as f:
            raw_entries = json.load(f)
    except FileNotFoundError:
        raise InvalidCatalogException(str(path), "file not found")
    except OSError as e:
        raise InvalidCatalogException(str(path), f"cannot read file: {e}")
    except UnicodeDecodeError as e:
        raise InvalidCatalogException(str(path), f"not valid UTF-8: {e}")
    except json.JSONDecodeError as e:
        raise InvalidCatalogException(str(path), f"malformed JSON: {e}")

    entries = parse_catalog(raw_entries, str(path))
    logger.info(f"Loaded {len(entries)} catalog items from {path.name}")
    return entries
