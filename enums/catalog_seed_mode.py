from enum import Enum


class CatalogSeedMode(str, Enum):
    """
    How the item catalog is refreshed on start.

    SYNC: Upsert keyed on item name, identities survive restarts (default)
    RESEED: Delete every item and insert the catalog again, fresh identities
    """
    SYNC = "sync"
    RESEED = "reseed"
