"""Product Catalog — fixed in-memory catalog and the pure search over it.

Invariants:
    - Catalog is read-only and ordered (p1..p10); search preserves that order
    - Matching is a case-insensitive substring test on the product name
    - search_catalog never mutates state and never raises

Design Decisions:
    - Tuple of frozen dataclasses: immutable at module level, safe to share across requests
    - Policy on empty queries lives in the request schema, not here
"""

from dataclasses import dataclass

from commerce_api.core.domain_types import ProductId


@dataclass(frozen=True)
class CatalogProduct:
    id: ProductId
    name: str
    price: float | None = None
    description: str | None = None


CATALOG: tuple[CatalogProduct, ...] = (
    CatalogProduct(ProductId("p1"), "Widget Pro", 49.99, "Professional-grade widget"),
    CatalogProduct(ProductId("p2"), "Widget Basic", 19.99, "Entry-level widget"),
    CatalogProduct(ProductId("p3"), "Gadget X100", 129.0, "Flagship gadget"),
    CatalogProduct(ProductId("p4"), "Gadget Mini", 59.0, "Compact gadget"),
    CatalogProduct(ProductId("p5"), "Smart Sensor", 34.5, "Wireless environmental sensor"),
    CatalogProduct(ProductId("p6"), "Power Module", 24.0),
    CatalogProduct(ProductId("p7"), "Control Board", 74.0),
    CatalogProduct(ProductId("p8"), "Display Panel", 89.0),
    CatalogProduct(ProductId("p9"), "Cable Kit", 9.99),
    CatalogProduct(ProductId("p10"), "Battery Pack", 39.0, "Rechargeable 10Ah pack"),
)


def catalog_size() -> int:
    return len(CATALOG)


def search_catalog(query: str) -> list[CatalogProduct]:
    """Return catalog products whose name contains query, case-insensitive."""
    needle = query.casefold()
    return [p for p in CATALOG if needle in p.name.casefold()]
