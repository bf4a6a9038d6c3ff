"""
Catalog loading - bundled library plus project overrides.
"""

from chuk_mcp_chords.catalogs.loader import (
    CatalogLoader,
    parse_rule_catalog,
    parse_shape_catalog,
)

__all__ = ["CatalogLoader", "parse_rule_catalog", "parse_shape_catalog"]
