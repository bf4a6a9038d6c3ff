"""
Pydantic models for the chord catalogs.

This module provides:
- ChordShapeCatalog: Voicing strings per root and quality
- SuggestionRuleCatalog: Suggestion rules per style
- StyleRules: Rules for one style, keyed by quality family
- SuggestionRule: Roman numeral plus target quality rule
"""

from chuk_mcp_chords.models.catalog import (
    ChordShapeCatalog,
    StyleRules,
    SuggestionRule,
    SuggestionRuleCatalog,
)

__all__ = [
    "ChordShapeCatalog",
    "StyleRules",
    "SuggestionRule",
    "SuggestionRuleCatalog",
]
