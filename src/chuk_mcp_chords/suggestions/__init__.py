"""
Chord suggestions - related chords per style.

- SuggestionEngine: Applies roman-numeral rules to the current chord
- resolve_quality / collapse_quality: Quality rule helpers
"""

from chuk_mcp_chords.suggestions.engine import (
    SuggestedChord,
    SuggestionEngine,
    SuggestionResult,
    collapse_quality,
    resolve_quality,
)

__all__ = [
    "SuggestedChord",
    "SuggestionEngine",
    "SuggestionResult",
    "collapse_quality",
    "resolve_quality",
]
