"""
Voicing analysis - fretboard shapes and what they mean.

- VoicingAnalyzer: Parses voicing strings, derives attributes and fingering
- InversionClassifier: Names the chord tone in the bass
- filter_voicings / sort_voicings: Catalog selection helpers
"""

from chuk_mcp_chords.voicing.analyzer import VoicingAnalyzer, assign_fingers, parse_voicing
from chuk_mcp_chords.voicing.inversion import InversionClassifier
from chuk_mcp_chords.voicing.model import (
    FingeringAssignment,
    FretModel,
    VoicingAnalysis,
    VoicingAttributes,
)
from chuk_mcp_chords.voicing.selection import VoicingSelection, filter_voicings, sort_voicings

__all__ = [
    "FingeringAssignment",
    "FretModel",
    "InversionClassifier",
    "VoicingAnalysis",
    "VoicingAnalyzer",
    "VoicingAttributes",
    "VoicingSelection",
    "assign_fingers",
    "filter_voicings",
    "parse_voicing",
    "sort_voicings",
]
