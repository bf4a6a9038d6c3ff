"""
Core music primitives - the theory layer.

These are the pure building blocks everything else composes on:
- note_index_of / note_name_of: The 12 pitch classes and their spellings
- ChordQuality: Closed set of chord qualities with formula and descriptive data
- HarmonicAnalyzer: Resolves (root, quality) into spelled notes
- roman_offset: Roman numeral to semitones above a reference root
- ScaleType / compatible_scales: Scales that fit over a chord
- Tuning: Guitar open-string pitches
"""

from chuk_mcp_chords.core.chord import (
    DEFAULT_FORMULAS,
    ROMAN_INTERVALS,
    ChordNotes,
    ChordQuality,
    HarmonicAnalyzer,
    quality_label,
    roman_offset,
)
from chuk_mcp_chords.core.guitar import SoundingNote, Tuning
from chuk_mcp_chords.core.pitch import (
    INTERVAL_SEMITONES,
    all_note_names,
    midi_to_frequency,
    note_index_of,
    note_name_of,
    prefers_sharps,
)
from chuk_mcp_chords.core.scale import Compatibility, ScaleInfo, ScaleType, compatible_scales

__all__ = [
    # Pitch
    "INTERVAL_SEMITONES",
    "all_note_names",
    "midi_to_frequency",
    "note_index_of",
    "note_name_of",
    "prefers_sharps",
    # Chord
    "DEFAULT_FORMULAS",
    "ChordNotes",
    "ChordQuality",
    "HarmonicAnalyzer",
    "ROMAN_INTERVALS",
    "quality_label",
    "roman_offset",
    # Scale
    "Compatibility",
    "ScaleInfo",
    "ScaleType",
    "compatible_scales",
    # Guitar
    "SoundingNote",
    "Tuning",
]
