"""
MIDI compilation - voicings and progressions to MIDI files.
"""

from chuk_mcp_chords.compiler.midi import (
    DEFAULT_STRUM_TICKS,
    GUITAR_PROGRAM,
    TICKS_PER_BEAT,
    MidiEvent,
    close_position_pitches,
    events_to_midi,
    progression_to_midi,
    strum_events,
)

__all__ = [
    "DEFAULT_STRUM_TICKS",
    "GUITAR_PROGRAM",
    "TICKS_PER_BEAT",
    "MidiEvent",
    "close_position_pitches",
    "events_to_midi",
    "progression_to_midi",
    "strum_events",
]
