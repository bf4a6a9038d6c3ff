"""
Guitar fretboard primitives - tuning and per-string pitches.

Strings are indexed low to high: 0 = low E (E2) ... 5 = high e (E4).
Absolute pitches are MIDI note numbers, so the lowest sounding string is
simply the smallest number.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar

from chuk_mcp_chords.core.pitch import midi_to_frequency, note_name_of


@dataclass(frozen=True)
class Tuning:
    """
    Open-string pitches of a six-string guitar.

    Immutable and hashable.
    """

    open_strings: tuple[int, ...]
    name: str = ""

    STANDARD: ClassVar[Tuning]

    def __post_init__(self) -> None:
        if len(self.open_strings) != 6:
            raise ValueError(f"Tuning needs 6 strings, got {len(self.open_strings)}")

    def pitch(self, string_index: int, fret: int) -> int:
        """MIDI pitch of a string stopped at a fret (0 = open)."""
        return self.open_strings[string_index] + fret

    def open_string_names(self) -> list[str]:
        """Note names of the open strings, low to high."""
        return [note_name_of(pitch) for pitch in self.open_strings]


# E2 A2 D3 G3 B3 E4
Tuning.STANDARD = Tuning((40, 45, 50, 55, 59, 64), "standard")


@dataclass(frozen=True)
class SoundingNote:
    """One sounding string of a voicing, as the audio layer needs it."""

    string_index: int
    fret: int
    midi: int
    name: str
    frequency: float

    @classmethod
    def at(cls, tuning: Tuning, string_index: int, fret: int) -> SoundingNote:
        midi = tuning.pitch(string_index, fret)
        return cls(
            string_index=string_index,
            fret=fret,
            midi=midi,
            name=note_name_of(midi),
            frequency=round(midi_to_frequency(midi), 2),
        )
