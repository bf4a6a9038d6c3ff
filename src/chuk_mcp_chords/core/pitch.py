"""
Pitch primitives - note names, pitch classes and interval labels.

Pitch classes are numbered with C = 0 throughout. Every pitch class has a
sharp-preferred and a flat-preferred spelling; naturals spell the same in
both tables, so 17 distinct names are recognised in total.
"""

from __future__ import annotations

from chuk_mcp_chords.errors import UnknownNoteError

# Display name mappings
_SHARP_NAMES: list[str] = [
    "C",
    "C#",
    "D",
    "D#",
    "E",
    "F",
    "F#",
    "G",
    "G#",
    "A",
    "A#",
    "B",
]
_FLAT_NAMES: list[str] = [
    "C",
    "Db",
    "D",
    "Eb",
    "E",
    "F",
    "Gb",
    "G",
    "Ab",
    "A",
    "Bb",
    "B",
]

# Roots whose keys are conventionally spelled with sharps
_SHARP_KEY_ROOTS = frozenset({"G", "D", "A", "E", "B", "F#", "C#"})

# Formula interval labels -> semitones above the root
INTERVAL_SEMITONES: dict[str, int] = {
    "1": 0,
    "b2": 1,
    "2": 2,
    "#2": 3,
    "b3": 3,
    "3": 4,
    "4": 5,
    "#4": 6,
    "b5": 6,
    "5": 7,
    "#5": 8,
    "b6": 8,
    "6": 9,
    "#6": 10,
    "bb7": 9,
    "b7": 10,
    "7": 11,
}


def note_index_of(name: str) -> int:
    """
    Get the pitch class index (0-11, C = 0) for a note name.

    Accepts sharp and flat spellings. An alternate spelling after a slash
    ("C#/Db") is ignored.

    Raises:
        UnknownNoteError: if the spelling is not recognised
    """
    if name in _SHARP_NAMES:
        return _SHARP_NAMES.index(name)
    if name in _FLAT_NAMES:
        return _FLAT_NAMES.index(name)

    clean = name.split("/")[0].strip()
    if clean in _SHARP_NAMES:
        return _SHARP_NAMES.index(clean)
    if clean in _FLAT_NAMES:
        return _FLAT_NAMES.index(clean)

    raise UnknownNoteError(name)


def note_name_of(index: int, prefer_sharp: bool = True) -> str:
    """
    Spell a pitch class index.

    The index is wrapped into 0-11 first, so negative offsets are fine.
    With ``prefer_sharp=False`` accidentals use their flat spelling;
    naturals are returned as-is.
    """
    index = index % 12
    if prefer_sharp:
        return _SHARP_NAMES[index]

    flat = _FLAT_NAMES[index]
    if flat.endswith("b"):
        return flat
    return _SHARP_NAMES[index]


def prefers_sharps(root_name: str) -> bool:
    """Whether notes built on this root are conventionally spelled with sharps."""
    return "#" in root_name or root_name in _SHARP_KEY_ROOTS


def interval_semitones(label: str) -> int | None:
    """Semitone offset for a formula label, or None if the label is unknown."""
    return INTERVAL_SEMITONES.get(label)


def all_note_names() -> list[str]:
    """All recognised spellings, sharps first."""
    flats_only = [name for name in _FLAT_NAMES if name not in _SHARP_NAMES]
    return [*_SHARP_NAMES, *flats_only]


def midi_to_frequency(midi_note: int, a4_hz: float = 440.0) -> float:
    """Equal-tempered frequency in Hz for a MIDI note number (A4 = 69)."""
    return a4_hz * 2.0 ** ((midi_note - 69) / 12)
