"""
Constants and enums for the chord engine.

No magic strings - use enums and Literal types for constrained values.
"""

from enum import Enum
from typing import Literal


# Six-string guitar, index 0 = low E, index 5 = high e
STRING_COUNT = 6

# Fingers available to the fretting hand (1 = index ... 4 = pinky)
FINGERS: tuple[int, ...] = (1, 2, 3, 4)

# Canonical marker for a muted string in voicing strings
MUTED_MARKER = "x"

# Strings sharing the lowest fret needed to call a shape a barre
BARRE_MIN_STRINGS = 3

# Fret span treated as a wide stretch
WIDE_STRETCH_SPAN = 3


class Position(str, Enum):
    """Neck region a voicing is played in."""

    OPEN = "open"
    LOW = "low"
    MID = "mid"
    HIGH = "high"


class Difficulty(str, Enum):
    """Difficulty tier of a voicing."""

    BEGINNER = "Beginner"
    EASY_INTERMEDIATE = "Easy-Intermediate"
    INTERMEDIATE = "Intermediate"
    ADVANCED = "Advanced"


# Sort rank for difficulty; anything unranked sorts last
DIFFICULTY_RANK: dict[str, int] = {
    Difficulty.BEGINNER.value: 1,
    Difficulty.EASY_INTERMEDIATE.value: 2,
    Difficulty.INTERMEDIATE.value: 3,
    Difficulty.ADVANCED.value: 4,
}
UNRANKED_DIFFICULTY = 5


class VoicingTag(str, Enum):
    """Tags attached to an analysed voicing."""

    OPEN_STRINGS = "Open Strings"
    BARRE_CHORD = "Barre Chord"
    MUTED_STRINGS = "Muted Strings"
    ROOT_POSITION = "Root Position"
    WIDE_STRETCH = "Wide Stretch"


class VoicingFilter(str, Enum):
    """Filters for a catalog of voicings."""

    ALL = "all"
    OPEN = "open"
    BARRE = "barre"
    ROOT_POSITION = "root_position"
    INVERSIONS = "inversions"
    LOW = "low"
    MID = "mid"
    HIGH = "high"


class VoicingSort(str, Enum):
    """Sort keys for a catalog of voicings."""

    POSITION = "position"
    DIFFICULTY = "difficulty"
    STRING_COUNT = "string_count"


class QualityFamily(str, Enum):
    """Collapsed chord quality used to key suggestion rules."""

    MAJOR = "Major"
    MINOR = "Minor"
    DOMINANT_7TH = "Dominant 7th"
    OTHER = "Other"


class SelectionStatus(str, Enum):
    """Outcome of a voicing catalog lookup."""

    FOUND = "found"
    NOT_CATALOGED = "not_cataloged"
    NO_MATCHES = "no_matches"


class SuggestionStatus(str, Enum):
    """Outcome of a batch suggestion run."""

    SUGGESTIONS = "suggestions"
    NO_SUGGESTIONS = "no_suggestions"
    NO_RULES = "no_rules"


# Inversion labels
InversionLabel = Literal[
    "Root Position",
    "1st Inversion",
    "2nd Inversion",
    "3rd Inversion",
    "Voicing (2 in bass)",
    "Voicing (4 in bass)",
    "Other Voicing",
    "Unknown Inversion",
]

# Quality rule that infers the target quality from the numeral
SAME_QUALITY_RULE = "Same"


class ErrorMessages:
    """Standardized error messages."""

    CHORD_NOT_CATALOGED = "No voicings cataloged for '{root} {quality}'."
    NO_RULES = "No suggestion rules for style '{style}' and quality '{family}'."
    NO_SUGGESTIONS = "No suggestions found."
    STYLE_NOT_FOUND = "Style '{style}' not found."
    EMPTY_PROGRESSION = "Progression must contain at least one chord."


class SuccessMessages:
    """Standardized success messages."""

    MIDI_EXPORTED = "Exported {chords} chord(s) to {path}."
    STYLE_COPIED = "Style '{style}' copied to project."
