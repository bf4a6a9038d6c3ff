"""
Chord primitives - ChordQuality, ChordNotes and the harmonic analyzer.

Chords are stacks of interval labels. A quality's formula ("1-3-5-b7")
names the labels; the analyzer resolves them against a root into spelled
notes.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum

from chuk_mcp_chords.core.pitch import (
    INTERVAL_SEMITONES,
    note_index_of,
    note_name_of,
    prefers_sharps,
)
from chuk_mcp_chords.errors import UnknownIntervalError, UnknownQualityError

logger = logging.getLogger(__name__)


class ChordQuality(str, Enum):
    """
    The closed set of supported chord qualities.

    Values are the display labels used as catalog keys. Formula, symbol
    suffix and descriptive text live in a data table keyed by member.
    """

    MAJOR = "Major"
    MINOR = "Minor"
    DOMINANT_7TH = "Dominant 7th"
    MAJOR_7TH = "Major 7th"
    MINOR_7TH = "Minor 7th"
    DIMINISHED = "Diminished"
    DIMINISHED_7TH = "Diminished 7th"
    HALF_DIM_7TH = "Half-Dim 7th"
    AUGMENTED = "Augmented"
    SUS2 = "Suspended 2nd"
    SUS4 = "Suspended 4th"
    POWER = "Power Chord"

    @property
    def formula(self) -> str:
        """Hyphen-joined interval labels, e.g. '1-3-5'."""
        return _QUALITY_DATA[self].formula

    @property
    def suffix(self) -> str:
        """Chord symbol suffix appended to the root ('m', 'maj7', ...)."""
        return _QUALITY_DATA[self].suffix

    @property
    def description(self) -> str:
        return _QUALITY_DATA[self].description

    @property
    def intervals_description(self) -> str:
        return _QUALITY_DATA[self].intervals_description

    @property
    def moods(self) -> tuple[str, ...]:
        return _QUALITY_DATA[self].moods

    @property
    def roles(self) -> tuple[str, ...]:
        return _QUALITY_DATA[self].roles

    @property
    def is_suspended(self) -> bool:
        return self in (ChordQuality.SUS2, ChordQuality.SUS4)

    def symbol(self, root: str) -> str:
        """Chord symbol for a root, e.g. 'Am7'."""
        return f"{root}{self.suffix}"

    @classmethod
    def parse(cls, label: str | ChordQuality) -> ChordQuality:
        """
        Parse a quality from its display label.

        Raises:
            UnknownQualityError: if the label is not a supported quality
        """
        if isinstance(label, ChordQuality):
            return label
        try:
            return cls(label.strip())
        except ValueError:
            raise UnknownQualityError(label) from None


@dataclass(frozen=True)
class _QualityData:
    formula: str
    suffix: str
    description: str
    intervals_description: str
    moods: tuple[str, ...]
    roles: tuple[str, ...]


_QUALITY_DATA: dict[ChordQuality, _QualityData] = {
    ChordQuality.MAJOR: _QualityData(
        formula="1-3-5",
        suffix="",
        description="A bright, happy-sounding chord with a stable and resolved quality",
        intervals_description="Root (1), Major Third (3), Perfect Fifth (5)",
        moods=("Happy", "Bright", "Resolved", "Stable", "Hopeful"),
        roles=(
            "Often functions as the tonic (I) chord in major keys, creating stability",
            "Can act as a IV or V chord in progressions, creating movement",
            "Common as a secondary dominant when not in the home key",
        ),
    ),
    ChordQuality.MINOR: _QualityData(
        formula="1-b3-5",
        suffix="m",
        description="A darker, more melancholic sound compared to major chords",
        intervals_description="Root (1), Minor Third (b3), Perfect Fifth (5)",
        moods=("Melancholic", "Sad", "Pensive", "Introspective", "Emotional"),
        roles=(
            "Typically functions as the tonic (i) in minor keys",
            "Often appears as the vi chord in major keys for contrast",
            "Creates emotional depth and contrast in progressions",
        ),
    ),
    ChordQuality.DOMINANT_7TH: _QualityData(
        formula="1-3-5-b7",
        suffix="7",
        description="Creates tension and a strong pull toward resolution",
        intervals_description=(
            "Root (1), Major Third (3), Perfect Fifth (5), Minor Seventh (b7)"
        ),
        moods=("Tense", "Anticipatory", "Bluesy", "Unresolved", "Dynamic"),
        roles=(
            "Strong tendency to resolve to the tonic chord",
            "Often used as the V7 chord in major and minor keys",
            "Key component in jazz turnarounds and blues progressions",
        ),
    ),
    ChordQuality.MAJOR_7TH: _QualityData(
        formula="1-3-5-7",
        suffix="maj7",
        description="Adds warmth and sophistication to the major chord",
        intervals_description=(
            "Root (1), Major Third (3), Perfect Fifth (5), Major Seventh (7)"
        ),
        moods=("Dreamy", "Romantic", "Sophisticated", "Warm", "Peaceful"),
        roles=(
            "Adds sophistication to the tonic function in major keys",
            "Common in jazz, bossa nova, and contemporary pop",
            "Creates a more colorful tonic than a simple major triad",
        ),
    ),
    ChordQuality.MINOR_7TH: _QualityData(
        formula="1-b3-5-b7",
        suffix="m7",
        description="A mellow, jazzy extension of the minor chord",
        intervals_description=(
            "Root (1), Minor Third (b3), Perfect Fifth (5), Minor Seventh (b7)"
        ),
        moods=("Mellow", "Sophisticated", "Thoughtful", "Jazzy", "Smooth"),
        roles=(
            "Adds color to the tonic function in minor keys",
            "Often used as the ii chord in major key jazz progressions",
            "Common in jazz, R&B, soul, and funk music",
        ),
    ),
    ChordQuality.DIMINISHED: _QualityData(
        formula="1-b3-b5",
        suffix="dim",
        description="Creates tension with a dissonant, unstable sound",
        intervals_description="Root (1), Minor Third (b3), Diminished Fifth (b5)",
        moods=("Tense", "Mysterious", "Unstable", "Dramatic", "Anxious"),
        roles=(
            "Often used as a passing chord between more stable harmonies",
            "Common in classical cadences and as vii° in major keys",
            "Can function as a dramatic pivot chord for modulations",
        ),
    ),
    ChordQuality.DIMINISHED_7TH: _QualityData(
        formula="1-b3-b5-bb7",
        suffix="dim7",
        description="Highly dissonant chord used for dramatic tension",
        intervals_description=(
            "Root (1), Minor Third (b3), Diminished Fifth (b5), Diminished Seventh (bb7)"
        ),
        moods=("Tense", "Mysterious", "Unstable", "Dramatic", "Anxious"),
        roles=(
            "Creates strong tension and instability",
            "Often used as a passing chord between more stable harmonies",
            "Can function as a dramatic pivot chord for modulations",
        ),
    ),
    ChordQuality.HALF_DIM_7TH: _QualityData(
        formula="1-b3-b5-b7",
        suffix="m7b5",
        description="Less dissonant than diminished, often in minor progressions",
        intervals_description=(
            "Root (1), Minor Third (b3), Diminished Fifth (b5), Minor Seventh (b7)"
        ),
        moods=("Dark", "Unresolved", "Jazzy", "Yearning"),
        roles=(
            "Functions as the ii chord in minor key ii-V-i progressions",
            "Appears as the vii chord in major keys",
        ),
    ),
    ChordQuality.AUGMENTED: _QualityData(
        formula="1-3-#5",
        suffix="aug",
        description="Tense and unresolved with a mysterious quality",
        intervals_description="Root (1), Major Third (3), Augmented Fifth (#5)",
        moods=("Mysterious", "Unsettled", "Dreamlike", "Exotic", "Tense"),
        roles=(
            "Often functions as a passing chord or dominant substitute",
            "Used to create a mysterious or surreal atmosphere",
            "Can serve as a pivot chord for modulations",
        ),
    ),
    ChordQuality.SUS2: _QualityData(
        formula="1-2-5",
        suffix="sus2",
        description="Creates an open, ambiguous sound without the third",
        intervals_description="Root (1), Major Second (2), Perfect Fifth (5)",
        moods=("Open", "Bright", "Floating", "Ambiguous", "Anticipatory"),
        roles=(
            "Creates an unresolved sound that wants to move to a major or minor chord",
            "Common in rock, pop, and folk guitar playing",
        ),
    ),
    ChordQuality.SUS4: _QualityData(
        formula="1-4-5",
        suffix="sus4",
        description="Creates tension that wants to resolve to a major or minor chord",
        intervals_description="Root (1), Perfect Fourth (4), Perfect Fifth (5)",
        moods=("Anticipatory", "Tense", "Open", "Ambiguous", "Transitional"),
        roles=(
            "Often used for dramatic effect before resolution",
            "Common in rock, pop, and folk guitar playing",
        ),
    ),
    ChordQuality.POWER: _QualityData(
        formula="1-5",
        suffix="5",
        description="Strong and direct with no major/minor quality (root and fifth only)",
        intervals_description="Root (1), Perfect Fifth (5)",
        moods=("Strong", "Bold", "Direct", "Raw", "Powerful"),
        roles=(
            "Backbone of rock, punk and metal rhythm parts",
            "Leaves the major/minor colour to the melody or bass",
        ),
    ),
}

# Default formula catalog: quality label -> formula
DEFAULT_FORMULAS: dict[str, str] = {quality.value: quality.formula for quality in ChordQuality}


def quality_label(quality: str | ChordQuality) -> str:
    """Catalog key for a quality given as enum member or label."""
    return quality.value if isinstance(quality, ChordQuality) else quality


@dataclass(frozen=True)
class ChordNotes:
    """
    A resolved chord: spelled notes (root first) and the formula used.

    Immutable value object - nothing refers back to the catalog.
    """

    root: str
    quality: str
    notes: tuple[str, ...]
    formula: str

    @property
    def pitch_classes(self) -> tuple[int, ...]:
        """Pitch class index of every note, in note order."""
        return tuple(note_index_of(note) for note in self.notes)

    def __str__(self) -> str:
        return " - ".join(self.notes)


class HarmonicAnalyzer:
    """
    Resolves (root, quality) pairs into notes using a formula catalog.

    The formula catalog is injected; by default it is built from the
    ChordQuality enumeration.
    """

    def __init__(self, formulas: Mapping[str, str] | None = None):
        """
        Initialize the analyzer.

        Args:
            formulas: Mapping of quality label to formula string
        """
        self.formulas: Mapping[str, str] = dict(
            formulas if formulas is not None else DEFAULT_FORMULAS
        )

    def formula_for(self, quality: str | ChordQuality) -> str:
        """
        Get the formula string for a quality.

        Raises:
            UnknownQualityError: if the catalog has no formula for it
        """
        label = quality_label(quality)
        formula = self.formulas.get(label)
        if formula is None:
            raise UnknownQualityError(label)
        return formula

    def formula_labels(self, quality: str | ChordQuality) -> list[str]:
        """Interval labels of a quality's formula, in order."""
        return self.formula_for(quality).split("-")

    def resolve_chord(self, root: str, quality: str | ChordQuality) -> ChordNotes:
        """
        Resolve a chord into its spelled notes.

        Notes are de-duplicated by pitch class in formula order and the
        root is guaranteed to come first.

        Args:
            root: Root note name
            quality: Quality label or enum member

        Returns:
            ChordNotes with notes and formula

        Raises:
            UnknownNoteError: if the root is not a recognised spelling
            UnknownQualityError: if the quality has no formula
        """
        root_index = note_index_of(root)
        formula = self.formula_for(quality)
        prefer_sharp = prefers_sharps(root)

        notes: list[str] = []
        seen: set[int] = set()
        for label in formula.split("-"):
            semitones = INTERVAL_SEMITONES.get(label)
            if semitones is None:
                logger.debug(f"Skipping unknown interval label {label!r} in {formula!r}")
                continue
            pitch = (root_index + semitones) % 12
            if pitch not in seen:
                notes.append(note_name_of(pitch, prefer_sharp=prefer_sharp))
                seen.add(pitch)

        root_name = note_name_of(root_index, prefer_sharp=prefer_sharp)
        alt_root_name = note_name_of(root_index, prefer_sharp=not prefer_sharp)

        if root_name not in notes and alt_root_name not in notes:
            notes.insert(0, root_name)
        elif notes[0] not in (root_name, alt_root_name):
            found = root_name if root_name in notes else alt_root_name
            notes.remove(found)
            notes.insert(0, found)

        return ChordNotes(
            root=root,
            quality=quality_label(quality),
            notes=tuple(notes),
            formula=formula,
        )

    def chord_pitch_classes(self, root: str, quality: str | ChordQuality) -> list[int]:
        """Pitch class of every known formula label (duplicates kept)."""
        root_index = note_index_of(root)
        return [
            (root_index + INTERVAL_SEMITONES[label]) % 12
            for label in self.formula_labels(quality)
            if label in INTERVAL_SEMITONES
        ]


# Roman numeral -> semitones above the reference root
ROMAN_INTERVALS: dict[str, int] = {
    "I": 0,
    "bII": 1,
    "ii": 2,
    "#ii": 3,
    "bIII": 3,
    "iii": 4,
    "IV": 5,
    "#IV": 6,
    "V": 7,
    "#V": 8,
    "bVI": 8,
    "vi": 9,
    "#vi": 10,
    "bVII": 10,
    "vii": 11,
    "vii°": 11,
    "i": 0,  # minor tonic target
}


def roman_offset(numeral: str) -> int:
    """
    Semitone offset for a roman numeral.

    Raises:
        UnknownIntervalError: if the numeral is not in the table
    """
    offset = ROMAN_INTERVALS.get(numeral)
    if offset is None:
        raise UnknownIntervalError(numeral)
    return offset
