"""
Scale primitives - ScaleType and compatible scales for a chord.

Scales are step patterns from a root. A chord quality maps to a short,
ranked list of scales that fit over it.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import ClassVar

from chuk_mcp_chords.core.chord import ChordQuality
from chuk_mcp_chords.core.pitch import note_index_of, note_name_of, prefers_sharps


@dataclass(frozen=True)
class ScaleType:
    """
    A scale defined by its step pattern.

    The steps are semitones from one degree to the next (not cumulative).
    A major scale is: W W H W W W H (2 2 1 2 2 2 1 semitones)

    Immutable and hashable.
    """

    steps: tuple[int, ...]
    name: str = ""

    # Scale types (defined after class)
    MAJOR: ClassVar[ScaleType]
    NATURAL_MINOR: ClassVar[ScaleType]
    HARMONIC_MINOR: ClassVar[ScaleType]
    DORIAN: ClassVar[ScaleType]
    LYDIAN: ClassVar[ScaleType]
    MIXOLYDIAN: ClassVar[ScaleType]
    BLUES: ClassVar[ScaleType]
    DOMINANT_BEBOP: ClassVar[ScaleType]
    DIMINISHED: ClassVar[ScaleType]
    WHOLE_TONE: ClassVar[ScaleType]
    AUGMENTED: ClassVar[ScaleType]

    def __post_init__(self) -> None:
        # Validate that steps sum to an octave (12 semitones)
        total = sum(self.steps)
        if total != 12:
            raise ValueError(f"Scale steps must sum to 12 semitones, got {total}")

    @property
    def offsets(self) -> tuple[int, ...]:
        """Semitones from the root to each degree (octave excluded)."""
        offsets = [0]
        for step in self.steps[:-1]:
            offsets.append(offsets[-1] + step)
        return tuple(offsets)

    def spell(self, root: str) -> list[str]:
        """
        Spell the scale from a root note name.

        Sharp keys are spelled with sharps, everything else with flats.
        """
        root_index = note_index_of(root)
        prefer_sharp = prefers_sharps(root)
        return [
            note_name_of(root_index + offset, prefer_sharp=prefer_sharp) for offset in self.offsets
        ]

    def __str__(self) -> str:
        return self.name or f"ScaleType({self.steps})"


ScaleType.MAJOR = ScaleType((2, 2, 1, 2, 2, 2, 1), "Major (Ionian)")
ScaleType.NATURAL_MINOR = ScaleType((2, 1, 2, 2, 1, 2, 2), "Natural Minor (Aeolian)")
ScaleType.HARMONIC_MINOR = ScaleType((2, 1, 2, 2, 1, 3, 1), "Harmonic Minor")
ScaleType.DORIAN = ScaleType((2, 1, 2, 2, 2, 1, 2), "Dorian")
ScaleType.LYDIAN = ScaleType((2, 2, 2, 1, 2, 2, 1), "Lydian")
ScaleType.MIXOLYDIAN = ScaleType((2, 2, 1, 2, 2, 1, 2), "Mixolydian")
ScaleType.BLUES = ScaleType((3, 2, 1, 1, 3, 2), "Blues Scale")
ScaleType.DOMINANT_BEBOP = ScaleType((2, 2, 1, 2, 2, 1, 1, 1), "Dominant Bebop")
ScaleType.DIMINISHED = ScaleType((2, 1, 2, 1, 2, 1, 2, 1), "Diminished Scale")
ScaleType.WHOLE_TONE = ScaleType((2, 2, 2, 2, 2, 2), "Whole Tone Scale")
ScaleType.AUGMENTED = ScaleType((3, 1, 3, 1, 3, 1), "Augmented Scale")


class Compatibility(str, Enum):
    """How well a scale fits over a chord."""

    PERFECT = "Perfect"
    GOOD = "Good"
    MODERATE = "Moderate"


@dataclass(frozen=True)
class ScaleInfo:
    """A scale suggestion for a chord."""

    name: str
    notes: tuple[str, ...]
    compatibility: Compatibility


_COMPATIBLE_SCALES: dict[ChordQuality, tuple[tuple[ScaleType, Compatibility], ...]] = {
    ChordQuality.MAJOR: (
        (ScaleType.MAJOR, Compatibility.PERFECT),
        (ScaleType.LYDIAN, Compatibility.GOOD),
        (ScaleType.MIXOLYDIAN, Compatibility.GOOD),
    ),
    ChordQuality.MINOR: (
        (ScaleType.NATURAL_MINOR, Compatibility.PERFECT),
        (ScaleType.DORIAN, Compatibility.GOOD),
        (ScaleType.HARMONIC_MINOR, Compatibility.GOOD),
    ),
    ChordQuality.DOMINANT_7TH: (
        (ScaleType.MIXOLYDIAN, Compatibility.PERFECT),
        (ScaleType.BLUES, Compatibility.GOOD),
        (ScaleType.DOMINANT_BEBOP, Compatibility.GOOD),
    ),
    ChordQuality.DIMINISHED: (
        (ScaleType.DIMINISHED, Compatibility.PERFECT),
        (ScaleType.HARMONIC_MINOR, Compatibility.GOOD),
    ),
    ChordQuality.DIMINISHED_7TH: (
        (ScaleType.DIMINISHED, Compatibility.PERFECT),
        (ScaleType.HARMONIC_MINOR, Compatibility.GOOD),
    ),
    ChordQuality.AUGMENTED: (
        (ScaleType.WHOLE_TONE, Compatibility.PERFECT),
        (ScaleType.AUGMENTED, Compatibility.GOOD),
    ),
}

# Used for every quality without its own entry
_FALLBACK_SCALES: tuple[tuple[ScaleType, Compatibility], ...] = (
    (ScaleType((2, 2, 1, 2, 2, 2, 1), "Major Scale"), Compatibility.GOOD),
    (ScaleType((2, 1, 2, 2, 1, 2, 2), "Natural Minor Scale"), Compatibility.MODERATE),
)


def compatible_scales(root: str, quality: ChordQuality) -> list[ScaleInfo]:
    """
    Get scales that fit over a chord, best fit first.

    Args:
        root: Root note name
        quality: Chord quality

    Returns:
        List of ScaleInfo with spelled notes
    """
    entries = _COMPATIBLE_SCALES.get(quality, _FALLBACK_SCALES)
    return [
        ScaleInfo(
            name=f"{root} {scale.name}",
            notes=tuple(scale.spell(root)),
            compatibility=compatibility,
        )
        for scale, compatibility in entries
    ]
