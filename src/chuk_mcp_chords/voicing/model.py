"""
Voicing value objects - fret model, fingering and derived attributes.

All of these are created by pure computations and never mutated.
"""

from __future__ import annotations

from dataclasses import dataclass

from chuk_mcp_chords.constants import BARRE_MIN_STRINGS, MUTED_MARKER, Position


@dataclass(frozen=True)
class FretModel:
    """
    A parsed voicing: one entry per string, low E first.

    Each entry is a fret number (0 = open) or None for a muted string.
    """

    frets: tuple[int | None, ...]

    @property
    def fretted(self) -> list[int]:
        """Fret values of stopped strings (open and muted excluded)."""
        return [fret for fret in self.frets if fret is not None and fret > 0]

    @property
    def lowest_fret(self) -> int:
        fretted = self.fretted
        return min(fretted) if fretted else 0

    @property
    def highest_fret(self) -> int:
        fretted = self.fretted
        return max(fretted) if fretted else 0

    @property
    def span(self) -> int:
        return self.highest_fret - self.lowest_fret

    @property
    def used_string_count(self) -> int:
        """Strings that sound (open or fretted)."""
        return sum(1 for fret in self.frets if fret is not None)

    @property
    def played_strings(self) -> list[int]:
        """1-based numbers of sounding strings, low E = 1."""
        return [i + 1 for i, fret in enumerate(self.frets) if fret is not None]

    @property
    def has_open_strings(self) -> bool:
        return any(fret == 0 for fret in self.frets)

    @property
    def has_muted_strings(self) -> bool:
        return any(fret is None for fret in self.frets)

    @property
    def is_barre(self) -> bool:
        """Three or more strings share the lowest fretted position."""
        fretted = self.fretted
        if not fretted:
            return False
        return fretted.count(min(fretted)) >= BARRE_MIN_STRINGS

    @property
    def is_all_muted(self) -> bool:
        return all(fret is None for fret in self.frets)

    def to_voicing_string(self) -> str:
        """Canonical voicing string, e.g. 'x 3 2 0 1 0'."""
        return " ".join(MUTED_MARKER if fret is None else str(fret) for fret in self.frets)

    def __str__(self) -> str:
        return self.to_voicing_string()


@dataclass(frozen=True)
class FingeringAssignment:
    """
    Finger per string, parallel to FretModel.frets.

    None means no finger (open, muted or unassigned); 1-4 = index to pinky.
    """

    fingers: tuple[int | None, ...]

    @property
    def used_fingers(self) -> set[int]:
        return {finger for finger in self.fingers if finger is not None}


@dataclass(frozen=True)
class VoicingAttributes:
    """Read-only summary of a voicing."""

    position: Position
    position_name: str
    difficulty: str
    fret_position: int
    highest_fret: int
    fret_span: int
    used_string_count: int
    string_pattern: str
    is_barre: bool
    has_open_strings: bool
    has_muted_strings: bool
    inversion: str
    tags: tuple[str, ...]


@dataclass(frozen=True)
class VoicingAnalysis:
    """Everything derived from one voicing string for one chord."""

    voicing: str
    frets: FretModel
    fingering: FingeringAssignment
    attributes: VoicingAttributes

    def to_dict(self) -> dict[str, object]:
        """JSON-serializable dictionary."""
        attrs = self.attributes
        return {
            "voicing": self.voicing,
            "frets": list(self.frets.frets),
            "fingering": list(self.fingering.fingers),
            "position": attrs.position.value,
            "position_name": attrs.position_name,
            "difficulty": attrs.difficulty,
            "fret_position": attrs.fret_position,
            "fret_span": attrs.fret_span,
            "used_string_count": attrs.used_string_count,
            "string_pattern": attrs.string_pattern,
            "is_barre": attrs.is_barre,
            "has_open_strings": attrs.has_open_strings,
            "has_muted_strings": attrs.has_muted_strings,
            "inversion": attrs.inversion,
            "tags": list(attrs.tags),
        }
