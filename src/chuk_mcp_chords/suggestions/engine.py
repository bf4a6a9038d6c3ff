"""
Suggestion engine - related chords by roman-numeral transposition.

A suggestion rule pairs a roman numeral with a quality rule. The numeral
transposes the current root; the quality rule either names the target
quality or says "Same", which infers it from the numeral.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from chuk_mcp_chords.constants import (
    SAME_QUALITY_RULE,
    QualityFamily,
    SuggestionStatus,
)
from chuk_mcp_chords.core.chord import ChordQuality, roman_offset
from chuk_mcp_chords.core.pitch import note_index_of, note_name_of
from chuk_mcp_chords.models.catalog import ChordShapeCatalog, SuggestionRuleCatalog

logger = logging.getLogger(__name__)

# Numerals whose "Same" rule means a minor chord
_MINOR_NUMERALS = frozenset({"ii", "iii", "vi"})
_DIMINISHED_NUMERAL = "vii°"
_MINOR_TONIC_NUMERAL = "i"


@dataclass(frozen=True)
class SuggestedChord:
    """One suggested chord and whether the shape catalog can show it."""

    name: str
    root: str
    quality: str
    numeral: str
    has_voicings: bool = False


@dataclass(frozen=True)
class SuggestionResult:
    """
    Outcome of suggesting chords for a style.

    ``NO_RULES`` means the style has nothing registered for the current
    quality family; ``NO_SUGGESTIONS`` means rules ran but produced nothing.
    """

    style: str
    family: QualityFamily
    status: SuggestionStatus
    chords: tuple[SuggestedChord, ...] = field(default_factory=tuple)

    @property
    def names(self) -> list[str]:
        return [chord.name for chord in self.chords]


def resolve_quality(numeral: str, quality_rule: str) -> ChordQuality:
    """
    Target quality for a numeral and quality rule.

    "vii°" always gives Diminished and "i" always gives Minor. Otherwise a
    named quality passes through and "Same" infers Minor for ii, iii and vi,
    Major for the rest.

    Raises:
        UnknownQualityError: if the rule is neither "Same" nor a quality
    """
    if numeral == _DIMINISHED_NUMERAL:
        return ChordQuality.DIMINISHED
    if numeral == _MINOR_TONIC_NUMERAL:
        return ChordQuality.MINOR
    if quality_rule == SAME_QUALITY_RULE:
        return ChordQuality.MINOR if numeral in _MINOR_NUMERALS else ChordQuality.MAJOR
    return ChordQuality.parse(quality_rule)


def collapse_quality(quality: str | ChordQuality) -> QualityFamily:
    """Collapse a quality label into the family that keys suggestion rules."""
    label = quality.value if isinstance(quality, ChordQuality) else quality
    if "Major" in label:
        return QualityFamily.MAJOR
    if "Minor" in label:
        return QualityFamily.MINOR
    if "Dominant 7th" in label:
        return QualityFamily.DOMINANT_7TH
    return QualityFamily.OTHER


class SuggestionEngine:
    """
    Suggests related chords from a rule catalog.

    The shape catalog is optional; when given, each suggestion is marked
    with whether voicings exist for it.
    """

    def __init__(
        self,
        rules: SuggestionRuleCatalog,
        shapes: ChordShapeCatalog | None = None,
    ):
        self.rules = rules
        self.shapes = shapes

    def suggest_chord(self, root: str, numeral: str, quality_rule: str) -> SuggestedChord:
        """
        Transpose a root by a roman numeral and resolve the target quality.

        Accidental targets are spelled with flats (Db, Eb, Gb, Ab, Bb).

        Raises:
            UnknownNoteError: if the root is not recognised
            UnknownIntervalError: if the numeral is not in the table
            UnknownQualityError: if the quality rule is not recognised
        """
        target = (note_index_of(root) + roman_offset(numeral)) % 12
        target_root = note_name_of(target, prefer_sharp=False)
        quality = resolve_quality(numeral, quality_rule)
        has_voicings = (
            self.shapes.has_voicings(target_root, quality.value) if self.shapes else False
        )
        return SuggestedChord(
            name=f"{target_root} {quality.value}",
            root=target_root,
            quality=quality.value,
            numeral=numeral,
            has_voicings=has_voicings,
        )

    def suggest_relative_chord(self, root: str, numeral: str, quality_rule: str) -> str:
        """
        Name of the chord a numeral away from a root, e.g. "G Dominant 7th".

        Does not check whether the chord has cataloged voicings.
        """
        return self.suggest_chord(root, numeral, quality_rule).name

    def suggest_all_for_style(
        self,
        root: str,
        quality: str | ChordQuality,
        style: str,
    ) -> SuggestionResult:
        """
        Run every rule of a style for the current chord.

        Args:
            root: Current chord root
            quality: Current chord quality (collapsed to a family first)
            style: Style name from the rule catalog

        Returns:
            SuggestionResult with distinct chord names in rule order

        Raises:
            UnknownNoteError: if the root is not recognised, even when the
                style has no rules for it
        """
        note_index_of(root)
        family = collapse_quality(quality)
        style_rules = self.rules.get_style(style)
        rules = style_rules.rules_for(family) if style_rules else None
        if rules is None:
            logger.debug(f"No suggestion rules for style {style!r} and {family.value}")
            return SuggestionResult(style=style, family=family, status=SuggestionStatus.NO_RULES)

        chords: list[SuggestedChord] = []
        seen: set[str] = set()
        for rule in rules:
            chord = self.suggest_chord(root, rule.interval, rule.quality)
            if chord.name not in seen:
                seen.add(chord.name)
                chords.append(chord)

        status = SuggestionStatus.SUGGESTIONS if chords else SuggestionStatus.NO_SUGGESTIONS
        return SuggestionResult(style=style, family=family, status=status, chords=tuple(chords))
