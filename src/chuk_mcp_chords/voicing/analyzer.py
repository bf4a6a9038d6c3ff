"""
Voicing analyzer - parsing, attribute derivation and fingering.

A voicing string is six whitespace-separated tokens, low E first. Numeric
tokens are frets (0 = open), anything else mutes the string.

The analyzer works on integers only; the inversion label it attaches is
computed by the InversionClassifier and passed in.
"""

from __future__ import annotations

import logging

from chuk_mcp_chords.constants import (
    FINGERS,
    STRING_COUNT,
    WIDE_STRETCH_SPAN,
    Difficulty,
    Position,
    VoicingTag,
)
from chuk_mcp_chords.errors import MalformedVoicingError
from chuk_mcp_chords.voicing.model import (
    FingeringAssignment,
    FretModel,
    VoicingAnalysis,
    VoicingAttributes,
)

logger = logging.getLogger(__name__)


def parse_voicing(voicing: str) -> FretModel:
    """
    Parse a voicing string into a fret model.

    Args:
        voicing: e.g. "x 3 2 0 1 0"

    Returns:
        FretModel with six entries

    Raises:
        MalformedVoicingError: if the string does not have exactly six tokens
    """
    tokens = voicing.split()
    if len(tokens) != STRING_COUNT:
        raise MalformedVoicingError(voicing, len(tokens))
    return FretModel(frets=tuple(_parse_token(token) for token in tokens))


def _parse_token(token: str) -> int | None:
    """Fret number for a token, or None when the string is muted."""
    if token.isdecimal():
        return int(token)
    return None


def position_of(frets: FretModel) -> tuple[Position, str]:
    """Neck position and its display name."""
    lowest = frets.lowest_fret
    if lowest == 0 or frets.highest_fret <= 3:
        return Position.OPEN, "Open Position"
    if lowest >= 8:
        return Position.HIGH, f"High Position (Fret {lowest})"
    if lowest >= 4:
        return Position.MID, f"Mid Position (Fret {lowest})"
    return Position.LOW, f"Low Position (Fret {lowest})"


def difficulty_of(frets: FretModel) -> Difficulty:
    """Difficulty tier from barre and stretch."""
    is_barre = frets.is_barre
    wide = frets.span >= WIDE_STRETCH_SPAN
    if is_barre and wide:
        return Difficulty.ADVANCED
    if is_barre or wide:
        return Difficulty.INTERMEDIATE
    if len(set(frets.fretted)) >= 3:
        return Difficulty.EASY_INTERMEDIATE
    return Difficulty.BEGINNER


def string_pattern_of(frets: FretModel) -> str:
    """Human-readable description of which strings sound."""
    count = frets.used_string_count
    if count == STRING_COUNT:
        return "All 6 strings"
    played = ", ".join(str(number) for number in frets.played_strings)
    return f"{count} strings ({played})"


def assign_fingers(frets: FretModel) -> FingeringAssignment:
    """
    Assign fretting-hand fingers to a voicing.

    1. Under a barre, finger 1 covers every string at the lowest fret.
    2. Remaining stopped strings are taken highest fret first (ties by
       string index) and each gets the lowest free finger.
    3. A string stays unassigned only when all four fingers are used.
    """
    fingers: list[int | None] = [None] * STRING_COUNT
    used: set[int] = set()

    if frets.is_barre:
        lowest = frets.lowest_fret
        for i, fret in enumerate(frets.frets):
            if fret == lowest:
                fingers[i] = 1
        used.add(1)

    remaining = [
        i
        for i, fret in enumerate(frets.frets)
        if fingers[i] is None and fret is not None and fret > 0
    ]
    # sorted() is stable, so equal frets keep ascending string order
    remaining = sorted(remaining, key=lambda i: -(frets.frets[i] or 0))

    for i in remaining:
        for finger in FINGERS:
            if finger not in used:
                fingers[i] = finger
                used.add(finger)
                break

    return FingeringAssignment(fingers=tuple(fingers))


def tags_of(frets: FretModel, inversion: str) -> tuple[str, ...]:
    """Descriptive tags for a voicing."""
    tags: list[str] = []
    if frets.has_open_strings:
        tags.append(VoicingTag.OPEN_STRINGS.value)
    if frets.is_barre:
        tags.append(VoicingTag.BARRE_CHORD.value)
    if frets.has_muted_strings:
        tags.append(VoicingTag.MUTED_STRINGS.value)
    if "Root Position" in inversion:
        tags.append(VoicingTag.ROOT_POSITION.value)
    elif "Inversion" in inversion:
        tags.append(inversion)
    if frets.span >= WIDE_STRETCH_SPAN:
        tags.append(VoicingTag.WIDE_STRETCH.value)
    return tuple(tags)


class VoicingAnalyzer:
    """
    Parses voicings and derives their attributes and fingering.

    Catalog voicings are cached by (voicing string, inversion label). They
    are immutable, so entries never go stale. Ad-hoc voicings are analysed
    with ``cache=False`` and never stored.
    """

    def __init__(self) -> None:
        self._cache: dict[tuple[str, str], VoicingAnalysis] = {}

    def parse(self, voicing: str) -> FretModel:
        """Parse a voicing string (see parse_voicing)."""
        return parse_voicing(voicing)

    def attributes(self, frets: FretModel, inversion: str) -> VoicingAttributes:
        """Derive the attribute summary for a parsed voicing."""
        position, position_name = position_of(frets)
        return VoicingAttributes(
            position=position,
            position_name=position_name,
            difficulty=difficulty_of(frets).value,
            fret_position=frets.lowest_fret,
            highest_fret=frets.highest_fret,
            fret_span=frets.span,
            used_string_count=frets.used_string_count,
            string_pattern=string_pattern_of(frets),
            is_barre=frets.is_barre,
            has_open_strings=frets.has_open_strings,
            has_muted_strings=frets.has_muted_strings,
            inversion=inversion,
            tags=tags_of(frets, inversion),
        )

    def fingering(self, frets: FretModel) -> FingeringAssignment:
        """Fingering for a parsed voicing (see assign_fingers)."""
        return assign_fingers(frets)

    def analyze(self, voicing: str, inversion: str, cache: bool = True) -> VoicingAnalysis:
        """
        Parse a voicing and derive attributes and fingering in one call.

        Args:
            voicing: Voicing string
            inversion: Inversion label from the InversionClassifier
            cache: Store the result (use for catalog voicings only)

        Raises:
            MalformedVoicingError: if the voicing is not six tokens
        """
        key = (voicing, inversion)
        if key in self._cache:
            return self._cache[key]

        frets = self.parse(voicing)
        analysis = VoicingAnalysis(
            voicing=voicing,
            frets=frets,
            fingering=self.fingering(frets),
            attributes=self.attributes(frets, inversion),
        )
        logger.debug(f"Analyzed voicing {voicing!r}: {analysis.attributes.position_name}")
        if cache:
            self._cache[key] = analysis
        return analysis

    @property
    def cache_size(self) -> int:
        return len(self._cache)

    def clear_cache(self) -> None:
        """Clear the analysis cache."""
        self._cache.clear()
