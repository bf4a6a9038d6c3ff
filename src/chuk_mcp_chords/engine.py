"""
Chord engine - the single entry point over the theory, voicing and
suggestion layers.

Catalogs are injected at construction. Anything not supplied comes from
the ChordQuality enumeration (formulas) or the CatalogLoader (shapes and
suggestion rules).
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass

from chuk_mcp_chords.catalogs.loader import CatalogLoader
from chuk_mcp_chords.compiler.midi import close_position_pitches
from chuk_mcp_chords.constants import (
    InversionLabel,
    SelectionStatus,
    VoicingFilter,
    VoicingSort,
)
from chuk_mcp_chords.core.chord import ChordNotes, ChordQuality, HarmonicAnalyzer
from chuk_mcp_chords.core.guitar import SoundingNote, Tuning
from chuk_mcp_chords.core.scale import ScaleInfo, compatible_scales
from chuk_mcp_chords.models.catalog import ChordShapeCatalog, SuggestionRuleCatalog
from chuk_mcp_chords.suggestions.engine import SuggestionEngine, SuggestionResult
from chuk_mcp_chords.voicing.analyzer import VoicingAnalyzer
from chuk_mcp_chords.voicing.inversion import InversionClassifier
from chuk_mcp_chords.voicing.model import VoicingAnalysis
from chuk_mcp_chords.voicing.selection import VoicingSelection, filter_voicings, sort_voicings

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ChordDescription:
    """Theory summary of a chord."""

    root: str
    quality: ChordQuality
    symbol: str
    notes: tuple[str, ...]
    formula: str
    description: str
    intervals: str
    scales: tuple[ScaleInfo, ...]
    moods: tuple[str, ...]
    roles: tuple[str, ...]

    def to_dict(self) -> dict[str, object]:
        """JSON-serializable dictionary."""
        return {
            "root": self.root,
            "quality": self.quality.value,
            "symbol": self.symbol,
            "notes": list(self.notes),
            "formula": self.formula,
            "description": self.description,
            "intervals": self.intervals,
            "scales": [
                {
                    "name": scale.name,
                    "notes": list(scale.notes),
                    "compatibility": scale.compatibility.value,
                }
                for scale in self.scales
            ],
            "moods": list(self.moods),
            "roles": list(self.roles),
        }


class ChordEngine:
    """
    Facade over the chord analysis components.

    Example:
        engine = ChordEngine()
        engine.resolve_chord("C", "Major").notes      # ("C", "E", "G")
        engine.classify_inversion("C", "Major", "x 3 2 0 1 0")  # "Root Position"
    """

    def __init__(
        self,
        formulas: Mapping[str, str] | None = None,
        shapes: ChordShapeCatalog | None = None,
        rules: SuggestionRuleCatalog | None = None,
        tuning: Tuning | None = None,
        loader: CatalogLoader | None = None,
    ):
        """
        Initialize the engine.

        Args:
            formulas: Quality label -> formula (defaults to ChordQuality)
            shapes: Voicing catalog (defaults to the loader's)
            rules: Suggestion catalog (defaults to the loader's)
            tuning: Guitar tuning (defaults to standard)
            loader: Catalog loader used for missing catalogs
        """
        if shapes is None or rules is None:
            loader = loader or CatalogLoader()
        self.shapes = shapes if shapes is not None else loader.load_shapes()
        self.rules = rules if rules is not None else loader.load_rules()
        self.tuning = tuning or Tuning.STANDARD

        self.harmonic = HarmonicAnalyzer(formulas)
        self.voicings = VoicingAnalyzer()
        self.inversions = InversionClassifier(self.harmonic, self.tuning)
        self.suggestions = SuggestionEngine(self.rules, self.shapes)

    # Harmony

    def resolve_chord(self, root: str, quality: str | ChordQuality) -> ChordNotes:
        """Spelled notes and formula of a chord."""
        return self.harmonic.resolve_chord(root, quality)

    def describe_chord(self, root: str, quality: str | ChordQuality) -> ChordDescription:
        """
        Theory summary: symbol, notes, intervals, scales, moods and roles.

        Raises:
            UnknownNoteError: if the root is not recognised
            UnknownQualityError: if the quality is not a ChordQuality
        """
        member = ChordQuality.parse(quality)
        chord = self.resolve_chord(root, member)
        return ChordDescription(
            root=root,
            quality=member,
            symbol=member.symbol(root),
            notes=chord.notes,
            formula=chord.formula,
            description=member.description,
            intervals=member.intervals_description,
            scales=tuple(compatible_scales(root, member)),
            moods=member.moods,
            roles=member.roles,
        )

    # Voicings

    def classify_inversion(
        self, root: str, quality: str | ChordQuality, voicing: str
    ) -> InversionLabel:
        """Inversion label for a voicing of a chord."""
        return self.inversions.classify(root, quality, voicing)

    def analyze_voicing(
        self,
        voicing: str,
        root: str | None = None,
        quality: str | ChordQuality | None = None,
    ) -> VoicingAnalysis:
        """
        Parse a voicing and derive attributes and fingering.

        With a root and quality the inversion is classified too; without
        them the inversion label is empty. The result is not cached, since
        the voicing may be arbitrary caller input.

        Raises:
            MalformedVoicingError: if the voicing is not six tokens
            NoPlayableNoteError: if a chord is given and every string is muted
        """
        return self._analyze(voicing, root, quality, cache=False)

    def _analyze(
        self,
        voicing: str,
        root: str | None,
        quality: str | ChordQuality | None,
        cache: bool,
    ) -> VoicingAnalysis:
        inversion = ""
        if root is not None and quality is not None:
            inversion = self.classify_inversion(root, quality, voicing)
        return self.voicings.analyze(voicing, inversion, cache=cache)

    def sounding_notes(self, voicing: str) -> list[SoundingNote]:
        """Per-string MIDI pitch, name and frequency of the non-muted strings."""
        return self.inversions.sounding_notes(self.voicings.parse(voicing))

    def playback_pitches(
        self,
        root: str,
        quality: str | ChordQuality,
        voicing: str | None = None,
    ) -> list[int]:
        """
        MIDI pitches to play a chord with, low string first.

        Uses the given voicing, else the first cataloged one, else the
        chord tones stacked in close position.
        """
        if voicing is None:
            label = quality.value if isinstance(quality, ChordQuality) else quality
            cataloged = self.shapes.voicings_for(root, label)
            voicing = cataloged[0] if cataloged else None
        if voicing is not None:
            return [note.midi for note in self.sounding_notes(voicing)]
        return close_position_pitches(self.resolve_chord(root, quality).pitch_classes)

    def list_voicings(
        self,
        root: str,
        quality: str | ChordQuality,
        voicing_filter: VoicingFilter | str = VoicingFilter.ALL,
        sort: VoicingSort | str = VoicingSort.POSITION,
    ) -> VoicingSelection:
        """
        Cataloged voicings of a chord, analysed, filtered and sorted.

        The status tells "not cataloged" (absent or empty in the catalog) apart
        from "filter matched nothing".
        """
        label = quality.value if isinstance(quality, ChordQuality) else quality
        voicings = self.shapes.voicings_for(root, label)
        if not voicings:
            logger.debug(f"No voicings cataloged for {root} {label}")
            return VoicingSelection(root=root, quality=label, status=SelectionStatus.NOT_CATALOGED)

        analyses = [self._analyze(voicing, root, label, cache=True) for voicing in voicings]
        selected = sort_voicings(filter_voicings(analyses, voicing_filter), sort)
        status = SelectionStatus.FOUND if selected else SelectionStatus.NO_MATCHES
        return VoicingSelection(
            root=root,
            quality=label,
            status=status,
            voicings=tuple(selected),
            total=len(analyses),
        )

    # Suggestions

    def suggest_relative_chord(self, root: str, numeral: str, quality_rule: str) -> str:
        """Chord name a roman numeral away from a root."""
        return self.suggestions.suggest_relative_chord(root, numeral, quality_rule)

    def suggest_all_for_style(
        self,
        root: str,
        quality: str | ChordQuality,
        style: str,
    ) -> SuggestionResult:
        """Distinct suggestions of every rule in a style for the current chord."""
        return self.suggestions.suggest_all_for_style(root, quality, style)

    def style_names(self) -> list[str]:
        return self.rules.style_names()
