"""
Inversion classifier - names a voicing by the chord tone in the bass.

The bass is the lowest sounding pitch across non-muted strings, using the
absolute MIDI pitch of each string so that e.g. an open D string is higher
than the A string at fret 3.
"""

from __future__ import annotations

from chuk_mcp_chords.constants import InversionLabel
from chuk_mcp_chords.core.chord import ChordQuality, HarmonicAnalyzer, quality_label
from chuk_mcp_chords.core.guitar import SoundingNote, Tuning
from chuk_mcp_chords.core.pitch import INTERVAL_SEMITONES, note_index_of
from chuk_mcp_chords.errors import NoPlayableNoteError
from chuk_mcp_chords.voicing.analyzer import parse_voicing
from chuk_mcp_chords.voicing.model import FretModel

# Formula labels that count as each chord member
_THIRD_LABELS = ("3", "b3")
_FIFTH_LABELS = ("5", "b5", "#5")
_SEVENTH_LABELS = ("7", "b7", "bb7")


class InversionClassifier:
    """
    Classifies voicings as root position, an inversion, or another voicing.

    Uses the harmonic analyzer's formula catalog to find the chord's third,
    fifth and seventh.
    """

    def __init__(self, harmonic: HarmonicAnalyzer, tuning: Tuning | None = None):
        """
        Initialize the classifier.

        Args:
            harmonic: Analyzer holding the formula catalog
            tuning: Guitar tuning (defaults to standard)
        """
        self.harmonic = harmonic
        self.tuning = tuning or Tuning.STANDARD

    def sounding_notes(self, frets: FretModel) -> list[SoundingNote]:
        """Every non-muted string as a SoundingNote, low string first."""
        return [
            SoundingNote.at(self.tuning, i, fret)
            for i, fret in enumerate(frets.frets)
            if fret is not None
        ]

    def bass_note(self, frets: FretModel, voicing: str | None = None) -> SoundingNote:
        """
        Lowest sounding note of a voicing.

        On a tie the lower-indexed string wins.

        Raises:
            NoPlayableNoteError: if every string is muted
        """
        lowest: SoundingNote | None = None
        for note in self.sounding_notes(frets):
            if lowest is None or note.midi < lowest.midi:
                lowest = note
        if lowest is None:
            raise NoPlayableNoteError(voicing or frets.to_voicing_string())
        return lowest

    def classify(
        self,
        root: str,
        quality: str | ChordQuality,
        voicing: str | FretModel,
    ) -> InversionLabel:
        """
        Classify a voicing against a chord.

        Args:
            root: Chord root note name
            quality: Chord quality label or enum member
            voicing: Voicing string or parsed FretModel

        Returns:
            Inversion label, e.g. "Root Position" or "1st Inversion"

        Raises:
            UnknownNoteError: if the root is not recognised
            UnknownQualityError: if the quality has no formula
            MalformedVoicingError: if the voicing is not six tokens
            NoPlayableNoteError: if every string is muted
        """
        root_index = note_index_of(root)
        labels = self.harmonic.formula_labels(quality)

        if isinstance(voicing, FretModel):
            frets, source = voicing, voicing.to_voicing_string()
        else:
            frets, source = parse_voicing(voicing), voicing

        bass = self.bass_note(frets, source).midi % 12
        if bass == root_index:
            return "Root Position"

        chord_tones = [
            (root_index + INTERVAL_SEMITONES[label]) % 12
            for label in labels
            if label in INTERVAL_SEMITONES
        ]

        def member(candidates: tuple[str, ...]) -> int | None:
            targets = {(root_index + INTERVAL_SEMITONES[label]) % 12 for label in candidates}
            return next((tone for tone in chord_tones if tone in targets), None)

        if bass == member(_THIRD_LABELS):
            return "1st Inversion"
        if bass == member(_FIFTH_LABELS):
            return "2nd Inversion"
        if bass == member(_SEVENTH_LABELS) and any("7" in label for label in labels):
            return "3rd Inversion"

        if bass in chord_tones:
            if "sus" in quality_label(quality).lower():
                if "2" in labels and bass == (root_index + INTERVAL_SEMITONES["2"]) % 12:
                    return "Voicing (2 in bass)"
                if "4" in labels and bass == (root_index + INTERVAL_SEMITONES["4"]) % 12:
                    return "Voicing (4 in bass)"
            return "Other Voicing"

        return "Unknown Inversion"
