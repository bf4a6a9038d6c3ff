"""
Error kinds raised by the chord engine.

Every failure is explicit: lookups never fall back to an empty list or a
zero value. All errors subclass ValueError so callers that only care about
"bad input" can catch one type.
"""

from __future__ import annotations


class ChordEngineError(ValueError):
    """Base class for all chord engine failures."""


class UnknownNoteError(ChordEngineError):
    """A note spelling is not one of the 17 recognised names."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Unknown note: {name!r}")


class UnknownQualityError(ChordEngineError):
    """A chord quality has no formula in the catalog."""

    def __init__(self, quality: str):
        self.quality = quality
        super().__init__(f"Unknown chord quality: {quality!r}")


class MalformedVoicingError(ChordEngineError):
    """A voicing string does not split into exactly six entries."""

    def __init__(self, voicing: str, token_count: int):
        self.voicing = voicing
        self.token_count = token_count
        super().__init__(
            f"Malformed voicing {voicing!r}: expected 6 entries, got {token_count}"
        )


class NoPlayableNoteError(ChordEngineError):
    """Every string of a voicing is muted."""

    def __init__(self, voicing: str):
        self.voicing = voicing
        super().__init__(f"No playable note in voicing {voicing!r}")


class UnknownIntervalError(ChordEngineError):
    """A roman numeral is not in the interval table."""

    def __init__(self, numeral: str):
        self.numeral = numeral
        super().__init__(f"Unknown roman numeral interval: {numeral!r}")


class CatalogError(ChordEngineError):
    """Catalog data could not be parsed."""
