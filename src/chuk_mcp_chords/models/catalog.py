"""
Catalog models - the data the engine reads but never owns.

- ChordShapeCatalog: root -> quality -> voicing strings
- SuggestionRuleCatalog: style -> quality family -> suggestion rules

Catalogs are validated when built, so bad numerals, unknown qualities and
malformed voicings are rejected up front instead of surfacing as silent
gaps at lookup time.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field, field_validator

from chuk_mcp_chords.constants import SAME_QUALITY_RULE, STRING_COUNT, QualityFamily
from chuk_mcp_chords.core.chord import ROMAN_INTERVALS, ChordQuality
from chuk_mcp_chords.core.pitch import note_index_of


class SuggestionRule(BaseModel):
    """
    One suggestion: a roman numeral and the quality of the target chord.

    ``quality`` is a chord quality label, or "Same" to infer it from the
    numeral.
    """

    interval: str = Field(..., description="Roman numeral, e.g. 'IV' or 'vii°'")
    quality: str = Field(SAME_QUALITY_RULE, description="Target quality rule")

    model_config = {"frozen": True}

    @field_validator("interval")
    @classmethod
    def validate_interval(cls, v: str) -> str:
        if v not in ROMAN_INTERVALS:
            raise ValueError(f"Unknown roman numeral interval: {v!r}")
        return v

    @field_validator("quality")
    @classmethod
    def validate_quality(cls, v: str) -> str:
        if v != SAME_QUALITY_RULE:
            ChordQuality.parse(v)
        return v


class StyleRules(BaseModel):
    """Suggestion rules for one style, keyed by quality family."""

    name: str = Field(..., description="Style label, e.g. 'Pop - Happy'")
    description: str = Field("", description="Style description")
    rules: dict[QualityFamily, list[SuggestionRule]] = Field(
        default_factory=dict,
        description="Rules per collapsed current-chord quality",
    )

    model_config = {"frozen": True}

    def rules_for(self, family: QualityFamily) -> list[SuggestionRule] | None:
        """Rules for a quality family, or None when none are registered."""
        return self.rules.get(family)


class SuggestionRuleCatalog(BaseModel):
    """All suggestion styles, in catalog order."""

    schema_version: str = Field("suggestions/v1", alias="schema")
    styles: dict[str, StyleRules] = Field(default_factory=dict)

    model_config = {"frozen": True, "populate_by_name": True}

    def style_names(self) -> list[str]:
        return list(self.styles)

    def get_style(self, name: str) -> StyleRules | None:
        return self.styles.get(name)

    def merged(self, other: SuggestionRuleCatalog) -> SuggestionRuleCatalog:
        """New catalog where styles in ``other`` replace styles of the same name."""
        return SuggestionRuleCatalog(
            schema_version=self.schema_version,
            styles={**self.styles, **other.styles},
        )

    def to_yaml_dict(self) -> dict[str, Any]:
        """Convert to YAML-serializable dictionary."""
        return {
            "schema": self.schema_version,
            "styles": [
                {
                    "name": style.name,
                    "description": style.description,
                    "rules": {
                        family.value: [
                            {"interval": rule.interval, "quality": rule.quality}
                            for rule in rules
                        ]
                        for family, rules in style.rules.items()
                    },
                }
                for style in self.styles.values()
            ],
        }


class ChordShapeCatalog(BaseModel):
    """
    Known voicings per chord.

    Roots are matched by pitch class, so a lookup for "Db" finds voicings
    stored under "C#".
    """

    schema_version: str = Field("voicings/v1", alias="schema")
    chords: dict[str, dict[str, list[str]]] = Field(default_factory=dict)

    model_config = {"frozen": True, "populate_by_name": True}

    @field_validator("chords")
    @classmethod
    def validate_chords(cls, v: dict[str, dict[str, list[str]]]) -> dict[str, dict[str, list[str]]]:
        for root, qualities in v.items():
            note_index_of(root)
            for quality, voicings in qualities.items():
                for voicing in voicings:
                    if len(voicing.split()) != STRING_COUNT:
                        raise ValueError(
                            f"Voicing {voicing!r} for {root} {quality} must have "
                            f"{STRING_COUNT} entries"
                        )
        return v

    def roots(self) -> list[str]:
        """Catalog roots, sorted by pitch class."""
        return sorted(self.chords, key=note_index_of)

    def _root_key(self, root: str) -> str | None:
        if root in self.chords:
            return root
        index = note_index_of(root)
        return next((key for key in self.chords if note_index_of(key) == index), None)

    def qualities(self, root: str) -> list[str] | None:
        """Qualities cataloged for a root, or None if the root is absent."""
        key = self._root_key(root)
        if key is None:
            return None
        return sorted(self.chords[key])

    def voicings_for(self, root: str, quality: str) -> list[str] | None:
        """
        Voicing strings for a chord.

        Returns None when the chord is not cataloged, which is distinct
        from a cataloged chord with an empty list.
        """
        key = self._root_key(root)
        if key is None:
            return None
        voicings = self.chords[key].get(quality)
        return list(voicings) if voicings is not None else None

    def has_voicings(self, root: str, quality: str) -> bool:
        return bool(self.voicings_for(root, quality))

    def merged(self, other: ChordShapeCatalog) -> ChordShapeCatalog:
        """New catalog where chords in ``other`` replace matching root/quality entries."""
        chords = {root: dict(qualities) for root, qualities in self.chords.items()}
        for root, qualities in other.chords.items():
            key = self._root_key(root) or root
            chords.setdefault(key, {}).update(qualities)
        return ChordShapeCatalog(schema_version=self.schema_version, chords=chords)
