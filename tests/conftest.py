"""
Pytest configuration and shared fixtures.
"""

import tempfile
from pathlib import Path

import pytest

from chuk_mcp_chords.catalogs import parse_rule_catalog
from chuk_mcp_chords.engine import ChordEngine
from chuk_mcp_chords.models import ChordShapeCatalog, SuggestionRuleCatalog


@pytest.fixture
def temp_dir() -> Path:
    """Create a temporary directory for test outputs."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def temp_midi_path(temp_dir: Path) -> Path:
    """Path for a temporary MIDI file."""
    return temp_dir / "test.mid"


@pytest.fixture
def library_path() -> Path:
    """Path to the bundled catalog library."""
    return Path(__file__).parent.parent / "src" / "chuk_mcp_chords" / "catalogs" / "library"


@pytest.fixture
def shape_catalog() -> ChordShapeCatalog:
    """Small voicing catalog with known shapes."""
    return ChordShapeCatalog(
        chords={
            "C": {
                "Major": [
                    "x 3 2 0 1 0",
                    "0 3 2 0 1 0",
                    "x 3 5 5 5 3",
                    "8 10 10 9 8 8",
                ],
                "Dominant 7th": ["x 3 2 3 1 0"],
            },
            "C#": {"Minor": ["x 4 6 6 5 4"]},
            "F": {"Major": ["1 3 3 2 1 1"]},
            "G": {"Major": ["3 2 0 0 0 3"]},
        }
    )


@pytest.fixture
def rule_catalog() -> SuggestionRuleCatalog:
    """Suggestion rules covering duplicates and empty rule lists."""
    return parse_rule_catalog(
        {
            "schema": "suggestions/v1",
            "styles": [
                {
                    "name": "Pop - Happy",
                    "description": "Bright diatonic moves",
                    "rules": {
                        "Major": [
                            {"interval": "IV", "quality": "Major"},
                            {"interval": "V", "quality": "Major"},
                            {"interval": "vi", "quality": "Same"},
                            {"interval": "IV", "quality": "Major"},
                            {"interval": "I", "quality": "Major"},
                        ],
                        "Minor": [
                            {"interval": "bVI", "quality": "Major"},
                            {"interval": "bVII", "quality": "Major"},
                        ],
                        "Other": [],
                    },
                },
                {
                    "name": "Jazz",
                    "rules": {
                        "Major": [
                            {"interval": "ii", "quality": "Minor 7th"},
                            {"interval": "V", "quality": "Dominant 7th"},
                        ],
                        "Dominant 7th": [{"interval": "IV", "quality": "Major 7th"}],
                    },
                },
            ],
        }
    )


@pytest.fixture
def engine(shape_catalog: ChordShapeCatalog, rule_catalog: SuggestionRuleCatalog) -> ChordEngine:
    """Engine over the in-memory catalogs."""
    return ChordEngine(shapes=shape_catalog, rules=rule_catalog)
