"""
Tests for MCP tools.

Tests the MCP tool implementations for chords, voicings, suggestions
and compilation.
"""

import json
from pathlib import Path

import pytest
from mido import MidiFile

from chuk_mcp_chords.catalogs import CatalogLoader
from chuk_mcp_chords.engine import ChordEngine
from chuk_mcp_chords.server import build_parser
from chuk_mcp_chords.tools.compilation import split_chord_name


# Mock MCP server for testing tools
class MockMCPServer:
    """Mock MCP server that just stores registered tools."""

    def __init__(self, name: str):
        self.name = name
        self.tools: dict = {}

    def tool(self, func):
        """Decorator to register a tool."""
        self.tools[func.__name__] = func
        return func


@pytest.fixture
def chord_tools(engine: ChordEngine) -> dict:
    from chuk_mcp_chords.tools.chords import register_chord_tools

    return register_chord_tools(MockMCPServer("test"), engine)


@pytest.fixture
def voicing_tools(engine: ChordEngine) -> dict:
    from chuk_mcp_chords.tools.voicings import register_voicing_tools

    return register_voicing_tools(MockMCPServer("test"), engine)


@pytest.fixture
def suggestion_tools(engine: ChordEngine, library_path: Path, temp_dir: Path) -> dict:
    from chuk_mcp_chords.tools.suggestions import register_suggestion_tools

    loader = CatalogLoader(library_path=library_path, project_path=temp_dir / "catalogs")
    return register_suggestion_tools(MockMCPServer("test"), engine, loader)


@pytest.fixture
def compilation_tools(engine: ChordEngine, temp_dir: Path) -> dict:
    from chuk_mcp_chords.tools.compilation import register_compilation_tools

    return register_compilation_tools(MockMCPServer("test"), engine, temp_dir / "output")


class TestRegistration:
    """Tools register under their function names."""

    def test_names(self, engine: ChordEngine, temp_dir: Path):
        from chuk_mcp_chords.tools import (
            register_chord_tools,
            register_compilation_tools,
            register_suggestion_tools,
            register_voicing_tools,
        )

        mcp = MockMCPServer("test")
        register_chord_tools(mcp, engine)
        register_voicing_tools(mcp, engine)
        register_suggestion_tools(mcp, engine, CatalogLoader(project_path=temp_dir))
        register_compilation_tools(mcp, engine, temp_dir)
        assert sorted(mcp.tools) == [
            "chords_analyze_voicing",
            "chords_classify_inversion",
            "chords_copy_style_to_project",
            "chords_describe",
            "chords_export_midi",
            "chords_list_qualities",
            "chords_list_roots",
            "chords_list_styles",
            "chords_list_voicings",
            "chords_resolve",
            "chords_suggest_for_style",
            "chords_suggest_relative",
        ]


class TestChordTools:
    """Tests for chord theory tools."""

    @pytest.mark.asyncio
    async def test_list_roots(self, chord_tools: dict):
        data = json.loads(await chord_tools["chords_list_roots"]())
        assert data["status"] == "success"
        assert data["count"] == 17
        assert "F#" in data["roots"] and "Gb" in data["roots"]

    @pytest.mark.asyncio
    async def test_list_cataloged_roots(self, chord_tools: dict):
        data = json.loads(await chord_tools["chords_list_roots"](cataloged_only=True))
        assert data["roots"] == ["C", "C#", "F", "G"]

    @pytest.mark.asyncio
    async def test_list_all_qualities(self, chord_tools: dict):
        data = json.loads(await chord_tools["chords_list_qualities"]())
        assert data["count"] == 12
        assert {"name": "Minor 7th", "formula": "1-b3-5-b7", "suffix": "m7"} in data["qualities"]

    @pytest.mark.asyncio
    async def test_list_qualities_for_root(self, chord_tools: dict):
        data = json.loads(await chord_tools["chords_list_qualities"](root="C"))
        assert data["qualities"] == ["Dominant 7th", "Major"]

    @pytest.mark.asyncio
    async def test_list_qualities_not_cataloged(self, chord_tools: dict):
        data = json.loads(await chord_tools["chords_list_qualities"](root="E"))
        assert data["status"] == "success"
        assert data["result"] == "not_cataloged"
        assert data["qualities"] == []

    @pytest.mark.asyncio
    async def test_list_qualities_bad_root(self, chord_tools: dict):
        data = json.loads(await chord_tools["chords_list_qualities"](root="H"))
        assert data["status"] == "error"

    @pytest.mark.asyncio
    async def test_resolve(self, chord_tools: dict):
        data = json.loads(await chord_tools["chords_resolve"](root="A", quality="Minor 7th"))
        assert data["status"] == "success"
        assert data["notes"] == ["A", "C", "E", "G"]
        assert data["formula"] == "1-b3-5-b7"

    @pytest.mark.asyncio
    async def test_resolve_unknown_quality(self, chord_tools: dict):
        data = json.loads(await chord_tools["chords_resolve"](root="A", quality="Minor 13th"))
        assert data["status"] == "error"
        assert "Minor 13th" in data["message"]

    @pytest.mark.asyncio
    async def test_describe(self, chord_tools: dict):
        data = json.loads(await chord_tools["chords_describe"](root="G", quality="Dominant 7th"))
        assert data["status"] == "success"
        assert data["chord"]["symbol"] == "G7"
        assert data["chord"]["scales"][0]["name"] == "G Mixolydian"


class TestVoicingTools:
    """Tests for voicing tools."""

    @pytest.mark.asyncio
    async def test_list_voicings(self, voicing_tools: dict):
        data = json.loads(
            await voicing_tools["chords_list_voicings"](root="C", quality="Major", filter="open")
        )
        assert data["status"] == "success"
        assert data["result"] == "found"
        assert data["count"] == 2
        assert data["total"] == 4
        assert data["voicings"][0]["voicing"] == "x 3 2 0 1 0"
        assert data["voicings"][1]["inversion"] == "1st Inversion"

    @pytest.mark.asyncio
    async def test_list_voicings_no_matches(self, voicing_tools: dict):
        data = json.loads(
            await voicing_tools["chords_list_voicings"](root="C", quality="Major", filter="mid")
        )
        assert data["result"] == "no_matches"
        assert data["voicings"] == []
        assert "message" not in data

    @pytest.mark.asyncio
    async def test_list_voicings_not_cataloged(self, voicing_tools: dict):
        data = json.loads(await voicing_tools["chords_list_voicings"](root="E", quality="Minor"))
        assert data["status"] == "success"
        assert data["result"] == "not_cataloged"
        assert data["message"] == "No voicings cataloged for 'E Minor'."

    @pytest.mark.asyncio
    async def test_list_voicings_bad_filter(self, voicing_tools: dict):
        data = json.loads(
            await voicing_tools["chords_list_voicings"](root="C", quality="Major", filter="upside")
        )
        assert data["status"] == "error"

    @pytest.mark.asyncio
    async def test_analyze_voicing(self, voicing_tools: dict):
        data = json.loads(
            await voicing_tools["chords_analyze_voicing"](
                voicing="x 3 2 0 1 0", root="C", quality="Major"
            )
        )
        assert data["status"] == "success"
        assert data["analysis"]["inversion"] == "Root Position"
        assert data["analysis"]["fingering"] == [None, 1, 2, None, 3, None]
        assert data["sounding_notes"][0] == {
            "string": 2,
            "fret": 3,
            "note": "C",
            "midi": 48,
            "frequency": 130.81,
        }

    @pytest.mark.asyncio
    async def test_analyze_voicing_without_chord(self, voicing_tools: dict):
        data = json.loads(await voicing_tools["chords_analyze_voicing"](voicing="1 3 3 2 1 1"))
        assert data["analysis"]["inversion"] == ""
        assert "Barre Chord" in data["analysis"]["tags"]

    @pytest.mark.asyncio
    async def test_analyze_malformed(self, voicing_tools: dict):
        data = json.loads(await voicing_tools["chords_analyze_voicing"](voicing="x 3 2 0 1"))
        assert data["status"] == "error"

    @pytest.mark.asyncio
    async def test_classify_inversion(self, voicing_tools: dict):
        data = json.loads(
            await voicing_tools["chords_classify_inversion"](
                root="C", quality="Major", voicing="0 3 2 0 1 0"
            )
        )
        assert data == {
            "status": "success",
            "inversion": "1st Inversion",
            "bass_note": "E",
            "bass_string": 1,
        }

    @pytest.mark.asyncio
    async def test_classify_all_muted(self, voicing_tools: dict):
        data = json.loads(
            await voicing_tools["chords_classify_inversion"](
                root="C", quality="Major", voicing="x x x x x x"
            )
        )
        assert data["status"] == "error"


class TestSuggestionTools:
    """Tests for suggestion tools."""

    @pytest.mark.asyncio
    async def test_list_styles(self, suggestion_tools: dict):
        data = json.loads(await suggestion_tools["chords_list_styles"]())
        assert data["count"] == 2
        assert data["styles"][0]["name"] == "Pop - Happy"
        assert data["styles"][1]["families"] == ["Major", "Dominant 7th"]

    @pytest.mark.asyncio
    async def test_suggest_relative(self, suggestion_tools: dict):
        data = json.loads(
            await suggestion_tools["chords_suggest_relative"](root="C", numeral="bVII")
        )
        assert data["status"] == "success"
        assert data["chord"] == "Bb Major"
        assert data["has_voicings"] is False

    @pytest.mark.asyncio
    async def test_suggest_relative_bad_numeral(self, suggestion_tools: dict):
        data = json.loads(
            await suggestion_tools["chords_suggest_relative"](root="C", numeral="VIII")
        )
        assert data["status"] == "error"

    @pytest.mark.asyncio
    async def test_suggest_for_style(self, suggestion_tools: dict):
        data = json.loads(
            await suggestion_tools["chords_suggest_for_style"](
                root="C", quality="Major", style="Pop - Happy"
            )
        )
        assert data["result"] == "suggestions"
        assert data["family"] == "Major"
        assert [s["chord"] for s in data["suggestions"]] == [
            "F Major",
            "G Major",
            "A Minor",
            "C Major",
        ]
        assert data["suggestions"][0] == {"chord": "F Major", "numeral": "IV", "has_voicings": True}

    @pytest.mark.asyncio
    async def test_suggest_no_rules(self, suggestion_tools: dict):
        data = json.loads(
            await suggestion_tools["chords_suggest_for_style"](
                root="G", quality="Dominant 7th", style="Pop - Happy"
            )
        )
        assert data["status"] == "success"
        assert data["result"] == "no_rules"
        assert data["suggestions"] == []
        assert "Dominant 7th" in data["message"]

    @pytest.mark.asyncio
    async def test_suggest_no_suggestions(self, suggestion_tools: dict):
        data = json.loads(
            await suggestion_tools["chords_suggest_for_style"](
                root="B", quality="Diminished", style="Pop - Happy"
            )
        )
        assert data["result"] == "no_suggestions"
        assert data["message"] == "No suggestions found."

    @pytest.mark.asyncio
    async def test_suggest_unknown_style(self, suggestion_tools: dict):
        data = json.loads(
            await suggestion_tools["chords_suggest_for_style"](
                root="C", quality="Major", style="Polka"
            )
        )
        assert data["status"] == "error"
        assert data["message"] == "Style 'Polka' not found."

    @pytest.mark.asyncio
    async def test_suggest_unknown_root(self, suggestion_tools: dict):
        data = json.loads(
            await suggestion_tools["chords_suggest_for_style"](
                root="H", quality="Diminished", style="Pop - Happy"
            )
        )
        assert data["status"] == "error"
        assert "H" in data["message"]

    @pytest.mark.asyncio
    async def test_copy_style_to_project(self, suggestion_tools: dict, temp_dir: Path):
        data = json.loads(await suggestion_tools["chords_copy_style_to_project"](name="Blues"))
        assert data["status"] == "success"
        assert data["message"] == "Style 'Blues' copied to project."
        assert Path(data["path"]) == temp_dir / "catalogs" / "suggestions.yaml"
        assert "Blues" in Path(data["path"]).read_text()

        again = json.loads(await suggestion_tools["chords_copy_style_to_project"](name="Blues"))
        assert again["status"] == "error"
        assert "already exists" in again["message"]

    @pytest.mark.asyncio
    async def test_copy_unknown_style(self, suggestion_tools: dict):
        data = json.loads(await suggestion_tools["chords_copy_style_to_project"](name="Polka"))
        assert data["status"] == "error"
        assert data["message"] == "Style 'Polka' not found."

    @pytest.mark.asyncio
    async def test_copy_without_project(self, engine: ChordEngine, library_path: Path):
        from chuk_mcp_chords.tools.suggestions import register_suggestion_tools

        tools = register_suggestion_tools(
            MockMCPServer("test"), engine, CatalogLoader(library_path=library_path)
        )
        data = json.loads(await tools["chords_copy_style_to_project"](name="Blues"))
        assert data["status"] == "error"
        assert data["message"] == "No project path configured"


class TestCompilationTools:
    """Tests for MIDI export."""

    def test_split_chord_name(self):
        assert split_chord_name("F# Minor 7th") == ("F#", "Minor 7th")
        with pytest.raises(ValueError):
            split_chord_name("C")

    @pytest.mark.asyncio
    async def test_export(self, compilation_tools: dict, temp_dir: Path):
        data = json.loads(
            await compilation_tools["chords_export_midi"](
                chords=["C Major", "E Augmented"], output_name="demo"
            )
        )
        assert data["status"] == "success"
        assert data["chords"] == 2

        path = Path(data["path"])
        assert path == temp_dir / "output" / "demo.mid"
        loaded = MidiFile(str(path))
        note_ons = [m.note for m in loaded.tracks[0] if m.type == "note_on"]
        # Cataloged open C, then E augmented in close position
        assert note_ons == [48, 52, 55, 60, 64, 52, 56, 60]

    @pytest.mark.asyncio
    async def test_export_with_voicings(self, compilation_tools: dict):
        data = json.loads(
            await compilation_tools["chords_export_midi"](
                chords=["G Major"], voicings=["3 x 0 0 3 3"]
            )
        )
        loaded = MidiFile(data["path"])
        assert [m.note for m in loaded.tracks[0] if m.type == "note_on"] == [43, 50, 55, 62, 67]

    @pytest.mark.asyncio
    async def test_export_empty(self, compilation_tools: dict):
        data = json.loads(await compilation_tools["chords_export_midi"](chords=[]))
        assert data["status"] == "error"
        assert "at least one chord" in data["message"]

    @pytest.mark.asyncio
    async def test_export_voicing_count_mismatch(self, compilation_tools: dict):
        data = json.loads(
            await compilation_tools["chords_export_midi"](
                chords=["C Major", "G Major"], voicings=["x 3 2 0 1 0"]
            )
        )
        assert data["status"] == "error"

    @pytest.mark.asyncio
    async def test_export_bad_chord(self, compilation_tools: dict):
        data = json.loads(await compilation_tools["chords_export_midi"](chords=["C"]))
        assert data["status"] == "error"


class TestServerArgs:
    """Tests for command line parsing."""

    def test_defaults(self):
        args = build_parser().parse_args([])
        assert args.transport == "stdio"
        assert args.port == 8000
        assert args.catalogs is None
        assert not args.debug

    def test_http(self):
        args = build_parser().parse_args(["--transport", "http", "--port", "9000"])
        assert args.transport == "http"
        assert args.port == 9000
