"""
Voicing tools - MCP tools for guitar voicings.

Tools for listing a chord's cataloged voicings, analysing a single
voicing, and classifying its inversion.
"""

from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING, Any

from chuk_mcp_chords.constants import ErrorMessages, SelectionStatus
from chuk_mcp_chords.engine import ChordEngine

if TYPE_CHECKING:
    from chuk_mcp_server import ChukMCPServer

logger = logging.getLogger(__name__)


def register_voicing_tools(mcp: ChukMCPServer, engine: ChordEngine) -> dict[str, Any]:
    """
    Register voicing tools with the MCP server.

    Args:
        mcp: The MCP server instance
        engine: The chord engine

    Returns:
        Dictionary of registered tool functions
    """
    tools: dict[str, Any] = {}

    @mcp.tool  # type: ignore[arg-type]
    async def chords_list_voicings(
        root: str,
        quality: str,
        filter: str = "all",
        sort: str = "position",
    ) -> str:
        """
        List cataloged voicings for a chord.

        Each voicing comes with position, difficulty, fingering and tags.

        Args:
            root: Root note
            quality: Chord quality
            filter: all, open, barre, root_position, inversions, low, mid, high
            sort: position, difficulty, string_count

        Returns:
            JSON string with analysed voicings

        Example:
            chords_list_voicings(root="C", quality="Major", filter="open")
        """
        try:
            selection = engine.list_voicings(root, quality, filter, sort)
            response: dict[str, Any] = {
                "status": "success",
                "result": selection.status.value,
                "root": selection.root,
                "quality": selection.quality,
                "voicings": [v.to_dict() for v in selection.voicings],
                "count": len(selection.voicings),
                "total": selection.total,
            }
            if selection.status is SelectionStatus.NOT_CATALOGED:
                response["message"] = ErrorMessages.CHORD_NOT_CATALOGED.format(
                    root=root, quality=quality
                )
            return json.dumps(response)
        except Exception as e:
            logger.exception("Failed to list voicings")
            return json.dumps({"status": "error", "message": str(e)})

    tools["chords_list_voicings"] = chords_list_voicings

    @mcp.tool  # type: ignore[arg-type]
    async def chords_analyze_voicing(
        voicing: str,
        root: str | None = None,
        quality: str | None = None,
    ) -> str:
        """
        Analyse one voicing: position, difficulty, fingering and tags.

        With a root and quality the inversion is classified too, and the
        sounding notes are included for playback.

        Args:
            voicing: Six space-separated frets, low E first, "x" = muted
            root: Optional chord root
            quality: Optional chord quality

        Returns:
            JSON string with the analysis

        Example:
            chords_analyze_voicing(voicing="x 3 2 0 1 0", root="C", quality="Major")
        """
        try:
            analysis = engine.analyze_voicing(voicing, root, quality)
            notes = engine.sounding_notes(voicing)
            return json.dumps(
                {
                    "status": "success",
                    "analysis": analysis.to_dict(),
                    "sounding_notes": [
                        {
                            "string": note.string_index + 1,
                            "fret": note.fret,
                            "note": note.name,
                            "midi": note.midi,
                            "frequency": note.frequency,
                        }
                        for note in notes
                    ],
                }
            )
        except Exception as e:
            logger.exception("Failed to analyze voicing")
            return json.dumps({"status": "error", "message": str(e)})

    tools["chords_analyze_voicing"] = chords_analyze_voicing

    @mcp.tool  # type: ignore[arg-type]
    async def chords_classify_inversion(root: str, quality: str, voicing: str) -> str:
        """
        Name the inversion of a voicing from its lowest sounding note.

        Args:
            root: Chord root
            quality: Chord quality
            voicing: Six space-separated frets, low E first

        Returns:
            JSON string with the inversion label and bass note

        Example:
            chords_classify_inversion(root="C", quality="Major", voicing="0 3 2 0 1 0")
        """
        try:
            inversion = engine.classify_inversion(root, quality, voicing)
            bass = engine.inversions.bass_note(engine.voicings.parse(voicing), voicing)
            return json.dumps(
                {
                    "status": "success",
                    "inversion": inversion,
                    "bass_note": bass.name,
                    "bass_string": bass.string_index + 1,
                }
            )
        except Exception as e:
            logger.exception("Failed to classify inversion")
            return json.dumps({"status": "error", "message": str(e)})

    tools["chords_classify_inversion"] = chords_classify_inversion

    return tools
