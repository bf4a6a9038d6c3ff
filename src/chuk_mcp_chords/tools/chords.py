"""
Chord tools - MCP tools for chord spelling and theory.

Tools for listing roots and qualities, resolving a chord into notes, and
describing a chord's sound and compatible scales.
"""

from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING, Any

from chuk_mcp_chords.core.chord import ChordQuality
from chuk_mcp_chords.core.pitch import all_note_names, note_index_of
from chuk_mcp_chords.engine import ChordEngine

if TYPE_CHECKING:
    from chuk_mcp_server import ChukMCPServer

logger = logging.getLogger(__name__)


def register_chord_tools(mcp: ChukMCPServer, engine: ChordEngine) -> dict[str, Any]:
    """
    Register chord theory tools with the MCP server.

    Args:
        mcp: The MCP server instance
        engine: The chord engine

    Returns:
        Dictionary of registered tool functions
    """
    tools: dict[str, Any] = {}

    @mcp.tool  # type: ignore[arg-type]
    async def chords_list_roots(cataloged_only: bool = False) -> str:
        """
        List root note names.

        Args:
            cataloged_only: Only roots that have voicings in the catalog

        Returns:
            JSON string with root names

        Example:
            chords_list_roots(cataloged_only=True)
        """
        try:
            roots = engine.shapes.roots() if cataloged_only else all_note_names()
            return json.dumps({"status": "success", "roots": roots, "count": len(roots)})
        except Exception as e:
            logger.exception("Failed to list roots")
            return json.dumps({"status": "error", "message": str(e)})

    tools["chords_list_roots"] = chords_list_roots

    @mcp.tool  # type: ignore[arg-type]
    async def chords_list_qualities(root: str | None = None) -> str:
        """
        List chord qualities.

        Without a root, every supported quality is listed with its formula
        and symbol suffix. With a root, only qualities cataloged for it.

        Args:
            root: Optional root to restrict to cataloged qualities

        Returns:
            JSON string with qualities

        Example:
            chords_list_qualities(root="A")
        """
        try:
            if root is None:
                qualities = [
                    {"name": q.value, "formula": q.formula, "suffix": q.suffix}
                    for q in ChordQuality
                ]
                return json.dumps(
                    {"status": "success", "qualities": qualities, "count": len(qualities)}
                )

            note_index_of(root)
            cataloged = engine.shapes.qualities(root)
            if cataloged is None:
                return json.dumps(
                    {"status": "success", "result": "not_cataloged", "root": root, "qualities": []}
                )
            return json.dumps(
                {
                    "status": "success",
                    "root": root,
                    "qualities": cataloged,
                    "count": len(cataloged),
                }
            )
        except Exception as e:
            logger.exception("Failed to list qualities")
            return json.dumps({"status": "error", "message": str(e)})

    tools["chords_list_qualities"] = chords_list_qualities

    @mcp.tool  # type: ignore[arg-type]
    async def chords_resolve(root: str, quality: str) -> str:
        """
        Spell the notes of a chord.

        Args:
            root: Root note (e.g., "C", "F#", "Bb")
            quality: Chord quality (e.g., "Major", "Minor 7th")

        Returns:
            JSON string with notes and formula

        Example:
            chords_resolve(root="A", quality="Minor 7th")
        """
        try:
            chord = engine.resolve_chord(root, quality)
            return json.dumps(
                {
                    "status": "success",
                    "root": chord.root,
                    "quality": chord.quality,
                    "notes": list(chord.notes),
                    "formula": chord.formula,
                }
            )
        except Exception as e:
            logger.exception("Failed to resolve chord")
            return json.dumps({"status": "error", "message": str(e)})

    tools["chords_resolve"] = chords_resolve

    @mcp.tool  # type: ignore[arg-type]
    async def chords_describe(root: str, quality: str) -> str:
        """
        Describe a chord: symbol, intervals, sound, roles and scales.

        Args:
            root: Root note
            quality: Chord quality

        Returns:
            JSON string with the chord description

        Example:
            chords_describe(root="G", quality="Dominant 7th")
        """
        try:
            description = engine.describe_chord(root, quality)
            return json.dumps({"status": "success", "chord": description.to_dict()})
        except Exception as e:
            logger.exception("Failed to describe chord")
            return json.dumps({"status": "error", "message": str(e)})

    tools["chords_describe"] = chords_describe

    return tools
