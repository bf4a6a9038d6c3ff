"""
Compilation tools - MCP tools for MIDI export.

Renders a chord or a progression as strummed guitar chords.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import TYPE_CHECKING, Any

from chuk_mcp_chords.compiler import progression_to_midi
from chuk_mcp_chords.constants import ErrorMessages, SuccessMessages
from chuk_mcp_chords.engine import ChordEngine

if TYPE_CHECKING:
    from chuk_mcp_server import ChukMCPServer

logger = logging.getLogger(__name__)


def split_chord_name(name: str) -> tuple[str, str]:
    """
    Split "C Major" or "F# Minor 7th" into root and quality.

    Raises:
        ValueError: if there is no quality after the root
    """
    root, _, quality = name.strip().partition(" ")
    if not quality:
        raise ValueError(f"Chord must be '<root> <quality>', got {name!r}")
    return root, quality.strip()


def register_compilation_tools(
    mcp: ChukMCPServer,
    engine: ChordEngine,
    output_dir: Path,
) -> dict[str, Any]:
    """
    Register MIDI export tools with the MCP server.

    Args:
        mcp: The MCP server instance
        engine: The chord engine
        output_dir: Directory for output files

    Returns:
        Dictionary of registered tool functions
    """
    tools: dict[str, Any] = {}

    @mcp.tool  # type: ignore[arg-type]
    async def chords_export_midi(
        chords: list[str],
        output_name: str = "progression",
        voicings: list[str] | None = None,
        tempo: int = 90,
        beats_per_chord: int = 4,
    ) -> str:
        """
        Export chords to a MIDI file, one strum per chord.

        Each chord uses the matching entry of ``voicings`` when given,
        otherwise its first cataloged voicing, otherwise its chord tones
        in close position.

        Args:
            chords: Chord names, e.g. ["C Major", "A Minor", "F Major", "G Major"]
            output_name: Output filename (without .mid extension)
            voicings: Optional voicing per chord (same length as chords)
            tempo: Tempo in BPM
            beats_per_chord: Beats each chord lasts

        Returns:
            JSON string with the file path

        Example:
            chords_export_midi(chords=["C Major", "G Major"], output_name="intro")
        """
        try:
            if not chords:
                return json.dumps({"status": "error", "message": ErrorMessages.EMPTY_PROGRESSION})
            if voicings is not None and len(voicings) != len(chords):
                return json.dumps(
                    {
                        "status": "error",
                        "message": f"Got {len(voicings)} voicings for {len(chords)} chords",
                    }
                )

            pitches = []
            for i, name in enumerate(chords):
                root, quality = split_chord_name(name)
                voicing = voicings[i] if voicings is not None else None
                pitches.append(engine.playback_pitches(root, quality, voicing))

            midi = progression_to_midi(pitches, tempo_bpm=tempo, beats_per_chord=beats_per_chord)

            output_dir.mkdir(parents=True, exist_ok=True)
            output_path = output_dir / f"{output_name}.mid"
            midi.save(str(output_path))

            return json.dumps(
                {
                    "status": "success",
                    "path": str(output_path),
                    "chords": len(chords),
                    "message": SuccessMessages.MIDI_EXPORTED.format(
                        chords=len(chords), path=output_path
                    ),
                }
            )
        except Exception as e:
            logger.exception("Failed to export MIDI")
            return json.dumps({"status": "error", "message": str(e)})

    tools["chords_export_midi"] = chords_export_midi

    return tools
