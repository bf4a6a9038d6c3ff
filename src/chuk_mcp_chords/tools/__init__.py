"""
MCP tool implementations.

Tools are organized by domain:
- chords - Roots, qualities, spelling and theory
- voicings - Voicing listing, analysis and inversions
- suggestions - Related chords per style
- compilation - MIDI export tools
"""

from chuk_mcp_chords.tools.chords import register_chord_tools
from chuk_mcp_chords.tools.compilation import register_compilation_tools
from chuk_mcp_chords.tools.suggestions import register_suggestion_tools
from chuk_mcp_chords.tools.voicings import register_voicing_tools

__all__ = [
    "register_chord_tools",
    "register_compilation_tools",
    "register_suggestion_tools",
    "register_voicing_tools",
]
