#!/usr/bin/env python3
"""
Async Chords MCP Server using chuk-mcp-server

This server provides MCP tools for looking up and understanding guitar
chords. Voicing and suggestion catalogs ship with the package and can be
extended per project.

The server provides tools for:
- Spelling chords and describing their sound and compatible scales
- Listing, filtering and analysing guitar voicings
- Classifying inversions from the lowest sounding note
- Suggesting related chords per style
- Exporting chords and progressions to MIDI files
"""

import logging
import os
from pathlib import Path

from chuk_mcp_server import ChukMCPServer

from chuk_mcp_chords.catalogs import CatalogLoader
from chuk_mcp_chords.engine import ChordEngine
from chuk_mcp_chords.tools import (
    register_chord_tools,
    register_compilation_tools,
    register_suggestion_tools,
    register_voicing_tools,
)

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

# Create the MCP server instance
mcp = ChukMCPServer("chuk-mcp-chords")

# Paths - use standard project structure
BASE_PATH = Path.cwd()
CATALOGS_DIR = Path(os.environ.get("CHUK_CHORDS_CATALOGS", BASE_PATH / "catalogs"))
OUTPUT_DIR = Path(os.environ.get("CHUK_CHORDS_OUTPUT", BASE_PATH / "output"))
LIBRARY_PATH = Path(__file__).parent / "catalogs" / "library"

# Create the engine
catalog_loader = CatalogLoader(library_path=LIBRARY_PATH, project_path=CATALOGS_DIR)
engine = ChordEngine(loader=catalog_loader)

# Register all tools
chord_tools = register_chord_tools(mcp, engine)
voicing_tools = register_voicing_tools(mcp, engine)
suggestion_tools = register_suggestion_tools(mcp, engine, catalog_loader)
compilation_tools = register_compilation_tools(mcp, engine, OUTPUT_DIR)

# Export tool functions for direct access
chords_list_roots = chord_tools["chords_list_roots"]
chords_list_qualities = chord_tools["chords_list_qualities"]
chords_resolve = chord_tools["chords_resolve"]
chords_describe = chord_tools["chords_describe"]

chords_list_voicings = voicing_tools["chords_list_voicings"]
chords_analyze_voicing = voicing_tools["chords_analyze_voicing"]
chords_classify_inversion = voicing_tools["chords_classify_inversion"]

chords_list_styles = suggestion_tools["chords_list_styles"]
chords_suggest_relative = suggestion_tools["chords_suggest_relative"]
chords_suggest_for_style = suggestion_tools["chords_suggest_for_style"]
chords_copy_style_to_project = suggestion_tools["chords_copy_style_to_project"]

chords_export_midi = compilation_tools["chords_export_midi"]

logger.info("CHUK Chords MCP Server initialized")
logger.info(f"  Library path: {LIBRARY_PATH}")
logger.info(f"  Catalogs dir: {CATALOGS_DIR}")
logger.info(f"  Output dir: {OUTPUT_DIR}")
