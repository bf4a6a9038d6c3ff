"""
Suggestion tools - MCP tools for related chords.
"""

from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING, Any

from chuk_mcp_chords.catalogs import CatalogLoader
from chuk_mcp_chords.constants import ErrorMessages, SuccessMessages, SuggestionStatus
from chuk_mcp_chords.engine import ChordEngine

if TYPE_CHECKING:
    from chuk_mcp_server import ChukMCPServer

logger = logging.getLogger(__name__)


def register_suggestion_tools(
    mcp: ChukMCPServer,
    engine: ChordEngine,
    catalog_loader: CatalogLoader,
) -> dict[str, Any]:
    """
    Register suggestion tools with the MCP server.

    Args:
        mcp: The MCP server instance
        engine: The chord engine
        catalog_loader: Loader that writes project rules

    Returns:
        Dictionary of registered tool functions
    """
    tools: dict[str, Any] = {}

    @mcp.tool  # type: ignore[arg-type]
    async def chords_list_styles() -> str:
        """
        List suggestion styles.

        Returns:
            JSON string with style names, descriptions and the quality
            families each style has rules for

        Example:
            chords_list_styles()
        """
        try:
            styles = [
                {
                    "name": style.name,
                    "description": style.description,
                    "families": [family.value for family in style.rules],
                }
                for style in engine.rules.styles.values()
            ]
            return json.dumps({"status": "success", "styles": styles, "count": len(styles)})
        except Exception as e:
            logger.exception("Failed to list styles")
            return json.dumps({"status": "error", "message": str(e)})

    tools["chords_list_styles"] = chords_list_styles

    @mcp.tool  # type: ignore[arg-type]
    async def chords_suggest_relative(root: str, numeral: str, quality: str = "Same") -> str:
        """
        Name the chord a roman numeral away from a root.

        Args:
            root: Reference root
            numeral: Roman numeral (I, bII, ii, #ii, bIII, iii, IV, #IV, V,
                #V, bVI, vi, #vi, bVII, vii, vii°, i)
            quality: Target quality, or "Same" to infer it from the numeral

        Returns:
            JSON string with the chord name

        Example:
            chords_suggest_relative(root="C", numeral="V", quality="Dominant 7th")
        """
        try:
            chord = engine.suggestions.suggest_chord(root, numeral, quality)
            return json.dumps(
                {
                    "status": "success",
                    "chord": chord.name,
                    "root": chord.root,
                    "quality": chord.quality,
                    "has_voicings": chord.has_voicings,
                }
            )
        except Exception as e:
            logger.exception("Failed to suggest chord")
            return json.dumps({"status": "error", "message": str(e)})

    tools["chords_suggest_relative"] = chords_suggest_relative

    @mcp.tool  # type: ignore[arg-type]
    async def chords_suggest_for_style(root: str, quality: str, style: str) -> str:
        """
        Suggest chords to follow the current chord in a style.

        Args:
            root: Current chord root
            quality: Current chord quality
            style: Style name (see chords_list_styles)

        Returns:
            JSON string with distinct suggestions in rule order

        Example:
            chords_suggest_for_style(root="C", quality="Major", style="Pop - Happy")
        """
        try:
            if engine.rules.get_style(style) is None:
                message = ErrorMessages.STYLE_NOT_FOUND.format(style=style)
                return json.dumps({"status": "error", "message": message})

            result = engine.suggest_all_for_style(root, quality, style)
            response: dict[str, Any] = {
                "status": "success",
                "result": result.status.value,
                "style": result.style,
                "family": result.family.value,
                "suggestions": [
                    {
                        "chord": chord.name,
                        "numeral": chord.numeral,
                        "has_voicings": chord.has_voicings,
                    }
                    for chord in result.chords
                ],
            }
            if result.status is SuggestionStatus.NO_RULES:
                response["message"] = ErrorMessages.NO_RULES.format(
                    style=style, family=result.family.value
                )
            elif result.status is SuggestionStatus.NO_SUGGESTIONS:
                response["message"] = ErrorMessages.NO_SUGGESTIONS
            return json.dumps(response)
        except Exception as e:
            logger.exception("Failed to suggest chords")
            return json.dumps({"status": "error", "message": str(e)})

    tools["chords_suggest_for_style"] = chords_suggest_for_style

    @mcp.tool  # type: ignore[arg-type]
    async def chords_copy_style_to_project(name: str) -> str:
        """
        Copy a library suggestion style to the project for customization.

        Args:
            name: Style name (see chords_list_styles)

        Returns:
            JSON string with the path of the project rules file

        Example:
            chords_copy_style_to_project(name="Pop - Happy")
        """
        try:
            path = catalog_loader.copy_style_to_project(name)
            if path is None:
                message = ErrorMessages.STYLE_NOT_FOUND.format(style=name)
                return json.dumps({"status": "error", "message": message})

            return json.dumps(
                {
                    "status": "success",
                    "message": SuccessMessages.STYLE_COPIED.format(style=name),
                    "path": str(path),
                    "hint": "Edit the YAML file to customize the style's rules",
                }
            )
        except ValueError as e:
            return json.dumps({"status": "error", "message": str(e)})
        except Exception as e:
            logger.exception("Failed to copy style")
            return json.dumps({"status": "error", "message": str(e)})

    tools["chords_copy_style_to_project"] = chords_copy_style_to_project

    return tools
