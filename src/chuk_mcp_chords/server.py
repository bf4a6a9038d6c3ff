#!/usr/bin/env python3
"""
Entry point for the CHUK Chords MCP Server.

Supports stdio and http transports. Catalog and output directories can be
moved away from the working directory with --catalogs and --output.
"""

import argparse
import asyncio
import logging
import os

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    """Command line options for the server."""
    parser = argparse.ArgumentParser(description="CHUK Chords MCP Server")
    parser.add_argument(
        "--transport",
        choices=["stdio", "http"],
        default="stdio",
        help="Transport mode (default: stdio)",
    )
    parser.add_argument(
        "--port",
        type=int,
        default=8000,
        help="HTTP port (only for http transport)",
    )
    parser.add_argument(
        "--catalogs",
        help="Project catalogs directory (default: ./catalogs)",
    )
    parser.add_argument(
        "--output",
        help="MIDI output directory (default: ./output)",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug logging",
    )
    return parser


def main() -> None:
    """Main entry point with transport detection."""
    args = build_parser().parse_args()

    if args.debug:
        logging.getLogger().setLevel(logging.DEBUG)

    # Read by async_server at import time
    if args.catalogs:
        os.environ["CHUK_CHORDS_CATALOGS"] = args.catalogs
    if args.output:
        os.environ["CHUK_CHORDS_OUTPUT"] = args.output

    from chuk_mcp_chords.async_server import mcp

    if args.transport == "stdio":
        logger.info("Starting CHUK Chords MCP Server (stdio)")
        asyncio.run(mcp.run_stdio())
    else:
        logger.info(f"Starting CHUK Chords MCP Server (http:{args.port})")
        asyncio.run(mcp.run_http(port=args.port))


if __name__ == "__main__":
    main()
