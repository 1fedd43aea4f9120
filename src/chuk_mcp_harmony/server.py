#!/usr/bin/env python3
"""
Entry point for the CHUK Harmony MCP Server.

Parses the command line, sets up logging and the project scale
directory, then serves the harmony tools over stdio or http.
"""

import argparse
import asyncio
import logging
import os

from chuk_mcp_harmony.constants import SCALES_DIR_ENV

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="CHUK Harmony MCP Server")
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
        "--scales-dir",
        default=None,
        help="Directory of project scale families (default: ./scales)",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug logging",
    )
    return parser


def main() -> None:
    """Run the server with the selected transport."""
    args = build_parser().parse_args()

    if args.debug:
        logging.getLogger().setLevel(logging.DEBUG)
    if args.scales_dir:
        os.environ[SCALES_DIR_ENV] = args.scales_dir

    # The server module builds the catalog on import, so it must see the final settings
    from chuk_mcp_harmony.async_server import mcp

    if args.transport == "stdio":
        logger.info("Serving harmony tools over stdio")
        asyncio.run(mcp.run_stdio())
    else:
        logger.info(f"Serving harmony tools on http port {args.port}")
        asyncio.run(mcp.run_http(port=args.port))


if __name__ == "__main__":
    main()
