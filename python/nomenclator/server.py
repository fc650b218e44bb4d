"""
Nomenclator MCP Server - FastMCP implementation

Exposes the naming assistant as MCP tools over stdio.

CRITICAL: This is an MCP server - NEVER use print() statements!
stdout is reserved for JSON-RPC protocol. Use logger instead.
"""

import sys

from fastmcp import FastMCP

from nomenclator import server_state
from nomenclator.config import load_config
from nomenclator.logging_config import setup_logging
from nomenclator.tools_wrappers import (
    improve_name,
    naming_guidelines,
    set_naming_profile,
    suggest_name,
    validate_name,
)

logger = setup_logging()

mcp = FastMCP(
    "Nomenclator Naming Assistant",
    instructions=(
        "Suggests, validates and improves identifier names. Describe what a "
        "function, variable, page id or CSS class means and ask for names."
    ),
)

# output_schema=None returns text/TOON strings unwrapped
mcp.tool(output_schema=None)(suggest_name)
mcp.tool(output_schema=None)(validate_name)
mcp.tool(output_schema=None)(improve_name)
mcp.tool(output_schema=None)(naming_guidelines)
mcp.tool(output_schema=None)(set_naming_profile)

__all__ = [
    "mcp",
    "main",
    "suggest_name",
    "validate_name",
    "improve_name",
    "naming_guidelines",
    "set_naming_profile",
]


def main():
    """Entry point: load configuration, then serve MCP over stdio."""
    config = load_config()
    logger.setLevel(config.log_level.upper())
    server_state.config = config
    logger.info(f"Starting Nomenclator MCP server (profile {config.profile})")

    try:
        mcp.run(show_banner=False)
    except BrokenPipeError:
        # Client disconnected
        sys.stderr.write("Client disconnected. Shutting down.\n")
        sys.exit(0)


if __name__ == "__main__":
    main()
