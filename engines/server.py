"""
LeaveRight Calculation Engines - MCP Server

FastMCP server exposing the paid-leave calculation tool:
- Leave Engine: accrual periods, valuations and monthly payment schedules
"""

import logging

from engines.tools.leave_engine import mcp

# Configure logging
logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)


def main():
    """Run the MCP server."""
    logger.info("Starting LeaveRight Calculation Engines MCP Server")
    mcp.run()


if __name__ == "__main__":
    main()
