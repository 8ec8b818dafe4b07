"""MCP server exposing mean, median and mode of a number listing as tools."""
import asyncio
import json
from typing import Dict, Any, List

import mcp.types as types
from mcp.server.lowlevel import Server
from mcp.server.models import InitializationOptions
from mcp.server import stdio

from stats_report.errors import StatsReportError, log_error
from stats_report.logging import configure_logging, get_log_level, get_logger
from stats_report.report import Average, compute_statistic, to_json_value
from stats_report.sources.factory import create_source
from stats_report.types import SourceConfig, Statistic

logger = get_logger("server")

SERVER_NAME = "stats-report"
SERVER_VERSION = "0.1.0"

TOOL_STATISTICS: Dict[str, Statistic] = {
    "stats_mean": Statistic.MEAN,
    "stats_median": Statistic.MEDIAN,
    "stats_mode": Statistic.MODE,
}

LOCATION_SCHEMA = {
    "type": "object",
    "properties": {
        "location": {
            "type": "string",
            "description": "Local file path or http(s) URL with one number per line",
        }
    },
    "required": ["location"],
}

tools = [
    types.Tool(
        name="stats_mean",
        description="Arithmetic mean of the numbers at a location (null when there are none)",
        inputSchema=LOCATION_SCHEMA,
    ),
    types.Tool(
        name="stats_median",
        description="Median of the numbers at a location (null when there are none)",
        inputSchema=LOCATION_SCHEMA,
    ),
    types.Tool(
        name="stats_mode",
        description="Most frequent values at a location, ascending",
        inputSchema=LOCATION_SCHEMA,
    ),
]


async def handle_tool_call(name: str, arguments: Dict[str, Any]) -> Dict[str, Any]:
    """Dispatch a tool call and build its JSON payload."""
    statistic = TOOL_STATISTICS.get(name)
    if statistic is None:
        return {"success": False, "error": f"Unknown tool: {name}"}

    location = arguments.get("location")
    if not isinstance(location, str) or not location:
        return {"success": False, "error": "Missing required argument: location"}

    average = Average(create_source(SourceConfig(location=location)))
    try:
        value = await compute_statistic(average, statistic)
    except StatsReportError as e:
        log_error(e, {"tool": name, "location": location}, logger)
        return {"success": False, "error": str(e), "code": e.code}

    return {
        "success": True,
        "data": {
            "statistic": statistic.value,
            "location": location,
            "value": to_json_value(value),
        },
    }


async def init_server() -> Server:
    logger.info(f"Registered tools: {', '.join(t.name for t in tools)}")

    server = Server(SERVER_NAME)

    @server.list_tools()
    async def list_tools() -> List[types.Tool]:
        logger.debug("Tools requested")
        return tools

    @server.call_tool()
    async def call_tool(
        name: str, arguments: Dict[str, Any]
    ) -> list[types.TextContent | types.ImageContent | types.EmbeddedResource]:
        logger.debug(f"Tool call received: {name} with arguments {arguments}")
        result = await handle_tool_call(name, arguments or {})
        return [types.TextContent(type="text", text=json.dumps(result))]

    return server


async def serve() -> None:
    configure_logging(get_log_level(), json_output=True)
    logger.info("Starting stats report server")
    server = await init_server()
    async with stdio.stdio_server() as (read_stream, write_stream):
        init_options = InitializationOptions(
            server_name=SERVER_NAME,
            server_version=SERVER_VERSION,
            capabilities=types.ServerCapabilities(
                tools=types.ToolsCapability(listChanged=False),
                logging=types.LoggingCapability(),
            ),
        )
        await server.run(read_stream, write_stream, init_options)


def main() -> None:
    """Run the MCP server."""
    asyncio.run(serve())
