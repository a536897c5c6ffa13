"""
Stdio tool server.
Speaks newline-delimited JSON-RPC 2.0 (Model Context Protocol subset).
"""

import json
import logging
import sys
from typing import Any, Dict, List, Optional, TextIO

from ..tools.base import Tool

logger = logging.getLogger(__name__)

PROTOCOL_VERSION = "2024-11-05"

PARSE_ERROR = -32700
INVALID_REQUEST = -32600
METHOD_NOT_FOUND = -32601
INVALID_PARAMS = -32602
INTERNAL_ERROR = -32603


class ToolServer:
    def __init__(
        self,
        tools: List[Tool],
        name: str = "agentic-tools",
        version: str = "0.0.0",
        input_stream: Optional[TextIO] = None,
        output_stream: Optional[TextIO] = None,
    ):
        self.tools = {tool.name: tool for tool in tools}
        self.name = name
        self.version = version
        self.input_stream = input_stream or sys.stdin
        self.output_stream = output_stream or sys.stdout

    def run(self):
        """Main loop: one request per line until stdin closes."""
        logger.info("%s %s listening on stdio", self.name, self.version)

        for line in self.input_stream:
            try:
                self.handle_message(line.strip())
            except Exception as e:
                logger.error(f"Error handling message: {e}")

        logger.info("Input closed, stopping server")

    def handle_message(self, line: str):
        if not line:
            return
        try:
            req = json.loads(line)
        except json.JSONDecodeError:
            self.send_error(None, PARSE_ERROR, "Parse error")
            return

        if not isinstance(req, dict):
            self.send_error(None, INVALID_REQUEST, "Invalid Request")
            return

        req_id = req.get("id")
        method = req.get("method")
        params = req.get("params")
        if params is None:
            params = {}
        elif not isinstance(params, dict):
            if req_id is not None:
                self.send_error(req_id, INVALID_PARAMS, "Invalid params: params must be an object")
            return

        try:
            if method == "initialize":
                result = self.handle_initialize(params)
            elif method == "notifications/initialized":
                return
            elif method == "ping":
                result = {}
            elif method == "tools/list":
                result = self.handle_list_tools()
            elif method == "tools/call":
                result = self.handle_call_tool(params)
            else:
                # Unknown notifications are ignored, unknown requests are errors
                if req_id is not None:
                    self.send_error(req_id, METHOD_NOT_FOUND, f"Method not found: {method}")
                return

            if req_id is not None:
                self.send_result(req_id, result)

        except KeyError as e:
            if req_id is not None:
                self.send_error(req_id, INVALID_PARAMS, f"Invalid params: {e.args[0]}")
        except Exception as e:
            logger.error("Error executing %s", method, exc_info=True)
            if req_id is not None:
                self.send_error(req_id, INTERNAL_ERROR, f"Internal error: {str(e)}")

    def handle_initialize(self, params: Dict[str, Any]) -> Dict[str, Any]:
        client = params.get("clientInfo", {})
        logger.info("Client connected: %s %s", client.get("name", "unknown"), client.get("version", ""))
        return {
            "protocolVersion": PROTOCOL_VERSION,
            "capabilities": {
                "tools": {},
            },
            "serverInfo": {
                "name": self.name,
                "version": self.version,
            },
        }

    def handle_list_tools(self) -> Dict[str, Any]:
        return {
            "tools": [
                {
                    "name": tool.name,
                    "description": tool.description,
                    "inputSchema": tool.input_schema(),
                }
                for tool in self.tools.values()
            ]
        }

    def handle_call_tool(self, params: Dict[str, Any]) -> Dict[str, Any]:
        name = params["name"]
        tool = self.tools.get(name)
        if tool is None:
            raise ValueError(f"Unknown tool: {name}")

        logger.info("Calling tool %s", name)
        response = tool.call(params.get("arguments"))
        if response.is_error:
            logger.warning("Tool %s returned an error: %s", name, response.text)
        return response.to_dict()

    def send_result(self, req_id, result):
        self._write({"jsonrpc": "2.0", "result": result, "id": req_id})

    def send_error(self, req_id, code, message):
        self._write({"jsonrpc": "2.0", "error": {"code": code, "message": message}, "id": req_id})

    def _write(self, message: Dict[str, Any]):
        self.output_stream.write(json.dumps(message) + "\n")
        self.output_stream.flush()
