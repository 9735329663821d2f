"""
MCP Punycode Server - An MCP server for converting internationalized domain names.
"""

import asyncio
import sys

import yaml
from fastmcp import FastMCP
from fastmcp.utilities.logging import get_logger

from .prompt_mixins import PromptRegistrationMixin
from .resource_mixins import ResourceRegistrationMixin
from .server_mixins import ServerLifecycleMixin
from .tool_mixins import ToolRegistrationMixin

logger = get_logger(__name__)

DEFAULT_HOST = "0.0.0.0"
DEFAULT_PORT = 3000


class PunycodeMCPServer(
    ToolRegistrationMixin,
    PromptRegistrationMixin,
    ResourceRegistrationMixin,
    ServerLifecycleMixin,
):
    """MCP Server implementation for Punycode conversions.

    Uses mixin classes to separate concerns:
    - ToolRegistrationMixin: Registers conversion tools
    - PromptRegistrationMixin: Registers prompts
    - ResourceRegistrationMixin: Registers the codec parameters resource
    - ServerLifecycleMixin: Manages server startup/shutdown and signals
    """

    def __init__(self, config_path: str = "config/config.yaml") -> None:
        """Initialize the Punycode MCP server.

        Args:
            config_path: Path to the configuration file.
                Defaults to "config/config.yaml"
        """
        self.config_path = config_path
        self.server = FastMCP(
            name="Punycode MCP Server",
            instructions=(
                "An MCP server that converts internationalized domain names and email "
                "addresses between Unicode and punycode (RFC 3492)."
            ),
        )
        self.logger = get_logger(__name__)
        try:
            with open(self.config_path, encoding="utf-8") as f:
                self.config = yaml.safe_load(f) or {}
        except FileNotFoundError:
            self.logger.info("Config file %s not found, using default settings", self.config_path)
            self.config = {}
        except (yaml.YAMLError, OSError) as e:
            self.logger.error("Error loading config: %s", e)
            self.config = {}

        # Register all server components (tools, prompts, resources)
        # These must be called after self.server and self.config are initialized
        self._register_all_components()

    def _register_all_components(self) -> None:
        """Register all tools, prompts, and resources with the server."""
        self.register_tools()
        self.register_tools_prompts()
        self.register_codec_resources()

    @property
    def listen_address(self) -> tuple[str, int]:
        """Host and port from the ``server`` config section."""
        server_cfg = self.config.get("server", {}) or {}
        return server_cfg.get("host", DEFAULT_HOST), int(server_cfg.get("port", DEFAULT_PORT))


async def main() -> None:
    """Main entry point for the Punycode MCP server."""
    server = PunycodeMCPServer()
    host, port = server.listen_address
    try:
        await server.start(host=host, port=port)
    except KeyboardInterrupt:
        await server.stop()
    except (OSError, RuntimeError) as e:
        logger.error("Unexpected error: %s", e)
        await server.stop()
        sys.exit(1)


def run_server() -> None:
    """Run the server with proper asyncio event loop handling."""
    loop = None
    try:
        if sys.platform == "win32":
            loop = asyncio.ProactorEventLoop()
        else:
            loop = asyncio.new_event_loop()
        asyncio.set_event_loop(loop)

        loop.run_until_complete(main())
    except KeyboardInterrupt:
        if loop is not None:
            loop.run_until_complete(asyncio.sleep(0))
    finally:
        if loop is not None:
            loop.close()


if __name__ == "__main__":
    run_server()
