"""
Prompt Mixin classes for PunycodeMCPServer to separate concerns.
"""

from typing import Any


class PromptRegistrationMixin:
    """Mixin for registering prompts with the MCP server.

    Note: This mixin assumes the class has 'server' (FastMCP) and 'config' (dict)
    attributes available when register_tools_prompts() is called.
    """

    # Type hints for attributes provided by the host class
    server: Any  # FastMCP instance
    config: dict[str, Any]  # Configuration dictionary

    def register_tools_prompts(self) -> None:
        """Register prompts for tools with the server."""

        @self.server.prompt(
            name="punycode_converter",
            description="Return the punycode version of an internationalized domain name (IDN).",
            tags=set(("idn", "punycode", "converter")),
            enabled=True,
        )
        def punycode_converter(domain: str) -> str:
            """Convert IDN domain name to punycode."""
            return f"Convert the domain {domain} to punycode format."

        @self.server.prompt(
            name="punycode_decoder",
            description="Return the Unicode version of a punycode domain name.",
            tags=set(("idn", "punycode", "converter")),
            enabled=True,
        )
        def punycode_decoder(domain: str) -> str:
            """Convert punycode domain name to Unicode."""
            return f"Convert the punycode domain {domain} back to its Unicode form."

        @self.server.prompt(
            name="punycode_inspect",
            description="Explain how each label of a domain name is encoded.",
            tags=set(("idn", "punycode", "inspect")),
            enabled=self.config.get("features", {}).get("inspection", False),
        )
        def punycode_inspect(domain: str) -> str:
            """Inspect the labels of a domain name."""
            return (
                f"Inspect the labels of {domain} using the punycode inspect tool"
                " and explain which labels need an xn-- encoding."
            )
