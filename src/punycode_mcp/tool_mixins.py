"""
Tool Mixin classes for PunycodeMCPServer to separate concerns.
"""

from typing import Any

from fastmcp import Context

from .tools import (
    codepoint_converter_impl,
    punycode_converter_impl,
    punycode_decoder_impl,
    punycode_inspect_impl,
    punycode_label_decoder_impl,
    punycode_label_encoder_impl,
)
from .typedefs import ToolResult


class ToolRegistrationMixin:
    """Mixin for registering Punycode tools with the MCP server.

    Note: This mixin assumes the class has 'server' (FastMCP) and 'config' (dict)
    attributes available when register_tools() is called.
    """

    # Type hints for attributes provided by the host class
    server: Any  # FastMCP instance
    config: dict[str, Any]  # Configuration dictionary

    def register_tools(self) -> None:
        """Register all Punycode related tools with the MCP server."""

        @self.server.tool(
            name="punycode_converter",
            description=(
                "Use this tool to convert the specified internationalized domain name (IDN) "
                "or email address into punycode format."
            ),
            tags=set(("idn", "punycode", "converter", "encode")),
            enabled=True,
        )
        async def punycode_converter(domain: str, ctx: Context) -> ToolResult:
            await ctx.info(f"Performing punycode conversion for domain `{domain}`.")
            return await punycode_converter_impl(domain)

        @self.server.tool(
            name="punycode_decoder",
            description=(
                "Use this tool to convert a punycode (xn--) domain name or email address "
                "back into its Unicode form."
            ),
            tags=set(("idn", "punycode", "converter", "decode")),
            enabled=True,
        )
        async def punycode_decoder(domain: str, ctx: Context) -> ToolResult:
            await ctx.info(f"Performing punycode decoding for domain `{domain}`.")
            return await punycode_decoder_impl(domain)

        @self.server.tool(
            name="punycode_label_encoder",
            description=(
                "Use this tool to Bootstring encode a single label or arbitrary string "
                "without adding the xn-- prefix."
            ),
            tags=set(("punycode", "bootstring", "label", "encode")),
            enabled=self.config.get("features", {}).get("label_tools", False),
        )
        async def punycode_label_encoder(label: str, ctx: Context) -> ToolResult:
            await ctx.info(f"Encoding label `{label}`.")
            return await punycode_label_encoder_impl(label)

        @self.server.tool(
            name="punycode_label_decoder",
            description=(
                "Use this tool to decode a single Bootstring encoded label given "
                "without the xn-- prefix."
            ),
            tags=set(("punycode", "bootstring", "label", "decode")),
            enabled=self.config.get("features", {}).get("label_tools", False),
        )
        async def punycode_label_decoder(label: str, ctx: Context) -> ToolResult:
            await ctx.info(f"Decoding label `{label}`.")
            return await punycode_label_decoder_impl(label)

        @self.server.tool(
            name="punycode_inspect",
            description=(
                "Use this tool to list every label of a domain name with its Unicode "
                "form, ASCII form and codepoints."
            ),
            tags=set(("idn", "punycode", "inspect")),
            enabled=self.config.get("features", {}).get("inspection", False),
        )
        async def punycode_inspect(domain: str, ctx: Context) -> ToolResult:
            await ctx.info(f"Inspecting labels of `{domain}`.")
            return await punycode_inspect_impl(domain)

        @self.server.tool(
            name="codepoint_converter",
            description="Use this tool to list the Unicode codepoints of a string.",
            tags=set(("unicode", "codepoint", "inspect")),
            enabled=self.config.get("features", {}).get("inspection", False),
        )
        async def codepoint_converter(text: str, ctx: Context) -> ToolResult:
            await ctx.info("Converting text to codepoints.")
            return await codepoint_converter_impl(text)
