"""Mixin classes for PunycodeMCPServer to separate concerns and improve maintainability."""

from typing import Any

from .codec import ACE_PREFIX, LABEL_SEPARATORS, bootstring


class ResourceRegistrationMixin:
    """Mixin for registering resources with the MCP server.

    Note: This mixin assumes the class has 'server' (FastMCP) and 'config' (dict)
    attributes available when registration methods are called.
    """

    # Type hints for attributes provided by the host class
    server: Any  # FastMCP instance
    config: dict[str, Any]  # Configuration dictionary

    def register_codec_resources(self) -> None:
        """Register the Bootstring parameters used by this server."""

        @self.server.resource(
            uri="resource://bootstring_parameters",
            name="bootstring_parameters",
            description="The Punycode (RFC 3492) parameters used by this server.",
            mime_type="application/json",
        )
        def get_bootstring_parameters() -> dict[str, Any]:
            return bootstring_parameters()


def bootstring_parameters() -> dict[str, Any]:
    """Return the Punycode parameters as a JSON friendly dictionary."""
    return {
        "base": bootstring.BASE,
        "tmin": bootstring.TMIN,
        "tmax": bootstring.TMAX,
        "skew": bootstring.SKEW,
        "damp": bootstring.DAMP,
        "initial_bias": bootstring.INITIAL_BIAS,
        "initial_n": bootstring.INITIAL_N,
        "delimiter": bootstring.DELIMITER,
        "ace_prefix": ACE_PREFIX,
        "label_separators": [f"U+{ord(sep):04X}" for sep in LABEL_SEPARATORS],
    }
