"""Type definitions for Punycode conversion results.

This module provides the structured result types returned by the Model
Context Protocol (MCP) tools of the Punycode server.

The types defined here are used to:
- Wrap the outcome of every tool call in a uniform envelope
- Describe the per-label breakdown produced by the inspection tool

Note: TypedDict classes are used where plain dictionaries travel to MCP
clients, dataclasses where the server builds the value itself.
"""

from dataclasses import dataclass, field
from typing import Any, TypedDict


@dataclass
class ToolResult:
    """Stores the result of a Punycode tool operation."""

    success: bool
    output: str | list[str] | dict[str, Any] | list[dict[str, Any]] | None = None
    error: str | None = None
    details: dict[str, Any] = field(default_factory=dict)


class LabelReport(TypedDict):
    """A TypedDict describing one label of an inspected domain name.

    Attributes:
        unicode (str): The label in Unicode form.
        ascii (str): The label in ASCII-compatible form.
        is_ace (bool): Whether the ASCII form carries the ``xn--`` prefix.
        codepoints (list[int]): Codepoints of the Unicode form.
    """

    unicode: str
    ascii: str
    is_ace: bool
    codepoints: list[int]
