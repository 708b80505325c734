"""Type-safe domain enums for the category taxonomy and output formats."""

from __future__ import annotations

from enum import Enum


class Category(str, Enum):
    """Closed set of content categories published on the site.

    Inherits from str so a member compares equal to its plain tag and can be
    handed straight to Click choices or JSON output. Declaration order is the
    canonical display order.

    Attributes:
        TYPESCRIPT: Articles about TypeScript.
        RUST: Articles about Rust.

    Example:
        >>> Category.TYPESCRIPT.value
        'typescript'
        >>> Category.RUST == "rust"
        True
    """

    TYPESCRIPT = "typescript"
    RUST = "rust"


class OutputFormat(str, Enum):
    """Output format options for CLI display commands.

    Inherits from str to allow direct string comparison and Click integration.

    Attributes:
        HUMAN: Human-readable output.
        JSON: Machine-readable JSON output.

    Example:
        >>> OutputFormat.HUMAN.value
        'human'
        >>> OutputFormat.JSON == "json"
        True
    """

    HUMAN = "human"
    JSON = "json"


__all__ = [
    "Category",
    "OutputFormat",
]
