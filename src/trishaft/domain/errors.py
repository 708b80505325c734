"""Domain-specific exceptions for typed error handling at boundaries."""

from __future__ import annotations

from collections.abc import Iterable


class UnknownCategoryError(ValueError):
    """A value outside the closed category set reached a lookup.

    Raised when a raw string (CLI argument, config value) does not name one
    of the enumerated categories. Inherits from ValueError so generic
    ``except ValueError`` handlers keep catching it.

    Attributes:
        value: The rejected input, exactly as received.
        choices: Accepted category tags in display order.

    Example:
        >>> from trishaft.domain.errors import UnknownCategoryError
        >>> err = UnknownCategoryError("python", choices=["typescript", "rust"])
        >>> str(err)
        "Unknown category: 'python' (expected one of: typescript, rust)"
        >>> isinstance(err, ValueError)
        True
    """

    def __init__(self, value: object, *, choices: Iterable[str] = ()) -> None:
        self.value = value
        self.choices = tuple(choices)
        message = f"Unknown category: {value!r}"
        if self.choices:
            message += f" (expected one of: {', '.join(self.choices)})"
        super().__init__(message)


class CategoryRegistryError(ValueError):
    """The category display order or lookup table is inconsistent.

    Raised at import when a category is missing, listed twice, or filed
    under another category's key.

    Example:
        >>> from trishaft.domain.errors import CategoryRegistryError
        >>> str(CategoryRegistryError("lookup table must cover every category"))
        'lookup table must cover every category'
    """


__all__ = [
    "CategoryRegistryError",
    "UnknownCategoryError",
]
