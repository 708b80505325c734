"""Category registry: display order, display titles, and boundary parsing.

All data here is fixed at import time and never mutated afterwards.

Contents:
    * :class:`CategoryInfo` - display record for a single category.
    * :data:`CATEGORIES_LIST` - categories in canonical display order.
    * :data:`CATEGORIES_DATA` - read-only lookup table keyed by category.
    * :func:`list_categories`, :func:`category_info`, :func:`parse_category`.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from types import MappingProxyType
from typing import Final

from .enums import Category
from .errors import CategoryRegistryError, UnknownCategoryError


@dataclass(frozen=True, slots=True)
class CategoryInfo:
    """Display information for one category.

    Attributes:
        category: The category this record describes.
        title: Human-readable label shown on the site.

    Example:
        >>> info = CategoryInfo(category=Category.RUST, title="Rust")
        >>> info.title
        'Rust'
    """

    category: Category
    title: str


#: Categories in the order the site lists them.
CATEGORIES_LIST: Final[tuple[Category, ...]] = (
    Category.TYPESCRIPT,
    Category.RUST,
)

#: Display information for every category.
CATEGORIES_DATA: Final[Mapping[Category, CategoryInfo]] = MappingProxyType(
    {
        Category.TYPESCRIPT: CategoryInfo(category=Category.TYPESCRIPT, title="TypeScript"),
        Category.RUST: CategoryInfo(category=Category.RUST, title="Rust"),
    }
)


def check_registry(order: Sequence[Category], table: Mapping[Category, CategoryInfo]) -> None:
    """Verify ``order`` and ``table`` describe every category exactly once.

    Runs against :data:`CATEGORIES_LIST` and :data:`CATEGORIES_DATA` at import.

    Raises:
        CategoryRegistryError: If a category is missing, duplicated, or
            stored under another category's key.
    """
    members = set(Category)
    if len(order) != len(members) or set(order) != members:
        raise CategoryRegistryError("display order must name every category exactly once")
    if set(table) != members:
        raise CategoryRegistryError("lookup table must cover every category")
    for key, info in table.items():
        if info.category is not key:
            raise CategoryRegistryError(f"entry {key.value!r} describes {info.category.value!r}")


check_registry(CATEGORIES_LIST, CATEGORIES_DATA)


def list_categories() -> tuple[Category, ...]:
    """Return all categories in canonical display order.

    Example:
        >>> [c.value for c in list_categories()]
        ['typescript', 'rust']
    """
    return CATEGORIES_LIST


def parse_category(raw: str) -> Category:
    """Convert a raw tag into a :class:`Category`.

    Matching is exact and case-sensitive against the category tags.

    Args:
        raw: Tag received at a system boundary.

    Returns:
        The matching category.

    Raises:
        UnknownCategoryError: If ``raw`` names no category.

    Examples:
        >>> parse_category("rust")
        <Category.RUST: 'rust'>

        >>> parse_category("Rust")  # doctest: +IGNORE_EXCEPTION_DETAIL
        Traceback (most recent call last):
        ...
        UnknownCategoryError: Unknown category: 'Rust'
    """
    try:
        return Category(raw)
    except ValueError as exc:
        raise UnknownCategoryError(raw, choices=[c.value for c in CATEGORIES_LIST]) from exc


def category_info(category: Category | str) -> CategoryInfo:
    """Return the display information for ``category``.

    Total over :class:`Category`. Plain strings are accepted and resolved
    through :func:`parse_category`.

    Raises:
        UnknownCategoryError: If ``category`` is not an enumerated category.

    Example:
        >>> category_info(Category.TYPESCRIPT).title
        'TypeScript'
        >>> category_info("rust").category
        <Category.RUST: 'rust'>
    """
    if not isinstance(category, Category):
        if not isinstance(category, str):
            raise UnknownCategoryError(category, choices=[c.value for c in CATEGORIES_LIST])
        category = parse_category(category)
    return CATEGORIES_DATA[category]


__all__ = [
    "CATEGORIES_DATA",
    "CATEGORIES_LIST",
    "CategoryInfo",
    "category_info",
    "check_registry",
    "list_categories",
    "parse_category",
]
