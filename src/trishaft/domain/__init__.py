"""Domain layer - pure business logic with no I/O or framework dependencies.

Contents:
    * :mod:`.categories` - Category registry (display order and titles)
    * :mod:`.site` - Site title constant and page title formatting
    * :mod:`.enums` - Domain enumerations (Category, OutputFormat)
    * :mod:`.errors` - Domain exception types
"""

from __future__ import annotations

from .categories import (
    CATEGORIES_DATA,
    CATEGORIES_LIST,
    CategoryInfo,
    category_info,
    check_registry,
    list_categories,
    parse_category,
)
from .enums import Category, OutputFormat
from .errors import CategoryRegistryError, UnknownCategoryError
from .site import SITE_TITLE, TITLE_SEPARATOR, get_title

__all__ = [
    # Categories
    "CATEGORIES_DATA",
    "CATEGORIES_LIST",
    "CategoryInfo",
    "category_info",
    "check_registry",
    "list_categories",
    "parse_category",
    # Site
    "SITE_TITLE",
    "TITLE_SEPARATOR",
    "get_title",
    # Enums
    "Category",
    "OutputFormat",
    # Errors
    "CategoryRegistryError",
    "UnknownCategoryError",
]
