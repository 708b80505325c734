"""Public package surface: site title, page titles, and the category registry.

Domain objects are re-exported as-is; ``get_config`` exposes the layered
configuration that drives logging, and ``print_info`` the package metadata.
"""

from __future__ import annotations

from .__init__conf__ import print_info
from .adapters.config.loader import get_config
from .domain.categories import (
    CATEGORIES_DATA,
    CATEGORIES_LIST,
    CategoryInfo,
    category_info,
    list_categories,
    parse_category,
)
from .domain.enums import Category
from .domain.errors import UnknownCategoryError
from .domain.site import SITE_TITLE, TITLE_SEPARATOR, get_title

__all__ = [
    "CATEGORIES_DATA",
    "CATEGORIES_LIST",
    "Category",
    "CategoryInfo",
    "SITE_TITLE",
    "TITLE_SEPARATOR",
    "UnknownCategoryError",
    "category_info",
    "get_config",
    "get_title",
    "list_categories",
    "parse_category",
    "print_info",
]
