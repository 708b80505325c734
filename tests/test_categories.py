"""Category registry stories: display order, lookup totality, boundary parsing."""

from __future__ import annotations

import dataclasses

import pytest

from trishaft.domain.categories import (
    CATEGORIES_DATA,
    CATEGORIES_LIST,
    CategoryInfo,
    category_info,
    check_registry,
    list_categories,
    parse_category,
)
from trishaft.domain.enums import Category
from trishaft.domain.errors import CategoryRegistryError, UnknownCategoryError

# ======================== list_categories ========================


@pytest.mark.os_agnostic
def test_list_categories_returns_display_order() -> None:
    """Categories are listed TypeScript first, then Rust."""
    assert list(list_categories()) == ["typescript", "rust"]


@pytest.mark.os_agnostic
def test_list_categories_has_no_duplicates() -> None:
    """Each category appears exactly once."""
    listed = list_categories()

    assert len(set(listed)) == len(listed)


@pytest.mark.os_agnostic
def test_list_categories_covers_every_enum_member() -> None:
    """No enumerated category is missing from the display order."""
    assert set(list_categories()) == set(Category)


@pytest.mark.os_agnostic
def test_categories_list_is_immutable() -> None:
    """The display order is a tuple, not a mutable list."""
    assert isinstance(CATEGORIES_LIST, tuple)


# ======================== CATEGORIES_DATA ========================


@pytest.mark.os_agnostic
def test_categories_data_matches_list_length() -> None:
    """Every listed category has exactly one table entry and vice versa."""
    assert len(CATEGORIES_DATA) == len(CATEGORIES_LIST)


@pytest.mark.os_agnostic
@pytest.mark.parametrize("category", list(Category))
def test_categories_data_entry_describes_its_key(category: Category) -> None:
    """Each record names the category it is stored under."""
    assert CATEGORIES_DATA[category].category is category


@pytest.mark.os_agnostic
def test_categories_data_rejects_mutation() -> None:
    """The lookup table is read-only."""
    with pytest.raises(TypeError):
        CATEGORIES_DATA[Category.RUST] = CategoryInfo(category=Category.RUST, title="Ferris")  # type: ignore[index]


@pytest.mark.os_agnostic
def test_category_info_records_are_frozen() -> None:
    """Display records cannot be altered after definition."""
    info = CATEGORIES_DATA[Category.TYPESCRIPT]

    with pytest.raises(dataclasses.FrozenInstanceError):
        info.title = "JavaScript"  # type: ignore[misc]


# ======================== category_info ========================


@pytest.mark.os_agnostic
@pytest.mark.parametrize("category", list(list_categories()))
def test_category_info_round_trips_category(category: Category) -> None:
    """Looking up a listed category returns a record for that category."""
    assert category_info(category).category == category


@pytest.mark.os_agnostic
@pytest.mark.parametrize(
    ("tag", "expected_title"),
    [
        ("typescript", "TypeScript"),
        ("rust", "Rust"),
    ],
)
def test_category_info_returns_display_title(tag: str, expected_title: str) -> None:
    """Plain tags resolve to their display titles."""
    assert category_info(tag).title == expected_title


@pytest.mark.os_agnostic
def test_category_info_accepts_enum_members() -> None:
    """Enum members and their tags resolve to the same record."""
    assert category_info(Category.RUST) is category_info("rust")


@pytest.mark.os_agnostic
@pytest.mark.parametrize("raw", ["python", "Rust", "", " rust", 42, None])
def test_category_info_rejects_unknown_values(raw: object) -> None:
    """Anything outside the enumeration raises UnknownCategoryError."""
    with pytest.raises(UnknownCategoryError) as exc_info:
        category_info(raw)  # type: ignore[arg-type]

    assert exc_info.value.value == raw
    assert exc_info.value.choices == ("typescript", "rust")


# ======================== parse_category ========================


@pytest.mark.os_agnostic
def test_parse_category_returns_enum_member() -> None:
    """A known tag converts to the enumerated representation."""
    assert parse_category("typescript") is Category.TYPESCRIPT


@pytest.mark.os_agnostic
def test_parse_category_is_case_sensitive() -> None:
    """Tags must match exactly, including case."""
    with pytest.raises(UnknownCategoryError, match="TypeScript"):
        parse_category("TypeScript")


@pytest.mark.os_agnostic
def test_parse_category_error_lists_choices() -> None:
    """The error message names every accepted tag in display order."""
    with pytest.raises(UnknownCategoryError, match=r"expected one of: typescript, rust"):
        parse_category("go")


# ======================== check_registry ========================


@pytest.mark.os_agnostic
def test_check_registry_accepts_the_shipped_registry() -> None:
    """The module-level order and table pass their own import-time check."""
    check_registry(CATEGORIES_LIST, CATEGORIES_DATA)


@pytest.mark.os_agnostic
@pytest.mark.parametrize(
    "order",
    [
        (Category.RUST,),
        (Category.RUST, Category.RUST),
        (Category.TYPESCRIPT, Category.RUST, Category.RUST),
    ],
)
def test_check_registry_rejects_incomplete_or_repeated_order(order: tuple[Category, ...]) -> None:
    """Every category appears in the display order exactly once."""
    with pytest.raises(CategoryRegistryError, match="display order"):
        check_registry(order, CATEGORIES_DATA)


@pytest.mark.os_agnostic
def test_check_registry_rejects_missing_table_entry() -> None:
    """The lookup table covers every category."""
    table = {Category.RUST: CATEGORIES_DATA[Category.RUST]}

    with pytest.raises(CategoryRegistryError, match="lookup table"):
        check_registry(CATEGORIES_LIST, table)


@pytest.mark.os_agnostic
def test_check_registry_rejects_entry_filed_under_wrong_key() -> None:
    """Each entry describes the category it is stored under."""
    table = {
        Category.TYPESCRIPT: CategoryInfo(category=Category.RUST, title="Rust"),
        Category.RUST: CategoryInfo(category=Category.RUST, title="Rust"),
    }

    with pytest.raises(CategoryRegistryError, match="'typescript' describes 'rust'"):
        check_registry(CATEGORIES_LIST, table)
