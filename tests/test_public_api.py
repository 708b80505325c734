"""Public package surface: every documented name is importable from ``trishaft``."""

from __future__ import annotations

import pytest

import trishaft


@pytest.mark.os_agnostic
@pytest.mark.parametrize("name", trishaft.__all__)
def test_public_names_are_exported(name: str) -> None:
    """Each entry of __all__ resolves to an attribute."""
    assert hasattr(trishaft, name)


@pytest.mark.os_agnostic
def test_public_surface_matches_domain() -> None:
    """Top-level re-exports are the domain objects themselves."""
    from trishaft.domain import categories, site

    assert trishaft.get_title is site.get_title
    assert trishaft.CATEGORIES_DATA is categories.CATEGORIES_DATA
    assert trishaft.get_title("Blog") == "Blog - TRISHAFT"
    assert [c.value for c in trishaft.CATEGORIES_LIST] == ["typescript", "rust"]
