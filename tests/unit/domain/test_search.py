"""Tests for catalog/domain/models/search.py — SearchParams normalisation and SearchResult."""

import pytest

from catalog.domain.models.category import Category
from catalog.domain.models.enums import SortDirection
from catalog.domain.models.search import SearchParams, SearchResult


# --- SearchParams defaults ---

def test_search_params_defaults():
    params = SearchParams()
    assert params.page == 1
    assert params.per_page == 15
    assert params.sort is None
    assert params.sort_dir is None
    assert params.filter is None


# --- page / per_page ---

@pytest.mark.parametrize(
    "value, expected",
    [(None, 1), ("", 1), ("fake", 1), (0, 1), (-1, 1), (5.5, 1), (True, 1), (2, 2), ("2", 2), (2.0, 2)],
)
def test_page_normalisation(value, expected):
    assert SearchParams(page=value).page == expected


@pytest.mark.parametrize(
    "value, expected",
    [(None, 15), ("", 15), ("fake", 15), (0, 15), (-1, 15), (5.5, 15), (True, 15), (10, 10), ("10", 10)],
)
def test_per_page_normalisation(value, expected):
    assert SearchParams(per_page=value).per_page == expected


# --- sort / sort_dir ---

@pytest.mark.parametrize("value, expected", [(None, None), ("", None), ("name", "name"), (5, "5")])
def test_sort_normalisation(value, expected):
    assert SearchParams(sort=value).sort == expected


def test_sort_dir_is_none_without_sort():
    assert SearchParams(sort=None, sort_dir="desc").sort_dir is None


@pytest.mark.parametrize(
    "value, expected",
    [
        (None, SortDirection.ASC),
        ("", SortDirection.ASC),
        ("fake", SortDirection.ASC),
        ("asc", SortDirection.ASC),
        ("ASC", SortDirection.ASC),
        ("desc", SortDirection.DESC),
        ("DESC", SortDirection.DESC),
        (SortDirection.DESC, SortDirection.DESC),
    ],
)
def test_sort_dir_normalisation(value, expected):
    assert SearchParams(sort="name", sort_dir=value).sort_dir == expected


# --- filter ---

@pytest.mark.parametrize("value, expected", [(None, None), ("", None), ("mov", "mov")])
def test_filter_normalisation(value, expected):
    assert SearchParams(filter=value).filter == expected


def test_search_params_are_frozen():
    params = SearchParams()
    with pytest.raises(Exception):
        params.page = 2  # type: ignore[misc]


# --- SearchResult ---

def test_last_page_rounds_up():
    result = SearchResult(items=[], total=10, current_page=1, per_page=4)
    assert result.last_page == 3


def test_last_page_exact_division():
    assert SearchResult(items=[], total=8, current_page=1, per_page=4).last_page == 2


def test_last_page_is_zero_when_empty():
    assert SearchResult(items=[], total=0, current_page=1, per_page=15).last_page == 0


def test_to_json_keeps_entities_by_default():
    category = Category.create(name="Movie")
    data = SearchResult(items=[category], total=1, current_page=1, per_page=2).to_json()
    assert data == {
        "items": [category],
        "total": 1,
        "current_page": 1,
        "per_page": 2,
        "last_page": 1,
    }


def test_to_json_force_entity_serialises_items():
    category = Category.create(name="Movie")
    data = SearchResult(items=[category], total=1, current_page=1, per_page=2).to_json(
        force_entity=True
    )
    assert data["items"] == [category.to_json()]
