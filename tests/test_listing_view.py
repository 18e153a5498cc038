"""Tests for repository filtering and pagination."""

import pytest
from pydantic import ValidationError

from mcp_cursor.schemas import Repository
from mcp_cursor.services.repository_cache import ListingQuery, list_view


def _repo(owner: str, name: str) -> Repository:
    return Repository(
        owner=owner, name=name, repository=f"https://github.com/{owner}/{name}"
    )


@pytest.fixture
def repositories() -> tuple[Repository, ...]:
    return (_repo("A", "foo"), _repo("A", "bar"), _repo("B", "foobar"))


def test_search_matches_name_substring(repositories):
    view = list_view(repositories, ListingQuery(search="foo"))

    assert [(r.owner, r.name) for r in view.repositories] == [("A", "foo"), ("B", "foobar")]
    assert view.total == 2
    assert view.has_more is False


def test_owner_filter_with_pagination(repositories):
    view = list_view(repositories, ListingQuery(owner="A", limit=1, offset=1))

    assert [(r.owner, r.name) for r in view.repositories] == [("A", "bar")]
    assert view.total == 2
    assert view.has_more is False


def test_search_is_case_insensitive(repositories):
    view = list_view(repositories, ListingQuery(search="FOO"))

    assert view.total == 2


def test_owner_is_case_sensitive(repositories):
    view = list_view(repositories, ListingQuery(owner="a"))

    assert view.total == 0
    assert view.repositories == []


def test_search_and_owner_combine(repositories):
    view = list_view(repositories, ListingQuery(search="foo", owner="B"))

    assert [r.name for r in view.repositories] == ["foobar"]


def test_defaults(repositories):
    view = list_view(repositories, ListingQuery())

    assert view.limit == 20
    assert view.offset == 0
    assert view.total == 3
    assert view.has_more is False


def test_wire_format_uses_has_more_key(repositories):
    wire = list_view(repositories, ListingQuery(limit=1)).to_wire()

    assert wire["hasMore"] is True
    assert wire["repositories"] == [
        {"owner": "A", "name": "foo", "repository": "https://github.com/A/foo"}
    ]


@pytest.mark.parametrize(
    "offset,limit,expected_names,has_more",
    [
        (0, 1, ["foo"], True),
        (0, 3, ["foo", "bar", "foobar"], False),
        (1, 1, ["bar"], True),
        (2, 5, ["foobar"], False),
        (3, 1, [], False),
        (50, 10, [], False),
    ],
)
def test_pagination(repositories, offset, limit, expected_names, has_more):
    view = list_view(repositories, ListingQuery(limit=limit, offset=offset))

    assert [r.name for r in view.repositories] == expected_names
    assert view.total == 3
    assert view.has_more is has_more


def test_list_view_does_not_mutate_input(repositories):
    before = list(repositories)
    list_view(repositories, ListingQuery(search="bar", limit=1))

    assert list(repositories) == before


@pytest.mark.parametrize("bad", [{"limit": 0}, {"limit": 101}, {"offset": -1}])
def test_query_bounds(bad):
    with pytest.raises(ValidationError):
        ListingQuery(**bad)
