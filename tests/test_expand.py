"""Tests for pathmatch.routing.expand: building paths from templates."""

import pytest

from pathmatch.routing.expand import expand
from pathmatch.routing.matcher import match
from pathmatch.routing.parser import parse


class TestExpand:
    def test_static(self) -> None:
        assert expand("/hello/world", {}) == "/hello/world"

    def test_root(self) -> None:
        assert expand("/", {}) == ""

    def test_params(self) -> None:
        assert expand("/foo/{fooId}/bar/{barId}", {"fooId": "1", "barId": "2"}) == "/foo/1/bar/2"

    def test_encodes_values(self) -> None:
        assert expand("/users/{id}", {"id": "a b"}) == "/users/a%20b"

    def test_encodes_slash_in_segment(self) -> None:
        assert expand("/users/{id}", {"id": "a/b"}) == "/users/a%2Fb"

    def test_greedy_keeps_slash(self) -> None:
        assert expand("/files/{*path}.{ext}", {"path": "a b/c", "ext": "txt"}) == "/files/a%20b/c.txt"

    def test_wildcard(self) -> None:
        assert expand("/tags/*", {"*": "1/2"}) == "/tags/1/2"

    def test_tokens(self) -> None:
        assert expand(parse("/foo/{id}"), {"id": "7"}) == "/foo/7"

    def test_extra_values_ignored(self) -> None:
        assert expand("/foo/{id}", {"id": "7", "other": "x"}) == "/foo/7"

    def test_missing_value(self) -> None:
        with pytest.raises(KeyError, match="barId"):
            expand("/foo/{fooId}/bar/{barId}", {"fooId": "1"})

    def test_empty_value(self) -> None:
        with pytest.raises(ValueError, match="Empty value"):
            expand("/foo/{id}", {"id": ""})


class TestExpandThenMatch:
    @pytest.mark.parametrize(
        ("template", "values"),
        [
            ("/foo/{fooId}/bar/{barId}", {"fooId": "12 3", "barId": "é:x"}),
            ("/users/{id}", {"id": "a/b"}),
            ("/q/{term}", {"term": "100% a+b"}),
            ("/tags/{*tags}", {"tags": "a b/c/d"}),
            ("/tags/{*tags}", {"tags": "a/b/"}),
            ("/tags/*", {"*": "/"}),
            ("/files/*.{ext}", {"*": "foo/bar/baz", "ext": "txt"}),
        ],
    )
    def test_recovers_values(self, template: str, values: dict[str, str]) -> None:
        assert match(template, expand(template, values)) == values
