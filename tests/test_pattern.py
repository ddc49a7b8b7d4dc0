"""Tests for openapi_runtime.routing.pattern — URI templates and matching."""

import pytest

from openapi_runtime.errors import ConfigurationError
from openapi_runtime.routing.pattern import MatchResult, PatternPart, UriPattern, parse_pattern


class TestParsePattern:
    def test_static(self) -> None:
        assert parse_pattern("/users") == [PatternPart("/users")]

    def test_param(self) -> None:
        parts = parse_pattern("/users/{id}")
        assert parts == [PatternPart("/users/"), PatternPart("id", is_param=True)]

    def test_params_between_literals(self) -> None:
        parts = parse_pattern("/users/{id}/posts/{post_id}.json")
        assert [p.value for p in parts] == ["/users/", "id", "/posts/", "post_id", ".json"]
        assert [p.is_param for p in parts] == [False, True, False, True, False]

    def test_non_identifier_name(self) -> None:
        parts = parse_pattern("/items/{item-id}")
        assert parts[1] == PatternPart("item-id", is_param=True)

    def test_unclosed_brace(self) -> None:
        with pytest.raises(ConfigurationError, match="Unbalanced"):
            parse_pattern("/users/{id")

    def test_stray_closing_brace(self) -> None:
        with pytest.raises(ConfigurationError, match="Unbalanced"):
            parse_pattern("/users/id}")

    def test_empty_name(self) -> None:
        with pytest.raises(ConfigurationError, match="Invalid parameter"):
            parse_pattern("/users/{}")

    def test_duplicate_name(self) -> None:
        with pytest.raises(ConfigurationError, match="more than once"):
            parse_pattern("/a/{id}/b/{id}")


class TestUriPatternMatch:
    def test_static_full_match(self) -> None:
        match = UriPattern("/users").match("/users")
        assert match == MatchResult(parameters={}, remainder="")
        assert match.is_full

    def test_param_capture(self) -> None:
        match = UriPattern("/users/{id}").match("/users/42")
        assert match is not None
        assert match.parameters == {"id": "42"}
        assert match.is_full

    def test_multiple_params(self) -> None:
        match = UriPattern("/users/{user}/posts/{post}").match("/users/ann/posts/7")
        assert match is not None
        assert match.parameters == {"user": "ann", "post": "7"}

    def test_literal_mismatch(self) -> None:
        assert UriPattern("/users").match("/accounts") is None

    def test_prefix_match_reports_remainder(self) -> None:
        match = UriPattern("/users/{id}").match("/users/42/avatar")
        assert match is not None
        assert match.parameters == {"id": "42"}
        assert match.remainder == "/avatar"
        assert not match.is_full

    def test_trailing_slash_is_remainder(self) -> None:
        match = UriPattern("/users").match("/users/")
        assert match is not None
        assert match.remainder == "/"

    def test_shorter_path_does_not_match(self) -> None:
        assert UriPattern("/users/{id}").match("/users") is None
        assert UriPattern("/users/{id}").match("/users/") is None

    def test_captures_stay_encoded(self) -> None:
        match = UriPattern("/files/{name}").match("/files/a%20b")
        assert match is not None
        assert match.parameters == {"name": "a%20b"}

    def test_param_does_not_cross_segments(self) -> None:
        match = UriPattern("/files/{name}").match("/files/a/b")
        assert match is not None
        assert match.parameters == {"name": "a"}
        assert match.remainder == "/b"

    def test_param_with_literal_suffix(self) -> None:
        match = UriPattern("/reports/{id}.csv").match("/reports/17.csv")
        assert match is not None
        assert match.parameters == {"id": "17"}
        assert match.is_full

    def test_regex_metacharacters_are_literal(self) -> None:
        pattern = UriPattern("/v1.0/items")
        assert pattern.match("/v1x0/items") is None
        assert pattern.match("/v1.0/items") is not None

    def test_matching_is_repeatable(self) -> None:
        pattern = UriPattern("/users/{id}")
        assert pattern.match("/users/9") == pattern.match("/users/9")


class TestUriPatternProtocol:
    def test_parameter_names(self) -> None:
        assert UriPattern("/a/{x}/b/{y}").parameter_names == ("x", "y")

    def test_equality_by_template(self) -> None:
        assert UriPattern("/a/{x}") == UriPattern("/a/{x}")
        assert UriPattern("/a/{x}") != UriPattern("/a/{y}")
        assert len({UriPattern("/a"), UriPattern("/a")}) == 1

    def test_repr(self) -> None:
        assert repr(UriPattern("/a")) == "UriPattern('/a')"
