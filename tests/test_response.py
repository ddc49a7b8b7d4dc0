"""Tests for openapi_runtime.http.response — typed operation responses."""

import pytest

from openapi_runtime.errors import ResponseContractError
from openapi_runtime.http.content_type import ContentType
from openapi_runtime.http.response import (
    BinaryBody,
    JsonBody,
    OperationFailure,
    OperationResponse,
    StringBody,
    TransportResponse,
)


class TestFactories:
    def test_json(self) -> None:
        response = OperationResponse.json({"a": 1}, status=201)
        assert response.status == 201
        assert response.body == JsonBody({"a": 1})
        assert response.content_type == ContentType.JSON

    def test_text(self) -> None:
        response = OperationResponse.text("hi")
        assert response.body == StringBody("hi")
        assert response.content_type == ContentType.TEXT_PLAIN

    def test_binary(self) -> None:
        png = ContentType.parse("image/png")
        response = OperationResponse.binary(b"\x89PNG", png)
        assert response.body == BinaryBody(b"\x89PNG")
        assert response.content_type == png

    def test_empty(self) -> None:
        response = OperationResponse.empty()
        assert response.status == 204
        assert response.body is None
        assert response.content_type is None

    def test_headers_are_copied(self) -> None:
        headers = {"X-Foo": ["a"]}
        response = OperationResponse.json({}, headers=headers)
        headers["X-Foo"].append("b")
        assert list(response.headers["X-Foo"]) == ["a"]


class TestContractChecks:
    def test_json_body_needs_json_type(self) -> None:
        with pytest.raises(ResponseContractError, match="JSON body"):
            OperationResponse(200, {}, ContentType.TEXT_PLAIN, JsonBody({}))

    def test_string_body_needs_text_type(self) -> None:
        with pytest.raises(ResponseContractError, match="String body"):
            OperationResponse(200, {}, ContentType.OCTET_STREAM, StringBody("x"))

    def test_body_needs_content_type(self) -> None:
        with pytest.raises(ResponseContractError):
            OperationResponse(200, {}, None, BinaryBody(b""))

    def test_unknown_body_kind(self) -> None:
        with pytest.raises(ResponseContractError, match="Unsupported"):
            OperationResponse(200, {}, ContentType.JSON, {"raw": "dict"})  # type: ignore[arg-type]

    def test_json_is_a_string_type(self) -> None:
        response = OperationResponse(200, {}, ContentType.JSON, StringBody('{"a":1}'))
        assert response.body == StringBody('{"a":1}')

    def test_contract_error_is_type_error(self) -> None:
        with pytest.raises(TypeError):
            OperationResponse(200, {}, None, StringBody("x"))


class TestTransformations:
    def test_with_header_appends_values(self) -> None:
        response = OperationResponse.json({}).with_header("X-Foo", "a").with_header("X-Foo", "b")
        assert list(response.headers["X-Foo"]) == ["a", "b"]

    def test_with_header_returns_new(self) -> None:
        original = OperationResponse.json({})
        changed = original.with_header("X-A", "1")
        assert "X-A" not in original.headers
        assert "X-A" in changed.headers

    def test_with_status(self) -> None:
        assert OperationResponse.text("x").with_status(202).status == 202


class TestOperationFailure:
    def test_fields(self) -> None:
        failure = OperationFailure(409, "conflict")
        assert failure.status == 409
        assert failure.message == "conflict"


class TestTransportResponse:
    def test_plain_text(self) -> None:
        response = TransportResponse.plain_text(404, "Not Found.")
        assert response.status == 404
        assert response.body == b"Not Found."
        assert response.header("content-type") == "text/plain; charset=utf-8"

    def test_header_lookup_missing(self) -> None:
        assert TransportResponse(200).header("X-Nope") is None

    def test_with_header(self) -> None:
        response = TransportResponse(200).with_header("X-A", "1")
        assert response.headers == (("X-A", "1"),)
