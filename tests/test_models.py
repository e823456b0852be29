"""Unit tests for the RPC message models."""
import pytest
from pydantic import ValidationError

from cbor_rpc.proto.builder import RequestBuilder
from cbor_rpc.proto.models import (
    ErrorCode,
    ErrorValue,
    Failure,
    NamedParams,
    PositionalParams,
    Request,
    Response,
    Success,
)


class TestParams:
    """Test positional and named params."""

    def test_positional_is_empty(self):
        """Test emptiness of positional params."""
        assert PositionalParams().is_empty()
        assert not PositionalParams(values=[None]).is_empty()

    def test_named_is_empty(self):
        """Test emptiness of named params."""
        assert NamedParams().is_empty()
        assert not NamedParams(pairs=[("a", 1)]).is_empty()

    def test_or_none_collapses_empty(self):
        """Test that empty params collapse to None."""
        assert PositionalParams().or_none() is None
        assert NamedParams().or_none() is None

        params = PositionalParams(values=[1])
        assert params.or_none() is params

    def test_named_from_mapping(self):
        """Test that a dict becomes ordered pairs."""
        params = NamedParams(pairs={"b": 2, "a": 1})
        assert params.pairs == [("b", 2), ("a", 1)]
        assert params.as_dict() == {"b": 2, "a": 1}

    def test_named_rejects_non_text_key(self):
        """Test that named params only take text names."""
        with pytest.raises(ValidationError):
            NamedParams(pairs=[(1, "one")])

    def test_named_rejects_duplicate_names(self):
        """Test that a name may appear only once."""
        with pytest.raises(ValidationError) as exc_info:
            NamedParams(pairs=[("a", 1), ("b", 2), ("a", 3)])
        assert "duplicate parameter name: a" in str(exc_info.value)


class TestRequest:
    """Test Request construction."""

    def test_coerces_list_to_positional(self):
        """Test that a list becomes positional params."""
        request = Request(method="hello", params=["one", 2, "three"], req_id=42)
        assert request.params == PositionalParams(values=["one", 2, "three"])

    def test_coerces_dict_to_named(self):
        """Test that a dict becomes named params."""
        request = Request(method="hello", params={"name": "world"})
        assert request.params == NamedParams(pairs=[("name", "world")])

    def test_numeric_method(self):
        """Test numeric method ids at both ends of the range."""
        assert Request(method=0).method == 0
        assert Request(method=2**64 - 1).method == 2**64 - 1

    @pytest.mark.parametrize("method", [-1, 2**64, True, 1.5, b"hello", None])
    def test_invalid_method(self, method):
        """Test that out-of-range or wrongly typed method ids are rejected."""
        with pytest.raises(ValidationError):
            Request(method=method)

    @pytest.mark.parametrize("req_id", [42, "abc", b"\x00\x01"])
    def test_request_id_variants(self, req_id):
        """Test numeric, text and binary request ids."""
        assert Request(method="m", req_id=req_id).req_id == req_id

    def test_invalid_params(self):
        """Test that scalar params are rejected."""
        with pytest.raises(ValidationError):
            Request(method="m", params=5)

    def test_notification(self):
        """Test that a Request without id is a notification."""
        assert Request(method="m").is_notification
        assert not Request(method="m", req_id=1).is_notification

    def test_collapsed(self):
        """Test collapsing empty params on a Request."""
        request = Request(method="m", params=[], req_id=1)
        assert request.collapsed() == Request(method="m", req_id=1)

        full = Request(method="m", params=[1], req_id=1)
        assert full.collapsed() is full

    def test_frozen(self):
        """Test that requests cannot be modified."""
        request = Request(method="m")
        with pytest.raises(ValidationError):
            request.method = "other"

    def test_structural_equality(self):
        """Test that equal fields give equal requests."""
        assert Request(method="m", params=[1], req_id=1) == Request(
            method="m", params=PositionalParams(values=[1]), req_id=1
        )
        assert Request(method="m", req_id=1) != Request(method="m", req_id="1")


class TestResponse:
    """Test Response construction and accessors."""

    def test_ok(self):
        """Test a success response."""
        response = Response.ok("yay", 42)

        assert response.is_ok
        assert response.value == "yay"
        assert response.error is None
        assert response.result == Success(value="yay")

    def test_ok_with_null_value(self):
        """Test that None is a valid success value."""
        response = Response.ok(None, 1)
        assert response.is_ok
        assert response.value is None

    def test_err(self):
        """Test an error response."""
        error = ErrorValue(code=418, message="I'm a teapot")
        response = Response.err(error, 42)

        assert not response.is_ok
        assert response.error == error
        assert response.result == Failure(error=error)
        with pytest.raises(ValueError, match="teapot"):
            response.value

    def test_requires_id(self):
        """Test that a response must carry a request id."""
        with pytest.raises(ValidationError):
            Response(result=Success(value=1))

    def test_result_from_mapping(self):
        """Test that the result arm is chosen by its kind."""
        response = Response(result={"kind": "err", "error": {"code": 1, "message": "x"}}, req_id=1)
        assert response.error == ErrorValue(code=1, message="x")


class TestErrorValue:
    """Test ErrorValue and error codes."""

    def test_error_codes(self):
        """Test that error codes are correctly defined."""
        assert ErrorCode.PARSE_ERROR == -32700
        assert ErrorCode.INVALID_REQUEST == -32600
        assert ErrorCode.METHOD_NOT_FOUND == -32601
        assert ErrorCode.INVALID_PARAMS == -32602
        assert ErrorCode.INTERNAL_ERROR == -32603

    def test_from_code_default_message(self):
        """Test the default message for a standard code."""
        error = ErrorValue.from_code(ErrorCode.METHOD_NOT_FOUND, data="frobnicate")
        assert error.message == "Method not found"
        assert error.data == "frobnicate"

    def test_from_code_custom_message(self):
        """Test that an explicit message wins."""
        error = ErrorValue.from_code(-32001, "Database is locked")
        assert error == ErrorValue(code=-32001, message="Database is locked")

    @pytest.mark.parametrize("code", [-(2**63), 2**63 - 1])
    def test_code_range(self, code):
        """Test codes at the ends of the signed 64-bit range."""
        assert ErrorValue(code=code, message="x").code == code

    @pytest.mark.parametrize("code", [-(2**63) - 1, 2**63, False, "1"])
    def test_invalid_code(self, code):
        """Test that codes outside i64 are rejected."""
        with pytest.raises(ValidationError):
            ErrorValue(code=code, message="x")


class TestRequestBuilder:
    """Test building requests fluently."""

    def test_positional(self):
        """Test building with positional arguments."""
        request = RequestBuilder("hello").args("one", 2).arg("three").id(42).build()
        assert request == Request(method="hello", params=["one", 2, "three"], req_id=42)

    def test_named(self):
        """Test building with named arguments in order."""
        request = RequestBuilder(7).kwarg("b", 2).kwargs(a=1).build()
        assert request.params == NamedParams(pairs=[("b", 2), ("a", 1)])
        assert request.req_id is None

    def test_no_arguments(self):
        """Test that no arguments means no params."""
        assert RequestBuilder("ping").build().params is None

    def test_mixing_rejected(self):
        """Test that positional and named arguments cannot mix."""
        with pytest.raises(ValueError):
            RequestBuilder("m").arg(1).kwarg("a", 1)
        with pytest.raises(ValueError):
            RequestBuilder("m").kwarg("a", 1).arg(1)

    def test_duplicate_name_rejected(self):
        """Test that a named argument cannot be given twice."""
        with pytest.raises(ValueError):
            RequestBuilder("m").kwarg("a", 1).kwargs(a=2)
