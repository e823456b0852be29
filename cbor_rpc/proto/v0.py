"""Version 0 of the wire protocol.

Every v0 frame is a CBOR tag `RPCV0` around one of two maps:

    request:  {"fn": method, "args": params?, "id": req_id?}
    response: {"ok": value, "id": req_id}  or  {"err": error, "id": req_id}

There is no discriminant field. A decoded map is told apart by its key set;
the two sets share only "id" and unknown keys are rejected, so no valid
encoding of one kind can be read as the other. Keep it that way when adding
fields.
"""
import io
from typing import Any, BinaryIO, Dict, Optional, Union

from cbor2 import CBORTag
from pydantic import BaseModel, ConfigDict

from ..codec import decode_value, encode_value
from ..config import TransportConfig
from ..utils.errors import DecodeError, InvalidMessage, UnexpectedMessage
from .convert import (
    error_value_from_value,
    error_value_to_value,
    method_id_from_value,
    method_id_to_value,
    params_from_value,
    params_to_value,
    request_id_from_value,
    request_id_to_value,
    thaw_value,
)
from .models import Request, Response, Success

# An arbitrary magic number identifying v0 messages
RPCV0 = 4036988077

REQUEST_KEYS = frozenset(("fn", "args", "id"))
RESPONSE_KEYS = frozenset(("ok", "err", "id"))
RESULT_KEYS = frozenset(("ok", "err"))


class RPCMessage(BaseModel):
    """Top-level v0 message: exactly one Request or Response."""

    model_config = ConfigDict(frozen=True)

    message: Union[Request, Response]

    @property
    def is_request(self) -> bool:
        return isinstance(self.message, Request)

    def into_request(self) -> Request:
        if not isinstance(self.message, Request):
            raise UnexpectedMessage()
        return self.message

    def into_response(self) -> Response:
        if not isinstance(self.message, Response):
            raise UnexpectedMessage()
        return self.message

    def to_value(self) -> CBORTag:
        if isinstance(self.message, Request):
            body = request_to_value(self.message)
        else:
            body = response_to_value(self.message)
        return CBORTag(RPCV0, body)

    @classmethod
    def from_value(cls, value: Any) -> "RPCMessage":
        """Unwrap the v0 tag and match the body against both message shapes.

        Raises DecodeError when the tag is missing or wrong, InvalidMessage
        when the body fits neither shape, and the specific ProtocolError when
        a field of the matched shape is invalid.
        """
        if not isinstance(value, CBORTag):
            raise DecodeError(
                f"expected tag {RPCV0}, found untagged {type(value).__name__}"
            )
        if value.tag != RPCV0:
            raise DecodeError(f"expected tag {RPCV0}, found tag {value.tag}")

        try:
            body = thaw_value(value.value)
        except RecursionError as e:
            raise DecodeError("recursion limit exceeded") from e
        if not isinstance(body, dict) or not all(isinstance(k, str) for k in body):
            raise InvalidMessage()

        keys = set(body)
        if "fn" in keys and keys <= REQUEST_KEYS:
            return cls(message=request_from_value(body))
        if "id" in keys and keys <= RESPONSE_KEYS and len(keys & RESULT_KEYS) == 1:
            return cls(message=response_from_value(body))
        raise InvalidMessage()


def request_to_value(request: Request) -> Dict[str, Any]:
    value: Dict[str, Any] = {"fn": method_id_to_value(request.method)}
    if request.params is not None:
        value["args"] = params_to_value(request.params)
    if request.req_id is not None:
        value["id"] = request_id_to_value(request.req_id)
    return value


def response_to_value(response: Response) -> Dict[str, Any]:
    if isinstance(response.result, Success):
        value: Dict[str, Any] = {"ok": response.result.value}
    else:
        value = {"err": error_value_to_value(response.result.error)}
    value["id"] = request_id_to_value(response.req_id)
    return value


def request_from_value(value: Dict[str, Any]) -> Request:
    method = method_id_from_value(value["fn"])

    # An explicit null is read the same as a missing key
    args = value.get("args")
    params = params_from_value(args) if args is not None else None
    req_id = value.get("id")
    if req_id is not None:
        req_id = request_id_from_value(req_id)

    return Request(method=method, params=params, req_id=req_id)


def response_from_value(value: Dict[str, Any]) -> Response:
    req_id = request_id_from_value(value["id"])
    if "ok" in value:
        return Response.ok(value["ok"], req_id)
    return Response.err(error_value_from_value(value["err"]), req_id)


def _as_message(message: Union[RPCMessage, Request, Response]) -> RPCMessage:
    if isinstance(message, RPCMessage):
        return message
    return RPCMessage(message=message)


def encode(
    message: Union[RPCMessage, Request, Response],
    config: Optional[TransportConfig] = None,
) -> bytes:
    """Encode a Request or Response as one complete v0 frame."""
    return encode_value(_as_message(message).to_value(), config)


def decode(data: bytes, config: Optional[TransportConfig] = None) -> RPCMessage:
    """Decode a buffer holding exactly one v0 frame."""
    fp = io.BytesIO(data)
    value = decode_value(fp, config)
    if fp.tell() != len(data):
        raise DecodeError("trailing data after frame", fp.tell())
    return RPCMessage.from_value(value)


def dump(
    message: Union[RPCMessage, Request, Response],
    fp: BinaryIO,
    config: Optional[TransportConfig] = None,
) -> None:
    fp.write(encode(message, config))


def load(fp: BinaryIO, config: Optional[TransportConfig] = None) -> RPCMessage:
    """Read one v0 frame from the head of a binary stream."""
    return RPCMessage.from_value(decode_value(fp, config))
