# easyrest/client/builder.py
from typing import Any

from pydantic import ValidationError

from easyrest.errors import EncodingError, InputError
from easyrest.schemas import RPCRequest
from easyrest.utils.serialization import dumps


def build_request(method: str, params: Any = None) -> bytes:
    """Assemble the ``{"id": 1, "method": ..., "params": ...}`` document."""
    try:
        req = RPCRequest(method=method, params=params)
    except ValidationError as e:
        raise InputError(f"invalid request: {e.errors()[0]['msg']}") from e

    try:
        return dumps(req.model_dump()).encode("utf-8")
    except (TypeError, ValueError) as e:
        raise EncodingError(e) from e
