# easyrest/schemas.py
from dataclasses import dataclass
from typing import Any, Optional
from pydantic import BaseModel, Field, JsonValue

from easyrest.config.default import REQUEST_ID

JSONValue = JsonValue


class RPCRequest(BaseModel):
    id: int = Field(default=REQUEST_ID)
    method: str = Field(..., min_length=1)
    params: JSONValue = None


class RPCResponse(BaseModel):
    """Envelope of a decoded response. Extra members (id, jsonrpc, ...) are ignored."""

    result: Optional[Any] = None
    error: Optional[Any] = None
    has_result: bool = False

    @classmethod
    def from_document(cls, document: dict) -> "RPCResponse":
        return cls(
            result=document.get("result"),
            error=document.get("error"),
            has_result="result" in document,
        )

    @property
    def is_error(self) -> bool:
        return self.error is not None


@dataclass(frozen=True)
class RPCResult:
    """
    Successful outcome of a call.

    `present` tells a missing "result" member apart from an explicit
    `"result": null`; both render as ``null``.
    """

    value: Any = None
    present: bool = True

    @classmethod
    def absent(cls) -> "RPCResult":
        return cls(value=None, present=False)
