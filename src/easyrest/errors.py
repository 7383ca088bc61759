# easyrest/errors.py
from typing import Any
from dataclasses import dataclass

from easyrest.utils.serialization import dumps


class EasyRestError(Exception):
    """Base class for every failure of a single RPC invocation."""


@dataclass
class InputError(EasyRestError):
    message: str

    def __str__(self) -> str:
        return self.message


@dataclass
class EncodingError(EasyRestError):
    cause: Exception

    def __str__(self) -> str:
        return str(self.cause)


@dataclass
class TransportError(EasyRestError):
    cause: Exception

    def __str__(self) -> str:
        return str(self.cause) or type(self.cause).__name__


@dataclass
class HTTPStatusError(EasyRestError):
    status_code: int
    body: bytes

    @property
    def body_text(self) -> str:
        return self.body.decode("utf-8", errors="replace")

    def __str__(self) -> str:
        return f"http response with status code {self.status_code} and body {self.body_text}"


@dataclass
class RPCError(EasyRestError):
    error: Any

    @property
    def text(self) -> str:
        # whatever the server placed under "error", re-encoded
        return dumps(self.error)

    def __str__(self) -> str:
        return self.text


@dataclass
class ParseError(EasyRestError):
    cause: Exception | str

    def __str__(self) -> str:
        return str(self.cause)
