# easyrest/client/client.py
import logging
from typing import Any, Optional

import httpx

from easyrest.client.builder import build_request
from easyrest.client.classifier import classify_response
from easyrest.config.settings import ClientSettings
from easyrest.errors import EncodingError
from easyrest.schemas import RPCResult
from easyrest.transport.http import HTTPTransport
from easyrest.utils.serialization import dumps

logger = logging.getLogger("easyrest.client")


class RPCInvoker:
    def __init__(
        self,
        settings: ClientSettings | dict | None = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.settings = ClientSettings.coerce(settings)
        self.transport = HTTPTransport(self.settings, transport=transport)

    async def call(self, url: str, method: str, params: Any = None) -> RPCResult:
        """Build, send and classify a single call. No retries."""
        body = build_request(method, params)
        logger.debug(f"Calling method: {method} with params: {params!r}")
        status_code, content = await self.transport.send(url, body)
        return classify_response(status_code, content)


def format_result(result: RPCResult) -> str:
    if result.value is None:
        return "null"
    try:
        return dumps(result.value)
    except ValueError as e:
        # 1e400 decodes to inf, which has no JSON form
        raise EncodingError(e) from e
