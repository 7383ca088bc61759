# easyrest/client/classifier.py
import logging

from easyrest.errors import EncodingError, HTTPStatusError, ParseError, RPCError
from easyrest.schemas import RPCResponse, RPCResult
from easyrest.utils.serialization import dumps, loads

logger = logging.getLogger("easyrest.client")


def classify_response(status_code: int, body: bytes) -> RPCResult:
    """
    Turn a raw HTTP response into exactly one outcome.

    Returns an RPCResult on success; raises HTTPStatusError for any status
    other than 200, ParseError when the body is not a JSON object, and
    RPCError when the envelope carries a non-null "error".
    """
    if status_code != 200:
        raise HTTPStatusError(status_code, body)

    try:
        document = loads(body)
    except ValueError as e:
        # JSONDecodeError, UnicodeDecodeError, NaN literals, int digit limit
        raise ParseError(e) from e

    if not isinstance(document, dict):
        raise ParseError(f"response is not a JSON-RPC object: {type(document).__name__}")

    resp = RPCResponse.from_document(document)
    if resp.is_error:
        try:
            dumps(resp.error)
        except ValueError as e:
            raise EncodingError(e) from e
        # "result" is ignored when both are present
        raise RPCError(resp.error)

    if not resp.has_result:
        logger.debug("Response carries no result member")
        return RPCResult.absent()
    return RPCResult(value=resp.result)
