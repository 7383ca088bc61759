# easyrest/transport/http.py
import base64
import logging
from typing import Iterable, List, Optional, Tuple

import anyio
import httpx

from easyrest.config.default import BASIC_AUTH_TOKEN, MAX_REDIRECTS, URL_PREFIX
from easyrest.config.settings import AuthConfig, ClientSettings
from easyrest.errors import TransportError

logger = logging.getLogger("easyrest.transport")


def normalize_url(url: str) -> str:
    """
    Prepend ``http://`` unless the raw string already starts with it.

    The check is a literal, case-sensitive prefix match, so an ``https://``
    URL ends up as ``http://https://...``.
    """
    if url[:len(URL_PREFIX)] != URL_PREFIX:
        if url.startswith("https://"):
            logger.warning(f"https is not supported, sending to {URL_PREFIX + url}")
        url = URL_PREFIX + url
    return url


def parse_headers(headers: Iterable[str]) -> List[Tuple[str, str]]:
    """Split ``Name:Value`` entries on the first colon; entries without one are dropped."""
    parsed = []
    for header in headers:
        name, sep, value = header.partition(":")
        if not sep:
            logger.debug(f"Dropping malformed header: {header!r}")
            continue
        parsed.append((name.strip(), value.strip()))
    return parsed


def auth_headers(auth: AuthConfig) -> List[Tuple[str, str]]:
    headers = []
    if auth.basic is not None:
        token = base64.b64encode(auth.basic.encode("utf-8")).decode("ascii")
        headers.append(("Authorization", BASIC_AUTH_TOKEN + token))
    if auth.cookie is not None:
        headers.append(("Cookie", auth.cookie))
    return headers


class HTTPTransport:
    """Sends one serialized request as an HTTP POST and returns the raw response."""

    def __init__(
        self,
        settings: ClientSettings | dict | None = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.settings = ClientSettings.coerce(settings)
        # lets tests swap in httpx.MockTransport
        self._transport = transport

    def build_headers(self) -> httpx.Headers:
        # raw UTF-8 on the wire; httpx would otherwise insist on ASCII
        return httpx.Headers([
            (name.encode("utf-8"), value.encode("utf-8"))
            for name, value in auth_headers(self.settings.auth) + parse_headers(self.settings.headers)
        ])

    async def send(self, url: str, body: bytes) -> Tuple[int, bytes]:
        url = normalize_url(url)
        headers = self.build_headers()
        try:
            # one deadline for connect, redirects, upload and the whole body
            with anyio.fail_after(self.settings.timeout):
                async with httpx.AsyncClient(
                    timeout=self.settings.timeout,
                    follow_redirects=True,
                    max_redirects=MAX_REDIRECTS,
                    transport=self._transport,
                ) as client:
                    logger.debug(f"POST {url} ({len(body)} bytes)")
                    resp = await client.post(url, content=body, headers=headers)
                    status_code, content = resp.status_code, resp.content
        except TimeoutError as e:
            logger.error(f"Timed out after {self.settings.timeout}s: {url}")
            raise TransportError(TimeoutError(f"request timed out after {self.settings.timeout}s")) from e
        except httpx.TimeoutException as e:
            logger.error(f"Timed out after {self.settings.timeout}s: {url}")
            raise TransportError(e) from e
        except (httpx.RequestError, httpx.InvalidURL) as e:
            logger.error(f"Network error during request to {url}: {e}")
            raise TransportError(e) from e

        logger.debug(f"Received status {status_code} ({len(content)} bytes)")
        return status_code, content
