"""Authenticated HTTP transport."""

from __future__ import annotations

import logging
from collections.abc import Iterator, Mapping
from contextlib import contextmanager
from typing import Any

from requests import Session
from requests.exceptions import RequestException
from urllib3.exceptions import HTTPError as Urllib3HTTPError

from .config import ClientConfig
from .errors import RequestFailed
from .logging_utils import get_logger
from .models import HttpSession, StreamResponse

STREAM_READ_SIZE = 8192


def make_session(user_agent: str) -> Session:
    """Create a requests session; no retry adapter is mounted."""
    session = Session()
    session.headers.update({"User-Agent": user_agent})
    return session


def error_message(response: StreamResponse, operation: str) -> str:
    """Best-effort message for a failed response: body ``error``, reason phrase, status."""
    try:
        body = response.json()
    except ValueError:
        body = {"error": response.reason}
    message = body.get("error") if isinstance(body, dict) else None
    if isinstance(message, str) and message:
        return message
    return f"{operation} request failed: {response.status_code}"


def raise_for_status(response: StreamResponse, operation: str) -> None:
    if 200 <= response.status_code < 300:
        return
    raise RequestFailed(
        error_message(response, operation),
        operation=operation,
        status_code=response.status_code,
    )


class Transport:
    """Sends JSON bodies with client credentials and maps failures to RequestFailed."""

    def __init__(
        self,
        *,
        session: HttpSession,
        config: ClientConfig,
        logger: logging.Logger | None = None,
    ) -> None:
        self._session = session
        self._config = config
        self._logger = logger or get_logger()

    def _post(
        self, path: str, body: Mapping[str, Any], *, operation: str, stream: bool, timeout: Any
    ) -> StreamResponse:
        url = self._config.endpoint(path)
        self._logger.debug("%s request: POST %s", operation, url)
        try:
            response = self._session.post(
                url,
                json=dict(body),
                headers=self._config.auth_headers(),
                stream=stream,
                timeout=timeout,
            )
        except RequestException as exc:
            raise RequestFailed(
                f"{operation} request failed: {exc}", operation=operation
            ) from exc
        if not 200 <= response.status_code < 300:
            self._logger.warning("%s request returned HTTP %s", operation, response.status_code)
        return response

    def post_json(self, path: str, body: Mapping[str, Any], *, operation: str) -> Any:
        """POST ``body`` and return the decoded JSON response."""
        response = self._post(
            path, body, operation=operation, stream=False, timeout=self._config.request_timeout
        )
        try:
            raise_for_status(response, operation)
            try:
                return response.json()
            except ValueError as exc:
                raise RequestFailed(
                    f"{operation} request failed: invalid JSON response",
                    operation=operation,
                    status_code=response.status_code,
                ) from exc
        finally:
            response.close()

    @contextmanager
    def open_stream(
        self, path: str, body: Mapping[str, Any], *, operation: str
    ) -> Iterator[StreamResponse]:
        """POST ``body`` and yield the streaming response; it is closed on every exit path.

        Only the connect phase has a deadline, a crawl stream may stay open
        for as long as the server keeps sending.
        """
        response = self._post(
            path,
            body,
            operation=operation,
            stream=True,
            timeout=(self._config.connect_timeout, None),
        )
        try:
            raise_for_status(response, operation)
            yield response
        finally:
            response.close()


def iter_stream_chunks(
    response: StreamResponse, *, operation: str, chunk_size: int = STREAM_READ_SIZE
) -> Iterator[bytes]:
    """Yield body bytes as soon as the socket has them.

    ``read1`` returns after a single read instead of filling ``chunk_size``,
    so streams delimited by connection close are not held back until EOF.
    """
    raw = response.raw
    while True:
        try:
            chunk = raw.read1(chunk_size, decode_content=True)
        except (Urllib3HTTPError, OSError) as exc:
            raise RequestFailed(
                f"{operation} request failed: {exc}",
                operation=operation,
                status_code=response.status_code,
            ) from exc
        if not chunk:
            return
        yield chunk
