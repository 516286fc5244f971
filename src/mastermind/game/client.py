"""HTTP client for the Mastermind game server.

``SessionClient`` wraps the server's three operations over an injected
``httpx.AsyncClient``. It holds no game state: the game id is passed in on
every call. Failures surface as the typed errors in
:mod:`mastermind.game.errors`.

Exports:
- SessionClient — create_session / submit_guess / delete_session
- connect(settings) — AsyncContextManager[SessionClient] with defaults

Examples:
    Play one guess against the configured server::

        >>> async with connect(settings) as client:
        ...     game_id = await client.create_session()
        ...     score = await client.submit_guess(game_id, "1234")
        ...     await client.delete_session(game_id)
        >>> score
        ScoreResult(black=1, white=2)
"""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from typing import Any, NoReturn
from urllib.parse import quote

import httpx
import pydantic
from pydantic import BaseModel

from mastermind.game.config import Settings
from mastermind.game.errors import (
    InvalidRequest,
    InvalidResponse,
    NetworkError,
    ServerError,
)
from mastermind.game.models import (
    CreateGameResponse,
    ErrorResponse,
    GuessRequest,
    ScoreResult,
)
from mastermind.lib.retry import with_retry
from mastermind.version import CLIENT_VERSION

logger = logging.getLogger(__name__)

DELETE_FAILED_MESSAGE = "Failed to delete game"


def _decode[M: BaseModel](response: httpx.Response, model: type[M]) -> M:
    try:
        return model.model_validate_json(response.content)
    except pydantic.ValidationError as e:
        logger.warning(
            "Undecodable %s body from %s %s (status %d)",
            model.__name__,
            response.request.method,
            response.request.url,
            response.status_code,
        )
        raise InvalidResponse(f"expected {model.__name__}") from e


def _raise_server_error(response: httpx.Response) -> NoReturn:
    body = _decode(response, ErrorResponse)
    logger.warning(
        "Server rejected %s %s with %d: %s",
        response.request.method,
        response.request.url,
        response.status_code,
        body.error,
    )
    raise ServerError(body.error, status_code=response.status_code)


class SessionClient:
    """Stateless adapter for the game server's session endpoints.

    Args:
        http: HTTP client with the server's base URL configured.
        cleanup_attempts: Attempts for delete_session on transport failure.
            1 keeps every operation single-shot.
        cleanup_retry_wait: Initial backoff between delete attempts.
    """

    def __init__(
        self,
        http: httpx.AsyncClient,
        *,
        cleanup_attempts: int = 1,
        cleanup_retry_wait: float = 1.0,
    ) -> None:
        self._http = http
        self._cleanup_attempts = cleanup_attempts
        self._cleanup_retry_wait = cleanup_retry_wait

    def _build(self, method: str, path: str, **kwargs: Any) -> httpx.Request:
        try:
            return self._http.build_request(method, path, **kwargs)
        except (httpx.InvalidURL, ValueError) as e:
            raise InvalidRequest(path) from e

    async def _send(self, request: httpx.Request) -> httpx.Response:
        logger.debug("%s %s", request.method, request.url)
        try:
            response = await self._http.send(request)
        except httpx.TransportError as e:
            logger.warning("%s %s failed: %s", request.method, request.url, e)
            raise NetworkError() from e
        logger.debug(
            "%s %s -> %d", request.method, request.url, response.status_code
        )
        return response

    async def create_session(self) -> str:
        """Start a new game and return its id.

        Raises:
            ServerError: Non-200 status with an error body.
            InvalidResponse: Body did not decode.
            NetworkError: No response was received.
        """
        response = await self._send(self._build("POST", "/game"))
        if response.status_code != httpx.codes.OK:
            _raise_server_error(response)
        return _decode(response, CreateGameResponse).game_id

    async def submit_guess(self, game_id: str, guess: str) -> ScoreResult:
        """Submit a validated guess and return the server's score.

        Raises:
            ServerError: Non-200 status with an error body.
            InvalidResponse: Body did not decode.
            NetworkError: No response was received.
        """
        payload = GuessRequest(game_id=game_id, guess=guess)
        request = self._build("POST", "/guess", json=payload.model_dump())
        response = await self._send(request)
        if response.status_code != httpx.codes.OK:
            _raise_server_error(response)
        return _decode(response, ScoreResult)

    async def delete_session(self, game_id: str) -> None:
        """Delete a game. Succeeds only on 204 No Content.

        Any other status, and any transport failure, is a ServerError.
        """
        if not game_id:
            raise InvalidRequest("empty game id")
        request = self._build("DELETE", f"/game/{quote(game_id, safe='')}")

        @with_retry(
            max_attempts=self._cleanup_attempts,
            min_wait=self._cleanup_retry_wait,
            max_wait=self._cleanup_retry_wait * 8,
        )
        async def send() -> httpx.Response:
            logger.debug("%s %s", request.method, request.url)
            return await self._http.send(request)

        try:
            response = await send()
        except httpx.TransportError as e:
            logger.warning("DELETE %s failed: %s", request.url, e)
            raise ServerError(DELETE_FAILED_MESSAGE) from e

        if response.status_code == httpx.codes.NO_CONTENT:
            logger.debug("Deleted game %s", game_id)
            return

        try:
            message = ErrorResponse.model_validate_json(response.content).error
        except pydantic.ValidationError:
            message = DELETE_FAILED_MESSAGE
        logger.warning(
            "DELETE %s -> %d: %s", request.url, response.status_code, message
        )
        raise ServerError(message, status_code=response.status_code)


@asynccontextmanager
async def connect(
    config: Settings,
    *,
    transport: httpx.AsyncBaseTransport | None = None,
) -> AsyncIterator[SessionClient]:
    """Open an HTTP connection pool for the configured server.

    Args:
        config: Settings providing the base URL, timeout and cleanup policy.
        transport: Optional transport override (e.g. httpx.MockTransport).

    Raises:
        InvalidRequest: If the base URL is not an absolute http(s) URL.
    """
    try:
        base_url = httpx.URL(config.base_url)
    except httpx.InvalidURL as e:
        raise InvalidRequest(config.base_url) from e
    if base_url.scheme not in ("http", "https") or not base_url.host:
        raise InvalidRequest(config.base_url)

    client_kwargs: dict[str, Any] = {}
    if transport is not None:
        client_kwargs["transport"] = transport
    if config.http_timeout_seconds is not None:
        client_kwargs["timeout"] = config.http_timeout_seconds

    async with httpx.AsyncClient(
        base_url=base_url,
        headers={
            "Content-Type": "application/json",
            "User-Agent": f"mastermind-client/{CLIENT_VERSION}",
        },
        **client_kwargs,
    ) as http:
        yield SessionClient(
            http,
            cleanup_attempts=config.cleanup_attempts,
            cleanup_retry_wait=config.cleanup_retry_wait_seconds,
        )
