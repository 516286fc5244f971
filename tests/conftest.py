"""Shared test fixtures.

``FakeServer`` stands in for the game server behind an
``httpx.MockTransport`` and records every request it receives.
``ScriptedConsole`` feeds pre-written input lines to the session and
captures everything it prints.
"""

import json
from collections.abc import AsyncIterator, Callable

import httpx
import pytest
import pytest_asyncio

from mastermind.game.client import SessionClient

BASE_URL = "http://mastermind.test"


class FakeServer:
    """In-memory game server speaking the HTTP/JSON protocol.

    Scores are taken from ``scores`` in order; once exhausted every further
    guess scores (0, 0). Individual endpoints can be overridden with a
    handler returning an ``httpx.Response`` (or raising a transport error).
    """

    def __init__(
        self,
        game_id: str = "game-123",
        scores: list[tuple[int, int]] | None = None,
    ) -> None:
        self.game_id = game_id
        self.scores = list(scores or [])
        self.requests: list[httpx.Request] = []
        self.overrides: dict[
            tuple[str, str], Callable[[httpx.Request], httpx.Response]
        ] = {}

    def override(
        self,
        method: str,
        path: str,
        handler: Callable[[httpx.Request], httpx.Response],
    ) -> None:
        self.overrides[(method, path)] = handler

    def calls(self, method: str, path_prefix: str) -> list[httpx.Request]:
        return [
            r
            for r in self.requests
            if r.method == method and r.url.path.startswith(path_prefix)
        ]

    @property
    def guesses(self) -> list[str]:
        return [json.loads(r.content)["guess"] for r in self.calls("POST", "/guess")]

    @property
    def deletes(self) -> list[httpx.Request]:
        return self.calls("DELETE", "/game/")

    def handle(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        path = request.url.path
        route = "/game/{id}" if path.startswith("/game/") else path
        handler = self.overrides.get((request.method, route))
        if handler is not None:
            return handler(request)

        match (request.method, route):
            case ("POST", "/game"):
                return httpx.Response(200, json={"game_id": self.game_id})
            case ("POST", "/guess"):
                body = json.loads(request.content)
                if body["game_id"] != self.game_id:
                    return httpx.Response(404, json={"error": "game not found"})
                black, white = self.scores.pop(0) if self.scores else (0, 0)
                return httpx.Response(200, json={"black": black, "white": white})
            case ("DELETE", "/game/{id}"):
                return httpx.Response(204)
        return httpx.Response(404, json={"error": f"no route {path}"})


class ScriptedConsole:
    """GameConsole that replays input lines and records output.

    Returns None (end of input) once the script runs out.
    """

    def __init__(self, lines: list[str] | None = None) -> None:
        self.lines = list(lines or [])
        self.prompts: list[str] = []
        self.output: list[str] = []
        self.warnings: list[str] = []
        self.errors: list[str] = []

    def read_line(self, prompt: str) -> str | None:
        self.prompts.append(prompt)
        if not self.lines:
            return None
        return self.lines.pop(0)

    def show(self, message: str = "") -> None:
        self.output.append(message)

    def warn(self, message: str) -> None:
        self.warnings.append(message)

    def error(self, message: str) -> None:
        self.errors.append(message)

    @property
    def text(self) -> str:
        return "\n".join(self.output + self.warnings + self.errors)


@pytest.fixture
def server() -> FakeServer:
    """Fake game server with default behaviour."""
    return FakeServer()


@pytest.fixture
def transport(server: FakeServer) -> httpx.MockTransport:
    return httpx.MockTransport(server.handle)


@pytest_asyncio.fixture
async def client(transport: httpx.MockTransport) -> AsyncIterator[SessionClient]:
    """SessionClient wired to the fake server."""
    async with httpx.AsyncClient(base_url=BASE_URL, transport=transport) as http:
        yield SessionClient(http, cleanup_retry_wait=0)
