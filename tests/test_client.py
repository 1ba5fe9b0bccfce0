from typing import Any

import pytest
import requests

from mazesolver.api.client import MazebotApiError, MazebotClient
from mazesolver.solver.directions import Direction


class FakeResponse:
    def __init__(self, status_code: int, data: Any = None, *, text: str = "") -> None:
        self.status_code = status_code
        self._data = data
        self._text = text

    def json(self) -> Any:
        if self._data is None:
            raise ValueError(f"not json: {self._text!r}")
        return self._data


class FakeSession:
    def __init__(self, *responses: FakeResponse) -> None:
        self.responses = list(responses)
        self.calls: list[dict[str, Any]] = []
        self.closed = False

    def request(self, method: str, url: str, **kwargs: Any) -> FakeResponse:
        self.calls.append({"method": method, "url": url, **kwargs})
        return self.responses.pop(0)

    def close(self) -> None:
        self.closed = True


class FailingSession(FakeSession):
    def request(self, method: str, url: str, **kwargs: Any) -> FakeResponse:
        raise requests.ConnectionError("connection refused")


MAZE = {
    "name": "Maze #7 (2x2)",
    "mazePath": "/mazebot/mazes/seven",
    "startingPosition": [0, 0],
    "endingPosition": [1, 1],
    "map": [["A", " "], ["X", "B"]],
}


def test_random_maze_sends_size_params() -> None:
    session = FakeSession(FakeResponse(200, MAZE))
    client = MazebotClient("http://example.test/", session=session)

    maze = client.random_maze(min_size=10, max_size=20)

    assert maze.number == 7
    call = session.calls[0]
    assert call["method"] == "GET"
    assert call["url"] == "http://example.test/mazebot/random"
    assert call["params"] == {"minSize": 10, "maxSize": 20}


def test_random_maze_omits_unset_sizes() -> None:
    session = FakeSession(FakeResponse(200, MAZE))
    client = MazebotClient(session=session)

    client.random_maze()

    assert session.calls[0]["params"] == {}
    assert session.calls[0]["url"].startswith("http://api.noopschallenge.com/")


def test_submit_solution_posts_direction_string() -> None:
    session = FakeSession(
        FakeResponse(200, {"result": "success", "message": "ok"}),
    )
    client = MazebotClient(session=session)

    result = client.submit_solution("/mazebot/mazes/seven", [Direction.E, Direction.S])

    assert result.succeeded
    assert session.calls[0]["method"] == "POST"
    assert session.calls[0]["json"] == {"directions": "ES"}


def test_rejected_solution_is_not_an_error() -> None:
    session = FakeSession(
        FakeResponse(400, {"result": "failed", "message": "Hit a wall"}),
    )
    client = MazebotClient(session=session)

    result = client.submit_solution("/mazebot/mazes/seven", "NN")

    assert not result.succeeded
    assert result.message == "Hit a wall"


def test_other_failures_raise_api_error() -> None:
    client = MazebotClient(session=FakeSession(FakeResponse(500, {"message": "boom"})))
    with pytest.raises(MazebotApiError):
        client.fetch_maze("/mazebot/mazes/seven")

    client = MazebotClient(session=FakeSession(FakeResponse(400, {"message": "bad"})))
    with pytest.raises(MazebotApiError):
        client.start_race("someone")


def test_invalid_json_and_payloads_raise_api_error() -> None:
    client = MazebotClient(session=FakeSession(FakeResponse(200, text="<html>")))
    with pytest.raises(MazebotApiError):
        client.fetch_maze("/mazebot/mazes/seven")

    client = MazebotClient(session=FakeSession(FakeResponse(200, {"name": "x"})))
    with pytest.raises(MazebotApiError):
        client.fetch_maze("/mazebot/mazes/seven")


def test_transport_errors_raise_api_error() -> None:
    client = MazebotClient(session=FailingSession())
    with pytest.raises(MazebotApiError):
        client.random_maze()


def test_race_and_certificate_calls() -> None:
    session = FakeSession(
        FakeResponse(200, {"message": "Go", "nextMaze": "/mazebot/race/1"}),
        FakeResponse(200, {"message": "Done", "elapsed": 30, "completed": "today"}),
    )
    client = MazebotClient(session=session)

    start = client.start_race("someone")
    certificate = client.fetch_certificate("/mazebot/race/certificate/xyz")

    assert start.next_maze == "/mazebot/race/1"
    assert session.calls[0]["json"] == {"login": "someone"}
    assert certificate.elapsed == 30
    assert (
        client.certificate_url("/mazebot/race/certificate/xyz")
        == "http://api.noopschallenge.com/mazebot/race/certificate/xyz"
    )
    assert client.url_for("https://other.test/x") == "https://other.test/x"

    client.close()
    assert session.closed
