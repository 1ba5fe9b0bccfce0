"""HTTP client for the Mazebot API."""

from __future__ import annotations

from typing import Any, Iterable, TypeVar

import requests
from pydantic import BaseModel, ValidationError

from mazesolver.api.contracts import Certificate, MazeSpec, RaceStart, SolutionResult
from mazesolver.solver.directions import Direction, format_directions

DEFAULT_BASE_URL = "http://api.noopschallenge.com"
RANDOM_MAZE_PATH = "/mazebot/random"
RACE_START_PATH = "/mazebot/race/start"
# A rejected solution comes back as 400 with a normal result body.
REJECTED_SOLUTION_STATUS = 400

_ModelT = TypeVar("_ModelT", bound=BaseModel)


class MazebotApiError(RuntimeError):
    """The API could not be reached or answered with something unusable."""


class MazebotClient:
    def __init__(
        self,
        base_url: str = DEFAULT_BASE_URL,
        *,
        session: requests.Session | None = None,
        timeout: float = 10.0,
    ) -> None:
        self._base_url = base_url.rstrip("/")
        self._session = session or requests.Session()
        self._timeout = timeout

    def url_for(self, path: str) -> str:
        if path.startswith(("http://", "https://")):
            return path
        return f"{self._base_url}/{path.lstrip('/')}"

    def certificate_url(self, path: str) -> str:
        return self.url_for(path)

    def random_maze(
        self, *, min_size: int | None = None, max_size: int | None = None
    ) -> MazeSpec:
        params = {"minSize": min_size, "maxSize": max_size}
        params = {key: value for key, value in params.items() if value is not None}
        data = self._request("GET", RANDOM_MAZE_PATH, params=params)
        return self._parse(MazeSpec, data)

    def fetch_maze(self, path: str) -> MazeSpec:
        return self._parse(MazeSpec, self._request("GET", path))

    def submit_solution(
        self, path: str, directions: str | Iterable[Direction]
    ) -> SolutionResult:
        if not isinstance(directions, str):
            directions = format_directions(directions)
        data = self._request(
            "POST",
            path,
            body={"directions": directions},
            allowed=(REJECTED_SOLUTION_STATUS,),
        )
        return self._parse(SolutionResult, data)

    def start_race(self, login: str) -> RaceStart:
        data = self._request("POST", RACE_START_PATH, body={"login": login})
        return self._parse(RaceStart, data)

    def fetch_certificate(self, path: str) -> Certificate:
        return self._parse(Certificate, self._request("GET", path))

    def close(self) -> None:
        self._session.close()

    def _request(
        self,
        method: str,
        path: str,
        *,
        params: dict[str, Any] | None = None,
        body: dict[str, Any] | None = None,
        allowed: tuple[int, ...] = (),
    ) -> Any:
        url = self.url_for(path)
        try:
            response = self._session.request(
                method, url, params=params, json=body, timeout=self._timeout
            )
        except requests.RequestException as exc:
            raise MazebotApiError(f"{method} {url} failed: {exc}") from exc

        status = response.status_code
        if not (200 <= status <= 299 or status in allowed):
            raise MazebotApiError(f"API response failure: {status} from {url}")
        try:
            return response.json()
        except ValueError as exc:
            raise MazebotApiError(f"Failed to parse JSON from {url}: {exc}") from exc

    @staticmethod
    def _parse(model: type[_ModelT], data: Any) -> _ModelT:
        try:
            return model.model_validate(data)
        except ValidationError as exc:
            name = model.__name__
            raise MazebotApiError(f"Unexpected {name} payload: {exc}") from exc
