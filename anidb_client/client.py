"""Asynchronous client for the AniDB HTTP API."""

from __future__ import annotations

import argparse
import asyncio
import logging
import sys
import time
from datetime import timedelta
from pathlib import Path
from types import TracebackType
from urllib.parse import urlencode

import httpx

from .anime import Anime
from .errors import ApiError, DeserializeError, HttpError, RequestError, ResponseError, UrlParseError

API_URL = "http://api.anidb.net:9001/httpapi"
CLIENT_NAME = "anidbapirs"
CLIENT_VER = 1
HTTP_PROTO_VER = 1
DEFAULT_RATE_LIMIT = 2.0

_DEFAULT_STATUS = 200
_EMPTY_MESSAGE = "Empty error message"

logger = logging.getLogger(__name__)


class _RateLimiter:
    """Lets one request through per period; the first one goes immediately."""

    def __init__(self, period: float) -> None:
        self._period = period
        self._lock = asyncio.Lock()
        self._next_allowed: float | None = None

    async def acquire(self) -> None:
        async with self._lock:
            now = time.monotonic()
            if self._next_allowed is not None and now < self._next_allowed:
                await asyncio.sleep(self._next_allowed - now)
                now = self._next_allowed
            self._next_allowed = now + self._period


def _seconds(limit: float | timedelta) -> float:
    seconds = limit.total_seconds() if isinstance(limit, timedelta) else float(limit)
    if seconds < 0:
        raise ValueError("rate limit must not be negative")
    return seconds


class AniDbHttpClient:
    """Client for the AniDB HTTP API with a per-request rate limit.

    ``rate_limit`` is the minimum time between requests, in seconds or as a
    ``timedelta``; 0 disables rate limiting. A supplied ``httpx.AsyncClient``
    is used as is and left open when this client is closed.
    """

    def __init__(
        self,
        rate_limit: float | timedelta = DEFAULT_RATE_LIMIT,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        period = _seconds(rate_limit)
        self._limiter = _RateLimiter(period) if period > 0 else None
        self._owns_client = client is None
        self._client = client if client is not None else httpx.AsyncClient()
        base = (
            f"{API_URL}?client={CLIENT_NAME}"
            f"&clientver={CLIENT_VER}&protover={HTTP_PROTO_VER}"
        )
        try:
            self._base_url = str(httpx.URL(base))
        except httpx.InvalidURL as exc:
            raise UrlParseError(exc) from exc

    @property
    def base_url(self) -> str:
        """The API URL with the client identification parameters."""
        return self._base_url

    def _anime_url(self, anime_id: str) -> httpx.URL:
        query = urlencode([("request", "anime"), ("aid", anime_id)])
        try:
            return httpx.URL(f"{self._base_url}&{query}")
        except httpx.InvalidURL as exc:
            raise UrlParseError(exc) from exc

    async def _fetch(self, url: httpx.URL) -> str:
        if self._limiter is not None:
            await self._limiter.acquire()
        logger.debug("GET %s", url)
        try:
            response = await self._client.get(url)
            body = response.text
        except (httpx.HTTPError, RuntimeError) as exc:
            raise RequestError(exc) from exc
        logger.debug("response %s from %s", response.status_code, url)
        return body

    async def get_anime(self, anime_id: str) -> Anime:
        """Fetch the anime with the given AniDB anime id.

        Raises HttpError when the API answers with an error document, and
        RequestError, UrlParseError or DeserializeError for the other failures.
        """
        body = await self._fetch(self._anime_url(anime_id))
        # The API answers with a success status even on errors; the body tells.
        try:
            error = ResponseError.from_xml(body)
        except DeserializeError:
            return Anime.from_xml(body)
        raise HttpError(
            status=error.status if error.status is not None else _DEFAULT_STATUS,
            message=error.text if error.text is not None else _EMPTY_MESSAGE,
        )

    async def aclose(self) -> None:
        """Close the underlying HTTP client if this client created it."""
        if self._owns_client:
            await self._client.aclose()

    async def __aenter__(self) -> AniDbHttpClient:
        return self

    async def __aexit__(
        self,
        *args: type[BaseException] | BaseException | TracebackType | None,
    ) -> None:
        await self.aclose()


async def _download(anime_id: str, output: Path, rate_limit: float) -> Anime:
    async with AniDbHttpClient(rate_limit=rate_limit) as anidb:
        anime = await anidb.get_anime(anime_id)
    output.write_text(anime.to_json(), encoding="utf-8")
    return anime


def main(argv: list[str] | None = None) -> int:
    """Fetch one anime and write it to a JSON file."""
    parser = argparse.ArgumentParser(description="Fetch an anime from AniDB as JSON.")
    parser.add_argument("anime_id", nargs="?", default="17110", help="AniDB anime id")
    parser.add_argument("-o", "--output", type=Path, default=Path("anime.json"))
    parser.add_argument(
        "--rate-limit",
        type=float,
        default=DEFAULT_RATE_LIMIT,
        help="seconds between requests; 0 disables the limit",
    )
    args = parser.parse_args(argv)
    logging.basicConfig(level=logging.INFO)
    try:
        anime = asyncio.run(_download(args.anime_id, args.output, args.rate_limit))
    except (ApiError, OSError, ValueError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1
    print(f"Anime {anime.anime_id} written to {args.output}")
    return 0


if __name__ == "__main__":
    sys.exit(main())