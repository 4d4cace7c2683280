# ABOUTME: Service layer for the Wikipedia On This Day feed.
# ABOUTME: Builds request URLs, fetches and decodes responses, and fronts them with a TTL cache.

import logging

import httpx
from pydantic import ValidationError

from time_cli.cache import ResponseCache
from time_cli.config import api_base_url
from time_cli.errors import DecodeError, HistoryError, NetworkError, UpstreamStatusError
from time_cli.models import Category, OnThisDayResponse

logger = logging.getLogger(__name__)

FEED_PATH = "/api/rest_v1/feed/onthisday/{category}/{month}/{day}"


def build_url(language: str, category: Category, month: int, day: int, base_url: str | None = None) -> str:
    """Build the feed URL; month and day are not zero-padded."""
    base = base_url.rstrip("/") if base_url else api_base_url(language)
    return base + FEED_PATH.format(category=category.value, month=month, day=day)


async def fetch_on_this_day(
    client: httpx.AsyncClient,
    language: str,
    category: Category,
    month: int,
    day: int,
) -> OnThisDayResponse:
    """Fetch one On This Day section from Wikipedia.

    Raises:
        NetworkError: the request never got a response (bad URL, DNS, connect, timeout).
        UpstreamStatusError: Wikipedia answered with a non-2xx status.
        DecodeError: the body was not JSON, or not the expected shape.
    """
    url = build_url(language, category, month, day)
    logger.debug("GET %s", url)

    try:
        resp = await client.get(url)
    except httpx.InvalidURL as e:
        raise NetworkError(f"Cannot build a request for {url}: {e}", url) from e
    except httpx.RequestError as e:
        raise NetworkError(f"Network error contacting Wikipedia: {e}", url) from e

    try:
        resp.raise_for_status()
    except httpx.HTTPStatusError as e:
        raise UpstreamStatusError(resp.status_code, url) from e

    try:
        return OnThisDayResponse.model_validate(resp.json())
    except (ValueError, ValidationError) as e:
        raise DecodeError(f"Invalid JSON returned by Wikipedia: {e}", url) from e


class HistoryFetcher:
    """Cache-first fetcher for On This Day lookups.

    A live cache entry is served without touching the network, and that includes
    a cached failure: an error is remembered for the full TTL just like a
    response. At most one concurrent fetch per (language, category, month, day):
    lookups for the same key wait on a per-key lock and then read the cache.
    """

    def __init__(self, client: httpx.AsyncClient, cache: ResponseCache | None = None):
        self.client = client
        self.cache = cache if cache is not None else ResponseCache()

    async def fetch(self, language: str, category: Category, month: int, day: int) -> OnThisDayResponse:
        key = (language, category, month, day)
        async with self.cache.lock_for(key):
            entry = self.cache.get(key)
            if entry is not None:
                logger.debug("Cache hit for %s", key)
                return entry.unwrap()

            logger.debug("Cache miss for %s", key)
            try:
                response = await fetch_on_this_day(self.client, language, category, month, day)
            except HistoryError as e:
                logger.debug("History fetch failed for %s: %s", key, e)
                self.cache.put_error(key, e)
                raise
            self.cache.put_response(key, response)
            return response
