# ABOUTME: HTTP client construction for the On This Day API.
# ABOUTME: Builds an httpx.AsyncClient with the identifying User-Agent and a fixed timeout.

import httpx

from time_cli.config import REQUEST_TIMEOUT_SECONDS, USER_AGENT
from time_cli.errors import HttpClientInitFailure


def create_http_client(transport: httpx.AsyncBaseTransport | None = None) -> httpx.AsyncClient:
    """Create the httpx client used for history lookups.

    No retry transport: a failed request is reported straight to the caller.
    """
    try:
        return httpx.AsyncClient(
            headers={"User-Agent": USER_AGENT, "Accept": "application/json"},
            timeout=REQUEST_TIMEOUT_SECONDS,
            transport=transport,
        )
    except (ValueError, TypeError, OSError, httpx.InvalidURL) as e:
        raise HttpClientInitFailure(f"Failed to build HTTP client: {e}") from e
