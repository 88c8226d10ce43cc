"""Read-only JSON HTTP client using aiohttp. Implements HttpJsonPort."""

import asyncio
import json
from typing import Any, Dict, Mapping, Optional
from urllib.parse import quote

import aiohttp

from investor_agent.domain.errors import RemoteError

_MAX_ERROR_BODY = 300


def path_segment(value: str) -> str:
    """Percent-escape a value for use as a single URL path segment."""
    return quote(str(value), safe="")


class JsonHttpClient:
    """GET-only client for a JSON API rooted at ``base_url``.

    One attempt per call. Transport failures, non-2xx statuses and
    undecodable bodies all raise RemoteError.
    """

    def __init__(
        self,
        base_url: str,
        headers: Optional[Dict[str, str]] = None,
        timeout: float = 30.0,
    ):
        self.base_url = base_url.rstrip("/")
        self.headers = dict(headers or {})
        self.timeout = timeout

    def url_for(self, path: str) -> str:
        if not path.startswith("/"):
            path = "/" + path
        return f"{self.base_url}{path}"

    async def get_json(
        self, path: str, params: Optional[Mapping[str, Any]] = None
    ) -> Any:
        url = self.url_for(path)
        query = {k: str(v) for k, v in (params or {}).items()}
        timeout = aiohttp.ClientTimeout(total=self.timeout)

        try:
            async with aiohttp.ClientSession(timeout=timeout) as session:
                async with session.get(url, params=query, headers=self.headers) as resp:
                    if not 200 <= resp.status < 300:
                        body = await resp.text(errors="replace")
                        raise RemoteError(
                            f"HTTP {resp.status} from {url}: {body[:_MAX_ERROR_BODY]}",
                            status=resp.status,
                            url=url,
                        )
                    try:
                        return await resp.json(content_type=None)
                    except (json.JSONDecodeError, ValueError) as e:
                        raise RemoteError(
                            f"Invalid JSON from {url}: {e}", status=resp.status, url=url
                        ) from e
        except RemoteError:
            raise
        except asyncio.TimeoutError as e:
            raise RemoteError(f"Timeout ({self.timeout:g}s) calling {url}", url=url) from e
        except aiohttp.ClientError as e:
            raise RemoteError(f"Request to {url} failed: {e}", url=url) from e
