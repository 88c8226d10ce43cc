"""DexPaprika client — DEX market data over the public REST API."""

from typing import Any

from investor_agent.adapters.market.http_client import path_segment
from investor_agent.domain.errors import RemoteError
from investor_agent.ports.outbound import HttpJsonPort


class DexPaprikaClient:
    """Thin wrapper over the DexPaprika endpoints used by actions and loops.

    Responses are returned as parsed JSON, unmodified, except for
    ``get_token_price`` which extracts the USD price from a token summary.
    """

    def __init__(self, http: HttpJsonPort):
        self.http = http

    async def search(self, query: str) -> Any:
        return await self.http.get_json("/search/", {"query": query})

    async def get_token_data(self, network: str, token_address: str) -> Any:
        path = f"/networks/{path_segment(network)}/tokens/{path_segment(token_address)}"
        return await self.http.get_json(path)

    async def get_top_pools(self, limit: int) -> Any:
        return await self.http.get_json("/pools/", {"limit": limit})

    async def get_token_price(self, network: str, token_address: str) -> float:
        """Current average USD price across DEXes. Implements MarketPricePort."""
        data = await self.get_token_data(network, token_address)
        try:
            return float(data["summary"]["price_usd"])
        except (KeyError, TypeError, ValueError) as e:
            raise RemoteError(
                f"Token response for {network}/{token_address} has no usable "
                f"summary.price_usd: {e!r}"
            ) from e
