"""Market data adapters."""

from investor_agent.adapters.market.allora_client import AlloraClient
from investor_agent.adapters.market.dexpaprika_client import DexPaprikaClient
from investor_agent.adapters.market.http_client import JsonHttpClient, path_segment

__all__ = ["AlloraClient", "DexPaprikaClient", "JsonHttpClient", "path_segment"]
