"""DexPaprika actions — search, token lookup and top pools."""

from typing import List

from investor_agent.actions.registry import ActionDefinition
from investor_agent.actions.schemas import SearchInput, TokenDataInput, TopPoolsInput
from investor_agent.adapters.market.dexpaprika_client import DexPaprikaClient


def dexpaprika_actions(client: DexPaprikaClient) -> List[ActionDefinition]:
    """Build the DexPaprika action definitions bound to ``client``."""

    async def search(args: SearchInput):
        return await client.search(args.query)

    async def get_token_data(args: TokenDataInput):
        return await client.get_token_data(args.network, args.tokenAddress)

    async def get_top_pools(args: TopPoolsInput):
        return await client.get_top_pools(args.limit)

    return [
        ActionDefinition(
            name="search",
            description=(
                "Allows users to search across multiple entities (tokens, pools, and "
                "DEXes) in a single query. Useful for quickly finding resources by "
                "name, symbol, or ID."
            ),
            input_model=SearchInput,
            handler=search,
        ),
        ActionDefinition(
            name="get_token_data",
            description=(
                "Get detailed information about a token on a network, including its "
                "current average USD price across DEXes (summary.price_usd). Use "
                "network 'solana' for Solana tokens."
            ),
            input_model=TokenDataInput,
            handler=get_token_data,
        ),
        ActionDefinition(
            name="get_top_pools",
            description="Get the top liquidity pools across all networks, ordered by volume.",
            input_model=TopPoolsInput,
            handler=get_top_pools,
        ),
    ]
