"""Prediction actions backed by Allora."""

from typing import List

from investor_agent.actions.registry import ActionDefinition
from investor_agent.actions.schemas import PricePredictionInput
from investor_agent.adapters.market.allora_client import AlloraClient


def allora_actions(client: AlloraClient) -> List[ActionDefinition]:
    async def get_price_prediction(args: PricePredictionInput):
        return await client.get_prediction(args.asset, args.timeframe)

    return [
        ActionDefinition(
            name="get_price_prediction",
            description=(
                "Get the Allora Network price prediction for an asset over a "
                "timeframe (e.g. asset 'SOL', timeframe '8h'). The predicted price "
                "is data.inference_data.network_inference_normalized."
            ),
            input_model=PricePredictionInput,
            handler=get_price_prediction,
        ),
    ]
