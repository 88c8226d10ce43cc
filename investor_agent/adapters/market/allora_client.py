"""Allora client — price predictions from the Allora consumer API."""

from typing import Any

from investor_agent.adapters.market.http_client import path_segment
from investor_agent.domain.errors import RemoteError
from investor_agent.ports.outbound import HttpJsonPort


class AlloraClient:
    """Fetches network inferences for an asset over a timeframe (e.g. SOL / 8h)."""

    def __init__(self, http: HttpJsonPort, chain: str):
        self.http = http
        self.chain = chain

    async def get_prediction(self, asset: str, timeframe: str) -> Any:
        """Raw prediction response, passed through unmodified."""
        path = (
            f"/v2/allora/consumer/price/{path_segment(self.chain)}"
            f"/{path_segment(asset)}/{path_segment(timeframe)}"
        )
        return await self.http.get_json(path)

    async def get_price_prediction(self, asset: str, timeframe: str) -> float:
        """Predicted price as a float. Implements PredictionPort."""
        data = await self.get_prediction(asset, timeframe)
        try:
            inference = data["data"]["inference_data"]
            return float(inference["network_inference_normalized"])
        except (KeyError, TypeError, ValueError) as e:
            raise RemoteError(
                f"Prediction response for {asset}/{timeframe} has no usable "
                f"network_inference_normalized: {e!r}"
            ) from e
