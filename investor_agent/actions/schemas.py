"""Input shapes for actions, as pydantic models."""

from pydantic import BaseModel, ConfigDict, Field, StrictInt


class _ActionInput(BaseModel):
    model_config = ConfigDict(str_strip_whitespace=True)


class SearchInput(_ActionInput):
    query: str = Field(min_length=1, description="Token, pool or DEX name, symbol or ID")


class TokenDataInput(_ActionInput):
    network: str = Field(min_length=1, description="Network ID, e.g. 'solana'")
    tokenAddress: str = Field(min_length=1, description="Token contract / mint address")


class TopPoolsInput(_ActionInput):
    limit: StrictInt = Field(gt=0, description="Number of pools to return")


class PricePredictionInput(_ActionInput):
    asset: str = Field(min_length=1, description="Asset symbol, e.g. 'SOL'")
    timeframe: str = Field(min_length=1, description="Prediction horizon, e.g. '8h'")
