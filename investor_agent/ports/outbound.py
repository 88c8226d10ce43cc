"""Outbound ports — interfaces for external system adapters."""

from typing import Any, AsyncIterator, Mapping, Optional, Protocol, runtime_checkable


@runtime_checkable
class HttpJsonPort(Protocol):
    """Interface for a read-only JSON HTTP API."""

    async def get_json(
        self, path: str, params: Optional[Mapping[str, Any]] = None
    ) -> Any: ...


@runtime_checkable
class PredictionPort(Protocol):
    """Interface for a price prediction feed."""

    async def get_price_prediction(self, asset: str, timeframe: str) -> float: ...


@runtime_checkable
class MarketPricePort(Protocol):
    """Interface for a current market price feed."""

    async def get_token_price(self, network: str, token_address: str) -> float: ...


@runtime_checkable
class AgentPort(Protocol):
    """Interface for the conversational agent collaborator."""

    def stream(self, message: str) -> AsyncIterator[str]: ...


@runtime_checkable
class NotificationPort(Protocol):
    """Interface for surfacing proposals to an operator."""

    async def send(self, text: str) -> None: ...
