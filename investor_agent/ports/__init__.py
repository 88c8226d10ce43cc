"""Port interfaces (Hexagonal Architecture)."""

from investor_agent.ports.outbound import (
    AgentPort,
    HttpJsonPort,
    MarketPricePort,
    NotificationPort,
    PredictionPort,
)

__all__ = [
    "AgentPort",
    "HttpJsonPort",
    "MarketPricePort",
    "NotificationPort",
    "PredictionPort",
]
