"""Domain data models."""

from dataclasses import dataclass
from datetime import datetime
from typing import Optional

# Token mints
SOL_MINT = "So11111111111111111111111111111111111111112"
USDC_MINT = "EPjFWdd5AufqSSqeM2qN1xzybapC8G4wEGGkZwyTDt1v"


@dataclass(frozen=True)
class Signal:
    """A single reading from an external source, fetched fresh each tick."""

    source: str  # e.g. "allora", "dexpaprika"
    value: float
    observed_at: datetime


@dataclass(frozen=True)
class Proposal:
    """Descriptive trade recommendation. Never executed by this package."""

    source_symbol: str = "USDC"
    source_mint: str = USDC_MINT
    destination_symbol: str = "SOL"
    destination_mint: str = SOL_MINT
    amount: float = 1.0
    venue: str = "Jupiter"

    def describe(self) -> str:
        amount = f"{self.amount:g}"
        return (
            f"Proposed swap: {amount} {self.source_symbol} → {self.destination_symbol} "
            f"via {self.venue} (input mint {self.source_mint}). NOT EXECUTED."
        )


@dataclass(frozen=True)
class Decision:
    """Outcome of one comparison between a predicted and a market price."""

    predicted: float
    market: float
    should_propose: bool
    proposal: Optional[Proposal] = None
    decided_at: Optional[datetime] = None

    def summary(self) -> str:
        verdict = "propose" if self.should_propose else "hold"
        return f"predicted={self.predicted:.4f} market={self.market:.4f} -> {verdict}"
