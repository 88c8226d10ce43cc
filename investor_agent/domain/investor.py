"""Investor mode — compare a price prediction against the market each tick.

Never submits a trade: a positive decision only produces a Proposal that is
printed and forwarded to notifiers.
"""

import asyncio
import sys
from datetime import datetime
from typing import Callable, List, Optional, Sequence, Tuple

from investor_agent.domain.decision import decide
from investor_agent.domain.errors import LoopFatalError
from investor_agent.domain.loop import LoopState, PeriodicLoop, Sleep
from investor_agent.domain.models import SOL_MINT, Decision, Proposal, Signal
from investor_agent.ports.outbound import MarketPricePort, NotificationPort, PredictionPort


def _log(msg: str):
    print(msg, file=sys.stderr)


class InvestorLoop(PeriodicLoop):
    """Fetch prediction + market price concurrently, decide, emit, sleep."""

    name = "investor"

    def __init__(
        self,
        predictions: PredictionPort,
        prices: MarketPricePort,
        notifiers: Sequence[NotificationPort] = (),
        interval: float = 60.0,
        sleep: Optional[Sleep] = None,
        clock: Callable[[], datetime] = datetime.now,
        asset: str = "SOL",
        timeframe: str = "8h",
        network: str = "solana",
        token_address: str = SOL_MINT,
        proposal: Optional[Proposal] = None,
    ):
        super().__init__(interval=interval, sleep=sleep)
        self.predictions = predictions
        self.prices = prices
        self.notifiers = list(notifiers)
        self._clock = clock
        self.asset = asset
        self.timeframe = timeframe
        self.network = network
        self.token_address = token_address
        self.proposal = proposal or Proposal()
        self.last_decision: Optional[Decision] = None

    async def _predict(self) -> Signal:
        value = await self.predictions.get_price_prediction(self.asset, self.timeframe)
        return Signal(source="prediction", value=value, observed_at=self._clock())

    async def _market_price(self) -> Signal:
        value = await self.prices.get_token_price(self.network, self.token_address)
        return Signal(source="market", value=value, observed_at=self._clock())

    async def fetch_signals(self) -> Tuple[Signal, Signal]:
        """Both fetches run to completion before either result is used."""
        self._set_state(LoopState.FETCHING)
        results = await asyncio.gather(
            self._predict(), self._market_price(), return_exceptions=True
        )
        labels = (f"{self.timeframe} {self.asset} prediction", f"{self.asset} market price")
        failures: List[Tuple[str, BaseException]] = [
            (label, result)
            for label, result in zip(labels, results)
            if isinstance(result, BaseException)
        ]
        for _, err in failures:
            if isinstance(err, asyncio.CancelledError):
                raise err
        if failures:
            for label, err in failures:
                _log(f"[investor] failed to fetch {label}: {err}")
            label, err = failures[0]
            raise LoopFatalError(f"Failed to fetch {label}: {err}") from err

        predicted, market = results
        return predicted, market

    async def _tick(self) -> Decision:
        predicted, market = await self.fetch_signals()

        self._set_state(LoopState.COMPARING)
        try:
            decision = decide(predicted.value, market.value, self.proposal, now=self._clock())
        except ValueError as e:
            raise LoopFatalError(f"Malformed comparison inputs: {e}") from e

        self._set_state(LoopState.EMITTING)
        await self.emit(decision)
        self.last_decision = decision
        return decision

    async def emit(self, decision: Decision):
        print(f"[{decision.decided_at.isoformat()}] {self.asset} {decision.summary()}")
        if not decision.should_propose:
            print("Prediction is not above market price; no swap proposed.")
            print("-------------------")
            return

        text = decision.proposal.describe()
        print(text)
        print("-------------------")
        for notifier in self.notifiers:
            await notifier.send(text)
