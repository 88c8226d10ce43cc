"""Tests for InvestorLoop signal fetching, decisions and failure stops."""

import asyncio
from datetime import datetime

import pytest

from investor_agent.domain.errors import LoopFatalError, RemoteError
from investor_agent.domain.investor import InvestorLoop
from investor_agent.domain.loop import LoopState
from investor_agent.domain.models import SOL_MINT, Proposal


# --- Mock Ports ---


class MockPredictions:
    def __init__(self, values):
        self.values = list(values)
        self.calls = []

    async def get_price_prediction(self, asset, timeframe):
        self.calls.append((asset, timeframe))
        value = self.values.pop(0)
        if isinstance(value, BaseException):
            raise value
        return value


class MockPrices:
    def __init__(self, values):
        self.values = list(values)
        self.calls = []

    async def get_token_price(self, network, token_address):
        self.calls.append((network, token_address))
        value = self.values.pop(0)
        if isinstance(value, BaseException):
            raise value
        return value


class MockNotifier:
    def __init__(self):
        self.sent = []

    async def send(self, text):
        self.sent.append(text)


class RecordingSleep:
    def __init__(self):
        self.calls = []

    async def __call__(self, seconds):
        self.calls.append(seconds)


def _make_loop(predicted, market, interval=60.0):
    predictions = MockPredictions(predicted)
    prices = MockPrices(market)
    notifier = MockNotifier()
    sleep = RecordingSleep()
    loop = InvestorLoop(
        predictions=predictions,
        prices=prices,
        notifiers=[notifier],
        interval=interval,
        sleep=sleep,
        clock=lambda: datetime(2026, 1, 1, 12, 0),
    )
    return loop, predictions, prices, notifier, sleep


class TestFetchSignals:
    @pytest.mark.asyncio
    async def test_requests_sol_8h_and_sol_market(self):
        loop, predictions, prices, _, _ = _make_loop([25.4], [25.0])
        predicted, market = await loop.fetch_signals()
        assert predictions.calls == [("SOL", "8h")]
        assert prices.calls == [("solana", SOL_MINT)]
        assert predicted.value == 25.4
        assert predicted.source == "prediction"
        assert market.value == 25.0
        assert market.observed_at == datetime(2026, 1, 1, 12, 0)

    @pytest.mark.asyncio
    async def test_fetches_run_concurrently(self):
        both_started = asyncio.Event()
        started = []

        class SlowPredictions:
            async def get_price_prediction(self, asset, timeframe):
                started.append("prediction")
                if len(started) == 2:
                    both_started.set()
                await asyncio.wait_for(both_started.wait(), timeout=1)
                return 2.0

        class SlowPrices:
            async def get_token_price(self, network, token_address):
                started.append("market")
                if len(started) == 2:
                    both_started.set()
                await asyncio.wait_for(both_started.wait(), timeout=1)
                return 1.0

        loop = InvestorLoop(SlowPredictions(), SlowPrices(), sleep=RecordingSleep())
        predicted, market = await loop.fetch_signals()
        assert (predicted.value, market.value) == (2.0, 1.0)

    @pytest.mark.asyncio
    async def test_other_fetch_completes_when_one_fails(self):
        finished = []

        class FailingPredictions:
            async def get_price_prediction(self, asset, timeframe):
                raise RemoteError("allora down")

        class SlowPrices:
            async def get_token_price(self, network, token_address):
                await asyncio.sleep(0)
                finished.append("market")
                return 1.0

        loop = InvestorLoop(FailingPredictions(), SlowPrices(), sleep=RecordingSleep())
        with pytest.raises(LoopFatalError, match="allora down"):
            await loop.fetch_signals()
        assert finished == ["market"]


class TestTick:
    @pytest.mark.asyncio
    async def test_prediction_above_market_emits_proposal(self, capsys):
        loop, _, _, notifier, _ = _make_loop([25.40], [25.00])
        decision = await loop.tick()
        assert decision.should_propose is True
        assert decision.proposal == Proposal()
        assert len(notifier.sent) == 1
        assert "1 USDC → SOL" in notifier.sent[0]
        assert "1 USDC → SOL" in capsys.readouterr().out
        assert loop.state is LoopState.EMITTING
        assert loop.last_decision is decision

    @pytest.mark.asyncio
    async def test_equal_prices_no_proposal(self, capsys):
        loop, _, _, notifier, _ = _make_loop([25.00], [25.00])
        decision = await loop.tick()
        assert decision.should_propose is False
        assert notifier.sent == []
        assert "no swap proposed" in capsys.readouterr().out

    @pytest.mark.asyncio
    async def test_prediction_below_market_no_proposal(self):
        loop, _, _, notifier, _ = _make_loop([24.00], [25.00])
        decision = await loop.tick()
        assert decision.should_propose is False
        assert notifier.sent == []

    @pytest.mark.asyncio
    async def test_market_fetch_failure_stops_loop(self, capsys):
        loop, _, _, notifier, sleep = _make_loop([25.40], [RemoteError("HTTP 500")])
        with pytest.raises(LoopFatalError, match="market price"):
            await loop.tick()
        assert loop.state is LoopState.STOPPED
        assert notifier.sent == []
        assert loop.last_decision is None
        assert "Proposed swap" not in capsys.readouterr().out

    @pytest.mark.asyncio
    async def test_malformed_signal_stops_loop(self):
        loop, _, _, notifier, _ = _make_loop([float("nan")], [25.0])
        with pytest.raises(LoopFatalError, match="Malformed"):
            await loop.tick()
        assert loop.stopped
        assert notifier.sent == []

    @pytest.mark.asyncio
    async def test_never_executes_a_trade(self):
        loop, _, _, notifier, _ = _make_loop([30.0], [25.0])
        decision = await loop.tick()
        assert "NOT EXECUTED" in notifier.sent[0]
        assert decision.proposal.venue == "Jupiter"


class TestRun:
    @pytest.mark.asyncio
    async def test_ticks_and_sleeps_with_interval(self):
        loop, predictions, _, notifier, sleep = _make_loop(
            [25.4, 25.0, 26.0], [25.0, 25.0, 25.0], interval=60.0
        )
        await loop.run(max_ticks=3)
        assert len(predictions.calls) == 3
        assert sleep.calls == [60.0, 60.0]
        assert len(notifier.sent) == 2

    @pytest.mark.asyncio
    async def test_failed_tick_stops_not_sleeps(self):
        loop, _, _, notifier, sleep = _make_loop([25.4, 25.4], [25.0, RemoteError("boom")])
        with pytest.raises(LoopFatalError):
            await loop.run()
        assert loop.state is LoopState.STOPPED
        assert loop.tick_count == 1
        assert sleep.calls == [60.0]
        assert len(notifier.sent) == 1

    @pytest.mark.asyncio
    async def test_first_tick_failure_produces_no_decision(self):
        loop, _, _, notifier, sleep = _make_loop([RemoteError("allora 503")], [25.0])
        with pytest.raises(LoopFatalError, match="allora 503"):
            await loop.run()
        assert loop.last_decision is None
        assert sleep.calls == []
        assert notifier.sent == []
