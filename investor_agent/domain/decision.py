"""Trade decision rule.

Pure Python, no framework dependencies.
"""

import math
from datetime import datetime
from numbers import Real
from typing import Optional

from investor_agent.domain.models import Decision, Proposal


def _check_price(name: str, value) -> float:
    if isinstance(value, bool) or not isinstance(value, Real):
        raise ValueError(f"{name} price must be a number, got {value!r}")
    value = float(value)
    if not math.isfinite(value):
        raise ValueError(f"{name} price must be finite, got {value!r}")
    return value


def decide(
    predicted: float,
    market: float,
    proposal: Optional[Proposal] = None,
    now: Optional[datetime] = None,
) -> Decision:
    """Propose a trade only when the prediction is strictly above the market.

    Equality holds: no tolerance is applied to the float comparison.
    Raises ValueError on non-numeric or non-finite prices.
    """
    predicted = _check_price("predicted", predicted)
    market = _check_price("market", market)

    should_propose = predicted > market
    return Decision(
        predicted=predicted,
        market=market,
        should_propose=should_propose,
        proposal=(proposal or Proposal()) if should_propose else None,
        decided_at=now or datetime.now(),
    )
