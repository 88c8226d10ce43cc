"""Domain layer: decision rule, loop state machine, models, errors."""

from investor_agent.domain.decision import decide
from investor_agent.domain.errors import (
    ConfigurationError,
    InvestorAgentError,
    LoopFatalError,
    RemoteError,
    ValidationError,
)
from investor_agent.domain.investor import InvestorLoop
from investor_agent.domain.loop import LoopState, PeriodicLoop
from investor_agent.domain.models import SOL_MINT, USDC_MINT, Decision, Proposal, Signal

__all__ = [
    "ConfigurationError",
    "Decision",
    "InvestorAgentError",
    "InvestorLoop",
    "LoopFatalError",
    "LoopState",
    "PeriodicLoop",
    "Proposal",
    "RemoteError",
    "SOL_MINT",
    "Signal",
    "USDC_MINT",
    "ValidationError",
    "decide",
]
