"""Configuration and environment validation."""

import os
import sys
from dataclasses import dataclass, field
from typing import List, Mapping, Optional

from dotenv import load_dotenv

from investor_agent.domain.errors import ConfigurationError

load_dotenv()

_stderr_print = lambda *a, **kw: print(*a, **kw, file=sys.stderr)

REQUIRED_ENV_VARS = ("OPENAI_API_KEY",)

DEFAULT_NETWORK_ID = "solana-devnet"
DEFAULT_OPENAI_MODEL = "gpt-4o-mini"
DEFAULT_DEXPAPRIKA_BASE_URL = "https://api.dexpaprika.com"
DEFAULT_ALLORA_BASE_URL = "https://api.allora.network"
DEFAULT_ALLORA_CHAIN = "ethereum-11155111"
DEFAULT_INVESTOR_INTERVAL = 60.0
DEFAULT_AUTO_INTERVAL = 10.0


def _float_env(name: str, default: float) -> float:
    raw = os.getenv(name, "").strip()
    if not raw:
        return default
    try:
        value = float(raw)
    except ValueError:
        _stderr_print(f"Invalid {name}={raw!r}, falling back to {default}")
        return default
    if value < 0:
        _stderr_print(f"Negative {name}={raw!r}, falling back to {default}")
        return default
    return value


CONFIG = {
    # LLM
    "openai_api_key": os.getenv("OPENAI_API_KEY", ""),
    "openai_model": os.getenv("OPENAI_MODEL", DEFAULT_OPENAI_MODEL),
    # Solana network selection (consumed by the wallet layer, not by this package)
    "solana_rpc_url": os.getenv("SOLANA_RPC_URL", ""),
    "network_id": os.getenv("NETWORK_ID", ""),
    # Market data
    "dexpaprika_base_url": os.getenv("DEXPAPRIKA_BASE_URL", DEFAULT_DEXPAPRIKA_BASE_URL),
    "allora_base_url": os.getenv("ALLORA_BASE_URL", DEFAULT_ALLORA_BASE_URL),
    "allora_api_key": os.getenv("ALLORA_API_KEY", ""),
    "allora_chain": os.getenv("ALLORA_CHAIN", DEFAULT_ALLORA_CHAIN),
    "http_timeout_seconds": _float_env("HTTP_TIMEOUT_SECONDS", 30.0),
    # Loops
    "investor_interval_seconds": _float_env(
        "INVESTOR_INTERVAL_SECONDS", DEFAULT_INVESTOR_INTERVAL
    ),
    "auto_interval_seconds": _float_env("AUTO_INTERVAL_SECONDS", DEFAULT_AUTO_INTERVAL),
    # Proposal notifications
    "discord_webhook_url": os.getenv("DISCORD_WEBHOOK_URL", ""),
}


def validate_environment(env: Optional[Mapping[str, str]] = None) -> List[str]:
    """Check required variables; return warnings for optional ones.

    Raises ConfigurationError listing every missing required key.
    """
    env = os.environ if env is None else env

    missing = [name for name in REQUIRED_ENV_VARS if not env.get(name)]
    if missing:
        raise ConfigurationError(missing)

    warnings: List[str] = []
    if not env.get("SOLANA_RPC_URL") and not env.get("NETWORK_ID"):
        warnings.append(
            "Warning: SOLANA_RPC_URL and NETWORK_ID both are unset, "
            f"defaulting to {DEFAULT_NETWORK_ID}"
        )
    return warnings


# ── Typed config ────────────────────────────────────────────


@dataclass
class NetworkConfig:
    rpc_url: str = ""
    network_id: str = DEFAULT_NETWORK_ID


@dataclass
class AgentConfig:
    openai_api_key: str = ""
    model: str = DEFAULT_OPENAI_MODEL
    temperature: float = 0.0


@dataclass
class MarketDataConfig:
    dexpaprika_base_url: str = DEFAULT_DEXPAPRIKA_BASE_URL
    allora_base_url: str = DEFAULT_ALLORA_BASE_URL
    allora_api_key: str = ""
    allora_chain: str = DEFAULT_ALLORA_CHAIN
    timeout_seconds: float = 30.0


@dataclass
class LoopConfig:
    investor_interval_seconds: float = DEFAULT_INVESTOR_INTERVAL
    auto_interval_seconds: float = DEFAULT_AUTO_INTERVAL


@dataclass
class AppConfig:
    """Typed view over CONFIG, handed to collaborators at startup."""

    network: NetworkConfig = field(default_factory=NetworkConfig)
    agent: AgentConfig = field(default_factory=AgentConfig)
    market_data: MarketDataConfig = field(default_factory=MarketDataConfig)
    loops: LoopConfig = field(default_factory=LoopConfig)
    discord_webhook_url: str = ""

    @classmethod
    def from_env(cls) -> "AppConfig":
        """Create AppConfig from environment variables."""
        return cls(
            network=NetworkConfig(
                rpc_url=CONFIG["solana_rpc_url"],
                network_id=CONFIG["network_id"] or DEFAULT_NETWORK_ID,
            ),
            agent=AgentConfig(
                openai_api_key=CONFIG["openai_api_key"],
                model=CONFIG["openai_model"],
            ),
            market_data=MarketDataConfig(
                dexpaprika_base_url=CONFIG["dexpaprika_base_url"],
                allora_base_url=CONFIG["allora_base_url"],
                allora_api_key=CONFIG["allora_api_key"],
                allora_chain=CONFIG["allora_chain"],
                timeout_seconds=CONFIG["http_timeout_seconds"],
            ),
            loops=LoopConfig(
                investor_interval_seconds=CONFIG["investor_interval_seconds"],
                auto_interval_seconds=CONFIG["auto_interval_seconds"],
            ),
            discord_webhook_url=CONFIG["discord_webhook_url"],
        )
