"""Command-line entrypoint — choose a mode, wire collaborators, run."""

import asyncio
import sys
from typing import List, Optional, Tuple

from investor_agent.actions import ActionRegistry, build_default_registry
from investor_agent.adapters.llm import LangGraphAgent, to_langchain_tools
from investor_agent.adapters.market import AlloraClient, DexPaprikaClient, JsonHttpClient
from investor_agent.adapters.notify import DiscordWebhookNotifier
from investor_agent.chat import ReadLine, read_stdin_line, run_chat_mode
from investor_agent.config import AppConfig, MarketDataConfig, validate_environment
from investor_agent.domain.errors import ConfigurationError
from investor_agent.domain.investor import InvestorLoop
from investor_agent.engine import AutonomousEngine
from investor_agent.ports.outbound import NotificationPort
from investor_agent.prompts import GENERAL_SYSTEM_MESSAGE

# (number, name, description)
MODES: List[Tuple[str, str, str]] = [
    ("1", "chat", "Interactive chat mode"),
    ("2", "auto", "Autonomous action mode"),
    ("3", "investor", "Autonomous investor mode"),
]


def _log(msg: str):
    print(msg, file=sys.stderr)


def parse_mode(choice: str) -> Optional[str]:
    """Map a menu answer (number or name) to a mode name."""
    choice = choice.strip().lower()
    for number, name, _ in MODES:
        if choice in (number, name):
            return name
    return None


async def choose_mode(read_line: ReadLine) -> str:
    while True:
        print("\nAvailable modes:")
        for number, name, description in MODES:
            print(f"{number}. {name:<8} - {description}")

        mode = parse_mode(await read_line("\nChoose a mode (enter number or name): "))
        if mode:
            return mode
        print("Invalid choice. Please try again.")


def build_dexpaprika_client(market_data: MarketDataConfig) -> DexPaprikaClient:
    return DexPaprikaClient(
        JsonHttpClient(market_data.dexpaprika_base_url, timeout=market_data.timeout_seconds)
    )


def build_allora_client(market_data: MarketDataConfig) -> AlloraClient:
    headers = {}
    if market_data.allora_api_key:
        headers["x-api-key"] = market_data.allora_api_key
    http = JsonHttpClient(
        market_data.allora_base_url, headers=headers, timeout=market_data.timeout_seconds
    )
    return AlloraClient(http, chain=market_data.allora_chain)


def build_registry(config: AppConfig) -> ActionRegistry:
    return build_default_registry(
        build_dexpaprika_client(config.market_data),
        build_allora_client(config.market_data),
    )


def build_agent(config: AppConfig, registry: ActionRegistry) -> LangGraphAgent:
    return LangGraphAgent(
        tools=to_langchain_tools(registry),
        system_message=GENERAL_SYSTEM_MESSAGE,
        model=config.agent.model,
        api_key=config.agent.openai_api_key,
        temperature=config.agent.temperature,
    )


def build_investor_loop(config: AppConfig) -> InvestorLoop:
    notifiers: List[NotificationPort] = []
    webhook = DiscordWebhookNotifier(config.discord_webhook_url)
    if webhook.is_configured:
        notifiers.append(webhook)
    return InvestorLoop(
        predictions=build_allora_client(config.market_data),
        prices=build_dexpaprika_client(config.market_data),
        notifiers=notifiers,
        interval=config.loops.investor_interval_seconds,
    )


async def run(config: AppConfig, read_line: ReadLine = read_stdin_line):
    _log(f"Network: {config.network.rpc_url or config.network.network_id}")
    mode = await choose_mode(read_line)

    if mode == "investor":
        print("Starting autonomous investor mode...")
        await build_investor_loop(config).run()
        return

    agent = build_agent(config, build_registry(config))
    if mode == "chat":
        await run_chat_mode(agent, read_line)
    elif mode == "auto":
        print("Starting autonomous mode...")
        await AutonomousEngine(agent, interval=config.loops.auto_interval_seconds).run()
    else:
        raise ValueError(f"Unknown mode: {mode}")


def report_configuration_error(err: ConfigurationError):
    _log("Error: Required environment variables are not set")
    for key in err.missing:
        _log(f"{key}=your_{key.lower()}_here")


def main():
    print("Starting Agent...")
    try:
        for warning in validate_environment():
            _log(warning)
    except ConfigurationError as e:
        report_configuration_error(e)
        sys.exit(1)

    try:
        asyncio.run(run(AppConfig.from_env()))
    except KeyboardInterrupt:
        _log("\nInterrupted.")
        sys.exit(130)
    except Exception as e:
        _log(f"Error: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
