"""Actions exposed to the agent as tools."""

from investor_agent.actions.allora import allora_actions
from investor_agent.actions.dexpaprika import dexpaprika_actions
from investor_agent.actions.registry import ActionDefinition, ActionRegistry
from investor_agent.adapters.market import AlloraClient, DexPaprikaClient


def build_default_registry(
    dexpaprika: DexPaprikaClient, allora: AlloraClient
) -> ActionRegistry:
    """Registry with every action this package provides."""
    return ActionRegistry([*dexpaprika_actions(dexpaprika), *allora_actions(allora)])


__all__ = [
    "ActionDefinition",
    "ActionRegistry",
    "allora_actions",
    "build_default_registry",
    "dexpaprika_actions",
]
