"""Expose registry actions to LangChain agents as structured tools."""

import json
from typing import List

from langchain_core.tools import StructuredTool, ToolException

from investor_agent.actions.registry import ActionDefinition, ActionRegistry
from investor_agent.domain.errors import RemoteError, ValidationError


def _tool_coroutine(registry: ActionRegistry, definition: ActionDefinition):
    async def _run(**kwargs) -> str:
        try:
            result = await registry.invoke(definition.name, kwargs)
        except (ValidationError, RemoteError) as e:
            # Reported back to the model as a failed tool call
            raise ToolException(str(e)) from e
        return json.dumps(result, ensure_ascii=False)

    return _run


def to_langchain_tools(registry: ActionRegistry) -> List[StructuredTool]:
    """One StructuredTool per action, in registration order."""
    return [
        StructuredTool.from_function(
            coroutine=_tool_coroutine(registry, definition),
            name=definition.name,
            description=definition.description,
            args_schema=definition.input_model,
            handle_tool_error=True,
            handle_validation_error=True,
        )
        for definition in registry
    ]
