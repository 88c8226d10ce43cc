"""LangGraph ReAct agent — implements AgentPort."""

import sys
from datetime import datetime
from typing import Any, AsyncIterator, Optional, Sequence

from langchain_core.messages import HumanMessage
from langchain_core.tools import BaseTool
from langchain_openai import ChatOpenAI
from langgraph.checkpoint.memory import MemorySaver
from langgraph.prebuilt import create_react_agent

from investor_agent.config import DEFAULT_OPENAI_MODEL


def _log(msg: str):
    print(msg, file=sys.stderr)


def _content_text(content: Any) -> str:
    """Flatten message content (plain string or list of content blocks)."""
    if isinstance(content, str):
        return content
    if isinstance(content, list):
        parts = []
        for block in content:
            if isinstance(block, str):
                parts.append(block)
            elif isinstance(block, dict) and block.get("type") == "text":
                parts.append(block.get("text", ""))
        return "".join(parts)
    return str(content)


class LangGraphAgent:
    """ReAct agent over ChatOpenAI with in-memory conversation history.

    History is keyed by a per-process thread id (the start timestamp), so
    every turn in one process shares the same conversation.
    """

    def __init__(
        self,
        tools: Sequence[BaseTool],
        system_message: str,
        model: str = DEFAULT_OPENAI_MODEL,
        api_key: Optional[str] = None,
        temperature: float = 0.0,
        thread_id: Optional[str] = None,
        graph: Any = None,
    ):
        if graph is None:
            llm = ChatOpenAI(model=model, temperature=temperature, api_key=api_key or None)
            graph = create_react_agent(
                llm,
                list(tools),
                checkpointer=MemorySaver(),
                prompt=system_message,
            )
        self.graph = graph
        self.thread_id = thread_id or datetime.now().isoformat()
        self.config = {"configurable": {"thread_id": self.thread_id}}
        _log(f"Agent session: {self.thread_id}")

    async def stream(self, message: str) -> AsyncIterator[str]:
        """Yield the first message of each agent / tools update."""
        inputs = {"messages": [HumanMessage(content=message)]}
        async for chunk in self.graph.astream(inputs, self.config):
            for node in ("agent", "tools"):
                if node not in chunk:
                    continue
                messages = (chunk[node] or {}).get("messages") or []
                if messages:
                    yield _content_text(messages[0].content)
