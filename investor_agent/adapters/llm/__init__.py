"""LLM adapters — LangGraph agent and LangChain tool bridge."""

from investor_agent.adapters.llm.langgraph_agent import LangGraphAgent
from investor_agent.adapters.llm.tools import to_langchain_tools

__all__ = ["LangGraphAgent", "to_langchain_tools"]
