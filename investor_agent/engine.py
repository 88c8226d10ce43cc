"""Autonomous engine — drives the agent with a fixed prompt every interval."""

from typing import Optional

from investor_agent.domain.loop import LoopState, PeriodicLoop, Sleep
from investor_agent.ports.outbound import AgentPort
from investor_agent.prompts import AUTONOMOUS_THOUGHT

SEPARATOR = "-------------------"


async def print_agent_stream(agent: AgentPort, message: str) -> int:
    """Print each streamed chunk followed by a separator. Returns chunk count."""
    count = 0
    async for text in agent.stream(message):
        print(text)
        print(SEPARATOR)
        count += 1
    return count


class AutonomousEngine(PeriodicLoop):
    """Auto mode: ask the agent to act on its own, then sleep."""

    name = "autonomous"

    def __init__(
        self,
        agent: AgentPort,
        interval: float = 10.0,
        sleep: Optional[Sleep] = None,
        thought: str = AUTONOMOUS_THOUGHT,
    ):
        super().__init__(interval=interval, sleep=sleep)
        self.agent = agent
        self.thought = thought

    async def _tick(self) -> int:
        self._set_state(LoopState.FETCHING)
        return await print_agent_stream(self.agent, self.thought)
