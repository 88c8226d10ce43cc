"""Chat mode — read a prompt, stream the agent's answer, repeat until 'exit'."""

import asyncio
from typing import Awaitable, Callable, Optional

from investor_agent.engine import print_agent_stream
from investor_agent.ports.outbound import AgentPort

EXIT_COMMAND = "exit"

ReadLine = Callable[[str], Awaitable[str]]


def is_exit_command(text: str) -> bool:
    return text.strip().lower() == EXIT_COMMAND


async def read_stdin_line(prompt: str) -> str:
    """Blocking input() off the event loop. Raises EOFError at end of input."""
    return await asyncio.to_thread(input, prompt)


async def run_chat_mode(agent: AgentPort, read_line: Optional[ReadLine] = None) -> int:
    """Run the interactive session. Returns the number of turns forwarded."""
    read_line = read_line or read_stdin_line
    print("Starting chat mode... Type 'exit' to end.")

    turns = 0
    while True:
        try:
            user_input = await read_line("\nPrompt: ")
        except EOFError:
            print()
            break

        if is_exit_command(user_input):
            break
        if not user_input.strip():
            continue
        await print_agent_stream(agent, user_input)
        turns += 1
    return turns
