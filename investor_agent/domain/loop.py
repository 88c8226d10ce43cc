"""Periodic loop state machine shared by the autonomous modes.

IDLE → FETCHING → COMPARING → EMITTING → SLEEPING → FETCHING …
STOPPED is terminal: reached on a fatal tick error or on cancellation.
Sleep is injected so tests can drive ticks without real delays.
"""

import asyncio
import sys
from enum import Enum
from typing import Any, Awaitable, Callable, Optional

from investor_agent.domain.errors import LoopFatalError

Sleep = Callable[[float], Awaitable[Any]]


def _log(msg: str):
    print(msg, file=sys.stderr)


class LoopState(str, Enum):
    IDLE = "idle"
    FETCHING = "fetching"
    COMPARING = "comparing"
    EMITTING = "emitting"
    SLEEPING = "sleeping"
    STOPPED = "stopped"


class PeriodicLoop:
    """Runs ``_tick`` every ``interval`` seconds until a fatal error.

    Subclasses implement ``_tick`` and move through the intermediate
    states with ``_set_state``. Any exception escaping a tick stops the
    loop and is re-raised as LoopFatalError; nothing is retried.
    """

    name = "loop"

    def __init__(self, interval: float, sleep: Optional[Sleep] = None):
        if interval < 0:
            raise ValueError(f"interval must be >= 0, got {interval}")
        self.interval = interval
        self._sleep: Sleep = sleep or asyncio.sleep
        self.state = LoopState.IDLE
        self.tick_count = 0

    @property
    def stopped(self) -> bool:
        return self.state is LoopState.STOPPED

    def _set_state(self, state: LoopState):
        self.state = state

    def stop(self):
        self.state = LoopState.STOPPED

    async def _tick(self) -> Any:
        raise NotImplementedError

    async def tick(self) -> Any:
        """Run one iteration. Stops the loop on any failure."""
        if self.stopped:
            raise LoopFatalError(f"{self.name} loop is stopped")
        try:
            result = await self._tick()
        except LoopFatalError:
            self.stop()
            raise
        except asyncio.CancelledError:
            self.stop()
            raise
        except Exception as e:
            self.stop()
            raise LoopFatalError(f"{self.name} tick failed: {e}") from e
        self.tick_count += 1
        return result

    async def run(self, max_ticks: Optional[int] = None):
        """Tick, sleep, repeat. Returns only when ``max_ticks`` is reached."""
        _log(f"Starting {self.name} loop (interval {self.interval:g}s)...")
        ticks = 0
        try:
            while True:
                await self.tick()
                ticks += 1
                if max_ticks is not None and ticks >= max_ticks:
                    self._set_state(LoopState.IDLE)
                    return
                self._set_state(LoopState.SLEEPING)
                await self._sleep(self.interval)
        except LoopFatalError as e:
            self.stop()
            _log(f"{self.name} loop stopped: {e}")
            raise
        except BaseException:
            self.stop()
            raise
