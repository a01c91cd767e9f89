# graph_platform/services/update_gate.py
"""
    UpdateGate — trailing-edge debounce of update notifications.

    The first notification of a burst opens a cooldown window and is
    dropped. Notifications inside the window are dropped as well; the
    first one at or after the deadline is let through and closes the
    window. The deadline is never extended.
"""
from enum import Enum
from typing import Optional


class GateState(Enum):
    IDLE = "idle"
    COOLDOWN = "cooldown"


class UpdateGate:

    def __init__(self, delay_ms: float = 1000.0):
        self._delay_ms = delay_ms
        self._deadline: Optional[float] = None

    @property
    def delay_ms(self) -> float:
        return self._delay_ms

    @property
    def deadline(self) -> Optional[float]:
        return self._deadline

    @property
    def state(self) -> GateState:
        return GateState.IDLE if self._deadline is None else GateState.COOLDOWN

    def admit(self, now: float) -> bool:
        """
        Decide whether a notification arriving at ``now`` (milliseconds)
        should trigger a rebuild.
        """
        if self._deadline is None:
            self._deadline = now + self._delay_ms
            return False
        if now < self._deadline:
            return False
        self._deadline = None
        return True

    def reset(self) -> None:
        self._deadline = None

    def __repr__(self) -> str:
        return f"UpdateGate(state={self.state.value}, deadline={self._deadline})"
