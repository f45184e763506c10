"""Explicit state machine for optimistic view updates.

    IDLE -> PENDING -> COMMITTED
                    -> ROLLED_BACK

The pre-action snapshot is captured on entering PENDING and handed back
only on rollback.
"""
import copy
from enum import Enum
from typing import Any


class ActionState(str, Enum):
    idle = "idle"
    pending = "pending"
    committed = "committed"
    rolled_back = "rolled_back"


class InvalidTransition(RuntimeError):
    pass


class OptimisticUpdate:

    def __init__(self):
        self.state = ActionState.idle
        self._snapshot: Any = None

    def _require(self, expected: ActionState, action: str):
        if self.state != expected:
            raise InvalidTransition(f"cannot {action} from state {self.state.value}")

    def begin(self, snapshot: Any):
        self._require(ActionState.idle, "begin")
        self._snapshot = copy.deepcopy(snapshot)
        self.state = ActionState.pending

    def commit(self):
        self._require(ActionState.pending, "commit")
        self._snapshot = None
        self.state = ActionState.committed

    def rollback(self) -> Any:
        """Returns the snapshot captured by ``begin``."""
        self._require(ActionState.pending, "roll back")
        snapshot, self._snapshot = self._snapshot, None
        self.state = ActionState.rolled_back
        return snapshot
