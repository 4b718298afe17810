"""Observable wrapper around a single side-effecting request."""
from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass
from enum import Enum
from typing import Awaitable, Callable, Generic, List, Optional, TypeVar

from wallet_console.utils.errors import ActionInFlight, WalletConsoleError

logger = logging.getLogger("wallet_console.state.action")

T = TypeVar("T")

DEFAULT_FAILURE_MESSAGE = "An unknown error occurred"
TIMEOUT_MESSAGE = "Request timed out"


class ActionStatus(str, Enum):
    """Lifecycle of one AsyncAction."""
    IDLE = "idle"
    PENDING = "pending"
    SUCCEEDED = "succeeded"
    FAILED = "failed"


@dataclass(frozen=True)
class ActionState(Generic[T]):
    """Snapshot of an action. ``error`` is set only when failed, ``result`` only when succeeded."""
    status: ActionStatus = ActionStatus.IDLE
    error: Optional[str] = None
    result: Optional[T] = None

    @property
    def is_pending(self) -> bool:
        return self.status is ActionStatus.PENDING

    @property
    def succeeded(self) -> bool:
        return self.status is ActionStatus.SUCCEEDED

    @property
    def failed(self) -> bool:
        return self.status is ActionStatus.FAILED


StateObserver = Callable[[ActionState], None]


class AsyncAction(Generic[T]):
    """
    Runs one awaited operation at a time and publishes its state.

    Overlapping runs are rejected with ActionInFlight; the in-flight call
    keeps going and its outcome is the one recorded. There is no retry: a
    failed run stays failed until the caller runs again.

    After ``dispose`` any late outcome is dropped and observers are not
    notified, so a response arriving after its page went away never touches
    state.
    """

    def __init__(
        self,
        name: str,
        fallback_message: str = DEFAULT_FAILURE_MESSAGE,
        timeout: Optional[float] = None
    ):
        self.name = name
        self.fallback_message = fallback_message
        self.timeout = timeout
        self.state: ActionState[T] = ActionState()
        self._observers: List[StateObserver] = []
        self._disposed = False

    def subscribe(self, observer: StateObserver) -> Callable[[], None]:
        """Register an observer; returns a function that removes it."""
        if observer not in self._observers:
            self._observers.append(observer)

        def unsubscribe():
            if observer in self._observers:
                self._observers.remove(observer)

        return unsubscribe

    async def run(self, operation: Callable[[], Awaitable[T]]) -> ActionState[T]:
        """
        Await ``operation`` exactly once and record its outcome.

        Returns:
            The resulting state snapshot

        Raises:
            ActionInFlight: If a previous run is still pending
            RuntimeError: If the action was disposed
        """
        if self._disposed:
            raise RuntimeError(f"Action '{self.name}' has been disposed")
        if self.state.is_pending:
            raise ActionInFlight(f"'{self.name}' is already in progress")

        self._publish(ActionState(status=ActionStatus.PENDING))
        logger.debug(f"Action '{self.name}' started")

        try:
            if self.timeout:
                result = await asyncio.wait_for(operation(), timeout=self.timeout)
            else:
                result = await operation()
        except asyncio.TimeoutError:
            logger.warning(f"Action '{self.name}' timed out after {self.timeout}s")
            outcome = ActionState(status=ActionStatus.FAILED, error=TIMEOUT_MESSAGE)
        except asyncio.CancelledError:
            if not self._disposed:
                self._publish(ActionState(status=ActionStatus.FAILED, error="Request cancelled"))
            raise
        except Exception as e:
            outcome = ActionState(status=ActionStatus.FAILED, error=self._message_for(e))
        else:
            outcome = ActionState(status=ActionStatus.SUCCEEDED, result=result)

        if self._disposed:
            logger.debug(f"Discarding late {outcome.status.value} outcome of '{self.name}'")
            return outcome

        if outcome.failed:
            logger.warning(f"Action '{self.name}' failed: {outcome.error}")
        else:
            logger.debug(f"Action '{self.name}' succeeded")
        self._publish(outcome)
        return outcome

    def dispose(self):
        self._disposed = True
        self._observers.clear()

    def _message_for(self, error: Exception) -> str:
        if isinstance(error, WalletConsoleError) and str(error):
            return str(error)
        logger.exception(f"Unexpected error in '{self.name}'", exc_info=error)
        return self.fallback_message

    def _publish(self, state: ActionState[T]):
        self.state = state
        for observer in list(self._observers):
            try:
                observer(state)
            except Exception:
                logger.exception(f"Observer of '{self.name}' raised")
