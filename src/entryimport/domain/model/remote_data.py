"""Phase-tagged remote data and the observable collection that publishes it.

A ``CandidateCollection`` wraps exactly one asynchronous lookup. It starts in
the pending phase and moves to ``Ready`` or ``Failed`` once; later publishes
are ignored. Observers receive the current phase on subscription and every
subsequent change until they unsubscribe.
"""

from __future__ import annotations

import asyncio
from collections.abc import Callable
from dataclasses import dataclass
from logging import getLogger
from typing import TYPE_CHECKING, Literal

from .enums import RemoteDataState

if TYPE_CHECKING:
    from collections.abc import Awaitable

log = getLogger(__name__)


@dataclass(frozen=True, slots=True)
class Pending:
    state: Literal[RemoteDataState.PENDING] = RemoteDataState.PENDING


@dataclass(frozen=True, slots=True)
class Failed:
    error: Exception
    state: Literal[RemoteDataState.FAILED] = RemoteDataState.FAILED

    @property
    def message(self) -> str:
        return str(self.error) or type(self.error).__name__


@dataclass(frozen=True, slots=True)
class Ready[T]:
    payload: T
    state: Literal[RemoteDataState.READY] = RemoteDataState.READY


type RemoteData[T] = Pending | Failed | Ready[T]
type RemoteDataObserver[T] = Callable[[RemoteData[T]], None]


class Subscription:
    """Handle returned by ``CandidateCollection.subscribe``."""

    def __init__(self, release: Callable[[], None]) -> None:
        self._release = release
        self._closed = False

    @property
    def closed(self) -> bool:
        return self._closed

    def unsubscribe(self) -> None:
        if self._closed:
            return
        self._closed = True
        self._release()


class CandidateCollection[T]:
    """Observable result of a single asynchronous candidate lookup."""

    def __init__(self) -> None:
        self._phase: RemoteData[T] = Pending()
        self._observers: dict[int, RemoteDataObserver[T]] = {}
        self._next_token = 0
        self._settled = asyncio.Event()
        self._task: asyncio.Task[None] | None = None

    @classmethod
    def from_awaitable(
        cls,
        awaitable: Awaitable[T],
        *,
        name: str | None = None,
    ) -> CandidateCollection[T]:
        """Start ``awaitable`` on the running loop and publish its outcome."""

        collection = cls()
        loop = asyncio.get_running_loop()
        collection._task = loop.create_task(collection._run(awaitable), name=name)
        return collection

    @property
    def phase(self) -> RemoteData[T]:
        return self._phase

    @property
    def state(self) -> RemoteDataState:
        return self._phase.state

    @property
    def observer_count(self) -> int:
        return len(self._observers)

    def subscribe(self, observer: RemoteDataObserver[T]) -> Subscription:
        token = self._next_token
        self._next_token += 1
        self._observers[token] = observer
        observer(self._phase)
        return Subscription(lambda: self._observers.pop(token, None))

    async def wait(self) -> RemoteData[T]:
        """Wait until the lookup settled and return the terminal phase."""

        await self._settled.wait()
        return self._phase

    async def _run(self, awaitable: Awaitable[T]) -> None:
        try:
            payload = await awaitable
        except Exception as exc:  # noqa: BLE001
            log.warning("Candidate lookup failed: %s", exc)
            self._publish(Failed(error=exc))
            return
        self._publish(Ready(payload=payload))

    def _publish(self, phase: RemoteData[T]) -> None:
        if self._phase.state is not RemoteDataState.PENDING:
            log.debug("Ignoring %s publish after terminal %s phase", phase.state, self._phase.state)
            return
        self._phase = phase
        self._settled.set()
        for observer in list(self._observers.values()):
            observer(phase)
