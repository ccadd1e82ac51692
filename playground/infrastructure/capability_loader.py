"""Capability Loader — acquires the parsing capability once, off the event loop.

Invariants:
    - resolve() runs at most once per loader; repeated acquire() calls share its result
    - State starts LOADING and settles exactly once, on READY or FAILED, irreversibly
    - Every acquisition failure (import, attribute, non-callable, timeout) becomes
      FAILED(CapabilityLoadError); nothing escapes acquire() and nothing is retried
    - Listeners are called once, on the settling transition

Design Decisions:
    - Import runs in a worker thread (asyncio.to_thread): a slow module import does
      not block request handling while the shell shows the loading view
    - Singleton capability_loader initialized on startup: FastAPI lifespan manages it,
      routes read it through the get_capability_loader dependency
    - Permanent error state on failure: the page keeps showing the error until restart
"""

import asyncio
import importlib
import logging
from functools import partial
from typing import Callable

from playground.core.capability import ParsingCapability, capability_name
from playground.core.domain_types import LoadStatus
from playground.core.errors import CapabilityLoadError, CapabilityNotReadyError
from playground.core.load_state import LoadState

logger = logging.getLogger(__name__)

LoadListener = Callable[[LoadState], None]


def resolve_entrypoint(entrypoint: str) -> ParsingCapability:
    """Import "package.module:attr" and return the attribute if callable."""
    module_name, _, attr_path = entrypoint.partition(":")
    target = importlib.import_module(module_name)
    for part in attr_path.split("."):
        target = getattr(target, part)
    if not callable(target):
        raise TypeError(f"{entrypoint} is not callable")
    return target


class CapabilityLoader:
    """Three-state loader around a zero-argument resolve function."""

    def __init__(
        self,
        resolve: Callable[[], ParsingCapability],
        timeout_seconds: float | None = 30.0,
        entrypoint: str | None = None,
    ):
        self._resolve = resolve
        self._timeout = timeout_seconds
        self.entrypoint = entrypoint
        self._state = LoadState.loading()
        self._task: asyncio.Task | None = None
        self._listeners: list[LoadListener] = []

    @classmethod
    def from_entrypoint(
        cls, entrypoint: str, timeout_seconds: float | None = 30.0,
    ) -> "CapabilityLoader":
        return cls(
            partial(resolve_entrypoint, entrypoint), timeout_seconds, entrypoint,
        )

    @property
    def state(self) -> LoadState:
        return self._state

    def subscribe(self, listener: LoadListener) -> Callable[[], None]:
        """Register a transition listener. Returns a callable that unsubscribes it."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def start(self) -> asyncio.Task:
        """Kick off acquisition without waiting for it. Idempotent."""
        if self._task is None:
            logger.info(
                "Acquiring parser capability",
                extra={"entrypoint": self.entrypoint,
                       "load_status": LoadStatus.LOADING.value},
            )
            self._task = asyncio.ensure_future(self._acquire_once())
        return self._task

    async def acquire(self) -> LoadState:
        """Wait for acquisition to settle and return the final LoadState."""
        return await asyncio.shield(self.start())

    def require_capability(self) -> ParsingCapability:
        """Return the capability, or raise why a session cannot be built yet."""
        if self._state.is_ready:
            return self._state.capability
        if self._state.is_failed:
            raise self._state.error
        raise CapabilityNotReadyError()

    async def _acquire_once(self) -> LoadState:
        try:
            capability = await asyncio.wait_for(
                asyncio.to_thread(self._resolve), self._timeout,
            )
            if not callable(capability):
                raise TypeError(f"resolved {type(capability).__name__} is not callable")
        except asyncio.TimeoutError:
            self._settle(LoadState.failed(CapabilityLoadError(
                f"timed out after {self._timeout}s", self.entrypoint,
            )))
        except Exception as exc:
            self._settle(LoadState.failed(CapabilityLoadError(
                f"{type(exc).__name__}: {exc}", self.entrypoint,
            )))
        else:
            self._settle(LoadState.ready(capability))
        return self._state

    def _settle(self, state: LoadState) -> None:
        self._state = state
        if state.is_ready:
            logger.info(
                "Parser capability ready: %s", capability_name(state.capability),
                extra={"entrypoint": self.entrypoint,
                       "load_status": state.status.value},
            )
        else:
            logger.error(
                "Parser capability failed to load: %s", state.error.message,
                extra={"entrypoint": self.entrypoint,
                       "load_status": state.status.value,
                       "error_code": state.error.code},
            )
        for listener in list(self._listeners):
            listener(state)


# ─── Process singleton ──────────────────────────────────────────

capability_loader: CapabilityLoader | None = None


def init_capability_loader(
    entrypoint: str, timeout_seconds: float | None = 30.0,
) -> CapabilityLoader:
    """Create the process-wide loader and start acquisition. Called from lifespan."""
    global capability_loader
    if capability_loader is None:
        capability_loader = CapabilityLoader.from_entrypoint(
            entrypoint, timeout_seconds,
        )
    capability_loader.start()
    return capability_loader


def get_capability_loader() -> CapabilityLoader:
    """FastAPI dependency — the process-wide loader."""
    if capability_loader is None:
        raise CapabilityNotReadyError()
    return capability_loader
