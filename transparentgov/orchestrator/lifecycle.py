"""Request lifecycle manager — one independent generation slot per key."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Callable

from transparentgov.backends.base import GenerationBackend, GenerationError
from transparentgov.models.audit import AuditRecord
from transparentgov.models.catalog import Catalog
from transparentgov.models.insight import (
    IDLE,
    LOADING,
    InsightState,
    Intent,
    LifecycleKey,
    Scope,
    ScopeKind,
)
from transparentgov.orchestrator.prompts import build_prompt

logger = logging.getLogger(__name__)

Listener = Callable[[LifecycleKey, InsightState], None]


class RequestLifecycleManager:
    """Tracks Idle → Loading → Succeeded | Failed for every (intent, scope).

    All mutation happens on the event loop thread.  Requests for different
    keys run concurrently and never affect each other.  Overlapping requests
    for the same key are not cancelled: by default whichever completes last
    owns the slot.  With ``discard_stale_results`` only the most recent
    submit for a key may write its result.
    """

    def __init__(
        self,
        catalog: Catalog,
        backend: GenerationBackend,
        discard_stale_results: bool = False,
    ) -> None:
        self.catalog = catalog
        self.backend = backend
        self.discard_stale_results = discard_stale_results
        self._states: dict[LifecycleKey, InsightState] = {}
        self._sequence: dict[LifecycleKey, int] = {}
        self._tasks: set[asyncio.Task] = set()
        self._listeners: list[Listener] = []

    # -- Observation --

    def state(self, key: LifecycleKey) -> InsightState:
        return self._states.get(key, IDLE)

    def read(self, intent: Intent, scope: Scope) -> InsightState:
        return self.state(LifecycleKey(intent, scope))

    def pending(self) -> set[LifecycleKey]:
        return {key for key, state in self._states.items() if state.is_loading}

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Register a listener for every state transition.

        Returns a callable that removes the listener again.
        """
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    # -- Triggers --

    def trigger(
        self, intent: Intent, scope: Scope, user_text: str | None = None
    ) -> asyncio.Task | None:
        """Start a generation for (intent, scope).

        Returns ``None`` without touching state when the intent needs free
        text and none was given.
        """
        if intent.requires_user_text and not (user_text and user_text.strip()):
            logger.debug("Ignoring %s trigger without user text", intent.value)
            return None

        records = self._resolve(intent, scope)
        prompt = build_prompt(intent, records, user_text)
        return self.submit(LifecycleKey(intent, scope), prompt)

    def submit(self, key: LifecycleKey, prompt: str) -> asyncio.Task:
        """Mark ``key`` as loading and schedule the generation call."""
        loop = asyncio.get_running_loop()
        sequence = self._sequence.get(key, 0) + 1
        self._sequence[key] = sequence
        self._set(key, LOADING)

        logger.info(
            "Dispatching %s (%s) to %s",
            key.intent.value, key.scope.kind.value, self.backend.name,
        )
        task = loop.create_task(self._run(key, prompt, sequence))
        self._tasks.add(task)
        task.add_done_callback(self._tasks.discard)
        return task

    async def wait_idle(self) -> None:
        """Wait for every in-flight request to settle."""
        while self._tasks:
            await asyncio.gather(*list(self._tasks))

    # -- Internals --

    def _resolve(self, intent: Intent, scope: Scope) -> list[AuditRecord]:
        expected = {
            Intent.TREND_ANALYSIS: ScopeKind.ALL,
            Intent.COMPARISON: ScopeKind.PAIR,
            Intent.POLICY_RISK: ScopeKind.NONE,
        }.get(intent, ScopeKind.RECORD)
        if scope.kind is not expected:
            raise ValueError(
                f"{intent.value} requires a {expected.value} scope, got {scope.kind.value}"
            )
        if scope.kind is ScopeKind.ALL:
            return self.catalog.flagged()
        return [self.catalog.get(record_id) for record_id in scope.record_ids]

    async def _run(self, key: LifecycleKey, prompt: str, sequence: int) -> None:
        try:
            text = await self.backend.generate(prompt)
            outcome = InsightState.succeeded(text)
        except GenerationError as exc:
            logger.warning("%s failed: %s", key.intent.value, exc)
            outcome = InsightState.failed(str(exc))
        except Exception as exc:
            logger.exception("Unexpected error generating %s", key.intent.value)
            outcome = InsightState.failed(
                f"An error occurred while contacting the AI service: {exc}"
            )

        if self.discard_stale_results and self._sequence.get(key) != sequence:
            logger.warning(
                "Discarding stale %s result (request %d, latest %d)",
                key.intent.value, sequence, self._sequence.get(key),
            )
            return

        logger.info("%s finished: %s", key.intent.value, outcome.status.value)
        self._set(key, outcome)

    def _set(self, key: LifecycleKey, state: InsightState) -> None:
        self._states[key] = state
        for listener in list(self._listeners):
            try:
                listener(key, state)
            except Exception:
                logger.exception("Insight listener failed for %s", key.intent.value)
