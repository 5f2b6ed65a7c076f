"""Validation context: keyed values plus a cooperative cancellation signal.

A ``Context`` travels unchanged through every level of a validation call so
that context-aware rules (``WithContext``, ``When`` and user ``ContextRule``
subclasses) can read request-scoped data.

INVARIANT: Contexts are immutable. ``with_value`` / ``with_cancel`` /
``with_timeout`` return new instances; the engine never derives or mutates
contexts itself. Cancelling a parent cancels every derived child, never the
other way round.
"""

from __future__ import annotations

import threading
import time
from typing import Any

from rulebook.domain.errors import ValidationCancelled


class Context:
    """Immutable carrier threaded through a validation call."""

    __slots__ = ("_values", "_events", "_deadline")

    def __init__(
        self,
        values: dict[Any, Any] | None = None,
        *,
        events: tuple[threading.Event, ...] = (),
        deadline: float | None = None,
    ) -> None:
        self._values: dict[Any, Any] = dict(values or {})
        self._events = events
        self._deadline = deadline

    @classmethod
    def background(cls) -> Context:
        """An empty context that is never cancelled."""
        return cls()

    def value(self, key: Any, default: Any = None) -> Any:
        """Return the value stored under *key*, or *default*."""
        return self._values.get(key, default)

    def with_value(self, key: Any, value: Any) -> Context:
        """Derive a context that also carries ``key -> value``."""
        values = dict(self._values)
        values[key] = value
        return Context(values, events=self._events, deadline=self._deadline)

    def with_cancel(self) -> tuple[Context, CancelFunc]:
        """Derive a cancellable context.

        Returns the child context and a function that cancels it (and any
        context later derived from it).
        """
        event = threading.Event()
        child = Context(self._values, events=(*self._events, event), deadline=self._deadline)
        return child, CancelFunc(event)

    def with_timeout(self, seconds: float) -> Context:
        """Derive a context whose deadline is *seconds* from now.

        An earlier deadline inherited from the parent wins.
        """
        deadline = time.monotonic() + seconds
        if self._deadline is not None:
            deadline = min(deadline, self._deadline)
        return Context(self._values, events=self._events, deadline=deadline)

    @property
    def deadline(self) -> float | None:
        """Monotonic-clock deadline, or None."""
        return self._deadline

    @property
    def cancelled(self) -> bool:
        """True once cancelled or past the deadline."""
        return self._reason() is not None

    def raise_if_cancelled(self) -> None:
        """Raise :class:`ValidationCancelled` when the context is done."""
        reason = self._reason()
        if reason is not None:
            raise ValidationCancelled(reason)

    def _reason(self) -> str | None:
        if any(event.is_set() for event in self._events):
            return "context cancelled"
        if self._deadline is not None and time.monotonic() >= self._deadline:
            return "context deadline exceeded"
        return None

    def __repr__(self) -> str:
        return f"Context(keys={list(self._values)!r}, cancelled={self.cancelled})"


class CancelFunc:
    """Callable returned by :meth:`Context.with_cancel`."""

    __slots__ = ("_event",)

    def __init__(self, event: threading.Event) -> None:
        self._event = event

    def __call__(self) -> None:
        self._event.set()
