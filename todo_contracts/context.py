"""Per-call context carrying a cancellation flag and an optional deadline.

Every store and service operation accepts ``ctx`` and hands it down to the
next layer. Nothing in this package acts on it yet.
"""

from __future__ import annotations

import threading
from dataclasses import dataclass, field, replace
from datetime import datetime, timedelta
from typing import Optional


@dataclass(frozen=True)
class Context:
    deadline: Optional[datetime] = None
    _cancelled: threading.Event = field(
        default_factory=threading.Event, repr=False, compare=False
    )

    def cancel(self) -> None:
        self._cancelled.set()

    @property
    def cancelled(self) -> bool:
        return self._cancelled.is_set()

    @property
    def expired(self) -> bool:
        return self.deadline is not None and datetime.now() >= self.deadline

    def done(self) -> bool:
        """True once the context is cancelled or past its deadline."""
        return self.cancelled or self.expired

    def with_timeout(self, seconds: float) -> "Context":
        """Derive a context sharing this one's cancellation, with a tighter deadline."""
        deadline = datetime.now() + timedelta(seconds=seconds)
        if self.deadline is not None and self.deadline < deadline:
            deadline = self.deadline
        return replace(self, deadline=deadline)


def background() -> Context:
    """Return a fresh context that is never cancelled and has no deadline."""
    return Context()
