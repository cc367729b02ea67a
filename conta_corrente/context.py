"""Request context threaded from callers down to the stores."""

from __future__ import annotations

import threading
import time
import uuid
from dataclasses import dataclass, field

from conta_corrente.exceptions import ContextDoneError


@dataclass
class Context:
    """Cancellation signal, optional deadline and request id for one call.

    The service never sets a deadline of its own; it only forwards the
    context it receives. Stores check it before doing I/O.

    Parameters
    ----------
    request_id : str
        Identifier used to correlate log records.
    deadline : float | None
        Absolute ``time.monotonic()`` value after which the call is done.
    """

    request_id: str = field(default_factory=lambda: uuid.uuid4().hex)
    deadline: float | None = None
    _cancelled: threading.Event = field(default_factory=threading.Event, repr=False)

    @classmethod
    def background(cls) -> Context:
        """Context without deadline."""
        return cls()

    @classmethod
    def with_timeout(cls, seconds: float, request_id: str | None = None) -> Context:
        """Context whose deadline is ``seconds`` from now."""
        ctx = cls(deadline=time.monotonic() + seconds)
        if request_id:
            ctx.request_id = request_id
        return ctx

    def cancel(self) -> None:
        self._cancelled.set()

    @property
    def cancelled(self) -> bool:
        return self._cancelled.is_set()

    def remaining(self) -> float | None:
        """Seconds left before the deadline, or None when there is none."""
        if self.deadline is None:
            return None
        return max(0.0, self.deadline - time.monotonic())

    def raise_if_done(self) -> None:
        """Raise ContextDoneError if cancelled or past the deadline."""
        if self.cancelled:
            raise ContextDoneError(f"context {self.request_id} cancelled")
        if self.deadline is not None and time.monotonic() >= self.deadline:
            raise ContextDoneError(f"context {self.request_id} deadline exceeded")

    def log_fields(self) -> dict[str, object]:
        """Fields attached to log records emitted for this context."""
        fields: dict[str, object] = {"request_id": self.request_id}
        remaining = self.remaining()
        if remaining is not None:
            fields["deadline_remaining_s"] = round(remaining, 3)
        return fields
