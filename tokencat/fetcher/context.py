"""
Cancellation and deadlines for remote calls.

A :class:`Context` is created by the caller and passed down to every
remote call made on its behalf. Once the context is cancelled or its
deadline has passed, pending and future calls scoped to it fail
with :class:`Cancelled` or :class:`DeadlineExceeded`.

Example:
    ::

        from tokencat.fetcher.context import Context

        ctx = Context(timeout=5)
        token = service.resolve(ctx, "0x6B175474E89094C44Da98b954EedeAC495271d0F")

        # Derived contexts inherit the parent's deadline and cancellation
        child = ctx.with_timeout(1)
        ctx.cancel()
        assert child.done()
"""

from __future__ import annotations
import threading
import time
from concurrent.futures import Future, TimeoutError as FutureTimeoutError
from typing import Any

#: How often (in seconds) :meth:`Context.wait` checks for cancellation
POLL_INTERVAL = 0.05


class ContextError(Exception):
    """
    Base class for context errors
    """


class Cancelled(ContextError):
    """
    The context was cancelled
    """


class DeadlineExceeded(ContextError):
    """
    The context deadline has passed
    """


class Context:
    """
    Carries a deadline and a cancellation signal.

    Args:
        timeout: seconds from now until the deadline, ``None`` for no deadline
        parent: parent context. The child is done as soon as the parent is done,
                and its deadline is never later than the parent's.
    """

    _parent: Context | None
    _deadline: float | None
    _cancelled: threading.Event

    def __init__(self, timeout: float | None = None, parent: Context | None = None):
        self._parent = parent
        self._cancelled = threading.Event()
        deadline = None
        if timeout is not None:
            deadline = time.monotonic() + timeout
        if parent is not None and parent.deadline is not None:
            if deadline is None or parent.deadline < deadline:
                deadline = parent.deadline
        self._deadline = deadline

    @staticmethod
    def background() -> Context:
        """
        A context that is never done unless cancelled explicitly
        """
        return Context()

    def with_timeout(self, timeout: float) -> Context:
        """
        Derive a child context with a deadline ``timeout`` seconds from now
        """
        return Context(timeout=timeout, parent=self)

    @property
    def deadline(self) -> float | None:
        """
        Deadline on the :func:`time.monotonic` clock, ``None`` if not set
        """
        return self._deadline

    def cancel(self):
        """
        Cancel the context and all contexts derived from it
        """
        self._cancelled.set()

    def err(self) -> ContextError | None:
        """
        Error describing why the context is done, ``None`` if it's not done
        """
        if self._cancelled.is_set():
            return Cancelled("context cancelled")
        if self._deadline is not None and time.monotonic() >= self._deadline:
            return DeadlineExceeded("context deadline exceeded")
        if self._parent is not None:
            return self._parent.err()
        return None

    def done(self) -> bool:
        return self.err() is not None

    def remaining(self) -> float | None:
        """
        Seconds left until the deadline, ``None`` if there's no deadline
        """
        if self._deadline is None:
            return None
        return max(0.0, self._deadline - time.monotonic())

    def raise_if_done(self):
        """
        Raise :class:`Cancelled` or :class:`DeadlineExceeded` if the context is done
        """
        err = self.err()
        if not err is None:
            raise err

    def wait(self, future: Future) -> Any:
        """
        Wait for the ``future`` result while the context is not done.

        Args:
            future: a future running the call

        Returns:
            Result of the future

        Raises:
            Cancelled: the context was cancelled before the result arrived
            DeadlineExceeded: the deadline passed before the result arrived
        """
        while True:
            err = self.err()
            if not err is None:
                future.cancel()
                raise err
            timeout = POLL_INTERVAL
            remaining = self.remaining()
            if not remaining is None:
                timeout = min(timeout, remaining)
            try:
                return future.result(timeout=timeout)
            except FutureTimeoutError:
                # the call itself may have raised a TimeoutError,
                # or finished right after the wait timed out
                if future.done():
                    return future.result()

    def __repr__(self):
        return f"Context(deadline={self._deadline}, done={self.done()})"
