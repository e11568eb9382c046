import threading
import time
from concurrent.futures import Future, ThreadPoolExecutor
import pytest

from tokencat.fetcher.context import Cancelled, Context, DeadlineExceeded


def test_background_context():
    ctx = Context.background()
    assert not ctx.done()
    assert ctx.err() is None
    assert ctx.deadline is None
    assert ctx.remaining() is None
    ctx.raise_if_done()


def test_cancel():
    ctx = Context()
    ctx.cancel()
    assert ctx.done()
    assert isinstance(ctx.err(), Cancelled)
    with pytest.raises(Cancelled):
        ctx.raise_if_done()


def test_deadline():
    ctx = Context(timeout=0)
    assert isinstance(ctx.err(), DeadlineExceeded)
    assert ctx.remaining() == 0.0
    ctx = Context(timeout=60)
    assert not ctx.done()
    assert 0 < ctx.remaining() <= 60


def test_child_context():
    parent = Context(timeout=60)
    child = parent.with_timeout(120)
    assert child.deadline == parent.deadline
    shorter = parent.with_timeout(1)
    assert shorter.deadline < parent.deadline
    parent.cancel()
    assert isinstance(child.err(), Cancelled)
    assert isinstance(shorter.err(), Cancelled)


def test_child_cancel_does_not_cancel_parent():
    parent = Context()
    child = parent.with_timeout(60)
    child.cancel()
    assert child.done()
    assert not parent.done()


def test_wait_result():
    with ThreadPoolExecutor(max_workers=1) as executor:
        assert Context().wait(executor.submit(lambda: 42)) == 42


def test_wait_error():
    def fail():
        raise ValueError("execution reverted")

    with ThreadPoolExecutor(max_workers=1) as executor:
        with pytest.raises(ValueError):
            Context().wait(executor.submit(fail))


def test_wait_timeout_error_from_call():
    def fail():
        raise TimeoutError("read timed out")

    with ThreadPoolExecutor(max_workers=1) as executor:
        with pytest.raises(TimeoutError):
            Context(timeout=5).wait(executor.submit(fail))


def test_wait_deadline():
    ctx = Context(timeout=0.1)
    started = time.monotonic()
    with pytest.raises(DeadlineExceeded):
        ctx.wait(Future())
    assert time.monotonic() - started < 2


def test_wait_cancel():
    ctx = Context()
    timer = threading.Timer(0.1, ctx.cancel)
    timer.start()
    try:
        with pytest.raises(Cancelled):
            ctx.wait(Future())
    finally:
        timer.cancel()
