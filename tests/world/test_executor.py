"""Tests for WorldExecutor."""

import threading

import pytest

from chestshops.world import WorldExecutor


@pytest.fixture
def executor():
    ex = WorldExecutor("test")
    yield ex
    ex.close()


def test_starts_lazily(executor):
    assert not executor.running
    assert executor.run(lambda: 2 + 2) == 4
    assert executor.running


def test_runs_on_dedicated_thread(executor):
    name = executor.run(lambda: threading.current_thread().name)
    assert name == "world-test"
    assert not executor.in_world_thread()


def test_exceptions_propagate(executor):
    def fail():
        raise KeyError("missing")

    with pytest.raises(KeyError):
        executor.run(fail)


def test_nested_run_executes_inline(executor):
    def outer():
        return executor.run(lambda: executor.in_world_thread())

    assert executor.run(outer, timeout=5) is True


def test_calls_are_serialized(executor):
    seen = []
    futures = [executor.submit(seen.append, i) for i in range(50)]
    for future in futures:
        future.result(timeout=5)
    assert seen == list(range(50))


def test_close_is_idempotent(executor):
    executor.run(lambda: None)
    executor.close()
    executor.close()
    assert not executor.running
