import threading
import time

import pytest

from cfkit.tasks import TaskQueue


def test_immediate_and_delayed_tasks_run():
    order = []
    done = threading.Event()

    def task1():
        order.append("task1")

    def delay_task1():
        order.append("delayed")
        done.set()

    with TaskQueue("wtf", 0) as tq:
        tq.post_delayed(5, delay_task1)
        tq.post(task1)
        tq.post(task1)
        assert done.wait(2)
    assert order == ["task1", "task1", "delayed"]
    with pytest.raises(RuntimeError):
        tq.post(task1)


def test_tasks_run_in_post_order_with_args():
    results = []
    done = threading.Event()
    with TaskQueue() as tq:
        for i in range(10):
            tq.post(results.append, i)
        tq.post(done.set)
        assert done.wait(2)
    assert results == list(range(10))


def test_delay_is_respected():
    done = threading.Event()
    stamps = []
    with TaskQueue() as tq:
        start = time.monotonic()
        tq.post_delayed(50, lambda: (stamps.append(time.monotonic()), done.set()))
        assert done.wait(2)
    assert stamps[0] - start >= 0.045


def test_delayed_tasks_run_by_due_time():
    order = []
    done = threading.Event()
    with TaskQueue() as tq:
        tq.post_delayed(60, lambda: (order.append("late"), done.set()))
        tq.post_delayed(10, order.append, "early")
        assert done.wait(2)
    assert order == ["early", "late"]


def test_worker_thread_carries_name():
    names = []
    done = threading.Event()
    with TaskQueue("worker-x", 1) as tq:
        tq.post(lambda: (names.append(threading.current_thread().name), done.set()))
        assert done.wait(2)
    assert names == ["worker-x"]


def test_failing_task_does_not_stop_queue():
    done = threading.Event()

    def boom():
        raise ValueError("boom")

    with TaskQueue() as tq:
        tq.post(boom)
        tq.post(done.set)
        assert done.wait(2)


def test_close_drops_pending_delayed_tasks():
    ran = []
    tq = TaskQueue()
    tq.post_delayed(10_000, ran.append, 1)
    start = time.monotonic()
    tq.close()
    assert time.monotonic() - start < 2
    assert ran == []


def test_post_after_close_raises():
    tq = TaskQueue()
    tq.close()
    with pytest.raises(RuntimeError):
        tq.post(print)
    with pytest.raises(RuntimeError):
        tq.post_delayed(1, print)