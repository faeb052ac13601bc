import threading

import pytest

from graphrender.waitgroup import WaitGroup


def test_wait_returns_immediately_when_empty():
    wg = WaitGroup()
    assert wg.wait(timeout=0.1) is True
    assert wg.count == 0


def test_wait_times_out_while_tasks_pending():
    wg = WaitGroup()
    wg.add(1)
    assert wg.wait(timeout=0.05) is False
    assert wg.count == 1


def test_done_from_threads_releases_waiter():
    wg = WaitGroup()
    wg.add(5)
    threads = [threading.Thread(target=wg.done) for _ in range(5)]
    for thread in threads:
        thread.start()
    assert wg.wait(timeout=5) is True
    for thread in threads:
        thread.join()
    assert wg.count == 0


def test_waiter_in_other_thread_is_woken():
    wg = WaitGroup()
    wg.add(2)
    results = []

    def wait_in_thread():
        results.append(wg.wait(timeout=5))

    waiter = threading.Thread(target=wait_in_thread)
    waiter.start()
    wg.done()
    assert wg.count == 1
    wg.done()
    waiter.join(timeout=5)
    assert wg.count == 0
    assert wg.wait(timeout=0.1) is True
    assert results == [True]


def test_done_below_zero_raises():
    wg = WaitGroup()
    with pytest.raises(ValueError):
        wg.done()
    assert wg.count == 0


def test_negative_add_is_checked():
    wg = WaitGroup()
    wg.add(2)
    wg.add(-1)
    assert wg.count == 1
    with pytest.raises(ValueError):
        wg.add(-2)
    assert wg.count == 1