import random
import threading

import pytest

from algolab.counters import (
    FenceCounters,
    RedirectDataPool,
    SNodeRedirectData,
    lookup_list,
    lookup_set,
)


def _filled():
    return SNodeRedirectData(
        node_key="1", cover="1", view="1", region="1", s_node_name="1", kind=1, value=1
    )


def test_concurrent_increments():
    counters = FenceCounters()
    workers = 20
    per_worker = 500

    def random_worker(seed):
        rng = random.Random(seed)
        for _ in range(per_worker):
            counters.increment(rng.randrange(3000) % 10)

    def fixed_worker(n):
        for _ in range(per_worker):
            counters.increment(n)

    threads = [threading.Thread(target=random_worker, args=(i,)) for i in range(workers)]
    threads += [threading.Thread(target=fixed_worker, args=(100 + i,)) for i in range(workers)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    assert all(counters.count(100 + i) == per_worker for i in range(workers))
    total = sum(counters.count(n) for n in range(10))
    assert total == workers * per_worker


def test_unseen_count_is_zero():
    counters = FenceCounters()
    assert counters.count(5) == 0
    assert counters.increment(5) == 1
    assert counters.count(5) == 1
    assert len(counters) == 1


def test_lookups_agree():
    for tag in ("100", "101", "102", "103", "104"):
        assert lookup_list(tag) == tag
        assert lookup_set(tag) == tag


def test_lookup_missing_raises():
    with pytest.raises(KeyError):
        lookup_list("105")
    with pytest.raises(KeyError):
        lookup_set("99")


def test_reset_clears_fields():
    data = _filled()
    data.reset()
    assert data == SNodeRedirectData()


def test_pool_put_reset_reuses_object():
    pool = RedirectDataPool()
    first = pool.get()
    assert first == SNodeRedirectData()
    data = _filled()
    pool.put_reset(data)
    again = pool.get()
    assert again is data
    assert again == SNodeRedirectData()


def test_pool_put_stores_fresh_record():
    pool = RedirectDataPool()
    data = _filled()
    pool.put(data)
    assert len(pool) == 1
    got = pool.get()
    assert got == SNodeRedirectData()
    assert data.node_key == "1"
    assert len(pool) == 0