"""Set benchmark: StandardSet vs ThreadsafeSet on the single-thread hot path.

Measures what the read-write lock costs when nobody contends for it:
construction from a 100-element sample, add, and contains.

Marked with @pytest.mark.benchmark for selective runs.
"""
from __future__ import annotations

import random
import time

import pytest

from ordset.sets.factory import new, new_from_slice

SAMPLE_POOL = 1_000_000
N_OPS = 20_000


@pytest.fixture(scope="module")
def numbers() -> list[int]:
    rng = random.Random(42)
    return [rng.getrandbits(62) for _ in range(SAMPLE_POOL // 10)]


def _time(fn) -> float:
    start = time.perf_counter()
    fn()
    return time.perf_counter() - start


@pytest.mark.benchmark
@pytest.mark.parametrize("thread_safe", [False, True], ids=["standard", "threadsafe"])
def test_new_from_slice_throughput(numbers, thread_safe):
    sample = numbers[:100]

    def run():
        for _ in range(N_OPS // 10):
            new_from_slice(sample, thread_safe)

    elapsed = _time(run)
    print(f"\nnew_from_slice ({'threadsafe' if thread_safe else 'standard'}): "
          f"{(N_OPS // 10) / elapsed:,.0f} sets/sec")
    assert new_from_slice(sample, thread_safe).size() == len(set(sample))


@pytest.mark.benchmark
def test_lock_overhead_on_add_and_contains(numbers):
    """Uncontended locking should cost something, but the results must match."""
    values = numbers[:N_OPS]
    standard = new()
    threadsafe = new(thread_safe=True)

    def add_all(s):
        for v in values:
            s.add(v)

    def probe_all(s):
        hits = 0
        for v in values:
            if s.contains(v):
                hits += 1
        return hits

    std_add = _time(lambda: add_all(standard))
    ts_add = _time(lambda: add_all(threadsafe))
    std_probe = _time(lambda: probe_all(standard))
    ts_probe = _time(lambda: probe_all(threadsafe))

    print(f"\nadd:      standard {std_add*1000:.1f} ms, threadsafe {ts_add*1000:.1f} ms")
    print(f"contains: standard {std_probe*1000:.1f} ms, threadsafe {ts_probe*1000:.1f} ms")

    assert standard.slice() == threadsafe.slice()
    assert probe_all(standard) == probe_all(threadsafe) == len(values)
    # Each locked call enters two context managers; the bare set cannot lose
    assert ts_add > std_add, (
        f"ThreadsafeSet add ({ts_add*1000:.1f} ms) beat StandardSet ({std_add*1000:.1f} ms)"
    )
