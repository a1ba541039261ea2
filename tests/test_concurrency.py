import threading

from rc5.utils import arithmetic, constants
from rc5.utils.schedule import (derive_schedule)

THREADS = 16


def run_in_threads(fn):
    barrier = threading.Barrier(THREADS)
    results = [None] * THREADS

    def worker(idx):
        barrier.wait()
        results[idx] = fn()

    threads = [threading.Thread(target=worker, args=(i,)) for i in range(THREADS)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()
    return results


def test_word_size_first_population_is_shared(monkeypatch):
    monkeypatch.setattr(arithmetic, "_word_sizes", {})
    results = run_in_threads(lambda: arithmetic.word_size(128))
    assert all(ws is results[0] for ws in results)
    assert results[0].bits == 128


def test_magic_constants_first_population_is_shared(monkeypatch):
    monkeypatch.setattr(constants, "_derived", {})
    results = run_in_threads(lambda: constants.magic_constants(128))
    assert all(pq is results[0] for pq in results)
    assert results[0] == (0xB7E151628AED2A6ABF7158809CF4F3C7, 0x9E3779B97F4A7C15F39CC0605CEDC835)


def test_concurrent_schedules_agree():
    key = bytes(range(16))
    results = run_in_threads(lambda: derive_schedule(key, 64, 20))
    assert all(S == results[0] for S in results)
