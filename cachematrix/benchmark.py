import logging
import time

import numpy as np

from cachematrix.cache_cell import make_cache_cell
from cachematrix.resolve import resolve_inverse

# Pure-Python backends are O(n^3) interpreted loops
NAIVE_BACKENDS = ("lu", "gauss_jordan")
NAIVE_MAX_N = 100


def benchmark(n=100, trials=3, backends=("numpy", "lu_numpy", "lu", "gauss_jordan")):
    A = np.random.rand(n, n)
    A += n * np.eye(n)  # improve conditioning

    # Hits log at INFO on every call
    resolve_logger = logging.getLogger("cachematrix.resolve")
    previous_level = resolve_logger.level
    resolve_logger.setLevel(logging.WARNING)

    results = {}
    try:
        for backend in backends:
            if backend in NAIVE_BACKENDS and n > NAIVE_MAX_N:
                continue

            # Cold: fresh cell each trial, so every resolve is a miss
            t0 = time.perf_counter()
            for _ in range(trials):
                resolve_inverse(make_cache_cell(A), backend=backend)
            t_miss = (time.perf_counter() - t0) / trials

            # Warm: one miss to populate, then timed hits
            cell = make_cache_cell(A)
            resolve_inverse(cell, backend=backend)
            t0 = time.perf_counter()
            for _ in range(trials):
                resolve_inverse(cell, backend=backend)
            t_hit = (time.perf_counter() - t0) / trials

            results[backend] = (t_miss, t_hit)
    finally:
        resolve_logger.setLevel(previous_level)

    print(f"Matrix size: {n}x{n}")
    for backend, (t_miss, t_hit) in results.items():
        print(f"{backend:<13} miss: {t_miss:.6f} s  hit: {t_hit:.9f} s  speedup: {t_miss/max(t_hit, 1e-12):.0f}x")
    return results


if __name__ == "__main__":
    for n in [50, 100, 200, 500]:
        benchmark(n)
        print("-" * 40)
