import os
import time

import numpy as np

from .handle import CachedMatrix, cache_solve


def time_call(fn, *args, **kwargs):
    t0 = time.perf_counter()
    fn(*args, **kwargs)
    return time.perf_counter() - t0


def benchmark(n=1000, runs=10, method="numpy", seed=42, **options):
    """
    Time a cold (cache miss) and a warm (cache hit) cache_solve call,
    then reset the cache with set() and repeat.

    Returns:
        list of (run, miss_seconds, hit_seconds)
    """
    np.random.seed(seed)
    A = np.random.randn(n, n)
    A += np.eye(n) * n * 0.1  # improve conditioning

    cm = CachedMatrix(A)
    results = []
    for run in range(runs + 1):
        if run > 0:
            cm.set(A)
        t_miss = time_call(cache_solve, cm, method=method, **options)
        t_hit = time_call(cache_solve, cm, method=method, **options)
        results.append((run, t_miss, t_hit))

    print(f"Matrix size: {n}x{n} (method={method})")
    print(f"{'Run':>4} | {'Miss (ms)':>12} | {'Hit (ms)':>12}")
    print("-" * 34)
    for run, t_miss, t_hit in results:
        print(f"{run:4d} | {t_miss*1000:12.3f} | {t_hit*1000:12.6f}")

    return results


def plot_results(sizes, miss_times, hit_times, path="plots/cache_benchmark.png"):
    import matplotlib.pyplot as plt

    os.makedirs(os.path.dirname(path) or ".", exist_ok=True)
    plt.figure()
    plt.plot(sizes, miss_times, label="Cache miss (invert)")
    plt.plot(sizes, hit_times, label="Cache hit")
    plt.xlabel("Matrix size (N x N)")
    plt.ylabel("Time per cache_solve (ms)")
    plt.yscale("log")
    plt.title("Cached Matrix Inversion")
    plt.legend()
    plt.grid(True)
    plt.tight_layout()
    plt.savefig(path)
    plt.close()
    print(f"\nPlot saved to {path}")
    return path


if __name__ == "__main__":
    sizes = [50, 100, 200, 500, 1000]
    miss_times, hit_times = [], []
    for n in sizes:
        results = benchmark(n, runs=3)
        miss_times.append(np.mean([r[1] for r in results]) * 1000)
        hit_times.append(np.mean([r[2] for r in results]) * 1000)
        print("-" * 40)

    plot_results(sizes, miss_times, hit_times)
